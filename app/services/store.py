"""Acceso explícito a la base de datos para los casos de uso.

`Store` envuelve la `Session` de la petición: las consultas de existencia,
de conflicto y las uniones que necesita la proyección viven aquí, y cada
caso de uso que valida y luego escribe lo hace dentro de `transaction()`.
"""

from contextlib import contextmanager
from datetime import date, datetime, time
from typing import Iterator, Optional, Type, TypeVar

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import InternalError, ServiceError
from app.core.logging import get_logger
from app.models import (
    Certificado,
    Cita,
    DetalleInspeccion,
    Estacion,
    EstadoCertificado,
    EstadoCita,
    EstadoUsuario,
    Inspeccion,
    TipoUsuario,
    Usuario,
    Vehiculo,
)

logger = get_logger(__name__)

T = TypeVar("T")


class Store:
    def __init__(self, db: Session) -> None:
        self.db = db

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Confirma todo lo hecho en el bloque o nada.

        Los rechazos del servicio deshacen y se propagan sin cambios; los
        errores de la base se registran y se convierten en `InternalError`.
        """
        try:
            yield self.db
            self.db.commit()
        except ServiceError:
            self.db.rollback()
            raise
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("persistence_error", error=str(exc))
            raise InternalError("Error interno del servidor") from exc

    # -------- genéricos --------
    def get(self, model: Type[T], entity_id: int, *, for_update: bool = False) -> Optional[T]:
        return self.db.get(model, entity_id, with_for_update=True if for_update else None)

    def add(self, entity: T) -> T:
        self.db.add(entity)
        self.db.flush()
        return entity

    def delete(self, entity) -> None:
        self.db.delete(entity)
        self.db.flush()

    def count(self, model) -> int:
        return self.db.scalar(select(func.count()).select_from(model)) or 0

    def _exists(self, *criteria) -> bool:
        return self.db.scalar(select(func.count()).where(*criteria)) > 0

    # -------- usuarios --------
    def usuario_con_identidad(self, cedula: str, email: str, excluir_id: Optional[int] = None) -> Optional[Usuario]:
        q = select(Usuario).where(or_(Usuario.cedula == cedula, Usuario.email == email))
        if excluir_id is not None:
            q = q.where(Usuario.id != excluir_id)
        return self.db.scalars(q).first()

    def usuario_activo_por_email(self, email: str) -> Optional[Usuario]:
        q = select(Usuario).where(
            func.lower(Usuario.email) == email.lower(),
            Usuario.estado == EstadoUsuario.ACTIVO,
        )
        return self.db.scalars(q).first()

    def usuarios_activos(self) -> list[Usuario]:
        q = select(Usuario).where(Usuario.estado == EstadoUsuario.ACTIVO).order_by(Usuario.id)
        return list(self.db.scalars(q))

    def usuario_tiene_dependientes(self, usuario_id: int) -> bool:
        return self._exists(Vehiculo.propietario_id == usuario_id) or self._exists(
            Inspeccion.tecnico_id == usuario_id
        )

    def contar_usuarios(self, *, tipo: Optional[TipoUsuario] = None, solo_activos: bool = False) -> int:
        q = select(func.count()).select_from(Usuario)
        if tipo is not None:
            q = q.where(Usuario.tipo_usuario == tipo)
        if solo_activos:
            q = q.where(Usuario.estado == EstadoUsuario.ACTIVO)
        return self.db.scalar(q) or 0

    # -------- estaciones / vehículos --------
    def estaciones(self) -> list[Estacion]:
        return list(self.db.scalars(select(Estacion).order_by(Estacion.id)))

    def estacion_tiene_citas(self, estacion_id: int) -> bool:
        return self._exists(Cita.estacion_id == estacion_id)

    def vehiculo_por_placa(self, placa: str, excluir_id: Optional[int] = None) -> Optional[Vehiculo]:
        q = select(Vehiculo).where(Vehiculo.placa == placa)
        if excluir_id is not None:
            q = q.where(Vehiculo.id != excluir_id)
        return self.db.scalars(q).first()

    def vehiculo_tiene_citas(self, vehiculo_id: int) -> bool:
        return self._exists(Cita.vehiculo_id == vehiculo_id)

    def vehiculos_con_propietario(
        self,
        *,
        vehiculo_id: Optional[int] = None,
        propietario_id: Optional[int] = None,
    ) -> list[tuple[Vehiculo, Optional[Usuario]]]:
        q = select(Vehiculo, Usuario).outerjoin(Usuario, Usuario.id == Vehiculo.propietario_id)
        if vehiculo_id is not None:
            q = q.where(Vehiculo.id == vehiculo_id)
        if propietario_id is not None:
            q = q.where(Vehiculo.propietario_id == propietario_id)
        return [tuple(row) for row in self.db.execute(q.order_by(Vehiculo.id))]

    # -------- citas --------
    def cita_en_horario(
        self,
        estacion_id: int,
        fecha: date,
        hora: time,
        excluir_id: Optional[int] = None,
    ) -> Optional[Cita]:
        q = select(Cita).where(
            Cita.estacion_id == estacion_id,
            Cita.fecha_cita == fecha,
            Cita.hora_cita == hora,
            Cita.estado == EstadoCita.PROGRAMADA,
        )
        if excluir_id is not None:
            q = q.where(Cita.id != excluir_id)
        return self.db.scalars(q).first()

    def cita_tiene_inspecciones(self, cita_id: int) -> bool:
        return self._exists(Inspeccion.cita_id == cita_id)

    def contar_citas(self, *, estado: Optional[EstadoCita] = None) -> int:
        q = select(func.count()).select_from(Cita)
        if estado is not None:
            q = q.where(Cita.estado == estado)
        return self.db.scalar(q) or 0

    def citas_con_relaciones(
        self,
        *,
        cita_id: Optional[int] = None,
        vehiculo_id: Optional[int] = None,
        estacion_id: Optional[int] = None,
        fecha: Optional[date] = None,
    ) -> list[tuple[Cita, Optional[Vehiculo], Optional[Estacion]]]:
        q = (
            select(Cita, Vehiculo, Estacion)
            .outerjoin(Vehiculo, Vehiculo.id == Cita.vehiculo_id)
            .outerjoin(Estacion, Estacion.id == Cita.estacion_id)
        )
        if cita_id is not None:
            q = q.where(Cita.id == cita_id)
        if vehiculo_id is not None:
            q = q.where(Cita.vehiculo_id == vehiculo_id).order_by(Cita.fecha_cita.desc(), Cita.hora_cita.desc())
        elif estacion_id is not None:
            q = q.where(Cita.estacion_id == estacion_id).order_by(Cita.fecha_cita, Cita.hora_cita)
        else:
            q = q.order_by(Cita.id)
        if fecha is not None:
            q = q.where(Cita.fecha_cita == fecha)
        return [tuple(row) for row in self.db.execute(q)]

    # -------- inspecciones --------
    def inspeccion_de_cita(self, cita_id: int) -> Optional[Inspeccion]:
        return self.db.scalars(select(Inspeccion).where(Inspeccion.cita_id == cita_id)).first()

    def inspeccion_tiene_certificados(self, inspeccion_id: int) -> bool:
        return self._exists(Certificado.inspeccion_id == inspeccion_id)

    def inspecciones_con_relaciones(
        self,
        *,
        inspeccion_id: Optional[int] = None,
    ) -> list[tuple[Inspeccion, Optional[Usuario], Optional[Vehiculo]]]:
        q = (
            select(Inspeccion, Usuario, Vehiculo)
            .outerjoin(Usuario, Usuario.id == Inspeccion.tecnico_id)
            .outerjoin(Cita, Cita.id == Inspeccion.cita_id)
            .outerjoin(Vehiculo, Vehiculo.id == Cita.vehiculo_id)
        )
        if inspeccion_id is not None:
            q = q.where(Inspeccion.id == inspeccion_id)
        return [tuple(row) for row in self.db.execute(q.order_by(Inspeccion.id))]

    def detalles_de_inspeccion(self, inspeccion_id: int) -> list[DetalleInspeccion]:
        q = (
            select(DetalleInspeccion)
            .where(DetalleInspeccion.inspeccion_id == inspeccion_id)
            .order_by(DetalleInspeccion.id)
        )
        return list(self.db.scalars(q))

    def detalles(self) -> list[DetalleInspeccion]:
        return list(self.db.scalars(select(DetalleInspeccion).order_by(DetalleInspeccion.id)))

    def borrar_detalles_de_inspeccion(self, inspeccion_id: int) -> None:
        self.db.execute(delete(DetalleInspeccion).where(DetalleInspeccion.inspeccion_id == inspeccion_id))

    # -------- certificados --------
    def certificado_de_inspeccion(self, inspeccion_id: int) -> Optional[Certificado]:
        return self.db.scalars(select(Certificado).where(Certificado.inspeccion_id == inspeccion_id)).first()

    def certificado_por_numero(self, numero: str) -> Optional[Certificado]:
        return self.db.scalars(select(Certificado).where(Certificado.numero_certificado == numero)).first()

    def certificados(self, *, vigentes_en: Optional[datetime] = None) -> list[Certificado]:
        q = select(Certificado)
        if vigentes_en is not None:
            q = q.where(
                Certificado.fecha_vencimiento > vigentes_en,
                Certificado.estado == EstadoCertificado.VALIDO,
            )
        return list(self.db.scalars(q.order_by(Certificado.id)))
