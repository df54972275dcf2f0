from datetime import date
from typing import Optional

from sqlalchemy.exc import IntegrityError

from app.core.errors import ConflictError, NotFoundError
from app.core.logging import get_logger
from app.models import Cita, Estacion, EstadoCita, Vehiculo
from app.schemas.cita import CitaCreate, CitaRead, CitaUpdate
from app.services import rules
from app.services.projection import cita_a_respuesta
from app.services.rules import Borrado
from app.services.store import Store

logger = get_logger(__name__)


def listar_citas(
    store: Store,
    *,
    vehiculo_id: Optional[int] = None,
    estacion_id: Optional[int] = None,
    fecha: Optional[date] = None,
) -> list[CitaRead]:
    filas = store.citas_con_relaciones(vehiculo_id=vehiculo_id, estacion_id=estacion_id, fecha=fecha)
    return [cita_a_respuesta(cita, vehiculo, estacion) for cita, vehiculo, estacion in filas]


def obtener_cita(store: Store, cita_id: int) -> CitaRead:
    filas = store.citas_con_relaciones(cita_id=cita_id)
    if not filas:
        raise NotFoundError("Cita no encontrada")
    return cita_a_respuesta(*filas[0])


def _guardar(store: Store, cita: Cita) -> Cita:
    try:
        return store.add(cita)
    except IntegrityError as exc:
        # Otra petición tomó el mismo horario entre la consulta y la escritura.
        raise ConflictError(rules.MENSAJE_HORARIO_OCUPADO) from exc


def crear_cita(store: Store, payload: CitaCreate) -> Cita:
    with store.transaction():
        rules.require(store.get(Vehiculo, payload.vehiculo_id), "El vehículo especificado no existe")
        # Bloquear la estación serializa las reservas sobre sus horarios.
        rules.require(
            store.get(Estacion, payload.estacion_id, for_update=True),
            "La estación especificada no existe",
        )
        hora = rules.parse_hora(payload.hora_cita)
        rules.validar_horario_libre(store.cita_en_horario(payload.estacion_id, payload.fecha_cita, hora))

        cita = _guardar(
            store,
            Cita(
                vehiculo_id=payload.vehiculo_id,
                estacion_id=payload.estacion_id,
                fecha_cita=payload.fecha_cita,
                hora_cita=hora,
                estado=payload.estado,
                observaciones=payload.observaciones,
            ),
        )
    logger.info(
        "cita_creada",
        cita_id=cita.id,
        estacion_id=cita.estacion_id,
        fecha=str(cita.fecha_cita),
        hora=str(cita.hora_cita),
    )
    return cita


def actualizar_cita(store: Store, cita_id: int, payload: CitaUpdate) -> Cita:
    with store.transaction():
        cita = rules.require(store.get(Cita, cita_id, for_update=True), "Cita no encontrada")
        vehiculo_id = payload.vehiculo_id if payload.vehiculo_id is not None else cita.vehiculo_id
        estacion_id = payload.estacion_id if payload.estacion_id is not None else cita.estacion_id
        if vehiculo_id != cita.vehiculo_id:
            rules.require(store.get(Vehiculo, vehiculo_id), "El vehículo especificado no existe")
        rules.require(store.get(Estacion, estacion_id, for_update=True), "La estación especificada no existe")
        hora = rules.parse_hora(payload.hora_cita)
        rules.validar_horario_libre(
            store.cita_en_horario(estacion_id, payload.fecha_cita, hora, excluir_id=cita.id)
        )
        nuevo_estado = payload.estado or cita.estado
        rules.validar_cambio_estado_cita(cita.estado, nuevo_estado)

        cita.vehiculo_id = vehiculo_id
        cita.estacion_id = estacion_id
        cita.fecha_cita = payload.fecha_cita
        cita.hora_cita = hora
        cita.estado = nuevo_estado
        cita.observaciones = payload.observaciones
        _guardar(store, cita)
    logger.info("cita_actualizada", cita_id=cita.id, estado=cita.estado.value)
    return cita


def eliminar_cita(store: Store, cita_id: int) -> Borrado:
    with store.transaction():
        cita = rules.require(store.get(Cita, cita_id, for_update=True), "Cita no encontrada")
        accion = rules.resolver_borrado("cita", store.cita_tiene_inspecciones(cita.id))
        if accion is Borrado.LOGICO:
            rules.validar_cambio_estado_cita(cita.estado, EstadoCita.CANCELADA)
            cita.estado = EstadoCita.CANCELADA
            store.add(cita)
        else:
            store.delete(cita)
    logger.info("cita_eliminada", cita_id=cita_id, accion=accion.value)
    return accion
