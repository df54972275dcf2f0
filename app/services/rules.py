"""Reglas del ciclo cita → inspección → certificado.

Funciones puras: reciben lo que el servicio ya cargó de la base y lanzan un
`ServiceError` tipado si la operación no es legal. No leen ni escriben nada.
"""

import enum
from datetime import datetime, time
from typing import NamedTuple, Optional, TypeVar

from app.core.errors import ConflictError, MalformedError, NotFoundError, PreconditionFailedError
from app.models import (
    ESTADOS_FINALES_CITA,
    Certificado,
    Cita,
    EstadoCertificado,
    EstadoCita,
    Inspeccion,
    ResultadoInspeccion,
    TipoUsuario,
    Usuario,
    Vehiculo,
)

T = TypeVar("T")

FORMATOS_HORA = ("%H:%M:%S", "%H:%M")
MENSAJE_HORARIO_OCUPADO = "Ya existe una cita programada para esa fecha y hora en la estación seleccionada"


def parse_hora(valor: str) -> time:
    texto = (valor or "").strip()
    for formato in FORMATOS_HORA:
        try:
            return datetime.strptime(texto, formato).time()
        except ValueError:
            continue
    raise MalformedError("Formato de hora inválido. Use HH:MM:SS")


def require(entidad: Optional[T], mensaje: str) -> T:
    if entidad is None:
        raise NotFoundError(mensaje)
    return entidad


# -------- citas --------
def validar_horario_libre(conflicto: Optional[Cita]) -> None:
    if conflicto is not None:
        raise ConflictError(MENSAJE_HORARIO_OCUPADO)


def validar_cambio_estado_cita(actual: EstadoCita, nuevo: EstadoCita) -> None:
    if actual == nuevo:
        return
    if actual in ESTADOS_FINALES_CITA:
        raise PreconditionFailedError(f"La cita está {actual.value} y no admite cambios de estado")


# -------- inspecciones --------
def validar_sin_inspeccion(existente: Optional[Inspeccion]) -> None:
    if existente is not None:
        raise ConflictError("La cita ya tiene una inspección registrada")


def validar_cita_inspeccionable(cita: Cita) -> None:
    if cita.estado != EstadoCita.PROGRAMADA:
        raise PreconditionFailedError("Solo se pueden inspeccionar citas en estado programada")


def validar_tecnico(usuario: Usuario) -> None:
    if usuario.tipo_usuario != TipoUsuario.TECNICO:
        raise PreconditionFailedError("El usuario indicado no es técnico")


# -------- certificados --------
def validar_sin_certificado(existente: Optional[Certificado]) -> None:
    if existente is not None:
        raise ConflictError("La inspección ya tiene un certificado emitido")


def validar_numero_certificado_libre(existente: Optional[Certificado]) -> None:
    if existente is not None:
        raise ConflictError("El número de certificado ya está en uso")


def validar_inspeccion_aprobada(inspeccion: Inspeccion) -> None:
    if inspeccion.resultado != ResultadoInspeccion.APROBADO:
        raise PreconditionFailedError("Solo se emiten certificados para inspecciones aprobadas")


def validar_certificado_anulable(certificado: Certificado) -> None:
    if certificado.estado == EstadoCertificado.ANULADO:
        raise PreconditionFailedError("El certificado ya está anulado")


def esta_vigente(certificado: Certificado, ahora: datetime) -> bool:
    """Válido y con vencimiento estrictamente posterior a `ahora`."""
    return certificado.estado == EstadoCertificado.VALIDO and certificado.fecha_vencimiento > ahora


# -------- usuarios / vehículos --------
def validar_identidad_libre(existente: Optional[Usuario]) -> None:
    if existente is not None:
        raise ConflictError("Ya existe un usuario con esa cédula o email")


def validar_propietario(usuario: Usuario) -> None:
    if usuario.tipo_usuario != TipoUsuario.CLIENTE:
        raise PreconditionFailedError("El propietario debe ser un usuario cliente")


def validar_placa_libre(existente: Optional[Vehiculo]) -> None:
    if existente is not None:
        raise ConflictError("Ya existe un vehículo con esa placa")


# -------- borrado --------
class Borrado(enum.Enum):
    FISICO = "fisico"
    LOGICO = "logico"
    RECHAZAR = "rechazar"


class PoliticaBorrado(NamedTuple):
    sin_dependientes: Borrado
    con_dependientes: Borrado
    motivo_rechazo: str = ""


# LOGICO significa `inactivo` para usuarios y `cancelada` para citas.
POLITICA_BORRADO = {
    "usuario": PoliticaBorrado(Borrado.FISICO, Borrado.LOGICO),
    "cita": PoliticaBorrado(Borrado.FISICO, Borrado.LOGICO),
    "vehiculo": PoliticaBorrado(
        Borrado.FISICO, Borrado.RECHAZAR, "No se puede eliminar un vehículo con citas registradas"
    ),
    "estacion": PoliticaBorrado(
        Borrado.FISICO, Borrado.RECHAZAR, "No se puede eliminar una estación con citas registradas"
    ),
    "inspeccion": PoliticaBorrado(
        Borrado.FISICO, Borrado.RECHAZAR, "No se puede eliminar una inspección con certificado emitido"
    ),
}


def resolver_borrado(entidad: str, tiene_dependientes: bool) -> Borrado:
    politica = POLITICA_BORRADO[entidad]
    if not tiene_dependientes:
        return politica.sin_dependientes
    if politica.con_dependientes is Borrado.RECHAZAR:
        raise ConflictError(politica.motivo_rechazo)
    return politica.con_dependientes
