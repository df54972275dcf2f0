from app.models.base import Base
from app.models.certificado import Certificado, EstadoCertificado
from app.models.cita import ESTADOS_FINALES_CITA, Cita, EstadoCita
from app.models.estacion import Estacion, EstadoEstacion
from app.models.inspeccion import DetalleInspeccion, Inspeccion, ResultadoInspeccion, ResultadoItem
from app.models.usuario import EstadoUsuario, TipoUsuario, Usuario
from app.models.vehiculo import Vehiculo

__all__ = [
    "Base",
    "Certificado",
    "Cita",
    "DetalleInspeccion",
    "ESTADOS_FINALES_CITA",
    "Estacion",
    "EstadoCertificado",
    "EstadoCita",
    "EstadoEstacion",
    "EstadoUsuario",
    "Inspeccion",
    "ResultadoInspeccion",
    "ResultadoItem",
    "TipoUsuario",
    "Usuario",
    "Vehiculo",
]
