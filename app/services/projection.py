from datetime import datetime
from typing import Optional

from app.models import Certificado, Cita, Estacion, Inspeccion, Usuario, Vehiculo
from app.schemas.certificado import CertificadoRead
from app.schemas.cita import CitaRead
from app.schemas.inspeccion import InspeccionRead
from app.schemas.vehiculo import VehiculoRead
from app.services.rules import esta_vigente

SIN_DATO = "N/A"


def vehiculo_info(vehiculo: Optional[Vehiculo]) -> str:
    if vehiculo is None:
        return SIN_DATO
    return f"{vehiculo.placa} - {vehiculo.marca} {vehiculo.modelo}"


def persona_info(usuario: Optional[Usuario]) -> str:
    if usuario is None:
        return SIN_DATO
    return f"{usuario.nombre} {usuario.apellidos}"


def estacion_info(estacion: Optional[Estacion]) -> str:
    if estacion is None or not estacion.nombre:
        return SIN_DATO
    return estacion.nombre


def cita_a_respuesta(cita: Cita, vehiculo: Optional[Vehiculo], estacion: Optional[Estacion]) -> CitaRead:
    return CitaRead(
        id=cita.id,
        vehiculo_id=cita.vehiculo_id,
        estacion_id=cita.estacion_id,
        fecha_cita=cita.fecha_cita,
        hora_cita=cita.hora_cita,
        estado=cita.estado,
        observaciones=cita.observaciones,
        fecha_creacion=cita.fecha_creacion,
        vehiculo_info=vehiculo_info(vehiculo),
        estacion_info=estacion_info(estacion),
    )


def inspeccion_a_respuesta(
    inspeccion: Inspeccion,
    tecnico: Optional[Usuario],
    vehiculo: Optional[Vehiculo],
) -> InspeccionRead:
    return InspeccionRead(
        id=inspeccion.id,
        cita_id=inspeccion.cita_id,
        tecnico_id=inspeccion.tecnico_id,
        fecha_inspeccion=inspeccion.fecha_inspeccion,
        resultado=inspeccion.resultado,
        observaciones_tecnicas=inspeccion.observaciones_tecnicas,
        fecha_vencimiento=inspeccion.fecha_vencimiento,
        numero_certificado=inspeccion.numero_certificado,
        tecnico_info=persona_info(tecnico),
        vehiculo_info=vehiculo_info(vehiculo),
    )


def vehiculo_a_respuesta(vehiculo: Vehiculo, propietario: Optional[Usuario]) -> VehiculoRead:
    return VehiculoRead(
        id=vehiculo.id,
        placa=vehiculo.placa,
        propietario_id=vehiculo.propietario_id,
        marca=vehiculo.marca,
        modelo=vehiculo.modelo,
        anio=vehiculo.anio,
        numero_chasis=vehiculo.numero_chasis,
        color=vehiculo.color,
        tipo_combustible=vehiculo.tipo_combustible,
        cilindrada=vehiculo.cilindrada,
        fecha_registro=vehiculo.fecha_registro,
        propietario_info=persona_info(propietario),
    )


def certificado_a_respuesta(certificado: Certificado, ahora: Optional[datetime] = None) -> CertificadoRead:
    ahora = ahora or datetime.utcnow()
    return CertificadoRead(
        id=certificado.id,
        inspeccion_id=certificado.inspeccion_id,
        numero_certificado=certificado.numero_certificado,
        fecha_emision=certificado.fecha_emision,
        fecha_vencimiento=certificado.fecha_vencimiento,
        ruta_archivo_digital=certificado.ruta_archivo_digital,
        estado=certificado.estado,
        esta_vigente=esta_vigente(certificado, ahora),
    )
