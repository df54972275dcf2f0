from datetime import datetime

from app.core.logging import get_logger
from app.models import Certificado, EstadoCertificado, Inspeccion
from app.schemas.certificado import CertificadoCreate, CertificadoRead, CertificadoUpdate
from app.services import rules
from app.services.projection import certificado_a_respuesta
from app.services.store import Store

logger = get_logger(__name__)


def listar_certificados(store: Store) -> list[CertificadoRead]:
    ahora = datetime.utcnow()
    return [certificado_a_respuesta(c, ahora) for c in store.certificados()]


def certificados_vigentes(store: Store) -> list[CertificadoRead]:
    ahora = datetime.utcnow()
    return [certificado_a_respuesta(c, ahora) for c in store.certificados(vigentes_en=ahora)]


def obtener_certificado(store: Store, certificado_id: int) -> CertificadoRead:
    certificado = rules.require(store.get(Certificado, certificado_id), "Certificado no encontrado")
    return certificado_a_respuesta(certificado)


def emitir_certificado(store: Store, payload: CertificadoCreate) -> Certificado:
    """Emite el certificado de una inspección aprobada.

    Una inspección admite un solo certificado y el número es único en todo
    el sistema; ambos choques se informan como conflicto antes de revisar el
    resultado de la inspección.
    """
    with store.transaction():
        inspeccion = rules.require(
            store.get(Inspeccion, payload.inspeccion_id, for_update=True),
            "La inspección especificada no existe",
        )
        rules.validar_sin_certificado(store.certificado_de_inspeccion(inspeccion.id))
        rules.validar_numero_certificado_libre(store.certificado_por_numero(payload.numero_certificado))
        rules.validar_inspeccion_aprobada(inspeccion)

        certificado = store.add(
            Certificado(
                inspeccion_id=inspeccion.id,
                numero_certificado=payload.numero_certificado,
                fecha_emision=payload.fecha_emision or datetime.utcnow(),
                fecha_vencimiento=payload.fecha_vencimiento,
                ruta_archivo_digital=payload.ruta_archivo_digital,
                estado=payload.estado,
            )
        )
    logger.info(
        "certificado_emitido",
        certificado_id=certificado.id,
        inspeccion_id=inspeccion.id,
        numero=certificado.numero_certificado,
    )
    return certificado


def actualizar_certificado(store: Store, certificado_id: int, payload: CertificadoUpdate) -> Certificado:
    with store.transaction():
        certificado = rules.require(store.get(Certificado, certificado_id), "Certificado no encontrado")
        if payload.fecha_vencimiento is not None:
            certificado.fecha_vencimiento = payload.fecha_vencimiento
        if payload.ruta_archivo_digital is not None:
            certificado.ruta_archivo_digital = payload.ruta_archivo_digital
        store.add(certificado)
    logger.info("certificado_actualizado", certificado_id=certificado.id)
    return certificado


def anular_certificado(store: Store, certificado_id: int) -> Certificado:
    with store.transaction():
        certificado = rules.require(
            store.get(Certificado, certificado_id, for_update=True), "Certificado no encontrado"
        )
        rules.validar_certificado_anulable(certificado)
        certificado.estado = EstadoCertificado.ANULADO
        store.add(certificado)
    logger.info("certificado_anulado", certificado_id=certificado.id, numero=certificado.numero_certificado)
    return certificado


def eliminar_certificado(store: Store, certificado_id: int) -> Certificado:
    # Los certificados no se borran: DELETE equivale a anular.
    return anular_certificado(store, certificado_id)
