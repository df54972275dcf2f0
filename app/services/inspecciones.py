from app.core.errors import NotFoundError
from app.core.logging import get_logger
from app.models import Cita, DetalleInspeccion, Inspeccion, Usuario
from app.schemas.inspeccion import DetalleCreate, DetalleUpdate, InspeccionCreate, InspeccionRead, InspeccionUpdate
from app.services import rules
from app.services.projection import inspeccion_a_respuesta
from app.services.store import Store

logger = get_logger(__name__)


def listar_inspecciones(store: Store) -> list[InspeccionRead]:
    return [inspeccion_a_respuesta(*fila) for fila in store.inspecciones_con_relaciones()]


def obtener_inspeccion(store: Store, inspeccion_id: int) -> InspeccionRead:
    filas = store.inspecciones_con_relaciones(inspeccion_id=inspeccion_id)
    if not filas:
        raise NotFoundError("Inspección no encontrada")
    return inspeccion_a_respuesta(*filas[0])


def registrar_inspeccion(store: Store, payload: InspeccionCreate) -> Inspeccion:
    """Registra el resultado de una cita programada junto con su checklist.

    Orden de validación: existencia de cita y técnico, inspección previa de
    la cita, y por último el estado de la cita y el rol del técnico. La cita
    no cambia de estado al inspeccionarse.
    """
    with store.transaction():
        cita = rules.require(store.get(Cita, payload.cita_id, for_update=True), "La cita especificada no existe")
        tecnico = rules.require(store.get(Usuario, payload.tecnico_id), "El técnico especificado no existe")
        rules.validar_sin_inspeccion(store.inspeccion_de_cita(cita.id))
        rules.validar_cita_inspeccionable(cita)
        rules.validar_tecnico(tecnico)

        inspeccion = store.add(
            Inspeccion(
                cita_id=cita.id,
                tecnico_id=tecnico.id,
                fecha_inspeccion=payload.fecha_inspeccion,
                resultado=payload.resultado,
                observaciones_tecnicas=payload.observaciones_tecnicas,
                fecha_vencimiento=payload.fecha_vencimiento,
                numero_certificado=payload.numero_certificado,
            )
        )
        for item in payload.detalles:
            store.add(DetalleInspeccion(inspeccion_id=inspeccion.id, **item.model_dump()))
    logger.info(
        "inspeccion_registrada",
        inspeccion_id=inspeccion.id,
        cita_id=cita.id,
        resultado=inspeccion.resultado.value,
        detalles=len(payload.detalles),
    )
    return inspeccion


def actualizar_inspeccion(store: Store, inspeccion_id: int, payload: InspeccionUpdate) -> Inspeccion:
    # No se revalida el estado de la cita de origen.
    with store.transaction():
        inspeccion = rules.require(store.get(Inspeccion, inspeccion_id), "Inspección no encontrada")
        for field, value in payload.model_dump(exclude_unset=True).items():
            if field == "resultado" and value is None:
                continue
            setattr(inspeccion, field, value)
        store.add(inspeccion)
    logger.info("inspeccion_actualizada", inspeccion_id=inspeccion.id, resultado=inspeccion.resultado.value)
    return inspeccion


def eliminar_inspeccion(store: Store, inspeccion_id: int) -> None:
    with store.transaction():
        inspeccion = rules.require(store.get(Inspeccion, inspeccion_id), "Inspección no encontrada")
        rules.resolver_borrado("inspeccion", store.inspeccion_tiene_certificados(inspeccion.id))
        store.borrar_detalles_de_inspeccion(inspeccion.id)
        store.delete(inspeccion)
    logger.info("inspeccion_eliminada", inspeccion_id=inspeccion_id)


# -------- detalle (checklist) --------
def obtener_detalle(store: Store, detalle_id: int) -> DetalleInspeccion:
    return rules.require(store.get(DetalleInspeccion, detalle_id), "Detalle no encontrado")


def listar_detalles(store: Store) -> list[DetalleInspeccion]:
    return store.detalles()


def detalles_de_inspeccion(store: Store, inspeccion_id: int) -> list[DetalleInspeccion]:
    return store.detalles_de_inspeccion(inspeccion_id)


def crear_detalle(store: Store, payload: DetalleCreate) -> DetalleInspeccion:
    with store.transaction():
        rules.require(store.get(Inspeccion, payload.inspeccion_id), "La inspección especificada no existe")
        detalle = store.add(DetalleInspeccion(**payload.model_dump()))
    logger.info("detalle_creado", detalle_id=detalle.id, inspeccion_id=detalle.inspeccion_id)
    return detalle


def actualizar_detalle(store: Store, detalle_id: int, payload: DetalleUpdate) -> DetalleInspeccion:
    with store.transaction():
        detalle = obtener_detalle(store, detalle_id)
        for field, value in payload.model_dump().items():
            setattr(detalle, field, value)
        store.add(detalle)
    return detalle


def eliminar_detalle(store: Store, detalle_id: int) -> None:
    with store.transaction():
        detalle = obtener_detalle(store, detalle_id)
        store.delete(detalle)
    logger.info("detalle_eliminado", detalle_id=detalle_id)
