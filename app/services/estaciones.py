from app.core.logging import get_logger
from app.models import Estacion
from app.schemas.estacion import EstacionCreate, EstacionUpdate
from app.services import rules
from app.services.store import Store

logger = get_logger(__name__)


def listar_estaciones(store: Store) -> list[Estacion]:
    return store.estaciones()


def obtener_estacion(store: Store, estacion_id: int) -> Estacion:
    return rules.require(store.get(Estacion, estacion_id), "Estación no encontrada")


def crear_estacion(store: Store, payload: EstacionCreate) -> Estacion:
    with store.transaction():
        estacion = store.add(Estacion(**payload.model_dump()))
    logger.info("estacion_creada", estacion_id=estacion.id, nombre=estacion.nombre)
    return estacion


def actualizar_estacion(store: Store, estacion_id: int, payload: EstacionUpdate) -> Estacion:
    with store.transaction():
        estacion = obtener_estacion(store, estacion_id)
        for field, value in payload.model_dump().items():
            setattr(estacion, field, value)
        store.add(estacion)
    logger.info("estacion_actualizada", estacion_id=estacion.id, estado=estacion.estado.value)
    return estacion


def eliminar_estacion(store: Store, estacion_id: int) -> None:
    with store.transaction():
        estacion = obtener_estacion(store, estacion_id)
        rules.resolver_borrado("estacion", store.estacion_tiene_citas(estacion.id))
        store.delete(estacion)
    logger.info("estacion_eliminada", estacion_id=estacion_id)
