from app.core.errors import NotFoundError
from app.core.logging import get_logger
from app.models import Usuario, Vehiculo
from app.schemas.vehiculo import VehiculoCreate, VehiculoRead, VehiculoUpdate
from app.services import rules
from app.services.projection import vehiculo_a_respuesta
from app.services.store import Store

logger = get_logger(__name__)


def _validar_propietario(store: Store, propietario_id: int) -> Usuario:
    propietario = rules.require(store.get(Usuario, propietario_id), "El propietario especificado no existe")
    rules.validar_propietario(propietario)
    return propietario


def listar_vehiculos(store: Store) -> list[VehiculoRead]:
    return [vehiculo_a_respuesta(v, p) for v, p in store.vehiculos_con_propietario()]


def vehiculos_de_propietario(store: Store, propietario_id: int) -> list[VehiculoRead]:
    filas = store.vehiculos_con_propietario(propietario_id=propietario_id)
    return [vehiculo_a_respuesta(v, p) for v, p in filas]


def obtener_vehiculo(store: Store, vehiculo_id: int) -> VehiculoRead:
    filas = store.vehiculos_con_propietario(vehiculo_id=vehiculo_id)
    if not filas:
        raise NotFoundError("Vehículo no encontrado")
    return vehiculo_a_respuesta(*filas[0])


def crear_vehiculo(store: Store, payload: VehiculoCreate) -> Vehiculo:
    data = payload.model_dump()
    data["placa"] = data["placa"].strip()
    with store.transaction():
        _validar_propietario(store, data["propietario_id"])
        rules.validar_placa_libre(store.vehiculo_por_placa(data["placa"]))
        vehiculo = store.add(Vehiculo(**data))
    logger.info("vehiculo_creado", vehiculo_id=vehiculo.id, placa=vehiculo.placa)
    return vehiculo


def actualizar_vehiculo(store: Store, vehiculo_id: int, payload: VehiculoUpdate) -> Vehiculo:
    data = payload.model_dump(exclude_unset=True)
    if data.get("placa"):
        data["placa"] = data["placa"].strip()
    with store.transaction():
        vehiculo = rules.require(store.get(Vehiculo, vehiculo_id), "Vehículo no encontrado")
        if data.get("propietario_id") is not None:
            _validar_propietario(store, data["propietario_id"])
        if data.get("placa"):
            rules.validar_placa_libre(store.vehiculo_por_placa(data["placa"], excluir_id=vehiculo.id))
        for field, value in data.items():
            if value is None and field in ("placa", "propietario_id", "marca", "modelo", "anio"):
                continue
            setattr(vehiculo, field, value)
        store.add(vehiculo)
    logger.info("vehiculo_actualizado", vehiculo_id=vehiculo.id)
    return vehiculo


def eliminar_vehiculo(store: Store, vehiculo_id: int) -> None:
    with store.transaction():
        vehiculo = rules.require(store.get(Vehiculo, vehiculo_id), "Vehículo no encontrado")
        rules.resolver_borrado("vehiculo", store.vehiculo_tiene_citas(vehiculo.id))
        store.delete(vehiculo)
    logger.info("vehiculo_eliminado", vehiculo_id=vehiculo_id)
