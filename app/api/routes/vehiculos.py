from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_store
from app.schemas.vehiculo import VehiculoCreate, VehiculoRead, VehiculoUpdate
from app.services import vehiculos
from app.services.store import Store

router = APIRouter(prefix="/api/vehiculos", tags=["vehiculos"])


@router.get("", response_model=list[VehiculoRead])
def list_vehiculos(store: Store = Depends(get_store)):
    return vehiculos.listar_vehiculos(store)


@router.get("/por-propietario/{propietario_id}", response_model=list[VehiculoRead])
def list_por_propietario(propietario_id: int, store: Store = Depends(get_store)):
    return vehiculos.vehiculos_de_propietario(store, propietario_id)


@router.get("/{vehiculo_id}", response_model=VehiculoRead)
def get_vehiculo(vehiculo_id: int, store: Store = Depends(get_store)):
    return vehiculos.obtener_vehiculo(store, vehiculo_id)


@router.post("", response_model=VehiculoRead, status_code=status.HTTP_201_CREATED)
def create_vehiculo(payload: VehiculoCreate, store: Store = Depends(get_store)):
    vehiculo = vehiculos.crear_vehiculo(store, payload)
    return vehiculos.obtener_vehiculo(store, vehiculo.id)


@router.put("/{vehiculo_id}", response_model=VehiculoRead)
def update_vehiculo(vehiculo_id: int, payload: VehiculoUpdate, store: Store = Depends(get_store)):
    vehiculo = vehiculos.actualizar_vehiculo(store, vehiculo_id, payload)
    return vehiculos.obtener_vehiculo(store, vehiculo.id)


@router.delete("/{vehiculo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_vehiculo(vehiculo_id: int, store: Store = Depends(get_store)):
    vehiculos.eliminar_vehiculo(store, vehiculo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
