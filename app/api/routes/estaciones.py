from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_store
from app.schemas.estacion import EstacionCreate, EstacionRead, EstacionUpdate
from app.services import estaciones
from app.services.store import Store

router = APIRouter(prefix="/api/estaciones", tags=["estaciones"])


@router.get("", response_model=list[EstacionRead])
def list_estaciones(store: Store = Depends(get_store)):
    return estaciones.listar_estaciones(store)


@router.get("/{estacion_id}", response_model=EstacionRead)
def get_estacion(estacion_id: int, store: Store = Depends(get_store)):
    return estaciones.obtener_estacion(store, estacion_id)


@router.post("", response_model=EstacionRead, status_code=status.HTTP_201_CREATED)
def create_estacion(payload: EstacionCreate, store: Store = Depends(get_store)):
    return estaciones.crear_estacion(store, payload)


@router.put("/{estacion_id}", response_model=EstacionRead)
def update_estacion(estacion_id: int, payload: EstacionUpdate, store: Store = Depends(get_store)):
    return estaciones.actualizar_estacion(store, estacion_id, payload)


@router.delete("/{estacion_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_estacion(estacion_id: int, store: Store = Depends(get_store)):
    estaciones.eliminar_estacion(store, estacion_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
