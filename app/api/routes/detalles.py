from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_store
from app.schemas.inspeccion import DetalleCreate, DetalleRead, DetalleUpdate
from app.services import inspecciones
from app.services.store import Store

router = APIRouter(prefix="/api/detalles-inspeccion", tags=["detalles-inspeccion"])


@router.get("", response_model=list[DetalleRead])
def list_detalles(store: Store = Depends(get_store)):
    return inspecciones.listar_detalles(store)


@router.get("/por-inspeccion/{inspeccion_id}", response_model=list[DetalleRead])
def list_por_inspeccion(inspeccion_id: int, store: Store = Depends(get_store)):
    return inspecciones.detalles_de_inspeccion(store, inspeccion_id)


@router.get("/{detalle_id}", response_model=DetalleRead)
def get_detalle(detalle_id: int, store: Store = Depends(get_store)):
    return inspecciones.obtener_detalle(store, detalle_id)


@router.post("", response_model=DetalleRead, status_code=status.HTTP_201_CREATED)
def create_detalle(payload: DetalleCreate, store: Store = Depends(get_store)):
    return inspecciones.crear_detalle(store, payload)


@router.put("/{detalle_id}", response_model=DetalleRead)
def update_detalle(detalle_id: int, payload: DetalleUpdate, store: Store = Depends(get_store)):
    return inspecciones.actualizar_detalle(store, detalle_id, payload)


@router.delete("/{detalle_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_detalle(detalle_id: int, store: Store = Depends(get_store)):
    inspecciones.eliminar_detalle(store, detalle_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
