from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_store
from app.schemas.inspeccion import InspeccionCreate, InspeccionRead, InspeccionUpdate
from app.services import inspecciones
from app.services.store import Store

router = APIRouter(prefix="/api/inspecciones", tags=["inspecciones"])


@router.get("", response_model=list[InspeccionRead])
def list_inspecciones(store: Store = Depends(get_store)):
    return inspecciones.listar_inspecciones(store)


@router.get("/{inspeccion_id}", response_model=InspeccionRead)
def get_inspeccion(inspeccion_id: int, store: Store = Depends(get_store)):
    return inspecciones.obtener_inspeccion(store, inspeccion_id)


@router.post("", response_model=InspeccionRead, status_code=status.HTTP_201_CREATED)
def create_inspeccion(payload: InspeccionCreate, store: Store = Depends(get_store)):
    inspeccion = inspecciones.registrar_inspeccion(store, payload)
    return inspecciones.obtener_inspeccion(store, inspeccion.id)


@router.put("/{inspeccion_id}", response_model=InspeccionRead)
def update_inspeccion(inspeccion_id: int, payload: InspeccionUpdate, store: Store = Depends(get_store)):
    inspeccion = inspecciones.actualizar_inspeccion(store, inspeccion_id, payload)
    return inspecciones.obtener_inspeccion(store, inspeccion.id)


@router.delete("/{inspeccion_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inspeccion(inspeccion_id: int, store: Store = Depends(get_store)):
    inspecciones.eliminar_inspeccion(store, inspeccion_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
