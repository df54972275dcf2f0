from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_store
from app.schemas.cita import CitaCreate, CitaRead, CitaUpdate
from app.services import citas
from app.services.store import Store

router = APIRouter(prefix="/api/citas", tags=["citas"])


@router.get("", response_model=list[CitaRead])
def list_citas(store: Store = Depends(get_store)):
    return citas.listar_citas(store)


@router.get("/por-vehiculo/{vehiculo_id}", response_model=list[CitaRead])
def list_por_vehiculo(vehiculo_id: int, store: Store = Depends(get_store)):
    return citas.listar_citas(store, vehiculo_id=vehiculo_id)


@router.get("/por-estacion/{estacion_id}", response_model=list[CitaRead])
def list_por_estacion(estacion_id: int, fecha: Optional[date] = None, store: Store = Depends(get_store)):
    return citas.listar_citas(store, estacion_id=estacion_id, fecha=fecha)


@router.get("/{cita_id}", response_model=CitaRead)
def get_cita(cita_id: int, store: Store = Depends(get_store)):
    return citas.obtener_cita(store, cita_id)


@router.post("", response_model=CitaRead, status_code=status.HTTP_201_CREATED)
def create_cita(payload: CitaCreate, store: Store = Depends(get_store)):
    cita = citas.crear_cita(store, payload)
    return citas.obtener_cita(store, cita.id)


@router.put("/{cita_id}", response_model=CitaRead)
def update_cita(cita_id: int, payload: CitaUpdate, store: Store = Depends(get_store)):
    cita = citas.actualizar_cita(store, cita_id, payload)
    return citas.obtener_cita(store, cita.id)


@router.delete("/{cita_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_cita(cita_id: int, store: Store = Depends(get_store)):
    citas.eliminar_cita(store, cita_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
