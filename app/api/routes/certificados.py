from fastapi import APIRouter, Depends, status

from app.api.deps import get_store
from app.schemas.certificado import CertificadoCreate, CertificadoRead, CertificadoUpdate
from app.services import certificados
from app.services.projection import certificado_a_respuesta
from app.services.store import Store

router = APIRouter(prefix="/api/certificados", tags=["certificados"])


@router.get("", response_model=list[CertificadoRead])
def list_certificados(store: Store = Depends(get_store)):
    return certificados.listar_certificados(store)


@router.get("/vigentes", response_model=list[CertificadoRead])
def list_vigentes(store: Store = Depends(get_store)):
    return certificados.certificados_vigentes(store)


@router.get("/{certificado_id}", response_model=CertificadoRead)
def get_certificado(certificado_id: int, store: Store = Depends(get_store)):
    return certificados.obtener_certificado(store, certificado_id)


@router.post("", response_model=CertificadoRead, status_code=status.HTTP_201_CREATED)
def create_certificado(payload: CertificadoCreate, store: Store = Depends(get_store)):
    return certificado_a_respuesta(certificados.emitir_certificado(store, payload))


@router.put("/{certificado_id}", response_model=CertificadoRead)
def update_certificado(certificado_id: int, payload: CertificadoUpdate, store: Store = Depends(get_store)):
    return certificado_a_respuesta(certificados.actualizar_certificado(store, certificado_id, payload))


@router.post("/{certificado_id}/anular", response_model=CertificadoRead)
def anular_certificado(certificado_id: int, store: Store = Depends(get_store)):
    return certificado_a_respuesta(certificados.anular_certificado(store, certificado_id))


@router.delete("/{certificado_id}", response_model=CertificadoRead)
def delete_certificado(certificado_id: int, store: Store = Depends(get_store)):
    return certificado_a_respuesta(certificados.eliminar_certificado(store, certificado_id))
