from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.api.deps import get_store
from app.schemas.usuario import LoginRequest, UsuarioCreate, UsuarioRead, UsuarioUpdate
from app.services import usuarios
from app.services.store import Store

router = APIRouter(prefix="/api/usuarios", tags=["usuarios"])


@router.get("", response_model=list[UsuarioRead])
def list_usuarios(store: Store = Depends(get_store)):
    return usuarios.listar_usuarios(store)


@router.post("/login", response_model=UsuarioRead)
def login(payload: LoginRequest, store: Store = Depends(get_store)):
    usuario = usuarios.autenticar(store, payload.email, payload.password)
    if usuario is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Credenciales inválidas")
    return usuario


@router.get("/{usuario_id}", response_model=UsuarioRead)
def get_usuario(usuario_id: int, store: Store = Depends(get_store)):
    return usuarios.obtener_usuario(store, usuario_id)


@router.post("", response_model=UsuarioRead, status_code=status.HTTP_201_CREATED)
def create_usuario(payload: UsuarioCreate, store: Store = Depends(get_store)):
    return usuarios.crear_usuario(store, payload)


@router.put("/{usuario_id}", response_model=UsuarioRead)
def update_usuario(usuario_id: int, payload: UsuarioUpdate, store: Store = Depends(get_store)):
    return usuarios.actualizar_usuario(store, usuario_id, payload)


@router.delete("/{usuario_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_usuario(usuario_id: int, store: Store = Depends(get_store)):
    usuarios.eliminar_usuario(store, usuario_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
