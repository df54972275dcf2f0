from typing import Optional

from app.core.errors import NotFoundError
from app.core.logging import get_logger
from app.core.security import prepare_password, verify_password
from app.models import EstadoUsuario, Usuario
from app.schemas.usuario import UsuarioCreate, UsuarioUpdate
from app.services import rules
from app.services.rules import Borrado
from app.services.store import Store

logger = get_logger(__name__)


def _normalizar(payload: UsuarioCreate | UsuarioUpdate) -> dict:
    data = payload.model_dump()
    for campo in ("nombre", "apellidos", "cedula", "telefono", "direccion"):
        if isinstance(data.get(campo), str):
            data[campo] = data[campo].strip()
    data["email"] = data["email"].strip().lower()
    return data


def listar_usuarios(store: Store) -> list[Usuario]:
    return store.usuarios_activos()


def obtener_usuario(store: Store, usuario_id: int) -> Usuario:
    usuario = store.get(Usuario, usuario_id)
    if usuario is None or usuario.estado != EstadoUsuario.ACTIVO:
        raise NotFoundError("Usuario no encontrado")
    return usuario


def crear_usuario(store: Store, payload: UsuarioCreate) -> Usuario:
    data = _normalizar(payload)
    with store.transaction():
        rules.validar_identidad_libre(store.usuario_con_identidad(data["cedula"], data["email"]))
        data["password"] = prepare_password(data["password"])
        usuario = store.add(Usuario(**data, estado=EstadoUsuario.ACTIVO))
    logger.info("usuario_creado", usuario_id=usuario.id, tipo=usuario.tipo_usuario.value)
    return usuario


def actualizar_usuario(store: Store, usuario_id: int, payload: UsuarioUpdate) -> Usuario:
    data = _normalizar(payload)
    with store.transaction():
        usuario = obtener_usuario(store, usuario_id)
        rules.validar_identidad_libre(
            store.usuario_con_identidad(data["cedula"], data["email"], excluir_id=usuario.id)
        )
        for field, value in data.items():
            setattr(usuario, field, value)
        store.add(usuario)
    logger.info("usuario_actualizado", usuario_id=usuario.id)
    return usuario


def eliminar_usuario(store: Store, usuario_id: int) -> Borrado:
    with store.transaction():
        usuario = obtener_usuario(store, usuario_id)
        accion = rules.resolver_borrado("usuario", store.usuario_tiene_dependientes(usuario.id))
        if accion is Borrado.LOGICO:
            usuario.estado = EstadoUsuario.INACTIVO
            store.add(usuario)
        else:
            store.delete(usuario)
    logger.info("usuario_eliminado", usuario_id=usuario_id, accion=accion.value)
    return accion


def autenticar(store: Store, email: str, password: str) -> Optional[Usuario]:
    usuario = store.usuario_activo_por_email(email.strip())
    if usuario is None or not verify_password(password, usuario.password):
        logger.info("login_fallido", email=email)
        return None
    logger.info("login_ok", usuario_id=usuario.id)
    return usuario
