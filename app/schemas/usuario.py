from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from app.models.usuario import EstadoUsuario, TipoUsuario


class UsuarioBase(BaseModel):
    nombre: str = Field(min_length=1, max_length=50)
    apellidos: str = Field(min_length=1, max_length=100)
    cedula: str = Field(min_length=1, max_length=20)
    email: EmailStr = Field(max_length=100)
    telefono: Optional[str] = Field(default=None, max_length=15)
    direccion: Optional[str] = Field(default=None, max_length=200)


class UsuarioCreate(UsuarioBase):
    tipo_usuario: TipoUsuario
    password: str = Field(min_length=6, max_length=255)


class UsuarioUpdate(UsuarioBase):
    pass


class UsuarioRead(UsuarioBase):
    id: int
    tipo_usuario: TipoUsuario
    estado: EstadoUsuario
    fecha_registro: datetime

    model_config = {
        "from_attributes": True,
    }


class LoginRequest(BaseModel):
    email: EmailStr
    password: str
