import enum
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String

from app.models.base import Base, enum_column


class TipoUsuario(str, enum.Enum):
    CLIENTE = "cliente"
    TECNICO = "tecnico"


class EstadoUsuario(str, enum.Enum):
    ACTIVO = "activo"
    INACTIVO = "inactivo"


class Usuario(Base):
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(50), nullable=False)
    apellidos = Column(String(100), nullable=False)
    cedula = Column(String(20), unique=True, nullable=False)
    email = Column(String(100), unique=True, nullable=False, index=True)
    telefono = Column(String(15), nullable=True)
    direccion = Column(String(200), nullable=True)
    tipo_usuario = Column(enum_column(TipoUsuario, "ck_usuario_tipo"), nullable=False)
    # Texto plano salvo HASH_PASSWORDS (ver app.core.security).
    password = Column(String(255), nullable=False)
    estado = Column(
        enum_column(EstadoUsuario, "ck_usuario_estado"),
        nullable=False,
        default=EstadoUsuario.ACTIVO,
    )
    fecha_registro = Column(DateTime, default=datetime.utcnow, nullable=False)
