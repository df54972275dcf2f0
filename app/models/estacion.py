import enum

from sqlalchemy import Column, Integer, String

from app.models.base import Base, enum_column


class EstadoEstacion(str, enum.Enum):
    ACTIVA = "activa"
    INACTIVA = "inactiva"


class Estacion(Base):
    __tablename__ = "estaciones"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(100), nullable=False)
    direccion = Column(String(200), nullable=False)
    telefono = Column(String(15), nullable=True)
    email = Column(String(100), nullable=True)
    provincia = Column(String(50), nullable=False)
    canton = Column(String(50), nullable=False)
    distrito = Column(String(50), nullable=False)
    horario_atencion = Column(String(100), nullable=True)
    estado = Column(
        enum_column(EstadoEstacion, "ck_estacion_estado"),
        nullable=False,
        default=EstadoEstacion.ACTIVA,
    )
