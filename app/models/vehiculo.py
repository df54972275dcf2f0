from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from app.models.base import Base


class Vehiculo(Base):
    __tablename__ = "vehiculos"

    id = Column(Integer, primary_key=True, index=True)
    placa = Column(String(10), unique=True, nullable=False)
    propietario_id = Column(Integer, ForeignKey("usuarios.id", ondelete="RESTRICT"), nullable=False, index=True)
    marca = Column(String(50), nullable=False)
    modelo = Column(String(50), nullable=False)
    anio = Column(Integer, nullable=False)
    numero_chasis = Column(String(50), nullable=True)
    color = Column(String(30), nullable=True)
    tipo_combustible = Column(String(20), nullable=True)
    cilindrada = Column(String(10), nullable=True)
    fecha_registro = Column(DateTime, default=datetime.utcnow, nullable=False)
