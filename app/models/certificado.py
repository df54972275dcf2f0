import enum
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from app.models.base import Base, enum_column


class EstadoCertificado(str, enum.Enum):
    VALIDO = "valido"
    # Declarado en el esquema; ningún flujo lo asigna (la vigencia se calcula).
    VENCIDO = "vencido"
    ANULADO = "anulado"


class Certificado(Base):
    __tablename__ = "certificados"

    id = Column(Integer, primary_key=True, index=True)
    inspeccion_id = Column(Integer, ForeignKey("inspecciones.id", ondelete="RESTRICT"), nullable=False, index=True)
    numero_certificado = Column(String(50), unique=True, nullable=False)
    fecha_emision = Column(DateTime, default=datetime.utcnow, nullable=False)
    fecha_vencimiento = Column(DateTime, nullable=False)
    ruta_archivo_digital = Column(String(500), nullable=True)
    estado = Column(
        enum_column(EstadoCertificado, "ck_certificado_estado"),
        nullable=False,
        default=EstadoCertificado.VALIDO,
    )
