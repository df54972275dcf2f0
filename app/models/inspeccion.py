import enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from app.models.base import Base, enum_column


class ResultadoInspeccion(str, enum.Enum):
    APROBADO = "aprobado"
    RECHAZADO = "rechazado"


class ResultadoItem(str, enum.Enum):
    OK = "OK"
    FALLO = "FALLO"


class Inspeccion(Base):
    __tablename__ = "inspecciones"

    id = Column(Integer, primary_key=True, index=True)
    # 1-1 con la cita: se controla en el servicio, no con UNIQUE.
    cita_id = Column(Integer, ForeignKey("citas.id", ondelete="RESTRICT"), nullable=False, index=True)
    tecnico_id = Column(Integer, ForeignKey("usuarios.id", ondelete="RESTRICT"), nullable=False, index=True)
    fecha_inspeccion = Column(DateTime, nullable=False, index=True)
    resultado = Column(enum_column(ResultadoInspeccion, "ck_inspeccion_resultado"), nullable=False)
    observaciones_tecnicas = Column(String(1000), nullable=True)
    fecha_vencimiento = Column(DateTime, nullable=True)
    numero_certificado = Column(String(50), nullable=True)


class DetalleInspeccion(Base):
    __tablename__ = "detalles_inspeccion"

    id = Column(Integer, primary_key=True, index=True)
    inspeccion_id = Column(
        Integer,
        ForeignKey("inspecciones.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    categoria_revision = Column(String(50), nullable=False)
    resultado_item = Column(enum_column(ResultadoItem, "ck_detalle_resultado"), nullable=False)
    observaciones_item = Column(String(500), nullable=True)
