import enum
from datetime import datetime

from sqlalchemy import Column, Date, DateTime, ForeignKey, Index, Integer, String, Time, text

from app.models.base import Base, enum_column


class EstadoCita(str, enum.Enum):
    PROGRAMADA = "programada"
    COMPLETADA = "completada"
    CANCELADA = "cancelada"


ESTADOS_FINALES_CITA = frozenset({EstadoCita.COMPLETADA, EstadoCita.CANCELADA})

_SOLO_PROGRAMADAS = text("estado = 'programada'")


class Cita(Base):
    __tablename__ = "citas"
    # Una sola cita programada por estación, fecha y hora.
    __table_args__ = (
        Index("ix_citas_fecha_hora", "fecha_cita", "hora_cita"),
        Index(
            "ux_citas_horario_programado",
            "estacion_id",
            "fecha_cita",
            "hora_cita",
            unique=True,
            sqlite_where=_SOLO_PROGRAMADAS,
            postgresql_where=_SOLO_PROGRAMADAS,
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    vehiculo_id = Column(Integer, ForeignKey("vehiculos.id", ondelete="RESTRICT"), nullable=False, index=True)
    estacion_id = Column(Integer, ForeignKey("estaciones.id", ondelete="RESTRICT"), nullable=False, index=True)
    fecha_cita = Column(Date, nullable=False)
    hora_cita = Column(Time, nullable=False)
    estado = Column(
        enum_column(EstadoCita, "ck_cita_estado", length=15),
        nullable=False,
        default=EstadoCita.PROGRAMADA,
    )
    observaciones = Column(String(500), nullable=True)
    fecha_creacion = Column(DateTime, default=datetime.utcnow, nullable=False)
