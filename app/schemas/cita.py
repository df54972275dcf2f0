from datetime import date, datetime, time
from typing import Optional

from pydantic import BaseModel, Field

from app.models.cita import EstadoCita


class CitaCreate(BaseModel):
    vehiculo_id: int
    estacion_id: int
    fecha_cita: date
    # Se recibe como texto "HH:MM:SS" y se valida en el servicio.
    hora_cita: str
    estado: EstadoCita = EstadoCita.PROGRAMADA
    observaciones: Optional[str] = Field(default=None, max_length=500)


class CitaUpdate(BaseModel):
    fecha_cita: date
    hora_cita: str
    estado: Optional[EstadoCita] = None
    observaciones: Optional[str] = Field(default=None, max_length=500)
    vehiculo_id: Optional[int] = None
    estacion_id: Optional[int] = None


class CitaRead(BaseModel):
    id: int
    vehiculo_id: int
    estacion_id: int
    fecha_cita: date
    hora_cita: time
    estado: EstadoCita
    observaciones: Optional[str]
    fecha_creacion: datetime
    vehiculo_info: str
    estacion_info: str
