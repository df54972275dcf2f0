from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from app.models.inspeccion import ResultadoInspeccion, ResultadoItem
from app.schemas.fechas import utc_naive


class DetalleBase(BaseModel):
    categoria_revision: str = Field(min_length=1, max_length=50)
    resultado_item: ResultadoItem
    observaciones_item: Optional[str] = Field(default=None, max_length=500)


class DetalleCreate(DetalleBase):
    inspeccion_id: int


class DetalleUpdate(DetalleBase):
    pass


class DetalleRead(DetalleBase):
    id: int
    inspeccion_id: int

    model_config = {
        "from_attributes": True,
    }


class InspeccionCreate(BaseModel):
    cita_id: int
    tecnico_id: int
    fecha_inspeccion: datetime
    resultado: ResultadoInspeccion
    observaciones_tecnicas: Optional[str] = Field(default=None, max_length=1000)
    fecha_vencimiento: Optional[datetime] = None
    numero_certificado: Optional[str] = Field(default=None, max_length=50)
    detalles: List[DetalleBase] = Field(default_factory=list)

    @field_validator("fecha_inspeccion", "fecha_vencimiento")
    @classmethod
    def normalizar_fechas(cls, v: Optional[datetime]) -> Optional[datetime]:
        return utc_naive(v)


class InspeccionUpdate(BaseModel):
    resultado: Optional[ResultadoInspeccion] = None
    observaciones_tecnicas: Optional[str] = Field(default=None, max_length=1000)
    fecha_vencimiento: Optional[datetime] = None
    numero_certificado: Optional[str] = Field(default=None, max_length=50)

    @field_validator("fecha_vencimiento")
    @classmethod
    def normalizar_fechas(cls, v: Optional[datetime]) -> Optional[datetime]:
        return utc_naive(v)


class InspeccionRead(BaseModel):
    id: int
    cita_id: int
    tecnico_id: int
    fecha_inspeccion: datetime
    resultado: ResultadoInspeccion
    observaciones_tecnicas: Optional[str]
    fecha_vencimiento: Optional[datetime]
    numero_certificado: Optional[str]
    tecnico_info: str
    vehiculo_info: str
