from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.models.certificado import EstadoCertificado
from app.schemas.fechas import utc_naive


class CertificadoCreate(BaseModel):
    inspeccion_id: int
    numero_certificado: str = Field(min_length=1, max_length=50)
    fecha_emision: Optional[datetime] = None
    fecha_vencimiento: datetime
    ruta_archivo_digital: Optional[str] = Field(default=None, max_length=500)
    estado: EstadoCertificado = EstadoCertificado.VALIDO

    @field_validator("fecha_emision", "fecha_vencimiento")
    @classmethod
    def normalizar_fechas(cls, v: Optional[datetime]) -> Optional[datetime]:
        return utc_naive(v)


class CertificadoUpdate(BaseModel):
    fecha_vencimiento: Optional[datetime] = None
    ruta_archivo_digital: Optional[str] = Field(default=None, max_length=500)

    @field_validator("fecha_vencimiento")
    @classmethod
    def normalizar_fechas(cls, v: Optional[datetime]) -> Optional[datetime]:
        return utc_naive(v)


class CertificadoRead(BaseModel):
    id: int
    inspeccion_id: int
    numero_certificado: str
    fecha_emision: datetime
    fecha_vencimiento: datetime
    ruta_archivo_digital: Optional[str]
    estado: EstadoCertificado
    esta_vigente: bool
