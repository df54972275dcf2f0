from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class VehiculoBase(BaseModel):
    placa: str = Field(min_length=1, max_length=10)
    propietario_id: int
    marca: str = Field(min_length=1, max_length=50)
    modelo: str = Field(min_length=1, max_length=50)
    anio: int = Field(ge=1900, le=2100)
    numero_chasis: Optional[str] = Field(default=None, max_length=50)
    color: Optional[str] = Field(default=None, max_length=30)
    tipo_combustible: Optional[str] = Field(default=None, max_length=20)
    cilindrada: Optional[str] = Field(default=None, max_length=10)


class VehiculoCreate(VehiculoBase):
    pass


class VehiculoUpdate(BaseModel):
    placa: Optional[str] = Field(default=None, min_length=1, max_length=10)
    propietario_id: Optional[int] = None
    marca: Optional[str] = Field(default=None, min_length=1, max_length=50)
    modelo: Optional[str] = Field(default=None, min_length=1, max_length=50)
    anio: Optional[int] = Field(default=None, ge=1900, le=2100)
    numero_chasis: Optional[str] = Field(default=None, max_length=50)
    color: Optional[str] = Field(default=None, max_length=30)
    tipo_combustible: Optional[str] = Field(default=None, max_length=20)
    cilindrada: Optional[str] = Field(default=None, max_length=10)


class VehiculoRead(VehiculoBase):
    id: int
    fecha_registro: datetime
    propietario_info: str

    model_config = {
        "from_attributes": True,
    }
