from typing import Optional

from pydantic import BaseModel, Field

from app.models.estacion import EstadoEstacion


class EstacionBase(BaseModel):
    nombre: str = Field(min_length=1, max_length=100)
    direccion: str = Field(min_length=1, max_length=200)
    telefono: Optional[str] = Field(default=None, max_length=15)
    email: Optional[str] = Field(default=None, max_length=100)
    provincia: str = Field(min_length=1, max_length=50)
    canton: str = Field(min_length=1, max_length=50)
    distrito: str = Field(min_length=1, max_length=50)
    horario_atencion: Optional[str] = Field(default=None, max_length=100)
    estado: EstadoEstacion = EstadoEstacion.ACTIVA


class EstacionCreate(EstacionBase):
    pass


class EstacionUpdate(EstacionBase):
    pass


class EstacionRead(EstacionBase):
    id: int

    model_config = {
        "from_attributes": True,
    }
