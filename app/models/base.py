import enum
from typing import Type

from sqlalchemy import Enum
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def enum_column(enum_cls: Type[enum.Enum], name: str, length: int = 10) -> Enum:
    """Columna que guarda el valor del enum (no su nombre) con su CHECK."""
    return Enum(
        enum_cls,
        name=name,
        native_enum=False,
        create_constraint=True,
        length=length,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )
