from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from sistema_buses.schemas.generic import RecordResponse


class TrabajadorCreate(BaseModel):
    """Schema for creating or replacing a worker (POST and full PUT)."""

    nombre: str = Field(min_length=1)
    apellido: str = Field(min_length=1)
    edad: int = Field(ge=18, le=70)
    contacto: str = Field(min_length=1)
    direccion: str = Field(min_length=1)
    activo: bool = True

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "nombre": "Ana",
                "apellido": "Rojas",
                "edad": 34,
                "contacto": "+56 9 1234 5678",
                "direccion": "Av. Matta 123",
                "activo": True,
            }
        },
    )


class TrabajadorResponse(RecordResponse):
    """Single worker as returned by the backend."""

    nombre: str
    apellido: str
    edad: int
    contacto: str = ""
    direccion: str = ""
    activo: bool = True
