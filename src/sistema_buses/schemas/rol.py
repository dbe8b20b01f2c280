from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from sistema_buses.schemas.generic import RecordResponse


class RolCreate(BaseModel):
    """Schema for creating or replacing a role."""

    nombre: str = Field(min_length=1)
    descripcion: str = ""
    nivel_acceso: int = Field(default=1, ge=1, le=5)
    activo: bool = True

    model_config = ConfigDict(str_strip_whitespace=True)


class RolResponse(RecordResponse):
    """Single role as returned by the backend."""

    nombre: str
    descripcion: str = ""
    nivel_acceso: int = 1
    activo: bool = True
