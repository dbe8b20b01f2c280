from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sistema_buses.schemas.generic import RecordResponse

MIN_BUS_YEAR = 1990


class BusCreate(BaseModel):
    """Schema for creating or replacing a bus.

    ``año`` is the wire name; Python code may use ``anio`` as well.
    """

    patente: str = Field(min_length=1)
    marca: str = Field(min_length=1)
    modelo: str = Field(min_length=1)
    anio: int = Field(alias="año", ge=MIN_BUS_YEAR)
    capacidad: int = Field(ge=10, le=80)
    activo: bool = True

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "patente": "ABC-123",
                "marca": "Mercedes Benz",
                "modelo": "O500 RS",
                "año": 2020,
                "capacidad": 40,
                "activo": True,
            }
        },
    )

    @field_validator("patente")
    @classmethod
    def upper_patente(cls, v: str) -> str:
        return v.upper()

    @field_validator("anio")
    @classmethod
    def reject_future_year(cls, v: int) -> int:
        if v > date.today().year:
            msg = f"año cannot be later than {date.today().year}"
            raise ValueError(msg)
        return v


class BusResponse(RecordResponse):
    """Single bus as returned by the backend."""

    patente: str
    marca: str
    modelo: str
    anio: int = Field(alias="año")
    capacidad: int
    activo: bool = True
