"""Assignments of a worker to a role or to a bus."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, field_validator

from sistema_buses.schemas.generic import RecordId, RecordResponse


class Turno(str, Enum):
    """Work shift of a bus assignment."""

    MANANA = "MAÑANA"
    TARDE = "TARDE"
    NOCHE = "NOCHE"


class _AsignacionCreate(BaseModel):
    activo: bool = True
    notas: str = ""

    @field_validator("notas", mode="before")
    @classmethod
    def blank_null_notas(cls, v: object) -> object:
        """Stored assignments may carry null notes; send them back as empty text."""
        return "" if v is None else v


class AsignacionRolCreate(_AsignacionCreate):
    trabajador: RecordId
    rol: RecordId


class AsignacionBusCreate(_AsignacionCreate):
    trabajador: RecordId
    bus: RecordId
    turno: Turno = Turno.MANANA


class AsignacionRolResponse(RecordResponse):
    """Role assignment, with the display fields the backend denormalizes."""

    trabajador: RecordId
    rol: RecordId
    activo: bool = True
    notas: str | None = ""
    trabajador_nombre: str = ""
    trabajador_apellido: str = ""
    rol_nombre: str = ""


class AsignacionBusResponse(RecordResponse):
    """Bus assignment, with the display fields the backend denormalizes."""

    trabajador: RecordId
    bus: RecordId
    turno: Turno = Turno.MANANA
    activo: bool = True
    notas: str | None = ""
    trabajador_nombre: str = ""
    trabajador_apellido: str = ""
    bus_patente: str = ""
    bus_modelo: str = ""
    turno_display: str = ""
