"""Role and bus assignment screens (one controller per tab)."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from typing import Any

from pydantic import ValidationError

from sistema_buses.client.errors import NetworkError
from sistema_buses.client.resource import ResourceClient
from sistema_buses.controller import ResourceListController, substring_matcher
from sistema_buses.pages.forms import form_projection
from sistema_buses.schemas.asignacion import (
    AsignacionBusCreate,
    AsignacionBusResponse,
    AsignacionRolCreate,
    AsignacionRolResponse,
    Turno,
)
from sistema_buses.schemas.bus import BusResponse
from sistema_buses.schemas.rol import RolResponse
from sistema_buses.schemas.trabajador import TrabajadorResponse

logger = logging.getLogger(__name__)

ROL_SEARCH_FIELDS = ("trabajador_nombre", "trabajador_apellido", "rol_nombre")
BUS_SEARCH_FIELDS = ("trabajador_nombre", "trabajador_apellido", "bus_patente", "bus_modelo")


def default_rol_form() -> dict[str, Any]:
    return {"trabajador": None, "rol": None, "activo": True, "notas": ""}


def default_bus_form() -> dict[str, Any]:
    return {
        "trabajador": None,
        "bus": None,
        "turno": Turno.MANANA.value,
        "activo": True,
        "notas": "",
    }


def create_rol_controller(
    client: ResourceClient[AsignacionRolResponse],
) -> ResourceListController[AsignacionRolResponse]:
    return ResourceListController(
        client,
        matches=substring_matcher(*ROL_SEARCH_FIELDS),
        default_form=default_rol_form,
        form_from_record=form_projection(AsignacionRolCreate),
        resource_name="Asignación de rol",
        label="asignaciones",
    )


def create_bus_controller(
    client: ResourceClient[AsignacionBusResponse],
) -> ResourceListController[AsignacionBusResponse]:
    return ResourceListController(
        client,
        matches=substring_matcher(*BUS_SEARCH_FIELDS),
        default_form=default_bus_form,
        form_from_record=form_projection(AsignacionBusCreate),
        resource_name="Asignación de bus",
        label="asignaciones",
    )


@dataclasses.dataclass
class Catalogos:
    """Active records offered in the assignment form selects."""

    trabajadores: list[TrabajadorResponse] = dataclasses.field(default_factory=list)
    roles: list[RolResponse] = dataclasses.field(default_factory=list)
    buses: list[BusResponse] = dataclasses.field(default_factory=list)


async def load_catalogos(
    trabajadores: ResourceClient[TrabajadorResponse],
    roles: ResourceClient[RolResponse],
    buses: ResourceClient[BusResponse],
) -> Catalogos:
    """Fetch the select options; a failure yields empty catalogs."""
    try:
        trab_data, roles_data, buses_data = await asyncio.gather(
            trabajadores.fetch_all(),
            roles.fetch_all(),
            buses.fetch_all(),
        )
    except (NetworkError, ValidationError) as exc:
        logger.error("Error loading assignment catalogs: %s", exc)
        return Catalogos()
    return Catalogos(
        trabajadores=[t for t in trab_data if t.activo],
        roles=[r for r in roles_data if r.activo],
        buses=[b for b in buses_data if b.activo],
    )
