from __future__ import annotations

from datetime import date
from typing import Any

from sistema_buses.client.resource import ResourceClient
from sistema_buses.controller import ResourceListController
from sistema_buses.pages.forms import form_projection
from sistema_buses.schemas.bus import BusCreate, BusResponse

SEARCH_FIELDS = ("patente", "modelo", "marca")
DEFAULT_CAPACITY = 40


def default_form() -> dict[str, Any]:
    return {
        "patente": "",
        "modelo": "",
        "año": date.today().year,
        "capacidad": DEFAULT_CAPACITY,
        "marca": "",
        "activo": True,
    }


def create_controller(client: ResourceClient[BusResponse]) -> ResourceListController[BusResponse]:
    return ResourceListController(
        client,
        search_fields=SEARCH_FIELDS,
        default_form=default_form,
        form_from_record=form_projection(BusCreate),
        resource_name="Bus",
        label="buses",
    )
