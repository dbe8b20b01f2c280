from __future__ import annotations

from typing import Any

from sistema_buses.client.resource import ResourceClient
from sistema_buses.controller import ResourceListController
from sistema_buses.pages.forms import form_projection
from sistema_buses.schemas.trabajador import TrabajadorCreate, TrabajadorResponse

SEARCH_FIELDS = ("nombre", "apellido")


def default_form() -> dict[str, Any]:
    return {
        "nombre": "",
        "apellido": "",
        "edad": 18,
        "contacto": "",
        "direccion": "",
        "activo": True,
    }


def create_controller(
    client: ResourceClient[TrabajadorResponse],
) -> ResourceListController[TrabajadorResponse]:
    return ResourceListController(
        client,
        search_fields=SEARCH_FIELDS,
        default_form=default_form,
        form_from_record=form_projection(TrabajadorCreate),
        resource_name="Trabajador",
        label="trabajadores",
    )
