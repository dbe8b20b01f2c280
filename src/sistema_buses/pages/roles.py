from __future__ import annotations

from typing import Any

from sistema_buses.client.resource import ResourceClient
from sistema_buses.controller import ResourceListController
from sistema_buses.pages.forms import form_projection
from sistema_buses.schemas.rol import RolCreate, RolResponse

SEARCH_FIELDS = ("nombre",)


def default_form() -> dict[str, Any]:
    return {"nombre": "", "descripcion": "", "nivel_acceso": 1, "activo": True}


def create_controller(client: ResourceClient[RolResponse]) -> ResourceListController[RolResponse]:
    return ResourceListController(
        client,
        search_fields=SEARCH_FIELDS,
        default_form=default_form,
        form_from_record=form_projection(RolCreate),
        resource_name="Rol",
        label="roles",
    )
