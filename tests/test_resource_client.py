"""Tests for the generic ResourceClient against the stub backend."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sistema_buses.client.errors import NetworkError
from sistema_buses.client.resource import ResourceClient
from sistema_buses.schemas.bus import BusCreate, BusResponse
from sistema_buses.schemas.trabajador import TrabajadorResponse

pytestmark = pytest.mark.anyio


def _bus_payload(**overrides) -> dict:
    return {
        "patente": "abc-123",
        "marca": "Volvo",
        "modelo": "B9R",
        "año": 2020,
        "capacidad": 40,
        "activo": True,
        **overrides,
    }


class TestFetchAll:
    async def test_returns_typed_records_in_backend_order(self, admin, backend) -> None:
        backend.seed("trabajadores", nombre="Ana", apellido="Rojas", edad=30)
        backend.seed("trabajadores", nombre="Bob", apellido="Soto", edad=40)

        records = await admin.trabajadores.fetch_all()

        assert [r.nombre for r in records] == ["Ana", "Bob"]
        assert all(isinstance(r, TrabajadorResponse) for r in records)

    async def test_empty_collection(self, admin) -> None:
        assert await admin.buses.fetch_all() == []

    async def test_server_error_raises_network_error(self, admin, backend) -> None:
        backend.fail("GET", "buses", 500, {"detail": "Error interno"})
        with pytest.raises(NetworkError) as exc_info:
            await admin.buses.fetch_all()
        assert exc_info.value.status == 500
        assert exc_info.value.message == "Error interno"

    async def test_paginated_envelope_is_unwrapped(self, admin) -> None:
        client = admin.trabajadores

        records = client._parse_list(
            {"count": 1, "next": None, "previous": None,
             "results": [{"id": 3, "nombre": "Eva", "apellido": "Díaz", "edad": 25}]}
        )

        assert records[0].id == 3


class TestSearch:
    async def test_search_sends_query_param(self, admin, backend) -> None:
        backend.seed("trabajadores", nombre="Ana", apellido="Rojas", edad=30)
        backend.seed("trabajadores", nombre="Bob", apellido="Soto", edad=40)

        records = await admin.trabajadores.search("soto")

        assert [r.nombre for r in records] == ["Bob"]
        assert backend.requests[-1]["query"] == "search=soto"


class TestGet:
    async def test_get_existing(self, admin, backend) -> None:
        bus = backend.seed("buses", **_bus_payload(patente="XYZ-999"))
        result = await admin.buses.get(bus["id"])
        assert result.patente == "XYZ-999"
        assert result.anio == 2020

    async def test_get_missing_is_404(self, admin) -> None:
        with pytest.raises(NetworkError) as exc_info:
            await admin.buses.get(404)
        assert exc_info.value.status == 404


class TestCreate:
    async def test_create_posts_normalized_payload(self, admin, backend) -> None:
        created = await admin.buses.create(_bus_payload(**{"año": "2019", "capacidad": "42"}))

        assert isinstance(created, BusResponse)
        stored = backend.collections["buses"][created.id]
        assert stored["patente"] == "ABC-123"
        assert stored["año"] == 2019
        assert stored["capacidad"] == 42
        assert backend.requests[-1]["method"] == "POST"
        assert backend.requests[-1]["path"] == "/api/buses/"

    async def test_create_accepts_schema_instance(self, admin, backend) -> None:
        created = await admin.buses.create(BusCreate.model_validate(_bus_payload()))
        assert created.patente == "ABC-123"

    async def test_invalid_payload_is_rejected_before_request(self, admin, backend) -> None:
        with pytest.raises(ValidationError):
            await admin.buses.create(_bus_payload(capacidad=500))
        assert backend.requests == []

    async def test_backend_validation_error_passes_through(self, admin, backend) -> None:
        backend.fail("POST", "buses", 400, {"patente": ["bus with this patente already exists."]})
        with pytest.raises(NetworkError) as exc_info:
            await admin.buses.create(_bus_payload())
        assert exc_info.value.status == 400
        assert exc_info.value.payload == {"patente": ["bus with this patente already exists."]}


class TestUpdate:
    async def test_update_is_full_put(self, admin, backend) -> None:
        rol = backend.seed("roles", nombre="Conductor", descripcion="", nivel_acceso=1, activo=True)

        updated = await admin.roles.update(rol["id"], {"nombre": "Supervisor", "nivel_acceso": 3})

        assert updated.nombre == "Supervisor"
        assert backend.collections["roles"][rol["id"]] == {
            "id": rol["id"],
            "nombre": "Supervisor",
            "descripcion": "",
            "nivel_acceso": 3,
            "activo": True,
        }
        assert backend.requests[-1]["method"] == "PUT"
        assert backend.requests[-1]["path"] == f"/api/roles/{rol['id']}/"


class TestRemove:
    async def test_remove_deletes(self, admin, backend) -> None:
        rol = backend.seed("roles", nombre="Conductor")
        assert await admin.roles.remove(rol["id"]) is None
        assert rol["id"] not in backend.collections["roles"]

    async def test_remove_missing_raises(self, admin) -> None:
        with pytest.raises(NetworkError) as exc_info:
            await admin.roles.remove(12345)
        assert exc_info.value.status == 404


class TestConstruction:
    def test_prefix_must_be_slash_delimited(self) -> None:
        with pytest.raises(ValueError, match="prefix"):
            ResourceClient(
                None,
                prefix="buses",
                response_schema=BusResponse,
                create_schema=BusCreate,
                resource_name="Bus",
            )

    async def test_item_path(self, admin) -> None:
        assert admin.buses.item_path(7) == "/buses/7/"
