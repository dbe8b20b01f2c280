from __future__ import annotations

from sistema_buses.client.resource import ResourceClient
from sistema_buses.client.session import ApiClient
from sistema_buses.schemas.asignacion import (
    AsignacionBusCreate,
    AsignacionBusResponse,
    AsignacionRolCreate,
    AsignacionRolResponse,
)
from sistema_buses.schemas.bus import BusCreate, BusResponse
from sistema_buses.schemas.rol import RolCreate, RolResponse
from sistema_buses.schemas.trabajador import TrabajadorCreate, TrabajadorResponse


def trabajadores_client(api: ApiClient) -> ResourceClient[TrabajadorResponse]:
    return ResourceClient(
        api,
        prefix="/trabajadores/",
        response_schema=TrabajadorResponse,
        create_schema=TrabajadorCreate,
        resource_name="Trabajador",
    )


def buses_client(api: ApiClient) -> ResourceClient[BusResponse]:
    return ResourceClient(
        api,
        prefix="/buses/",
        response_schema=BusResponse,
        create_schema=BusCreate,
        resource_name="Bus",
    )


def roles_client(api: ApiClient) -> ResourceClient[RolResponse]:
    return ResourceClient(
        api,
        prefix="/roles/",
        response_schema=RolResponse,
        create_schema=RolCreate,
        resource_name="Rol",
    )


def asignaciones_rol_client(api: ApiClient) -> ResourceClient[AsignacionRolResponse]:
    return ResourceClient(
        api,
        prefix="/asignaciones-rol/",
        response_schema=AsignacionRolResponse,
        create_schema=AsignacionRolCreate,
        resource_name="AsignacionRol",
    )


def asignaciones_bus_client(api: ApiClient) -> ResourceClient[AsignacionBusResponse]:
    return ResourceClient(
        api,
        prefix="/asignaciones-bus/",
        response_schema=AsignacionBusResponse,
        create_schema=AsignacionBusCreate,
        resource_name="AsignacionBus",
    )
