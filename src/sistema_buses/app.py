from __future__ import annotations

import logging
from collections.abc import Callable

import httpx

from sistema_buses.client.auth import AuthContext, AuthService
from sistema_buses.client.resources import (
    asignaciones_bus_client,
    asignaciones_rol_client,
    buses_client,
    roles_client,
    trabajadores_client,
)
from sistema_buses.client.session import ApiClient, init_http_client
from sistema_buses.client.stats import StatsService
from sistema_buses.controller import ResourceListController
from sistema_buses.core.config import Settings, get_settings
from sistema_buses.core.logging import configure_logging
from sistema_buses.pages import asignaciones, buses, roles, trabajadores
from sistema_buses.pages.asignaciones import Catalogos
from sistema_buses.pages.dashboard import DashboardController
from sistema_buses.schemas.asignacion import AsignacionBusResponse, AsignacionRolResponse
from sistema_buses.schemas.bus import BusResponse
from sistema_buses.schemas.rol import RolResponse
from sistema_buses.schemas.trabajador import TrabajadorResponse

logger = logging.getLogger(__name__)


class AdminApp:
    """Services and screen controllers sharing one HTTP client and session."""

    def __init__(self, settings: Settings, api: ApiClient, auth_context: AuthContext) -> None:
        self.settings = settings
        self.api = api
        self.auth_context = auth_context
        self.auth = AuthService(api, auth_context)

        self.trabajadores = trabajadores_client(api)
        self.buses = buses_client(api)
        self.roles = roles_client(api)
        self.asignaciones_rol = asignaciones_rol_client(api)
        self.asignaciones_bus = asignaciones_bus_client(api)

        self.stats = StatsService(
            trabajadores=self.trabajadores,
            buses=self.buses,
            roles=self.roles,
            asignaciones=self.asignaciones_bus,
        )

    def trabajadores_controller(self) -> ResourceListController[TrabajadorResponse]:
        return trabajadores.create_controller(self.trabajadores)

    def buses_controller(self) -> ResourceListController[BusResponse]:
        return buses.create_controller(self.buses)

    def roles_controller(self) -> ResourceListController[RolResponse]:
        return roles.create_controller(self.roles)

    def asignaciones_rol_controller(self) -> ResourceListController[AsignacionRolResponse]:
        return asignaciones.create_rol_controller(self.asignaciones_rol)

    def asignaciones_bus_controller(self) -> ResourceListController[AsignacionBusResponse]:
        return asignaciones.create_bus_controller(self.asignaciones_bus)

    def dashboard_controller(self) -> DashboardController:
        return DashboardController(self.stats)

    async def load_catalogos(self) -> Catalogos:
        return await asignaciones.load_catalogos(self.trabajadores, self.roles, self.buses)

    async def aclose(self) -> None:
        await self.api.aclose()
        logger.info("Admin client closed")

    async def __aenter__(self) -> "AdminApp":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def create_admin(
    settings: Settings | None = None,
    *,
    auth_context: AuthContext | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    on_unauthorized: Callable[[], None] | None = None,
) -> AdminApp:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    auth_context = auth_context if auth_context is not None else AuthContext()
    http = init_http_client(
        settings,
        auth_context,
        transport=transport,
        on_unauthorized=on_unauthorized,
    )
    logger.info("%s %s using backend %s", settings.app_name, settings.app_version, settings.api_base_url)
    return AdminApp(settings, ApiClient(http), auth_context)
