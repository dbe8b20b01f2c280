from __future__ import annotations

import asyncio

from sistema_buses.client.resource import ResourceClient
from sistema_buses.schemas.stats import DashboardStats


class StatsService:
    """Aggregate record counts for the dashboard.

    ``asignaciones`` counts bus assignments only.
    """

    def __init__(
        self,
        *,
        trabajadores: ResourceClient,
        buses: ResourceClient,
        roles: ResourceClient,
        asignaciones: ResourceClient,
    ) -> None:
        self._trabajadores = trabajadores
        self._buses = buses
        self._roles = roles
        self._asignaciones = asignaciones

    async def get_all(self) -> DashboardStats:
        trabajadores, buses, roles, asignaciones = await asyncio.gather(
            self._trabajadores.fetch_all(),
            self._buses.fetch_all(),
            self._roles.fetch_all(),
            self._asignaciones.fetch_all(),
        )
        return DashboardStats(
            trabajadores=len(trabajadores),
            buses=len(buses),
            roles=len(roles),
            asignaciones=len(asignaciones),
        )
