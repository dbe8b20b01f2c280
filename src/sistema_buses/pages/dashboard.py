from __future__ import annotations

import logging

from pydantic import ValidationError

from sistema_buses.client.errors import NetworkError
from sistema_buses.client.stats import StatsService
from sistema_buses.schemas.stats import DashboardStats

logger = logging.getLogger(__name__)


class DashboardController:
    """Holds the dashboard counts; a failed refresh keeps the previous ones."""

    def __init__(self, stats_service: StatsService) -> None:
        self._service = stats_service
        self.stats = DashboardStats()
        self.loading = False

    async def load(self) -> DashboardStats:
        self.loading = True
        try:
            self.stats = await self._service.get_all()
        except (NetworkError, ValidationError) as exc:
            logger.error("Error loading dashboard stats: %s", exc)
        finally:
            self.loading = False
        return self.stats
