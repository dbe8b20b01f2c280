from __future__ import annotations

from pydantic import BaseModel


class DashboardStats(BaseModel):
    """Record counts shown on the dashboard cards."""

    trabajadores: int = 0
    buses: int = 0
    roles: int = 0
    asignaciones: int = 0
