from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    """Body returned by ``POST /auth/login/``."""

    token: str
    username: str | None = None

    model_config = ConfigDict(extra="ignore")
