"""Authentication context and login/logout against the backend."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Generator
from typing import TYPE_CHECKING

import httpx

from sistema_buses.client.errors import NetworkError
from sistema_buses.schemas.auth import LoginRequest, LoginResponse

if TYPE_CHECKING:
    from sistema_buses.client.session import ApiClient

logger = logging.getLogger(__name__)

DEFAULT_USERNAME = "Usuario"


@dataclasses.dataclass
class AuthContext:
    """Current session credentials.

    Passed explicitly to the HTTP client; nothing reads tokens from
    process-wide state.
    """

    token: str | None = None
    username: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    @property
    def display_name(self) -> str:
        return self.username or DEFAULT_USERNAME

    def set(self, token: str, username: str | None = None) -> None:
        self.token = token
        self.username = username

    def clear(self) -> None:
        self.token = None
        self.username = None


class TokenAuth(httpx.Auth):
    """Attach ``Authorization: <scheme> <token>`` while a token is present."""

    def __init__(self, context: AuthContext, scheme: str = "Token") -> None:
        self.context = context
        self.scheme = scheme

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        if self.context.token:
            request.headers["Authorization"] = f"{self.scheme} {self.context.token}"
        yield request


class AuthService:
    def __init__(self, api: ApiClient, context: AuthContext) -> None:
        self._api = api
        self.context = context

    async def login(self, username: str, password: str) -> LoginResponse:
        """Exchange credentials for a token and store it in the context.

        Raises:
            NetworkError: Bad credentials (400/401) or backend unreachable.
        """
        body = LoginRequest(username=username, password=password)
        data = await self._api.post(
            "/auth/login/", json=body.model_dump(), authenticated=False
        )
        result = LoginResponse.model_validate(data)
        self.context.set(result.token, result.username or username)
        logger.info("Logged in as %s", self.context.display_name)
        return result

    async def logout(self) -> None:
        """Invalidate the token server side, then always clear the session."""
        try:
            await self._api.post("/auth/logout/")
        except NetworkError as exc:
            logger.warning("Logout request failed: %s", exc.message)
        self.context.clear()
