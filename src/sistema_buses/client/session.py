from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any
from uuid import uuid4

import httpx

from sistema_buses.client.auth import AuthContext, TokenAuth
from sistema_buses.client.errors import NetworkError
from sistema_buses.core.config import Settings

logger = logging.getLogger(__name__)


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def init_http_client(
    settings: Settings,
    auth_context: AuthContext,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    on_unauthorized: Callable[[], None] | None = None,
) -> httpx.AsyncClient:
    """Build the shared AsyncClient used by every service.

    Each request gets a request id header, and a 401 response tears the
    session down (clears ``auth_context`` and calls ``on_unauthorized``).
    """
    header_name = settings.request_id_header

    async def attach_request_id(request: httpx.Request) -> None:
        if not request.headers.get(header_name):
            request.headers[header_name] = str(uuid4())
        logger.debug("%s %s [%s]", request.method, request.url, request.headers[header_name])

    async def teardown_on_unauthorized(response: httpx.Response) -> None:
        # Only authenticated calls end the session; a failed login is not a teardown
        if response.status_code != 401 or "Authorization" not in response.request.headers:
            return
        logger.warning("Backend rejected credentials for %s", response.request.url)
        auth_context.clear()
        if on_unauthorized is not None:
            on_unauthorized()

    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        auth=TokenAuth(auth_context, scheme=settings.auth_scheme),
        headers={"Content-Type": "application/json"},
        timeout=settings.request_timeout,
        transport=transport,
        event_hooks={
            "request": [attach_request_id],
            "response": [teardown_on_unauthorized],
        },
    )


class ApiClient:
    """Thin JSON wrapper over the AsyncClient that raises NetworkError."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        self.http = http

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        authenticated: bool = True,
    ) -> Any:
        extra: dict[str, Any] = {} if authenticated else {"auth": None}
        try:
            response = await self.http.request(method, path, json=json, params=params, **extra)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise NetworkError(None, str(exc) or type(exc).__name__, method=method, url=path) from exc

        if response.is_error:
            payload = _decode(response)
            logger.warning("%s %s returned %s", method, path, response.status_code)
            raise NetworkError(response.status_code, payload, method=method, url=path)
        return _decode(response)

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Any:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> Any:
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self.request("DELETE", path, **kwargs)

    async def aclose(self) -> None:
        await self.http.aclose()
