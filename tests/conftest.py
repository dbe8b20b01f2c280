"""Shared test fixtures.

The REST collaborator is exercised against an in-process FastAPI stub of
the backend, mounted through ``httpx.ASGITransport``.
"""

from __future__ import annotations

import itertools
from typing import Any

import httpx
import pytest
from fastapi import APIRouter, Body, Depends, FastAPI, Header, HTTPException, Request
from fastapi.responses import JSONResponse

from sistema_buses.app import AdminApp, create_admin
from sistema_buses.client.auth import AuthContext
from sistema_buses.core.config import Settings

TEST_TOKEN = "test-token-123"
TEST_USERNAME = "admin"
TEST_PASSWORD = "secret"

COLLECTIONS = ("trabajadores", "buses", "roles", "asignaciones-rol", "asignaciones-bus")


class InjectedFailure(Exception):
    def __init__(self, status: int, payload: Any) -> None:
        self.status = status
        self.payload = payload


class FakeBackend:
    """In-memory stand-in for the REST backend.

    Usage:
        backend.seed("buses", patente="ABC-123", ...)
        backend.fail("DELETE", "buses", 500, {"detail": "boom"})
    """

    def __init__(self) -> None:
        self.collections: dict[str, dict[int, dict[str, Any]]] = {
            name: {} for name in COLLECTIONS
        }
        self.failures: dict[tuple[str, str], tuple[int, Any]] = {}
        self.requests: list[dict[str, Any]] = []
        self._ids = itertools.count(1)

    def seed(self, collection: str, **fields: Any) -> dict[str, Any]:
        item = {"id": next(self._ids), **fields}
        self.collections[collection][item["id"]] = item
        return item

    def fail(self, method: str, collection: str, status: int, payload: Any = None) -> None:
        self.failures[(method, collection)] = (status, payload)

    def check(self, method: str, collection: str) -> None:
        failure = self.failures.get((method, collection))
        if failure is not None:
            raise InjectedFailure(*failure)

    def next_id(self) -> int:
        return next(self._ids)


def require_token(authorization: str | None = Header(default=None)) -> None:
    if authorization != f"Token {TEST_TOKEN}":
        raise HTTPException(
            status_code=401,
            detail="Las credenciales de autenticación no se proveyeron.",
        )


def _collection_router(backend: FakeBackend, name: str) -> APIRouter:
    router = APIRouter(prefix=f"/{name}", dependencies=[Depends(require_token)])
    store = backend.collections[name]

    def get_or_404(item_id: int) -> dict[str, Any]:
        if item_id not in store:
            raise HTTPException(status_code=404, detail="No encontrado.")
        return store[item_id]

    @router.get("/")
    def list_items(search: str | None = None) -> list[dict[str, Any]]:
        backend.check("GET", name)
        items = list(store.values())
        if search:
            needle = search.lower()
            items = [
                item for item in items
                if any(isinstance(v, str) and needle in v.lower() for v in item.values())
            ]
        return items

    @router.post("/", status_code=201)
    def create_item(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
        backend.check("POST", name)
        item = {"id": backend.next_id(), **payload}
        store[item["id"]] = item
        return item

    @router.get("/{item_id}/")
    def get_item(item_id: int) -> dict[str, Any]:
        backend.check("GET", name)
        return get_or_404(item_id)

    @router.put("/{item_id}/")
    def update_item(item_id: int, payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
        backend.check("PUT", name)
        get_or_404(item_id)
        store[item_id] = {"id": item_id, **payload}
        return store[item_id]

    @router.delete("/{item_id}/", status_code=204)
    def delete_item(item_id: int) -> None:
        backend.check("DELETE", name)
        get_or_404(item_id)
        del store[item_id]

    return router


def create_backend_app(backend: FakeBackend) -> FastAPI:
    app = FastAPI()

    @app.exception_handler(InjectedFailure)
    async def injected_failure_handler(request: Request, exc: InjectedFailure) -> JSONResponse:
        return JSONResponse(status_code=exc.status, content=exc.payload)

    @app.middleware("http")
    async def record_request(request: Request, call_next):
        backend.requests.append(
            {
                "method": request.method,
                "path": request.url.path,
                "query": str(request.url.query),
                "headers": dict(request.headers),
            }
        )
        return await call_next(request)

    @app.post("/api/auth/login/")
    def login(payload: dict[str, Any] = Body(...)) -> Any:
        if payload.get("username") == TEST_USERNAME and payload.get("password") == TEST_PASSWORD:
            return {"token": TEST_TOKEN, "username": TEST_USERNAME}
        return JSONResponse(
            status_code=400,
            content={"non_field_errors": ["Credenciales inválidas"]},
        )

    @app.post("/api/auth/logout/", dependencies=[Depends(require_token)])
    def logout() -> dict[str, str]:
        return {"detail": "Sesión cerrada"}

    for name in COLLECTIONS:
        app.include_router(_collection_router(backend, name), prefix="/api")

    return app


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return Settings(api_base_url="http://testserver/api", log_level="DEBUG")


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def backend_app(backend: FakeBackend) -> FastAPI:
    return create_backend_app(backend)


@pytest.fixture
def transport(backend_app: FastAPI) -> httpx.ASGITransport:
    return httpx.ASGITransport(app=backend_app)


@pytest.fixture
def auth_context() -> AuthContext:
    """Context already holding a valid token."""
    return AuthContext(token=TEST_TOKEN, username=TEST_USERNAME)


@pytest.fixture
async def admin(
    anyio_backend: str,
    settings: Settings,
    auth_context: AuthContext,
    transport: httpx.ASGITransport,
) -> AdminApp:
    app = create_admin(settings, auth_context=auth_context, transport=transport)
    yield app
    await app.aclose()


@pytest.fixture
def credentials() -> tuple[str, str]:
    return TEST_USERNAME, TEST_PASSWORD
