"""Generic REST operation set for one resource."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter

from sistema_buses.client.session import ApiClient
from sistema_buses.schemas.generic import Page, RecordId

R = TypeVar("R", bound=BaseModel)


class ResourceClient(Generic[R]):
    """List/get/create/update/delete endpoints of a single resource.

    Args:
        api: Shared JSON client.
        prefix: Collection path with trailing slash (e.g. "/buses/").
        response_schema: Pydantic schema of records read back.
        create_schema: Pydantic schema validating POST and PUT bodies.
        resource_name: Human-readable name used in logs.

    Every method raises ``NetworkError`` when the backend call fails.
    ``create`` and ``update`` raise pydantic ``ValidationError`` before any
    request is sent when the payload does not fit ``create_schema``.
    """

    def __init__(
        self,
        api: ApiClient,
        *,
        prefix: str,
        response_schema: type[R],
        create_schema: type[BaseModel],
        resource_name: str,
    ) -> None:
        if not prefix.startswith("/") or not prefix.endswith("/"):
            raise ValueError(f"prefix must start and end with '/', got {prefix!r}")
        self._api = api
        self.prefix = prefix
        self.response_schema = response_schema
        self.create_schema = create_schema
        self.resource_name = resource_name
        self._list_adapter = TypeAdapter(list[response_schema])
        self._page_schema = Page[response_schema]

    def item_path(self, item_id: RecordId) -> str:
        return f"{self.prefix}{item_id}/"

    def dump_payload(self, data: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
        """Validate ``data`` against the write schema and return the JSON body."""
        if isinstance(data, BaseModel) and not isinstance(data, self.create_schema):
            data = data.model_dump(by_alias=True)
        payload = self.create_schema.model_validate(data)
        return payload.model_dump(mode="json", by_alias=True)

    def _parse_list(self, data: Any) -> list[R]:
        if isinstance(data, dict):
            return self._page_schema.model_validate(data).results
        return self._list_adapter.validate_python(data or [])

    async def fetch_all(self) -> list[R]:
        data = await self._api.get(self.prefix)
        return self._parse_list(data)

    async def search(self, query: str) -> list[R]:
        """Server-side search (``?search=``), for backends that support it."""
        data = await self._api.get(self.prefix, params={"search": query})
        return self._parse_list(data)

    async def get(self, item_id: RecordId) -> R:
        data = await self._api.get(self.item_path(item_id))
        return self.response_schema.model_validate(data)

    async def create(self, data: Mapping[str, Any] | BaseModel) -> R:
        body = await self._api.post(self.prefix, json=self.dump_payload(data))
        return self.response_schema.model_validate(body)

    async def update(self, item_id: RecordId, data: Mapping[str, Any] | BaseModel) -> R:
        """Replace the record (full PUT, no partial patch)."""
        body = await self._api.put(self.item_path(item_id), json=self.dump_payload(data))
        return self.response_schema.model_validate(body)

    async def remove(self, item_id: RecordId) -> None:
        await self._api.delete(self.item_path(item_id))

    def __repr__(self) -> str:
        return f"ResourceClient({self.resource_name!r}, prefix={self.prefix!r})"
