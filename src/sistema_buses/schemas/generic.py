"""Generic schemas shared by every managed resource."""

from __future__ import annotations

from typing import Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")

RecordId = Union[int, str]


class RecordResponse(BaseModel):
    """Base for records read back from the backend.

    Extra fields (display helpers the backend adds, e.g. ``rol_nombre``)
    are kept so that they can be shown and searched.
    """

    id: RecordId

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Page(BaseModel, Generic[T]):
    """Paginated list envelope (``?page=`` style backends)."""

    count: int
    next: str | None = None
    previous: str | None = None
    results: list[T]
