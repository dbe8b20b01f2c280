from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel


def writable_fields(create_schema: type[BaseModel]) -> list[str]:
    """Wire names of the fields a write schema accepts."""
    return [field.alias or name for name, field in create_schema.model_fields.items()]


def form_projection(create_schema: type[BaseModel]) -> Callable[[BaseModel], dict[str, Any]]:
    """Build a record -> edit form function keeping only writable fields.

    Read-only display fields (``rol_nombre``, ``turno_display``...) are
    dropped so that the form can be sent back as a full PUT.
    """
    keys = writable_fields(create_schema)

    def project(record: BaseModel) -> dict[str, Any]:
        data = record.model_dump(mode="json", by_alias=True)
        return {key: data[key] for key in keys if key in data}

    return project
