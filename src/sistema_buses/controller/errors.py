"""Failure taxonomy of the list controller.

Every failure carries a user-facing ``message``; backend validation
details travel untouched in ``detail``.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from sistema_buses.client.errors import NetworkError, describe_payload
from sistema_buses.schemas.generic import RecordId


def _describe_validation(errors: list[dict[str, Any]]) -> str:
    parts = []
    for error in errors:
        loc = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(parts)


class ControllerError(Exception):
    def __init__(self, message: str, *, status: int | None = None, detail: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.detail = detail

    @classmethod
    def from_exception(cls, exc: Exception, fallback: str) -> "ControllerError":
        """Build the error from a network or local validation failure."""
        if isinstance(exc, NetworkError):
            return cls(
                describe_payload(exc.payload, fallback),
                status=exc.status,
                detail=exc.payload,
            )
        if isinstance(exc, ValidationError):
            errors = exc.errors(include_url=False)
            return cls(_describe_validation(errors) or fallback, detail=errors)
        return cls(fallback)


class LoadFailed(ControllerError):
    pass


class SubmitFailed(ControllerError):
    pass


class DeleteFailed(ControllerError):
    pass


class NotFound(ControllerError):
    """Edit target is not in the currently loaded list."""

    def __init__(self, record_id: RecordId, resource_name: str = "Registro") -> None:
        super().__init__(f"{resource_name} {record_id} no encontrado", detail={"id": record_id})
        self.record_id = record_id


class AlreadyOpen(ControllerError):
    """A create/edit session is already open."""


class ModalNotOpen(ControllerError):
    """submit() called without an open create/edit session."""
