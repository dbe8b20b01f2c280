"""Errors raised by the REST collaborator."""

from __future__ import annotations

import json
from typing import Any

GENERIC_ERROR_MESSAGE = "Error de comunicación con el servidor"

# Keys the backend uses for human-readable error text, in order of preference
_MESSAGE_KEYS = ("detail", "message", "non_field_errors", "error")


def describe_payload(payload: Any, fallback: str = GENERIC_ERROR_MESSAGE) -> str:
    """Extract a user-facing message from an error payload.

    Field-level validation dicts are passed through as JSON text; the
    caller does not interpret them.
    """
    if payload is None or payload == "" or payload == {}:
        return fallback
    if isinstance(payload, str):
        return payload
    if isinstance(payload, dict):
        for key in _MESSAGE_KEYS:
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
            if isinstance(value, list) and value and all(isinstance(v, str) for v in value):
                return " ".join(value)
    try:
        return json.dumps(payload, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return fallback


class NetworkError(Exception):
    """A request to the backend failed.

    Args:
        status: HTTP status code, or None when no response was received.
        payload: Decoded response body (JSON when possible, else text).
        method: HTTP method of the failed request.
        url: URL of the failed request.
    """

    def __init__(
        self,
        status: int | None,
        payload: Any = None,
        *,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        self.status = status
        self.payload = payload
        self.method = method
        self.url = url
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return describe_payload(self.payload)

    @property
    def is_unauthorized(self) -> bool:
        return self.status == 401

    def __repr__(self) -> str:
        return f"NetworkError(status={self.status!r}, payload={self.payload!r})"
