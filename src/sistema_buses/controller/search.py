"""Client-side search over the loaded records."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

R = TypeVar("R")

Matcher = Callable[[Any, str], bool]


def is_blank(query: str | None) -> bool:
    return query is None or not query.strip()


def field_value(record: Any, field: str) -> Any:
    """Read ``field`` from a pydantic record, a mapping or a plain object."""
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def _text_values(record: Any) -> Iterable[str]:
    if isinstance(record, BaseModel):
        values = record.model_dump().values()
    elif isinstance(record, Mapping):
        values = record.values()
    else:
        values = vars(record).values()
    return (v for v in values if isinstance(v, str))


def substring_matcher(*fields: str) -> Matcher:
    """Case-insensitive substring match over ``fields``.

    With no fields, every string-valued field of the record is searched.
    Missing or None fields never match.
    """

    def matches(record: Any, query: str) -> bool:
        needle = query.casefold()
        if fields:
            values = (field_value(record, f) for f in fields)
            haystack = (str(v) for v in values if v is not None)
        else:
            haystack = _text_values(record)
        return any(needle in value.casefold() for value in haystack)

    return matches


def filter_records(records: Iterable[R], query: str | None, matches: Matcher) -> list[R]:
    """Records satisfying ``matches``, in their original order.

    A blank query means no filter.
    """
    if is_blank(query):
        return list(records)
    return [record for record in records if matches(record, query)]
