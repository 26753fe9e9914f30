"""Search and categorical filter predicates for the record tables."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence, TypeVar

from .constants import ALL

T = TypeVar("T")


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).casefold()


def matches_query(record: Any, query: str, fields: Sequence[str]) -> bool:
    """Case-insensitive substring match of ``query`` against any of ``fields``."""

    if not query:
        return True
    needle = query.casefold()
    return any(needle in _text(getattr(record, field, None)) for field in fields)


def is_active_filter(value: Optional[str]) -> bool:
    return bool(value) and value.casefold() != ALL


def matches_filters(record: Any, filters: Optional[Mapping[str, Optional[str]]]) -> bool:
    """Exact, case-insensitive match for every active categorical filter."""

    for field, value in (filters or {}).items():
        if not is_active_filter(value):
            continue
        if _text(getattr(record, field, None)) != value.casefold():
            return False
    return True


def filter_records(
    records: Iterable[T],
    query: str = "",
    fields: Sequence[str] = (),
    filters: Optional[Mapping[str, Optional[str]]] = None,
) -> list[T]:
    """Return the visible subset of ``records`` in their original order."""

    return [
        record
        for record in records
        if matches_query(record, query, fields) and matches_filters(record, filters)
    ]


def distinct_values(records: Iterable[Any], field: str, defaults: Sequence[str] = ()) -> list[str]:
    """Return sorted, case-insensitively unique values of ``field`` merged with ``defaults``."""

    values: dict[str, str] = {}
    for value in list(defaults) + [getattr(record, field, None) for record in records]:
        if value is None:
            continue
        cleaned = str(value).strip()
        if not cleaned:
            continue
        values.setdefault(cleaned.casefold(), cleaned)
    return [values[key] for key in sorted(values)]


__all__ = ["distinct_values", "filter_records", "is_active_filter", "matches_filters", "matches_query"]
