"""Required-field checks shared by every record manager."""

from __future__ import annotations

import math
from typing import Any, Mapping, Sequence


class ValidationError(ValueError):
    """Raised when user input is rejected; the store is left unchanged."""


def is_blank(value: Any) -> bool:
    """Return ``True`` for values a form would treat as "not filled in".

    ``None``, empty or whitespace-only strings, zero and empty collections all
    count as blank. ``False`` is not a form value and is treated as filled.
    """

    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (list, tuple, dict, set)):
        return not value
    return False


def missing_fields(values: Mapping[str, Any], required: Sequence[str]) -> list[str]:
    return [name for name in required if is_blank(values.get(name))]


def require_fields(
    values: Mapping[str, Any],
    required: Sequence[str],
    *,
    message: str = "Please fill in all required fields.",
) -> None:
    """Raise :class:`ValidationError` if any of ``required`` is blank in ``values``."""

    missing = missing_fields(values, required)
    if missing:
        raise ValidationError(message)


def require_number(value: Any, field: str, *, minimum: float | None = None) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValidationError(f"{field.replace('_', ' ').capitalize()} must be a number.")
    if minimum is not None and value < minimum:
        raise ValidationError(f"{field.replace('_', ' ').capitalize()} cannot be below {minimum:g}.")


__all__ = ["ValidationError", "is_blank", "missing_fields", "require_fields", "require_number"]
