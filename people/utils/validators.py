"""Input validation helpers."""

from __future__ import annotations

from typing import Optional

from people.core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field: str) -> str:
    """Return ``value`` untouched unless it is ``None`` or blank."""

    if value is None or not value.strip():
        raise ValidationError(f"{field.capitalize()} is required", field=field)
    return value


def matches_ignoring_case(left: Optional[str], right: Optional[str]) -> bool:
    """Compare character case only; ``"straße"`` and ``"strasse"`` differ."""

    if left is None or right is None:
        return False
    return left.lower() == right.lower()
