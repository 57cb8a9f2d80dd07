from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_year_month


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_positive_int(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number") from None
    if number < 1:
        raise ValidationError(f"{field_name} must be at least 1")
    return number


def optional_year_month(value: Optional[str]) -> Optional[tuple[int, int]]:
    """Validate an optional YYYY-MM selector."""
    if value is None or not value.strip():
        return None
    try:
        return parse_year_month(value)
    except ValueError:
        raise ValidationError(f"Invalid month {value!r}, expected YYYY-MM") from None
