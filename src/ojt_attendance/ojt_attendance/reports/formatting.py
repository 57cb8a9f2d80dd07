from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.constants import TIME_PLACEHOLDER


def format_time(value: Optional[datetime]) -> str:
    return value.strftime("%I:%M %p") if value is not None else TIME_PLACEHOLDER


def format_date(value: date) -> str:
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def format_hours(value: Decimal) -> str:
    return f"{value:.2f}"
