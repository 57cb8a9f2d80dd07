from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo
from typing import Any, Optional
from zoneinfo import ZoneInfo


def parse_year_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM string into (year, month)."""
    parsed = datetime.strptime(value.strip(), "%Y-%m")
    return parsed.year, parsed.month


def load_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """Resolve an IANA name; empty means the server's local time."""
    if not name:
        return None
    return ZoneInfo(name)


def now_local(tz: Optional[tzinfo] = None) -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz)


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def today_local(tz: Optional[tzinfo] = None) -> date:
    return now_local(tz).date()


def to_local(value: Any, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Coerce a stored timestamp into the viewer's timezone.

    Accepts datetime (aware is converted, naive is taken as already local),
    epoch milliseconds (int/float or an all-digit string) and ISO-8601 strings.
    Returns None for anything else. Without `tz` the result is naive server
    local time, so values from mixed sources always compare.
    """

    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=tz) if tz else value
        return value.astimezone(tz) if tz else value.astimezone().replace(tzinfo=None)

    if isinstance(value, (int, float)):
        try:
            return _from_epoch_ms(float(value), tz)
        except (OverflowError, OSError, ValueError):
            return None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.isdigit():
            return to_local(int(text), tz)
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return to_local(datetime.fromisoformat(text), tz)
        except ValueError:
            return None

    return None


def _from_epoch_ms(ms: float, tz: Optional[tzinfo]) -> datetime:
    utc = datetime.fromtimestamp(ms / 1000.0, timezone.utc)
    return utc.astimezone(tz) if tz else utc.astimezone().replace(tzinfo=None)
