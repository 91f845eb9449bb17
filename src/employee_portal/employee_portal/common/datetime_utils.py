from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

TimestampLike = Union[datetime, str, int, float, None]

_DATE_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Epoch values below this are seconds, above it milliseconds (2100-01-01).
_EPOCH_SECONDS_CUTOFF = 4102444800


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def parse_timestamp(value: TimestampLike) -> Optional[datetime]:
    """Coerce a stored timestamp into a datetime.

    Accepts datetimes, ISO-8601 strings (a trailing ``Z`` is read as UTC) and
    epoch numbers. Returns None for anything missing or unparsable.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, (int, float)):
        seconds = value if value < _EPOCH_SECONDS_CUTOFF else value / 1000
        try:
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


def to_date(value: Union[date, TimestampLike]) -> Optional[date]:
    """Calendar date of a date/timestamp, in local time for aware values."""
    if isinstance(value, datetime):
        return value.astimezone().date() if value.tzinfo else value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and _DATE_KEY_RE.match(value.strip()):
        try:
            return parse_iso_date(value.strip())
        except ValueError:
            return None
    parsed = parse_timestamp(value)
    if parsed is None:
        return None
    return to_date(parsed)


def get_date_key(date_override: Optional[str] = None, *, today: Optional[date] = None) -> str:
    """Use the caller's local YYYY-MM-DD when given, else the server's today."""
    if date_override and _DATE_KEY_RE.match(date_override.strip()):
        return date_override.strip()
    return (today or today_local()).strftime("%Y-%m-%d")


def get_yesterday_date_string(date_str: str) -> str:
    """Day before a YYYY-MM-DD key (overnight shifts)."""
    return (parse_iso_date(date_str) - timedelta(days=1)).strftime("%Y-%m-%d")


def days_in_previous_month(d: date) -> int:
    return (d.replace(day=1) - timedelta(days=1)).day
