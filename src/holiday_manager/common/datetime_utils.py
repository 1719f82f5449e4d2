from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DATE_FORMAT
from ..core.exceptions import InvalidDateError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date.

    The result is a plain calendar date, so no local timezone offset can move
    it to the previous or next day.
    """
    v = (value or "").strip()
    try:
        return datetime.strptime(v, DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateError(f"Invalid date {value!r} (expected YYYY-MM-DD)")


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def days_between(later: date, earlier: date) -> int:
    """Whole days from ``earlier`` to ``later`` (negative when reversed)."""
    return (later - earlier).days
