"""
FILE: skilog/core/dates.py
PURPOSE: Local calendar date helpers (no timezone arithmetic)
EXPORTS:
  - to_local_iso(value) -> str
  - today_local_iso(now) -> str
  - days_ago_local_iso(days, now) -> str
  - normalize_iso_day(value) -> str
  - parse_iso_day(value) -> Optional[date]
  - as_local_day(now) -> date
  - start_of_week_monday(day) -> date
DEPENDENCIES:
  - datetime (stdlib)
NOTES:
  - Set dates are local wall-clock days. They are never parsed as UTC
    instants, so a 23:30 entry west of UTC stays on its own day.
  - Only the first 10 characters of an ISO-like string are the date.
  - parse_iso_day() never raises; malformed input returns None
"""

from datetime import date, datetime, timedelta
from typing import Optional, Union


def to_local_iso(value: Union[date, datetime]) -> str:
    """Format the local year/month/day fields as YYYY-MM-DD."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def today_local_iso(now: Optional[Union[date, datetime]] = None) -> str:
    """Canonical string for today's local date (or for `now` when given)."""
    return to_local_iso(now if now is not None else datetime.now())


def days_ago_local_iso(days: int, now: Optional[Union[date, datetime]] = None) -> str:
    base = as_local_day(now)
    return to_local_iso(base - timedelta(days=days))


def normalize_iso_day(value: str) -> str:
    """Strip any time-of-day suffix: '2026-02-22T23:30:00Z' -> '2026-02-22'."""
    return value[:10]


def parse_iso_day(value) -> Optional[date]:
    """
    Parse a canonical date string into a date.

    Args:
        value: 'YYYY-MM-DD', optionally followed by a time-of-day suffix

    Returns:
        The calendar date, or None when value isn't a valid date
    """
    if not isinstance(value, str):
        return None

    parts = normalize_iso_day(value).split("-")
    if len(parts) != 3:
        return None

    try:
        year, month, day = (int(part) for part in parts)
        return date(year, month, day)
    except ValueError:
        return None


def as_local_day(now: Optional[Union[date, datetime]] = None) -> date:
    """Reduce `now` (or the system clock) to its local calendar date."""
    if now is None:
        return datetime.now().date()
    if isinstance(now, datetime):
        return now.date()
    return now


def start_of_week_monday(day: date) -> date:
    return day - timedelta(days=day.weekday())
