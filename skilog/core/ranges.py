"""
FILE: skilog/core/ranges.py
PURPOSE: Select the sets that fall inside a named or custom time window
EXPORTS:
  - RangeKind (enum)
  - filter_by_date_range(items, range_kind, custom_start, custom_end, now) -> list
DEPENDENCIES:
  - skilog.core.dates (local date helpers)
  - skilog.core.constants (range keys)
  - skilog.core.exceptions (InvalidInputError)
NOTES:
  - Never mutates input; result keeps the original relative order
  - Comparisons are on local calendar days only, never time-of-day
  - Season windows are pass-through: callers pre-scope to the active season
  - Custom window with start > end is empty, not an error
"""

import logging
from datetime import date, datetime, timedelta
from enum import Enum
from typing import List, Optional, Sequence, TypeVar, Union

from .constants import (
    RANGE_DAY,
    RANGE_WEEK,
    RANGE_MONTH,
    RANGE_SEASON,
    RANGE_CUSTOM,
    RANGE_ALL,
    VALID_RANGES,
    DAYS_PER_WEEK,
)
from .dates import as_local_day, normalize_iso_day, parse_iso_day, to_local_iso
from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RangeKind(str, Enum):
    DAY = RANGE_DAY
    WEEK = RANGE_WEEK
    MONTH = RANGE_MONTH
    SEASON = RANGE_SEASON
    CUSTOM = RANGE_CUSTOM
    ALL = RANGE_ALL


def _coerce_range(range_kind: Union[RangeKind, str, None]) -> Optional[RangeKind]:
    if range_kind is None or isinstance(range_kind, RangeKind):
        return range_kind
    try:
        return RangeKind(range_kind)
    except ValueError:
        raise InvalidInputError(
            f"Invalid range '{range_kind}'. Must be one of: {', '.join(VALID_RANGES)}"
        ) from None


def filter_by_date_range(
    items: Sequence[T],
    range_kind: Union[RangeKind, str, None],
    custom_start: Optional[str] = None,
    custom_end: Optional[str] = None,
    now: Optional[Union[date, datetime]] = None,
) -> List[T]:
    """
    Filter dated items to a time window.

    Args:
        items: Objects with a `date` attribute ('YYYY-MM-DD')
        range_kind: day, week (trailing 7 days), month, season, custom, all
        custom_start: Inclusive start for custom windows
        custom_end: Inclusive end for custom windows
        now: Reference instant (defaults to the system clock)

    Returns:
        New list with the matching items in their original order

    Raises:
        InvalidInputError: If range_kind isn't a known window
    """
    kind = _coerce_range(range_kind)
    today = as_local_day(now)

    if kind in (None, RangeKind.ALL, RangeKind.SEASON):
        return list(items)

    if kind is RangeKind.DAY:
        today_iso = to_local_iso(today)
        return [item for item in items if normalize_iso_day(item.date) == today_iso]

    if kind is RangeKind.WEEK:
        start = today - timedelta(days=DAYS_PER_WEEK - 1)
        return [item for item in items if _day_between(item.date, start, today)]

    if kind is RangeKind.MONTH:
        return [item for item in items if _same_month(item.date, today)]

    # Custom window
    if not custom_start or not custom_end:
        return list(items)

    start_iso = normalize_iso_day(custom_start)
    end_iso = normalize_iso_day(custom_end)
    if start_iso > end_iso:
        return []

    # Zero-padded canonical strings compare correctly as text
    return [
        item
        for item in items
        if parse_iso_day(item.date) is not None
        and start_iso <= normalize_iso_day(item.date) <= end_iso
    ]


def _day_between(value: str, start: date, end: date) -> bool:
    day = parse_iso_day(value)
    if day is None:
        logger.debug("Skipping malformed date %r", value)
        return False
    return start <= day <= end


def _same_month(value: str, today: date) -> bool:
    day = parse_iso_day(value)
    if day is None:
        logger.debug("Skipping malformed date %r", value)
        return False
    return (day.year, day.month) == (today.year, today.month)
