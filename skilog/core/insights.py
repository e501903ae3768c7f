"""
FILE: skilog/core/insights.py
PURPOSE: Aggregate statistics over a list of training sets
EXPORTS:
  - current_streak(sets, now) -> int
  - weekly_stats(sets, now) -> WeeklyStats
  - weekly_chart_bars(sets, now) -> WeeklyChartBars
  - monthly_training_days(sets, now) -> int
  - monthly_progress(sets, now, months, include_baseline) -> List[MonthlyProgressItem]
  - event_breakdown(sets) -> List[EventBreakdownItem]
  - most_practiced_event(sets) -> MostPracticedEvent
  - format_delta_text(delta_percent, suffix) -> str
DEPENDENCIES:
  - skilog.core.dates (local date helpers)
  - skilog.core.numbers (round_half_up)
  - skilog.core.models (SkiSet, Event)
NOTES:
  - Callers pass sets already scoped to a season or range
  - Pure functions; `now` defaults to the system clock, tests always pass it
  - Undefined comparisons are None, never inf/NaN
  - Sets with malformed dates are left out of day-based aggregates
"""

import calendar
import logging
from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple, Union

from .constants import DAYS_PER_WEEK, DEFAULT_MONTHS, NO_VALUE, WEEKDAY_LABELS
from .dates import as_local_day, parse_iso_day, start_of_week_monday
from .models import Event, SkiSet
from .numbers import round_half_up

logger = logging.getLogger(__name__)

Now = Optional[Union[date, datetime]]


@dataclass(frozen=True)
class DailyCount:
    label: str
    count: int


@dataclass(frozen=True)
class WeeklyStats:
    avg_per_training_day: float
    delta_percent: Optional[float]
    total_this_week: int
    daily_counts: Tuple[DailyCount, ...]


@dataclass(frozen=True)
class ChartBar:
    day: str
    count: int
    height_percent: float


@dataclass(frozen=True)
class WeeklyChartBars:
    bars: Tuple[ChartBar, ...]
    total_text: str
    delta_text: str


@dataclass(frozen=True)
class MonthlyProgressItem:
    month_key: str
    month_label: str
    training_days: int
    total_sets: int
    delta_percent: Optional[int]


@dataclass(frozen=True)
class EventBreakdownItem:
    event: Event
    count: int
    percentage: int


@dataclass(frozen=True)
class MostPracticedEvent:
    event: Event
    count: int


def _set_days(sets: Iterable[SkiSet]) -> List[Tuple[SkiSet, date]]:
    """Pair each set with its parsed day, dropping malformed dates."""
    pairs = []
    for ski_set in sets:
        day = parse_iso_day(ski_set.date)
        if day is None:
            logger.debug("Set %s has malformed date %r; skipped", ski_set.id, ski_set.date)
            continue
        pairs.append((ski_set, day))
    return pairs


def _average_per_active_day(days: Sequence[date]) -> float:
    active_days = len(set(days))
    if active_days == 0:
        return 0.0
    return len(days) / active_days


def current_streak(sets: Sequence[SkiSet], now: Now = None) -> int:
    """
    Count consecutive active days ending today (or yesterday).

    A streak survives a day with nothing logged *yet* today, but resets once
    a whole day is skipped: no set today and none yesterday gives 0.
    """
    active: Set[date] = {day for _, day in _set_days(sets)}
    today = as_local_day(now)
    yesterday = today - timedelta(days=1)

    if today in active:
        cursor = today
    elif yesterday in active:
        cursor = yesterday
    else:
        return 0

    streak = 0
    while cursor in active:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def weekly_stats(sets: Sequence[SkiSet], now: Now = None) -> WeeklyStats:
    """
    Compare this Monday-start week against the previous one.

    Returns:
        WeeklyStats with average sets per training day this week, percent
        change vs last week's average (None when last week's average is 0),
        total sets this week and per-weekday counts for charting
    """
    start = start_of_week_monday(as_local_day(now))
    end = start + timedelta(days=DAYS_PER_WEEK - 1)
    last_start = start - timedelta(days=DAYS_PER_WEEK)
    last_end = end - timedelta(days=DAYS_PER_WEEK)

    pairs = _set_days(sets)
    this_week = [day for _, day in pairs if start <= day <= end]
    last_week = [day for _, day in pairs if last_start <= day <= last_end]

    avg_this_week = _average_per_active_day(this_week)
    avg_last_week = _average_per_active_day(last_week)

    if avg_last_week == 0:
        delta_percent = None
    else:
        delta_percent = (avg_this_week - avg_last_week) / avg_last_week * 100

    per_day = Counter(this_week)
    daily_counts = tuple(
        DailyCount(label=WEEKDAY_LABELS[offset], count=per_day[start + timedelta(days=offset)])
        for offset in range(DAYS_PER_WEEK)
    )

    return WeeklyStats(
        avg_per_training_day=avg_this_week,
        delta_percent=delta_percent,
        total_this_week=len(this_week),
        daily_counts=daily_counts,
    )


def format_delta_text(delta_percent: Optional[float], suffix: str = "from last week") -> str:
    """Arrow + whole percent, e.g. '↑ 25% from last week'; NO_VALUE when undefined."""
    if delta_percent is None:
        return NO_VALUE
    arrow = "↑" if delta_percent > 0 else "↓"
    return f"{arrow} {abs(round_half_up(delta_percent))}% {suffix}"


def weekly_chart_bars(sets: Sequence[SkiSet], now: Now = None) -> WeeklyChartBars:
    """Adapt weekly_stats() into bar heights relative to the busiest day."""
    stats = weekly_stats(sets, now)
    tallest = max([day.count for day in stats.daily_counts] + [1])

    bars = tuple(
        ChartBar(day=day.label, count=day.count, height_percent=day.count / tallest * 100)
        for day in stats.daily_counts
    )
    return WeeklyChartBars(
        bars=bars,
        total_text=f"Total this week: {stats.total_this_week} sets",
        delta_text=format_delta_text(stats.delta_percent),
    )


def monthly_training_days(sets: Sequence[SkiSet], now: Now = None) -> int:
    """Number of distinct days with at least one set in now's calendar month."""
    today = as_local_day(now)
    return len({
        day for _, day in _set_days(sets)
        if (day.year, day.month) == (today.year, today.month)
    })


def _shift_month(year: int, month: int, back: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) - back
    return index // 12, index % 12 + 1


def _month_delta(current: int, previous: int) -> int:
    # A previous month of 0 or 1 sets is treated as a baseline of 1
    if previous <= 1:
        return round_half_up(current / max(previous, 1) * 100)
    return round_half_up((current - previous) / previous * 100)


def monthly_progress(
    sets: Sequence[SkiSet],
    now: Now = None,
    months: int = DEFAULT_MONTHS,
    include_baseline: bool = False,
) -> List[MonthlyProgressItem]:
    """
    Per-month training days and set totals, newest month first.

    Args:
        sets: Sets to aggregate (not range filtered)
        now: Reference instant; its month is the newest reported
        months: Number of calendar months to report
        include_baseline: Also return the extra trailing month that only
            serves as the oldest month's comparison baseline

    Returns:
        List of MonthlyProgressItem. Each delta compares a month's total with
        the month before it; the baseline month has no predecessor (None).
    """
    if months <= 0:
        return []

    today = as_local_day(now)
    keys = [_shift_month(today.year, today.month, back) for back in range(months + 1)]

    by_month: Dict[Tuple[int, int], List[date]] = {key: [] for key in keys}
    for _, day in _set_days(sets):
        bucket = by_month.get((day.year, day.month))
        if bucket is not None:
            bucket.append(day)

    items = []
    for index, (year, month) in enumerate(keys):
        days = by_month[(year, month)]
        if index + 1 < len(keys):
            delta = _month_delta(len(days), len(by_month[keys[index + 1]]))
        else:
            delta = None

        items.append(MonthlyProgressItem(
            month_key=f"{year:04d}-{month:02d}",
            month_label=f"{calendar.month_name[month]} {year}",
            training_days=len(set(days)),
            total_sets=len(days),
            delta_percent=delta,
        ))

    return items if include_baseline else items[:months]


def event_breakdown(sets: Sequence[SkiSet]) -> List[EventBreakdownItem]:
    """
    Count and share of each event, in Event enumeration order.

    Percentages are rounded independently, so they may not sum to 100.
    """
    counts = Counter(ski_set.event for ski_set in sets)
    total = len(sets)

    return [
        EventBreakdownItem(
            event=event,
            count=counts[event],
            percentage=0 if total == 0 else round_half_up(counts[event] / total * 100),
        )
        for event in Event
    ]


def most_practiced_event(sets: Sequence[SkiSet]) -> MostPracticedEvent:
    """Event with the strictly highest count; ties go to the earlier event."""
    best: Optional[EventBreakdownItem] = None
    for item in event_breakdown(sets):
        if best is None or item.count > best.count:
            best = item
    return MostPracticedEvent(event=best.event, count=best.count)
