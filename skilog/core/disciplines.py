"""
FILE: skilog/core/disciplines.py
PURPOSE: Per-discipline aggregates for jump and tricks sets
EXPORTS:
  - JumpStats (dataclass)
  - TricksStats (dataclass)
  - jump_stats(sets, now, history) -> JumpStats
  - tricks_stats(sets) -> TricksStats
DEPENDENCIES:
  - skilog.core.constants (sub-event, cuts and trick type keys)
  - skilog.core.dates (local date helpers)
  - skilog.core.numbers (parse_number, round_half_up)
  - skilog.core.models (SkiSet, Event)
NOTES:
  - Callers pass sets already scoped to a range; other events are ignored
  - A jump set without a sub-event counts as a jump
  - Distances that are missing or not finite are left out of distance stats
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional, Sequence, Union

from .constants import (
    CUTS_TYPE_OPEN,
    CUTS_TYPE_PASS,
    SUB_EVENT_CUTS,
    SUB_EVENT_JUMP,
    TRICK_TYPE_HANDS,
    TRICK_TYPE_TOES,
)
from .dates import as_local_day, parse_iso_day
from .models import Event, SkiSet
from .numbers import parse_number, round_half_up


@dataclass(frozen=True)
class JumpStats:
    total_sets: int
    best_distance: Optional[float]
    average_distance: Optional[float]
    average_delta_vs_last_month: Optional[float]
    jump_percent: int
    cuts_percent: int
    total_made: int
    total_passed: int
    open_cuts_count: int
    cut_pass_count: int


@dataclass(frozen=True)
class TricksStats:
    total_sets: int
    total_minutes: int
    hands_count: int
    toes_count: int
    hands_percent: int
    toes_percent: int

    @property
    def total_hours_text(self) -> str:
        # Tenths of an hour, rounded half up (15 min -> "0.3")
        return f"{round_half_up(self.total_minutes / 6) / 10:.1f}"


def _sub_event(ski_set: SkiSet) -> str:
    return ski_set.data.sub_event or SUB_EVENT_JUMP


def _jumps(sets: Sequence[SkiSet]) -> List[SkiSet]:
    return [
        ski_set for ski_set in sets
        if ski_set.event is Event.JUMP and _sub_event(ski_set) == SUB_EVENT_JUMP
    ]


def _distances(sets: Sequence[SkiSet]) -> List[float]:
    values = (parse_number(ski_set.data.distance) for ski_set in sets)
    return [value for value in values if value is not None]


def _mean(values: Sequence[float]) -> Optional[float]:
    return sum(values) / len(values) if values else None


def _share(count: int, total: int) -> int:
    return 0 if total == 0 else round_half_up(count / total * 100)


def _in_month(ski_set: SkiSet, year: int, month: int) -> bool:
    day = parse_iso_day(ski_set.date)
    return day is not None and (day.year, day.month) == (year, month)


def jump_stats(
    sets: Sequence[SkiSet],
    now: Optional[Union[date, datetime]] = None,
    history: Optional[Sequence[SkiSet]] = None,
) -> JumpStats:
    """
    Jump and cuts totals for a range of sets.

    Args:
        sets: Range-filtered sets
        now: Reference instant for the month comparison
        history: Unfiltered sets for the month comparison (defaults to sets)

    Returns:
        JumpStats. Distance figures are None without any recorded distance;
        the month delta is None unless both this and last month have one.
    """
    selected = [ski_set for ski_set in sets if ski_set.event is Event.JUMP]
    jumps = _jumps(selected)
    cuts = [ski_set for ski_set in selected if _sub_event(ski_set) == SUB_EVENT_CUTS]
    distances = _distances(jumps)

    today = as_local_day(now)
    last_year, last_month = (today.year, today.month - 1) if today.month > 1 else (today.year - 1, 12)
    all_jumps = _jumps(history if history is not None else sets)
    this_month_avg = _mean(_distances([s for s in all_jumps if _in_month(s, today.year, today.month)]))
    last_month_avg = _mean(_distances([s for s in all_jumps if _in_month(s, last_year, last_month)]))

    if this_month_avg is None or last_month_avg is None:
        delta = None
    else:
        delta = this_month_avg - last_month_avg

    return JumpStats(
        total_sets=len(selected),
        best_distance=max(distances) if distances else None,
        average_distance=_mean(distances),
        average_delta_vs_last_month=delta,
        jump_percent=_share(len(jumps), len(selected)),
        cuts_percent=_share(len(cuts), len(selected)),
        total_made=sum(ski_set.data.made or 0 for ski_set in jumps),
        total_passed=sum(ski_set.data.passed or 0 for ski_set in jumps),
        open_cuts_count=sum(1 for ski_set in cuts if ski_set.data.cuts_type == CUTS_TYPE_OPEN),
        cut_pass_count=sum(1 for ski_set in cuts if ski_set.data.cuts_type == CUTS_TYPE_PASS),
    )


def tricks_stats(sets: Sequence[SkiSet]) -> TricksStats:
    """Time on the water and the hands/toes split for tricks sets."""
    tricks = [ski_set for ski_set in sets if ski_set.event is Event.TRICKS]
    hands = sum(1 for ski_set in tricks if ski_set.data.trick_type == TRICK_TYPE_HANDS)
    toes = sum(1 for ski_set in tricks if ski_set.data.trick_type == TRICK_TYPE_TOES)

    return TricksStats(
        total_sets=len(tricks),
        total_minutes=sum(ski_set.data.duration or 0 for ski_set in tricks),
        hands_count=hands,
        toes_count=toes,
        hands_percent=_share(hands, hands + toes),
        toes_percent=_share(toes, hands + toes),
    )
