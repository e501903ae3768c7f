"""
FILE: skilog/core/slalom.py
PURPOSE: Slalom scoring, best-result ranking, speed steps and result display
EXPORTS:
  - rope_index(rope_length) -> int
  - slalom_score(rope_length, buoys) -> float
  - select_best_set(sets) -> Optional[SkiSet]
  - slalom_stats(sets) -> SlalomStats
  - next_speed_step_by_kph(kph) -> SpeedStep
  - average_tournament_speed_step(sets) -> Optional[SpeedStep]
  - round_buoys(value) -> float
  - decompose_score(score) -> Tuple[int, float]
  - trim_number, format_rope, format_speed
  - format_average_result(score, speed, speed_unit, rope_unit) -> str
  - format_best_set(best, speed_unit, rope_unit) -> str
DEPENDENCIES:
  - skilog.core.constants (rope ladder, speed steps, units)
  - skilog.core.numbers (parse_number, round_half_up)
  - skilog.core.models (SkiSet, Event, SpeedStep)
NOTES:
  - score = rope ladder index * 6 + buoys; unknown ropes sit at index 0
  - Speeds are stored in mph; steps are chosen in kph
  - Average speed snaps each set to a step, averages the steps, then snaps
    the average again
  - A quarter-rounded buoy count ending in .75 displays as the next whole
    buoy (3.75 -> 4)
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .constants import (
    BUOYS_PER_PASS,
    KPH_PER_MPH,
    NO_SPEED,
    NO_VALUE,
    ROPE_LENGTHS,
    ROPE_MATCH_TOLERANCE,
    ROPE_OFF,
    ROPE_UNIT_FEET,
    SPEED_UNIT_KMH,
    TOURNAMENT_SPEED_STEPS,
)
from .models import Event, SkiSet, SpeedStep
from .numbers import parse_number, round_half_up

SPEED_STEPS = tuple(SpeedStep(kph, mph) for kph, mph in TOURNAMENT_SPEED_STEPS)


@dataclass(frozen=True)
class SlalomStats:
    total_sets: int
    average_score: float
    average_speed: Optional[float]
    best_set: Optional[SkiSet]


def slalom_sets(sets: Sequence[SkiSet]) -> List[SkiSet]:
    return [ski_set for ski_set in sets if ski_set.event is Event.SLALOM]


def _ladder_position(meters: Optional[float]) -> Optional[int]:
    if meters is None:
        return None
    for index, length in enumerate(ROPE_LENGTHS):
        if abs(length - meters) < ROPE_MATCH_TOLERANCE:
            return index
    return None


def rope_index(rope_length) -> int:
    """Position of a rope length on the ladder; 0 when unknown or unparseable."""
    position = _ladder_position(parse_number(rope_length))
    return 0 if position is None else position


def slalom_score(rope_length, buoys: Optional[float]) -> float:
    return rope_index(rope_length) * BUOYS_PER_PASS + (parse_number(buoys) or 0)


def _score_of(ski_set: SkiSet) -> float:
    return slalom_score(ski_set.data.rope_length, ski_set.data.buoys)


def _beats(candidate: SkiSet, best: SkiSet) -> bool:
    """True if candidate outranks the current best; exact ties keep best."""
    candidate_score = _score_of(candidate)
    best_score = _score_of(best)
    if candidate_score != best_score:
        return candidate_score > best_score

    # Same score: the shorter (harder) rope wins
    candidate_rope = parse_number(candidate.data.rope_length)
    best_rope = parse_number(best.data.rope_length)
    candidate_rope = math.inf if candidate_rope is None else candidate_rope
    best_rope = math.inf if best_rope is None else best_rope
    if candidate_rope != best_rope:
        return candidate_rope < best_rope

    candidate_speed = parse_number(candidate.data.speed) or 0.0
    best_speed = parse_number(best.data.speed) or 0.0
    return candidate_speed > best_speed


def select_best_set(sets: Sequence[SkiSet]) -> Optional[SkiSet]:
    """
    Pick the best slalom set.

    Ranking: higher score, then shorter rope, then higher speed. When all
    three are equal the earlier set in the input is kept.
    """
    best = None
    for ski_set in slalom_sets(sets):
        if best is None or _beats(ski_set, best):
            best = ski_set
    return best


def _valid_speeds_mph(sets: Sequence[SkiSet]) -> List[float]:
    speeds = (parse_number(ski_set.data.speed) for ski_set in slalom_sets(sets))
    return [speed for speed in speeds if speed is not None and speed > 0]


def slalom_stats(sets: Sequence[SkiSet]) -> SlalomStats:
    """Totals, mean score, mean recorded speed (mph) and best set."""
    slalom = slalom_sets(sets)
    scores = [_score_of(ski_set) for ski_set in slalom]
    speeds = _valid_speeds_mph(slalom)

    return SlalomStats(
        total_sets=len(slalom),
        average_score=sum(scores) / len(scores) if scores else 0.0,
        average_speed=sum(speeds) / len(speeds) if speeds else None,
        best_set=select_best_set(slalom),
    )


def next_speed_step_by_kph(kph: float) -> SpeedStep:
    """Smallest step >= kph, clamped to the fastest step."""
    for step in SPEED_STEPS:
        if kph <= step.kph:
            return step
    return SPEED_STEPS[-1]


def average_tournament_speed_step(sets: Sequence[SkiSet]) -> Optional[SpeedStep]:
    """
    Average boat speed expressed as a tournament step.

    Each valid speed is snapped to its step before averaging, and the
    average is snapped again. Returns None when no slalom set has a
    usable speed.
    """
    steps = [next_speed_step_by_kph(mph * KPH_PER_MPH) for mph in _valid_speeds_mph(sets)]
    if not steps:
        return None

    average_kph = sum(step.kph for step in steps) / len(steps)
    return next_speed_step_by_kph(average_kph)


def round_buoys(value: float) -> float:
    """Quantize to quarter buoys; a trailing .75 credits the next buoy."""
    rounded = round_half_up(value * 4) / 4
    whole = math.floor(rounded)
    if rounded - whole == 0.75:
        return whole + 1
    return rounded


def decompose_score(score: float) -> Tuple[int, float]:
    """Split a score back into (rope ladder index, display buoys)."""
    index = min(max(math.floor(score / BUOYS_PER_PASS), 0), len(ROPE_LENGTHS) - 1)
    return index, round_buoys(score - index * BUOYS_PER_PASS)


def trim_number(value: float) -> str:
    """Two decimals without trailing zeros: 11.25 -> '11.25', 18.0 -> '18'."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_rope(meters: Optional[float], unit: str) -> str:
    if meters is None or not math.isfinite(meters):
        return NO_VALUE
    position = _ladder_position(meters)
    if unit == ROPE_UNIT_FEET and position is not None:
        return ROPE_OFF[position]
    return f"{trim_number(meters)} m"


def format_speed(speed_mph, unit: str) -> str:
    numeric = parse_number(speed_mph)
    if numeric is None or numeric <= 0:
        return NO_SPEED
    if unit == SPEED_UNIT_KMH:
        return f"{round_half_up(numeric * KPH_PER_MPH)}kph"
    return f"{round_half_up(numeric)}mph"


def format_average_result(
    score: float,
    speed: Optional[float],
    speed_unit: str,
    rope_unit: str,
) -> str:
    """Render an average score like '4/55kph @ 12 m'."""
    if score is None or not math.isfinite(score) or score <= 0:
        return NO_VALUE

    index, buoys = decompose_score(score)
    rope_text = format_rope(ROPE_LENGTHS[index], rope_unit)
    return f"{trim_number(buoys)}/{format_speed(speed, speed_unit)} @ {rope_text}"


def format_best_set(best: Optional[SkiSet], speed_unit: str, rope_unit: str) -> str:
    if best is None:
        return NO_VALUE

    data = best.data
    buoys_value = parse_number(data.buoys)
    buoys = NO_VALUE if buoys_value is None else trim_number(round_buoys(buoys_value))
    rope = format_rope(parse_number(data.rope_length), rope_unit)
    speed = format_speed(data.speed, speed_unit) if data.speed else NO_VALUE
    return f"{buoys}/{speed} @ {rope}"
