"""
Test suite for jump and tricks aggregates.
"""

from datetime import date

import pytest

from skilog.core.disciplines import jump_stats, tricks_stats
from skilog.core.models import Event, JumpData, TricksData


@pytest.fixture
def jump_log(make_set):
    return [
        make_set(Event.JUMP, day="2026-02-05", data=JumpData(distance=30, made=3, passed=1), id="j1"),
        make_set(Event.JUMP, day="2026-02-18", data=JumpData(distance=36, made=2, passed=0), id="j2"),
        make_set(Event.JUMP, day="2026-01-20", data=JumpData(distance=27, made=1, passed=2), id="j3"),
        make_set(Event.JUMP, day="2026-02-10", data=JumpData(sub_event="cuts", cuts_type="open_cuts"), id="c1"),
        make_set(Event.JUMP, day="2026-02-11", data=JumpData(sub_event="cuts", cuts_type="cut_pass"), id="c2"),
        make_set(Event.TRICKS, day="2026-02-12"),
    ]


def test_jump_stats_totals(jump_log, now):
    stats = jump_stats(jump_log, now)

    assert stats.total_sets == 5
    assert stats.best_distance == 36
    assert stats.average_distance == pytest.approx(31)
    assert stats.jump_percent == 60
    assert stats.cuts_percent == 40
    assert stats.total_made == 6
    assert stats.total_passed == 3
    assert stats.open_cuts_count == 1
    assert stats.cut_pass_count == 1


def test_jump_month_delta_uses_history(jump_log, now):
    in_range = [s for s in jump_log if s.id in ("j2", "c1")]
    stats = jump_stats(in_range, now, history=jump_log)

    assert stats.total_sets == 2
    assert stats.average_distance == 36
    assert stats.jump_percent == 50
    # This month averages 33 m, last month 27 m
    assert stats.average_delta_vs_last_month == pytest.approx(6)


def test_jump_month_delta_needs_both_months(jump_log, now):
    this_month_only = [s for s in jump_log if s.id == "j1"]
    assert jump_stats(this_month_only, now).average_delta_vs_last_month is None


def test_jump_month_delta_across_new_year(make_set):
    sets = [
        make_set(Event.JUMP, day="2026-01-03", data=JumpData(distance=40)),
        make_set(Event.JUMP, day="2025-12-28", data=JumpData(distance=38)),
    ]
    assert jump_stats(sets, date(2026, 1, 10)).average_delta_vs_last_month == pytest.approx(2)


def test_jump_missing_distances_and_sub_event(make_set, now):
    sets = [
        make_set(Event.JUMP, data=JumpData(sub_event="", made=2)),
        make_set(Event.JUMP, data=JumpData(distance=None)),
    ]
    stats = jump_stats(sets, now)

    assert stats.jump_percent == 100
    assert stats.total_made == 2
    assert stats.best_distance is None
    assert stats.average_distance is None


def test_jump_stats_empty(now):
    stats = jump_stats([], now)
    assert stats.total_sets == 0
    assert stats.jump_percent == 0
    assert stats.cuts_percent == 0
    assert stats.average_delta_vs_last_month is None


def test_tricks_stats(make_set):
    sets = [
        make_set(Event.TRICKS, data=TricksData(duration=45, trick_type="hands")),
        make_set(Event.TRICKS, data=TricksData(duration=30, trick_type="toes")),
        make_set(Event.TRICKS, data=TricksData(duration=15, trick_type="hands")),
        make_set(Event.TRICKS, data=TricksData(duration=None, trick_type="")),
        make_set(Event.SLALOM),
    ]
    stats = tricks_stats(sets)

    assert stats.total_sets == 4
    assert stats.total_minutes == 90
    assert stats.total_hours_text == "1.5"
    assert (stats.hands_count, stats.toes_count) == (2, 1)
    assert (stats.hands_percent, stats.toes_percent) == (67, 33)


def test_tricks_hours_round_half_up(make_set):
    stats = tricks_stats([make_set(Event.TRICKS, data=TricksData(duration=15))])
    assert stats.total_hours_text == "0.3"


def test_tricks_stats_empty():
    stats = tricks_stats([])
    assert stats.total_minutes == 0
    assert stats.total_hours_text == "0.0"
    assert stats.hands_percent == 0
    assert stats.toes_percent == 0
