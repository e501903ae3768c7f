"""
Test suite for slalom scoring, best-set ranking, speed steps and display.
"""

import pytest

from skilog.core.models import Event, SkiSet, SpeedStep
from skilog.core.slalom import (
    average_tournament_speed_step,
    decompose_score,
    format_average_result,
    format_best_set,
    format_rope,
    format_speed,
    next_speed_step_by_kph,
    rope_index,
    round_buoys,
    select_best_set,
    slalom_score,
    slalom_stats,
    trim_number,
)


# --- Speed steps ---

@pytest.mark.parametrize("kph,expected", [
    (0, SpeedStep(28, 17.4)),
    (49, SpeedStep(49, 30.4)),
    (50, SpeedStep(52, 32.3)),
    (57.9, SpeedStep(58, 36.0)),
    (60, SpeedStep(58, 36.0)),
])
def test_next_speed_step_by_kph(kph, expected):
    assert next_speed_step_by_kph(kph) == expected


def test_average_speed_step_snaps_then_averages(make_slalom):
    # 32.3 mph -> 52 kph step, 30.4 mph -> 49 kph step; mean 50.5 -> 52
    sets = [make_slalom(speed="32.3"), make_slalom(speed="30.4")]
    assert average_tournament_speed_step(sets) == SpeedStep(52, 32.3)


def test_average_speed_step_ignores_unusable_speeds(make_slalom, make_set):
    sets = [
        make_slalom(speed="28.5"),
        make_slalom(speed="0"),
        make_slalom(speed="fast"),
        make_set(Event.TRICKS),
    ]
    assert average_tournament_speed_step(sets) == SpeedStep(46, 28.6)


def test_average_speed_step_none_without_speeds(make_slalom):
    assert average_tournament_speed_step([]) is None
    assert average_tournament_speed_step([make_slalom(speed="")]) is None


# --- Scoring ---

@pytest.mark.parametrize("rope,expected", [
    ("18", 0),
    ("12", 4),
    ("11.25m", 5),
    (9.75, 8),
    ("17", 0),
    ("", 0),
    (None, 0),
])
def test_rope_index(rope, expected):
    assert rope_index(rope) == expected


def test_slalom_score():
    assert slalom_score("12", 3.5) == 27.5
    assert slalom_score("16", 2) == 8
    assert slalom_score("unknown", 4) == 4
    assert slalom_score("13", None) == 18


# --- Best set ---

def test_best_set_highest_score(make_slalom):
    sets = [make_slalom("16", 6), make_slalom("12", 1), make_slalom("14", 5)]
    assert select_best_set(sets) is sets[1]


@pytest.mark.parametrize("reverse", [False, True])
def test_best_set_equal_score_prefers_shorter_rope(make_slalom, reverse):
    # 14 m with 0 buoys and 16 m with 6 buoys both score 12
    shorter = make_slalom("14", 0)
    longer = make_slalom("16", 6)
    sets = [longer, shorter] if not reverse else [shorter, longer]
    assert select_best_set(sets) is shorter


@pytest.mark.parametrize("reverse", [False, True])
def test_best_set_equal_rope_prefers_faster_speed(make_slalom, reverse):
    faster = make_slalom("13", 3, speed="32.3")
    slower = make_slalom("13", 3, speed="30.4")
    sets = [slower, faster] if not reverse else [faster, slower]
    assert select_best_set(sets) is faster


def test_best_set_unparseable_rope_loses_tie(make_slalom):
    odd = make_slalom("long", 6)
    known = make_slalom("18", 6)
    assert select_best_set([odd, known]) is known


def test_best_set_exact_tie_keeps_earlier(make_slalom):
    first = make_slalom("12", 2, id="first")
    second = make_slalom("12", 2, id="second")
    assert select_best_set([first, second]).id == "first"


def test_best_set_ignores_other_events(make_set):
    assert select_best_set([make_set(Event.TRICKS)]) is None


def test_slalom_stats(make_slalom, make_set):
    sets = [
        make_slalom("12", 3.5, speed="32.3"),
        make_slalom("16", 2, speed="30.4"),
        make_slalom("18", 1, speed=""),
        make_set(Event.JUMP),
    ]
    stats = slalom_stats(sets)

    assert stats.total_sets == 3
    assert stats.average_score == pytest.approx((27.5 + 8 + 1) / 3)
    assert stats.average_speed == pytest.approx(31.35)
    assert stats.best_set is sets[0]


def test_slalom_stats_empty():
    stats = slalom_stats([])
    assert stats.total_sets == 0
    assert stats.average_score == 0
    assert stats.average_speed is None
    assert stats.best_set is None


# --- Display ---

@pytest.mark.parametrize("value,expected", [
    (3.75, 4),
    (3.6, 3.5),
    (3.7, 4),
    (0.125, 0.25),
    (2.5, 2.5),
    (6, 6),
])
def test_round_buoys(value, expected):
    assert round_buoys(value) == expected


def test_decompose_score():
    assert decompose_score(27.5) == (4, 3.5)
    assert decompose_score(17.75) == (2, 6)
    # Scores beyond the ladder stay on the last rung
    assert decompose_score(60) == (8, 12)


def test_trim_number():
    assert trim_number(18.0) == "18"
    assert trim_number(11.25) == "11.25"
    assert trim_number(10.5) == "10.5"
    assert trim_number(3) == "3"


def test_format_rope():
    assert format_rope(12, "meters") == "12 m"
    assert format_rope(12, "feet") == "35off"
    assert format_rope(11.25, "feet") == "38off"
    # Off-ladder lengths fall back to meters even in feet
    assert format_rope(17, "feet") == "17 m"
    assert format_rope(None, "meters") == "—"


def test_format_speed():
    assert format_speed("32.3", "mph") == "32mph"
    assert format_speed("32.3", "kmh") == "52kph"
    assert format_speed(36, "mph") == "36mph"
    assert format_speed("0", "mph") == "--"
    assert format_speed(None, "kmh") == "--"
    assert format_speed("fast", "mph") == "--"


def test_format_average_result():
    assert format_average_result(27.5, 32.3, "mph", "meters") == "3.5/32mph @ 12 m"
    assert format_average_result(27.5, 32.3, "kmh", "feet") == "3.5/52kph @ 35off"
    assert format_average_result(17.75, 31.35, "mph", "meters") == "6/31mph @ 14 m"
    assert format_average_result(4, None, "mph", "meters") == "4/-- @ 18 m"


def test_format_average_result_without_score():
    assert format_average_result(0, 32.3, "mph", "meters") == "—"
    assert format_average_result(float("nan"), 32.3, "mph", "meters") == "—"


def test_format_best_set(make_slalom):
    assert format_best_set(make_slalom("12", 3.5, speed="32.3"), "mph", "meters") == "3.5/32mph @ 12 m"
    assert format_best_set(make_slalom("10.75", 2.75, speed="34.2"), "kmh", "feet") == "3/55kph @ 39.5off"


def test_format_best_set_missing_parts(make_slalom):
    assert format_best_set(None, "mph", "meters") == "—"
    assert format_best_set(make_slalom("18", None), "mph", "meters") == "—/32mph @ 18 m"
    assert format_best_set(make_slalom("18", 6, speed=""), "mph", "meters") == "6/— @ 18 m"
    assert format_best_set(make_slalom("", 6), "mph", "meters") == "6/32mph @ —"


# --- Non-finite input ---

def test_non_finite_buoys_from_export_cannot_win():
    bad = SkiSet.from_dict({
        "id": "bad", "event": "slalom", "date": "2026-02-22",
        "data": {"buoys": "NaN", "ropeLength": "18", "speed": "32.3"},
    })
    good = SkiSet.from_dict({
        "id": "good", "event": "slalom", "date": "2026-02-22",
        "data": {"buoys": 6, "ropeLength": "12", "speed": "32.3"},
    })

    assert bad.data.buoys is None
    assert select_best_set([bad, good]).id == "good"
    assert slalom_stats([bad, good]).average_score == 15


def test_non_finite_buoys_score_as_zero(make_slalom):
    broken = make_slalom("18", float("nan"))
    fine = make_slalom("14", 1)

    assert slalom_score("18", float("inf")) == 0
    assert select_best_set([broken, fine]) is fine
    assert format_best_set(broken, "mph", "meters") == "—/32mph @ 18 m"
