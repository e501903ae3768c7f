"""
Test suite for lenient number parsing and half-up rounding.
"""

import pytest

from skilog.core.numbers import parse_number, round_half_up


@pytest.mark.parametrize("value,expected", [
    ("32.3", 32.3),
    ("32.3 mph", 32.3),
    ("11.25m", 11.25),
    ("1.2.3", 1.2),
    (".5", 0.5),
    (18, 18.0),
    (9.75, 9.75),
])
def test_parse_number(value, expected):
    assert parse_number(value) == expected


@pytest.mark.parametrize("value", [None, "", ".", "fast", True, float("inf"), float("nan")])
def test_parse_number_rejects(value):
    assert parse_number(value) is None


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(66.4) == 66
    assert round_half_up(-12.5) == -12
