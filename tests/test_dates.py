"""
Test suite for local calendar date helpers.
"""

from datetime import date, datetime, timedelta, timezone

from skilog.core.dates import (
    days_ago_local_iso,
    normalize_iso_day,
    parse_iso_day,
    start_of_week_monday,
    to_local_iso,
    today_local_iso,
)


def test_to_local_iso_zero_pads():
    assert to_local_iso(date(2026, 2, 5)) == "2026-02-05"
    assert to_local_iso(datetime(2026, 11, 30, 23, 59)) == "2026-11-30"


def test_round_trip_is_identity_for_a_whole_year():
    """date -> canonical string -> date never drifts by a day."""
    day = date(2025, 12, 25)
    for _ in range(400):
        assert parse_iso_day(to_local_iso(day)) == day
        day += timedelta(days=1)


def test_time_suffix_is_cut_not_converted():
    """A late-evening timestamp west of UTC stays on its local day."""
    value = "2026-02-22T23:30:00-08:00"
    assert normalize_iso_day(value) == "2026-02-22"
    assert parse_iso_day(value) == date(2026, 2, 22)


def test_today_uses_wall_clock_fields_of_now():
    late_evening = datetime(2026, 2, 22, 23, 59, tzinfo=timezone(timedelta(hours=-8)))
    assert today_local_iso(late_evening) == "2026-02-22"
    assert today_local_iso(date(2026, 1, 1)) == "2026-01-01"


def test_days_ago_crosses_month_boundary():
    assert days_ago_local_iso(6, date(2026, 3, 3)) == "2026-02-25"
    assert days_ago_local_iso(0, date(2026, 3, 3)) == "2026-03-03"


def test_parse_malformed_returns_none():
    for value in ["garbage", "2026-13-01", "2026-02-30", "2026/02/22", "", None, 20260222]:
        assert parse_iso_day(value) is None


def test_start_of_week_is_monday():
    assert start_of_week_monday(date(2026, 2, 22)) == date(2026, 2, 16)  # Sunday
    assert start_of_week_monday(date(2026, 2, 16)) == date(2026, 2, 16)  # Monday
