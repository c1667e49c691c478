from datetime import date, datetime, timedelta

import pytest

from bext_ledger.core.time_ranges import (
    PERIOD_TOKENS,
    local_now,
    period_range,
    range_month,
    range_quarter,
    range_week,
    range_year,
)


def test_week_is_monday_to_sunday():
    dr = range_week(date(2024, 6, 5))
    assert dr.dt_from == datetime(2024, 6, 3)
    assert dr.dt_to.date() == date(2024, 6, 9)
    assert dr.contains(datetime(2024, 6, 9, 23, 59))
    assert not dr.contains(datetime(2024, 6, 10))


def test_previous_week_crosses_year():
    dr = range_week(date(2024, 1, 3), offset=-1)
    assert dr.dt_from == datetime(2023, 12, 25)
    assert dr.dt_to.date() == date(2023, 12, 31)


def test_month_ranges_are_closed():
    dr = range_month(date(2024, 2, 10))
    assert dr.dt_from == datetime(2024, 2, 1)
    assert dr.dt_to == datetime(2024, 3, 1) - timedelta(microseconds=1)
    assert range_month(date(2024, 1, 10), offset=-1).dt_from == datetime(2023, 12, 1)


def test_quarter_ranges():
    assert range_quarter(date(2024, 5, 1)).dt_from == datetime(2024, 4, 1)
    prev = range_quarter(date(2024, 2, 1), offset=-1)
    assert prev.dt_from == datetime(2023, 10, 1)
    assert prev.dt_to.date() == date(2023, 12, 31)


def test_year_range():
    dr = range_year(date(2024, 7, 1), offset=-1)
    assert dr.dt_from == datetime(2023, 1, 1)
    assert dr.dt_to.date() == date(2023, 12, 31)


def test_period_tokens():
    assert PERIOD_TOKENS == {"d", "-d", "w", "-w", "m", "-m", "q", "-q", "y", "-y"}
    now = datetime(2024, 6, 5, 12, 0)
    assert period_range("-d", now).dt_from == datetime(2024, 6, 4)
    with pytest.raises(ValueError):
        period_range("x", now)


def test_local_now_is_naive():
    assert local_now("UTC").tzinfo is None
    with pytest.raises(ValueError):
        local_now("Not/AZone")
