import datetime as dt

import pytest

from bubblecal.tui.navigation import add_days, add_months, calendar_step


def test_add_days_crosses_month_boundary():
    start = dt.date(2024, 1, 31)
    result = add_days(start, 1)
    assert result.month == start.month + 1
    assert result.day == 1


@pytest.mark.parametrize("offset", [-400, -7, -1, 0, 1, 7, 365])
def test_add_days_round_trip(offset):
    start = dt.date(2024, 3, 10)
    assert add_days(add_days(start, offset), -offset) == start


def test_add_months_keeps_day_of_month():
    start = dt.date(2024, 5, 15)
    result = add_months(start, 1)
    assert (result.year, result.month, result.day) == (start.year, start.month + 1, start.day)


def test_add_months_rolls_over_year():
    start = dt.date(2023, 12, 10)
    result = add_months(start, 1)
    assert result.year == start.year + 1
    assert result.month == 1
    assert result.day == start.day
    assert add_months(result, -1) == start


def test_add_months_overflows_like_date_normalisation():
    assert add_months(dt.date(2023, 1, 31), 1) == dt.date(2023, 3, 3)


def test_add_months_backwards_over_year():
    start = dt.date(2024, 2, 5)
    result = add_months(start, -3)
    assert result.year == start.year - 1
    assert result.day == start.day
    assert add_months(result, 3) == start


def test_add_months_preserves_time_of_day():
    start = dt.datetime(2024, 4, 10, 13, 45)
    result = add_months(start, 2)
    assert (result.hour, result.minute) == (start.hour, start.minute)
    assert result.month == start.month + 2


@pytest.mark.parametrize(
    "key,days", [("h", -1), ("l", 1), ("j", 7), ("k", -7)]
)
def test_calendar_step_day_keys(key, days):
    start = dt.date(2024, 6, 12)
    assert calendar_step(start, key) == start + dt.timedelta(days=days)


def test_calendar_step_month_keys():
    start = dt.date(2024, 6, 12)
    assert calendar_step(start, "ctrl+d") == add_months(start, 1)
    assert calendar_step(start, "ctrl+u") == add_months(start, -1)
    assert calendar_step(calendar_step(start, "ctrl+d"), "ctrl+u") == start


def test_calendar_step_unknown_key():
    assert calendar_step(dt.date(2024, 6, 12), "x") is None