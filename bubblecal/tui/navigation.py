"""Calendar date arithmetic used by keyboard navigation."""

from __future__ import annotations

import datetime as _dt
from typing import TypeVar

_D = TypeVar("_D", _dt.date, _dt.datetime)

_DAY_STEPS = {"h": -1, "l": 1, "j": 7, "k": -7}
_MONTH_STEPS = {"ctrl+u": -1, "ctrl+d": 1}


def add_days(day: _D, days: int) -> _D:
    """Return ``day`` moved by a number of days."""
    return day + _dt.timedelta(days=days)


def add_months(day: _D, months: int) -> _D:
    """Return ``day`` moved by whole months.

    A day of month past the end of the target month overflows into the
    following month, so 31 January plus one month lands in early March.
    """
    total = day.year * 12 + (day.month - 1) + months
    year, month_index = divmod(total, 12)
    first = day.replace(year=year, month=month_index + 1, day=1)
    return first + _dt.timedelta(days=day.day - 1)


def calendar_step(day: _D, key: str) -> _D | None:
    """Return the date a month-view movement key leads to.

    ``h``/``l`` move a day, ``j``/``k`` a week and ``ctrl+d``/``ctrl+u`` a
    month. Other keys give ``None``.
    """
    if key in _DAY_STEPS:
        return add_days(day, _DAY_STEPS[key])
    if key in _MONTH_STEPS:
        return add_months(day, _MONTH_STEPS[key])
    return None