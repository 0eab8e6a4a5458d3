"""Colour themes and small date helpers shared by the calendar views."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from enum import IntEnum

from bubblecal.tui.layout import Style


class Theme(IntEnum):
    DEFAULT = 0
    DARK = 1
    LIGHT = 2
    NEON = 3
    SOLARIZED = 4
    NORD = 5

    def next(self) -> Theme:
        """Return the following theme, wrapping around."""
        return Theme((self + 1) % len(Theme))


_THEME_NAMES = {
    Theme.DEFAULT: "Default",
    Theme.DARK: "Dark",
    Theme.LIGHT: "Light",
    Theme.NEON: "Neon",
    Theme.SOLARIZED: "Solarized",
    Theme.NORD: "Nord",
}

# header fg, selected bg, selected fg, today bg, today fg, other month, weekend, badge
_PALETTES = {
    Theme.DEFAULT: ("15", "33", "0", "21", "15", "240", "245", "34"),
    Theme.DARK: ("250", "238", "15", "17", "15", "237", "242", "29"),
    Theme.LIGHT: ("16", "39", "15", "220", "16", "250", "27", "28"),
    Theme.NEON: ("201", "201", "16", "51", "16", "239", "165", "226"),
    Theme.SOLARIZED: ("136", "33", "230", "64", "230", "241", "37", "125"),
    Theme.NORD: ("109", "67", "231", "96", "231", "60", "103", "110"),
}


@dataclass(frozen=True)
class Styles:
    """The set of styles a theme provides."""

    base: Style
    header: Style
    selected_date: Style
    today_date: Style
    other_month: Style
    weekend: Style
    event_badge: Style


def theme_name(theme: int) -> str:
    """Return the display name of a theme, "Unknown" if out of range."""
    try:
        return _THEME_NAMES[Theme(theme)]
    except ValueError:
        return "Unknown"


def get_styles(theme: int) -> Styles:
    """Return the styles of a theme; unknown themes get the default."""
    try:
        chosen = Theme(theme)
    except ValueError:
        chosen = Theme.DEFAULT
    header, sel_bg, sel_fg, today_bg, today_fg, other, weekend, badge = _PALETTES[chosen]
    return Styles(
        base=Style(),
        header=Style(bold=True, foreground=header, padding=(0, 1)),
        selected_date=Style(background=sel_bg, foreground=sel_fg, bold=True),
        today_date=Style(background=today_bg, foreground=today_fg),
        other_month=Style(foreground=other),
        weekend=Style(foreground=weekend),
        event_badge=Style(foreground=badge),
    )


def same_day(a: _dt.date, b: _dt.date) -> bool:
    """Return whether two dates or datetimes fall on the same calendar day."""
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def start_of_week(day: _dt.date) -> _dt.date:
    """Return the Sunday that starts the week containing ``day``."""
    return day - _dt.timedelta(days=(day.weekday() + 1) % 7)