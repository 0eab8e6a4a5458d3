"""The month grid view with per-day event summaries."""

from __future__ import annotations

import calendar
import datetime as _dt
from collections.abc import Iterable, Sequence
from dataclasses import replace

from bubblecal.config import DEFAULT_CATEGORY_COLOR, Config
from bubblecal.storage import EventStore
from bubblecal.tui.layout import Style, join_horizontal, join_vertical
from bubblecal.tui.styles import Styles, Theme, get_styles, same_day, start_of_week

WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MIN_CELL_WIDTH = 8
MIN_CELL_HEIGHT = 2
_GRID_LINES = 8  # header, separator and six weeks
_JUMP_STYLE = Style(background="196", foreground="15", bold=True, padding=(0, 1))


def month_grid(day: _dt.date) -> list[list[_dt.date]]:
    """Return the Sunday-first weeks covering the month that contains ``day``.

    Leading and trailing days of the neighbouring months fill the first and
    last weeks.
    """
    first = _dt.date(day.year, day.month, 1)
    last = first.replace(day=calendar.monthrange(day.year, day.month)[1])
    weeks = []
    week_start = start_of_week(first)
    while week_start <= last:
        weeks.append([week_start + _dt.timedelta(days=offset) for offset in range(7)])
        week_start += _dt.timedelta(days=7)
    return weeks


class MonthView:
    """Calendar grid of the selected date's month."""

    def __init__(
        self,
        store: EventStore,
        selected_date: _dt.date,
        styles: Styles | None = None,
        config: Config | None = None,
    ) -> None:
        self.store = store
        self.selected_date = selected_date
        self.styles = styles if styles is not None else get_styles(Theme.DEFAULT)
        self.config = config
        self.width = 0
        self.height = 0
        self.jump_mode = False
        self.jump_keys: list[str] = []
        self.jump_targets: list[_dt.date] = []

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def set_jump_mode(
        self,
        active: bool,
        keys: Iterable[str] | None,
        targets: Iterable[_dt.date] | None,
    ) -> None:
        self.jump_mode = active
        self.jump_keys = list(keys) if keys is not None else []
        self.jump_targets = list(targets) if targets is not None else []

    def max_height_for_week(self, dates: Iterable[_dt.date]) -> int:
        """Return the row height needed to show every all-day event of a week."""
        height = MIN_CELL_HEIGHT
        for day in dates:
            all_day = sum(1 for event in self.store.load_day(day) if event.is_all_day())
            cell = 1 + all_day if all_day else MIN_CELL_HEIGHT
            height = max(height, cell)
        return height

    def render(self, now: _dt.date | None = None) -> str:
        """Render the month; ``now`` marks today and defaults to the clock."""
        if self.width == 0 or self.height == 0:
            return ""
        today = now if now is not None else _dt.date.today()
        selected = self.selected_date
        cell_width = max((self.width - 6) // 7, MIN_CELL_WIDTH)

        header_style = Style(width=cell_width, align="center", bold=True)
        lines = [
            join_horizontal([header_style.render(name) for name in WEEKDAY_NAMES]),
            "─" * max(self.width - 4, 0),
        ]
        for week in month_grid(selected):
            height = self.max_height_for_week(week)
            cells = [
                self._render_cell(day, day.month != selected.month, cell_width, height, today)
                for day in week
            ]
            lines.append(join_horizontal(cells))

        empty = Style(width=cell_width, height=MIN_CELL_HEIGHT).render("")
        while len(lines) < _GRID_LINES:
            lines.append(join_horizontal([empty] * 7))
        return join_vertical(lines)

    def _color_for(self, category: str) -> str:
        if self.config is not None and category:
            return self.config.category_color(category)
        return DEFAULT_CATEGORY_COLOR

    def _render_cell(
        self,
        day: _dt.date,
        other_month: bool,
        width: int,
        height: int,
        today: _dt.date,
    ) -> str:
        selected = self.selected_date
        style = Style(width=width, height=height, padding=(0, 1))
        if other_month:
            style = replace(style, foreground=self.styles.other_month.foreground)
        elif day.weekday() in (5, 6):
            style = replace(style, foreground=self.styles.weekend.foreground)

        if same_day(day, selected):
            style = replace(
                style,
                background=self.styles.selected_date.background,
                foreground=self.styles.selected_date.foreground,
                bold=True,
            )
        elif same_day(day, today):
            style = replace(
                style,
                background=self.styles.today_date.background,
                foreground=self.styles.today_date.foreground,
            )

        events = self.store.load_day(day)
        display = f"{day.day:2d}"
        all_day_titles: list[str] = []
        timed = [event for event in events if not event.is_all_day()]
        max_len = width - 6
        for event in events:
            if not event.is_all_day():
                continue
            title = event.title
            if len(title) > max_len > 3:
                title = title[: max_len - 1] + "…"
            all_day_titles.append(
                Style(foreground=self._color_for(event.category)).render(title)
            )

        if timed:
            indicator = next(
                (self._color_for(e.category) for e in timed if e.category and self.config),
                DEFAULT_CATEGORY_COLOR,
            )
            display += " " + Style(foreground=indicator).render(f"●{len(timed)}")

        info = "\n" + "\n".join(all_day_titles) if all_day_titles else ""

        if self.jump_mode:
            display = self._with_jump_key(day, display)

        return style.render(display + info)

    def _with_jump_key(self, day: _dt.date, display: str) -> str:
        for key, target in zip(self.jump_keys, self.jump_targets):
            if same_day(day, target):
                return _JUMP_STYLE.render(key) + " " + display
        return display


__all__: Sequence[str] = ("MonthView", "month_grid", "WEEKDAY_NAMES")