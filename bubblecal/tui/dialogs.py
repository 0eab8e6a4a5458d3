"""Confirmation, help and settings dialogs."""

from __future__ import annotations

import datetime as _dt
from pathlib import Path

from bubblecal.config import CONFIG_DIR_NAME, CONFIG_FILE_NAME, Config
from bubblecal.event import Event
from bubblecal.storage import EventNotFoundError, EventStore
from bubblecal.tui.layout import Style, join_vertical, place
from bubblecal.tui.styles import Styles, Theme, get_styles, theme_name

_GREY = Style(foreground="240")
_BOLD = Style(bold=True)

# View numbers as used by the application: month, week, day, list.
_MONTH_VIEW = 0
_WEEK_VIEW = 1
_DAY_VIEW = 2

_VIEW_NAMES = {
    _MONTH_VIEW: "Month View",
    _WEEK_VIEW: "Week View",
    _DAY_VIEW: "Day View",
}

_VIEW_NAVIGATION = {
    _MONTH_VIEW: (
        "  h/l ←/→   Previous/next day",
        "  j/k ↑/↓   Previous/next week",
        "  Ctrl+U/D  Previous/next month",
    ),
    _WEEK_VIEW: (
        "  h/l ←/→   Previous/next day",
        "  j/k ↑/↓   Move between hours",
        "  Ctrl+U/D  Previous/next week",
        "  m         Toggle mini-month view",
    ),
    _DAY_VIEW: (
        "  h/l ←/→   Previous/next day",
        "  j/k ↑/↓   Move between hours",
        "  Ctrl+U/D  Previous/next day",
    ),
}

_COMMON_NAVIGATION = (
    "  ↑/↓       Navigate agenda",
    "  hjkl      Navigate calendar",
    "  f         Jump to calendar date",
    "  F         Jump to agenda item",
    "  t or .    Go to today (current hour in Week/Day)",
)

_EVENT_HELP = (
    "  a         Add event",
    "  e         Edit selected event (agenda/list)",
    "  d         Delete selected event (agenda/list)",
    "  y         Yank (copy) selected event",
    "  p         Paste yanked event",
)

_GENERAL_HELP = (
    "  P         Toggle agenda position (right/bottom)",
    "  s         Cycle through themes",
    "  S         Open Settings",
    "  ?         Help",
    "  q         Quit",
)


def _long_date(day: _dt.date) -> str:
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


class DeleteModal:
    """Asks for confirmation before deleting an event."""

    def __init__(
        self,
        store: EventStore,
        day: _dt.date,
        event: Event,
        index: int = 0,
        styles: Styles | None = None,
    ) -> None:
        self.store = store
        self.day = day
        self.event = event
        self.index = index
        self.styles = styles if styles is not None else get_styles(Theme.DEFAULT)
        self.width = 0
        self.height = 0
        self.confirmed = False

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def handle_key(self, key: str) -> bool:
        """Handle a key press; return True when the dialog should close."""
        if key in ("ctrl+c", "esc", "n", "N"):
            return True
        if key in ("y", "Y", "enter"):
            try:
                self.store.delete_event(self.day, self.event)
            except (EventNotFoundError, OSError):
                pass
            else:
                self.confirmed = True
            return True
        return False

    def render(self) -> str:
        """Render the dialog centred in the terminal."""
        if self.width == 0 or self.height == 0:
            return "Loading..."
        event = self.event
        if event.is_all_day():
            summary = f"🌅 {event.title} (All Day)"
        else:
            times = event.start_time
            if event.end_time:
                times = f"{event.start_time} - {event.end_time}"
            summary = f"🕐 {event.title} ({times})"
        if event.category:
            summary += f"\n   Category: {event.category}"

        content = join_vertical(
            [
                Style(bold=True, foreground="196").render("⚠️  Confirm Delete"),
                "",
                _GREY.render(_long_date(self.day)),
                Style(
                    border="normal",
                    border_foreground="240",
                    padding=(0, 1),
                    margin=(1, 0),
                ).render(summary),
                "",
                _BOLD.render("Delete this event?"),
                "",
                _GREY.render("[Y]es / [N]o"),
            ],
            align="center",
        )
        modal = Style(
            border="rounded",
            border_foreground="196",
            padding=(1, 3),
            width=60,
            background="0",
        ).render(content)
        return place(self.width, self.height, modal)


class HelpModal:
    """Lists the key bindings for the current view."""

    def __init__(self, view: int, styles: Styles | None = None) -> None:
        self.view = view
        self.styles = styles if styles is not None else get_styles(Theme.DEFAULT)
        self.width = 0
        self.height = 0

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def handle_key(self, key: str) -> bool:
        """Return True when the key closes the help."""
        return key in ("ctrl+c", "esc", "?", "enter", "q")

    def render(self) -> str:
        """Render the help centred in the terminal."""
        if self.width == 0 or self.height == 0:
            return "Loading..."
        view_name = _VIEW_NAMES.get(int(self.view), "")
        lines = [
            _BOLD.render(view_name + " Help"),
            "",
            _BOLD.render("Views:"),
            "  ] / [     Next/Previous view (Month→Week→Day→List)",
            "",
            _BOLD.render("Navigation:"),
            *_VIEW_NAVIGATION.get(int(self.view), ()),
            *_COMMON_NAVIGATION,
            "",
            _BOLD.render("Events:"),
            *_EVENT_HELP,
            "",
            _BOLD.render("General:"),
            *_GENERAL_HELP,
            "",
            "Press any key to close",
        ]
        modal = Style(
            border="rounded",
            border_foreground="33",
            padding=(1, 2),
            width=50,
            background="235",
        ).render(join_vertical(lines))
        return place(self.width, self.height, modal)


class SettingsModal:
    """Shows the current configuration."""

    def __init__(
        self,
        config: Config,
        styles: Styles | None = None,
        config_file: str | Path | None = None,
    ) -> None:
        self.config = config
        self.styles = styles if styles is not None else get_styles(Theme.DEFAULT)
        self.config_file = (
            Path(config_file)
            if config_file is not None
            else Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        )
        self.width = 0
        self.height = 0
        self.scroll_offset = 0

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def handle_key(self, key: str) -> bool:
        """Handle a key press; return True when the dialog should close."""
        if key in ("ctrl+c", "esc", "q", "S"):
            return True
        if key in ("j", "down"):
            self.scroll_offset += 1
        elif key in ("k", "up") and self.scroll_offset > 0:
            self.scroll_offset -= 1
        return False

    def _theme_label(self) -> str:
        try:
            return theme_name(Theme(self.config.theme))
        except ValueError:
            return "Default"

    def render(self) -> str:
        """Render the settings centred in the terminal."""
        if self.width == 0 or self.height == 0:
            return "Loading..."
        cfg = self.config
        settings = [
            f"Theme: {self._theme_label()}",
            "",
            f"Mini Month in Week View: {str(cfg.show_mini_month).lower()}",
            f"Agenda Position: {'Bottom' if cfg.agenda_bottom else 'Right'}",
            "",
            _BOLD.render("Categories:"),
        ]
        settings.extend(
            Style(foreground=cat.color).render(f"  ● {cat.name}") for cat in cfg.categories
        )
        settings.extend(
            [
                "",
                _BOLD.render("Quick Settings:"),
                "  s - Cycle themes",
                "  P - Toggle agenda position",
                "  m - Toggle mini month (week view)",
                "",
                _GREY.render(f"Config: {self.config_file}"),
            ]
        )
        body = join_vertical(
            [
                Style(bold=True, foreground="39").render("⚙️  Settings"),
                "",
                join_vertical(settings),
                "",
                _GREY.render("Press Esc or S to close"),
            ]
        )
        modal = Style(
            border="rounded",
            border_foreground="39",
            padding=(1, 3),
            width=70,
            max_height=max(self.height - 10, 0),
            background="0",
        ).render(body)
        return place(self.width, self.height, modal)