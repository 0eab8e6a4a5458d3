"""The agenda pane listing the selected day's events."""

from __future__ import annotations

from collections.abc import Iterable

from bubblecal.config import Config
from bubblecal.event import Event
from bubblecal.tui.layout import Style
from bubblecal.tui.styles import Styles, Theme, get_styles

_JUMP_STYLE = Style(background="196", foreground="15", bold=True, padding=(0, 1))


class AgendaView:
    """Scrollable, selectable list of one day's events."""

    def __init__(self, styles: Styles | None = None, config: Config | None = None) -> None:
        self.styles = styles if styles is not None else get_styles(Theme.DEFAULT)
        self.config = config
        self.events: list[Event] = []
        self.selected_index = 0
        self.scroll_offset = 0
        self.width = 0
        self.height = 0
        self.jump_mode = False
        self.jump_keys: list[str] = []

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def set_events(self, events: Iterable[Event]) -> None:
        """Replace the events, keeping the selection within range."""
        self.events = list(events)
        if self.selected_index >= len(self.events):
            self.selected_index = len(self.events) - 1
        if self.selected_index < 0:
            self.selected_index = 0

    def move_up(self) -> None:
        if self.selected_index > 0:
            self.selected_index -= 1
            self._ensure_visible()

    def move_down(self) -> None:
        if self.selected_index < len(self.events) - 1:
            self.selected_index += 1
            self._ensure_visible()

    def go_to_top(self) -> None:
        self.selected_index = 0
        self.scroll_offset = 0

    def go_to_bottom(self) -> None:
        if self.events:
            self.selected_index = len(self.events) - 1
            self._ensure_visible()

    def set_jump_mode(self, active: bool, keys: Iterable[str] | None) -> None:
        self.jump_mode = active
        self.jump_keys = list(keys) if keys is not None else []

    def jump_to_index(self, index: int) -> None:
        if 0 <= index < len(self.events):
            self.selected_index = index
            self._ensure_visible()

    def selected_event(self) -> Event | None:
        if 0 <= self.selected_index < len(self.events):
            return self.events[self.selected_index]
        return None

    def _ensure_visible(self) -> None:
        if not self.events:
            return
        visible = max(self.height - 2, 1)
        if self.selected_index < self.scroll_offset:
            self.scroll_offset = self.selected_index
        elif self.selected_index >= self.scroll_offset + visible:
            self.scroll_offset = self.selected_index - visible + 1
        self.scroll_offset = max(self.scroll_offset, 0)

    def render(self) -> str:
        """Render the pane; empty when it has no size."""
        if self.width == 0 or self.height == 0:
            return ""

        lines: list[str] = []
        if not self.events:
            lines.append(
                Style(foreground="240", width=self.width - 6, align="center").render(
                    "No events scheduled"
                )
            )
        else:
            visible = self.height - 2
            self._ensure_visible()
            end = min(self.scroll_offset + visible, len(self.events))
            for index in range(self.scroll_offset, end):
                line = self._render_event_line(
                    self.events[index], index == self.selected_index
                )
                if self.jump_mode and index < len(self.jump_keys):
                    line = _JUMP_STYLE.render(self.jump_keys[index]) + " " + line
                lines.append(line)

            indicator = Style(foreground="220", width=self.width - 6, align="center")
            if self.scroll_offset > 0:
                lines.insert(0, indicator.render("↑ more"))
            if end < len(self.events):
                lines.append(indicator.render("↓ more"))

        lines.extend([""] * (self.height - 2 - len(lines)))
        return Style(width=self.width - 2, padding=(0, 1)).render("\n".join(lines))

    def _render_event_line(self, event: Event, selected: bool) -> str:
        color = "15"
        if self.config is not None and event.category:
            color = self.config.category_color(event.category)
        grey = Style(foreground="245")
        title = Style(foreground=color).render(event.title)
        if event.is_all_day():
            time_text = "All day"
        elif event.end_time:
            time_text = f"{event.start_time}-{event.end_time}"
        else:
            time_text = event.start_time
        label = f"{grey.render(time_text)} {title}"

        if selected:
            return Style(
                background="238", foreground="15", bold=True, width=self.width - 4
            ).render("▶ " + label)
        return Style(width=self.width - 4).render("  " + label)