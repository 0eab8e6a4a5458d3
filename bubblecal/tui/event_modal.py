"""Modal dialog for creating and editing events."""

from __future__ import annotations

import datetime as _dt
from collections.abc import Iterable

from bubblecal.config import Category
from bubblecal.event import Event
from bubblecal.storage import EventNotFoundError, EventStore
from bubblecal.tui.form import PLACEHOLDERS, EventForm, Field, FormError
from bubblecal.tui.layout import Style, join_horizontal, join_vertical, place
from bubblecal.tui.styles import Styles, Theme, get_styles

_CLOSE_KEYS = ("ctrl+c", "esc")
_NEXT_KEYS = ("tab", "down", "j")
_PREV_KEYS = ("shift+tab", "up", "k")
_ACTION_KEYS = ("ctrl+s", "enter")
_GREY = Style(foreground="240")


def _long_date(day: _dt.date) -> str:
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


class EventModal:
    """Form dialog that saves a new event or replaces an edited one."""

    def __init__(
        self,
        store: EventStore,
        day: _dt.date,
        categories: Iterable[Category] = (),
        event: Event | None = None,
        default_time: str = "",
        styles: Styles | None = None,
    ) -> None:
        self.store = store
        self.day = day
        self.editing = event
        self.form = EventForm(categories, event, default_time)
        self.styles = styles if styles is not None else get_styles(Theme.DEFAULT)
        self.width = 0
        self.height = 0
        self.error_message = ""

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def handle_key(self, key: str) -> bool:
        """Handle a key press; return True when the modal should close."""
        form = self.form
        if key in _CLOSE_KEYS:
            if form.category_mode:
                form.category_mode = False
                return False
            return True
        if key in _NEXT_KEYS:
            form.navigate(1)
            return False
        if key in _PREV_KEYS:
            form.navigate(-1)
            return False
        if key in _ACTION_KEYS:
            return self._action()
        if key == " ":
            if form.focused == Field.ALL_DAY:
                form.toggle_all_day()
                return False
            if form.focused == Field.CATEGORY:
                form.category_mode = not form.category_mode
                return False
        if key == "backspace":
            form.backspace()
        elif len(key) == 1 and key.isprintable():
            form.type_text(key)
        return False

    def _action(self) -> bool:
        form = self.form
        if form.category_mode:
            form.category_mode = False
            return False
        if form.focused == Field.CATEGORY:
            form.category_mode = True
            return False
        try:
            self.save()
        except (FormError, EventNotFoundError, OSError) as exc:
            self.error_message = str(exc)
            return False
        return True

    def save(self) -> Event:
        """Validate and store the event, returning it.

        Raises FormError for invalid input and the storage errors otherwise.
        """
        event = self.form.build_event()
        if self.editing is not None:
            self.store.update_event(self.day, self.editing, event)
        else:
            self.store.save_event(self.day, event)
        return event

    def render(self) -> str:
        """Render the dialog centred in the terminal."""
        if self.width == 0 or self.height == 0:
            return "Loading..."
        form = self.form
        title = "✏️ Edit Event" if self.editing is not None else "✨ New Event"
        header = join_vertical(
            [
                Style(bold=True, foreground="33").render(title),
                _GREY.render(_long_date(self.day)),
                "",
            ]
        )

        content = [self._field("📝 Title", Field.TITLE, self._input(Field.TITLE))]
        check = "☑" if form.all_day else "☐"
        content.append(self._field("", Field.ALL_DAY, f"{check} All Day Event"))
        if not form.all_day:
            content.append(
                self._field("🕒 Start Time", Field.START_TIME, self._input(Field.START_TIME))
            )
            content.append(
                self._field("🕕 End Time", Field.END_TIME, self._input(Field.END_TIME))
            )
        if form.category_mode:
            content.append(self._category_selector())
        else:
            content.append(
                self._field("🏷️ Category", Field.CATEGORY, self._selected_category())
            )
        content.append(
            self._field("📄 Description", Field.DESCRIPTION, self._input(Field.DESCRIPTION))
        )
        if self.error_message:
            content.append(
                Style(
                    foreground="196",
                    background="52",
                    padding=(0, 1),
                    margin=(1, 0),
                    bold=True,
                ).render("❌ " + self.error_message)
            )

        body = join_vertical([header, join_vertical(content), "", self._instructions()])
        modal = Style(
            border="rounded",
            border_foreground="39",
            padding=(2, 3),
            width=70,
            background="0",
        ).render(body)
        return place(self.width, self.height, modal)

    def _input(self, field: Field) -> str:
        value = self.form.value(field)
        focused = self.form.focused == field and not self.form.category_mode
        text = value if value else _GREY.render(PLACEHOLDERS[field])
        cursor = "█" if focused else ""
        return "> " + (value + cursor if value else cursor + text)

    def _field(self, label: str, field: Field, content: str) -> str:
        focused = self.form.focused == field and not self.form.category_mode
        if focused:
            field_style = Style(
                margin=(0, 0, 1, 0),
                border="normal",
                border_sides=(False, False, False, True),
                border_foreground="39",
            )
        else:
            field_style = Style(margin=(0, 0, 1, 0))
        parts = []
        if label:
            label_style = (
                Style(foreground="39", bold=True) if focused else Style(foreground="247")
            )
            parts.append(label_style.render(label))
        if focused and field in (Field.ALL_DAY, Field.CATEGORY):
            content = "▶ " + content
        parts.append(content)
        return field_style.render(join_vertical(parts))

    def _selected_category(self) -> str:
        category = self.form.selected_category()
        if category is None:
            return _GREY.render("(none)")
        return Style(foreground=category.color).render(f"● {category.name}")

    def _category_selector(self) -> str:
        header = Style(foreground="39", bold=True).render("🏷️ Select Category:")
        entries = []
        for index, category in enumerate(self.form.categories):
            if index == self.form.category_index:
                entries.append(
                    Style(
                        background="39", foreground="0", padding=(0, 1), bold=True
                    ).render(f"▶ {category.name} ◀")
                )
            else:
                entries.append(
                    "  " + Style(foreground=category.color).render(f"● {category.name}")
                )
        box = Style(
            border="rounded",
            border_foreground="39",
            padding=(1, 2),
            margin=(0, 0, 1, 0),
            background="235",
        ).render(join_vertical(entries) if entries else "")
        return join_vertical([header, box])

    def _instructions(self) -> str:
        if self.form.category_mode:
            items = [
                _GREY.render("↑↓ Navigate categories"),
                _GREY.render("Enter/Space Select"),
                _GREY.render("Esc Cancel"),
            ]
        else:
            items = [
                _GREY.render("Tab/↑↓ Navigate fields"),
                _GREY.render("Space Toggle all-day/category"),
                Style(foreground="33", bold=True).render("Enter Save event"),
                Style(foreground="196").render("Esc Cancel"),
            ]
        spaced = []
        for index, item in enumerate(items):
            if index:
                spaced.append("  ")
            spaced.append(item)
        return Style(
            border="normal",
            border_sides=(True, False, False, False),
            border_foreground="240",
            padding=(1, 0, 0, 0),
        ).render(join_horizontal(spaced))