"""State and validation of the event editing form."""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import IntEnum

from bubblecal.config import Category
from bubblecal.event import ALL_DAY, Event


class Field(IntEnum):
    """The focusable fields of the event form, in display order."""

    TITLE = 0
    ALL_DAY = 1
    START_TIME = 2
    END_TIME = 3
    CATEGORY = 4
    DESCRIPTION = 5


TEXT_FIELDS = (Field.TITLE, Field.START_TIME, Field.END_TIME, Field.DESCRIPTION)
CHAR_LIMITS = {
    Field.TITLE: 100,
    Field.START_TIME: 5,
    Field.END_TIME: 5,
    Field.DESCRIPTION: 200,
}
PLACEHOLDERS = {
    Field.TITLE: "Event title",
    Field.START_TIME: "09:00",
    Field.END_TIME: "10:00 (optional)",
    Field.DESCRIPTION: "Event description (optional)",
}
DEFAULT_START = "09:00"
DEFAULT_END = "10:00"

_TIMED_FIELDS = (
    Field.TITLE,
    Field.ALL_DAY,
    Field.START_TIME,
    Field.END_TIME,
    Field.CATEGORY,
    Field.DESCRIPTION,
)
_ALL_DAY_FIELDS = (Field.TITLE, Field.ALL_DAY, Field.CATEGORY, Field.DESCRIPTION)
_CLOCK = re.compile(r" *([+-]?\d+): *([+-]?\d+)")


class FormError(ValueError):
    """Raised when the form's contents do not make a valid event."""


def _parse_clock(text: str) -> tuple[int, int] | None:
    if len(text) != 5 or text[2] != ":":
        return None
    match = _CLOCK.match(text)
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        return None
    return hour, minute


def is_valid_time(text: str) -> bool:
    """Return whether ``text`` is a clock time written as HH:MM."""
    return _parse_clock(text) is not None


def calculate_end_time(start: str) -> str:
    """Return the time one hour after ``start``, capped at hour 23.

    An invalid start gives an empty string.
    """
    parsed = _parse_clock(start)
    if parsed is None:
        return ""
    hour, minute = parsed
    return f"{min(hour + 1, 23):02d}:{minute:02d}"


class EventForm:
    """Field values, focus and category selection of an event being edited."""

    def __init__(
        self,
        categories: Iterable[Category] = (),
        event: Event | None = None,
        default_time: str = "",
    ) -> None:
        self.categories = list(categories)
        self.editing = event
        self.values: dict[Field, str] = {field: "" for field in TEXT_FIELDS}
        self.focused = Field.TITLE
        self.all_day = False
        self.category_index = 0
        self.category_mode = False

        if event is not None:
            self.set_value(Field.TITLE, event.title)
            if event.is_all_day():
                self.all_day = True
            else:
                self.set_value(Field.START_TIME, event.start_time)
                self.set_value(Field.END_TIME, event.end_time)
            self.category_index = next(
                (i for i, cat in enumerate(self.categories) if cat.name == event.category),
                0,
            )
            self.set_value(Field.DESCRIPTION, event.description)
        else:
            self.set_value(Field.START_TIME, DEFAULT_START)
            self.set_value(Field.END_TIME, DEFAULT_END)

        if default_time and event is None and not self.all_day:
            self.set_value(Field.START_TIME, default_time)
            end = calculate_end_time(default_time)
            if end:
                self.set_value(Field.END_TIME, end)

    def value(self, field: Field) -> str:
        """Return the text of a text field."""
        return self.values[field]

    def set_value(self, field: Field, text: str) -> None:
        """Set a text field, truncated to its character limit."""
        if field not in CHAR_LIMITS:
            raise KeyError(f"{field.name} is not a text field")
        self.values[field] = text[: CHAR_LIMITS[field]]

    def selected_category(self) -> Category | None:
        """Return the chosen category, or None if there is none."""
        if 0 <= self.category_index < len(self.categories):
            return self.categories[self.category_index]
        return None

    def visible_fields(self) -> list[Field]:
        """Return the fields shown, which omit the times for all-day events."""
        return list(_ALL_DAY_FIELDS if self.all_day else _TIMED_FIELDS)

    def navigate(self, direction: int) -> None:
        """Move focus, or the category choice in category mode, with wrap-around."""
        if self.category_mode:
            index = self.category_index + direction
            if index >= len(self.categories):
                index = 0
            elif index < 0:
                index = len(self.categories) - 1
            self.category_index = index
            return

        fields = self.visible_fields()
        current = fields.index(self.focused) if self.focused in fields else -1
        current += direction
        if current >= len(fields):
            current = 0
        elif current < 0:
            current = len(fields) - 1
        self.focused = fields[current]

    def toggle_all_day(self) -> None:
        """Switch between all-day and timed, resetting the time fields."""
        self.all_day = not self.all_day
        if self.all_day:
            self.set_value(Field.START_TIME, "")
            self.set_value(Field.END_TIME, "")
            if self.focused in (Field.START_TIME, Field.END_TIME):
                self.focused = Field.CATEGORY
        else:
            self.set_value(Field.START_TIME, DEFAULT_START)
            self.set_value(Field.END_TIME, DEFAULT_END)

    def type_text(self, text: str) -> None:
        """Append text to the focused text field, up to its limit."""
        if self.focused in TEXT_FIELDS:
            self.set_value(self.focused, self.values[self.focused] + text)

    def backspace(self) -> None:
        """Remove the last character of the focused text field."""
        if self.focused in TEXT_FIELDS:
            self.values[self.focused] = self.values[self.focused][:-1]

    def build_event(self) -> Event:
        """Return the event described by the form, or raise FormError."""
        title = self.values[Field.TITLE].strip()
        if not title:
            raise FormError("title cannot be empty")
        category = self.selected_category()
        event = Event(
            title=title,
            category=category.name if category is not None else "",
            description=self.values[Field.DESCRIPTION].strip(),
        )
        if self.all_day:
            event.start_time = ALL_DAY
            event.end_time = ""
            return event

        event.start_time = self.values[Field.START_TIME].strip()
        event.end_time = self.values[Field.END_TIME].strip()
        if not event.start_time:
            raise FormError("start time required for timed events")
        if not is_valid_time(event.start_time):
            raise FormError("invalid start time format (use HH:MM)")
        if event.end_time and not is_valid_time(event.end_time):
            raise FormError("invalid end time format (use HH:MM)")
        return event