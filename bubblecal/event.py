"""Calendar events and their text and file-name encodings."""

from __future__ import annotations

import datetime as _dt
import re
from dataclasses import dataclass

ALL_DAY = "all-day"
_ALL_DAY_PREFIX = "all-day "
_ALL_DAY_FILE_PREFIX = "allday-"
_CLOCK = re.compile(r"(\d{1,2}):(\d{2})")
_FILENAME_REPLACEMENTS = (
    (" ", "_"),
    ("/", "-"),
    (":", "-"),
    ("\\", "-"),
    ("?", ""),
    ("*", ""),
    ('"', ""),
    ("<", ""),
    (">", ""),
    ("|", ""),
)


class EventParseError(ValueError):
    """Raised when an event line or file name cannot be parsed."""


@dataclass
class Event:
    """A calendar event; ``start_time`` is "HH:MM" or "all-day"."""

    start_time: str = ""
    end_time: str = ""
    title: str = ""
    category: str = ""
    description: str = ""

    def is_all_day(self) -> bool:
        return self.start_time == ALL_DAY

    def format_line(self) -> str:
        """Format the event as a one-line text entry."""
        if self.is_all_day():
            time_part = ALL_DAY
        elif self.end_time:
            time_part = f"{self.start_time}-{self.end_time}"
        else:
            time_part = self.start_time
        result = f"{time_part} {self.title}"
        if self.category:
            result += f" [{self.category}]"
        return result

    def start_time_value(self) -> _dt.time:
        """Return the start as a clock time; midnight for all-day events."""
        if self.is_all_day():
            return _dt.time.min
        match = _CLOCK.fullmatch(self.start_time)
        if not match:
            raise EventParseError(f"invalid start time: {self.start_time!r}")
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour > 23 or minute > 59:
            raise EventParseError(f"start time out of range: {self.start_time!r}")
        return _dt.time(hour, minute)

    def filename(self) -> str:
        """Return the file name this event is stored under."""
        safe_title = self.title
        for old, new in _FILENAME_REPLACEMENTS:
            safe_title = safe_title.replace(old, new)
        if self.is_all_day():
            return f"{_ALL_DAY_FILE_PREFIX}{safe_title}"
        start = self.start_time.replace(":", "")
        if self.end_time:
            end = self.end_time.replace(":", "")
            return f"{start}-{end}-{safe_title}"
        return f"{start}-{safe_title}"

    def file_content(self) -> str:
        """Return the body of the event's file."""
        return f"category:{self.category}\ndescription:{self.description}\n"


def _split_title_and_category(text: str) -> tuple[str, str]:
    idx = text.rfind("[")
    if idx == -1:
        return text.strip(), ""
    category = text[idx + 1:]
    if category.endswith("]"):
        category = category[:-1]
    return text[:idx].strip(), category.strip()


def parse_event_line(line: str) -> Event:
    """Parse lines such as "09:00-10:00 Standup [work]" or "all-day Trip"."""
    line = line.strip()
    if not line:
        raise EventParseError("empty line")

    if line.startswith(_ALL_DAY_PREFIX):
        title, category = _split_title_and_category(line[len(_ALL_DAY_PREFIX):])
        return Event(ALL_DAY, "", title, category)

    time_part, sep, remainder = line.partition(" ")
    if not sep:
        raise EventParseError("invalid format: no space after time")

    if "-" in time_part:
        times = time_part.split("-")
        if len(times) != 2:
            raise EventParseError("invalid time range format")
        start, end = times[0].strip(), times[1].strip()
    else:
        start, end = time_part, ""

    title, category = _split_title_and_category(remainder)
    return Event(start, end, title, category)


def parse_event_from_filename(filename: str, content: str) -> Event:
    """Rebuild an event from its file name and file body."""
    event = Event()
    for raw in content.split("\n"):
        line = raw.strip()
        if line.startswith("category:"):
            event.category = line[len("category:"):].strip()
        elif line.startswith("description:"):
            event.description = line[len("description:"):].strip()

    if filename.startswith(_ALL_DAY_FILE_PREFIX):
        event.start_time = ALL_DAY
        event.end_time = ""
        event.title = filename[len(_ALL_DAY_FILE_PREFIX):].replace("_", " ")
        return event

    parts = filename.split("-", 2)
    if len(parts) < 2:
        raise EventParseError(f"invalid filename format: {filename}")

    if len(parts[0]) != 4:
        raise EventParseError(f"invalid start time in filename: {parts[0]}")
    event.start_time = f"{parts[0][:2]}:{parts[0][2:]}"

    if len(parts[1]) == 4 and len(parts) > 2:
        event.end_time = f"{parts[1][:2]}:{parts[1][2:]}"
        event.title = parts[2].replace("_", " ")
    else:
        event.end_time = ""
        event.title = "-".join(parts[1:]).replace("_", " ")
    return event