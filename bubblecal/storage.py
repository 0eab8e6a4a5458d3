"""File-backed event storage: one directory per day, one file per event."""

from __future__ import annotations

import datetime as _dt
import shutil
import sys
from collections.abc import Iterable
from pathlib import Path

from bubblecal.event import Event, EventParseError, parse_event_from_filename

_MAX_DUPLICATE_SUFFIX = 100


class EventNotFoundError(LookupError):
    """Raised when an event to delete is not present in storage."""


def default_calendar_dir() -> Path:
    """Return the base directory for calendar data."""
    try:
        return Path.home() / ".bubblecal"
    except RuntimeError:
        return Path("")


def _sort_key(event: Event) -> tuple:
    if event.is_all_day():
        return (0, event.title)
    try:
        return (1, event.start_time_value())
    except EventParseError:
        return (2,)


def sort_events(events: Iterable[Event]) -> list[Event]:
    """Return events ordered: all-day by title, then timed by start time.

    Timed events whose start cannot be parsed go last.
    """
    return sorted(events, key=_sort_key)


def _read_events(directory: Path, warn: bool) -> list[tuple[Path, Event]]:
    found = []
    for path in sorted(directory.iterdir()):
        if path.is_dir():
            continue
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            if warn:
                print(f"Warning: failed to read {path.name}: {exc}", file=sys.stderr)
            continue
        try:
            event = parse_event_from_filename(path.name, content)
        except EventParseError as exc:
            if warn:
                print(f"Warning: failed to parse {path.name}: {exc}", file=sys.stderr)
            continue
        found.append((path, event))
    return found


class EventStore:
    """Events kept under ``<root>/days/YYYY-MM-DD/<event file>``."""

    def __init__(self, root: str | Path | None = None) -> None:
        self.root = Path(root) if root is not None else default_calendar_dir()

    @property
    def days_dir(self) -> Path:
        return self.root / "days"

    def day_dir(self, day: _dt.date) -> Path:
        """Return the directory holding the given day's events."""
        return self.days_dir / day.strftime("%Y-%m-%d")

    def load_day(self, day: _dt.date) -> list[Event]:
        """Load and sort a day's events; unreadable files are skipped."""
        directory = self.day_dir(day)
        if not directory.exists():
            return []
        return sort_events(event for _, event in _read_events(directory, warn=True))

    def save_day(self, day: _dt.date, events: Iterable[Event]) -> None:
        """Replace all of a day's events with the given ones."""
        directory = self.day_dir(day)
        if directory.exists():
            shutil.rmtree(directory)
        for event in events:
            self.save_event(day, event)

    def save_event(self, day: _dt.date, event: Event) -> Path:
        """Write one event to its own file and return the file's path."""
        directory = self.day_dir(day)
        directory.mkdir(parents=True, exist_ok=True)
        name = event.filename()
        path = directory / name
        if path.exists():
            for suffix in range(2, _MAX_DUPLICATE_SUFFIX):
                candidate = directory / f"{name}_{suffix}"
                if not candidate.exists():
                    path = candidate
                    break
        path.write_text(event.file_content(), encoding="utf-8")
        return path

    def delete_event(self, day: _dt.date, event: Event) -> None:
        """Delete the first file matching the event's times and title."""
        directory = self.day_dir(day)
        for path, stored in _read_events(directory, warn=False):
            if (
                stored.start_time == event.start_time
                and stored.end_time == event.end_time
                and stored.title == event.title
            ):
                path.unlink()
                if not any(directory.iterdir()):
                    directory.rmdir()
                return
        raise EventNotFoundError("event not found")

    def update_event(self, day: _dt.date, old: Event, new: Event) -> None:
        """Replace ``old`` with ``new``, restoring ``old`` if saving fails."""
        self.delete_event(day, old)
        try:
            self.save_event(day, new)
        except OSError:
            try:
                self.save_event(day, old)
            except OSError:
                pass
            raise