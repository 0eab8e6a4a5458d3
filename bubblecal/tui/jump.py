"""Jump mode: one-key labels for quickly selecting dates or events."""

from __future__ import annotations

import calendar
import datetime as _dt
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

JUMP_KEYS = (
    "a", "s", "d", "f", "g", "h", "j", "k", "l",
    "q", "w", "e", "r", "t", "y", "u", "i", "o", "p",
    "z", "x", "c", "v", "b", "n", "m",
)


class JumpKind(Enum):
    """What a jump selects."""

    CALENDAR = "calendar"
    AGENDA = "agenda"


def jump_keys_for(count: int) -> list[str]:
    """Return labels for ``count`` targets, at most one per available key."""
    return list(JUMP_KEYS[: max(count, 0)])


def month_jump_targets(day: _dt.date) -> list[_dt.date]:
    """Return the days of the month containing ``day``, limited to the keys."""
    days_in_month = calendar.monthrange(day.year, day.month)[1]
    count = min(days_in_month, len(JUMP_KEYS))
    return [_dt.date(day.year, day.month, number) for number in range(1, count + 1)]


@dataclass
class JumpState:
    """Whether jump mode is on, and the labels and targets it offers."""

    active: bool = False
    kind: JumpKind | None = None
    keys: list[str] = field(default_factory=list)
    targets: list[_dt.date] = field(default_factory=list)

    @property
    def label(self) -> str:
        """Return the status label shown in the header."""
        if self.kind is JumpKind.CALENDAR:
            return "JUMP CALENDAR"
        if self.kind is JumpKind.AGENDA:
            return "JUMP AGENDA"
        return "JUMP"

    def start(
        self,
        kind: JumpKind,
        keys: Iterable[str],
        targets: Iterable[_dt.date] = (),
    ) -> None:
        """Enter jump mode with the given labels and optional date targets."""
        self.active = True
        self.kind = kind
        self.keys = list(keys)
        self.targets = list(targets)

    def cancel(self) -> None:
        """Leave jump mode and forget the labels and targets."""
        self.active = False
        self.keys = []
        self.targets = []

    def match(self, key: str) -> int | None:
        """Return the index labelled ``key``, or None if none matches.

        The state is left unchanged so the caller can read ``targets``
        before calling ``cancel``.
        """
        if not self.active:
            return None
        try:
            return self.keys.index(key)
        except ValueError:
            return None