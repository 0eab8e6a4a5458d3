import datetime as dt

import pytest

from bubblecal.tui.jump import (
    JUMP_KEYS,
    JumpKind,
    JumpState,
    jump_keys_for,
    month_jump_targets,
)


def test_jump_keys_prefix():
    assert jump_keys_for(3) == ["a", "s", "d"]


@pytest.mark.parametrize("count", [0, -4])
def test_jump_keys_none(count):
    assert jump_keys_for(count) == []


def test_jump_keys_capped():
    assert jump_keys_for(100) == list(JUMP_KEYS)


@pytest.mark.parametrize(
    "day", [dt.date(2024, 2, 10), dt.date(2023, 2, 1), dt.date(2024, 12, 31)]
)
def test_month_targets_invariants(day):
    targets = month_jump_targets(day)
    assert len(targets) == min(len(JUMP_KEYS), 28)
    assert targets[0] == dt.date(day.year, day.month, 1)
    assert all(t.month == day.month and t.year == day.year for t in targets)
    assert all(b - a == dt.timedelta(days=1) for a, b in zip(targets, targets[1:]))


def test_match_returns_index_and_keeps_targets():
    state = JumpState()
    targets = month_jump_targets(dt.date(2024, 5, 1))
    state.start(JumpKind.CALENDAR, jump_keys_for(len(targets)), targets)
    index = state.match("s")
    assert index == 1
    assert state.targets[index] == dt.date(2024, 5, 2)
    assert state.active is True


def test_match_unknown_key():
    state = JumpState()
    state.start(JumpKind.AGENDA, jump_keys_for(2))
    assert state.match("m") is None


def test_match_inactive():
    state = JumpState(keys=["a"])
    assert state.match("a") is None


def test_cancel_clears():
    state = JumpState()
    state.start(JumpKind.CALENDAR, ["a"], [dt.date(2024, 1, 1)])
    state.cancel()
    assert state.active is False
    assert state.keys == []
    assert state.targets == []
    assert state.match("a") is None


def test_labels():
    state = JumpState()
    assert state.label == "JUMP"
    state.start(JumpKind.CALENDAR, [])
    assert state.label == "JUMP CALENDAR"
    state.start(JumpKind.AGENDA, [])
    assert state.label == "JUMP AGENDA"
    assert JumpKind("agenda") is JumpKind.AGENDA