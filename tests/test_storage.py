import datetime as dt

import pytest

from bubblecal.event import Event
from bubblecal.storage import (
    EventNotFoundError,
    EventStore,
    default_calendar_dir,
    sort_events,
)

DAY = dt.date(2024, 3, 5)


@pytest.fixture
def store(tmp_path):
    return EventStore(tmp_path)


def test_default_calendar_dir_name():
    assert default_calendar_dir().name == ".bubblecal"


def test_day_dir_layout(store, tmp_path):
    assert store.day_dir(DAY) == tmp_path / "days" / "2024-03-05"


def test_load_missing_day_is_empty(store):
    assert store.load_day(DAY) == []


def test_save_and_load_round_trip(store):
    event = Event("09:00", "10:00", "Team standup", "Work", "Daily")
    store.save_event(DAY, event)
    assert store.load_day(DAY) == [event]


def test_load_sorts_events(store):
    events = [
        Event("14:00", "", "Late"),
        Event("all-day", "", "Zoo"),
        Event("08:00", "", "Early"),
        Event("all-day", "", "Apple"),
    ]
    for event in events:
        store.save_event(DAY, event)
    titles = [e.title for e in store.load_day(DAY)]
    assert titles == ["Apple", "Zoo", "Early", "Late"]


def test_sort_events_puts_unparseable_last():
    events = [Event("xx:yy", "", "Broken"), Event("10:00", "", "B"), Event("all-day", "", "A")]
    assert [e.title for e in sort_events(events)] == ["A", "B", "Broken"]


def test_duplicate_event_gets_suffix(store):
    event = Event("09:00", "", "Standup")
    first = store.save_event(DAY, event)
    second = store.save_event(DAY, event)
    assert first != second
    assert second.name == first.name + "_2"
    assert len(store.load_day(DAY)) == 2


def test_delete_event_removes_file_and_empty_dir(store):
    event = Event("09:00", "10:00", "Gone")
    store.save_event(DAY, event)
    store.delete_event(DAY, event)
    assert store.load_day(DAY) == []
    assert not store.day_dir(DAY).exists()


def test_delete_keeps_other_events(store):
    keep = Event("11:00", "", "Keep")
    drop = Event("12:00", "", "Drop")
    store.save_event(DAY, keep)
    store.save_event(DAY, drop)
    store.delete_event(DAY, drop)
    assert store.load_day(DAY) == [keep]


def test_delete_unknown_event_raises(store):
    store.save_event(DAY, Event("09:00", "", "Exists"))
    with pytest.raises(EventNotFoundError):
        store.delete_event(DAY, Event("09:00", "", "Missing"))


def test_update_event_replaces(store):
    old = Event("09:00", "", "Old", "Work")
    new = Event("10:00", "11:00", "New", "Health", "Checkup")
    store.save_event(DAY, old)
    store.update_event(DAY, old, new)
    assert store.load_day(DAY) == [new]


def test_update_missing_event_raises(store):
    with pytest.raises(EventNotFoundError):
        store.save_event(DAY, Event("08:00", "", "Other"))
        store.update_event(DAY, Event("09:00", "", "Nope"), Event("10:00", "", "X"))


def test_save_day_replaces_existing(store):
    store.save_event(DAY, Event("09:00", "", "Old"))
    replacement = [Event("all-day", "", "Trip"), Event("15:00", "", "Call")]
    store.save_day(DAY, replacement)
    assert store.load_day(DAY) == replacement


def test_invalid_file_is_skipped_with_warning(store, capsys):
    store.save_event(DAY, Event("09:00", "", "Good"))
    (store.day_dir(DAY) / "garbage").write_text("category:\n")
    events = store.load_day(DAY)
    assert [e.title for e in events] == ["Good"]
    assert "Warning" in capsys.readouterr().err