import datetime as dt
import re

import pytest

from bubblecal.config import Config
from bubblecal.event import Event
from bubblecal.storage import EventStore
from bubblecal.tui.dialogs import DeleteModal, HelpModal, SettingsModal
from bubblecal.tui.layout import visible_width

_ANSI = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")
DAY = dt.date(2024, 3, 5)


def plain(text):
    return _ANSI.sub("", text)


@pytest.fixture
def store(tmp_path):
    return EventStore(tmp_path)


@pytest.fixture
def event():
    return Event("09:00", "10:00", "Team standup", "Work")


def test_delete_confirm_removes_event(store, event):
    store.save_event(DAY, event)
    modal = DeleteModal(store, DAY, event)
    assert modal.handle_key("y") is True
    assert modal.confirmed is True
    assert store.load_day(DAY) == []


@pytest.mark.parametrize("key", ["n", "N", "esc", "ctrl+c"])
def test_delete_cancel_keeps_event(store, event, key):
    store.save_event(DAY, event)
    modal = DeleteModal(store, DAY, event)
    assert modal.handle_key(key) is True
    assert modal.confirmed is False
    assert store.load_day(DAY) == [event]


def test_delete_missing_event_closes_unconfirmed(store, event):
    store.save_event(DAY, Event("08:00", "", "Other"))
    modal = DeleteModal(store, DAY, event)
    assert modal.handle_key("enter") is True
    assert modal.confirmed is False


def test_delete_other_key_keeps_open(store, event):
    modal = DeleteModal(store, DAY, event)
    assert modal.handle_key("x") is False


def test_delete_render_without_size(store, event):
    assert DeleteModal(store, DAY, event).render() == "Loading..."


def test_delete_render_content(store, event):
    modal = DeleteModal(store, DAY, event)
    modal.set_size(100, 40)
    text = plain(modal.render())
    assert "Confirm Delete" in text
    assert "Delete this event?" in text
    assert "[Y]es / [N]o" in text
    assert "Team standup (09:00 - 10:00)" in text
    assert "Category: Work" in text
    lines = modal.render().split("\n")
    assert len(lines) == 40
    assert all(visible_width(line) == 100 for line in lines)


def test_delete_render_all_day(store):
    modal = DeleteModal(store, DAY, Event("all-day", "", "Vacation"))
    modal.set_size(100, 40)
    text = plain(modal.render())
    assert "Vacation (All Day)" in text
    assert "Category:" not in text


@pytest.mark.parametrize("key", ["ctrl+c", "esc", "?", "enter", "q"])
def test_help_close_keys(key):
    assert HelpModal(0).handle_key(key) is True


def test_help_other_key():
    assert HelpModal(0).handle_key("x") is False


def test_help_render_month():
    modal = HelpModal(0)
    assert modal.render() == "Loading..."
    modal.set_size(100, 60)
    text = plain(modal.render())
    assert "Month View Help" in text
    assert "Ctrl+U/D  Previous/next month" in text
    assert "Toggle mini-month view" not in text


def test_help_render_week():
    modal = HelpModal(1)
    modal.set_size(100, 60)
    text = plain(modal.render())
    assert "Week View Help" in text
    assert "Toggle mini-month view" in text


def test_settings_scroll():
    modal = SettingsModal(Config())
    assert modal.handle_key("k") is False
    assert modal.scroll_offset == 0
    modal.handle_key("j")
    modal.handle_key("down")
    assert modal.scroll_offset == 2
    modal.handle_key("up")
    assert modal.scroll_offset == 1


@pytest.mark.parametrize("key", ["ctrl+c", "esc", "q", "S"])
def test_settings_close(key):
    assert SettingsModal(Config()).handle_key(key) is True


def test_settings_render():
    cfg = Config(show_mini_month=True, agenda_bottom=True, theme=1)
    modal = SettingsModal(cfg, config_file="/cfg/config.json")
    assert modal.render() == "Loading..."
    modal.set_size(100, 60)
    text = plain(modal.render())
    assert "Theme: Dark" in text
    assert "Mini Month in Week View: true" in text
    assert "Agenda Position: Bottom" in text
    assert "● Work" in text
    assert "Config: /cfg/config.json" in text


def test_settings_unknown_theme_is_default():
    modal = SettingsModal(Config(theme=99, agenda_bottom=False), config_file="/cfg/c.json")
    modal.set_size(100, 60)
    text = plain(modal.render())
    assert "Theme: Default" in text
    assert "Agenda Position: Right" in text