# bubblecal

Building blocks for a keyboard-driven terminal calendar: event storage in
plain files, a JSON configuration with coloured categories, and views and
dialogs that render to strings with ANSI colour codes.

## Data layout

Events live under a root directory (by default `~/.bubblecal`):

- `config.json` holds the theme, layout choices and event categories.
- `days/YYYY-MM-DD/` holds one file per event. The file name carries the time
  and title, for example `0900-1000-Team_standup`, `1400-Quick_check` or
  `allday-Vacation`; the file body holds `category:` and `description:` lines.

Because events are plain files they can be created, edited or synced with any
other tool.

## Events and storage

```python
import datetime as dt
from bubblecal.event import Event, parse_event_line
from bubblecal.storage import EventStore

store = EventStore("/tmp/cal")          # default root: ~/.bubblecal
day = dt.date(2024, 5, 1)

event = parse_event_line("09:00-10:00 Team standup [Work]")
store.save_event(day, event)            # writes days/2024-05-01/0900-1000-Team_standup
store.load_day(day)                     # all-day events first, then by start time
store.delete_event(day, event)          # EventNotFoundError if nothing matches
```

- `bubblecal.event`: `Event` with `format_line()`, `filename()`,
  `file_content()`, `is_all_day()` and `start_time_value()`;
  `parse_event_line()` and `parse_event_from_filename()` raise
  `EventParseError` on malformed input.
- `bubblecal.storage`: `EventStore` with `day_dir()`, `load_day()`,
  `save_day()`, `save_event()`, `delete_event()` and `update_event()`;
  `sort_events()`; `default_calendar_dir()`. Saving an event whose file name is
  already taken appends `_2`, `_3` and so on.

## Configuration

`bubblecal.config.load()` reads `~/.bubblecal/config.json` (or a given path)
and returns a `Config`; a missing file gives the defaults. `Config.save()`
writes it back as indented JSON, and `Config.category_color(name)` returns a
category's colour, grey (`#808080`) for unknown names. The default categories
are Work, Personal, Health, Meeting, Important, Travel, Family and Project.

## Terminal views

The `bubblecal.tui` package renders to strings:

- `layout`: `Style` (colours, bold, width, height, padding, margin, borders),
  `join_horizontal()`, `join_vertical()`, `place()` and `visible_width()`.
- `styles`: the `Theme` enum (Default, Dark, Light, Neon, Solarized, Nord),
  `get_styles()`, `theme_name()`, `same_day()` and `start_of_week()` (weeks
  start on Sunday).
- `agenda`: `AgendaView`, a scrollable, selectable list of one day's events.
- `month`: `MonthView`, the month grid with per-day event summaries, and
  `month_grid()`.
- `navigation`: `add_days()`, `add_months()` and `calendar_step()`, which maps
  `h`/`l`, `j`/`k` and `ctrl+u`/`ctrl+d` to a new date.
- `form`: `EventForm` with field focus, all-day toggle, category selection and
  validation (`FormError`); `is_valid_time()` and `calculate_end_time()`.
- `event_modal`: `EventModal`, the new/edit event dialog; `handle_key()`
  returns `True` when the dialog should close.
- `dialogs`: `DeleteModal`, `HelpModal` and `SettingsModal`.
- `jump`: `JumpState`, `JumpKind`, `jump_keys_for()` and
  `month_jump_targets()` for one-letter selection of dates and events.

## What this package does not do

It has no command to run and no full-screen application: nothing reads keys
from the terminal, switches between views or draws the header bar and panes.
There are no week, day or list views. The pieces above are for building such
an application on top of.

## Tests

Install with the `test` extra and run `pytest`.