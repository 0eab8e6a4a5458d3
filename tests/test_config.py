import json

import pytest

from bubblecal.config import (
    Category,
    Config,
    config_path,
    default_categories,
    default_config,
    load,
)


def test_default_categories_start_with_work():
    cats = default_categories()
    assert len(cats) == 8
    assert cats[0] == Category("Work", "#4287f5")
    assert [c.name for c in cats][-1] == "Project"


def test_default_config_values():
    cfg = default_config()
    assert cfg.show_mini_month is True
    assert cfg.agenda_bottom is False
    assert cfg.theme == 0
    assert cfg.categories == default_categories()


def test_category_color_known_and_unknown():
    cfg = default_config()
    assert cfg.category_color("Health") == "#f54242"
    assert cfg.category_color("Nope") == "#808080"


def test_config_path_creates_directory(tmp_path):
    path = config_path(tmp_path)
    assert path == tmp_path / ".bubblecal" / "config.json"
    assert path.parent.is_dir()


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(
        show_mini_month=False,
        agenda_bottom=True,
        theme=3,
        categories=[Category("Gym", "205")],
    )
    cfg.save(path)
    assert load(path) == cfg


def test_saved_json_uses_field_names(tmp_path):
    path = tmp_path / "config.json"
    default_config().save(path)
    data = json.loads(path.read_text())
    assert set(data) == {"show_mini_month", "agenda_bottom", "theme", "categories"}
    assert data["categories"][0] == {"name": "Work", "color": "#4287f5"}


def test_load_missing_file_gives_defaults(tmp_path):
    assert load(tmp_path / "absent.json") == default_config()


def test_load_empty_categories_uses_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"show_mini_month": true, "theme": 2, "categories": []}')
    cfg = load(path)
    assert cfg.theme == 2
    assert cfg.categories == default_categories()


def test_load_absent_fields_take_zero_values(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{}")
    cfg = load(path)
    assert cfg.show_mini_month is False
    assert cfg.agenda_bottom is False
    assert cfg.theme == 0


def test_load_corrupt_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ValueError):
        load(path)


def test_load_wrong_type_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"theme": "dark"}')
    with pytest.raises(ValueError):
        load(path)


def test_from_dict_to_dict_round_trip():
    cfg = Config(True, True, 5, [Category("A", "#000000"), Category("B", "12")])
    assert Config.from_dict(cfg.to_dict()) == cfg