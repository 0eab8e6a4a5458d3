"""Application configuration stored as JSON in the user's home directory."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_CATEGORY_COLOR = "#808080"
CONFIG_DIR_NAME = ".bubblecal"
CONFIG_FILE_NAME = "config.json"


@dataclass
class Category:
    """A named event category with a display colour."""

    name: str
    color: str


def default_categories() -> list[Category]:
    """Return the built-in set of categories."""
    return [
        Category("Work", "#4287f5"),
        Category("Personal", "#42f554"),
        Category("Health", "#f54242"),
        Category("Meeting", "#f5a442"),
        Category("Important", "#f542e0"),
        Category("Travel", "#42f5f5"),
        Category("Family", "#f5f542"),
        Category("Project", "#8b42f5"),
    ]


def _get_bool(data: dict[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"config field {key!r} must be a boolean")
    return value


def _get_int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"config field {key!r} must be an integer")
    return value


def _get_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


@dataclass
class Config:
    """User preferences: layout, theme and categories."""

    show_mini_month: bool = True
    agenda_bottom: bool = False
    theme: int = 0
    categories: list[Category] = field(default_factory=default_categories)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a config from decoded JSON; absent fields take zero values."""
        raw_categories = data.get("categories")
        if raw_categories is None:
            raw_categories = []
        if not isinstance(raw_categories, list):
            raise ValueError("config field 'categories' must be a list")
        categories = []
        for item in raw_categories:
            if item is None:
                item = {}
            if not isinstance(item, dict):
                raise ValueError("each category must be an object")
            categories.append(Category(_get_str(item, "name"), _get_str(item, "color")))
        return cls(
            show_mini_month=_get_bool(data, "show_mini_month"),
            agenda_bottom=_get_bool(data, "agenda_bottom"),
            theme=_get_int(data, "theme"),
            categories=categories or default_categories(),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation."""
        return {
            "show_mini_month": self.show_mini_month,
            "agenda_bottom": self.agenda_bottom,
            "theme": self.theme,
            "categories": [{"name": c.name, "color": c.color} for c in self.categories],
        }

    def save(self, path: str | Path | None = None) -> None:
        """Write the configuration as indented JSON."""
        target = Path(path) if path is not None else config_path()
        target.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    def category_color(self, name: str) -> str:
        """Return the colour of the named category, grey if unknown."""
        for category in self.categories:
            if category.name == name:
                return category.color
        return DEFAULT_CATEGORY_COLOR


def default_config() -> Config:
    """Return the default configuration."""
    return Config()


def config_path(home: str | Path | None = None) -> Path:
    """Return the config file path, creating its directory if needed."""
    base = Path(home) if home is not None else Path.home()
    directory = base / CONFIG_DIR_NAME
    directory.mkdir(parents=True, exist_ok=True)
    return directory / CONFIG_FILE_NAME


def load(path: str | Path | None = None) -> Config:
    """Load the configuration; a missing file yields the defaults.

    Unreadable or malformed files raise OSError or ValueError.
    """
    if path is None:
        try:
            path = config_path()
        except (OSError, RuntimeError):
            return default_config()
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return default_config()
    data = json.loads(text)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("configuration must be a JSON object")
    return Config.from_dict(data)