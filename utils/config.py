"""Configuration loading utilities."""
from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import logging
import yaml

DEFAULT_CONFIG_PATH = "config.yaml"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "game": {
        "mode": "play",
        "print_tower": True,
        "target_peg": 1,
    },
    "env": {
        "levels": 3,
        "max_steps": 200,
        "illegal_move_penalty": -1.0,
        "step_penalty": -0.01,
        "solved_bonus": 10.0,
    },
    "logging": {
        "level": "WARNING",
    },
}


class Settings(dict):
    """Nested settings mapping whose sections read as attributes.

    Nested dicts are wrapped when the mapping is built, so
    ``settings.game.print_tower = False`` updates the stored section.
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__()
        for key, value in (data or {}).items():
            self[key] = Settings(value) if isinstance(value, Mapping) else value

    def __getattr__(self, key: str) -> Any:
        if key not in self:
            raise AttributeError(f"Unknown setting {key!r}")
        return self[key]

    def __setattr__(self, key: str, value: Any) -> None:
        self[key] = Settings(value) if isinstance(value, Mapping) else value

    __delattr__ = dict.__delitem__


def get_config_value(config: Mapping[str, Any], path: str, default: Any | None = None) -> Any:
    """Look up a dotted ``section.key`` path, returning ``default`` if absent."""
    current: Any = config
    for part in path.split("."):
        if not isinstance(current, Mapping) or part not in current:
            logging.warning("Setting '%s' missing, using default %r", path, default)
            return default
        current = current[part]
    return current


def load_config(path: str = DEFAULT_CONFIG_PATH) -> Settings:
    """Load YAML configuration file.

    Parameters
    ----------
    path:
        Path to the configuration YAML file.

    Returns
    -------
    Settings
        Configuration data accessible by keys or attributes.
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with config_path.open("r", encoding="utf-8") as f:
        data: Dict[str, Any] = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {path} must contain a mapping")
    game = data.get("game")
    if isinstance(game, dict) and "print_tower" not in game:
        logging.warning("Missing 'print_tower' in game config")

    return Settings(data)


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(path: Optional[str] = None) -> Settings:
    """Return the configuration merged over :data:`DEFAULT_SETTINGS`.

    An explicit ``path`` must exist.  Without one, ``config.yaml`` in the
    working directory is used when present, otherwise the defaults alone.
    """
    if path is None:
        if Path(DEFAULT_CONFIG_PATH).is_file():
            data: Dict[str, Any] = load_config(DEFAULT_CONFIG_PATH)
        else:
            logging.warning("No %s found, using default settings", DEFAULT_CONFIG_PATH)
            data = {}
    else:
        data = load_config(path)

    data = dict(data)
    for section in DEFAULT_SETTINGS:
        if section in data and not isinstance(data[section], dict):
            logging.warning("Section '%s' is not a mapping (%r), using defaults", section, data[section])
            del data[section]

    settings = Settings(_merge(DEFAULT_SETTINGS, data))
    target = get_config_value(settings, "game.target_peg", 1)
    if isinstance(target, bool) or not isinstance(target, int) or not 0 <= target <= 2:
        logging.warning("Invalid game.target_peg %r, using peg 1", target)
        settings.game.target_peg = 1
    return settings
