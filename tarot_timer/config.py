"""Configuration for Tarot Timer.

Settings live in ``~/.config/tarot-timer/config.toml``. The directory can be
moved with the ``TAROT_TIMER_HOME`` environment variable.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Optional

import toml

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "TAROT_TIMER_HOME"

DEFAULT_CONFIG = {
    "display": {
        "language": "ko",  # ko or en
        "format_24h": False,
    },
    "clock": {
        "timezone": "Asia/Seoul",
        "poll_seconds": 60,
    },
    "storage": {
        "db_path": "",  # Leave empty to use the config directory
    },
}


def get_config_dir() -> Path:
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "tarot-timer"


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration merged over the defaults.

    Args:
        config_path: Config file to read. Defaults to the standard location.

    Returns:
        Config dict. Defaults are returned when the file is missing or
        cannot be parsed.
    """
    config_path = config_path or get_config_path()

    if not config_path.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        return _merge(DEFAULT_CONFIG, toml.load(config_path))
    except (toml.TomlDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return copy.deepcopy(DEFAULT_CONFIG)


def create_template_config(config_path: Optional[Path] = None) -> Path:
    """Write a template configuration file.

    Returns:
        Path of the written file.
    """
    config_path = config_path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        toml.dump(DEFAULT_CONFIG, f)

    return config_path


def get_db_path(config: dict) -> Path:
    db_path = config.get("storage", {}).get("db_path", "")
    if db_path:
        return Path(db_path).expanduser()
    return get_config_dir() / "tarot.db"
