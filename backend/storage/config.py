"""Global app configuration (feed, game lifetime, rule count, Sheets sync)."""

import json
from pathlib import Path
from typing import Any

from drinking_game.feeds import DEFAULT_FEED_URL
from drinking_game.sheets import DEFAULT_RANGE

from .core import data_dir, write_json

_CONFIG_DEFAULTS: dict[str, Any] = {
    "rss_feed_url": DEFAULT_FEED_URL,
    "video_cache_minutes": 60,
    "max_videos": 100,
    "game_ttl_days": 90,
    "default_rule_count": 5,
    "sheets": {
        "sheet_id": "",
        "api_key": "",
        "range": DEFAULT_RANGE,
        "sync_interval_minutes": 60,
    },
}

_SCALAR_KEYS = (
    "rss_feed_url",
    "video_cache_minutes",
    "max_videos",
    "game_ttl_days",
    "default_rule_count",
)


def _config_path() -> Path:
    return data_dir() / "config.json"


def get_config() -> dict[str, Any]:
    """Read config, returning defaults merged with stored values."""
    config: dict[str, Any] = json.loads(json.dumps(_CONFIG_DEFAULTS))
    path = _config_path()
    if path.is_file():
        stored = json.loads(path.read_text())
        for key in _SCALAR_KEYS:
            if key in stored:
                config[key] = stored[key]
        if isinstance(stored.get("sheets"), dict):
            config["sheets"].update(stored["sheets"])
    return config


def update_config(fields: dict[str, Any]) -> dict[str, Any]:
    """Merge fields into config and persist. Returns full config.

    Scalars are overwritten, `sheets` is merged key-by-key, unknown keys are ignored.
    """
    config = get_config()
    for key in _SCALAR_KEYS:
        if key in fields:
            config[key] = fields[key]
    if isinstance(fields.get("sheets"), dict):
        config["sheets"].update(fields["sheets"])
    write_json(_config_path(), config)
    return config
