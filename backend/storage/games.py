"""Game records: creation, lookup, expiry."""

from collections import Counter
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any

from .config import get_config
from .core import games_dir, is_valid_id, new_id, read_json, utcnow, write_json
from .rules import build_rules


def _game_path(game_id: str) -> Path:
    return games_dir() / f"{game_id}.json"


def create_game(
    video_id: str,
    video_title: str,
    intoxication_level: int,
    title: str = "",
    video_thumbnail: str | None = None,
    rules: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Create a game that expires after the configured number of days.

    Rule records are built before anything is written; the rule file lands
    before the game record.
    """
    now = utcnow()
    ttl_days = get_config()["game_ttl_days"]
    game = {
        "id": new_id(),
        "title": title or f"{video_title} Drinking Game",
        "video_id": video_id,
        "video_title": video_title,
        "video_thumbnail": video_thumbnail,
        "intoxication_level": intoxication_level,
        "created_at": now.isoformat(),
        "expires_at": (now + timedelta(days=ttl_days)).isoformat(),
        "is_active": True,
    }
    records = build_rules(game["id"], rules or [])
    (games_dir() / game["id"]).mkdir(exist_ok=True)
    write_json(games_dir() / game["id"] / "rules.json", records)
    write_json(_game_path(game["id"]), game)
    return game


def get_game(game_id: str) -> dict[str, Any] | None:
    if not is_valid_id(game_id):
        return None
    return read_json(_game_path(game_id))


def is_expired(game: dict[str, Any]) -> bool:
    return datetime.fromisoformat(game["expires_at"]) < utcnow()


def get_active_game(game_id: str) -> dict[str, Any] | None:
    """Game by id, or None when it is missing, deactivated or past its expiry."""
    game = get_game(game_id)
    if game is None or not game.get("is_active", True) or is_expired(game):
        return None
    return game


def list_games() -> list[dict[str, Any]]:
    return [read_json(path) for path in sorted(games_dir().glob("*.json"))]


def count_games_by_video() -> dict[str, int]:
    return dict(Counter(game["video_id"] for game in list_games()))
