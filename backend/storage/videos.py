"""Cached channel videos (videos.json, keyed by YouTube video id)."""

from datetime import datetime
from pathlib import Path
from typing import Any

from drinking_game.models import Video

from .core import data_dir, read_json, utcnow, write_json


def _videos_path() -> Path:
    return data_dir() / "videos.json"


def _load() -> list[dict[str, Any]]:
    return read_json(_videos_path(), default=[])


def get_videos(limit: int = 100) -> list[dict[str, Any]]:
    """Stored videos, newest published first."""
    videos = sorted(_load(), key=lambda v: v["published_at"], reverse=True)
    return videos[:limit]


def upsert_videos(videos: list[Video]) -> int:
    """Insert new videos or refresh existing ones by id. Returns the number written."""
    by_id = {v["id"]: v for v in _load()}
    fetched = utcnow().isoformat()
    for video in videos:
        record = video.model_dump(mode="json")
        record["last_fetched"] = fetched
        by_id[video.id] = record
    write_json(_videos_path(), list(by_id.values()))
    return len(videos)


def last_video_fetch() -> datetime | None:
    """Most recent last_fetched timestamp, or None when nothing is cached."""
    stamps = [v["last_fetched"] for v in _load() if v.get("last_fetched")]
    if not stamps:
        return None
    return max(datetime.fromisoformat(s) for s in stamps)
