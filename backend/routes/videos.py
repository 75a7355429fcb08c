"""Channel video listing, refreshed from the YouTube feed when the cache is stale."""

import logging
from datetime import timedelta

from fastapi import APIRouter, HTTPException

from backend import storage
from drinking_game import feeds

logger = logging.getLogger(__name__)

router = APIRouter()


def _cache_is_fresh(cache_minutes: int) -> bool:
    last = storage.last_video_fetch()
    return last is not None and storage.utcnow() - last < timedelta(minutes=cache_minutes)


@router.get("/videos")
async def list_videos():
    """List channel videos (newest first) with the number of games made for each."""
    config = storage.get_config()
    if not _cache_is_fresh(config["video_cache_minutes"]):
        try:
            xml_text = await feeds.fetch_rss(config["rss_feed_url"])
            videos = feeds.parse_rss(xml_text, max_videos=config["max_videos"])
        except feeds.FeedError as e:
            logger.warning(f"Video feed refresh failed: {e}")
            raise HTTPException(500, "Failed to fetch videos")
        logger.info(f"Fetched {len(videos)} videos from RSS feed")
        if videos:
            storage.upsert_videos(videos)

    counts = storage.count_games_by_video()
    return [
        {**video, "game_count": counts.get(video["id"], 0)}
        for video in storage.get_videos(limit=config["max_videos"])
    ]
