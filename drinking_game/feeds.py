"""YouTube channel feed: fetch and parse the Atom feed into Video models.

The feed is Atom with two extension namespaces:

    media:  <media:group> holds title, description, thumbnails and
            <media:community><media:statistics views=".." likes=".."/>
    yt:     <yt:videoId>, <yt:duration>

parse_rss() keeps the widest thumbnail and appends duration, view and like
counts to the description when the feed carries them.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET

import httpx
from pydantic import ValidationError

from drinking_game.models import Video

logger = logging.getLogger(__name__)

DEFAULT_FEED_URL = "https://www.youtube.com/feeds/videos.xml?channel_id=UCx4MHIcTdwdcmJ5accSDlPA"

NS = {
    "atom": "http://www.w3.org/2005/Atom",
    "media": "http://search.yahoo.com/mrss/",
    "yt": "http://www.youtube.com/xml/schemas/2015",
}

_FEED_ID_RE = re.compile(r"yt:video:(.+)")
_QUERY_ID_RE = re.compile(r"[?&]v=([^&]+)")


class FeedError(RuntimeError):
    """Raised when the feed cannot be fetched or does not parse."""


async def fetch_rss(url: str = DEFAULT_FEED_URL, timeout: float = 10.0) -> str:
    logger.debug("fetching feed url=%s", url)
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.get(url)
            resp.raise_for_status()
    except httpx.ConnectError as e:
        raise FeedError(f"Cannot connect to feed at {url}") from e
    except httpx.HTTPStatusError as e:
        raise FeedError(f"Failed to fetch RSS feed: HTTP {e.response.status_code}") from e
    except httpx.TimeoutException as e:
        raise FeedError(f"Feed request timed out after {timeout}s") from e
    return resp.text


def extract_video_id(value: str) -> str:
    """Video id from a feed id ("yt:video:<id>") or a watch URL; else unchanged."""
    match = _FEED_ID_RE.search(value)
    if match:
        return match.group(1)
    match = _QUERY_ID_RE.search(value)
    return match.group(1) if match else value


def _width(thumb: ET.Element) -> int:
    try:
        return int(thumb.get("width", "0"))
    except ValueError:
        return 0


def _best_thumbnail(group: ET.Element | None) -> str:
    if group is None:
        return ""
    thumbs = group.findall("media:thumbnail", NS)
    if not thumbs:
        return ""
    best = thumbs[0]
    for thumb in thumbs[1:]:
        if _width(thumb) > _width(best):
            best = thumb
    return best.get("url", "")


def _format_count(raw: str) -> str:
    try:
        return f"{int(raw):,}"
    except ValueError:
        return raw


def _describe(entry: ET.Element, group: ET.Element | None) -> str:
    description = ""
    duration = entry.findtext("yt:duration", default="", namespaces=NS)
    views = likes = None
    if group is not None:
        description = group.findtext("media:description", default="", namespaces=NS)
        if not duration:
            content = group.find("media:content", NS)
            if content is not None:
                duration = content.get("duration", "")
        stats = group.find("media:community/media:statistics", NS)
        if stats is not None:
            views = stats.get("views")
            likes = stats.get("likes")

    if duration:
        description += f"\n\nDuration: {duration}"
    if views:
        description += f"\nViews: {_format_count(views)}"
    if likes:
        description += f"\nLikes: {_format_count(likes)}"
    return description


def _parse_entry(entry: ET.Element) -> Video:
    group = entry.find("media:group", NS)
    raw_id = entry.findtext("yt:videoId", default="", namespaces=NS) or entry.findtext(
        "atom:id", default="", namespaces=NS
    )
    title = entry.findtext("atom:title", default="", namespaces=NS)
    if group is not None:
        title = group.findtext("media:title", default=title, namespaces=NS)
    return Video(
        id=extract_video_id(raw_id),
        title=title,
        thumbnail=_best_thumbnail(group),
        published_at=entry.findtext("atom:published", default="", namespaces=NS),
        description=_describe(entry, group),
    )


def parse_rss(xml_text: str, max_videos: int = 100) -> list[Video]:
    """Parse feed XML into at most max_videos Video models, feed order kept."""
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise FeedError(f"Feed is not valid XML: {e}") from e

    entries = root.findall("atom:entry", NS)[:max_videos]
    try:
        videos = [_parse_entry(entry) for entry in entries]
    except ValidationError as e:
        raise FeedError(f"Feed entry is missing required fields: {e}") from e

    logger.info("parsed %d videos from feed", len(videos))
    return videos
