"""Catalog queries: search, feeds, related videos and upload defaults.

The catalog is small, so every query is a linear scan over the videos
loaded from the database.
"""
import random
import time
from typing import Iterable, List, Optional, Sequence

from videoshare.core.i18n import CATEGORIES, SUPPORTED_LANGUAGES
from videoshare.models.video import Video

ALL_CATEGORY = "All"


def _localized_values(text: Optional[dict]) -> List[str]:
    text = text or {}
    return [text.get(language, "") or "" for language in SUPPORTED_LANGUAGES]


def matches_query(video: Video, query: str) -> bool:
    """
    Case-insensitive substring match over title, description and tags.

    Args:
        video: Video to test
        query: Search text, already stripped

    Returns:
        True if any field of any language contains the query
    """
    needle = query.lower()
    fields = _localized_values(video.title) + _localized_values(video.description)
    if any(needle in value.lower() for value in fields):
        return True
    return any(needle in tag.lower() for tag in (video.tags or []))


def search_videos(videos: Iterable[Video], query: Optional[str]) -> List[Video]:
    """Videos matching ``query`` in catalog order. Blank queries match nothing."""
    query = (query or "").strip()
    if not query:
        return []
    return [video for video in videos if matches_query(video, query)]


def resolve_category(category: Optional[str]) -> Optional[str]:
    """Canonical category name, or None when it is not a known category."""
    if not category:
        return ALL_CATEGORY
    for known in CATEGORIES:
        if known.lower() == category.strip().lower():
            return known
    return None


def filter_by_category(videos: Iterable[Video], category: str) -> List[Video]:
    """Keep videos tagged with the lowercased category; ``All`` keeps everything."""
    if category == ALL_CATEGORY:
        return list(videos)
    wanted = category.lower()
    return [
        video for video in videos
        if any(tag.lower() == wanted for tag in (video.tags or []))
    ]


def shuffle_videos(videos: Sequence[Video], rng: Optional[random.Random] = None) -> List[Video]:
    """Return a shuffled copy for the home feed."""
    shuffled = list(videos)
    (rng or random).shuffle(shuffled)
    return shuffled


def related_videos(videos: Iterable[Video], current_id: str, limit: int = 10) -> List[Video]:
    """First ``limit`` regular videos other than the current one."""
    related = []
    for video in videos:
        if len(related) >= limit:
            break
        if video.id == current_id or video.is_shorts:
            continue
        related.append(video)
    return related


def shorts_feed(videos: Iterable[Video]) -> List[Video]:
    return [video for video in videos if video.is_shorts]


def filter_history(videos: Iterable[Video], query: Optional[str]) -> List[Video]:
    """Watch history search over titles and channel name."""
    query = (query or "").strip().lower()
    if not query:
        return list(videos)
    return [
        video for video in videos
        if any(query in value.lower() for value in _localized_values(video.title))
        or query in video.channel_name.lower()
    ]


def placeholder_duration(is_shorts: bool, rng: Optional[random.Random] = None) -> str:
    """
    Display duration for a new upload.

    Media files are not inspected, so shorts get 0:15-0:59 and regular
    uploads 0:00-9:59.
    """
    rng = rng or random
    if is_shorts:
        return f"0:{rng.randint(15, 59):02d}"
    return f"{rng.randint(0, 9)}:{rng.randint(0, 59):02d}"


def detect_media_type(content_type: Optional[str]) -> str:
    """``audio`` for audio/* uploads, ``video`` for everything else."""
    if content_type and content_type.lower().startswith("audio/"):
        return "audio"
    return "video"


def default_thumbnail_url() -> str:
    return f"https://picsum.photos/seed/thumb_{int(time.time() * 1000)}/360/202"


def username_suggestions(username: str, rng: Optional[random.Random] = None) -> List[str]:
    """Alternatives offered when a requested username is taken."""
    rng = rng or random
    return [
        f"{username}{rng.randint(0, 99)}",
        f"{username}_{rng.randint(0, 9)}",
        f"The{username}",
    ]
