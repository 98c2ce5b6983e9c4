"""Video catalog schemas."""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from videoshare.core.i18n import relative_time_label, views_label
from videoshare.models.video import Video


class MultilingualString(BaseModel):
    """Text stored once per supported language."""
    en: str = ""
    ru: str = ""


class VideoResponse(BaseModel):
    """Video card and watch page payload."""
    id: str
    title: MultilingualString
    description: MultilingualString
    thumbnail_url: str
    video_url: str
    media_type: str
    duration: str
    tags: List[str]
    is_shorts: bool
    views: int
    views_label: str
    channel_id: str
    channel_name: str
    channel_avatar_url: str
    channel_verified: bool
    created_at: datetime
    uploaded_at: str

    @classmethod
    def from_video(cls, video: Video, language: str = "en") -> "VideoResponse":
        """Build the response, rendering labels in ``language``."""
        channel = video.channel
        return cls(
            id=video.id,
            title=MultilingualString(**(video.title or {})),
            description=MultilingualString(**(video.description or {})),
            thumbnail_url=video.thumbnail_url,
            video_url=video.video_url,
            media_type=video.media_type,
            duration=video.duration,
            tags=list(video.tags or []),
            is_shorts=video.is_shorts,
            views=video.views,
            views_label=views_label(video.views, language),
            channel_id=video.channel_id,
            channel_name=video.channel_name,
            channel_avatar_url=video.channel_avatar_url,
            channel_verified=bool(channel and channel.is_verified),
            created_at=video.created_at,
            uploaded_at=relative_time_label(video.created_at, language)
        )


class VideoListResponse(BaseModel):
    """List of videos."""
    videos: List[VideoResponse]
    total: int


class SearchResponse(VideoListResponse):
    """Search results with the query echoed back."""
    query: str
    message: Optional[str] = None


class HomeFeedResponse(VideoListResponse):
    """Shuffled home feed."""
    category: str
    categories: List[str]


class VideoUpdate(BaseModel):
    """
    Admin edit of a video.

    ``title`` and ``description`` replace only the entry for ``language``;
    ``tags`` is a comma-separated string like the upload form.
    """
    language: str = Field(default="en", pattern="^(en|ru)$")
    title: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=5000)
    tags: Optional[str] = Field(None, max_length=2000)


class ViewCountResponse(BaseModel):
    """View counter after an increment."""
    video_id: str
    views: int
