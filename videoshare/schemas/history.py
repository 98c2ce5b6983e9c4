"""Watch history schemas."""
from datetime import datetime
from typing import List
from pydantic import BaseModel, Field

from videoshare.schemas.video import VideoResponse


class HistoryAdd(BaseModel):
    """Record that a video was opened."""
    video_id: str = Field(..., min_length=1, max_length=64)


class HistoryEntryResponse(BaseModel):
    """Watched video with the time it was last opened."""
    video: VideoResponse
    watched_at: datetime


class HistoryListResponse(BaseModel):
    """Watch history, most recent first."""
    entries: List[HistoryEntryResponse]
    total: int
