"""Comment schemas."""
from datetime import datetime
from typing import List
from pydantic import BaseModel, Field

from videoshare.core.i18n import relative_time_label
from videoshare.models.comment import Comment


class CommentCreate(BaseModel):
    """New comment."""
    text: str = Field(..., max_length=5000)


class CommentResponse(BaseModel):
    """Comment as shown under a video."""
    id: str
    video_id: str
    author_id: str
    author_name: str
    author_avatar_url: str
    text: str
    likes: int
    created_at: datetime
    timestamp: str

    @classmethod
    def from_comment(cls, comment: Comment, language: str = "en") -> "CommentResponse":
        return cls(
            id=comment.id,
            video_id=comment.video_id,
            author_id=comment.author_id,
            author_name=comment.author_name,
            author_avatar_url=comment.author_avatar_url,
            text=comment.text,
            likes=comment.likes,
            created_at=comment.created_at,
            timestamp=relative_time_label(comment.created_at, language)
        )


class CommentListResponse(BaseModel):
    """Comments of one video, newest first."""
    comments: List[CommentResponse]
    total: int
