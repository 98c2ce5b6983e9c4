"""Comment model."""
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Integer, ForeignKey, Text
from sqlalchemy.orm import relationship
import uuid

from videoshare.database import Base


def generate_comment_id() -> str:
    return f"comment_{uuid.uuid4().hex}"


class Comment(Base):
    """Comment left on a video."""

    __tablename__ = "comments"

    id = Column(String(64), primary_key=True, default=generate_comment_id)
    video_id = Column(
        String(64),
        ForeignKey("videos.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    author_id = Column(
        String(64),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    text = Column(Text, nullable=False)
    likes = Column(Integer, default=0, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    # Relationships
    video = relationship("Video", back_populates="comments")
    author = relationship("User", lazy="joined")

    def __repr__(self):
        return f"<Comment {self.id} on {self.video_id}>"

    @property
    def author_name(self) -> str:
        return self.author.username if self.author else ""

    @property
    def author_avatar_url(self) -> str:
        return self.author.avatar_url if self.author else ""
