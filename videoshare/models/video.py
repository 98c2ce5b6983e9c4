"""Video model."""
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Boolean, Integer, ForeignKey, JSON
from sqlalchemy.orm import relationship
import uuid

from videoshare.database import Base


def generate_video_id() -> str:
    return f"vid_{uuid.uuid4().hex}"


class Video(Base):
    """Uploaded video, audio track or short."""

    __tablename__ = "videos"

    id = Column(String(64), primary_key=True, default=generate_video_id)
    channel_id = Column(
        String(64),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Multilingual text, {"en": ..., "ru": ...}
    title = Column(JSON, nullable=False)
    description = Column(JSON, nullable=False)

    # Media
    thumbnail_url = Column(String(2048), nullable=False)
    video_url = Column(String(2048), nullable=False)
    media_type = Column(String(10), default="video", nullable=False)  # video, audio
    duration = Column(String(16), nullable=False)

    # Catalog
    tags = Column(JSON, default=list, nullable=False)
    is_shorts = Column(Boolean, default=False, nullable=False, index=True)
    views = Column(Integer, default=0, nullable=False)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    channel = relationship("User", back_populates="videos", lazy="joined")
    comments = relationship(
        "Comment",
        back_populates="video",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Video {self.id} ({'short' if self.is_shorts else self.media_type})>"

    @property
    def channel_name(self) -> str:
        return self.channel.username if self.channel else ""

    @property
    def channel_avatar_url(self) -> str:
        return self.channel.avatar_url if self.channel else ""
