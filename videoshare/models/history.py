"""Watch history model."""
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from videoshare.database import Base


class WatchHistoryItem(Base):
    """One watched video per user; rewatching moves it to the top."""

    __tablename__ = "watch_history"
    __table_args__ = (
        UniqueConstraint("user_id", "video_id", name="uq_watch_history_user_video"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        String(64),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    video_id = Column(
        String(64),
        ForeignKey("videos.id", ondelete="CASCADE"),
        nullable=False
    )
    watched_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    video = relationship("Video", lazy="joined")

    def __repr__(self):
        return f"<WatchHistoryItem {self.user_id} -> {self.video_id}>"
