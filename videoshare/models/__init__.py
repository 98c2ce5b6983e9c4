"""Database models."""
from videoshare.models.user import User, subscriptions_table
from videoshare.models.video import Video
from videoshare.models.comment import Comment
from videoshare.models.history import WatchHistoryItem

__all__ = [
    "User",
    "subscriptions_table",
    "Video",
    "Comment",
    "WatchHistoryItem",
]
