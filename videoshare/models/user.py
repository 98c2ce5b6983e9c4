"""User model. Every user is also a channel."""
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Boolean, Integer, ForeignKey, Table
from sqlalchemy.orm import relationship
import uuid

from videoshare.config import settings
from videoshare.database import Base


def generate_user_id() -> str:
    return f"user_{uuid.uuid4().hex}"


def default_avatar_url(username: str) -> str:
    """Placeholder avatar seeded by the username."""
    return f"https://picsum.photos/seed/{username}/48/48"


subscriptions_table = Table(
    "subscriptions",
    Base.metadata,
    Column(
        "subscriber_id",
        String(64),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True
    ),
    Column(
        "channel_id",
        String(64),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True
    ),
    Column("created_at", DateTime, default=datetime.utcnow, nullable=False),
)


class User(Base):
    """User account and channel."""

    __tablename__ = "users"

    id = Column(String(64), primary_key=True, default=generate_user_id)

    # Auth credentials; username doubles as the channel name
    username = Column(String(100), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)

    # Channel branding
    avatar_url = Column(String(2048), nullable=False)
    banner_url = Column(String(2048), nullable=True)

    # Role
    is_admin = Column(Boolean, default=False, nullable=False)

    # Displayed subscriber count, admins may overwrite it
    subscribers = Column(Integer, default=0, nullable=False)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    last_login_at = Column(DateTime, nullable=True)

    # Relationships
    subscribed_channels = relationship(
        "User",
        secondary=subscriptions_table,
        primaryjoin=lambda: User.id == subscriptions_table.c.subscriber_id,
        secondaryjoin=lambda: User.id == subscriptions_table.c.channel_id,
        lazy="selectin",
        join_depth=1,
        passive_deletes=True,
    )
    videos = relationship(
        "Video",
        back_populates="channel",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<User {self.username} ({'admin' if self.is_admin else 'member'})>"

    @property
    def subscriptions(self) -> list:
        """Ids of channels this user follows."""
        return [channel.id for channel in self.subscribed_channels]

    @property
    def is_verified(self) -> bool:
        """Channels past the subscriber threshold get the verified badge."""
        return self.subscribers >= settings.verified_subscriber_threshold

    def is_subscribed_to(self, channel_id: str) -> bool:
        return any(channel.id == channel_id for channel in self.subscribed_channels)
