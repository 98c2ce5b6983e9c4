"""User and channel schemas."""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class UserResponse(BaseModel):
    """Full user record, returned to the user themselves and to admins."""
    id: str
    username: str
    avatar_url: str
    banner_url: Optional[str]
    is_admin: bool
    is_verified: bool
    subscribers: int
    subscriptions: List[str]
    created_at: datetime
    last_login_at: Optional[datetime]

    class Config:
        from_attributes = True


class UserListResponse(BaseModel):
    """List of users."""
    users: List[UserResponse]
    total: int


class ChannelResponse(BaseModel):
    """Public channel page header."""
    id: str
    username: str
    avatar_url: str
    banner_url: Optional[str]
    subscribers: int
    is_verified: bool
    is_subscribed: bool = False
    video_count: int = 0


class ProfileUpdate(BaseModel):
    """Editable channel fields. Omitted fields stay unchanged."""
    username: Optional[str] = Field(None, max_length=100)
    avatar_url: Optional[str] = Field(None, max_length=2048)
    banner_url: Optional[str] = Field(None, max_length=2048)

    class Config:
        json_schema_extra = {
            "example": {
                "username": "NewChannelName",
                "avatar_url": "https://picsum.photos/seed/new/48/48",
                "banner_url": "https://picsum.photos/seed/banner/1280/240"
            }
        }


class SubscriptionStatus(BaseModel):
    """Result of a subscribe/unsubscribe toggle."""
    channel_id: str
    is_subscribed: bool
    subscribers: int


class SubscriberCountUpdate(BaseModel):
    """Admin override of a channel's subscriber counter."""
    subscribers: int
