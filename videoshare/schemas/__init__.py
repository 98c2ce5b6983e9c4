"""Pydantic schemas for API requests and responses."""
from videoshare.schemas.auth import LoginRequest, LoginResponse, SignupRequest
from videoshare.schemas.comment import CommentCreate, CommentListResponse, CommentResponse
from videoshare.schemas.history import HistoryAdd, HistoryEntryResponse, HistoryListResponse
from videoshare.schemas.user import (
    ChannelResponse,
    ProfileUpdate,
    SubscriberCountUpdate,
    SubscriptionStatus,
    UserListResponse,
    UserResponse,
)
from videoshare.schemas.video import (
    HomeFeedResponse,
    MultilingualString,
    SearchResponse,
    VideoListResponse,
    VideoResponse,
    VideoUpdate,
    ViewCountResponse,
)

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "SignupRequest",
    "CommentCreate",
    "CommentListResponse",
    "CommentResponse",
    "HistoryAdd",
    "HistoryEntryResponse",
    "HistoryListResponse",
    "ChannelResponse",
    "ProfileUpdate",
    "SubscriberCountUpdate",
    "SubscriptionStatus",
    "UserListResponse",
    "UserResponse",
    "HomeFeedResponse",
    "MultilingualString",
    "SearchResponse",
    "VideoListResponse",
    "VideoResponse",
    "VideoUpdate",
    "ViewCountResponse",
]
