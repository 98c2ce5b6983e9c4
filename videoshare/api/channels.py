"""Channel pages, profile editing and subscriptions."""
from typing import List, Optional
from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from videoshare.database import get_db
from videoshare.models.user import User
from videoshare.models.video import Video
from videoshare.schemas.user import (
    ChannelResponse,
    ProfileUpdate,
    SubscriptionStatus,
    UserResponse,
)
from videoshare.schemas.video import VideoListResponse, VideoResponse
from videoshare.auth.dependencies import get_current_user, get_optional_user
from videoshare.api.dependencies import find_user_by_username, get_language, get_user_or_404
from videoshare.core.catalog import username_suggestions
from videoshare.core.media import IMAGE_EXTENSIONS, MediaStorage, get_media_storage
from videoshare.utils.error_handling import ConflictError, log_info, validate_min_length
from videoshare.utils.sanitization import clean_single_line

router = APIRouter(prefix="/channels", tags=["Channels"])


async def _video_count(db: AsyncSession, channel_id: str) -> int:
    result = await db.execute(
        select(func.count(Video.id)).where(Video.channel_id == channel_id)
    )
    return result.scalar() or 0


async def _channel_response(
    db: AsyncSession,
    channel: User,
    viewer: Optional[User]
) -> ChannelResponse:
    return ChannelResponse(
        id=channel.id,
        username=channel.username,
        avatar_url=channel.avatar_url,
        banner_url=channel.banner_url,
        subscribers=channel.subscribers,
        is_verified=channel.is_verified,
        is_subscribed=bool(viewer and viewer.is_subscribed_to(channel.id)),
        video_count=await _video_count(db, channel.id)
    )


@router.get("/me/subscriptions", response_model=List[ChannelResponse])
async def list_my_subscriptions(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Channels the current user is subscribed to."""
    return [
        await _channel_response(db, channel, current_user)
        for channel in current_user.subscribed_channels
    ]


@router.patch("/me", response_model=UserResponse)
async def update_my_channel(
    updates: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Edit the current user's channel: username, avatar URL, banner URL.

    A taken username is rejected with 409 and three suggestions in
    `error.details.suggestions`. Videos show the new name and avatar
    immediately because they read them from the channel.
    """
    if updates.username is not None:
        username = clean_single_line(updates.username, max_length=100)
        validate_min_length(username, "username", 3, "usernameError")

        if username != current_user.username:
            if await find_user_by_username(db, username, exclude_id=current_user.id):
                raise ConflictError(
                    "usernameTakenSuggestions",
                    suggestions=username_suggestions(username),
                    details={"field": "username"},
                    username=username
                )
            current_user.username = username

    if updates.avatar_url is not None:
        current_user.avatar_url = updates.avatar_url.strip()

    if updates.banner_url is not None:
        current_user.banner_url = updates.banner_url.strip() or None

    await db.commit()
    current_user = await get_user_or_404(db, current_user.id)

    log_info("Channel profile updated", context="profile", extra={"user_id": current_user.id})
    return UserResponse.model_validate(current_user)


@router.post("/me/avatar", response_model=UserResponse)
async def upload_avatar(
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    storage: MediaStorage = Depends(get_media_storage)
):
    """Upload an image and use it as the channel avatar."""
    previous = current_user.avatar_url
    current_user.avatar_url = await storage.save(file, "avatars", IMAGE_EXTENSIONS)
    await db.commit()
    current_user = await get_user_or_404(db, current_user.id)
    storage.delete(previous)
    return UserResponse.model_validate(current_user)


@router.post("/me/banner", response_model=UserResponse)
async def upload_banner(
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    storage: MediaStorage = Depends(get_media_storage)
):
    """Upload an image and use it as the channel banner."""
    previous = current_user.banner_url
    current_user.banner_url = await storage.save(file, "banners", IMAGE_EXTENSIONS)
    await db.commit()
    current_user = await get_user_or_404(db, current_user.id)
    if previous:
        storage.delete(previous)
    return UserResponse.model_validate(current_user)


@router.get("/{channel_id}", response_model=ChannelResponse)
async def get_channel(
    channel_id: str,
    viewer: Optional[User] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db)
):
    """Channel header: name, avatar, banner, subscribers, verified badge."""
    channel = await get_user_or_404(db, channel_id, "channelNotFound")
    return await _channel_response(db, channel, viewer)


@router.get("/{channel_id}/videos", response_model=VideoListResponse)
async def list_channel_videos(
    channel_id: str,
    db: AsyncSession = Depends(get_db),
    language: str = Depends(get_language)
):
    """Uploads of a channel, newest first."""
    await get_user_or_404(db, channel_id, "channelNotFound")
    result = await db.execute(
        select(Video)
        .where(Video.channel_id == channel_id)
        .order_by(Video.created_at.desc(), Video.id.desc())
    )
    videos = result.scalars().all()
    return VideoListResponse(
        videos=[VideoResponse.from_video(video, language) for video in videos],
        total=len(videos)
    )


@router.post("/{channel_id}/subscription", response_model=SubscriptionStatus)
async def toggle_subscription(
    channel_id: str,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Subscribe to a channel, or unsubscribe if already subscribed.

    Subscribing to your own channel is a no-op that reports the current state.
    """
    channel = await get_user_or_404(db, channel_id, "channelNotFound")

    if channel.id == current_user.id:
        return SubscriptionStatus(
            channel_id=channel.id,
            is_subscribed=False,
            subscribers=channel.subscribers
        )

    if current_user.is_subscribed_to(channel.id):
        current_user.subscribed_channels.remove(channel)
        channel.subscribers = max(0, channel.subscribers - 1)
        is_subscribed = False
    else:
        current_user.subscribed_channels.append(channel)
        channel.subscribers += 1
        is_subscribed = True

    await db.commit()

    log_info(
        "Subscription toggled",
        context="subscription",
        extra={"user_id": current_user.id, "channel_id": channel.id, "subscribed": is_subscribed}
    )
    return SubscriptionStatus(
        channel_id=channel.id,
        is_subscribed=is_subscribed,
        subscribers=channel.subscribers
    )
