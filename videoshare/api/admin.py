"""Developer panel endpoints. Every route requires an admin."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from videoshare.database import get_db
from videoshare.models.user import User, subscriptions_table
from videoshare.models.video import Video
from videoshare.schemas.user import SubscriberCountUpdate, UserListResponse, UserResponse
from videoshare.schemas.video import VideoListResponse, VideoResponse, VideoUpdate
from videoshare.auth.dependencies import get_current_admin_user
from videoshare.api.dependencies import (
    all_videos_newest_first,
    get_language,
    get_user_or_404,
    get_video_or_404,
)
from videoshare.core.media import MediaStorage, get_media_storage
from videoshare.utils.error_handling import OperationNotAllowedError, ValidationError, log_info
from videoshare.utils.sanitization import clean_multiline, clean_single_line, parse_tags

router = APIRouter(prefix="/admin", tags=["Developer Panel"])


def _delete_video_files(storage: MediaStorage, video: Video) -> None:
    storage.delete(video.video_url)
    storage.delete(video.thumbnail_url)


@router.get("/users", response_model=UserListResponse)
async def list_users(
    current_user: User = Depends(get_current_admin_user),
    db: AsyncSession = Depends(get_db)
):
    """
    List all users.

    **Requires**: Admin role
    """
    result = await db.execute(
        select(User)
        .order_by(User.created_at.desc())
        .options(selectinload(User.subscribed_channels))
        .execution_options(populate_existing=True)
    )
    users = result.scalars().all()

    return UserListResponse(
        users=[UserResponse.model_validate(user) for user in users],
        total=len(users)
    )


@router.patch("/users/{user_id}/subscribers", response_model=UserResponse)
async def update_user_subscribers(
    user_id: str,
    update: SubscriberCountUpdate,
    current_user: User = Depends(get_current_admin_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Overwrite a channel's subscriber counter.

    **Requires**: Admin role
    """
    if update.subscribers < 0:
        raise ValidationError("invalidSubscriberCount", field="subscribers")

    user = await get_user_or_404(db, user_id)
    user.subscribers = update.subscribers

    await db.commit()
    user = await get_user_or_404(db, user.id)

    log_info(
        "Subscriber count overwritten",
        context="admin",
        extra={"user_id": user.id, "subscribers": user.subscribers}
    )
    return UserResponse.model_validate(user)


@router.post("/users/{user_id}/toggle-admin", response_model=UserResponse)
async def toggle_admin_status(
    user_id: str,
    current_user: User = Depends(get_current_admin_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Grant or revoke the admin role.

    **Requires**: Admin role. Admins cannot change their own role.
    """
    user = await get_user_or_404(db, user_id)

    if user.id == current_user.id:
        raise OperationNotAllowedError("cannotChangeOwnAdmin")

    user.is_admin = not user.is_admin

    await db.commit()
    user = await get_user_or_404(db, user.id)

    log_info(
        "Admin role toggled",
        context="admin",
        extra={"user_id": user.id, "is_admin": user.is_admin}
    )
    return UserResponse.model_validate(user)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    current_user: User = Depends(get_current_admin_user),
    db: AsyncSession = Depends(get_db),
    storage: MediaStorage = Depends(get_media_storage)
):
    """
    Delete a user together with their videos, comments and history.

    **Requires**: Admin role

    **Warning**: This action cannot be undone.
    """
    user = await get_user_or_404(db, user_id)

    # Prevent self-deletion
    if user.id == current_user.id:
        raise OperationNotAllowedError("cannotDeleteSelf")

    result = await db.execute(
        select(Video).where(Video.channel_id == user.id)
    )
    videos = result.scalars().all()

    # Channels the user followed lose a subscriber
    result = await db.execute(
        select(User)
        .join(subscriptions_table, subscriptions_table.c.channel_id == User.id)
        .where(subscriptions_table.c.subscriber_id == user.id)
    )
    for channel in result.scalars().all():
        channel.subscribers = max(0, channel.subscribers - 1)
    if current_user.is_subscribed_to(user.id):
        current_user.subscribed_channels.remove(user)

    avatar_url, banner_url = user.avatar_url, user.banner_url
    await db.delete(user)
    await db.commit()

    for video in videos:
        _delete_video_files(storage, video)
    storage.delete(avatar_url)
    if banner_url:
        storage.delete(banner_url)

    log_info(
        "User deleted",
        context="admin",
        extra={"user_id": user_id, "videos_removed": len(videos), "deleted_by": current_user.id}
    )
    return None


@router.get("/videos", response_model=VideoListResponse)
async def list_videos(
    current_user: User = Depends(get_current_admin_user),
    db: AsyncSession = Depends(get_db),
    language: str = Depends(get_language)
):
    """Whole catalog, newest first."""
    videos = await all_videos_newest_first(db)
    return VideoListResponse(
        videos=[VideoResponse.from_video(video, language) for video in videos],
        total=len(videos)
    )


@router.patch("/videos/{video_id}", response_model=VideoResponse)
async def edit_video(
    video_id: str,
    update: VideoUpdate,
    current_user: User = Depends(get_current_admin_user),
    db: AsyncSession = Depends(get_db),
    language: str = Depends(get_language)
):
    """
    Edit a video's title, description or tags.

    **Requires**: Admin role

    Title and description change only for `update.language`; the other
    language keeps its text.
    """
    video = await get_video_or_404(db, video_id)

    # JSON columns only persist on reassignment
    if update.title is not None:
        video.title = {**(video.title or {}), update.language: clean_single_line(update.title)}

    if update.description is not None:
        video.description = {
            **(video.description or {}),
            update.language: clean_multiline(update.description)
        }

    if update.tags is not None:
        video.tags = parse_tags(update.tags)

    await db.commit()
    await db.refresh(video)

    log_info("Video edited", context="admin", extra={"video_id": video.id})
    return VideoResponse.from_video(video, language)


@router.delete("/videos/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_video(
    video_id: str,
    current_user: User = Depends(get_current_admin_user),
    db: AsyncSession = Depends(get_db),
    storage: MediaStorage = Depends(get_media_storage)
):
    """
    Delete a video, its comments and its history entries.

    **Requires**: Admin role
    """
    video = await get_video_or_404(db, video_id)

    await db.delete(video)
    await db.commit()

    _delete_video_files(storage, video)

    log_info("Video deleted", context="admin", extra={"video_id": video_id})
    return None
