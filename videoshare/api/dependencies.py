"""Shared dependencies for API routes."""
from typing import List, Optional
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from videoshare.core.i18n import normalize_language
from videoshare.models.user import User
from videoshare.models.video import Video
from videoshare.utils.error_handling import NotFoundError


def get_language(request: Request) -> str:
    """Language resolved for this request by the language middleware."""
    return normalize_language(getattr(request.state, "language", None))


async def get_video_or_404(db: AsyncSession, video_id: str) -> Video:
    result = await db.execute(
        select(Video).where(Video.id == video_id)
    )
    video = result.scalar_one_or_none()
    if not video:
        raise NotFoundError("videoNotFound", resource_id=video_id)
    return video


async def get_user_or_404(
    db: AsyncSession,
    user_id: str,
    message_key: str = "userNotFound"
) -> User:
    """
    Load a user with their subscriptions.

    The user may already sit in the session as someone else's subscription,
    loaded without its own collection, so existing rows are repopulated.
    """
    result = await db.execute(
        select(User)
        .where(User.id == user_id)
        .options(selectinload(User.subscribed_channels))
        .execution_options(populate_existing=True)
    )
    user = result.scalar_one_or_none()
    if not user:
        raise NotFoundError(message_key, resource_id=user_id)
    return user


async def find_user_by_username(
    db: AsyncSession,
    username: str,
    exclude_id: Optional[str] = None
) -> Optional[User]:
    """
    Case-insensitive username lookup.

    Compared in Python because SQLite's lower() only folds ASCII.
    """
    wanted = username.strip().lower()
    result = await db.execute(select(User))
    for user in result.scalars().all():
        if user.username.lower() == wanted and user.id != exclude_id:
            return user
    return None


async def all_videos_newest_first(db: AsyncSession) -> List[Video]:
    """Whole catalog in listing order, newest upload first."""
    result = await db.execute(
        select(Video).order_by(Video.created_at.desc(), Video.id.desc())
    )
    return list(result.scalars().all())
