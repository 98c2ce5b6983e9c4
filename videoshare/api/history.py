"""Watch history endpoints. History belongs to the signed-in user."""
from typing import Optional
from datetime import datetime
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete

from videoshare.database import get_db
from videoshare.models.history import WatchHistoryItem
from videoshare.models.user import User
from videoshare.schemas.history import HistoryAdd, HistoryEntryResponse, HistoryListResponse
from videoshare.schemas.video import VideoResponse
from videoshare.auth.dependencies import get_current_user
from videoshare.api.dependencies import get_language, get_video_or_404
from videoshare.core.catalog import filter_history

router = APIRouter(prefix="/history", tags=["Watch History"])


@router.get("", response_model=HistoryListResponse)
async def list_history(
    q: Optional[str] = Query(None, max_length=200, description="Filter by title or channel name"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    language: str = Depends(get_language)
):
    """Watched videos, most recently watched first."""
    result = await db.execute(
        select(WatchHistoryItem)
        .where(WatchHistoryItem.user_id == current_user.id)
        .order_by(WatchHistoryItem.watched_at.desc(), WatchHistoryItem.id.desc())
    )
    items = [item for item in result.scalars().all() if item.video is not None]

    visible = {video.id for video in filter_history([item.video for item in items], q)}
    entries = [
        HistoryEntryResponse(
            video=VideoResponse.from_video(item.video, language),
            watched_at=item.watched_at
        )
        for item in items
        if item.video.id in visible
    ]
    return HistoryListResponse(entries=entries, total=len(entries))


@router.post("", response_model=HistoryEntryResponse, status_code=status.HTTP_201_CREATED)
async def add_to_history(
    request: HistoryAdd,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    language: str = Depends(get_language)
):
    """
    Record that the current user opened a video.

    An earlier entry for the same video is replaced, so the video moves to
    the top of the history.
    """
    video = await get_video_or_404(db, request.video_id)

    await db.execute(
        delete(WatchHistoryItem)
        .where(WatchHistoryItem.user_id == current_user.id)
        .where(WatchHistoryItem.video_id == video.id)
    )
    item = WatchHistoryItem(
        user_id=current_user.id,
        video_id=video.id,
        watched_at=datetime.utcnow()
    )
    db.add(item)
    await db.commit()

    return HistoryEntryResponse(
        video=VideoResponse.from_video(video, language),
        watched_at=item.watched_at
    )


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_history(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Remove every history entry of the current user."""
    await db.execute(
        delete(WatchHistoryItem).where(WatchHistoryItem.user_id == current_user.id)
    )
    await db.commit()
    return None
