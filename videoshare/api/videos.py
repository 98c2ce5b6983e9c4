"""Video catalog endpoints: feeds, search, watch page and upload."""
from typing import Optional
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from videoshare.database import get_db
from videoshare.models.user import User
from videoshare.models.video import Video
from videoshare.schemas.video import (
    HomeFeedResponse,
    SearchResponse,
    VideoListResponse,
    VideoResponse,
    ViewCountResponse,
)
from videoshare.auth.dependencies import get_current_user
from videoshare.api.dependencies import all_videos_newest_first, get_language, get_video_or_404
from videoshare.config import settings
from videoshare.core import catalog
from videoshare.core.i18n import CATEGORIES, t
from videoshare.core.media import (
    IMAGE_EXTENSIONS,
    MEDIA_EXTENSIONS,
    VIDEO_EXTENSIONS,
    MediaStorage,
    get_media_storage,
)
from videoshare.utils.error_handling import ValidationError, log_info
from videoshare.utils.sanitization import clean_multiline, clean_single_line, parse_tags

router = APIRouter(prefix="/videos", tags=["Videos"])


@router.get("", response_model=HomeFeedResponse)
async def home_feed(
    category: str = Query("All", description="Category filter, e.g. Gaming or Music"),
    db: AsyncSession = Depends(get_db),
    language: str = Depends(get_language)
):
    """
    Home page feed.

    Every video in random order. A category other than `All` keeps only
    videos tagged with the lowercased category name.
    """
    resolved = catalog.resolve_category(category)
    if resolved is None:
        raise ValidationError("unknownCategory", field="category", category=category)

    videos = catalog.shuffle_videos(await all_videos_newest_first(db))
    videos = catalog.filter_by_category(videos, resolved)

    return HomeFeedResponse(
        videos=[VideoResponse.from_video(video, language) for video in videos],
        total=len(videos),
        category=resolved,
        categories=list(CATEGORIES)
    )


@router.get("/search", response_model=SearchResponse)
async def search(
    q: str = Query("", max_length=200, description="Search text"),
    db: AsyncSession = Depends(get_db),
    language: str = Depends(get_language)
):
    """
    Search titles, descriptions and tags in both languages.

    Matching is a case-insensitive substring test; a blank query returns
    no results.
    """
    query = q.strip()
    results = catalog.search_videos(await all_videos_newest_first(db), query)

    message = None
    if not results:
        message = t("noResultsFoundFor", language, query=query)

    return SearchResponse(
        videos=[VideoResponse.from_video(video, language) for video in results],
        total=len(results),
        query=query,
        message=message
    )


@router.get("/shorts", response_model=VideoListResponse)
async def shorts(
    db: AsyncSession = Depends(get_db),
    language: str = Depends(get_language)
):
    """Shorts feed, newest first."""
    videos = catalog.shorts_feed(await all_videos_newest_first(db))
    return VideoListResponse(
        videos=[VideoResponse.from_video(video, language) for video in videos],
        total=len(videos)
    )


@router.post("", response_model=VideoResponse, status_code=status.HTTP_201_CREATED)
async def upload_video(
    file: Optional[UploadFile] = File(None, description="Video or audio file"),
    title: str = Form(""),
    description: str = Form(""),
    tags: str = Form("", description="Comma-separated tags"),
    is_shorts: bool = Form(False),
    use_custom_thumbnail: bool = Form(False),
    thumbnail: Optional[UploadFile] = File(None, description="Custom thumbnail image"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    storage: MediaStorage = Depends(get_media_storage),
    language: str = Depends(get_language)
):
    """
    Upload a video, audio track or short.

    **Requires**: authentication

    Title and file are required. Audio uploads (`audio/*`) are stored with
    `media_type=audio`. Without a custom thumbnail a placeholder image is
    used. Shorts accept video files only.
    """
    clean_title = clean_single_line(title, max_length=200)
    has_file = file is not None and bool(file.filename)
    if not clean_title or not has_file:
        raise ValidationError("titleAndVideoRequired", field="file" if clean_title else "title")

    has_thumbnail = thumbnail is not None and bool(thumbnail.filename)
    if use_custom_thumbnail and not has_thumbnail:
        raise ValidationError("customThumbnailRequired", field="thumbnail")

    allowed = VIDEO_EXTENSIONS if is_shorts else MEDIA_EXTENSIONS
    video_url = await storage.save(file, "videos", allowed)

    if has_thumbnail:
        try:
            thumbnail_url = await storage.save(thumbnail, "thumbnails", IMAGE_EXTENSIONS)
        except Exception:
            storage.delete(video_url)
            raise
    else:
        thumbnail_url = catalog.default_thumbnail_url()

    clean_description = clean_multiline(description, max_length=5000)
    video = Video(
        channel_id=current_user.id,
        title={"en": clean_title, "ru": clean_title},
        description={"en": clean_description, "ru": clean_description},
        thumbnail_url=thumbnail_url,
        video_url=video_url,
        media_type=catalog.detect_media_type(file.content_type),
        duration=catalog.placeholder_duration(is_shorts),
        tags=parse_tags(tags),
        is_shorts=is_shorts,
        views=0
    )
    db.add(video)
    try:
        await db.commit()
    except Exception:
        await db.rollback()
        storage.delete(video_url)
        storage.delete(thumbnail_url)
        raise
    await db.refresh(video)

    log_info(
        "Video uploaded",
        context="upload",
        extra={"video_id": video.id, "user_id": current_user.id, "is_shorts": is_shorts}
    )
    return VideoResponse.from_video(video, language)


@router.get("/{video_id}", response_model=VideoResponse)
async def get_video(
    video_id: str,
    db: AsyncSession = Depends(get_db),
    language: str = Depends(get_language)
):
    """Watch page details."""
    video = await get_video_or_404(db, video_id)
    return VideoResponse.from_video(video, language)


@router.get("/{video_id}/related", response_model=VideoListResponse)
async def related(
    video_id: str,
    db: AsyncSession = Depends(get_db),
    language: str = Depends(get_language)
):
    """Sidebar on the watch page: the first regular videos other than this one."""
    await get_video_or_404(db, video_id)
    videos = catalog.related_videos(
        await all_videos_newest_first(db),
        current_id=video_id,
        limit=settings.related_videos_limit
    )
    return VideoListResponse(
        videos=[VideoResponse.from_video(video, language) for video in videos],
        total=len(videos)
    )


@router.post("/{video_id}/views", response_model=ViewCountResponse)
async def increment_views(
    video_id: str,
    db: AsyncSession = Depends(get_db)
):
    """
    Count one view.

    The web client calls this once playback has run for a few seconds.
    """
    video = await get_video_or_404(db, video_id)
    video.views += 1
    await db.commit()

    return ViewCountResponse(video_id=video.id, views=video.views)
