"""Comment endpoints."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from videoshare.database import get_db
from videoshare.models.comment import Comment
from videoshare.models.user import User
from videoshare.schemas.comment import CommentCreate, CommentListResponse, CommentResponse
from videoshare.auth.dependencies import get_current_user
from videoshare.api.dependencies import get_language, get_video_or_404
from videoshare.utils.error_handling import ValidationError
from videoshare.utils.sanitization import clean_multiline

router = APIRouter(prefix="/videos/{video_id}/comments", tags=["Comments"])


@router.get("", response_model=CommentListResponse)
async def list_comments(
    video_id: str,
    db: AsyncSession = Depends(get_db),
    language: str = Depends(get_language)
):
    """Comments on a video, newest first."""
    await get_video_or_404(db, video_id)
    result = await db.execute(
        select(Comment)
        .where(Comment.video_id == video_id)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
    )
    comments = result.scalars().all()
    return CommentListResponse(
        comments=[CommentResponse.from_comment(comment, language) for comment in comments],
        total=len(comments)
    )


@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def add_comment(
    video_id: str,
    request: CommentCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    language: str = Depends(get_language)
):
    """
    Leave a comment.

    **Requires**: authentication. Whitespace-only text is rejected.
    """
    await get_video_or_404(db, video_id)

    text = clean_multiline(request.text, max_length=5000)
    if not text:
        raise ValidationError("commentEmpty", field="text")

    comment = Comment(
        video_id=video_id,
        author_id=current_user.id,
        text=text,
        likes=0
    )
    db.add(comment)
    await db.commit()
    await db.refresh(comment)

    return CommentResponse.from_comment(comment, language)
