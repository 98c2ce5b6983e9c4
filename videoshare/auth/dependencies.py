"""Authentication dependencies for protected routes."""
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from videoshare.database import get_db
from videoshare.models.user import User
from videoshare.auth.jwt import decode_access_token
from videoshare.utils.error_handling import AuthenticationError, PermissionDeniedError


security = HTTPBearer(auto_error=False)


async def _resolve_user(token: str, db: AsyncSession) -> User:
    payload = decode_access_token(token)
    if not payload:
        raise AuthenticationError("invalidToken")

    user_id = payload.get("user_id")
    if not user_id:
        raise AuthenticationError("invalidToken")

    result = await db.execute(
        select(User)
        .where(User.id == user_id)
        .options(selectinload(User.subscribed_channels))
    )
    user = result.scalar_one_or_none()

    # Deleted accounts invalidate their outstanding tokens
    if not user:
        raise AuthenticationError("invalidToken")

    return user


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> User:
    """
    Get current authenticated user from JWT token.

    Requires Bearer token in Authorization header.
    """
    if credentials is None:
        raise AuthenticationError("notAuthenticated")
    return await _resolve_user(credentials.credentials, db)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> Optional[User]:
    """Current user when a token is sent, None for anonymous visitors."""
    if credentials is None:
        return None
    return await _resolve_user(credentials.credentials, db)


async def get_current_admin_user(
    current_user: User = Depends(get_current_user)
) -> User:
    """Get current user (must be admin)."""
    if not current_user.is_admin:
        raise PermissionDeniedError("adminRequired")
    return current_user
