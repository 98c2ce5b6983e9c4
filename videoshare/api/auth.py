"""Authentication endpoints."""
from datetime import datetime
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from videoshare.database import get_db
from videoshare.models.user import User, default_avatar_url
from videoshare.schemas.auth import LoginRequest, LoginResponse, SignupRequest
from videoshare.schemas.user import UserResponse
from videoshare.auth.jwt import verify_password, get_password_hash, issue_token_for_user
from videoshare.auth.dependencies import get_current_user
from videoshare.api.dependencies import find_user_by_username, get_user_or_404
from videoshare.config import settings
from videoshare.utils.error_handling import (
    AuthenticationError,
    ConflictError,
    ValidationError,
    log_info,
    validate_min_length,
)
from videoshare.utils.sanitization import clean_single_line

router = APIRouter(prefix="/auth", tags=["Authentication"])

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3


def _login_response(user: User) -> LoginResponse:
    return LoginResponse(
        access_token=issue_token_for_user(user),
        token_type="bearer",
        expires_in=settings.jwt_access_token_expire_minutes * 60,
        user=UserResponse.model_validate(user)
    )


@router.post("/signup", response_model=LoginResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    request: SignupRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Create an account (and its channel) and sign in.

    Usernames are unique regardless of case. New users start with no
    subscriptions, zero subscribers and a generated avatar.
    """
    username = clean_single_line(request.username, max_length=100)
    validate_min_length(username, "username", MIN_USERNAME_LENGTH, "usernameError")
    if len(request.password) < MIN_PASSWORD_LENGTH:
        raise ValidationError("passwordError", field="password", min_length=MIN_PASSWORD_LENGTH)

    if await find_user_by_username(db, username):
        raise ConflictError("usernameTakenError", details={"field": "username"})

    user = User(
        username=username,
        hashed_password=get_password_hash(request.password),
        avatar_url=default_avatar_url(username),
        is_admin=False,
        subscribers=0,
        last_login_at=datetime.utcnow()
    )
    db.add(user)
    await db.commit()
    user = await get_user_or_404(db, user.id)

    log_info("User signed up", context="signup", extra={"user_id": user.id})
    return _login_response(user)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Login with username and password.

    Returns a JWT access token for authenticated requests.

    **Token Usage**: Include the token in the Authorization header as `Bearer <token>`
    """
    user = await find_user_by_username(db, request.username)

    if not user or not verify_password(request.password, user.hashed_password):
        raise AuthenticationError("invalidCredentialsError")

    user.last_login_at = datetime.utcnow()
    await db.commit()
    user = await get_user_or_404(db, user.id)

    return _login_response(user)


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    current_user: User = Depends(get_current_user)
):
    """
    Get current user information, including subscriptions.

    Requires authentication token.
    """
    return UserResponse.model_validate(current_user)


@router.post("/logout")
async def logout():
    """
    Logout endpoint.

    **Note**: JWT tokens are stateless. The client deletes the token from
    storage; it expires after the configured lifetime.
    """
    return {"message": "Logged out successfully. Please delete your access token."}
