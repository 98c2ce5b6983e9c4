"""Authentication schemas."""
from pydantic import BaseModel, Field

from videoshare.schemas.user import UserResponse


class LoginRequest(BaseModel):
    """Login request."""
    username: str = Field(..., min_length=1, max_length=100, description="Username, case-insensitive")
    password: str = Field(..., min_length=1, description="Account password")

    class Config:
        json_schema_extra = {
            "example": {
                "username": "admin",
                "password": "admin"
            }
        }


class SignupRequest(BaseModel):
    """
    Signup request.

    Length rules (3+ characters each) are checked by the endpoint so the
    error message can be localized.
    """
    username: str = Field(..., max_length=100, description="Unique username, also the channel name")
    password: str = Field(..., max_length=128, description="Password")

    class Config:
        json_schema_extra = {
            "example": {
                "username": "newuser",
                "password": "secret"
            }
        }


class LoginResponse(BaseModel):
    """Login response."""
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse
