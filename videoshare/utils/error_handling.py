"""Error handling utilities and custom exceptions.

Provides structured error handling, logging, and user-friendly error responses.
Messages are stored as translation keys and rendered in the request language.
"""
import logging
import traceback
from typing import Optional, Dict, Any, List
from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from videoshare.core.i18n import t

logger = logging.getLogger(__name__)


# Custom Exception Classes
class VideoShareException(Exception):
    """Base exception for all platform-specific errors."""

    def __init__(
        self,
        message_key: str,
        error_code: str = "PLATFORM_ERROR",
        details: Optional[Dict[str, Any]] = None,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        params: Optional[Dict[str, Any]] = None
    ):
        self.message_key = message_key
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        self.params = params or {}
        super().__init__(t(message_key, "en", **self.params))

    def localized_message(self, language: str) -> str:
        return t(self.message_key, language, **self.params)


class ValidationError(VideoShareException):
    """Input validation errors."""

    def __init__(self, message_key: str, field: Optional[str] = None, details: Optional[Dict] = None, **params):
        super().__init__(
            message_key=message_key,
            error_code="VALIDATION_ERROR",
            details={"field": field, **(details or {})},
            status_code=422,
            params=params
        )


class AuthenticationError(VideoShareException):
    """Missing or rejected credentials."""

    def __init__(self, message_key: str = "notAuthenticated"):
        super().__init__(
            message_key=message_key,
            error_code="AUTHENTICATION_ERROR",
            status_code=status.HTTP_401_UNAUTHORIZED
        )


class PermissionDeniedError(VideoShareException):
    """Authenticated but not allowed."""

    def __init__(self, message_key: str = "adminRequired"):
        super().__init__(
            message_key=message_key,
            error_code="PERMISSION_DENIED",
            status_code=status.HTTP_403_FORBIDDEN
        )


class NotFoundError(VideoShareException):
    """Referenced record does not exist."""

    def __init__(self, message_key: str, resource_id: Optional[str] = None):
        super().__init__(
            message_key=message_key,
            error_code="NOT_FOUND",
            details={"id": resource_id} if resource_id else {},
            status_code=status.HTTP_404_NOT_FOUND
        )


class ConflictError(VideoShareException):
    """Uniqueness conflicts, e.g. a taken username."""

    def __init__(
        self,
        message_key: str,
        suggestions: Optional[List[str]] = None,
        details: Optional[Dict] = None,
        **params
    ):
        extra = dict(details or {})
        if suggestions is not None:
            extra["suggestions"] = suggestions
            params.setdefault("suggestions", ", ".join(suggestions))
        super().__init__(
            message_key=message_key,
            error_code="CONFLICT",
            details=extra,
            status_code=status.HTTP_409_CONFLICT,
            params=params
        )


class OperationNotAllowedError(VideoShareException):
    """Request is well-formed but the action is refused."""

    def __init__(self, message_key: str):
        super().__init__(
            message_key=message_key,
            error_code="OPERATION_NOT_ALLOWED",
            status_code=status.HTTP_400_BAD_REQUEST
        )


class PayloadTooLargeError(VideoShareException):
    """Upload exceeds the configured size limit."""

    def __init__(self, max_mb: int):
        super().__init__(
            message_key="fileTooLarge",
            error_code="PAYLOAD_TOO_LARGE",
            details={"max_mb": max_mb},
            status_code=413,
            params={"max_mb": max_mb}
        )


class StorageError(VideoShareException):
    """Media or database storage failures."""

    def __init__(self, message_key: str = "internalError", details: Optional[Dict] = None):
        super().__init__(
            message_key=message_key,
            error_code="STORAGE_ERROR",
            details=details,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


# Error Response Builders
def build_error_response(
    exception: Exception,
    language: str = "en",
    include_traceback: bool = False
) -> JSONResponse:
    """
    Build structured error response from exception.

    Args:
        exception: The exception to convert
        language: Language for the user-facing message
        include_traceback: Include traceback in response (dev only)

    Returns:
        JSONResponse with error details
    """
    # Handle custom platform exceptions
    if isinstance(exception, VideoShareException):
        content = {
            "error": {
                "code": exception.error_code,
                "message": exception.localized_message(language),
                "details": exception.details
            }
        }
        status_code = exception.status_code

    # Handle request body/query validation from FastAPI
    elif isinstance(exception, RequestValidationError):
        content = {
            "error": {
                "code": "VALIDATION_ERROR",
                "message": t("validationError", language),
                "details": {
                    "errors": [
                        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
                        for err in exception.errors()
                    ]
                }
            }
        }
        status_code = 422

    # Handle FastAPI HTTPException
    elif isinstance(exception, HTTPException):
        content = {
            "error": {
                "code": "HTTP_ERROR",
                "message": exception.detail,
                "details": {}
            }
        }
        status_code = exception.status_code

    # Handle generic exceptions
    else:
        content = {
            "error": {
                "code": "INTERNAL_ERROR",
                "message": t("internalError", language),
                "details": {
                    "type": type(exception).__name__
                }
            }
        }
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    # Add traceback in development
    if include_traceback:
        content["error"]["traceback"] = traceback.format_exc()

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=status_code,
        content=content,
        headers=headers
    )


def request_language(request: Request) -> str:
    """Language resolved by the language middleware, English otherwise."""
    return getattr(request.state, "language", "en")


# Logging Helpers
def log_error(
    error: Exception,
    context: Optional[str] = None,
    user_id: Optional[str] = None,
    extra: Optional[Dict] = None
):
    """
    Log error with context and structured data.

    Args:
        error: The exception to log
        context: Context description (e.g., "upload", "signup")
        user_id: Optional user ID for tracking
        extra: Additional context data
    """
    log_data = {
        "error_type": type(error).__name__,
        "error_message": str(error),
        "context": context,
        "user_id": user_id,
        **(extra or {})
    }

    if isinstance(error, VideoShareException):
        log_data["error_code"] = error.error_code
        log_data["details"] = error.details

    logger.error(
        f"Error in {context}: {str(error)}",
        extra=log_data,
        exc_info=True
    )


def log_info(
    message: str,
    context: Optional[str] = None,
    extra: Optional[Dict] = None
):
    """
    Log info with structured data.

    Args:
        message: Info message
        context: Context description
        extra: Additional data
    """
    log_data = {
        "context": context,
        **(extra or {})
    }

    logger.info(message, extra=log_data)


# Validation Helpers
def validate_min_length(value: str, field_name: str, min_length: int, message_key: str):
    """Validate trimmed string length."""
    if len((value or "").strip()) < min_length:
        raise ValidationError(
            message_key,
            field=field_name,
            details={"current_length": len((value or "").strip()), "min_length": min_length}
        )
