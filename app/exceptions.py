# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error response carries a human-readable "message"; validation errors
# also list every violation under "errors".
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.validators import format_errors

logger = logging.getLogger(__name__)


class TweterooException(Exception):
    """
    Base exception for the Tweteroo API.

    All custom exceptions inherit from this class. `code` and `details` are
    for server-side logs; only `message` (and `errors`) reach the client.
    """

    def __init__(
        self,
        message: str,
        code: str = "TWETEROO_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"message": self.message}


# =============================================================================
# Validation Exceptions
# =============================================================================

class InvalidPayloadError(TweterooException):
    """Raised when a request body fails schema validation."""

    def __init__(self, errors: list[str], message: str = "Invalid data"):
        super().__init__(
            message=message,
            code="INVALID_PAYLOAD",
            status_code=422,
            details={"errors": errors},
        )
        self.errors = errors

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "errors": self.errors}


class InvalidParamsError(InvalidPayloadError):
    """Raised when path parameters fail schema validation."""

    def __init__(self, errors: list[str]):
        super().__init__(errors, message="Invalid parameters")
        self.code = "INVALID_PARAMS"


# =============================================================================
# User Exceptions
# =============================================================================

class UsernameTakenError(TweterooException):
    """Raised when signing up with a username that already exists."""

    def __init__(self, username: str):
        super().__init__(
            message="This username is already taken.",
            code="USERNAME_TAKEN",
            status_code=409,
            details={"username": username},
        )


class UserNotRegisteredError(TweterooException):
    """Raised when an unknown username tries to post a tweet."""

    def __init__(self, username: str):
        super().__init__(
            message="Unauthorized user. Please sign up first.",
            code="USER_NOT_REGISTERED",
            status_code=401,
            details={"username": username},
        )


class UserNotFoundError(TweterooException):
    """Raised when listing tweets of a username that doesn't exist."""

    def __init__(self, username: str):
        super().__init__(
            message="User not found.",
            code="USER_NOT_FOUND",
            status_code=404,
            details={"username": username},
        )


# =============================================================================
# Tweet Exceptions
# =============================================================================

class TweetNotFoundError(TweterooException):
    """Raised when a tweet ID doesn't exist."""

    def __init__(self, tweet_id: str):
        super().__init__(
            message="Tweet not found.",
            code="TWEET_NOT_FOUND",
            status_code=404,
            details={"tweet_id": tweet_id},
        )


# =============================================================================
# Storage Exceptions
# =============================================================================

class StorageError(TweterooException):
    """
    Raised when a database operation fails.

    The message is generic on purpose; the driver error stays in the logs.
    """

    def __init__(self, message: str, error: str | None = None):
        super().__init__(
            message=message,
            code="STORAGE_ERROR",
            status_code=500,
            details={"error": error} if error else None,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def tweteroo_exception_handler(
    request: Request,
    exc: TweterooException
) -> JSONResponse:
    """Convert TweterooException to JSON response."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed [{exc.code}]: {exc.details}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle FastAPI's own request validation errors.

    Renders them in the same shape as InvalidPayloadError.
    """
    return JSONResponse(
        status_code=422,
        content={
            "message": "Invalid data",
            "errors": format_errors(exc.errors()),
        }
    )
