"""
Custom exception classes and RFC 7807 error handling.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict
from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.constants import SearchMessages


class ErrorResponse(BaseModel):
    """RFC 7807 Problem Details response model."""
    type: str
    title: str
    status: int
    detail: str
    instance: Optional[str] = None

    model_config = ConfigDict(frozen=True)


# --- Domain exceptions ---

class YouTubeAPIError(Exception):
    """A YouTube Data API call failed (network, HTTP status or malformed body)."""

    def __init__(self, endpoint: str, reason: str):
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"{endpoint}: {reason}")


class DurationParseError(ValueError):
    """Raised by strict duration parsing when an encoding has no duration components."""

    def __init__(self, encoding: Optional[str]):
        self.encoding = encoding
        super().__init__(f"Invalid ISO-8601 duration: {encoding!r}")


# --- HTTP exceptions ---

class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        status_code: int,
        error_type: str,
        title: str,
        detail: str,
    ):
        self.status_code = status_code
        self.error_type = error_type
        self.title = title
        self.detail = detail
        super().__init__(detail)


class BadRequestError(AppException):
    """Bad request exception."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=400,
            error_type="https://problems.example.com/bad-request",
            title="Bad Request",
            detail=detail,
        )


class InvalidPlaylistInputError(BadRequestError):
    """No playlist identifier could be extracted from the user's input."""

    def __init__(self, detail: str = SearchMessages.INVALID_INPUT):
        super().__init__(detail)


class PlaylistFetchError(AppException):
    """The playlist could not be fetched from YouTube."""

    def __init__(self, detail: str = SearchMessages.FETCH_FAILED):
        super().__init__(
            status_code=502,
            error_type="https://problems.example.com/playlist-fetch-failed",
            title="Playlist Fetch Failed",
            detail=detail,
        )


class RateLimitError(AppException):
    """Rate limit exceeded exception."""

    def __init__(self, detail: str = "Rate limit exceeded. Please try again later."):
        super().__init__(
            status_code=429,
            error_type="https://problems.example.com/rate-limit-exceeded",
            title="Too Many Requests",
            detail=detail,
        )


def create_error_response(
    request: Request,
    status_code: int,
    error_type: str,
    title: str,
    detail: str,
) -> JSONResponse:
    """Create a RFC 7807 compliant JSON error response."""
    error = ErrorResponse(
        type=error_type,
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
    )
    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(),
        media_type="application/problem+json",
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle AppException and return RFC 7807 response."""
    return create_error_response(
        request=request,
        status_code=exc.status_code,
        error_type=exc.error_type,
        title=exc.title,
        detail=exc.detail,
    )


async def rate_limit_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render slowapi's RateLimitExceeded as a RFC 7807 response."""
    error = RateLimitError(detail=f"Rate limit exceeded: {getattr(exc, 'detail', exc)}")
    return await app_exception_handler(request, error)
