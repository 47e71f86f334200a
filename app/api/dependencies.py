"""
Dependency injection factories for FastAPI.

This module provides factory functions for creating service instances
with proper dependency injection.
"""
import httpx
from fastapi import Depends, Request

from app.core.config import settings
from app.services.youtube import YouTubeService
from app.services.playlist_duration import PlaylistDurationService


def create_http_client() -> httpx.AsyncClient:
    """Create the HTTP client shared by all YouTube API calls (owned by the app lifespan)."""
    return httpx.AsyncClient(
        base_url=settings.YOUTUBE_API_BASE_URL,
        timeout=settings.YOUTUBE_HTTP_TIMEOUT,
    )


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Get the application-wide HTTP client."""
    return request.app.state.http_client


def get_youtube_service(
    client: httpx.AsyncClient = Depends(get_http_client),
) -> YouTubeService:
    """Get YouTube service for playlist metadata, items and durations."""
    return YouTubeService(client=client, api_key=settings.YOUTUBE_API_KEY)


def get_playlist_duration_service(
    youtube_service: YouTubeService = Depends(get_youtube_service),
) -> PlaylistDurationService:
    """Get the playlist duration orchestrator with the configured playback speeds."""
    return PlaylistDurationService(
        youtube_service=youtube_service,
        speed_multipliers=settings.SPEED_MULTIPLIERS,
    )
