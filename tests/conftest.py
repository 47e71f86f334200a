"""
Shared pytest fixtures and configuration.
"""
from typing import Dict, List, Optional
from unittest.mock import AsyncMock

import httpx
import pytest

from app.main import app
from app.api.dependencies import get_playlist_duration_service
from app.core.limiter import limiter
from app.models import PlaylistDuration, PlaylistMetadata, SpeedAdjustedDuration


YOUTUBE_BASE_URL = "https://www.googleapis.com/youtube/v3"


class FakeYouTubeAPI:
    """
    In-memory YouTube Data API serving ``playlists``, ``playlistItems`` and
    ``videos`` through httpx.MockTransport.

    Playlist items are paged ``page_size`` at a time with numeric page tokens.
    Set ``fail_on`` to an endpoint name to make it answer with ``fail_status``.
    """

    def __init__(self, page_size: int = 50):
        self.page_size = page_size
        self.playlists: Dict[str, dict] = {}
        self.playlist_items: Dict[str, List[str]] = {}
        self.durations: Dict[str, str] = {}
        self.fail_on: Optional[str] = None
        self.fail_status = 500
        self.requests: List[httpx.Request] = []

    def add_playlist(
        self,
        playlist_id: str,
        video_durations: List[tuple],
        title: str = "Test Playlist",
        description: Optional[str] = "A playlist",
        thumbnail_url: Optional[str] = "https://i.ytimg.com/vi/x/mqdefault.jpg",
    ) -> None:
        thumbnails = {"medium": {"url": thumbnail_url}} if thumbnail_url else {}
        snippet = {"title": title, "thumbnails": thumbnails}
        if description is not None:
            snippet["description"] = description
        self.playlists[playlist_id] = {"id": playlist_id, "snippet": snippet}
        self.playlist_items[playlist_id] = [video_id for video_id, _ in video_durations]
        for video_id, duration in video_durations:
            self.durations[video_id] = duration

    def requests_to(self, endpoint: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith(f"/{endpoint}")]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=YOUTUBE_BASE_URL, transport=httpx.MockTransport(self.handler)
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]
        params = request.url.params

        if self.fail_on == endpoint:
            return httpx.Response(self.fail_status, json={"error": {"message": "boom"}})

        if endpoint == "playlists":
            playlist = self.playlists.get(params["id"])
            return httpx.Response(200, json={"items": [playlist] if playlist else []})

        if endpoint == "playlistItems":
            items = self.playlist_items.get(params["playlistId"])
            if items is None:
                return httpx.Response(404, json={"error": {"message": "playlistNotFound"}})
            start = int(params.get("pageToken") or 0)
            end = start + self.page_size
            body = {
                "items": [
                    {"contentDetails": {"videoId": video_id}} for video_id in items[start:end]
                ]
            }
            if end < len(items):
                body["nextPageToken"] = str(end)
            return httpx.Response(200, json=body)

        if endpoint == "videos":
            ids = params["id"].split(",")
            # Answer in reverse order so callers cannot rely on positions
            items = [
                {"id": video_id, "contentDetails": {"duration": self.durations[video_id]}}
                for video_id in reversed(ids)
                if video_id in self.durations
            ]
            return httpx.Response(200, json={"items": items})

        return httpx.Response(404)


@pytest.fixture
def fake_youtube():
    """Create an empty fake YouTube API."""
    return FakeYouTubeAPI()


@pytest.fixture
def sample_result():
    """A finished 53-minute playlist result."""
    return PlaylistDuration(
        metadata=PlaylistMetadata(id="PLtest123", title="Test Playlist"),
        video_count=53,
        total_seconds=3180,
        formatted="53m",
        speeds=[SpeedAdjustedDuration(multiplier=2.0, total_seconds=1590.0, formatted="26m 30s")],
    )


@pytest.fixture
def mock_duration_service():
    """Create a mock PlaylistDurationService."""
    return AsyncMock()


@pytest.fixture
def override_dependencies(mock_duration_service):
    """Override FastAPI dependencies and disable rate limiting for testing."""
    def override_get_playlist_duration_service():
        return mock_duration_service

    app.dependency_overrides[get_playlist_duration_service] = override_get_playlist_duration_service
    limiter.enabled = False

    yield

    # Clean up
    app.dependency_overrides.clear()
    limiter.enabled = True
