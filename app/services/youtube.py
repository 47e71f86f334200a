"""
YouTube service for fetching playlist metadata, playlist items and video durations.
"""
from typing import Any, Dict, List, Sequence, Type, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from app.core.constants import YouTubeConfig
from app.core.exceptions import YouTubeAPIError
from app.models import (
    PlaylistItemsResponse,
    PlaylistMetadata,
    PlaylistsResponse,
    VideosResponse,
)

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class YouTubeService:
    """
    Read-only client for the three YouTube Data API v3 endpoints the duration
    pipeline needs.

    This service handles:
    1. Looking up playlist metadata (title, description, thumbnail).
    2. Paginating through every item of a playlist.
    3. Fetching video durations in batches of at most 50 ids.

    Every call is sequential and any failure is raised as YouTubeAPIError;
    nothing is retried.
    """

    def __init__(self, client: httpx.AsyncClient, api_key: str):
        """
        Initialize the YouTubeService.

        Args:
            client: HTTP client whose base_url points at the Data API root.
            api_key: Data API key, passed through as the ``key`` query parameter.
        """
        self.client = client
        self.api_key = api_key

    async def _get(
        self, endpoint: str, params: Dict[str, Any], model: Type[ResponseModel]
    ) -> ResponseModel:
        """
        Issue a GET request and parse the body into ``model``.

        Args:
            endpoint: Resource path relative to the API root, e.g. ``"videos"``.
            params: Query parameters, without the API key.
            model: Pydantic model describing the expected response body.

        Returns:
            The parsed response.

        Raises:
            YouTubeAPIError: On network errors, non-2xx statuses or malformed bodies.
        """
        logger.debug(f"GET {endpoint} {params}")
        try:
            response = await self.client.get(endpoint, params={**params, "key": self.api_key})
            response.raise_for_status()
            return model.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            raise YouTubeAPIError(endpoint, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise YouTubeAPIError(endpoint, f"Request failed: {type(e).__name__}") from e
        except ValidationError as e:
            raise YouTubeAPIError(endpoint, f"Unexpected response body ({e.error_count()} errors)") from e
        except ValueError as e:
            raise YouTubeAPIError(endpoint, "Response body is not valid JSON") from e

    async def fetch_playlist_metadata(self, playlist_id: str) -> PlaylistMetadata:
        """
        Fetch the title, description and medium thumbnail of a playlist.

        Raises:
            YouTubeAPIError: If the request fails or the playlist is private/unknown.
        """
        data = await self._get(
            "playlists",
            {"part": "snippet", "id": playlist_id},
            PlaylistsResponse,
        )
        if not data.items:
            raise YouTubeAPIError("playlists", f"Playlist {playlist_id} not found")

        snippet = data.items[0].snippet
        thumbnail = snippet.thumbnails.get("medium")
        return PlaylistMetadata(
            id=playlist_id,
            title=snippet.title,
            description=snippet.description or "",
            thumbnail_url=thumbnail.url if thumbnail else "",
        )

    async def get_video_ids(self, playlist_id: str) -> List[str]:
        """
        Collect the video ids of every item in a playlist, in playlist order.

        Pages are requested until the API stops returning a nextPageToken.

        Raises:
            YouTubeAPIError: If any page request fails.
        """
        video_ids: List[str] = []
        page_token = ""
        pages = 0

        while True:
            page = await self._get(
                "playlistItems",
                {
                    "part": "contentDetails",
                    "maxResults": YouTubeConfig.PAGE_SIZE,
                    "playlistId": playlist_id,
                    "pageToken": page_token,
                },
                PlaylistItemsResponse,
            )
            pages += 1
            video_ids.extend(item.content_details.video_id for item in page.items)

            page_token = page.next_page_token or ""
            if not page_token:
                break

        logger.info(f"Playlist {playlist_id}: {len(video_ids)} items over {pages} pages")
        return video_ids

    async def fetch_durations(self, video_ids: Sequence[str]) -> Dict[str, str]:
        """
        Fetch the ISO-8601 duration of each video, 50 ids per request.

        The result is keyed by the id echoed in each response item; videos the
        API does not return (deleted, private) are simply absent.

        Raises:
            YouTubeAPIError: If any batch request fails.
        """
        durations: Dict[str, str] = {}
        batch_size = YouTubeConfig.BATCH_SIZE
        batches = 0

        for start in range(0, len(video_ids), batch_size):
            batch = video_ids[start:start + batch_size]
            data = await self._get(
                "videos",
                {"part": "contentDetails", "id": ",".join(batch)},
                VideosResponse,
            )
            batches += 1
            for video in data.items:
                durations[video.id] = video.duration or ""

        logger.info(
            f"Fetched durations for {len(durations)}/{len(video_ids)} videos in {batches} batches"
        )
        return durations
