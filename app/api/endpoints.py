"""
API endpoints for playlist duration calculation.
"""
import random
import time

from fastapi import APIRouter, Request, Depends
from loguru import logger

from app.models import DurationRequest, FailureReason, PlaylistDuration, SearchOutcome, SearchState
from app.services.playlist_duration import PlaylistDurationService
from app.api.dependencies import get_playlist_duration_service
from app.core.limiter import limiter
from app.core.exceptions import InvalidPlaylistInputError, PlaylistFetchError
from app.core.constants import RateLimitConfig, SamplePlaylists


router = APIRouter()


def _unwrap(outcome: SearchOutcome) -> PlaylistDuration:
    """Return the result of a DONE outcome or raise the matching HTTP error."""
    if outcome.state == SearchState.DONE and outcome.result is not None:
        return outcome.result
    if outcome.error and outcome.error.reason == FailureReason.INVALID_INPUT:
        raise InvalidPlaylistInputError(outcome.error.message)
    if outcome.error:
        raise PlaylistFetchError(outcome.error.message)
    raise PlaylistFetchError()


@router.post("/duration", response_model=PlaylistDuration)
@limiter.limit(RateLimitConfig.DURATION)
async def calculate_playlist_duration(
    request: Request,
    payload: DurationRequest,
    duration_service: PlaylistDurationService = Depends(get_playlist_duration_service),
):
    """
    Calculates the total play time of a YouTube playlist.

    Accepts a playlist ID, a playlist URL, or a URL without a scheme.
    The total is also reported at the requested (or configured) playback speeds.

    Args:
        request: FastAPI request object (required for rate limiting).
        payload: The request body containing the playlist URL or ID.
        duration_service: The service handling the business logic.

    Returns:
        PlaylistDuration: Playlist metadata with the total and speed-adjusted durations.
    """
    logger.info(f"Incoming duration request for input: {payload.input!r}")

    start_time = time.perf_counter()
    outcome = await duration_service.run(payload.input, speeds=payload.speeds)
    duration = time.perf_counter() - start_time
    logger.info(f"Duration search finished as {outcome.state.value} in {duration:.2f}s")
    return _unwrap(outcome)


@router.post("/duration/random", response_model=PlaylistDuration)
@limiter.limit(RateLimitConfig.DURATION)
async def calculate_random_playlist_duration(
    request: Request,
    duration_service: PlaylistDurationService = Depends(get_playlist_duration_service),
):
    """
    Calculates the total play time of a playlist picked from the sample list.

    Args:
        request: FastAPI request object (required for rate limiting).
        duration_service: The service handling the business logic.

    Returns:
        PlaylistDuration: Playlist metadata with the total and speed-adjusted durations.
    """
    playlist_id = random.choice(SamplePlaylists.IDS)
    logger.info(f"Random playlist picked: {playlist_id}")
    outcome = await duration_service.run(playlist_id)
    return _unwrap(outcome)
