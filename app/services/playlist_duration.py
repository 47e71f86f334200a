"""
Playlist duration service: resolves user input into a playlist and computes
its total play time.

A search moves through these states:

    IDLE -> RESOLVING -> FETCHING_METADATA -> ENUMERATING_ITEMS
         -> FETCHING_DURATIONS -> DONE

FAILED can be reached from any non-idle state. The terminal state is the
returned SearchOutcome; a total is only ever attached to a DONE outcome.
"""
import math
from typing import Callable, Optional, Sequence

from loguru import logger

from app.core.constants import SearchMessages, SpeedConfig
from app.core.exceptions import YouTubeAPIError
from app.models import (
    FailureReason,
    PlaylistDuration,
    PlaylistMetadata,
    SearchOutcome,
    SearchState,
    SpeedAdjustedDuration,
)
from app.services.duration import format_duration, sum_durations
from app.services.playlist_id import extract_playlist_id
from app.services.youtube import YouTubeService

StateCallback = Callable[[SearchState, Optional[str]], None]


def speed_adjusted(total_seconds: int, multiplier: float) -> SpeedAdjustedDuration:
    """Derive the play time at ``multiplier``x speed from the 1x total."""
    if not SpeedConfig.MIN_MULTIPLIER <= multiplier <= SpeedConfig.MAX_MULTIPLIER:
        raise ValueError(
            f"Speed multiplier must be between {SpeedConfig.MIN_MULTIPLIER} "
            f"and {SpeedConfig.MAX_MULTIPLIER}, got {multiplier}"
        )
    seconds = total_seconds / multiplier
    return SpeedAdjustedDuration(
        multiplier=multiplier,
        total_seconds=seconds,
        formatted=format_duration(math.floor(seconds)),
    )


class PlaylistDurationService:
    """
    Orchestrates one playlist duration search end to end.

    The pipeline is a single sequential chain of API calls: metadata, then
    every page of items, then every batch of durations. A failure at any
    stage discards everything gathered so far.
    """

    def __init__(
        self,
        youtube_service: YouTubeService,
        speed_multipliers: Sequence[float] = (),
    ):
        """
        Initialize the PlaylistDurationService.

        Args:
            youtube_service: Client for the YouTube Data API.
            speed_multipliers: Default playback speeds to derive totals for.
        """
        self.youtube_service = youtube_service
        self.speed_multipliers = tuple(speed_multipliers)

    async def run(
        self,
        raw_input: str,
        speeds: Optional[Sequence[float]] = None,
        on_state: Optional[StateCallback] = None,
    ) -> SearchOutcome:
        """
        Compute the total duration of the playlist referenced by ``raw_input``.

        Args:
            raw_input: Playlist URL or ID as typed by the user.
            speeds: Playback speeds to report; defaults to the configured ones.
            on_state: Called with (state, playlist_id) on entering each
                      in-progress state.

        Returns:
            SearchOutcome: DONE with the PlaylistDuration, or FAILED with a
                           user-facing message.
        """

        def enter(state: SearchState, playlist_id: Optional[str] = None) -> None:
            logger.debug(f"Search state -> {state.value}")
            if on_state:
                on_state(state, playlist_id)

        enter(SearchState.RESOLVING)
        playlist_id = extract_playlist_id(raw_input)
        if not playlist_id:
            logger.info(f"Could not extract a playlist ID from input {raw_input!r}")
            return SearchOutcome.failed(FailureReason.INVALID_INPUT, SearchMessages.INVALID_INPUT)

        multipliers = tuple(speeds) if speeds is not None else self.speed_multipliers
        logger.info(f"Calculating duration for playlist {playlist_id}")

        stage = SearchState.FETCHING_METADATA
        try:
            enter(stage, playlist_id)
            metadata = await self.youtube_service.fetch_playlist_metadata(playlist_id)

            stage = SearchState.ENUMERATING_ITEMS
            enter(stage, playlist_id)
            video_ids = await self.youtube_service.get_video_ids(playlist_id)

            stage = SearchState.FETCHING_DURATIONS
            enter(stage, playlist_id)
            durations = await self.youtube_service.fetch_durations(video_ids)
        except YouTubeAPIError as e:
            logger.error(f"Playlist {playlist_id} failed during {stage.value}: {e}")
            return SearchOutcome.failed(
                FailureReason.FETCH_FAILED, SearchMessages.FETCH_FAILED, playlist_id=playlist_id
            )

        total_seconds = sum_durations(video_ids, durations)
        result = self._build_result(metadata, len(video_ids), total_seconds, multipliers)
        logger.info(
            f"Playlist {playlist_id}: {result.video_count} videos, total {result.formatted}"
        )
        return SearchOutcome.done(result)

    @staticmethod
    def _build_result(
        metadata: PlaylistMetadata,
        video_count: int,
        total_seconds: int,
        multipliers: Sequence[float],
    ) -> PlaylistDuration:
        return PlaylistDuration(
            metadata=metadata,
            video_count=video_count,
            total_seconds=total_seconds,
            formatted=format_duration(total_seconds),
            speeds=[speed_adjusted(total_seconds, m) for m in multipliers],
        )
