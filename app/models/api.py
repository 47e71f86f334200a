"""
Pydantic models for API request/response schemas and search outcomes.
"""
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.core.constants import SpeedConfig
from app.models.enums import FailureReason, SearchState
from app.models.youtube import PlaylistMetadata

SpeedMultiplier = Annotated[
    float, Field(ge=SpeedConfig.MIN_MULTIPLIER, le=SpeedConfig.MAX_MULTIPLIER)
]


class DurationRequest(BaseModel):
    """Request model for a playlist duration search."""

    input: str = Field(min_length=1, max_length=2048)
    speeds: Optional[Annotated[List[SpeedMultiplier], Field(max_length=16)]] = None

    model_config = ConfigDict(extra="forbid")


class SpeedAdjustedDuration(BaseModel):
    """Playlist play time at a given playback speed."""

    multiplier: float
    total_seconds: float
    formatted: str

    model_config = ConfigDict(frozen=True)


class PlaylistDuration(BaseModel):
    """Aggregate play time of a fully enumerated playlist."""

    metadata: PlaylistMetadata
    video_count: int
    total_seconds: int
    formatted: str
    speeds: List[SpeedAdjustedDuration] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def at_speed(self, multiplier: float) -> Optional[SpeedAdjustedDuration]:
        """Return the precomputed entry for ``multiplier``, if one was requested."""
        for speed in self.speeds:
            if speed.multiplier == multiplier:
                return speed
        return None


class SearchFailure(BaseModel):
    """Reason and user-facing message of a failed search."""

    reason: FailureReason
    message: str

    model_config = ConfigDict(frozen=True)


class SearchOutcome(BaseModel):
    """
    Immutable snapshot of a search.

    ``result`` is only set in the DONE state and ``error`` only in the FAILED
    state, so a partial total can never be observed.
    """

    state: SearchState
    playlist_id: Optional[str] = None
    result: Optional[PlaylistDuration] = None
    error: Optional[SearchFailure] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def idle(cls) -> "SearchOutcome":
        return cls(state=SearchState.IDLE)

    @classmethod
    def in_progress(cls, state: SearchState, playlist_id: Optional[str] = None) -> "SearchOutcome":
        if state.is_terminal:
            raise ValueError(f"{state.value} is not an in-progress state")
        return cls(state=state, playlist_id=playlist_id)

    @classmethod
    def done(cls, result: PlaylistDuration) -> "SearchOutcome":
        return cls(state=SearchState.DONE, playlist_id=result.metadata.id, result=result)

    @classmethod
    def failed(
        cls, reason: FailureReason, message: str, playlist_id: Optional[str] = None
    ) -> "SearchOutcome":
        return cls(
            state=SearchState.FAILED,
            playlist_id=playlist_id,
            error=SearchFailure(reason=reason, message=message),
        )
