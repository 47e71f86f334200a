from .youtube import (
    PlaylistItemsResponse,
    PlaylistsResponse,
    VideosResponse,
    PlaylistMetadata,
)
from .api import (
    DurationRequest,
    SpeedAdjustedDuration,
    PlaylistDuration,
    SearchFailure,
    SearchOutcome,
)
from .enums import SearchState, FailureReason
