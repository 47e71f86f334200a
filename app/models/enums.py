"""
Enums for type-safe values across the application.
"""
from enum import Enum


class SearchState(str, Enum):
    """Lifecycle of one playlist duration search."""
    IDLE = "idle"
    RESOLVING = "resolving"
    FETCHING_METADATA = "fetching_metadata"
    ENUMERATING_ITEMS = "enumerating_items"
    FETCHING_DURATIONS = "fetching_durations"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (SearchState.DONE, SearchState.FAILED)


class FailureReason(str, Enum):
    """Why a search ended in the FAILED state."""
    INVALID_INPUT = "invalid_input"
    FETCH_FAILED = "fetch_failed"
