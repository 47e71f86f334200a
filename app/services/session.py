"""
Search session for in-process interactive callers (a UI loop, a notebook, a
bot) that fire successive searches and render state changes as they happen.

The HTTP endpoints are request/response and call PlaylistDurationService
directly; a caller that keeps one search box alive wraps the same service in
a SearchSession instead.
"""
from typing import Callable, List, Optional, Sequence

from loguru import logger

from app.models import SearchOutcome, SearchState
from app.services.playlist_duration import PlaylistDurationService

Subscriber = Callable[[SearchOutcome], None]


class SearchSession:
    """
    Holds the latest search snapshot and notifies subscribers of every change.

    Each call to ``search`` takes a new generation number. Only the most
    recent generation may publish; a search that was superseded while its
    API calls were in flight still returns its outcome to its own caller but
    never overwrites the snapshot of the newer search.
    """

    def __init__(self, service: PlaylistDurationService):
        self.service = service
        self._generation = 0
        self._snapshot = SearchOutcome.idle()
        self._subscribers: List[Subscriber] = []

    @property
    def snapshot(self) -> SearchOutcome:
        return self._snapshot

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` for snapshot changes; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self, snapshot: SearchOutcome) -> None:
        self._snapshot = snapshot
        for callback in list(self._subscribers):
            callback(snapshot)

    async def search(
        self, raw_input: str, speeds: Optional[Sequence[float]] = None
    ) -> SearchOutcome:
        """Run a search, publishing its progress while it is the newest one."""
        self._generation += 1
        generation = self._generation

        # Clear the previous result before any network call starts
        self._publish(SearchOutcome.in_progress(SearchState.RESOLVING))

        def on_state(state: SearchState, playlist_id: Optional[str]) -> None:
            if generation == self._generation and state is not SearchState.RESOLVING:
                self._publish(SearchOutcome.in_progress(state, playlist_id))

        outcome = await self.service.run(raw_input, speeds=speeds, on_state=on_state)

        if generation != self._generation:
            logger.info(
                f"Discarding outcome of superseded search #{generation} "
                f"(current is #{self._generation})"
            )
            return outcome

        self._publish(outcome)
        return outcome
