"""Debounced persistence of route edits."""

from __future__ import annotations

import logging
import threading

from ..config import settings
from ..models.domain import RouteState
from .trip_store import TripProfileStore, TripStoreError

logger = logging.getLogger(__name__)


class DebouncedRouteSaver:
    """Coalesce bursts of route edits into a single write.

    Each ``schedule`` call replaces the pending state and restarts the timer; only the
    most recent state is written once ``delay`` seconds pass without another edit.
    """

    def __init__(self, store: TripProfileStore, trip_id: str, delay: float | None = None) -> None:
        self.store = store
        self.trip_id = trip_id
        self.delay = settings.persist_debounce_seconds if delay is None else delay
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._pending: RouteState | None = None
        self._closed = False
        self.last_error: TripStoreError | None = None

    def schedule(self, state: RouteState) -> None:
        with self._lock:
            if self._closed:
                raise RuntimeError("Saver is closed.")
            self._pending = state
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, self._fire)
            self._timer.daemon = True
            self._timer.start()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not None

    def _take_pending(self) -> RouteState | None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            state, self._pending = self._pending, None
            return state

    def _restore(self, state: RouteState) -> None:
        with self._lock:
            if self._pending is None:
                self._pending = state

    def _save(self, state: RouteState) -> None:
        try:
            self.store.save_route_state(self.trip_id, state)
        except TripStoreError as exc:
            # kept for the next schedule or flush unless a newer edit replaced it
            self._restore(state)
            with self._lock:
                self.last_error = exc
            raise
        with self._lock:
            self.last_error = None

    def _fire(self) -> None:
        state = self._take_pending()
        if state is None:
            return
        try:
            self._save(state)
        except TripStoreError as exc:
            logger.warning(f"Debounced save failed for trip {self.trip_id}, kept for retry: {exc}")

    def flush(self) -> None:
        """Write the pending state now, if any.

        A failed write leaves the state pending and the error propagates to the caller.
        """
        state = self._take_pending()
        if state is not None:
            self._save(state)

    def close(self) -> None:
        self.flush()
        with self._lock:
            self._closed = True
