"""Trip profile store: database first, falling back to JSON files on disk."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from ..models.domain import RouteState
from ..schemas.routing import RouteStateModel
from . import database
from .filesystem import FileStorage

logger = logging.getLogger(__name__)


class TripStoreError(RuntimeError):
    """Raised when a route state cannot be loaded or saved."""


class TripProfileStore:
    def __init__(self, storage: FileStorage | None = None, use_database: bool = True) -> None:
        self.storage = storage or FileStorage()
        self.use_database = use_database

    def _load_payload(self, trip_id: str) -> dict[str, Any] | None:
        if self.use_database:
            try:
                payload = database.load_route_state_from_database(trip_id)
            except Exception as exc:
                logger.warning(f"Database load failed for trip {trip_id}, falling back to file: {exc}")
                payload = None
            if payload is not None:
                return payload
        try:
            return self.storage.read_json(self.storage.trip_path(trip_id))
        except (OSError, ValueError) as exc:
            raise TripStoreError(f"Could not read route state for trip {trip_id}: {exc}") from exc

    def load_route_state(self, trip_id: str) -> RouteState | None:
        payload = self._load_payload(trip_id)
        if payload is None:
            return None
        try:
            return RouteStateModel.model_validate(payload).to_domain()
        except ValidationError as exc:
            raise TripStoreError(f"Stored route state for trip {trip_id} is invalid: {exc}") from exc

    def save_route_state(self, trip_id: str, state: RouteState) -> None:
        payload = RouteStateModel.from_domain(state).model_dump(mode="json")
        saved_to_database = False
        if self.use_database:
            try:
                saved_to_database = database.save_route_state_to_database(trip_id, payload)
            except Exception as exc:
                logger.warning(f"Database save failed for trip {trip_id}, writing file only: {exc}")
        try:
            self.storage.write_json(self.storage.trip_path(trip_id), payload)
        except (OSError, ValueError) as exc:
            raise TripStoreError(f"Could not save route state for trip {trip_id}: {exc}") from exc
        logger.info(
            f"Saved route for trip {trip_id} ({len(state.order)} stops, {len(state.parked)} parked)"
            + (" to database and file" if saved_to_database else " to file")
        )
