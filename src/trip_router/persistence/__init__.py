"""Route state persistence."""

from .debounce import DebouncedRouteSaver
from .trip_store import TripProfileStore, TripStoreError

__all__ = ["DebouncedRouteSaver", "TripProfileStore", "TripStoreError"]
