import json
import threading
import time
from pathlib import Path

import pytest

from trip_router.models.domain import RouteEntry, RoutePreferences, RouteState
from trip_router.persistence import database
from trip_router.persistence.debounce import DebouncedRouteSaver
from trip_router.persistence.filesystem import FileStorage
from trip_router.persistence.trip_store import TripProfileStore, TripStoreError


def _state(*cities: str) -> RouteState:
    return RouteState(
        order=[RouteEntry(entry_id=f"e{idx}", city=city) for idx, city in enumerate(cities)],
        country_order=["Japan"],
        parked=["Nara"],
        preferences=RoutePreferences(max_stops_per_flight=1),
        origin="Kelowna",
        city_tags={"Koh Mak": ("Thailand",)},
    )


@pytest.fixture
def store(tmp_path: Path) -> TripProfileStore:
    return TripProfileStore(storage=FileStorage(root=tmp_path), use_database=False)


def test_file_storage_writes_trip_json(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    path = storage.trip_path("trip-42")

    storage.write_json(path, {"hello": "world"})

    assert path == tmp_path / "trips" / "trip-42.json"
    assert path.read_text(encoding="utf-8") == '{\n  "hello": "world"\n}'
    assert storage.read_json(storage.trip_path("missing")) is None


def test_trip_path_sanitizes_ids(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)

    assert storage.trip_path("../etc/passwd").parent == tmp_path / "trips"
    with pytest.raises(ValueError):
        storage.trip_path("  ")


def test_round_trip_route_state(store: TripProfileStore) -> None:
    state = _state("Tokyo", "Kyoto", "Tokyo")

    store.save_route_state("trip-1", state)
    loaded = store.load_route_state("trip-1")

    assert loaded == state
    assert store.load_route_state("unknown-trip") is None


def test_corrupt_file_raises_store_error(store: TripProfileStore) -> None:
    store.storage.trip_path("broken").write_text("{not json", encoding="utf-8")
    store.storage.trip_path("invalid").write_text(json.dumps({"order": [{"city": "Tokyo"}]}), encoding="utf-8")

    with pytest.raises(TripStoreError):
        store.load_route_state("broken")
    with pytest.raises(TripStoreError):
        store.load_route_state("invalid")


def test_database_first_then_file_fallback(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    saved = {}

    def fake_save(trip_id, payload):
        saved[trip_id] = payload
        return True

    monkeypatch.setattr(database, "save_route_state_to_database", fake_save)
    monkeypatch.setattr(database, "load_route_state_from_database", lambda trip_id: saved.get(trip_id))
    store = TripProfileStore(storage=FileStorage(root=tmp_path))

    store.save_route_state("trip-db", _state("Tokyo"))
    store.storage.trip_path("trip-db").unlink()

    assert store.load_route_state("trip-db").cities == ["Tokyo"]
    assert saved["trip-db"]["origin"] == "Kelowna"


def test_database_errors_fall_back_to_files(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(*args):
        raise ConnectionError("database unavailable")

    monkeypatch.setattr(database, "save_route_state_to_database", broken)
    monkeypatch.setattr(database, "load_route_state_from_database", broken)
    store = TripProfileStore(storage=FileStorage(root=tmp_path))

    store.save_route_state("trip-2", _state("Kyoto"))

    assert store.load_route_state("trip-2").cities == ["Kyoto"]


class _RecordingStore:
    def __init__(self) -> None:
        self.saves = []
        self.saved = threading.Event()

    def save_route_state(self, trip_id, state):
        self.saves.append((trip_id, state.cities))
        self.saved.set()


def test_debounced_saver_coalesces_edits() -> None:
    store = _RecordingStore()
    saver = DebouncedRouteSaver(store, "trip-3", delay=0.05)

    saver.schedule(_state("Tokyo"))
    saver.schedule(_state("Tokyo", "Kyoto"))
    saver.schedule(_state("Tokyo", "Kyoto", "Osaka"))

    assert store.saved.wait(timeout=2)
    assert store.saves == [("trip-3", ["Tokyo", "Kyoto", "Osaka"])]
    assert not saver.pending


def test_flush_writes_pending_state_immediately() -> None:
    store = _RecordingStore()
    saver = DebouncedRouteSaver(store, "trip-4", delay=60)

    saver.schedule(_state("Hanoi"))
    assert saver.pending
    saver.close()

    assert store.saves == [("trip-4", ["Hanoi"])]
    with pytest.raises(RuntimeError):
        saver.schedule(_state("Sapa"))


def test_flush_without_pending_state_is_noop() -> None:
    store = _RecordingStore()
    saver = DebouncedRouteSaver(store, "trip-5", delay=60)

    saver.flush()

    assert store.saves == []


class _FlakyStore(_RecordingStore):
    def __init__(self, failures: int) -> None:
        super().__init__()
        self.failures = failures
        self.attempts = 0
        self.attempted = threading.Event()

    def save_route_state(self, trip_id, state):
        self.attempts += 1
        self.attempted.set()
        if self.attempts <= self.failures:
            raise TripStoreError("store offline")
        super().save_route_state(trip_id, state)


def test_failed_debounced_save_is_retried_on_close() -> None:
    store = _FlakyStore(failures=1)
    saver = DebouncedRouteSaver(store, "trip-6", delay=0.01)

    saver.schedule(_state("Tokyo", "Kyoto"))
    assert store.attempted.wait(timeout=2)
    deadline = time.monotonic() + 2
    while saver.last_error is None and time.monotonic() < deadline:
        time.sleep(0.01)
    assert saver.pending
    assert isinstance(saver.last_error, TripStoreError)

    saver.close()

    assert store.saves == [("trip-6", ["Tokyo", "Kyoto"])]
    assert saver.last_error is None
    assert not saver.pending


def test_failed_flush_raises_and_keeps_state() -> None:
    store = _FlakyStore(failures=2)
    saver = DebouncedRouteSaver(store, "trip-7", delay=60)

    saver.schedule(_state("Hanoi"))
    with pytest.raises(TripStoreError):
        saver.flush()
    assert saver.pending

    with pytest.raises(TripStoreError):
        saver.close()
    saver.flush()

    assert store.saves == [("trip-7", ["Hanoi"])]


def test_newer_edit_wins_over_failed_save() -> None:
    store = _FlakyStore(failures=1)
    saver = DebouncedRouteSaver(store, "trip-8", delay=60)

    saver.schedule(_state("Hanoi"))
    with pytest.raises(TripStoreError):
        saver.flush()
    saver.schedule(_state("Hanoi", "Sapa"))
    saver.close()

    assert store.saves == [("trip-8", ["Hanoi", "Sapa"])]
