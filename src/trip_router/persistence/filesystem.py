"""File-based persistence helpers for trip route states."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from ..config import settings

_SAFE_NAME = re.compile(r"[^A-Za-z0-9_.-]")


class FileStorage:
    """Thin wrapper around the data root for storing per-trip JSON documents."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = (root or settings.data_root).resolve()
        self.trips_root = self.root / "trips"
        self.trips_root.mkdir(parents=True, exist_ok=True)

    def trip_path(self, trip_id: str) -> Path:
        safe_id = _SAFE_NAME.sub("_", trip_id.strip())
        if not safe_id:
            raise ValueError("Trip id must not be empty.")
        return self.trips_root / f"{safe_id}.json"

    def write_json(self, path: Path, data: Any, *, indent: int = 2) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, ensure_ascii=False, indent=indent)
        tmp_path.replace(path)

    def read_json(self, path: Path) -> Any | None:
        if not path.exists():
            return None
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
