"""Lookup of curated transport options for known city pairs."""

from __future__ import annotations

import re
from typing import Any, Optional

from ...data.reference_repository import ReferenceData, load_reference_data
from ...models.domain import TransportOption

_PRICE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)(?:\s*-\s*(\d+(?:\.\d+)?))?")
_STOPS_PATTERN = re.compile(r"(\d+)\s+stops?", re.IGNORECASE)
_VIA_PATTERN = re.compile(r"via\s+([^,;]+)", re.IGNORECASE)
_HUB_SPLIT_PATTERN = re.compile(r"\s*(?:\+|\bor\b|\band\b|/)\s*", re.IGNORECASE)


def _key(name: str) -> str:
    return " ".join(name.split()).casefold()


def parse_price_range(price: Optional[str]) -> tuple[Optional[float], Optional[float]]:
    """Parse ``"$40-100"`` into ``(40.0, 100.0)``; a single figure yields equal bounds."""
    if not price:
        return None, None
    match = _PRICE_PATTERN.search(price.replace(",", ""))
    if not match:
        return None, None
    low = float(match.group(1))
    high = float(match.group(2)) if match.group(2) else low
    return low, high


def parse_stop_count(notes: Optional[str]) -> int:
    """Stops mentioned in the notes (``"2 stops via ..."``); direct otherwise."""
    if notes:
        match = _STOPS_PATTERN.search(notes)
        if match:
            return int(match.group(1))
    return 0


def parse_hubs_from_notes(notes: Optional[str]) -> list[str]:
    """Extract named connection points from notes such as ``"2 stops via Vancouver + Bangkok"``."""
    if not notes:
        return []
    match = _VIA_PATTERN.search(notes)
    if not match:
        return []
    hubs = [part.strip() for part in _HUB_SPLIT_PATTERN.split(match.group(1)) if part.strip()]
    return [hub for hub in hubs if hub.casefold() != "hub"]


def option_from_record(record: dict[str, Any]) -> TransportOption:
    mode = record["mode"]
    if mode == "drive":
        mode = "car"
    notes = record.get("notes")
    low, high = parse_price_range(record.get("price"))
    stops = record.get("stops")
    minutes = record.get("minutes")
    return TransportOption(
        mode=mode,
        duration_minutes=int(minutes) if minutes is not None else None,
        duration_label=record.get("duration") or "",
        price_range=record.get("price"),
        price_low=low,
        price_high=high,
        operator=record.get("operator"),
        frequency=record.get("frequency"),
        notes=notes,
        stop_count=int(stops) if stops is not None else parse_stop_count(notes),
    )


class TransportCatalog:
    """Curated options keyed by city pair, looked up in either direction."""

    def __init__(self, reference: ReferenceData | None = None) -> None:
        self.reference = reference or load_reference_data()
        self._routes: dict[str, dict[str, list[dict[str, Any]]]] = {}
        for origin, targets in self.reference.route_transport.items():
            bucket = self._routes.setdefault(_key(origin), {})
            for destination, records in targets.items():
                bucket[_key(destination)] = records
        self._hubs = {
            (_key(origin), _key(destination)): hubs
            for (origin, destination), hubs in self.reference.transport_hubs.items()
        }

    def _records(self, from_city: str, to_city: str) -> Optional[list[dict[str, Any]]]:
        origin, destination = _key(from_city), _key(to_city)
        direct = self._routes.get(origin, {}).get(destination)
        if direct is not None:
            return direct
        return self._routes.get(destination, {}).get(origin)

    def lookup(self, from_city: str, to_city: str) -> Optional[list[TransportOption]]:
        """Fresh option objects for the pair, or ``None`` when the pair is not curated."""
        records = self._records(from_city, to_city)
        if records is None:
            return None
        return [option_from_record(record) for record in records]

    def hubs_for(self, from_city: str, to_city: str) -> list[str]:
        origin, destination = _key(from_city), _key(to_city)
        hubs = self._hubs.get((origin, destination)) or self._hubs.get((destination, origin))
        return list(hubs or [])
