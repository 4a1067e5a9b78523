"""Reference data loader: built-in tables, optionally overridden from a JSON file."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

from ..config import settings
from .cities import CITY_COORDINATES, CITY_COUNTRIES, COUNTRY_HUBS, COUNTRY_RANKS, DESTINATION_COUNTRIES
from .transport import ROUTE_TRANSPORT, TRANSPORT_HUBS

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ReferenceData:
    """Read-only lookup tables injected into the routing engine."""

    coordinates: dict[str, tuple[float, float]] = field(default_factory=dict)
    city_countries: dict[str, str] = field(default_factory=dict)
    destination_countries: tuple[str, ...] = ()
    country_ranks: dict[str, dict[str, int]] = field(default_factory=dict)
    country_hubs: dict[str, str] = field(default_factory=dict)
    route_transport: dict[str, dict[str, list[dict[str, Any]]]] = field(default_factory=dict)
    transport_hubs: dict[tuple[str, str], list[str]] = field(default_factory=dict)


def builtin_reference_data() -> ReferenceData:
    return ReferenceData(
        coordinates=dict(CITY_COORDINATES),
        city_countries=dict(CITY_COUNTRIES),
        destination_countries=tuple(DESTINATION_COUNTRIES),
        country_ranks={home: dict(ranks) for home, ranks in COUNTRY_RANKS.items()},
        country_hubs=dict(COUNTRY_HUBS),
        route_transport={origin: dict(targets) for origin, targets in ROUTE_TRANSPORT.items()},
        transport_hubs=dict(TRANSPORT_HUBS),
    )


def _parse_hub_key(key: str) -> tuple[str, str]:
    origin, _, destination = key.partition("|")
    if not origin or not destination:
        raise ValueError(f"Transport hub key must look like 'Origin|Destination', got {key!r}.")
    return origin.strip(), destination.strip()


def merge_reference_data(base: ReferenceData, overrides: dict[str, Any]) -> ReferenceData:
    """Overlay JSON-style overrides on top of ``base``.

    Recognised keys mirror the ``ReferenceData`` fields. Coordinates are
    ``[lat, lng]`` pairs and transport hub keys are ``"Origin|Destination"``.
    """
    coordinates = dict(base.coordinates)
    for city, value in (overrides.get("coordinates") or {}).items():
        lat, lng = value
        coordinates[city] = (float(lat), float(lng))

    city_countries = {**base.city_countries, **(overrides.get("city_countries") or {})}

    destination_countries = tuple(
        dict.fromkeys([*base.destination_countries, *(overrides.get("destination_countries") or [])])
    )

    country_ranks = {home: dict(ranks) for home, ranks in base.country_ranks.items()}
    for home, ranks in (overrides.get("country_ranks") or {}).items():
        country_ranks.setdefault(home, {}).update({country: int(rank) for country, rank in ranks.items()})

    country_hubs = {**base.country_hubs, **(overrides.get("country_hubs") or {})}

    route_transport = {origin: dict(targets) for origin, targets in base.route_transport.items()}
    for origin, targets in (overrides.get("route_transport") or {}).items():
        route_transport.setdefault(origin, {}).update(targets)

    transport_hubs = dict(base.transport_hubs)
    for key, hubs in (overrides.get("transport_hubs") or {}).items():
        transport_hubs[_parse_hub_key(key)] = list(hubs)

    return ReferenceData(
        coordinates=coordinates,
        city_countries=city_countries,
        destination_countries=destination_countries,
        country_ranks=country_ranks,
        country_hubs=country_hubs,
        route_transport=route_transport,
        transport_hubs=transport_hubs,
    )


def _load_overrides(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"Reference data file {path} must contain a JSON object.")
    return data


@lru_cache(maxsize=1)
def load_reference_data(path: Path | None = None) -> ReferenceData:
    """Return the built-in tables, overlaid with ``path`` (or the configured file) when present."""
    base = builtin_reference_data()
    source = path or settings.reference_data_file
    if source is None:
        return base
    source = Path(source).expanduser()
    if not source.exists():
        logger.warning(f"Reference data file {source} not found, using built-in tables")
        return base
    logger.info(f"Loading reference data overrides from {source}")
    return merge_reference_data(base, _load_overrides(source))
