"""Domain models for cities, routes and transport legs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

UNKNOWN_COUNTRY = "Unknown"

SegmentMode = Literal["flight", "train", "bus", "car", "ferry", "unknown"]
OptionMode = Literal["flight", "train", "bus", "car", "taxi", "ferry", "private"]
Badge = Literal["best", "fastest", "cheapest", "none"]


@dataclass(slots=True, frozen=True)
class City:
    """A named location with its derived country and optional coordinates."""

    name: str
    country: str
    coordinates: Optional[tuple[float, float]] = None


@dataclass(slots=True, frozen=True)
class RouteEntry:
    """One position in a route. Stopovers are separate entries pointing at the same city."""

    entry_id: str
    city: str


@dataclass(slots=True)
class RoutePreferences:
    prefer_shortest_flights: bool = False
    max_stops_per_flight: int = 2  # 2 means unlimited
    max_flights_per_day: int = 3
    max_flight_hours: int = 24


@dataclass(slots=True)
class RouteState:
    """Ordered route being edited for one trip."""

    order: list[RouteEntry] = field(default_factory=list)
    country_order: list[str] = field(default_factory=list)
    parked: list[str] = field(default_factory=list)
    preferences: RoutePreferences = field(default_factory=RoutePreferences)
    origin: Optional[str] = None
    city_tags: dict[str, tuple[str, ...]] = field(default_factory=dict)

    @property
    def cities(self) -> list[str]:
        return [entry.city for entry in self.order]

    @property
    def is_empty(self) -> bool:
        return not self.order and not self.parked


@dataclass(slots=True)
class TransportOption:
    mode: OptionMode
    duration_minutes: Optional[int]
    duration_label: str
    price_range: Optional[str] = None
    price_low: Optional[float] = None
    price_high: Optional[float] = None
    operator: Optional[str] = None
    frequency: Optional[str] = None
    notes: Optional[str] = None
    stop_count: Optional[int] = None
    duration_range: Optional[tuple[int, int]] = None
    badge: Badge = "none"

    @property
    def rough_minutes(self) -> Optional[float]:
        """Exact duration when known, otherwise the midpoint of the estimated bracket."""
        if self.duration_minutes is not None:
            return float(self.duration_minutes)
        if self.duration_range is not None:
            low, high = self.duration_range
            return (low + high) / 2
        return None

    @property
    def price_mid(self) -> Optional[float]:
        if self.price_low is None or self.price_high is None:
            return None
        return (self.price_low + self.price_high) / 2


@dataclass(slots=True)
class TransportSegment:
    """Estimated leg between two consecutive route cities. Never persisted."""

    from_city: str
    to_city: str
    distance_km: Optional[float]
    mode: SegmentMode
    duration_estimate: Optional[int]
    duration_label: Optional[str]
    stop_count: Optional[int]
    hub_options: list[str] = field(default_factory=list)
    badge: Badge = "none"
    options: list[TransportOption] = field(default_factory=list)
    source: Literal["catalog", "estimate", "unknown"] = "unknown"
    cross_country: bool = False
    violations: list[str] = field(default_factory=list)
