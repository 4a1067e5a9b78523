"""Transport estimates for each leg of a route."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...config import settings
from ...models.domain import (
    UNKNOWN_COUNTRY,
    RoutePreferences,
    RouteState,
    TransportOption,
    TransportSegment,
)
from ..geography import GeoRegistry
from .catalog import TransportCatalog, parse_hubs_from_notes

logger = logging.getLogger(__name__)

# Weighting used to pick the "best" option: one minute of travel counts as much as TIME_WEIGHT,
# one US dollar as much as COST_WEIGHT.
TIME_WEIGHT = 1.0
COST_WEIGHT = 1.5

# Ground speeds (km/h) and per-km price bands (USD) for distance-based estimates.
GROUND_PROFILES: dict[str, tuple[float, float, float]] = {
    "car": (60.0, 0.15, 0.30),
    "bus": (50.0, 0.03, 0.06),
    "train": (100.0, 0.05, 0.10),
}
FLIGHT_PRICE_PER_KM = (0.08, 0.15)
FLIGHT_BRACKET_HOURS = 2

SEGMENT_MODES = {
    "flight": "flight",
    "train": "train",
    "bus": "bus",
    "car": "car",
    "taxi": "car",
    "private": "car",
    "ferry": "ferry",
}

VIOLATION_MAX_STOPS = "max_stops_per_flight"
VIOLATION_MAX_HOURS = "max_flight_hours"
VIOLATION_FLIGHTS_PER_DAY = "max_flights_per_day"


def format_duration(minutes: int) -> str:
    if minutes < 60:
        return f"{minutes}min"
    hours, remainder = divmod(minutes, 60)
    return f"{hours}h" if remainder == 0 else f"{hours}h {remainder}min"


def _price_label(low: float, high: float) -> str:
    return f"${round(low)}-{round(high)}"


@dataclass(slots=True)
class DistanceThresholds:
    car_max_km: float = field(default_factory=lambda: settings.car_max_km)
    bus_max_km: float = field(default_factory=lambda: settings.bus_max_km)
    train_max_km: float = field(default_factory=lambda: settings.train_max_km)
    flight_cruise_kmh: float = field(default_factory=lambda: settings.flight_cruise_kmh)


def _ground_option(mode: str, distance_km: float) -> TransportOption:
    speed, price_low, price_high = GROUND_PROFILES[mode]
    minutes = round(distance_km / speed * 60)
    low, high = distance_km * price_low, distance_km * price_high
    return TransportOption(
        mode=mode,
        duration_minutes=minutes,
        duration_label=format_duration(minutes),
        price_range=_price_label(low, high),
        price_low=round(low, 2),
        price_high=round(high, 2),
    )


def _flight_option(distance_km: float, cruise_kmh: float) -> TransportOption:
    """Long-haul estimate: a rough multi-hour bracket, never an exact duration."""
    low_hours = math.floor(distance_km / cruise_kmh + 1)
    high_hours = low_hours + FLIGHT_BRACKET_HOURS
    low, high = distance_km * FLIGHT_PRICE_PER_KM[0], distance_km * FLIGHT_PRICE_PER_KM[1]
    return TransportOption(
        mode="flight",
        duration_minutes=None,
        duration_label=f"{low_hours}-{high_hours}h",
        duration_range=(low_hours * 60, high_hours * 60),
        price_range=_price_label(low, high),
        price_low=round(low, 2),
        price_high=round(high, 2),
        stop_count=None,
    )


def estimate_options(
    distance_km: float,
    cross_country: bool = False,
    thresholds: DistanceThresholds | None = None,
) -> list[TransportOption]:
    """Distance-based options for a pair the catalog does not know."""
    limits = thresholds or DistanceThresholds()
    if cross_country or distance_km > limits.train_max_km:
        return [_flight_option(distance_km, limits.flight_cruise_kmh)]
    if distance_km < limits.car_max_km:
        return [_ground_option("car", distance_km), _ground_option("bus", distance_km)]
    if distance_km < limits.bus_max_km:
        return [_ground_option("train", distance_km), _ground_option("bus", distance_km)]
    return [_ground_option("train", distance_km)]


def option_score(option: TransportOption) -> float:
    minutes = option.rough_minutes
    price = option.price_mid
    return (math.inf if minutes is None else minutes * TIME_WEIGHT) + (price or 0.0) * COST_WEIGHT


def rank_options(options: Sequence[TransportOption]) -> list[TransportOption]:
    """Sort by weighted score and hand out at most one best, fastest and cheapest badge."""
    ranked = sorted(options, key=option_score)
    for option in ranked:
        option.badge = "none"
    if not ranked:
        return ranked

    ranked[0].badge = "best"
    timed = [option for option in ranked if option.rough_minutes is not None]
    if timed:
        fastest = min(timed, key=lambda option: option.rough_minutes)
        if fastest.badge == "none":
            fastest.badge = "fastest"
    priced = [option for option in ranked if option.price_mid is not None]
    if priced:
        cheapest = min(priced, key=lambda option: option.price_mid)
        if cheapest.badge == "none":
            cheapest.badge = "cheapest"
    return ranked


def preference_violations(option: TransportOption, preferences: RoutePreferences) -> list[str]:
    """Preference checks for a flight leg. Reported only; the route is never changed."""
    if option.mode != "flight":
        return []
    violations: list[str] = []
    stops = option.stop_count
    if preferences.max_stops_per_flight < 2 and stops is not None and stops > preferences.max_stops_per_flight:
        violations.append(VIOLATION_MAX_STOPS)
    shortest = option.duration_minutes
    if shortest is None and option.duration_range is not None:
        shortest = option.duration_range[0]
    if shortest is not None and shortest > preferences.max_flight_hours * 60:
        violations.append(VIOLATION_MAX_HOURS)
    if stops is not None and stops + 1 > preferences.max_flights_per_day:
        violations.append(VIOLATION_FLIGHTS_PER_DAY)
    return violations


class TransportEstimator:
    """Builds ``TransportSegment`` values from the catalog, falling back to distance estimates."""

    def __init__(
        self,
        geo: GeoRegistry,
        catalog: TransportCatalog | None = None,
        thresholds: DistanceThresholds | None = None,
    ) -> None:
        self.geo = geo
        self.catalog = catalog or TransportCatalog(geo.reference)
        self.thresholds = thresholds or DistanceThresholds()

    def _is_cross_country(self, from_country: str, to_country: str) -> bool:
        if UNKNOWN_COUNTRY in (from_country, to_country):
            return False
        return from_country != to_country

    def estimate(
        self,
        from_city: str,
        to_city: str,
        preferences: RoutePreferences | None = None,
        *,
        from_country: Optional[str] = None,
        to_country: Optional[str] = None,
    ) -> TransportSegment:
        preferences = preferences or RoutePreferences()
        distance = self.geo.distance_km(from_city, to_city)
        cross_country = self._is_cross_country(
            from_country or self.geo.country_of(from_city),
            to_country or self.geo.country_of(to_city),
        )

        options = self.catalog.lookup(from_city, to_city)
        source = "catalog"
        if options is None:
            if distance is None:
                return TransportSegment(
                    from_city=from_city,
                    to_city=to_city,
                    distance_km=None,
                    mode="unknown",
                    duration_estimate=None,
                    duration_label=None,
                    stop_count=None,
                    source="unknown",
                    cross_country=cross_country,
                )
            options = estimate_options(distance, cross_country, self.thresholds)
            source = "estimate"

        ranked = rank_options(options)
        headline = ranked[0]
        flights = [option for option in ranked if option.mode == "flight"]
        if preferences.prefer_shortest_flights and headline.mode == "flight" and len(flights) > 1:
            headline = min(
                flights,
                key=lambda option: option.rough_minutes if option.rough_minutes is not None else math.inf,
            )

        hubs: list[str] = []
        if headline.stop_count:
            hubs = self.catalog.hubs_for(from_city, to_city) or parse_hubs_from_notes(headline.notes)

        return TransportSegment(
            from_city=from_city,
            to_city=to_city,
            distance_km=round(distance, 1) if distance is not None else None,
            mode=SEGMENT_MODES.get(headline.mode, "unknown"),
            duration_estimate=headline.duration_minutes,
            duration_label=headline.duration_label or None,
            stop_count=headline.stop_count,
            hub_options=hubs,
            badge=headline.badge,
            options=ranked,
            source=source,
            cross_country=cross_country,
            violations=preference_violations(headline, preferences),
        )

    def estimate_segments(self, state: RouteState, *, include_home_legs: bool = False) -> list[TransportSegment]:
        """One segment per consecutive pair; optionally framed by legs from and back to the origin."""
        cities = state.cities
        if include_home_legs and state.origin and cities:
            cities = [state.origin, *cities, state.origin]

        def country(city: str) -> str:
            return self.geo.country_of(city, state.city_tags.get(city, ()))

        segments = [
            self.estimate(
                from_city,
                to_city,
                state.preferences,
                from_country=country(from_city),
                to_country=country(to_city),
            )
            for from_city, to_city in zip(cities, cities[1:])
        ]
        logger.debug(f"Estimated {len(segments)} transport segments for {len(state.order)} route stops")
        return segments
