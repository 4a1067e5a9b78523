"""Route request/response schemas."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from ..models.domain import RouteEntry, RoutePreferences, RouteState, TransportOption, TransportSegment


class RoutePreferencesModel(BaseModel):
    prefer_shortest_flights: bool = False
    max_stops_per_flight: Literal[0, 1, 2] = Field(default=2, description="2 means unlimited stops.")
    max_flights_per_day: int = Field(default=3, ge=1)
    max_flight_hours: int = Field(default=24, ge=1)

    @classmethod
    def from_domain(cls, preferences: RoutePreferences) -> "RoutePreferencesModel":
        return cls(
            prefer_shortest_flights=preferences.prefer_shortest_flights,
            max_stops_per_flight=preferences.max_stops_per_flight,
            max_flights_per_day=preferences.max_flights_per_day,
            max_flight_hours=preferences.max_flight_hours,
        )

    def to_domain(self) -> RoutePreferences:
        return RoutePreferences(
            prefer_shortest_flights=self.prefer_shortest_flights,
            max_stops_per_flight=self.max_stops_per_flight,
            max_flights_per_day=self.max_flights_per_day,
            max_flight_hours=self.max_flight_hours,
        )


class RouteEntryModel(BaseModel):
    entry_id: str
    city: str


class RouteStateModel(BaseModel):
    """Serialized form of a route, as stored in the trip profile and exchanged over HTTP."""

    order: List[RouteEntryModel] = Field(default_factory=list)
    country_order: List[str] = Field(default_factory=list)
    parked: List[str] = Field(default_factory=list)
    preferences: RoutePreferencesModel = Field(default_factory=RoutePreferencesModel)
    origin: Optional[str] = None
    city_tags: Dict[str, List[str]] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, state: RouteState) -> "RouteStateModel":
        return cls(
            order=[RouteEntryModel(entry_id=entry.entry_id, city=entry.city) for entry in state.order],
            country_order=list(state.country_order),
            parked=list(state.parked),
            preferences=RoutePreferencesModel.from_domain(state.preferences),
            origin=state.origin,
            city_tags={city: list(tags) for city, tags in state.city_tags.items()},
        )

    def to_domain(self) -> RouteState:
        return RouteState(
            order=[RouteEntry(entry_id=entry.entry_id, city=entry.city) for entry in self.order],
            country_order=list(self.country_order),
            parked=list(self.parked),
            preferences=self.preferences.to_domain(),
            origin=self.origin,
            city_tags={city: tuple(tags) for city, tags in self.city_tags.items()},
        )


class InitialRouteRequest(BaseModel):
    selected_cities: List[str] = Field(..., min_length=1)
    origin_city: Optional[str] = Field(default=None, description="Home city; defaults to the configured home.")
    city_tags: Optional[Dict[str, List[str]]] = Field(
        default=None,
        description="Tags carried by each city record, used to classify cities missing from the country table.",
    )
    preferences: Optional[RoutePreferencesModel] = None


class InsertCityRequest(BaseModel):
    state: RouteStateModel
    city: str = Field(..., min_length=1)
    index: int
    tags: Optional[List[str]] = None


class RemoveCityRequest(BaseModel):
    state: RouteStateModel
    index: int


class MoveCityRequest(BaseModel):
    state: RouteStateModel
    from_index: int
    to_index: int


class CityNameRequest(BaseModel):
    state: RouteStateModel
    city: str


class CountryOrderRequest(BaseModel):
    state: RouteStateModel
    country_order: List[str]


class PreferencesRequest(BaseModel):
    state: RouteStateModel
    preferences: RoutePreferencesModel


class StateRequest(BaseModel):
    state: RouteStateModel


class SegmentsRequest(BaseModel):
    state: RouteStateModel
    include_home_legs: bool = False


class BacktrackModel(BaseModel):
    index: int
    from_city: str
    detour_city: str
    to_city: str


class InefficiencyResponse(BaseModel):
    inefficient: bool
    backtracks: List[BacktrackModel]


class TransportOptionModel(BaseModel):
    mode: str
    duration_minutes: Optional[int]
    duration_label: str
    price_range: Optional[str] = None
    operator: Optional[str] = None
    frequency: Optional[str] = None
    notes: Optional[str] = None
    stop_count: Optional[int] = None
    badge: str = "none"

    @classmethod
    def from_domain(cls, option: TransportOption) -> "TransportOptionModel":
        return cls(
            mode=option.mode,
            duration_minutes=option.duration_minutes,
            duration_label=option.duration_label,
            price_range=option.price_range,
            operator=option.operator,
            frequency=option.frequency,
            notes=option.notes,
            stop_count=option.stop_count,
            badge=option.badge,
        )


class TransportSegmentModel(BaseModel):
    from_city: str
    to_city: str
    distance_km: Optional[float]
    mode: str
    duration_estimate: Optional[int]
    duration_label: Optional[str]
    stop_count: Optional[int]
    hub_options: List[str]
    badge: str
    source: str
    cross_country: bool
    violations: List[str]
    options: List[TransportOptionModel]

    @classmethod
    def from_domain(cls, segment: TransportSegment) -> "TransportSegmentModel":
        return cls(
            from_city=segment.from_city,
            to_city=segment.to_city,
            distance_km=segment.distance_km,
            mode=segment.mode,
            duration_estimate=segment.duration_estimate,
            duration_label=segment.duration_label,
            stop_count=segment.stop_count,
            hub_options=list(segment.hub_options),
            badge=segment.badge,
            source=segment.source,
            cross_country=segment.cross_country,
            violations=list(segment.violations),
            options=[TransportOptionModel.from_domain(option) for option in segment.options],
        )


class DistanceResponse(BaseModel):
    from_city: str
    to_city: str
    distance_km: Optional[float]
    source: Literal["haversine", "unknown"]


class CityImageRequest(BaseModel):
    cities: List[str] = Field(..., min_length=1)
    city_tags: Optional[Dict[str, List[str]]] = None


class CityImageResponse(BaseModel):
    images: Dict[str, str]
