"""Route editing endpoints."""

from __future__ import annotations

from functools import lru_cache
from typing import List

from fastapi import APIRouter, Query, status

from ...models.domain import RouteState
from ...schemas.routing import (
    BacktrackModel,
    CityNameRequest,
    CountryOrderRequest,
    DistanceResponse,
    InefficiencyResponse,
    InitialRouteRequest,
    InsertCityRequest,
    MoveCityRequest,
    PreferencesRequest,
    RemoveCityRequest,
    RouteStateModel,
    SegmentsRequest,
    StateRequest,
    TransportSegmentModel,
)
from ...services.routing.service import RoutePlanner

router = APIRouter(prefix="/routes", tags=["routes"])


@lru_cache(maxsize=1)
def get_planner() -> RoutePlanner:
    return RoutePlanner()


def _respond(state: RouteState) -> RouteStateModel:
    return RouteStateModel.from_domain(state)


@router.post("/initial", response_model=RouteStateModel, status_code=status.HTTP_200_OK)
def compute_initial(payload: InitialRouteRequest) -> RouteStateModel:
    state = get_planner().compute_initial_route(
        payload.selected_cities,
        origin_city=payload.origin_city,
        city_tags=payload.city_tags,
        preferences=payload.preferences.to_domain() if payload.preferences else None,
    )
    return _respond(state)


@router.post("/insert", response_model=RouteStateModel)
def insert_city(payload: InsertCityRequest) -> RouteStateModel:
    state = get_planner().insert_city(payload.state.to_domain(), payload.city, payload.index, tags=payload.tags)
    return _respond(state)


@router.post("/remove", response_model=RouteStateModel)
def remove_city(payload: RemoveCityRequest) -> RouteStateModel:
    return _respond(get_planner().remove_city(payload.state.to_domain(), payload.index))


@router.post("/move", response_model=RouteStateModel)
def move_city(payload: MoveCityRequest) -> RouteStateModel:
    state = get_planner().move_city(payload.state.to_domain(), payload.from_index, payload.to_index)
    return _respond(state)


@router.post("/park", response_model=RouteStateModel)
def park_city(payload: CityNameRequest) -> RouteStateModel:
    return _respond(get_planner().park_city(payload.state.to_domain(), payload.city))


@router.post("/unpark", response_model=RouteStateModel)
def unpark_city(payload: CityNameRequest) -> RouteStateModel:
    return _respond(get_planner().unpark_city(payload.state.to_domain(), payload.city))


@router.post("/countries", response_model=RouteStateModel)
def set_country_order(payload: CountryOrderRequest) -> RouteStateModel:
    """Reorder country blocks. Orders that are not a permutation leave the route unchanged."""
    return _respond(get_planner().set_country_order(payload.state.to_domain(), payload.country_order))


@router.post("/optimize", response_model=RouteStateModel)
def optimize_route(payload: StateRequest) -> RouteStateModel:
    return _respond(get_planner().optimize_route(payload.state.to_domain()))


@router.post("/preferences", response_model=RouteStateModel)
def set_preferences(payload: PreferencesRequest) -> RouteStateModel:
    state = get_planner().set_preferences(payload.state.to_domain(), payload.preferences.to_domain())
    return _respond(state)


@router.post("/inefficiency", response_model=InefficiencyResponse)
def detect_inefficiency(payload: StateRequest) -> InefficiencyResponse:
    backtracks = get_planner().find_backtracks(payload.state.to_domain())
    return InefficiencyResponse(
        inefficient=bool(backtracks),
        backtracks=[
            BacktrackModel(index=index, from_city=from_city, detour_city=detour_city, to_city=to_city)
            for index, from_city, detour_city, to_city in backtracks
        ],
    )


@router.post("/segments", response_model=List[TransportSegmentModel])
def estimate_segments(payload: SegmentsRequest) -> List[TransportSegmentModel]:
    segments = get_planner().estimate_segments(
        payload.state.to_domain(), include_home_legs=payload.include_home_legs
    )
    return [TransportSegmentModel.from_domain(segment) for segment in segments]


@router.get("/distance", response_model=DistanceResponse)
def distance(
    from_city: str = Query(..., min_length=1),
    to_city: str = Query(..., min_length=1),
) -> DistanceResponse:
    distance_km = get_planner().distance_km(from_city, to_city)
    return DistanceResponse(
        from_city=from_city,
        to_city=to_city,
        distance_km=round(distance_km, 1) if distance_km is not None else None,
        source="haversine" if distance_km is not None else "unknown",
    )
