"""Stored route endpoints, one route state per trip."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...persistence.trip_store import TripProfileStore, TripStoreError
from ...schemas.routing import RouteStateModel

router = APIRouter(prefix="/trips", tags=["trips"])

logger = logging.getLogger(__name__)


def get_store() -> TripProfileStore:
    return TripProfileStore()


@router.get("/{trip_id}/route", response_model=RouteStateModel)
def get_route(trip_id: str) -> RouteStateModel:
    try:
        state = get_store().load_route_state(trip_id)
    except TripStoreError as exc:
        logger.error(f"Loading route for trip {trip_id} failed: {exc}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    if state is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No route stored for trip '{trip_id}'",
        )
    return RouteStateModel.from_domain(state)


@router.put("/{trip_id}/route", response_model=RouteStateModel)
def put_route(trip_id: str, payload: RouteStateModel) -> RouteStateModel:
    state = payload.to_domain()
    try:
        get_store().save_route_state(trip_id, state)
    except TripStoreError as exc:
        logger.error(f"Saving route for trip {trip_id} failed: {exc}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    return RouteStateModel.from_domain(state)
