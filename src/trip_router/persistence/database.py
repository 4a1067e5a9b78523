"""Database persistence for route states."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from ..db.supabase import get_supabase_client

ROUTE_STATES_TABLE = "route_states"


def load_route_state_from_database(trip_id: str) -> dict[str, Any] | None:
    """Load the stored route payload for a trip.

    Returns:
        The stored payload, or None if Supabase is not configured or the trip has no row.
    """
    supabase = get_supabase_client()
    if not supabase:
        return None

    response = (
        supabase.table(ROUTE_STATES_TABLE)
        .select("state")
        .eq("trip_id", trip_id)
        .limit(1)
        .execute()
    )
    rows = response.data or []
    if not rows:
        return None
    return rows[0].get("state")


def save_route_state_to_database(trip_id: str, payload: dict[str, Any]) -> bool:
    """Upsert the route payload for a trip.

    Returns:
        True when the row was written, False when Supabase is not configured.
    """
    supabase = get_supabase_client()
    if not supabase:
        logging.info("Supabase not configured - route state will only be saved to files")
        return False

    supabase.table(ROUTE_STATES_TABLE).upsert(
        {
            "trip_id": trip_id,
            "state": payload,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        },
        on_conflict="trip_id",
    ).execute()
    return True
