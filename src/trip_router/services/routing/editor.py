"""Route editing operations.

Every operation takes a ``RouteState`` and returns a new one; the input is
never mutated. Out-of-range indices and unknown names leave the route
unchanged instead of raising, since edits come from drag gestures that can
overshoot.
"""

from __future__ import annotations

import uuid
from collections import defaultdict, deque
from dataclasses import replace
from typing import Iterable, Sequence

from ...config import settings
from ...models.domain import RouteEntry, RoutePreferences, RouteState
from ..geography import GeoRegistry
from .city_sequencer import SeedStrategy, sequence_cities
from .country_sequencer import is_permutation


def new_entry(city: str) -> RouteEntry:
    return RouteEntry(entry_id=uuid.uuid4().hex, city=city)


def copy_state(state: RouteState, **changes) -> RouteState:
    """Shallow copy with fresh containers so callers can never share mutable lists."""
    base = replace(
        state,
        order=list(state.order),
        country_order=list(state.country_order),
        parked=list(state.parked),
        preferences=replace(state.preferences),
        city_tags=dict(state.city_tags),
    )
    return replace(base, **changes) if changes else base


def city_country(state: RouteState, geo: GeoRegistry, city: str) -> str:
    return geo.country_of(city, state.city_tags.get(city, ()))


def normalize_country_order(
    order: Sequence[RouteEntry],
    country_order: Sequence[str],
    state: RouteState,
    geo: GeoRegistry,
) -> list[str]:
    """Drop countries no longer routed and append newly routed ones in first-seen order."""
    present = list(dict.fromkeys(city_country(state, geo, entry.city) for entry in order))
    kept = [country for country in dict.fromkeys(country_order) if country in present]
    return kept + [country for country in present if country not in kept]


def _with_order(state: RouteState, geo: GeoRegistry, order: list[RouteEntry], **changes) -> RouteState:
    updated = copy_state(state, order=order, **changes)
    updated.country_order = normalize_country_order(order, state.country_order, updated, geo)
    return updated


def group_by_country(state: RouteState, geo: GeoRegistry) -> dict[str, list[RouteEntry]]:
    groups: dict[str, list[RouteEntry]] = defaultdict(list)
    for entry in state.order:
        groups[city_country(state, geo, entry.city)].append(entry)
    return groups


def insert_city(
    state: RouteState,
    city: str,
    index: int,
    *,
    geo: GeoRegistry,
    tags: Iterable[str] | None = None,
) -> RouteState:
    """Insert ``city`` at ``index`` (clamped). Repeating a routed city creates a stopover."""
    name = (city or "").strip()
    if not name:
        return copy_state(state)

    position = min(max(index, 0), len(state.order))
    order = list(state.order)
    order.insert(position, new_entry(name))

    city_tags = dict(state.city_tags)
    if tags:
        city_tags[name] = tuple(dict.fromkeys([*city_tags.get(name, ()), *tags]))
    parked = [parked_city for parked_city in state.parked if parked_city != name]
    return _with_order(state, geo, order, parked=parked, city_tags=city_tags)


def remove_city(state: RouteState, index: int, *, geo: GeoRegistry) -> RouteState:
    """Remove the occurrence at ``index``; the city is parked once no occurrence remains."""
    if not 0 <= index < len(state.order):
        return copy_state(state)

    order = list(state.order)
    removed = order.pop(index)
    parked = list(state.parked)
    if removed.city not in {entry.city for entry in order} and removed.city not in parked:
        parked.append(removed.city)
    return _with_order(state, geo, order, parked=parked)


def move_city(state: RouteState, from_index: int, to_index: int, *, geo: GeoRegistry) -> RouteState:
    if not 0 <= from_index < len(state.order):
        return copy_state(state)

    order = list(state.order)
    entry = order.pop(from_index)
    order.insert(min(max(to_index, 0), len(order)), entry)
    return _with_order(state, geo, order)


def park_city(state: RouteState, city: str, *, geo: GeoRegistry) -> RouteState:
    """Take every occurrence of ``city`` out of the route and shelve it."""
    if city not in state.cities:
        return copy_state(state)

    order = [entry for entry in state.order if entry.city != city]
    parked = [*state.parked, city] if city not in state.parked else list(state.parked)
    return _with_order(state, geo, order, parked=parked)


def unpark_city(state: RouteState, city: str, *, geo: GeoRegistry) -> RouteState:
    """Return a parked city to the end of its country's block (or the end of the route)."""
    if city not in state.parked:
        return copy_state(state)

    country = city_country(state, geo, city)
    order = list(state.order)
    position = len(order)
    for idx in range(len(order) - 1, -1, -1):
        if city_country(state, geo, order[idx].city) == country:
            position = idx + 1
            break
    order.insert(position, new_entry(city))
    parked = [parked_city for parked_city in state.parked if parked_city != city]
    return _with_order(state, geo, order, parked=parked)


def reorder_countries(state: RouteState, country_order: Sequence[str], *, geo: GeoRegistry) -> RouteState:
    """Regroup the route by ``country_order``, keeping each country's internal order."""
    current = normalize_country_order(state.order, state.country_order, state, geo)
    requested = list(country_order)
    if not is_permutation(requested, current):
        return copy_state(state)

    groups = group_by_country(state, geo)
    order = [entry for country in requested for entry in groups.get(country, [])]
    return copy_state(state, order=order, country_order=requested)


def set_preferences(state: RouteState, preferences: RoutePreferences) -> RouteState:
    return copy_state(state, preferences=replace(preferences))


def optimize(
    state: RouteState,
    *,
    geo: GeoRegistry,
    strategy: SeedStrategy | None = None,
    two_opt_iterations: int | None = None,
) -> RouteState:
    """Re-sequence each country's current cities and lay the blocks out in ``country_order``."""
    country_order = normalize_country_order(state.order, state.country_order, state, geo)
    groups = group_by_country(state, geo)

    order: list[RouteEntry] = []
    for country in country_order:
        block = groups.get(country, [])
        sequenced = sequence_cities(
            [entry.city for entry in block],
            geo.distance_km,
            geo.has_coordinates,
            strategy=strategy,
            hub=geo.reference.country_hubs.get(country),
            two_opt_iterations=two_opt_iterations,
        )
        by_city: dict[str, deque[RouteEntry]] = defaultdict(deque)
        for entry in block:
            by_city[entry.city].append(entry)
        order.extend(by_city[city].popleft() for city in sequenced)

    return copy_state(state, order=order, country_order=country_order)


def find_backtracks(
    state: RouteState,
    *,
    geo: GeoRegistry,
    ratio: float | None = None,
) -> list[tuple[int, str, str, str]]:
    """Return ``(index_of_B, A, B, C)`` for every same-country triple where B is a detour.

    B is a detour when A->C is known and shorter than ``ratio`` times A->B.
    A return to the same city (A, B, A) is a deliberate stopover and is not reported.
    """
    threshold = settings.backtrack_ratio if ratio is None else ratio
    cities = state.cities
    found: list[tuple[int, str, str, str]] = []
    for idx in range(1, len(cities) - 1):
        a, b, c = cities[idx - 1], cities[idx], cities[idx + 1]
        if a == c:
            continue
        country = city_country(state, geo, a)
        if city_country(state, geo, b) != country or city_country(state, geo, c) != country:
            continue
        direct = geo.distance_km(a, c)
        detour = geo.distance_km(a, b)
        if direct is None or detour is None:
            continue
        if direct < threshold * detour:
            found.append((idx, a, b, c))
    return found


def detect_inefficiency(state: RouteState, *, geo: GeoRegistry, ratio: float | None = None) -> bool:
    return bool(find_backtracks(state, geo=geo, ratio=ratio))
