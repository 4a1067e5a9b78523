"""Nearest-neighbour sequencing of the cities inside one country.

Cities without coordinates cannot be placed by distance; they keep their
input order and go to the end of the tour. Repeated names (stopovers) are
sequenced once; each extra occurrence is then inserted where it adds the
least distance without sitting next to the same city.
"""

from __future__ import annotations

import math
from typing import Callable, Literal, Optional, Sequence

from ...config import settings

DistanceFn = Callable[[str, str], Optional[float]]
SeedStrategy = Literal["best_start", "first", "hub_first"]

_TIE_TOLERANCE_KM = 1e-6


def _distance_or_inf(distance: DistanceFn, a: str, b: str) -> float:
    value = distance(a, b)
    return math.inf if value is None else value


def nearest_neighbor(cities: Sequence[str], distance: DistanceFn, start: int = 0) -> list[str]:
    """Greedy tour from ``cities[start]``; ties go to the earlier input city."""
    if len(cities) <= 1:
        return list(cities)

    tour = [cities[start]]
    remaining = [city for idx, city in enumerate(cities) if idx != start]
    while remaining:
        current = tour[-1]
        best_idx = 0
        best_dist = _distance_or_inf(distance, current, remaining[0])
        for idx in range(1, len(remaining)):
            dist = _distance_or_inf(distance, current, remaining[idx])
            if dist < best_dist:
                best_idx, best_dist = idx, dist
        tour.append(remaining.pop(best_idx))
    return tour


def improve_two_opt(tour: Sequence[str], distance: DistanceFn, max_iterations: int = 100) -> list[str]:
    """Reverse sub-paths while that shortens the open path. The first city never moves."""
    route = list(tour)
    if len(route) <= 3 or max_iterations <= 0:
        return route

    def dist(a: str, b: str) -> float:
        return _distance_or_inf(distance, a, b)

    improved = True
    iterations = 0
    while improved and iterations < max_iterations:
        improved = False
        iterations += 1
        for i in range(len(route) - 2):
            for j in range(i + 2, len(route)):
                has_next = j + 1 < len(route)
                d1 = dist(route[i], route[i + 1])
                d2 = dist(route[j], route[j + 1]) if has_next else 0.0
                d3 = dist(route[i], route[j])
                d4 = dist(route[i + 1], route[j + 1]) if has_next else 0.0
                if d3 + d4 < d1 + d2 - _TIE_TOLERANCE_KM:
                    route[i + 1 : j + 1] = reversed(route[i + 1 : j + 1])
                    improved = True
    return route


def tour_length(tour: Sequence[str], distance: DistanceFn) -> float:
    return sum(_distance_or_inf(distance, a, b) for a, b in zip(tour, tour[1:]))


def _insert_stopover(route: list[str], city: str, distance: DistanceFn) -> None:
    """Insert a repeated ``city`` at the cheapest position not adjacent to another ``city`` entry.

    The first city keeps its place so the tour start stays stable across runs.
    """
    best_pos: Optional[int] = None
    best_cost = math.inf
    for pos in range(1 if route else 0, len(route) + 1):
        prev = route[pos - 1] if pos > 0 else None
        nxt = route[pos] if pos < len(route) else None
        if city in (prev, nxt):
            continue
        added = (_distance_or_inf(distance, prev, city) if prev is not None else 0.0) + (
            _distance_or_inf(distance, city, nxt) if nxt is not None else 0.0
        )
        saved = _distance_or_inf(distance, prev, nxt) if prev is not None and nxt is not None else 0.0
        cost = added - saved if math.isfinite(added) and math.isfinite(saved) else math.inf
        if best_pos is None or cost < best_cost - _TIE_TOLERANCE_KM:
            best_pos, best_cost = pos, cost
    route.insert(len(route) if best_pos is None else best_pos, city)


def sequence_cities(
    cities: Sequence[str],
    distance: DistanceFn,
    has_coordinates: Callable[[str], bool],
    *,
    strategy: SeedStrategy | None = None,
    hub: str | None = None,
    two_opt_iterations: int | None = None,
) -> list[str]:
    """Order one country's cities to approximately minimise travel distance.

    Args:
        cities: Current members of the country block, in their current order.
        distance: Distance function returning ``None`` when unknown.
        has_coordinates: Whether a city can be placed by distance at all.
        strategy: Seed selection. ``first`` starts from the first located city,
            ``best_start`` tries every located city and keeps the shortest tour,
            ``hub_first`` starts from ``hub`` when it is in the group.
        hub: The country's major hub, used by ``hub_first``.
        two_opt_iterations: Bound on 2-opt refinement passes (0 disables it).

    Returns:
        The same names, each occurrence exactly once, in visiting order.
    """
    strategy = strategy or settings.seed_strategy
    iterations = settings.two_opt_max_iterations if two_opt_iterations is None else two_opt_iterations

    distinct = list(dict.fromkeys(cities))
    extras = list(cities)
    for city in distinct:
        extras.remove(city)

    located = [city for city in distinct if has_coordinates(city)]
    unlocated = [city for city in distinct if not has_coordinates(city)]

    def build(start: int) -> list[str]:
        return improve_two_opt(nearest_neighbor(located, distance, start), distance, iterations)

    if not located:
        tour: list[str] = []
    elif strategy == "hub_first" and hub in located:
        tour = build(located.index(hub))
    elif strategy == "first":
        tour = build(0)
    else:
        tour = build(0)
        best_length = tour_length(tour, distance)
        for start in range(1, len(located)):
            candidate = build(start)
            length = tour_length(candidate, distance)
            if length < best_length - _TIE_TOLERANCE_KM:
                tour, best_length = candidate, length

    route = tour + unlocated
    for city in extras:
        _insert_stopover(route, city, distance)
    return route
