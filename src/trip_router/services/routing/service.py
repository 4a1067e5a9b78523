"""Route planning engine exposed to the presentation layer."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Sequence

from ...config import settings
from ...data.reference_repository import ReferenceData, load_reference_data
from ...models.domain import RoutePreferences, RouteState, TransportSegment
from ..geography import GeoRegistry
from ..transport.catalog import TransportCatalog
from ..transport.estimator import TransportEstimator
from . import editor
from .city_sequencer import SeedStrategy
from .country_sequencer import rank_table_for, sequence_countries

logger = logging.getLogger(__name__)


class RoutePlanner:
    """Stateless facade: every call maps ``(state, args)`` to a new state or a derived value."""

    def __init__(
        self,
        reference: ReferenceData | None = None,
        *,
        seed_strategy: SeedStrategy | None = None,
        two_opt_iterations: int | None = None,
        backtrack_ratio: float | None = None,
    ) -> None:
        self.reference = reference or load_reference_data()
        self.geo = GeoRegistry(self.reference)
        self.catalog = TransportCatalog(self.reference)
        self.estimator = TransportEstimator(self.geo, self.catalog)
        self.seed_strategy = seed_strategy
        self.two_opt_iterations = two_opt_iterations
        self.backtrack_ratio = backtrack_ratio

    def compute_initial_route(
        self,
        selected_cities: Sequence[str],
        origin_city: str | None = None,
        city_tags: Mapping[str, Iterable[str]] | None = None,
        preferences: RoutePreferences | None = None,
    ) -> RouteState:
        """Order countries by distance from home, then each country's cities by nearest neighbour."""
        origin = origin_city or settings.home_city
        cities = list(dict.fromkeys(name.strip() for name in selected_cities if name and name.strip()))
        tags = {city: tuple(values) for city, values in (city_tags or {}).items()}

        state = RouteState(
            order=[editor.new_entry(city) for city in cities],
            preferences=preferences or RoutePreferences(),
            origin=origin,
            city_tags=tags,
        )
        ranks = rank_table_for(self.reference, self.geo.country_of(origin))
        countries = [editor.city_country(state, self.geo, city) for city in cities]
        state.country_order = sequence_countries(countries, ranks)

        state = self.optimize_route(state)
        logger.info(
            f"Initial route for {len(cities)} cities from {origin}: countries {state.country_order}"
        )
        return state

    def set_country_order(self, state: RouteState, new_order: Sequence[str]) -> RouteState:
        return editor.reorder_countries(state, new_order, geo=self.geo)

    def insert_city(
        self,
        state: RouteState,
        city_name: str,
        index: int,
        tags: Iterable[str] | None = None,
    ) -> RouteState:
        return editor.insert_city(state, city_name, index, geo=self.geo, tags=tags)

    def remove_city(self, state: RouteState, index: int) -> RouteState:
        return editor.remove_city(state, index, geo=self.geo)

    def move_city(self, state: RouteState, from_index: int, to_index: int) -> RouteState:
        return editor.move_city(state, from_index, to_index, geo=self.geo)

    def park_city(self, state: RouteState, city_name: str) -> RouteState:
        return editor.park_city(state, city_name, geo=self.geo)

    def unpark_city(self, state: RouteState, city_name: str) -> RouteState:
        return editor.unpark_city(state, city_name, geo=self.geo)

    def optimize_route(self, state: RouteState) -> RouteState:
        return editor.optimize(
            state,
            geo=self.geo,
            strategy=self.seed_strategy,
            two_opt_iterations=self.two_opt_iterations,
        )

    def detect_inefficiency(self, state: RouteState) -> bool:
        return editor.detect_inefficiency(state, geo=self.geo, ratio=self.backtrack_ratio)

    def find_backtracks(self, state: RouteState) -> list[tuple[int, str, str, str]]:
        return editor.find_backtracks(state, geo=self.geo, ratio=self.backtrack_ratio)

    def estimate_segments(self, state: RouteState, include_home_legs: bool = False) -> list[TransportSegment]:
        return self.estimator.estimate_segments(state, include_home_legs=include_home_legs)

    def set_preferences(self, state: RouteState, preferences: RoutePreferences) -> RouteState:
        return editor.set_preferences(state, preferences)

    def distance_km(self, city_a: str, city_b: str) -> float | None:
        return self.geo.distance_km(city_a, city_b)
