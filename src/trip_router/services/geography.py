"""City coordinate registry and country classifier."""

from __future__ import annotations

from typing import Iterable, Optional

from ..data.reference_repository import ReferenceData, load_reference_data
from ..models.domain import UNKNOWN_COUNTRY, City
from .geospatial import distance_between


def _normalize_city_name(name: str) -> str:
    return " ".join(name.split()).casefold()


class GeoRegistry:
    """Static lookups over the injected reference tables. Missing data yields ``None`` or ``"Unknown"``."""

    def __init__(self, reference: ReferenceData | None = None) -> None:
        self.reference = reference or load_reference_data()
        self._coordinates = {
            _normalize_city_name(city): coords for city, coords in self.reference.coordinates.items()
        }
        self._countries = {
            _normalize_city_name(city): country for city, country in self.reference.city_countries.items()
        }
        known = [*self.reference.destination_countries, *self.reference.city_countries.values()]
        for ranks in self.reference.country_ranks.values():
            known.extend(ranks)
        self._known_countries = {country.casefold(): country for country in known}

    def coordinates_of(self, city: str) -> Optional[tuple[float, float]]:
        if not city:
            return None
        return self._coordinates.get(_normalize_city_name(city))

    def country_of(self, city: str, tags: Iterable[str] = ()) -> str:
        """Return the city's country, falling back to a matching tag and finally ``"Unknown"``."""
        if city:
            country = self._countries.get(_normalize_city_name(city))
            if country:
                return country
        for tag in tags:
            match = self._known_countries.get(tag.strip().casefold())
            if match:
                return match
        return UNKNOWN_COUNTRY

    def city(self, name: str, tags: Iterable[str] = ()) -> City:
        return City(name=name, country=self.country_of(name, tags), coordinates=self.coordinates_of(name))

    def distance_km(self, city_a: str, city_b: str) -> Optional[float]:
        return distance_between(self.coordinates_of(city_a), self.coordinates_of(city_b))

    def has_coordinates(self, city: str) -> bool:
        return self.coordinates_of(city) is not None
