"""Orders the countries of a trip by a fixed distance-from-home rank."""

from __future__ import annotations

from typing import Iterable, Sequence

from ...config import settings
from ...data.reference_repository import ReferenceData

DEFAULT_HOME_COUNTRY = "Canada"


def rank_table_for(reference: ReferenceData, home_country: str | None) -> dict[str, int]:
    """Rank table for the traveler's home country, or the default home's table when none exists."""
    if home_country and home_country in reference.country_ranks:
        return reference.country_ranks[home_country]
    return reference.country_ranks.get(DEFAULT_HOME_COUNTRY, {})


def sequence_countries(
    countries: Iterable[str],
    ranks: dict[str, int],
    unknown_rank: int | None = None,
) -> list[str]:
    """Sort distinct countries by rank; unranked countries go last and ties keep first-seen order."""
    default_rank = settings.unknown_country_rank if unknown_rank is None else unknown_rank
    distinct = list(dict.fromkeys(countries))
    positions = {country: idx for idx, country in enumerate(distinct)}
    return sorted(distinct, key=lambda country: (ranks.get(country, default_rank), positions[country]))


def is_permutation(candidate: Sequence[str], current: Sequence[str]) -> bool:
    return len(candidate) == len(current) and len(set(candidate)) == len(candidate) and set(candidate) == set(current)
