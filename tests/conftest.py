import pytest

from trip_router.data.reference_repository import ReferenceData, builtin_reference_data
from trip_router.services.geography import GeoRegistry
from trip_router.services.routing.service import RoutePlanner


@pytest.fixture
def reference() -> ReferenceData:
    return builtin_reference_data()


@pytest.fixture
def geo(reference: ReferenceData) -> GeoRegistry:
    return GeoRegistry(reference)


@pytest.fixture
def planner(reference: ReferenceData) -> RoutePlanner:
    return RoutePlanner(reference, seed_strategy="best_start", two_opt_iterations=100, backtrack_ratio=0.5)
