import pytest

from trip_router.services.geospatial import distance_between, haversine_km

KYOTO = (35.0116, 135.7681)
OSAKA = (34.6937, 135.5023)
TOKYO = (35.6762, 139.6503)


def test_haversine_zero_for_same_point():
    assert haversine_km(*KYOTO, *KYOTO) == pytest.approx(0.0)


def test_haversine_is_symmetric():
    assert haversine_km(*KYOTO, *TOKYO) == pytest.approx(haversine_km(*TOKYO, *KYOTO))


def test_haversine_known_distances():
    assert haversine_km(*KYOTO, *OSAKA) == pytest.approx(43, abs=2)
    assert haversine_km(*KYOTO, *TOKYO) == pytest.approx(364, abs=10)


def test_distance_between_missing_point_is_none():
    assert distance_between(KYOTO, None) is None
    assert distance_between(None, None) is None
    assert distance_between(KYOTO, OSAKA) == pytest.approx(haversine_km(*KYOTO, *OSAKA))
