from dataclasses import replace

import pytest

from trip_router.models.domain import RouteEntry, RoutePreferences, RouteState, TransportOption
from trip_router.services.geography import GeoRegistry
from trip_router.services.transport.catalog import (
    TransportCatalog,
    parse_hubs_from_notes,
    parse_price_range,
    parse_stop_count,
)
from trip_router.services.transport.estimator import (
    DistanceThresholds,
    TransportEstimator,
    estimate_options,
    format_duration,
    rank_options,
)


@pytest.fixture
def estimator(geo: GeoRegistry) -> TransportEstimator:
    return TransportEstimator(geo)


@pytest.fixture
def uncatalogued(reference) -> TransportEstimator:
    return TransportEstimator(GeoRegistry(replace(reference, route_transport={})))


def _badges(options):
    return [option.badge for option in options if option.badge != "none"]


def test_catalog_pair_uses_curated_flight(estimator: TransportEstimator):
    segment = estimator.estimate("Bangkok", "Chiang Mai")

    assert segment.source == "catalog"
    assert segment.mode == "flight"
    assert segment.duration_estimate == 75
    assert segment.stop_count == 0
    assert segment.hub_options == []
    assert segment.badge == "best"
    assert {option.mode for option in segment.options} == {"flight", "train", "bus"}


def test_catalog_lookup_falls_back_to_reverse_pair(estimator: TransportEstimator):
    segment = estimator.estimate("Chiang Mai", "Bangkok")

    assert segment.source == "catalog"
    assert segment.duration_estimate == 75


def test_at_most_one_badge_of_each_kind(estimator: TransportEstimator):
    segment = estimator.estimate("Bangkok", "Chiang Mai")
    badges = _badges(segment.options)

    assert badges.count("best") == 1
    assert badges.count("fastest") <= 1
    assert badges.count("cheapest") <= 1
    assert "cheapest" in badges


def test_long_uncatalogued_leg_is_a_flight_without_exact_duration(estimator: TransportEstimator):
    segment = estimator.estimate("Sapa", "Ho Chi Minh City")

    assert segment.source == "estimate"
    assert segment.mode == "flight"
    assert segment.duration_estimate is None
    assert segment.distance_km > 1000
    assert segment.duration_label.endswith("h")


def test_short_uncatalogued_leg_is_ground_transport(uncatalogued: TransportEstimator):
    segment = uncatalogued.estimate("Kyoto", "Osaka")

    assert segment.source == "estimate"
    assert segment.mode in {"car", "bus"}
    assert segment.duration_estimate is not None
    assert not segment.cross_country


def test_cross_country_leg_is_always_a_flight(uncatalogued: TransportEstimator):
    segment = uncatalogued.estimate("Vancouver", "Seattle")

    assert segment.cross_country
    assert segment.mode == "flight"


def test_missing_coordinates_give_unknown_segment(estimator: TransportEstimator):
    segment = estimator.estimate("Atlantis", "Bangkok")

    assert segment.mode == "unknown"
    assert segment.distance_km is None
    assert segment.duration_estimate is None
    assert segment.source == "unknown"


def test_long_haul_with_stops_lists_hubs_and_violations(estimator: TransportEstimator):
    preferences = RoutePreferences(max_stops_per_flight=1, max_flights_per_day=2, max_flight_hours=12)

    segment = estimator.estimate("Kelowna", "Bangkok", preferences)

    assert segment.stop_count == 2
    assert segment.cross_country
    assert "Vancouver" in segment.hub_options
    assert set(segment.violations) == {"max_stops_per_flight", "max_flights_per_day", "max_flight_hours"}


def test_default_preferences_report_no_violations(estimator: TransportEstimator):
    assert estimator.estimate("Kelowna", "Bangkok").violations == []


def test_hub_table_lists_connection_points(estimator: TransportEstimator):
    segment = estimator.estimate("Kelowna", "Maui")

    assert segment.stop_count == 1
    assert segment.hub_options == ["Vancouver"]


@pytest.mark.parametrize(
    ("distance", "cross_country", "modes"),
    [
        (50, False, ["car", "bus"]),
        (200, False, ["train", "bus"]),
        (400, False, ["train"]),
        (600, False, ["flight"]),
        (50, True, ["flight"]),
    ],
)
def test_distance_fallback_modes(distance, cross_country, modes):
    options = estimate_options(distance, cross_country, DistanceThresholds(100, 300, 500, 800))

    assert [option.mode for option in options] == modes


def test_flight_estimate_uses_bracket():
    (flight,) = estimate_options(1600, thresholds=DistanceThresholds(100, 300, 500, 800))

    assert flight.duration_minutes is None
    assert flight.duration_label == "3-5h"
    assert flight.duration_range == (180, 300)


def test_rank_options_prefers_weighted_score():
    slow_cheap = TransportOption(mode="bus", duration_minutes=600, duration_label="10h", price_low=10, price_high=20)
    fast_dear = TransportOption(mode="flight", duration_minutes=60, duration_label="1h", price_low=400, price_high=600)
    middle = TransportOption(mode="train", duration_minutes=240, duration_label="4h", price_low=30, price_high=50)

    ranked = rank_options([slow_cheap, fast_dear, middle])

    assert ranked[0] is middle
    assert middle.badge == "best"
    assert fast_dear.badge == "fastest"
    assert slow_cheap.badge == "cheapest"


def test_prefer_shortest_flights_picks_fastest_flight(geo: GeoRegistry, reference):
    route_transport = {
        "Hanoi": {
            "Da Nang": [
                {"mode": "flight", "duration": "3hr", "minutes": 180, "price": "$20-30", "notes": "1 stop via Hue"},
                {"mode": "flight", "duration": "1h 20min", "minutes": 80, "price": "$150-200"},
            ]
        }
    }
    estimator = TransportEstimator(geo, TransportCatalog(replace(reference, route_transport=route_transport)))

    default = estimator.estimate("Hanoi", "Da Nang")
    fastest = estimator.estimate("Hanoi", "Da Nang", RoutePreferences(prefer_shortest_flights=True))

    assert default.duration_estimate == 180
    assert default.hub_options == ["Hue"]
    assert fastest.duration_estimate == 80
    assert fastest.stop_count == 0


def test_estimate_segments_per_pair_and_home_legs(estimator: TransportEstimator):
    state = RouteState(
        order=[RouteEntry("a", "Tokyo"), RouteEntry("b", "Kyoto"), RouteEntry("c", "Bangkok")],
        origin="Kelowna",
    )

    segments = estimator.estimate_segments(state)
    with_home = estimator.estimate_segments(state, include_home_legs=True)

    assert [(s.from_city, s.to_city) for s in segments] == [("Tokyo", "Kyoto"), ("Kyoto", "Bangkok")]
    assert len(with_home) == 4
    assert with_home[0].from_city == "Kelowna"
    assert with_home[-1].to_city == "Kelowna"


def test_catalog_parsers():
    assert parse_price_range("$40-100") == (40.0, 100.0)
    assert parse_price_range("$1,200") == (1200.0, 1200.0)
    assert parse_price_range(None) == (None, None)
    assert parse_stop_count("2 stops via Vancouver + Bangkok") == 2
    assert parse_stop_count("Sleeper train") == 0
    assert parse_hubs_from_notes("2 stops via Vancouver + Bangkok") == ["Vancouver", "Bangkok"]
    assert parse_hubs_from_notes("2 stops via Vancouver + hub") == ["Vancouver"]


def test_format_duration():
    assert format_duration(45) == "45min"
    assert format_duration(120) == "2h"
    assert format_duration(135) == "2h 15min"


def test_thresholds_follow_current_settings(monkeypatch: pytest.MonkeyPatch):
    from trip_router.config import settings

    monkeypatch.setattr(settings, "car_max_km", 20.0)
    monkeypatch.setattr(settings, "bus_max_km", 30.0)

    thresholds = DistanceThresholds()

    assert thresholds.car_max_km == 20.0
    assert thresholds.bus_max_km == 30.0
    assert [option.mode for option in estimate_options(50, thresholds=thresholds)] == ["train"]
