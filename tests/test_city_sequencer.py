from trip_router.services.geography import GeoRegistry
from trip_router.services.routing.city_sequencer import (
    improve_two_opt,
    nearest_neighbor,
    sequence_cities,
    tour_length,
)

POSITIONS = {"A": 0.0, "B": 2.0, "C": 1.0, "D": 3.0}


def _line_distance(a: str, b: str):
    if a not in POSITIONS or b not in POSITIONS:
        return None
    return abs(POSITIONS[a] - POSITIONS[b])


def _located(city: str) -> bool:
    return city in POSITIONS


def test_nearest_neighbor_follows_closest_city():
    assert nearest_neighbor(["A", "B", "C", "D"], _line_distance) == ["A", "C", "B", "D"]


def test_nearest_neighbor_ties_prefer_earlier_input():
    distances = {frozenset(("X", "Y")): 1.0, frozenset(("X", "Z")): 1.0, frozenset(("Y", "Z")): 2.0}

    def distance(a, b):
        return distances[frozenset((a, b))]

    assert nearest_neighbor(["X", "Z", "Y"], distance) == ["X", "Z", "Y"]


def test_two_opt_shortens_path_and_keeps_start():
    improved = improve_two_opt(["A", "B", "C", "D"], _line_distance)

    assert improved == ["A", "C", "B", "D"]
    assert tour_length(improved, _line_distance) < tour_length(["A", "B", "C", "D"], _line_distance)


def test_two_opt_disabled_with_zero_iterations():
    assert improve_two_opt(["A", "B", "C", "D"], _line_distance, max_iterations=0) == ["A", "B", "C", "D"]


def test_unlocated_cities_follow_in_input_order():
    ordered = sequence_cities(["Q", "B", "P", "A"], _line_distance, _located, strategy="first")

    assert ordered[:2] == ["B", "A"]
    assert ordered[2:] == ["Q", "P"]


def test_repeated_city_occurrences_are_kept():
    ordered = sequence_cities(["A", "D", "A"], _line_distance, _located, strategy="first")

    assert sorted(ordered) == ["A", "A", "D"]
    assert ordered[:2] == ["A", "D"]


def test_best_start_picks_shortest_tour(geo: GeoRegistry):
    ordered = sequence_cities(
        ["Bangkok", "Chiang Mai", "Phuket"],
        geo.distance_km,
        geo.has_coordinates,
        strategy="best_start",
    )

    assert ordered[1] == "Bangkok"
    assert set(ordered) == {"Bangkok", "Chiang Mai", "Phuket"}


def test_first_strategy_starts_from_first_city(geo: GeoRegistry):
    ordered = sequence_cities(
        ["Bangkok", "Chiang Mai", "Phuket"],
        geo.distance_km,
        geo.has_coordinates,
        strategy="first",
    )

    assert ordered[0] == "Bangkok"


def test_hub_first_starts_from_hub(geo: GeoRegistry):
    ordered = sequence_cities(
        ["Kyoto", "Osaka", "Tokyo"],
        geo.distance_km,
        geo.has_coordinates,
        strategy="hub_first",
        hub="Tokyo",
    )

    assert ordered[0] == "Tokyo"
    assert ordered[-1] == "Osaka"


def test_stopover_never_follows_its_own_city(geo: GeoRegistry):
    ordered = sequence_cities(
        ["Chiang Mai", "Phuket", "Bangkok", "Phuket"],
        geo.distance_km,
        geo.has_coordinates,
        strategy="best_start",
    )

    assert sorted(ordered) == ["Bangkok", "Chiang Mai", "Phuket", "Phuket"]
    assert all(a != b for a, b in zip(ordered, ordered[1:]))


def test_stopover_of_only_city_is_appended():
    assert sequence_cities(["A", "A"], _line_distance, _located) == ["A", "A"]
