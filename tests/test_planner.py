import math

import pytest

from aedsuite.airports import Airport, Airports
from aedsuite.network import FlightNetwork
from aedsuite.planner import (
    airports_near,
    airports_of_country,
    best_routes,
    distance_km,
    is_in_distance,
    normalize_city,
    top_airports,
    top_countries,
)


def _airports():
    return Airports(
        [
            Airport("AAA", "Alpha", "Porto", "Portugal", 0.0, 0.0),
            Airport("BBB", "Beta", "Porto", "Portugal", 0.0, 0.1),
            Airport("CCC", "Gamma", "Madrid", "Spain", 10.0, 10.0),
            Airport("DDD", "Delta", "Paris", "France", 20.0, 20.0),
            Airport("EEE", "Epsilon", "Porto", "Brazil", 30.0, 30.0),
        ]
    )


def _network():
    network = FlightNetwork(_airports())
    network.add_flight("AAA", "BBB", "X")
    network.add_flight("BBB", "DDD", "X")
    network.add_flight("AAA", "CCC", "Y")
    network.add_flight("CCC", "DDD", "Y")
    network.add_flight("EEE", "DDD", "Z")
    return network


def test_distance_same_point_is_zero():
    assert distance_km(41.1, -8.6, 41.1, -8.6) == 0.0


def test_distance_half_circumference():
    assert distance_km(0, 0, 0, 180) == pytest.approx(math.pi * 6371)


def test_distance_is_symmetric():
    assert distance_km(10, 20, -30, 40) == pytest.approx(distance_km(-30, 40, 10, 20))


def test_is_in_distance_matches_distance():
    d = distance_km(0, 0, 1, 1)
    assert is_in_distance(0, 0, 1, 1, d + 1)
    assert not is_in_distance(0, 0, 1, 1, d - 1)


def test_normalize_city():
    assert normalize_city("new york") == "New York"
    assert normalize_city("rIO DE jANEIRO") == "Rio De Janeiro"
    assert normalize_city("") == ""


def test_normalize_city_is_idempotent():
    once = normalize_city("sAo pAULO")
    assert normalize_city(once) == once


def test_airports_near_first_radius():
    codes, radius = airports_near(_airports(), 0.0, 0.0)
    assert codes == ["AAA", "BBB"]
    assert radius == 25.0


def test_airports_near_widens_radius():
    airports = _airports()
    codes, radius = airports_near(airports, 0.0, 1.0)
    assert radius > 25.0
    assert codes
    for code in codes:
        airport = airports[code]
        assert distance_km(0.0, 1.0, airport.latitude, airport.longitude) <= radius
    for airport in airports:
        assert distance_km(0.0, 1.0, airport.latitude, airport.longitude) > radius - 10


def test_airports_near_empty_raises():
    with pytest.raises(ValueError):
        airports_near(Airports([]), 0.0, 0.0)


def test_airports_of_country():
    airports = _airports()
    codes = airports.in_city("Porto")
    assert airports_of_country(airports, codes, "Portugal") == ["AAA", "BBB"]
    assert airports_of_country(airports, codes, "Brazil") == ["EEE"]
    assert airports_of_country(airports, codes, "Spain") == []


def test_best_routes_single_pair():
    routes = best_routes(_network(), ["AAA"], ["DDD"])
    assert len(routes) == 2
    assert all(route[0] == ("AAA", route[0][1]) and route[-1] == ("DDD", "") for route in routes)
    assert {route[1][0] for route in routes} == {"BBB", "CCC"}


def test_best_routes_keeps_shortest_over_pairs():
    expected = [(("EEE", "Z"), ("DDD", ""))]
    assert best_routes(_network(), ["AAA", "EEE"], ["DDD"]) == expected
    assert best_routes(_network(), ["EEE", "AAA"], ["DDD"]) == expected


def test_best_routes_with_airlines():
    routes = best_routes(_network(), ["AAA"], ["DDD"], ["X"])
    assert routes == [(("AAA", "X"), ("BBB", "X"), ("DDD", ""))]


def test_best_routes_none():
    assert best_routes(_network(), ["DDD"], ["AAA"]) == []


def test_top_airports():
    network = _network()
    top = top_airports(network, 2)
    assert top[0] == ("AAA", 2)
    assert len(top) == 2
    full = top_airports(network)
    counts = [count for _, count in full]
    assert counts == sorted(counts, reverse=True)
    assert sum(counts) == network.flight_count()


def test_top_countries():
    network = _network()
    top = top_countries(network)
    assert top[0] == ("Portugal", 3)
    assert {country for country, _ in top} == set(network.airports.countries())
    assert sum(count for _, count in top) == network.flight_count()
    assert len(top_countries(network, 1)) == 1