"""Route planning helpers: distances, city names, nearby airports and rankings."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .airports import Airports
from .network import FlightNetwork, Route

EARTH_RADIUS_KM = 6371.0

# Radius of the first search for airports around a point, and its growth step.
INITIAL_RADIUS_KM = 25.0
RADIUS_STEP_KM = 10.0


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres between two points (haversine)."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = math.sin(d_lat / 2) ** 2 + math.sin(d_lon / 2) ** 2 * math.cos(
        math.radians(lat1)
    ) * math.cos(math.radians(lat2))
    return EARTH_RADIUS_KM * 2 * math.asin(math.sqrt(a))


def is_in_distance(lat1: float, lon1: float, lat2: float, lon2: float, km: float) -> bool:
    """Whether the two points are at most ``km`` kilometres apart."""
    return distance_km(lat1, lon1, lat2, lon2) <= km


def normalize_city(name: str) -> str:
    """Capitalise the first letter of every word and lower-case the rest."""
    chars = []
    previous = " "
    for char in name:
        chars.append(char.upper() if previous == " " else char.lower())
        previous = char
    return "".join(chars)


def airports_near(airports: Airports, lat: float, lon: float) -> tuple[list[str], float]:
    """Airports closest to a point, found by widening the search radius.

    Starts at 25 km and grows by 10 km until some airport lies within the
    radius. Returns the codes found and the radius that found them.
    Raises ValueError when there are no airports at all.
    """
    if len(airports) == 0:
        raise ValueError("no airports to search")
    radius = INITIAL_RADIUS_KM
    while True:
        found = [
            airport.code
            for airport in airports
            if is_in_distance(lat, lon, airport.latitude, airport.longitude, radius)
        ]
        if found:
            return found, radius
        radius += RADIUS_STEP_KM


def airports_of_country(airports: Airports, codes: Iterable[str], country: str) -> list[str]:
    """The codes, in their order, of airports located in ``country``."""
    return [code for code in codes if airports[code].country == country]


def best_routes(
    network: FlightNetwork,
    sources: Iterable[str],
    targets: Iterable[str],
    airlines: Iterable[str] | None = None,
) -> list[Route]:
    """Routes with the fewest flights between any source and any target.

    Routes of equal length from different pairs are all kept, in the order
    the pairs are tried.
    """
    allowed = set(airlines or ())
    targets = list(targets)
    result: list[Route] = []
    for source in sources:
        for target in targets:
            found = network.shortest_routes(source, target, allowed)
            if not result:
                result = list(found)
            elif found:
                if len(result[0]) == len(found[0]):
                    result.extend(found)
                elif len(result[0]) > len(found[0]):
                    result = list(found)
    return result


def top_airports(network: FlightNetwork, n: int = 10) -> list[tuple[str, int]]:
    """The ``n`` airports with most departing flights, busiest first."""
    counts = [
        (airport.code, network.flights_from(airport.code)) for airport in network.airports
    ]
    return sorted(counts, key=lambda item: -item[1])[:n]


def top_countries(network: FlightNetwork, n: int = 10) -> list[tuple[str, int]]:
    """The ``n`` countries with most departing flights, busiest first."""
    counts = [
        (country, network.flights_from_country(country))
        for country in network.airports.countries()
    ]
    return sorted(counts, key=lambda item: -item[1])[:n]