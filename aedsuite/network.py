"""The directed flight graph between airports and searches over it."""

from __future__ import annotations

import os
from collections import deque
from collections.abc import Iterable

from .airports import Airports

Route = tuple[tuple[str, str], ...]


class FlightNetwork:
    """Flights between known airports, each served by one airline."""

    def __init__(self, airports: Airports) -> None:
        self.airports = airports
        self._order: dict[str, int] = {
            airport.code: index for index, airport in enumerate(airports)
        }
        self._adj: dict[str, list[tuple[str, str]]] = {code: [] for code in self._order}
        self._airlines_to: dict[str, dict[str, list[str]]] = {
            code: {} for code in self._order
        }

    def _known(self, code: str) -> str:
        if code not in self._adj:
            raise KeyError(code)
        return code

    def _sorted_codes(self, codes: Iterable[str]) -> list[str]:
        return sorted(set(codes), key=self._order.__getitem__)

    def add_flight(self, source: str, target: str, airline: str) -> None:
        """Add a flight from ``source`` to ``target`` run by ``airline``."""
        self._known(source)
        self._known(target)
        self._adj[source].append((target, airline))
        self._airlines_to[source].setdefault(target, []).append(airline)

    def _distances(self, source: str, allowed: set[str]) -> dict[str, int]:
        distance = {source: 0}
        queue = deque([source])
        while queue:
            current = queue.popleft()
            for target, airlines in self._airlines_to[current].items():
                if target in distance:
                    continue
                if not allowed or any(airline in allowed for airline in airlines):
                    distance[target] = distance[current] + 1
                    queue.append(target)
        return distance

    def shortest_routes(
        self, source: str, target: str, airlines: Iterable[str] | None = None
    ) -> list[Route]:
        """Every route with the fewest flights from ``source`` to ``target``.

        A route is a tuple of (airport, airline taken from it) pairs; the last
        airport carries an empty airline. Only ``airlines`` are used when given.
        """
        self._known(source)
        self._known(target)
        allowed = set(airlines or ())
        distance = self._distances(source, allowed)
        if target not in distance:
            return []
        limit = distance[target]
        found: set[Route] = set()
        path: list[tuple[str, str]] = []

        def walk(current: str) -> None:
            path.append((current, ""))
            for nxt, served_by in self._airlines_to[current].items():
                for airline in served_by:
                    if allowed and airline not in allowed:
                        continue
                    depth = distance.get(nxt)
                    if depth is not None and depth < limit and depth - 1 == distance[current]:
                        path[-1] = (current, airline)
                        walk(nxt)
                    elif nxt == target:
                        path[-1] = (current, airline)
                        found.add(tuple(path) + ((target, ""),))
            path.pop()

        walk(source)
        return sorted(
            found,
            key=lambda route: [(self._order[code], airline) for code, airline in route],
        )

    def flight_count(self) -> int:
        """Total number of flights."""
        return sum(len(flights) for flights in self._adj.values())

    def flights_from(self, airport: str) -> int:
        """Number of flights leaving the airport."""
        return len(self._adj[self._known(airport)])

    def flights_from_country(self, country: str) -> int:
        """Number of flights leaving airports of the country."""
        return sum(self.flights_from(code) for code in self.airports.in_country(country))

    def flights_by_airline(self, airport: str, airline: str) -> int:
        """Number of flights leaving the airport run by the airline."""
        return sum(1 for _, by in self._adj[self._known(airport)] if by == airline)

    def destination_countries(self, airport: str) -> list[str]:
        """Sorted countries reached by a direct flight from the airport."""
        return sorted(
            {self.airports[target].country for target, _ in self._adj[self._known(airport)]}
        )

    def unique_destinations(self, airport: str) -> list[str]:
        """Distinct airports reached by a direct flight, in airport order."""
        return self._sorted_codes(target for target, _ in self._adj[self._known(airport)])

    def reachable(self, airport: str, max_flights: int) -> list[str]:
        """Airports reachable with at most ``max_flights`` flights, in airport order.

        The starting airport itself is not included.
        """
        distance = self._distances(self._known(airport), set())
        return self._sorted_codes(
            code for code, depth in distance.items() if code != airport and depth <= max_flights
        )


def read_flights(path: str | os.PathLike, airports: Airports) -> FlightNetwork:
    """Read flights (Source,Target,Airline) into a network over ``airports``."""
    network = FlightNetwork(airports)
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            line = line.rstrip("\r\n")
            if not line:
                break
            source, target, airline, *_ = line.split(",")
            if source == "Source":
                continue
            network.add_flight(source, target, airline)
    return network