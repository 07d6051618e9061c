"""Airports and their lookup by code, city and country."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Airport:
    """An airport with its location."""

    code: str
    name: str
    city: str
    country: str
    latitude: float
    longitude: float


class Airports:
    """A collection of airports indexed by code, city and country."""

    def __init__(self, airports: Iterable[Airport]) -> None:
        self._by_code: dict[str, Airport] = {}
        self._by_city: dict[str, list[str]] = {}
        self._by_country: dict[str, list[str]] = {}
        for airport in airports:
            self._by_code[airport.code] = airport
            self._by_city.setdefault(airport.city, []).append(airport.code)
            self._by_country.setdefault(airport.country, []).append(airport.code)

    def countries(self) -> list[str]:
        """Every country with an airport, sorted."""
        return sorted({airport.country for airport in self})

    def in_city(self, city: str) -> list[str]:
        """Codes of the airports in a city, in reading order."""
        return list(self._by_city.get(city, []))

    def in_country(self, country: str) -> list[str]:
        """Codes of the airports in a country, in reading order."""
        return list(self._by_country.get(country, []))

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __getitem__(self, code: str) -> Airport:
        return self._by_code[code]

    def __iter__(self) -> Iterator[Airport]:
        return iter(self._by_code.values())

    def __len__(self) -> int:
        return len(self._by_code)


def read_airports(path: str | os.PathLike) -> Airports:
    """Read airports (Code,Name,City,Country,Latitude,Longitude)."""
    airports = []
    with open(path, encoding="utf-8") as handle:
        for number, line in enumerate(handle):
            line = line.rstrip("\r\n")
            if not line:
                break
            if number == 0:
                continue
            code, name, city, country, latitude, longitude, *_ = line.split(",")
            airports.append(Airport(code, name, city, country, float(latitude), float(longitude)))
    return Airports(airports)