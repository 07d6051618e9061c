"""Airlines and the countries they belong to."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Mapping


class Airlines:
    """Known airline codes and airline names grouped by country."""

    def __init__(
        self,
        codes: Iterable[str] = (),
        by_country: Mapping[str, Iterable[str]] | None = None,
    ) -> None:
        self._codes: set[str] = set(codes)
        self._by_country: dict[str, list[str]] = {
            country: list(names) for country, names in (by_country or {}).items()
        }

    def __contains__(self, code: object) -> bool:
        return code in self._codes

    def __len__(self) -> int:
        return len(self._codes)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._codes))

    def in_country(self, country: str) -> list[str]:
        """Names of the airlines of a country, in reading order."""
        return list(self._by_country.get(country, []))


def read_airlines(path: str | os.PathLike) -> Airlines:
    """Read airlines (Code,Name,Callsign,Country), stopping at an empty line."""
    codes: set[str] = set()
    by_country: dict[str, list[str]] = {}
    with open(path, encoding="utf-8") as handle:
        for number, line in enumerate(handle):
            line = line.rstrip("\r\n")
            if not line:
                break
            if number == 0:
                continue
            code, name, _callsign, country, *_ = line.split(",")
            codes.add(code)
            by_country.setdefault(country, []).append(name)
    return Airlines(codes, by_country)