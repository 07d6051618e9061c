"""Interactive text menu for planning flights and browsing flight statistics."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterator
from typing import TextIO

from .airlines import Airlines, read_airlines
from .airports import read_airports
from .network import FlightNetwork, Route, read_flights
from .planner import (
    airports_near,
    airports_of_country,
    best_routes,
    normalize_city,
    top_airports,
    top_countries,
)

_RULE = "=============================================================="

DEFAULT_DATA_DIR = os.path.join("..", "files_to_read")

_BAD_COUNTRY = (
    "Pais invalido. Certifique-se que escreve o pais com a primeira letra "
    "de cada palavra em maiuscula."
)


class _Quit(Exception):
    """Raised when the input runs out."""


class FlightsMenu:
    """Menu-driven route planning, airport information and statistics."""

    def __init__(
        self,
        network: FlightNetwork,
        airlines: Airlines,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.network = network
        self.airports = network.airports
        self.airlines = airlines
        self._stdin = stdin
        self._stdout = stdout
        self._lines: Iterator[str] | None = None
        self._pending: list[str] = []

    # -- input and output -------------------------------------------------

    def _say(self, *lines: str) -> None:
        out = self._stdout if self._stdout is not None else sys.stdout
        for line in lines:
            out.write(line + "\n")

    def _next_line(self) -> str:
        if self._lines is None:
            self._lines = iter(self._stdin if self._stdin is not None else sys.stdin)
        try:
            return next(self._lines)
        except StopIteration:
            raise _Quit from None

    def _token(self) -> str:
        while not self._pending:
            self._pending = self._next_line().split()
        return self._pending.pop(0)

    def _line(self) -> str:
        """A whole line of input, dropping what is left of the current one."""
        self._pending = []
        return self._next_line().strip()

    def _number(self) -> int | None:
        try:
            return int(self._token())
        except ValueError:
            return None

    def _float(self) -> float | None:
        try:
            return float(self._token())
        except ValueError:
            return None

    # -- flow -------------------------------------------------------------

    def run(self) -> None:
        """Show the main menu until the user leaves or the input ends."""
        try:
            while self._main_menu():
                pass
        except _Quit:
            pass

    def _done(self) -> bool:
        self._say(
            "Deseja fazer mais alguma coisa?",
            "",
            "1 -> Sim: Voltar ao menu principal",
            "Outro Numero- > Nao e sair",
        )
        return self._number() == 1

    def _main_menu(self) -> bool:
        self._say(
            _RULE,
            "",
            "Bem Vindo",
            "",
            "1 -> Ver qual o melhor trajeto para o percurso que vou realizar",
            "2 -> Ver informacoes sobre um aeroporto",
            "3 -> Ver estatisticas",
            "outro num -> Sair",
        )
        choice = self._number()
        self._say("")
        if choice == 1:
            return self._best_route()
        if choice == 2:
            outcome = self._airport_information()
            if outcome is not None:
                return outcome
            return self._statistics()
        if choice == 3:
            return self._statistics()
        return False

    # -- route planning ---------------------------------------------------

    def _ask_airlines(self) -> set[str]:
        self._say(
            _RULE,
            "",
            "Deseja por alguma restricao nas linhas aereas possiveis de usar?",
            "1-> Sim. Pretendo usar apenas uma/algumas companhias aereas",
            "2-> Nao. Posso usar qualquer companhia aerea",
        )
        choice = self._number()
        self._say("")
        allowed: set[str] = set()
        if choice != 1:
            return allowed
        while True:
            self._say(
                "Digite o codigo da companhia aerea (pressione 1 caso ja tenha "
                "escrito todas as companhias aereas que quer usar)"
            )
            code = self._token()
            if code == "1":
                return allowed
            code = code.upper()
            if code in self.airlines:
                allowed.add(code)
            else:
                self._say("Essa companhia aerea nao existe")

    def _ask_airport(self, departure: bool) -> str:
        which = "origem" if departure else "chegada"
        self._say(f"Qual o seu aeroporto de {which}? (Digite a sigla)")
        code = self._token().upper()
        while code not in self.airports:
            self._say("Aeroporto invalido, digite novamente a sigla do aeroporto")
            code = self._token().upper()
        return code

    def _ask_city(self, departure: bool) -> list[str]:
        which = "partida" if departure else "chegada"
        self._say(f"Qual a sua cidade de {which}?")
        city = normalize_city(self._line())
        while not self.airports.in_city(city):
            self._say("Cidade invalida, escreva novamente a cidade pretendida")
            city = normalize_city(self._line())
        codes = self.airports.in_city(city)
        countries = {self.airports[code].country for code in codes}
        if len(countries) > 1:
            self._say(
                "A nome da cidade que escolheu pertence a mais do que um pais.",
                "Por favor digite o pais a que pertence a cidade escolhida.",
            )
            country = self._line()
            while country not in countries:
                self._say(_BAD_COUNTRY)
                country = self._line()
            codes = airports_of_country(self.airports, codes, country)
        return codes

    def _ask_coordinate(self, prompt: str, error: str) -> float:
        self._say(prompt)
        value = self._float()
        while value is None or value < -180 or value > 180:
            self._say(error)
            value = self._float()
        return value

    def _ask_coordinates(self, departure: bool) -> tuple[list[str], float]:
        place = "seu ponto de partida" if departure else "seu destino"
        lon = self._ask_coordinate(
            f"Digite a longitude do {place}", "Longitude nao valida, escreva-a novamente"
        )
        lat = self._ask_coordinate(
            f"Digite a latitude do {place}", "Latitude nao valida, escreva-a novamente"
        )
        return airports_near(self.airports, lat, lon)

    def _endpoint(self, kind: int, departure: bool) -> tuple[list[str], float | None]:
        if kind == 1:
            return [self._ask_airport(departure)], None
        if kind == 2:
            return self._ask_city(departure), None
        return self._ask_coordinates(departure)

    def _best_route(self) -> bool:
        allowed = self._ask_airlines()
        self._say(
            _RULE,
            "",
            "Qual o seu ponto de partida?",
            "1-> De um aeroporto",
            "2-> De uma cidade",
            "3-> Das coordenadas onde me encontro",
        )
        origin = self._number()
        self._say(
            "",
            _RULE,
            "",
            "Qual o seu ponto de chegada?",
            "1-> Um aeroporto",
            "2-> Uma cidade",
            "3-> Um local, com umas certas coordenadas",
        )
        destination = self._number()
        self._say("")
        routes: list[Route] = []
        radius: float | None = None
        if origin in (1, 2, 3) and destination in (1, 2, 3):
            sources, _ = self._endpoint(origin, departure=True)
            targets, radius = self._endpoint(destination, departure=False)
            self._say("Carregando...")
            routes = best_routes(self.network, sources, targets, allowed)
        if not routes:
            self._say(
                "Nao foi possivel encontrar uma rota entre esses 2 pontos, "
                "com as restricoes que colocou"
            )
        else:
            self._show_routes(routes)
            if destination == 3 and radius is not None:
                self._say(
                    "",
                    "Se usar um destes voos, todos estes aeroportos de chegada "
                    f"ficarao a menos de {radius:g}kms das coordenadas pretendidas;",
                )
        return self._done()

    def _show_routes(self, routes: list[Route]) -> None:
        self._say(
            "Aqui esta(o) retratadada(s) a(s) melhor(es) forma(s) de chegar desde "
            "o seu local de partida ate ao seu destino:"
        )
        for number, route in enumerate(routes, 1):
            self._say(f"{number} forma:")
            parts = []
            last = len(route) - 1
            for index, (code, airline) in enumerate(route):
                airport = self.airports[code]
                text = f"{airport.name}, {airport.city}, {airport.country}"
                if index < last:
                    text += f", usando a companhia aerea {airline}-> "
                else:
                    text += ";"
                parts.append(text)
            self._say("".join(parts), "")

    # -- airport information ----------------------------------------------

    def _describe(self, code: str) -> str:
        airport = self.airports[code]
        return f"{airport.code} | {airport.name}, {airport.city}, {airport.country}"

    def _airport_information(self) -> bool | None:
        """Run the airport menu; None means the choice fell through to statistics."""
        self._say("Por favor digite a sigla do aeroporto.")
        code = self._token().upper()
        while code not in self.airports:
            self._say("Aeroporto invalido.")
            code = self._token().upper()
        self._say(
            _RULE,
            "",
            f"1 -> Ver quantos voos existem a partir de {code}.",
            f"2 -> Ver quantos voos, de cada companhia, existem a partir de {code}",
            f"3 -> Ver destinos possiveis a partir de {code}",
            f"4 -> Ver paises possiveis partindo de {code}",
            "5 -> Ver quantos e quais aeroportos, cidades ou paises sao atingiveis "
            "usando um maximo de Y voos?",
            "outro num -> Sair",
        )
        choice = self._number()
        self._say("")
        if choice == 1:
            self._say(f"Existem {self.network.flights_from(code)} voos a partir de {code}")
        elif choice == 2:
            self._say("airline   numero de voos")
            for airline in self.airlines:
                count = self.network.flights_by_airline(code, airline)
                if count:
                    self._say(f"{airline}   -->    {count}")
        elif choice == 3:
            targets = self.network.unique_destinations(code)
            self._say(f"Existem {len(targets)} destinos:", *map(self._describe, targets))
        elif choice == 4:
            countries = self.network.destination_countries(code)
            self._say(f"Existem {len(countries)} paises de destino:", *countries)
        elif choice == 5:
            self._reachable(code)
        else:
            return None
        return self._done()

    def _reachable(self, code: str) -> None:
        self._say("Introduza o valor de y: ")
        limit = self._number()
        if limit is None:
            limit = 0
        self._say(
            _RULE,
            "",
            f"1 -> Ver quantos aeroportos sao atingiveis usando um maximo de {limit} voos?",
            f"2 -> Ver quantas cidades sao atingiveis usando um maximo de {limit} voos?",
            f"3 -> Ver quantos paises sao atingiveis usando um maximo de {limit} voos?",
            "outro num -> Sair",
        )
        choice = self._number()
        reached = self.network.reachable(code, limit)
        if choice == 1:
            self._say(
                f"Sao atingiveis {len(reached)} aeroportos a partir de {code}",
                *map(self._describe, reached),
            )
        elif choice == 2:
            cities = sorted({self.airports[c].city for c in reached})
            self._say(f"Sao atingiveis {len(cities)} cidades a partir de {code}", *cities)
        elif choice == 3:
            countries = sorted({self.airports[c].country for c in reached})
            self._say(
                f"Sao atingiveis {len(countries)} paises a partir de {code}", *countries
            )

    # -- statistics -------------------------------------------------------

    def _statistics(self) -> bool:
        self._say(
            _RULE,
            "",
            "1 -> Ver estatisticas globais",
            "2 -> Ver estatisticas de um pais",
            "outro num -> Sair",
        )
        choice = self._number()
        self._say("")
        if choice == 1:
            return self._global_statistics()
        if choice == 2:
            return self._country_statistics()
        return False

    def _global_statistics(self) -> bool:
        self._say(
            _RULE,
            "",
            "1 -> numero de aeroportos",
            "2 -> numero de voos",
            "3 -> numero de companhias",
            "4 -> top 10 aeroportos com mais voos",
            "outro num -> Sair",
        )
        choice = self._number()
        if choice == 1:
            self._say(f"Existem {len(self.airports)} aeroportos a nivel mundial.", "")
        elif choice == 2:
            self._say(f"Existem {self.network.flight_count()} voos a nivel mundial", "")
        elif choice == 3:
            self._say(f"Existem {len(self.airlines)} companhias", "")
        elif choice == 4:
            self._say("Os 10 aeroportos com mais voos sao:")
            for rank, (code, _) in enumerate(top_airports(self.network, 10), 1):
                airport = self.airports[code]
                self._say(f"{rank}. {airport.name}, {airport.city}, {airport.country}", "")
            self._say("")
        else:
            return False
        return self._done()

    def _country_statistics(self) -> bool:
        self._say("Por favor digite o nome do pais.")
        country = self._token()
        countries = set(self.airports.countries())
        while country not in countries:
            self._say(_BAD_COUNTRY)
            country = self._line()
        self._say(
            _RULE,
            "",
            "1 -> numero de aeroportos",
            "2 -> numero de voos",
            "3 -> numero de companhias",
            "4 -> top 10 paises com mais voos",
            "outro num -> Sair",
        )
        choice = self._number()
        if choice == 1:
            self._say(f"Existem {len(self.airports.in_country(country))} aeroportos.")
        elif choice == 2:
            self._say(f"Existem {self.network.flights_from_country(country)} voos.", "")
        elif choice == 3:
            self._say(f"Existem {len(self.airlines.in_country(country))} companhias.", "")
        elif choice == 4:
            self._say("Os 10 paises com mais voos sao:")
            for rank, (name, _) in enumerate(top_countries(self.network, 10), 1):
                self._say(f"{rank}. {name}")
            self._say("")
        else:
            return False
        return self._done()


def main(argv: list[str] | None = None) -> int:
    """Load the airport, airline and flight files and run the interactive menu."""
    parser = argparse.ArgumentParser(description="Flight route planner and statistics.")
    parser.add_argument(
        "data_dir",
        nargs="?",
        default=DEFAULT_DATA_DIR,
        help="directory holding airports.csv, airlines.csv and flights.csv",
    )
    args = parser.parse_args(argv)
    airports = read_airports(os.path.join(args.data_dir, "airports.csv"))
    airlines = read_airlines(os.path.join(args.data_dir, "airlines.csv"))
    network = read_flights(os.path.join(args.data_dir, "flights.csv"), airports)
    FlightsMenu(network, airlines).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())