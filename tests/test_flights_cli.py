import io
import sys

import pytest

from aedsuite.airlines import Airlines
from aedsuite.airports import Airport, Airports
from aedsuite.flights_cli import FlightsMenu, main
from aedsuite.network import FlightNetwork

AIRPORTS = [
    Airport("OPO", "Sa Carneiro", "Porto", "Portugal", 41.24, -8.68),
    Airport("LIS", "Humberto Delgado", "Lisbon", "Portugal", 38.78, -9.14),
    Airport("MAD", "Barajas", "Madrid", "Spain", 40.47, -3.56),
    Airport("VLC", "Manises", "Valencia", "Spain", 39.49, -0.48),
    Airport("VLN", "Arturo Michelena", "Valencia", "Venezuela", 10.15, -67.93),
]

FLIGHTS = [
    ("OPO", "LIS", "TAP"),
    ("LIS", "MAD", "TAP"),
    ("OPO", "MAD", "RYR"),
    ("MAD", "VLC", "IBE"),
    ("MAD", "VLN", "IBE"),
]


def _network() -> FlightNetwork:
    network = FlightNetwork(Airports(AIRPORTS))
    for source, target, airline in FLIGHTS:
        network.add_flight(source, target, airline)
    return network


def _airlines() -> Airlines:
    return Airlines(
        ["TAP", "RYR", "IBE"],
        {"Portugal": ["Air Portugal"], "Ireland": ["Ryanair"], "Spain": ["Iberia"]},
    )


def _run(text: str, network: FlightNetwork | None = None) -> str:
    out = io.StringIO()
    FlightsMenu(network or _network(), _airlines(), io.StringIO(text), out).run()
    return out.getvalue()


def _leg(code: str) -> str:
    airport = next(a for a in AIRPORTS if a.code == code)
    return f"{airport.name}, {airport.city}, {airport.country}"


def test_direct_route_between_airports():
    output = _run("1\n2\n1\n1\nopo\nmad\n2\n")
    expected = f"{_leg('OPO')}, usando a companhia aerea RYR-> {_leg('MAD')};"
    assert "1 forma:" in output
    assert expected in output
    assert "2 forma:" not in output


def test_airline_restriction_forces_connection():
    output = _run("1\n1\ntap\nxyz\n1\n1\n1\nOPO\nMAD\n2\n")
    assert "Essa companhia aerea nao existe" in output
    expected = (
        f"{_leg('OPO')}, usando a companhia aerea TAP-> "
        f"{_leg('LIS')}, usando a companhia aerea TAP-> {_leg('MAD')};"
    )
    assert expected in output


def test_no_route_with_restriction():
    output = _run("1\n1\nIBE\n1\n1\n1\nOPO\nMAD\n2\n")
    assert (
        "Nao foi possivel encontrar uma rota entre esses 2 pontos, "
        "com as restricoes que colocou"
    ) in output


def test_invalid_airport_is_asked_again():
    output = _run("1\n2\n1\n1\nzzz\nopo\nmad\n2\n")
    assert "Aeroporto invalido, digite novamente a sigla do aeroporto" in output
    assert f"{_leg('OPO')}, usando a companhia aerea RYR-> {_leg('MAD')};" in output


def test_city_in_two_countries_asks_for_country():
    output = _run("1\n2\n1\n2\nOPO\nvalencia\nVenezuela\n2\n")
    assert "A nome da cidade que escolheu pertence a mais do que um pais." in output
    assert f"{_leg('VLN')};" in output
    assert f"{_leg('VLC')};" not in output


def test_unknown_city_is_asked_again():
    output = _run("1\n2\n2\n1\natlantis\nporto\nmad\n2\n")
    assert "Cidade invalida, escreva novamente a cidade pretendida" in output
    assert f"{_leg('OPO')}, usando a companhia aerea RYR-> {_leg('MAD')};" in output


def test_coordinates_destination_reports_radius():
    lis = AIRPORTS[1]
    text = f"1\n2\n1\n3\nOPO\n200\n{lis.longitude}\n{lis.latitude}\n2\n"
    output = _run(text)
    assert "Longitude nao valida, escreva-a novamente" in output
    assert f"{_leg('OPO')}, usando a companhia aerea TAP-> {_leg('LIS')};" in output
    assert "a menos de 25kms das coordenadas pretendidas;" in output


def test_flights_from_airport():
    network = _network()
    output = _run("2\nopo\n1\n2\n", network)
    assert f"Existem {network.flights_from('OPO')} voos a partir de OPO" in output


def test_flights_per_airline():
    network = _network()
    output = _run("2\nOPO\n2\n2\n", network)
    assert f"RYR   -->    {network.flights_by_airline('OPO', 'RYR')}" in output
    assert f"TAP   -->    {network.flights_by_airline('OPO', 'TAP')}" in output
    assert "IBE   -->" not in output


def test_unknown_airport_in_information_menu():
    output = _run("2\nxxx\nopo\n1\n2\n")
    assert "Aeroporto invalido." in output
    assert "voos a partir de OPO" in output


def test_destinations_and_countries():
    network = _network()
    output = _run("2\nMAD\n3\n1\n2\nMAD\n4\n2\n", network)
    destinations = network.unique_destinations("MAD")
    assert f"Existem {len(destinations)} destinos:" in output
    assert "VLN | Arturo Michelena, Valencia, Venezuela" in output
    countries = network.destination_countries("MAD")
    assert f"Existem {len(countries)} paises de destino:" in output


def test_reachable_airports_and_countries():
    network = _network()
    output = _run("2\nOPO\n5\n1\n1\n1\n2\nOPO\n5\n2\n3\n2\n", network)
    within_one = network.reachable("OPO", 1)
    assert f"Sao atingiveis {len(within_one)} aeroportos a partir de OPO" in output
    countries = {network.airports[c].country for c in network.reachable("OPO", 2)}
    assert f"Sao atingiveis {len(countries)} paises a partir de OPO" in output
    assert "Venezuela" in output


def test_global_statistics():
    network = _network()
    output = _run("3\n1\n1\n1\n3\n1\n2\n1\n3\n1\n3\n2\n", network)
    assert f"Existem {len(network.airports)} aeroportos a nivel mundial." in output
    assert f"Existem {network.flight_count()} voos a nivel mundial" in output
    assert f"Existem {len(_airlines())} companhias" in output


def test_top_airports_lists_every_airport_when_fewer_than_ten():
    output = _run("3\n1\n4\n2\n")
    assert "Os 10 aeroportos com mais voos sao:" in output
    ranks = [line for line in output.splitlines() if line[:1].isdigit() and ". " in line]
    assert len(ranks) == len(AIRPORTS)
    assert ranks[0].split(". ", 1)[1] in (_leg("OPO"), _leg("MAD"))


def test_country_statistics():
    network = _network()
    output = _run("3\n2\nSpain\n2\n1\n3\n2\nPortugal\n3\n2\n", network)
    assert f"Existem {network.flights_from_country('Spain')} voos." in output
    assert f"Existem {len(_airlines().in_country('Portugal'))} companhias." in output


def test_invalid_country_asked_again():
    output = _run("3\n2\nNarnia\nSpain\n1\n2\n")
    assert "Pais invalido." in output
    assert f"Existem {len(Airports(AIRPORTS).in_country('Spain'))} aeroportos." in output


def test_leaving_from_main_menu_shows_menu_once():
    output = _run("9\n")
    assert output.count("Bem Vindo") == 1


def test_done_returns_to_main_menu():
    output = _run("2\nOPO\n1\n1\n7\n")
    assert output.count("Bem Vindo") == 2


def test_main_reads_files(tmp_path, monkeypatch, capsys):
    (tmp_path / "airports.csv").write_text(
        "Code,Name,City,Country,Latitude,Longitude\n"
        + "".join(
            f"{a.code},{a.name},{a.city},{a.country},{a.latitude},{a.longitude}\n"
            for a in AIRPORTS
        ),
        encoding="utf-8",
    )
    (tmp_path / "airlines.csv").write_text(
        "Code,Name,Callsign,Country\nTAP,Air Portugal,TAP,Portugal\n", encoding="utf-8"
    )
    (tmp_path / "flights.csv").write_text(
        "Source,Target,Airline\n" + "".join(f"{s},{t},{a}\n" for s, t, a in FLIGHTS),
        encoding="utf-8",
    )
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n1\n2\n2\n"))
    assert main([str(tmp_path)]) == 0
    output = capsys.readouterr().out
    assert f"Existem {len(FLIGHTS)} voos a nivel mundial" in output


def test_main_missing_files(tmp_path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path)])