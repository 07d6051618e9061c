import pytest

from aedsuite.airports import Airport, Airports, read_airports

OPO = Airport("OPO", "Francisco Sa Carneiro", "Porto", "Portugal", 41.2481, -8.6814)
LIS = Airport("LIS", "Humberto Delgado", "Lisbon", "Portugal", 38.7813, -9.1359)
MAD = Airport("MAD", "Barajas", "Madrid", "Spain", 40.4719, -3.5626)
TOJ = Airport("TOJ", "Torrejon", "Madrid", "Spain", 40.4967, -3.4458)


@pytest.fixture
def airports():
    return Airports([OPO, LIS, MAD, TOJ])


def test_lookup_by_code(airports):
    assert airports["LIS"] == LIS
    assert "OPO" in airports
    assert "XXX" not in airports
    with pytest.raises(KeyError):
        airports["XXX"]


def test_len_and_iter(airports):
    assert len(airports) == 4
    assert list(airports) == [OPO, LIS, MAD, TOJ]


def test_countries_sorted_unique(airports):
    assert airports.countries() == ["Portugal", "Spain"]


def test_in_city_and_country(airports):
    assert airports.in_city("Madrid") == ["MAD", "TOJ"]
    assert airports.in_country("Portugal") == ["OPO", "LIS"]
    assert airports.in_city("Nowhere") == []
    assert airports.in_country("Nowhere") == []


def test_in_city_returns_copy(airports):
    codes = airports.in_city("Madrid")
    codes.clear()
    assert airports.in_city("Madrid") == ["MAD", "TOJ"]


def test_read_airports_round_trip(tmp_path):
    path = tmp_path / "airports.csv"
    rows = ["Code,Name,City,Country,Latitude,Longitude"]
    for a in (OPO, MAD):
        rows.append(f"{a.code},{a.name},{a.city},{a.country},{a.latitude},{a.longitude}")
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    loaded = read_airports(path)
    assert list(loaded) == [OPO, MAD]
    assert loaded.in_country("Spain") == ["MAD"]


def test_read_airports_stops_at_blank_line(tmp_path):
    path = tmp_path / "airports.csv"
    path.write_text(
        "Code,Name,City,Country,Latitude,Longitude\n"
        "OPO,Francisco Sa Carneiro,Porto,Portugal,41.2481,-8.6814\n"
        "\n"
        "LIS,Humberto Delgado,Lisbon,Portugal,38.7813,-9.1359\n",
        encoding="utf-8",
    )
    loaded = read_airports(path)
    assert len(loaded) == 1
    assert "LIS" not in loaded