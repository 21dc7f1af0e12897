import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.models.airport import Airport
from app.services.airport_directory import (
    AirportDirectory,
    CachedAirportDirectory,
    DatabaseAirportDirectory,
    DuffelAirportDirectory,
    StaticAirportDirectory,
    build_airport_directory,
)
from app.services.duffel_client import DuffelAPIError
from conftest import make_airport


class FakeCache:
    def __init__(self):
        self.store = {}

    async def get_airport_data(self, source, query):
        return self.store.get(("search", source, query.lower()))

    async def set_airport_data(self, source, query, data):
        self.store[("search", source, query.lower())] = data

    async def get_airport_detail(self, source, iata):
        return self.store.get(("detail", source, iata.upper()))

    async def set_airport_detail(self, source, iata, data):
        self.store[("detail", source, iata.upper())] = data


class CountingDirectory(AirportDirectory):
    source = "counting"

    def __init__(self, records):
        self.records = records
        self.search_calls = 0
        self.get_calls = 0

    async def search(self, query):
        self.search_calls += 1
        return list(self.records)

    async def get(self, iata):
        self.get_calls += 1
        return next((r for r in self.records if r.iata_code == iata.upper()), None)


def _duffel_stub(use_mock=False, **methods):
    client = MagicMock()
    client.use_mock = use_mock
    for name, value in methods.items():
        setattr(client, name, value)
    return client


def test_static_directory_loose_match():
    directory = StaticAirportDirectory()
    codes = {r.iata_code for r in asyncio.run(directory.search("london"))}
    assert {"LHR", "LGW", "STN", "LTN", "LCY"} <= codes
    assert "JFK" not in codes


def test_static_directory_matches_country_and_code():
    directory = StaticAirportDirectory()
    assert {r.iata_code for r in asyncio.run(directory.search("japan"))} == {"NRT", "HND"}
    assert "CDG" in {r.iata_code for r in asyncio.run(directory.search("cdg"))}


def test_static_directory_blank_query():
    assert asyncio.run(StaticAirportDirectory().search("  ")) == []


def test_static_directory_get_by_iata():
    directory = StaticAirportDirectory()
    assert asyncio.run(directory.get("lhr")).city_name == "London"
    assert asyncio.run(directory.get("QQQ")) is None


def test_static_directory_skips_malformed_rows():
    directory = StaticAirportDirectory(rows=[
        {"iata_code": "12", "name": "Bad"},
        {"iata_code": "ABCD", "name": "Too long"},
        {"iata_code": "abc", "name": "Alpha Field", "city_name": None},
    ])
    records = asyncio.run(directory.search("alpha"))
    assert [r.iata_code for r in records] == ["ABC"]
    assert records[0].city_name == ""


def test_duffel_directory_uses_client_results():
    client = _duffel_stub(search_places=AsyncMock(return_value=[
        {"iata_code": "LHR", "name": "Heathrow Airport", "city_name": "London", "country_code": "GB"},
        {"iata_code": "", "name": "No code"},
    ]))
    directory = DuffelAirportDirectory(client=client)
    records = asyncio.run(directory.search("london"))
    assert [r.iata_code for r in records] == ["LHR"]
    client.search_places.assert_awaited_once_with("london")


def test_duffel_directory_falls_back_on_api_error():
    client = _duffel_stub(search_places=AsyncMock(side_effect=DuffelAPIError("boom", 500)))
    fallback = CountingDirectory([make_airport("LHR", "London")])
    directory = DuffelAirportDirectory(client=client, fallback=fallback)
    records = asyncio.run(directory.search("london"))
    assert [r.iata_code for r in records] == ["LHR"]
    assert fallback.search_calls == 1


def test_duffel_directory_without_token_skips_client():
    client = _duffel_stub(use_mock=True, search_places=AsyncMock())
    directory = DuffelAirportDirectory(client=client)
    records = asyncio.run(directory.search("paris"))
    assert {"CDG", "ORY"} <= {r.iata_code for r in records}
    client.search_places.assert_not_awaited()


def test_duffel_directory_get_falls_back():
    client = _duffel_stub(get_airport=AsyncMock(side_effect=DuffelAPIError("down")))
    directory = DuffelAirportDirectory(client=client)
    assert asyncio.run(directory.get("CDG")).city_name == "Paris"


def test_cached_directory_hits_source_once():
    inner = CountingDirectory([make_airport("LHR", "London"), make_airport("LGW", "London")])
    directory = CachedAirportDirectory(inner, cache=FakeCache())

    first = asyncio.run(directory.search("London"))
    second = asyncio.run(directory.search("london"))

    assert inner.search_calls == 1
    assert first == second


def test_cached_directory_detail():
    inner = CountingDirectory([make_airport("LHR", "London")])
    directory = CachedAirportDirectory(inner, cache=FakeCache())

    assert asyncio.run(directory.get("LHR")).iata_code == "LHR"
    assert asyncio.run(directory.get("LHR")).iata_code == "LHR"
    assert inner.get_calls == 1

    assert asyncio.run(directory.get("QQQ")) is None
    assert asyncio.run(directory.get("QQQ")) is None
    assert inner.get_calls == 3


def test_build_directory_sources():
    assert isinstance(build_airport_directory("static", use_cache=False), StaticAirportDirectory)
    assert isinstance(build_airport_directory("duffel", use_cache=False), DuffelAirportDirectory)
    cached = build_airport_directory("static", use_cache=True)
    assert isinstance(cached, CachedAirportDirectory)
    assert cached.source == "static"
    with pytest.raises(ValueError):
        build_airport_directory("carrier-pigeon")


def test_cached_directory_skips_fallback_results():
    lcy = {"iata_code": "LCY", "name": "London City Airport", "city_name": "London", "country_code": "GB"}
    client = _duffel_stub(search_places=AsyncMock(side_effect=[DuffelAPIError("down", 503), [lcy]]))
    fallback = CountingDirectory([make_airport("LHR", "London")])
    cache = FakeCache()
    directory = CachedAirportDirectory(DuffelAirportDirectory(client=client, fallback=fallback), cache=cache)

    assert [r.iata_code for r in asyncio.run(directory.search("London"))] == ["LHR"]
    assert cache.store == {}

    assert [r.iata_code for r in asyncio.run(directory.search("London"))] == ["LCY"]
    assert client.search_places.await_count == 2
    assert cache.store[("search", "duffel", "london")][0]["iata_code"] == "LCY"


def test_cached_directory_skips_results_without_token():
    client = _duffel_stub(use_mock=True, search_places=AsyncMock(), get_airport=AsyncMock())
    cache = FakeCache()
    directory = CachedAirportDirectory(DuffelAirportDirectory(client=client), cache=cache)

    assert asyncio.run(directory.search("paris"))
    assert asyncio.run(directory.get("CDG")).city_name == "Paris"
    assert cache.store == {}


def test_cached_directory_skips_detail_fallback():
    client = _duffel_stub(get_airport=AsyncMock(side_effect=DuffelAPIError("down", 503)))
    cache = FakeCache()
    directory = CachedAirportDirectory(DuffelAirportDirectory(client=client), cache=cache)

    assert asyncio.run(directory.get("CDG")).iata_code == "CDG"
    assert cache.store == {}


def test_cached_directory_discards_malformed_detail():
    inner = CountingDirectory([make_airport("LHR", "London")])
    cache = FakeCache()
    cache.store[("detail", "counting", "LHR")] = {"iata_code": "X"}
    directory = CachedAirportDirectory(inner, cache=cache)

    record = asyncio.run(directory.get("LHR"))

    assert record.iata_code == "LHR"
    assert inner.get_calls == 1
    assert cache.store[("detail", "counting", "LHR")]["iata_code"] == "LHR"


class FakeResult:
    def __init__(self, rows):
        self._rows = rows

    def scalars(self):
        return self

    def all(self):
        return list(self._rows)

    def scalar_one_or_none(self):
        return self._rows[0] if self._rows else None


class FakeSession:
    def __init__(self, rows):
        self.rows = rows
        self.statements = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    async def execute(self, statement):
        self.statements.append(statement)
        return FakeResult(self.rows)


def _airport_row(iata, **fields):
    values = {"name": f"{iata} Airport", "city_name": None, "country_code": "GB", "country_name": None}
    values.update(fields)
    return Airport(iata_code=iata, **values)


def test_database_directory_blank_query_skips_sql():
    session = FakeSession([_airport_row("LHR")])
    directory = DatabaseAirportDirectory(session_factory=lambda: session)

    assert asyncio.run(directory.search("   ")) == []
    assert session.statements == []


def test_database_directory_search_maps_missing_names():
    session = FakeSession([_airport_row("LHR", name="Heathrow Airport")])
    directory = DatabaseAirportDirectory(session_factory=lambda: session)

    records = asyncio.run(directory.search(" London "))

    assert [r.iata_code for r in records] == ["LHR"]
    assert records[0].city_name == ""
    assert records[0].country_name == ""
    compiled = session.statements[0].compile()
    assert "london" in compiled.params.values()


def test_database_directory_escapes_like_wildcards():
    session = FakeSession([])
    directory = DatabaseAirportDirectory(session_factory=lambda: session)

    assert asyncio.run(directory.search("50%_off")) == []
    compiled = session.statements[0].compile()
    assert "ESCAPE '/'" in str(compiled)
    assert "50/%/_off" in compiled.params.values()


def test_database_directory_get_uppercases_code():
    session = FakeSession([_airport_row("LHR", city_name="London")])
    directory = DatabaseAirportDirectory(session_factory=lambda: session)

    record = asyncio.run(directory.get(" lhr "))

    assert record.city_name == "London"
    assert list(session.statements[0].compile().params.values()) == ["LHR"]


def test_database_directory_get_missing():
    directory = DatabaseAirportDirectory(session_factory=lambda: FakeSession([]))
    assert asyncio.run(directory.get("QQQ")) is None
