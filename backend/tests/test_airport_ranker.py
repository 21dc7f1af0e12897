import pytest

from app.services.airport_ranker import AirportRelevanceRanker, rank_airports
from app.services.ranking_config import parse_ranking_config
from conftest import make_airport


def _codes(records):
    return [r.iata_code for r in records]


def _scenario_candidates():
    return [
        make_airport("JFK", "New York", "John F. Kennedy International Airport", "US", "United States"),
        make_airport("LAX", "Los Angeles", "Los Angeles International Airport", "US", "United States"),
        make_airport("LHR", "London", "London Heathrow Airport", "GB", "United Kingdom"),
        make_airport("LGW", "London", "London Gatwick Airport", "GB", "United Kingdom"),
    ]


def test_london_scenario_orders_heathrow_before_gatwick(ranker):
    result = ranker.rank("London", _scenario_candidates(), limit=8)
    assert _codes(result) == ["LHR", "LGW"]


def test_ranking_is_deterministic(ranker):
    candidates = _scenario_candidates()
    first = ranker.rank("lon", candidates, limit=8)
    for _ in range(5):
        assert ranker.rank("lon", candidates, limit=8) == first


def test_exact_iata_ranks_above_same_city_airport(ranker):
    candidates = [
        make_airport("ORY", "Paris", "Paris Orly Airport", "FR", "France"),
        make_airport("CDG", "Paris", "Charles de Gaulle Airport", "FR", "France"),
    ]
    assert _codes(ranker.rank("CDG", candidates, limit=8)) == ["CDG"]
    assert _codes(ranker.rank("cdg", candidates, limit=8)) == ["CDG"]


def test_major_hub_beats_unlisted_airport_in_same_city(ranker):
    candidates = [
        make_airport("LCY", "London", "London City Airport", "GB", "United Kingdom"),
        make_airport("LHR", "London", "London Heathrow Airport", "GB", "United Kingdom"),
    ]
    assert _codes(ranker.rank("London", candidates, limit=8)) == ["LHR", "LCY"]


def test_country_context_prefers_intended_country():
    config = parse_ranking_config({"country_context": {"ES": ["valencia"]}})
    ranker = AirportRelevanceRanker(config)
    candidates = [
        make_airport("VLN", "Valencia", "Arturo Michelena International Airport", "VE", "Venezuela"),
        make_airport("VLC", "Valencia", "Valencia Airport", "ES", "Spain"),
    ]
    assert _codes(ranker.rank("Valencia", candidates, limit=8)) == ["VLC", "VLN"]


def test_no_match_returns_empty(ranker):
    assert ranker.rank("zzzxyq123", _scenario_candidates(), limit=8) == []


@pytest.mark.parametrize("query", ["", " ", "L", " l ", "x"])
def test_short_query_returns_empty(ranker, query):
    assert ranker.rank(query, _scenario_candidates(), limit=8) == []


def test_empty_candidates(ranker):
    assert ranker.rank("London", [], limit=8) == []


def test_scores_are_additive(ranker):
    lhr = make_airport("LHR", "London", "London Heathrow Airport", "GB", "United Kingdom")
    # exact IATA (100) + IATA contains (70)
    assert ranker.score("lhr", lhr) == 170
    # exact city (90) + hub (1000) + prefix (80) + city contains (60) + name (40) + GB context (3000)
    assert ranker.score("london", lhr) == 4270


def test_international_boost_only_applies_to_matches(ranker):
    jfk = make_airport("JFK", "New York", "John F. Kennedy International Airport", "US", "United States")
    lga = make_airport("LGA", "New York", "LaGuardia Airport", "US", "United States")
    assert ranker.score("new york", jfk) == 90 + 850 + 80 + 60 + 200
    assert ranker.score("new york", lga) == 90 + 450 + 80 + 60
    assert ranker.score("zzzxyq123", jfk) == 0


def test_country_context_never_matches_on_its_own(ranker):
    manchester = make_airport("MAN", "Manchester", "Manchester Airport", "GB", "United Kingdom")
    assert ranker.score("london", manchester) == 0
    assert ranker.rank("london", [manchester], limit=8) == []


def test_output_never_contains_zero_scores(ranker):
    candidates = _scenario_candidates()
    for record in ranker.rank("an", candidates, limit=8):
        assert ranker.score("an", record) > 0


def test_limit_respected(ranker):
    candidates = [make_airport(code, "Springfield") for code in ("SPA", "SPB", "SPC", "SPD", "SPE")]
    assert len(ranker.rank("springfield", candidates, limit=3)) == 3
    assert len(ranker.rank("springfield", candidates, limit=10)) == 5
    assert ranker.rank("springfield", candidates, limit=0) == []


def test_equal_scores_fall_back_to_iata_order(ranker):
    candidates = [make_airport(code, "Testville") for code in ("TVC", "TVA", "TVB")]
    assert _codes(ranker.rank("testville", candidates, limit=8)) == ["TVA", "TVB", "TVC"]


def test_duplicates_keep_highest_scoring_instance(ranker):
    weak = make_airport("LHR", "London", "Heathrow", "GB", "United Kingdom")
    strong = make_airport("LHR", "London", "London Heathrow Airport", "GB", "United Kingdom")
    result = ranker.rank("London", [weak, strong, weak], limit=8)
    assert len(result) == 1
    assert result[0].name == "London Heathrow Airport"


def test_missing_city_does_not_crash(ranker):
    record = make_airport("XYZ", "", "Somewhere Field", "US", "United States")
    assert ranker.score("london", record) == 0
    assert _codes(ranker.rank("somewhere", [record], limit=8)) == ["XYZ"]


def test_query_is_trimmed_and_case_insensitive(ranker):
    candidates = _scenario_candidates()
    assert ranker.rank("  LONDON  ", candidates, limit=8) == ranker.rank("london", candidates, limit=8)


def test_diacritics_are_not_folded(ranker):
    # Known limitation: only case is folded, accents must match exactly.
    gru = make_airport("GRU", "São Paulo", "São Paulo/Guarulhos International Airport", "BR", "Brazil")
    assert ranker.rank("Sao Paulo", [gru], limit=8) == []
    assert _codes(ranker.rank("SÃO PAULO", [gru], limit=8)) == ["GRU"]


@pytest.mark.parametrize(
    "query, candidates, limit, exc",
    [
        (None, [], 8, TypeError),
        (123, [], 8, TypeError),
        ("london", None, 8, TypeError),
        ("london", [], "8", TypeError),
        ("london", [], 8.0, TypeError),
        ("london", [], True, TypeError),
        ("london", [], -1, ValueError),
    ],
)
def test_contract_violations_raise(ranker, query, candidates, limit, exc):
    with pytest.raises(exc):
        ranker.rank(query, candidates, limit)


def test_short_query_still_validates_contract(ranker):
    with pytest.raises(TypeError):
        ranker.rank("L", None, 8)


def test_module_level_rank_uses_bundled_config():
    assert _codes(rank_airports("London", _scenario_candidates(), 8)) == ["LHR", "LGW"]
