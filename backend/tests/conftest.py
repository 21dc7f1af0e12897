import pytest

from app.schemas.airport import AirportRecord
from app.services.airport_directory import StaticAirportDirectory
from app.services.airport_ranker import AirportRelevanceRanker
from app.services.airport_service import AirportService
from app.services.ranking_config import load_ranking_config


def make_airport(iata: str, city: str = "", name: str = "", country_code: str = "", country_name: str = "") -> AirportRecord:
    return AirportRecord(
        iata_code=iata,
        name=name or f"{city or iata} Airport",
        city_name=city,
        country_code=country_code,
        country_name=country_name,
    )


@pytest.fixture
def ranking_config():
    return load_ranking_config()


@pytest.fixture
def ranker(ranking_config):
    return AirportRelevanceRanker(ranking_config)


@pytest.fixture
def static_airport_service(ranker):
    return AirportService(directory=StaticAirportDirectory(), ranker=ranker)
