"""Airport service — directory lookup followed by relevance ranking."""

import logging

from app.config import settings
from app.schemas.airport import AirportRecord
from app.services.airport_directory import AirportDirectory, get_airport_directory
from app.services.airport_ranker import AirportRelevanceRanker, get_airport_ranker

logger = logging.getLogger(__name__)


class AirportService:
    """Resolves free-text queries to ranked airports."""

    def __init__(
        self,
        directory: AirportDirectory | None = None,
        ranker: AirportRelevanceRanker | None = None,
    ):
        self._directory = directory
        self._ranker = ranker

    @property
    def directory(self) -> AirportDirectory:
        return self._directory or get_airport_directory()

    @property
    def ranker(self) -> AirportRelevanceRanker:
        return self._ranker or get_airport_ranker()

    async def search_airports(self, query: str, limit: int | None = None) -> list[AirportRecord]:
        """Search airports by city, IATA code, airport or country name, most relevant first."""
        q = query.strip()
        limit = settings.search_limit if limit is None else limit
        if len(q) < settings.min_query_length:
            return []

        candidates = await self.directory.search(q)
        ranked = self.ranker.rank(q, candidates, limit)
        logger.info(f"Airport search {q!r}: {len(candidates)} candidates, {len(ranked)} ranked")
        return ranked

    async def resolve_iata(self, query: str) -> str | None:
        """IATA code of the most relevant airport for ``query``, or None."""
        results = await self.search_airports(query, limit=1)
        return results[0].iata_code if results else None

    async def get_airport(self, iata: str) -> AirportRecord | None:
        return await self.directory.get(iata)


airport_service = AirportService()
