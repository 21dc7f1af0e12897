"""Airport directory sources — return unordered airport records for a loose query.

Ranking is not done here; see ``airport_ranker``.
"""

import logging

from pydantic import ValidationError
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.config import settings
from app.data.airports import airport_rows
from app.models.airport import Airport
from app.schemas.airport import AirportRecord
from app.services.cache_service import CacheService, cache_service
from app.services.duffel_client import DuffelAPIError, DuffelClient, duffel_client

logger = logging.getLogger(__name__)

DATABASE_FETCH_LIMIT = 200


def _to_records(rows: list[dict]) -> list[AirportRecord]:
    """Validate raw rows, skipping ones without a well-formed IATA code."""
    records = []
    for row in rows:
        try:
            records.append(AirportRecord.model_validate(row))
        except ValidationError:
            logger.debug(f"Skipping malformed airport row: {row.get('iata_code')!r}")
    return records


class AirportDirectory:
    """Base class for directory sources."""

    source = "base"

    async def search(self, query: str) -> list[AirportRecord]:
        raise NotImplementedError

    async def get(self, iata: str) -> AirportRecord | None:
        raise NotImplementedError

    async def lookup(self, query: str) -> tuple[list[AirportRecord], bool]:
        """``search`` plus whether the result came from the source itself (safe to cache)."""
        return await self.search(query), True

    async def lookup_one(self, iata: str) -> tuple[AirportRecord | None, bool]:
        return await self.get(iata), True


class StaticAirportDirectory(AirportDirectory):
    """Built-in reference table, loosely filtered by substring."""

    source = "static"

    def __init__(self, rows: list[dict] | None = None):
        self._records = _to_records(rows if rows is not None else airport_rows())
        self._by_iata = {r.iata_code: r for r in self._records}

    async def search(self, query: str) -> list[AirportRecord]:
        q = query.strip().lower()
        if not q:
            return []
        return [
            r for r in self._records
            if q in r.iata_code.lower()
            or q in r.city_name.lower()
            or q in r.name.lower()
            or q in r.country_name.lower()
        ]

    async def get(self, iata: str) -> AirportRecord | None:
        return self._by_iata.get(iata.strip().upper())


class DatabaseAirportDirectory(AirportDirectory):
    """``airports`` table, loosely filtered in SQL."""

    source = "database"

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None):
        if session_factory is None:
            from app.database import async_session_factory
            session_factory = async_session_factory
        self._session_factory = session_factory

    async def search(self, query: str) -> list[AirportRecord]:
        q = query.strip().lower()
        if not q:
            return []
        async with self._session_factory() as db:
            result = await db.execute(
                select(Airport)
                .where(
                    or_(
                        func.lower(Airport.iata_code).contains(q, autoescape=True),
                        func.lower(Airport.city_name).contains(q, autoescape=True),
                        func.lower(Airport.name).contains(q, autoescape=True),
                        func.lower(Airport.country_name).contains(q, autoescape=True),
                    )
                )
                .limit(DATABASE_FETCH_LIMIT)
            )
            return [a.to_record() for a in result.scalars().all()]

    async def get(self, iata: str) -> AirportRecord | None:
        async with self._session_factory() as db:
            result = await db.execute(
                select(Airport).where(Airport.iata_code == iata.strip().upper())
            )
            airport = result.scalar_one_or_none()
            return airport.to_record() if airport else None


class DuffelAirportDirectory(AirportDirectory):
    """Duffel place suggestions, with the static table as fallback."""

    source = "duffel"

    def __init__(self, client: DuffelClient | None = None, fallback: AirportDirectory | None = None):
        self._client = client or duffel_client
        self._fallback = fallback or StaticAirportDirectory()

    async def search(self, query: str) -> list[AirportRecord]:
        records, _ = await self.lookup(query)
        return records

    async def get(self, iata: str) -> AirportRecord | None:
        record, _ = await self.lookup_one(iata)
        return record

    async def lookup(self, query: str) -> tuple[list[AirportRecord], bool]:
        if self._client.use_mock:
            return await self._fallback.search(query), False
        try:
            rows = await self._client.search_places(query)
        except DuffelAPIError as e:
            logger.warning(f"Duffel airport search failed, using fallback: {e}")
            return await self._fallback.search(query), False
        logger.info(f"Duffel returned {len(rows)} airports for {query!r}")
        return _to_records(rows), True

    async def lookup_one(self, iata: str) -> tuple[AirportRecord | None, bool]:
        if self._client.use_mock:
            return await self._fallback.get(iata), False
        try:
            row = await self._client.get_airport(iata)
        except DuffelAPIError as e:
            logger.warning(f"Duffel airport lookup failed, using fallback: {e}")
            return await self._fallback.get(iata), False
        if row is None:
            return None, True
        records = _to_records([row])
        return (records[0] if records else None), True


class CachedAirportDirectory(AirportDirectory):
    """Wraps another directory with the Redis cache.

    Fallback results from a degraded source are returned but never stored.
    """

    def __init__(self, inner: AirportDirectory, cache: CacheService | None = None):
        self._inner = inner
        self._cache = cache or cache_service
        self.source = inner.source

    async def search(self, query: str) -> list[AirportRecord]:
        cached = await self._cache.get_airport_data(self.source, query)
        if cached is not None:
            return _to_records(cached)
        records, fresh = await self._inner.lookup(query)
        if fresh:
            await self._cache.set_airport_data(
                self.source, query, [r.model_dump() for r in records]
            )
        return records

    async def get(self, iata: str) -> AirportRecord | None:
        cached = await self._cache.get_airport_detail(self.source, iata)
        if cached is not None:
            try:
                return AirportRecord.model_validate(cached)
            except ValidationError:
                logger.warning(f"Discarding malformed cached airport for {iata!r}")
        record, fresh = await self._inner.lookup_one(iata)
        if record is not None and fresh:
            await self._cache.set_airport_detail(self.source, iata, record.model_dump())
        return record


def build_airport_directory(source: str | None = None, use_cache: bool | None = None) -> AirportDirectory:
    """Build the configured directory source."""
    source = (source or settings.airport_directory).lower()
    if source == "static":
        directory: AirportDirectory = StaticAirportDirectory()
    elif source == "database":
        directory = DatabaseAirportDirectory()
    elif source == "duffel":
        directory = DuffelAirportDirectory()
    else:
        raise ValueError(f"Unknown airport directory source: {source!r}")

    if settings.airport_cache_enabled if use_cache is None else use_cache:
        directory = CachedAirportDirectory(directory)
    return directory


_directory: AirportDirectory | None = None


def get_airport_directory() -> AirportDirectory:
    global _directory
    if _directory is None:
        _directory = build_airport_directory()
        logger.info(f"Airport directory source: {_directory.source}")
    return _directory
