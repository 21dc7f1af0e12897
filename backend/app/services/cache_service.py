"""Redis cache service for airport directory lookups."""

import json
import logging
from typing import Any

import redis.asyncio as redis

from app.config import settings

logger = logging.getLogger(__name__)

# TTLs in seconds
TTL_AIRPORT_DATA = 24 * 60 * 60     # 24 hours — directory results
TTL_AIRPORT_DETAIL = 7 * 24 * 60 * 60  # 7 days — single airport by IATA


class CacheService:
    """Redis-backed cache with typed TTLs. Every failure degrades to a miss."""

    def __init__(self):
        self._redis: redis.Redis | None = None

    async def _get_redis(self) -> redis.Redis | None:
        if self._redis is None:
            try:
                self._redis = redis.from_url(
                    settings.redis_url,
                    encoding="utf-8",
                    decode_responses=True,
                )
                await self._redis.ping()
            except Exception as e:
                logger.warning(f"Redis unavailable, cache disabled: {e}")
                self._redis = None
                return None
        return self._redis

    async def get(self, key: str) -> Any | None:
        """Get a value from cache. Returns None on miss or error."""
        try:
            r = await self._get_redis()
            if r is None:
                return None
            raw = await r.get(key)
            if raw is None:
                return None
            return json.loads(raw)
        except Exception as e:
            logger.debug(f"Cache get failed for {key}: {e}")
            return None

    async def set(self, key: str, value: Any, ttl: int = TTL_AIRPORT_DATA) -> bool:
        """Set a value in cache with TTL. Returns False on error."""
        try:
            r = await self._get_redis()
            if r is None:
                return False
            await r.set(key, json.dumps(value, default=str), ex=ttl)
            return True
        except Exception as e:
            logger.debug(f"Cache set failed for {key}: {e}")
            return False

    # Typed helpers

    def airport_search_key(self, source: str, query: str) -> str:
        return f"airports:{source}:search:{query.strip().lower()}"

    def airport_detail_key(self, source: str, iata: str) -> str:
        return f"airports:{source}:iata:{iata.upper()}"

    async def get_airport_data(self, source: str, query: str) -> list[dict] | None:
        return await self.get(self.airport_search_key(source, query))

    async def set_airport_data(self, source: str, query: str, data: list[dict]):
        await self.set(self.airport_search_key(source, query), data, TTL_AIRPORT_DATA)

    async def get_airport_detail(self, source: str, iata: str) -> dict | None:
        return await self.get(self.airport_detail_key(source, iata))

    async def set_airport_detail(self, source: str, iata: str, data: dict):
        await self.set(self.airport_detail_key(source, iata), data, TTL_AIRPORT_DETAIL)

    async def close(self):
        if self._redis:
            await self._redis.aclose()
            self._redis = None


cache_service = CacheService()
