"""
Redis cache client for fetched chart data.

Keeps the upstream provider from being hit on every request: candle
history is cached for a short freshness window.
"""

import json
import logging
import time
from typing import Optional, Dict, Any, Tuple

import redis.asyncio as redis

from niftypulse.core.config import settings

logger = logging.getLogger(__name__)

# Global Redis connection pool
_redis_pool: Optional[redis.Redis] = None


async def init_redis() -> Optional[redis.Redis]:
    """
    Initialize Redis connection pool.
    Called on application startup.
    """
    global _redis_pool

    if _redis_pool is not None:
        return _redis_pool

    try:
        _redis_pool = redis.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
        )
        # Test connection
        await _redis_pool.ping()
        logger.info(f"Redis connected: {settings.redis_url}")
        return _redis_pool
    except Exception as e:
        logger.warning(f"Redis connection failed: {e}. Using in-memory fallback.")
        _redis_pool = None
        return None


async def close_redis() -> None:
    """Close Redis connection pool."""
    global _redis_pool
    if _redis_pool:
        await _redis_pool.aclose()
        _redis_pool = None
        logger.info("Redis connection closed")


class ChartCache:
    """
    Redis-based cache for chart data.

    Keys:
    - chartdata:{symbol}:{interval} → JSON chart payload
    """

    def __init__(self, redis_client: Optional[redis.Redis] = None):
        self._redis = redis_client
        # In-memory fallback when Redis is unavailable: key -> (expires_at, value)
        self._memory_cache: Dict[str, Tuple[float, str]] = {}

    @property
    def redis(self) -> Optional[redis.Redis]:
        return self._redis or _redis_pool

    def _memory_get(self, key: str) -> Optional[str]:
        entry = self._memory_cache.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if time.monotonic() >= expires_at:
            del self._memory_cache[key]
            return None
        return value

    def _memory_set(self, key: str, value: str, ex: int) -> None:
        self._memory_cache[key] = (time.monotonic() + ex, value)

    @staticmethod
    def _key(symbol: str, interval: str) -> str:
        return f"chartdata:{symbol.upper()}:{interval}"

    async def cache_chart_data(
        self,
        symbol: str,
        interval: str,
        data: Dict[str, Any],
        ttl: int = 900,  # 15 minutes default
    ) -> bool:
        """Cache complete chart data for a symbol/interval."""
        key = self._key(symbol, interval)
        value = json.dumps(data)

        if self.redis:
            try:
                await self.redis.set(key, value, ex=ttl)
                return True
            except Exception as e:
                logger.debug(f"Redis cache_chart_data failed: {e}")

        self._memory_set(key, value, ttl)
        return True

    async def get_cached_chart_data(
        self,
        symbol: str,
        interval: str,
    ) -> Optional[Dict[str, Any]]:
        """Get cached chart data if still fresh."""
        key = self._key(symbol, interval)

        if self.redis:
            try:
                value = await self.redis.get(key)
                return json.loads(value) if value else None
            except Exception as e:
                logger.debug(f"Redis get_cached_chart_data failed: {e}")

        value = self._memory_get(key)
        return json.loads(value) if value else None


# Singleton instance
_chart_cache: Optional[ChartCache] = None


def get_chart_cache() -> ChartCache:
    """Get the chart cache singleton."""
    global _chart_cache
    if _chart_cache is None:
        _chart_cache = ChartCache()
    return _chart_cache
