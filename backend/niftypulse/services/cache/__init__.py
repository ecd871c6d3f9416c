"""
Cache module for NiftyPulse.

Provides Redis caching for fetched chart data.
"""

from niftypulse.services.cache.redis_client import (
    ChartCache,
    get_chart_cache,
    init_redis,
    close_redis,
)

__all__ = [
    "ChartCache",
    "get_chart_cache",
    "init_redis",
    "close_redis",
]
