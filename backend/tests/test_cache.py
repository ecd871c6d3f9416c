"""Tests for the chart cache in-memory fallback."""

from niftypulse.services.cache import ChartCache, get_chart_cache


async def test_round_trip_without_redis():
    cache = ChartCache()
    payload = {"symbol": "^NSEI", "candles": [{"close": 22000.5}]}

    assert await cache.get_cached_chart_data("^NSEI", "1d") is None
    await cache.cache_chart_data("^NSEI", "1d", payload, ttl=60)
    assert await cache.get_cached_chart_data("^nsei", "1d") == payload


async def test_expired_entries_are_dropped():
    cache = ChartCache()
    await cache.cache_chart_data("^NSEI", "1d", {"a": 1}, ttl=0)
    assert await cache.get_cached_chart_data("^NSEI", "1d") is None


async def test_keys_separate_intervals():
    cache = ChartCache()
    await cache.cache_chart_data("^NSEI", "1d", {"a": 1}, ttl=60)
    assert await cache.get_cached_chart_data("^NSEI", "1wk") is None


def test_singleton():
    assert get_chart_cache() is get_chart_cache()
