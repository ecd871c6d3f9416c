"""Tests for the data ingestion service (provider stubbed out)."""

import pytest

from niftypulse.core.config import Settings
from niftypulse.schemas.market import ChartMeta
from niftypulse.services.base import ExternalAPIError, NoDataError
from niftypulse.services.cache import ChartCache
from niftypulse.services.data_ingestion import DataIngestionService, DataRequest
from niftypulse.services.data_ingestion import service as ingestion_module


class FakeProvider:
    def __init__(self, candles, meta=None, error=None):
        self.candles = candles
        self.meta = meta
        self.error = error
        self.calls = []

    async def __call__(self, symbol, period, interval):
        self.calls.append((symbol, period, interval))
        if self.error:
            raise self.error
        return self.candles, self.meta


@pytest.fixture
def config():
    return Settings(nifty_symbol="^NSEI", history_range="6mo", history_interval="1d")


@pytest.fixture
def service(config):
    return DataIngestionService(cache=ChartCache(), config=config)


async def test_fetches_and_wraps_candles(monkeypatch, service, make_candles):
    candles = make_candles([100.0, 101.0, 102.0])
    provider = FakeProvider(candles, ChartMeta(currency="INR"))
    monkeypatch.setattr(ingestion_module, "fetch_nifty_history", provider)

    data = await service.execute(DataRequest())

    assert provider.calls == [("^NSEI", "6mo", "1d")]
    assert data.symbol == "^NSEI"
    assert data.candles == candles
    assert data.meta.currency == "INR"
    assert data.source == "Yahoo Finance"
    assert data.fetched_at.tzinfo is not None


async def test_repeat_calls_served_from_cache(monkeypatch, service, make_candles):
    candles = make_candles([100.0, 101.0])
    provider = FakeProvider(candles)
    monkeypatch.setattr(ingestion_module, "fetch_nifty_history", provider)

    first = await service.execute()
    second = await service.execute()

    assert len(provider.calls) == 1
    assert second.candles == first.candles
    assert second.fetched_at == first.fetched_at


async def test_force_refresh_bypasses_cache(monkeypatch, service, make_candles):
    provider = FakeProvider(make_candles([100.0]))
    monkeypatch.setattr(ingestion_module, "fetch_nifty_history", provider)

    await service.execute()
    await service.execute(DataRequest(force_refresh=True))

    assert len(provider.calls) == 2


async def test_empty_history_raises_no_data(monkeypatch, service):
    monkeypatch.setattr(ingestion_module, "fetch_nifty_history", FakeProvider([]))

    with pytest.raises(NoDataError):
        await service.execute()


async def test_provider_error_propagates(monkeypatch, service):
    error = ExternalAPIError("YahooFinance", "down")
    monkeypatch.setattr(
        ingestion_module, "fetch_nifty_history", FakeProvider([], error=error)
    )

    with pytest.raises(ExternalAPIError):
        await service.execute()


async def test_health_check(monkeypatch, service, make_candles):
    monkeypatch.setattr(
        ingestion_module, "fetch_nifty_history", FakeProvider(make_candles([100.0]))
    )
    assert await service.health_check() is True

    monkeypatch.setattr(
        ingestion_module,
        "fetch_nifty_history",
        FakeProvider([], error=ExternalAPIError("YahooFinance", "down")),
    )
    assert await service.health_check() is False
