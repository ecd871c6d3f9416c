"""Tests for the HTTP API (ingestion service stubbed out)."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from niftypulse.main import app
from niftypulse.schemas.market import NiftyChartData
from niftypulse.services.base import ExternalAPIError, NoDataError
from niftypulse.api.v1.endpoints import nifty as nifty_endpoints


class FakeIngestion:
    def __init__(self, data=None, error=None):
        self.data = data
        self.error = error
        self.requests = []

    async def execute(self, request):
        self.requests.append(request)
        if self.error:
            raise self.error
        return self.data


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def stub_ingestion(monkeypatch):
    def install(fake):
        monkeypatch.setattr(nifty_endpoints, "get_data_ingestion_service", lambda: fake)
        return fake

    return install


@pytest.fixture
def chart(rising_candles):
    return NiftyChartData(
        symbol="^NSEI",
        candles=rising_candles,
        fetched_at=datetime(2024, 3, 1, tzinfo=timezone.utc),
    )


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_candles(client, stub_ingestion, chart):
    fake = stub_ingestion(FakeIngestion(chart))

    response = client.get("/api/v1/nifty/candles")

    assert response.status_code == 200
    body = response.json()
    assert body["symbol"] == "^NSEI"
    assert len(body["candles"]) == 60
    assert body["candles"][0]["date"] == "2024-01-01"
    assert body["source"] == "Yahoo Finance"
    assert fake.requests[0].force_refresh is False


def test_refresh_flag(client, stub_ingestion, chart):
    fake = stub_ingestion(FakeIngestion(chart))
    client.get("/api/v1/nifty/candles", params={"refresh": "true"})
    assert fake.requests[0].force_refresh is True


def test_analysis(client, stub_ingestion, chart):
    stub_ingestion(FakeIngestion(chart))

    response = client.get("/api/v1/nifty/analysis")

    assert response.status_code == 200
    body = response.json()
    assert len(body["points"]) == 60
    assert body["points"][0]["sma10"] is None
    assert body["points"][-1]["sma50"] == 169.0
    analysis = body["analysis"]
    assert analysis["bias"] == "bullish"
    assert analysis["confidence"] == "high"
    assert analysis["next_move_headline"] == "Uptrend extended but stretched"
    assert analysis["last_close"] == 218.0


def test_upstream_failure_is_502(client, stub_ingestion):
    stub_ingestion(FakeIngestion(error=ExternalAPIError("YahooFinance", "timeout")))

    for path in ("/api/v1/nifty/candles", "/api/v1/nifty/analysis"):
        response = client.get(path)
        assert response.status_code == 502
        assert response.json()["detail"] == "Unable to retrieve Nifty data at this time"


def test_no_data_is_404(client, stub_ingestion):
    stub_ingestion(
        FakeIngestion(error=NoDataError("DataIngestionService", "No candle data available for Nifty"))
    )

    response = client.get("/api/v1/nifty/analysis")
    assert response.status_code == 404
    assert response.json()["detail"] == "No candle data available for Nifty"
