"""
Data Ingestion Service Implementation

Fetches and normalizes the NIFTY 50 daily history.
Primary: Yahoo Finance (free, real data)
Results are cached for a short freshness window.
"""

from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo
import logging

from niftypulse.core.config import Settings, settings as default_settings
from niftypulse.schemas.market import NiftyChartData
from niftypulse.services.base import NoDataError
from niftypulse.services.cache.redis_client import ChartCache, get_chart_cache
from niftypulse.services.data_ingestion.interface import (
    DataIngestionServiceInterface,
    DataRequest,
)
from niftypulse.services.data_ingestion.yahoo_adapter import fetch_nifty_history

logger = logging.getLogger(__name__)
IST = ZoneInfo("Asia/Kolkata")


class DataIngestionService(DataIngestionServiceInterface):
    """
    Data Ingestion Service.

    Pulls the configured index from Yahoo Finance and serves repeat
    requests from the chart cache until the freshness window lapses.
    """

    def __init__(
        self,
        cache: Optional[ChartCache] = None,
        config: Optional[Settings] = None,
    ):
        self._cache = cache or get_chart_cache()
        self._settings = config or default_settings

    @property
    def name(self) -> str:
        return "DataIngestionService"

    async def execute(self, input_data: Optional[DataRequest] = None) -> NiftyChartData:
        """
        Fetch the index history.

        Raises:
            ExternalAPIError: If Yahoo Finance fails
            NoDataError: If no usable candles come back
        """
        request = input_data or DataRequest()
        symbol = self._settings.nifty_symbol
        interval = self._settings.history_interval

        if not request.force_refresh:
            cached = await self._cache.get_cached_chart_data(symbol, interval)
            if cached:
                logger.debug(f"Serving {symbol} from cache")
                return NiftyChartData.model_validate(cached)

        candles, meta = await fetch_nifty_history(
            symbol=symbol,
            period=self._settings.history_range,
            interval=interval,
        )

        if not candles:
            raise NoDataError(self.name, "No candle data available for Nifty")

        data = NiftyChartData(
            symbol=symbol,
            candles=candles,
            meta=meta,
            source=self._settings.data_source,
            fetched_at=datetime.now(IST),
        )

        await self._cache.cache_chart_data(
            symbol,
            interval,
            data.model_dump(mode="json"),
            ttl=self._settings.cache_ttl_seconds,
        )
        logger.info(f"Fetched {len(candles)} candles for {symbol}")
        return data

    async def health_check(self) -> bool:
        """Check that Yahoo Finance returns data for the index."""
        try:
            candles, _ = await fetch_nifty_history(
                symbol=self._settings.nifty_symbol,
                period="5d",
                interval=self._settings.history_interval,
            )
            return bool(candles)
        except Exception as e:
            logger.warning(f"Health check failed: {e}")
            return False


# Singleton instance
_service_instance: Optional[DataIngestionService] = None


def get_data_ingestion_service() -> DataIngestionService:
    """Get or create data ingestion service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = DataIngestionService()
    return _service_instance
