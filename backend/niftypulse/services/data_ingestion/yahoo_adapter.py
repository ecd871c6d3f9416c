"""
Yahoo Finance Data Adapter

Fetches daily NIFTY 50 history from Yahoo Finance.
The index symbol uses the caret form (^NSEI).
"""

import asyncio
import logging
import math
from datetime import datetime
from typing import Any, Optional
from zoneinfo import ZoneInfo

import yfinance as yf
from pydantic import ValidationError as SchemaValidationError

from niftypulse.schemas.market import Candle, ChartMeta
from niftypulse.services.base import ExternalAPIError

logger = logging.getLogger(__name__)
IST = ZoneInfo("Asia/Kolkata")

PRICE_COLUMNS = ["Open", "High", "Low", "Close"]


def _volume(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        volume = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(volume) or volume < 0:
        return None
    return int(volume)


def normalize_history(hist) -> list[Candle]:
    """
    Convert a yfinance history frame into ascending daily candles.

    Rows missing any OHLC value are dropped. High/low are widened to cover
    open and close when the provider reports a narrower range; rows that
    still do not form a valid candle (non-positive prices) are dropped.
    When two rows fall on the same date the later one wins.
    """
    if hist is None or hist.empty:
        return []

    missing = [col for col in PRICE_COLUMNS if col not in hist.columns]
    if missing:
        logger.warning(f"History frame missing columns: {missing}")
        return []

    frame = hist.dropna(subset=PRICE_COLUMNS).sort_index()

    by_date: dict = {}
    for idx, row in frame.iterrows():
        day = idx.date() if hasattr(idx, "date") else idx
        open_, high, low, close = (float(row[col]) for col in PRICE_COLUMNS)

        # Yahoo occasionally reports a high/low that excludes open or close
        if high < max(open_, low, close) or low > min(open_, high, close):
            logger.debug(f"Clamping high/low for {day}")
            high, low = max(open_, high, low, close), min(open_, high, low, close)

        try:
            by_date[day] = Candle(
                date=day,
                open=open_,
                high=high,
                low=low,
                close=close,
                volume=_volume(row.get("Volume")),
            )
        except SchemaValidationError as e:
            logger.warning(f"Skipping malformed candle for {day}: {e.error_count()} errors")

    return list(by_date.values())


def _market_time(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=IST)
    return None


def build_chart_meta(metadata: Optional[dict]) -> Optional[ChartMeta]:
    """Pick the quote fields the dashboard shows from yfinance metadata."""
    if not metadata:
        return None

    previous_close = metadata.get("previousClose")
    if previous_close is None:
        previous_close = metadata.get("chartPreviousClose")

    return ChartMeta(
        regular_market_price=metadata.get("regularMarketPrice"),
        previous_close=previous_close,
        currency=metadata.get("currency"),
        exchange_name=metadata.get("exchangeName"),
        regular_market_time=_market_time(metadata.get("regularMarketTime")),
    )


def _download(yahoo_symbol: str, period: str, interval: str):
    """Blocking yfinance call; run on a worker thread."""
    ticker = yf.Ticker(yahoo_symbol)
    hist = ticker.history(period=period, interval=interval, auto_adjust=False)

    metadata = None
    try:
        metadata = ticker.history_metadata
    except Exception as e:
        logger.debug(f"Could not get history metadata: {e}")

    return hist, metadata


async def fetch_nifty_history(
    symbol: str = "^NSEI",
    period: str = "6mo",
    interval: str = "1d",
) -> tuple[list[Candle], Optional[ChartMeta]]:
    """
    Fetch daily history from Yahoo Finance.

    Args:
        symbol: Yahoo index symbol (e.g., "^NSEI")
        period: History range (e.g., "6mo")
        interval: Candle interval (e.g., "1d")

    Returns:
        (candles, meta); candles may be empty

    Raises:
        ExternalAPIError: If the provider call fails
    """
    yahoo_symbol = symbol.strip()
    logger.info(f"Fetching {yahoo_symbol} ({period}, {interval}) from Yahoo Finance...")

    try:
        hist, metadata = await asyncio.to_thread(_download, yahoo_symbol, period, interval)
    except Exception as e:
        logger.error(f"Error fetching {yahoo_symbol} from Yahoo Finance: {e}")
        raise ExternalAPIError(
            "YahooFinance",
            f"Yahoo Finance request failed for {yahoo_symbol}",
            {"error": str(e)},
        ) from e

    candles = normalize_history(hist)
    if not candles:
        logger.warning(f"No data returned for {yahoo_symbol}")

    return candles, build_chart_meta(metadata)
