"""
CONTRACT 1: Data Ingestion Layer

Input: nothing (the tracked index is fixed by configuration)
Output: NiftyChartData

Daily candles for the NIFTY 50 index, normalized from the upstream
provider into ascending, de-duplicated, fully populated records.
"""

from datetime import date as Date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


# =============================================================================
# CANDLE
# =============================================================================


class Candle(BaseModel):
    """Single trading day for the tracked index."""

    model_config = ConfigDict(frozen=True)

    date: Date
    open: float = Field(..., gt=0)
    high: float = Field(..., gt=0)
    low: float = Field(..., gt=0)
    close: float = Field(..., gt=0)
    volume: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_range(self) -> "Candle":
        if self.high < max(self.open, self.close, self.low):
            raise ValueError("high must be >= open, close and low")
        if self.low > min(self.open, self.close, self.high):
            raise ValueError("low must be <= open, close and high")
        return self


# =============================================================================
# OUTPUT: NiftyChartData
# =============================================================================


class ChartMeta(BaseModel):
    """Quote metadata reported alongside the history."""

    regular_market_price: Optional[float] = None
    previous_close: Optional[float] = None
    currency: Optional[str] = None
    exchange_name: Optional[str] = None
    regular_market_time: Optional[datetime] = None


class NiftyChartData(BaseModel):
    """
    Candle history for the index.
    Sent by: Data Ingestion Service
    Received by: Indicator Engine / Analysis Summarizer / API
    """

    symbol: str
    candles: list[Candle]
    meta: Optional[ChartMeta] = None
    source: str = Field(default="Yahoo Finance")
    fetched_at: datetime
