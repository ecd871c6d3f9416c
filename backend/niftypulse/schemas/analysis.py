"""
CONTRACT 3: Analysis Summarizer

Input: list[Candle]
Output: AnalysisRecord

Single-shot summary of the latest session: trend bias, momentum,
support/resistance zones, a confidence label and the next-move narrative.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from niftypulse.schemas.indicators import IndicatorPoint
from niftypulse.schemas.market import ChartMeta


# =============================================================================
# ENUMS
# =============================================================================


class Bias(str, Enum):
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# =============================================================================
# OUTPUT: AnalysisRecord
# =============================================================================


class AnalysisRecord(BaseModel):
    """Summary derived from the full candle sequence's last point."""

    last_close: float
    previous_close: Optional[float] = None
    daily_change_pct: Optional[float] = None
    bias: Bias = Bias.NEUTRAL
    momentum_pct_5day: Optional[float] = None
    rsi14: Optional[float] = None
    support_zone: Optional[float] = None
    resistance_zone: Optional[float] = None
    next_move_headline: str
    narrative: str
    confidence: Confidence = Confidence.MEDIUM


class NiftyAnalysisResponse(BaseModel):
    """API payload: enriched chart points plus the analysis record."""

    symbol: str
    points: list[IndicatorPoint]
    analysis: AnalysisRecord
    meta: Optional[ChartMeta] = None
    source: str = Field(default="Yahoo Finance")
    fetched_at: datetime
