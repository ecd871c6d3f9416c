"""
Analysis Summarizer Service Implementation

Derives trend bias, momentum, support/resistance, confidence and the
next-move narrative from the latest enriched candle.
No hidden state: the record is a pure function of the candle sequence.
"""

import logging
from typing import Optional, Sequence
import numpy as np

from niftypulse.schemas.market import Candle
from niftypulse.schemas.analysis import AnalysisRecord, Bias, Confidence
from niftypulse.services.base import NoDataError
from niftypulse.services.analysis.interface import AnalysisServiceInterface
from niftypulse.services.analysis.narrative import (
    NarrativeContext,
    RSI_OVERBOUGHT,
    RSI_OVERSOLD,
    select_narrative,
)
from niftypulse.services.indicators.calculations import (
    percent_change,
    round2,
    trailing_range,
)
from niftypulse.services.indicators.service import add_indicators

logger = logging.getLogger(__name__)

MOMENTUM_LOOKBACK = 5
LEVELS_LOOKBACK = 15

# Confidence thresholds
NEAR_SMA_DISTANCE = 0.005
CONVERGED_AVERAGES = 0.003
STRETCHED_DISTANCE = 0.02


def classify_bias(
    last_close: float, sma20: Optional[float], sma50: Optional[float]
) -> Bias:
    """Price vs. the 20/50-day averages."""
    # A computed average of exactly 0 counts as missing here
    if not (sma20 and sma50):
        return Bias.NEUTRAL

    if last_close > sma20 and sma20 > sma50:
        return Bias.BULLISH
    if last_close < sma20 and sma20 < sma50:
        return Bias.BEARISH
    return Bias.NEUTRAL


def classify_confidence(
    last_close: float,
    rsi14: Optional[float],
    sma20: Optional[float],
    sma50: Optional[float],
) -> Confidence:
    """
    Confidence label.

    LOW when price hugs a flat pair of averages, HIGH when price is
    stretched from the 20-day average or RSI is extreme. LOW is checked
    first.
    """
    if rsi14 is None or sma20 is None or sma50 is None:
        return Confidence.MEDIUM

    distance_from_sma = abs((last_close - sma20) / sma20)
    averages_gap = abs((sma20 - sma50) / sma50)

    if distance_from_sma < NEAR_SMA_DISTANCE and averages_gap < CONVERGED_AVERAGES:
        return Confidence.LOW
    if (
        distance_from_sma > STRETCHED_DISTANCE
        or rsi14 > RSI_OVERBOUGHT
        or rsi14 < RSI_OVERSOLD
    ):
        return Confidence.HIGH
    return Confidence.MEDIUM


def analyze_nifty(candles: Sequence[Candle]) -> AnalysisRecord:
    """
    Summarize the latest session of the index.

    Raises:
        NoDataError: If ``candles`` is empty
    """
    if not candles:
        raise NoDataError("AnalysisService", "No candles provided for analysis")

    enriched = add_indicators(candles)
    last_point = enriched[-1]
    previous_point = enriched[-2] if len(enriched) > 1 else None

    last_close = round2(last_point.close)
    previous_close = round2(previous_point.close) if previous_point else None
    daily_change_pct = (
        percent_change(last_point.close, previous_point.close)
        if previous_point
        else None
    )

    rsi14 = last_point.rsi14
    sma20 = last_point.sma20
    sma50 = last_point.sma50

    # Candle five sessions back, or the first candle on short history
    reference = (
        candles[-(MOMENTUM_LOOKBACK + 1)]
        if len(candles) > MOMENTUM_LOOKBACK
        else candles[0]
    )
    momentum_pct_5day = percent_change(last_point.close, reference.close)

    highs = np.array([c.high for c in candles], dtype=float)
    lows = np.array([c.low for c in candles], dtype=float)
    support_zone, resistance_zone = trailing_range(highs, lows, LEVELS_LOOKBACK)

    bias = classify_bias(last_close, sma20, sma50)
    confidence = classify_confidence(last_close, rsi14, sma20, sma50)

    headline, narrative = select_narrative(
        bias,
        NarrativeContext(
            momentum_pct_5day=momentum_pct_5day,
            rsi14=rsi14,
            sma20=sma20,
            support_zone=support_zone,
            resistance_zone=resistance_zone,
        ),
    )

    logger.debug(
        f"Analysis for {last_point.date}: bias={bias.value} "
        f"confidence={confidence.value} rsi14={rsi14}"
    )

    return AnalysisRecord(
        last_close=last_close,
        previous_close=previous_close,
        daily_change_pct=daily_change_pct,
        bias=bias,
        momentum_pct_5day=momentum_pct_5day,
        rsi14=rsi14,
        support_zone=support_zone,
        resistance_zone=resistance_zone,
        next_move_headline=headline,
        narrative=narrative,
        confidence=confidence,
    )


class AnalysisService(AnalysisServiceInterface):
    """
    Analysis Summarizer Service.

    Stateless: every call recomputes indicators from the full window.
    """

    @property
    def name(self) -> str:
        return "AnalysisService"

    async def execute(self, input_data: list[Candle]) -> AnalysisRecord:
        """Summarize the candle sequence."""
        return analyze_nifty(input_data)

    async def health_check(self) -> bool:
        """Analysis service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[AnalysisService] = None


def get_analysis_service() -> AnalysisService:
    """Get or create analysis service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AnalysisService()
    return _service_instance
