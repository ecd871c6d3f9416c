"""
CONTRACT 2: Indicator Engine

Input: list[Candle]
Output: list[IndicatorPoint]

One point per candle, same order. Indicators that do not have enough
history yet are None, never 0 or NaN.
"""

from typing import Optional

from niftypulse.schemas.market import Candle


class IndicatorPoint(Candle):
    """A candle enriched with rolling averages and RSI."""

    sma10: Optional[float] = None
    sma20: Optional[float] = None
    sma50: Optional[float] = None
    rsi14: Optional[float] = None
