"""
Indicator Engine Service Implementation

Enriches daily candles with SMA(10/20/50) and RSI(14).
Pure Python/NumPy calculations, recomputed from scratch on every call.
"""

from typing import Optional, Sequence
import numpy as np

from niftypulse.schemas.market import Candle
from niftypulse.schemas.indicators import IndicatorPoint
from niftypulse.services.indicators.interface import IndicatorServiceInterface
from niftypulse.services.indicators.calculations import sma, rsi, to_optional

SMA_PERIODS = (10, 20, 50)
RSI_PERIOD = 14
CANDLE_FIELDS = set(Candle.model_fields)


def add_indicators(candles: Sequence[Candle]) -> list[IndicatorPoint]:
    """
    Build one IndicatorPoint per candle, in input order.

    Input candles are left untouched; an empty input gives an empty list.
    """
    if not candles:
        return []

    closes = np.array([c.close for c in candles], dtype=float)

    averages = {f"sma{period}": sma(closes, period) for period in SMA_PERIODS}
    rsi_values = rsi(closes, RSI_PERIOD)

    points = []
    for i, candle in enumerate(candles):
        points.append(
            IndicatorPoint(
                **candle.model_dump(include=CANDLE_FIELDS),
                **{key: to_optional(values[i]) for key, values in averages.items()},
                rsi14=to_optional(rsi_values[i]),
            )
        )
    return points


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Engine Service.

    All calculations are deterministic and reproducible.
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    async def execute(self, input_data: list[Candle]) -> list[IndicatorPoint]:
        """Enrich every candle with its indicator values."""
        return add_indicators(input_data)

    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get or create indicator service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = IndicatorService()
    return _service_instance
