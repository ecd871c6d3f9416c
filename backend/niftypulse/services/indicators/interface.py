"""
Indicator Engine Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod

from niftypulse.services.base import BaseService
from niftypulse.schemas.market import Candle
from niftypulse.schemas.indicators import IndicatorPoint


class IndicatorServiceInterface(BaseService[list[Candle], list[IndicatorPoint]]):
    """
    Indicator Engine Service Contract.

    INPUT: list[Candle]
        - Daily candles in ascending date order

    OUTPUT: list[IndicatorPoint]
        - One point per candle, same order
        - sma10 / sma20 / sma50 / rsi14, None until enough history
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    async def execute(self, input_data: list[Candle]) -> list[IndicatorPoint]:
        """Enrich every candle with its indicator values."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        pass
