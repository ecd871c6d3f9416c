"""
Analysis Summarizer Service Interface

Defines the contract for the next-move analysis layer.
"""

from abc import abstractmethod

from niftypulse.services.base import BaseService
from niftypulse.schemas.market import Candle
from niftypulse.schemas.analysis import AnalysisRecord


class AnalysisServiceInterface(BaseService[list[Candle], AnalysisRecord]):
    """
    Analysis Summarizer Service Contract.

    INPUT: list[Candle]
        - Daily candles in ascending date order, at least one

    OUTPUT: AnalysisRecord
        - Closes, daily change, 5-day momentum, RSI
        - Support/resistance zones
        - Bias, confidence, headline and narrative
    """

    @property
    def name(self) -> str:
        return "AnalysisService"

    @abstractmethod
    async def execute(self, input_data: list[Candle]) -> AnalysisRecord:
        """Summarize the candle sequence. Raises NoDataError when empty."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        pass
