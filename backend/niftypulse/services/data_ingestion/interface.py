"""
Data Ingestion Service Interface

Defines the contract for the data ingestion layer.
"""

from abc import abstractmethod
from dataclasses import dataclass

from niftypulse.services.base import BaseService
from niftypulse.schemas.market import NiftyChartData


@dataclass
class DataRequest:
    """Fetch options for the tracked index."""

    force_refresh: bool = False


class DataIngestionServiceInterface(BaseService[DataRequest, NiftyChartData]):
    """
    Data Ingestion Service Contract.

    INPUT: DataRequest
        - force_refresh: bypass the freshness cache

    OUTPUT: NiftyChartData
        - candles: ascending daily candles, incomplete rows removed
        - meta: quote metadata from the provider
        - source / fetched_at
    """

    @property
    def name(self) -> str:
        return "DataIngestionService"

    @abstractmethod
    async def execute(self, input_data: DataRequest) -> NiftyChartData:
        """Fetch and normalize the index history."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check connectivity to the data source."""
        pass
