"""
Data Ingestion Service

CONTRACT:
    Input:  DataRequest
    Output: NiftyChartData

RESPONSIBILITIES:
    - Fetch NIFTY 50 daily OHLCV from Yahoo Finance
    - Drop incomplete rows, order by ascending date
    - Cache responses for a short freshness window

NO ANALYSIS HERE - Pure data fetching and transformation.
"""

from niftypulse.services.data_ingestion.interface import (
    DataIngestionServiceInterface,
    DataRequest,
)
from niftypulse.services.data_ingestion.service import (
    DataIngestionService,
    get_data_ingestion_service,
)

__all__ = [
    "DataIngestionServiceInterface",
    "DataRequest",
    "DataIngestionService",
    "get_data_ingestion_service",
]
