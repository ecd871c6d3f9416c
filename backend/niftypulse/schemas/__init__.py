"""
NiftyPulse Schema Contracts

This module defines all JSON contracts between system components.
These are the authoritative interfaces - all modules must conform to these schemas.
"""

from niftypulse.schemas.market import (
    Candle,
    ChartMeta,
    NiftyChartData,
)
from niftypulse.schemas.indicators import IndicatorPoint
from niftypulse.schemas.analysis import (
    AnalysisRecord,
    Bias,
    Confidence,
    NiftyAnalysisResponse,
)

__all__ = [
    # Market
    "Candle",
    "ChartMeta",
    "NiftyChartData",
    # Indicators
    "IndicatorPoint",
    # Analysis
    "AnalysisRecord",
    "Bias",
    "Confidence",
    "NiftyAnalysisResponse",
]
