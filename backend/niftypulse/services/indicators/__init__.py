"""
Indicator Engine Service

CONTRACT:
    Input:  list[Candle]
    Output: list[IndicatorPoint]

RESPONSIBILITIES:
    - Rolling simple moving averages (10/20/50)
    - 14-period RSI (simple-average variant)

PURE PYTHON - Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from niftypulse.services.indicators.interface import IndicatorServiceInterface
from niftypulse.services.indicators.service import (
    IndicatorService,
    add_indicators,
    get_indicator_service,
)

__all__ = [
    "IndicatorServiceInterface",
    "IndicatorService",
    "add_indicators",
    "get_indicator_service",
]
