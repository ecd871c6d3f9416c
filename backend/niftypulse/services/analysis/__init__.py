"""
Analysis Summarizer Service

CONTRACT:
    Input:  list[Candle]
    Output: AnalysisRecord

RESPONSIBILITIES:
    - Trend bias from price vs. SMA20/SMA50
    - 5-day momentum and daily change
    - Support/resistance zones from the trailing 15 sessions
    - Confidence label
    - Rule-based next-move headline and narrative
"""

from niftypulse.services.analysis.interface import AnalysisServiceInterface
from niftypulse.services.analysis.narrative import (
    NarrativeContext,
    select_narrative,
)
from niftypulse.services.analysis.service import (
    AnalysisService,
    analyze_nifty,
    get_analysis_service,
)

__all__ = [
    "AnalysisServiceInterface",
    "AnalysisService",
    "NarrativeContext",
    "analyze_nifty",
    "get_analysis_service",
    "select_narrative",
]
