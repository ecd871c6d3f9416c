"""
NIFTY API Endpoints

Daily candles and the next-move analysis for the NIFTY 50 index.
"""

import logging

from fastapi import APIRouter, HTTPException, Query

from niftypulse.schemas.market import NiftyChartData
from niftypulse.schemas.analysis import NiftyAnalysisResponse
from niftypulse.services.base import ExternalAPIError, NoDataError
from niftypulse.services.data_ingestion import DataRequest, get_data_ingestion_service
from niftypulse.services.indicators import get_indicator_service
from niftypulse.services.analysis import get_analysis_service

logger = logging.getLogger(__name__)

router = APIRouter()

UPSTREAM_ERROR_DETAIL = "Unable to retrieve Nifty data at this time"


async def _load_chart(refresh: bool) -> NiftyChartData:
    service = get_data_ingestion_service()
    try:
        return await service.execute(DataRequest(force_refresh=refresh))
    except NoDataError as e:
        logger.error(f"Failed to fetch Nifty data: {e}")
        raise HTTPException(status_code=404, detail=e.message)
    except ExternalAPIError as e:
        logger.error(f"Failed to fetch Nifty data: {e}")
        raise HTTPException(status_code=502, detail=UPSTREAM_ERROR_DETAIL)


@router.get("/candles", response_model=NiftyChartData)
async def get_nifty_candles(
    refresh: bool = Query(default=False, description="Bypass the freshness cache"),
):
    """
    Get the daily NIFTY 50 history.

    Returns:
        - Candles in ascending date order
        - Quote metadata (price, previous close, exchange)
        - Source and fetch time
    """
    return await _load_chart(refresh)


@router.get("/analysis", response_model=NiftyAnalysisResponse)
async def get_nifty_analysis(
    refresh: bool = Query(default=False, description="Bypass the freshness cache"),
):
    """
    Get indicator points and the next-move analysis.

    Returns:
        - Candles enriched with SMA10/20/50 and RSI14
        - Bias, momentum, support/resistance, confidence
        - Headline and narrative
    """
    chart = await _load_chart(refresh)

    points = await get_indicator_service().execute(chart.candles)
    try:
        analysis = await get_analysis_service().execute(chart.candles)
    except NoDataError as e:
        raise HTTPException(status_code=404, detail=e.message)

    return NiftyAnalysisResponse(
        symbol=chart.symbol,
        points=points,
        analysis=analysis,
        meta=chart.meta,
        source=chart.source,
        fetched_at=chart.fetched_at,
    )
