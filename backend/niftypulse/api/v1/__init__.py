"""
API v1 Router

All API endpoints for the frontend.
"""

from fastapi import APIRouter

from niftypulse.api.v1.endpoints import nifty

router = APIRouter()

# Include all endpoint routers
router.include_router(nifty.router, prefix="/nifty", tags=["Nifty"])
