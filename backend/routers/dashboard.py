# routers/dashboard.py
"""
Dashboard Router - home page payload
"""

from fastapi import APIRouter, HTTPException

from services.dashboard_service import get_dashboard_data
from utils.logger import logger

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"]
)


@router.get(
    "",
    summary="Dashboard data",
    description="Default stats and charts overlaid with live appointment and stock data."
)
async def dashboard():
    try:
        return get_dashboard_data()
    except Exception as e:
        logger.error(f"❌ [Dashboard] error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch dashboard data")
