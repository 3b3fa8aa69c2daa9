# routers/ambulance.py
"""
Ambulance Router - nearby ambulance services
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from data.regions import EMERGENCY_HELPLINES
from models.facility_schema import AmbulanceSearchResponse
from services.facility_service import list_static_ambulances, locate_ambulances
from utils.logger import logger
from utils.session_manager import cleanup_old_sessions, clear_session, get_cached_result, save_result

FEATURE = "ambulance"

router = APIRouter(
    prefix="/ambulance",
    tags=["Ambulance"]
)


@router.get(
    "/nearby",
    response_model=AmbulanceSearchResponse,
    summary="Nearby ambulance services",
    description="Ranks live and directory ambulance services by distance and city match."
)
async def nearby_ambulances(
    lat: float = Query(..., ge=-90, le=90, description="User latitude"),
    lng: float = Query(..., ge=-180, le=180, description="User longitude"),
    session_id: Optional[str] = Query(None, description="Client session id for location caching")
) -> AmbulanceSearchResponse:
    """
    1. Reuse the session's last result if the user has not really moved
    2. Otherwise run a fresh search and cache it
    """
    if session_id:
        cached = get_cached_result(FEATURE, session_id, lat, lng)
        if cached is not None:
            return cached

    try:
        logger.info(f"🚑 [Ambulance] search at ({lat}, {lng})")
        result = await locate_ambulances(lat, lng)
    except Exception as e:
        logger.error(f"❌ [Ambulance] search error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error finding ambulance services. Please try again.")

    if session_id:
        save_result(FEATURE, session_id, lat, lng, result)
        cleanup_old_sessions()
    return result


@router.get(
    "/services",
    summary="Ambulance directory",
    description="Every ambulance service in the directory, unranked (for when location is unavailable)."
)
async def all_ambulance_services():
    services = list_static_ambulances()
    return {
        "success": True,
        "message": "Location unavailable. Showing all ambulance services in our directory.",
        "results": services,
        "total_found": len(services)
    }


@router.get(
    "/helplines",
    summary="Emergency helplines"
)
async def helplines():
    return {"success": True, "helplines": EMERGENCY_HELPLINES}


@router.delete(
    "/sessions/{session_id}",
    summary="Forget a location session"
)
async def delete_session(session_id: str):
    clear_session(session_id)
    return {"success": True, "session_id": session_id}
