# routers/blood_bank.py
"""
Blood Bank Router - nearby blood banks, inventory and enquiries
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from data.blood_bank import BLOOD_INVENTORY
from models.facility_schema import BloodBankSearchResponse, BloodEnquiryRequest, BloodTypeData
from services.activity_service import get_activity_service
from services.facility_service import locate_blood_banks
from utils.logger import logger
from utils.session_manager import cleanup_old_sessions, get_cached_result, save_result

FEATURE = "blood_bank"

router = APIRouter(
    prefix="/blood-bank",
    tags=["Blood Bank"]
)


@router.get(
    "/nearby",
    response_model=BloodBankSearchResponse,
    summary="Nearby blood banks",
    description="Blood banks in two radius tiers plus hospitals for the map."
)
async def nearby_blood_banks(
    lat: float = Query(..., ge=-90, le=90, description="User latitude"),
    lng: float = Query(..., ge=-180, le=180, description="User longitude"),
    session_id: Optional[str] = Query(None, description="Client session id for location caching")
) -> BloodBankSearchResponse:
    if session_id:
        cached = get_cached_result(FEATURE, session_id, lat, lng)
        if cached is not None:
            return cached

    try:
        logger.info(f"🩸 [BloodBank] search at ({lat}, {lng})")
        result = await locate_blood_banks(lat, lng)
    except Exception as e:
        logger.error(f"❌ [BloodBank] search error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error finding blood banks. Please try again.")

    if session_id:
        save_result(FEATURE, session_id, lat, lng, result)
        cleanup_old_sessions()
    return result


@router.get(
    "/inventory",
    response_model=List[BloodTypeData],
    summary="Blood inventory snapshot"
)
async def blood_inventory() -> List[BloodTypeData]:
    return [BloodTypeData(**row) for row in BLOOD_INVENTORY]


@router.post(
    "/enquiries",
    status_code=201,
    summary="Blood requirement / donation enquiry",
    description="Records the enquiry as a blood-bank activity."
)
async def create_enquiry(request: BloodEnquiryRequest):
    if not request.accept_terms:
        raise HTTPException(status_code=400, detail="Please accept the terms to submit an enquiry.")

    label = "requirement" if request.purpose == "requirement" else "donation"
    activity = get_activity_service().record(
        activity_type="enquiry",
        title=f"Blood {label} enquiry ({request.blood_type})",
        description=f"{request.name} ({request.phone}) - {request.urgency} {label} for {request.blood_type}",
        category="blood-bank",
        status="urgent" if request.urgency == "urgent" else "pending",
        metadata={"notes": f"Contact: {request.phone}"},
    )
    logger.info(f"🩸 [BloodBank] enquiry recorded: {activity['id']} ({request.blood_type}, {request.urgency})")

    return {
        "success": True,
        "message": "Your enquiry has been submitted. A blood bank will contact you shortly.",
        "enquiry_id": activity["id"]
    }
