# routers/appointments.py
"""
Appointments Router - appointment CRUD
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from models.record_schema import Appointment, AppointmentCreate, AppointmentUpdate
from services.appointment_service import get_appointment_service
from utils.logger import logger
from utils.store import RecordNotFoundError

router = APIRouter(
    prefix="/appointments",
    tags=["Appointments"]
)


@router.get(
    "",
    response_model=List[Appointment],
    summary="List appointments"
)
async def list_appointments(
    status: Optional[str] = Query(None, description="all | upcoming | completed | cancelled")
):
    return get_appointment_service().list_appointments(status)


@router.get(
    "/range",
    response_model=List[Appointment],
    summary="Appointments in a date range (inclusive)"
)
async def appointments_in_range(
    start_date: str = Query(..., description="YYYY-MM-DD"),
    end_date: str = Query(..., description="YYYY-MM-DD")
):
    if start_date > end_date:
        raise HTTPException(status_code=400, detail="start_date must not be after end_date")
    return get_appointment_service().by_date_range(start_date, end_date)


@router.get(
    "/stats",
    summary="Appointment counters"
)
async def appointment_stats():
    return get_appointment_service().stats()


@router.get(
    "/{appointment_id}",
    response_model=Appointment,
    summary="Get one appointment"
)
async def get_appointment(appointment_id: str):
    try:
        return get_appointment_service().get_appointment(appointment_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Appointment not found")


@router.post(
    "",
    response_model=Appointment,
    status_code=201,
    summary="Create an appointment"
)
async def create_appointment(appointment: AppointmentCreate):
    try:
        return get_appointment_service().create_appointment(appointment)
    except Exception as e:
        logger.error(f"❌ [Appointment] create failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create appointment.")


@router.patch(
    "/{appointment_id}",
    response_model=Appointment,
    summary="Update an appointment"
)
async def update_appointment(appointment_id: str, updates: AppointmentUpdate):
    try:
        return get_appointment_service().update_appointment(appointment_id, updates)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Appointment not found")


@router.post(
    "/{appointment_id}/cancel",
    response_model=Appointment,
    summary="Cancel an appointment"
)
async def cancel_appointment(appointment_id: str):
    try:
        return get_appointment_service().cancel_appointment(appointment_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Appointment not found")


@router.delete(
    "/{appointment_id}",
    summary="Delete an appointment"
)
async def delete_appointment(appointment_id: str):
    try:
        get_appointment_service().delete_appointment(appointment_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return {"success": True, "id": appointment_id}
