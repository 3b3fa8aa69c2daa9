# routers/activities.py
"""
Activities Router - activity timeline
"""

from typing import List, Optional

from fastapi import APIRouter, Query

from models.record_schema import Activity, ActivityCreate
from services.activity_service import get_activity_service

router = APIRouter(
    prefix="/activities",
    tags=["Activities"]
)


@router.get(
    "",
    response_model=List[Activity],
    summary="Activities, newest first",
    description="Filter by type or category (type wins when both are given)."
)
async def list_activities(
    type: Optional[str] = Query(None, description="e.g. order, enquiry, appointment"),
    category: Optional[str] = Query(None, description="e.g. pharmacy, blood-bank")
):
    service = get_activity_service()
    if type:
        return service.by_type(type)
    if category:
        return service.by_category(category)
    return service.list_activities()


@router.post(
    "",
    response_model=Activity,
    status_code=201,
    summary="Record an activity"
)
async def create_activity(activity: ActivityCreate):
    return get_activity_service().create(activity)
