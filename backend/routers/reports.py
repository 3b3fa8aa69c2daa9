# routers/reports.py
"""
Reports Router - medical report upload and AI analysis
"""

from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, HTTPException

from models.record_schema import AIAnalysis, Report, ReportUpload
from services.report_service import get_report_service
from utils.logger import logger
from utils.store import RecordNotFoundError

router = APIRouter(
    prefix="/reports",
    tags=["Reports"]
)


@router.get(
    "",
    response_model=List[Report],
    summary="List reports (most recently updated first)"
)
async def list_reports():
    return get_report_service().list_reports()


@router.post(
    "",
    response_model=Report,
    status_code=202,
    summary="Upload a report",
    description="Stores the report as Processing and runs the AI analysis in the background."
)
async def upload_report(upload: ReportUpload, background_tasks: BackgroundTasks):
    service = get_report_service()
    try:
        report = service.upload(upload)
    except Exception as e:
        logger.error(f"❌ [Report] upload failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to upload report.")

    background_tasks.add_task(service.run_analysis_task, report["id"])
    return report


@router.get(
    "/{report_id}",
    response_model=Report,
    summary="Get one report"
)
async def get_report(report_id: str):
    try:
        return get_report_service().get_report(report_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Report not found")


@router.post(
    "/{report_id}/insights",
    response_model=Optional[AIAnalysis],
    summary="Regenerate AI insights",
    description="Returns the current analysis (if any) and schedules a fresh one."
)
async def generate_insights(report_id: str, background_tasks: BackgroundTasks):
    service = get_report_service()
    try:
        current = service.generate_insights(report_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Report not found")

    background_tasks.add_task(service.run_analysis_task, report_id)
    return current


@router.delete(
    "/{report_id}",
    summary="Delete a report"
)
async def delete_report(report_id: str):
    try:
        get_report_service().delete_report(report_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Report not found")
    return {"success": True, "id": report_id}
