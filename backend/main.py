# main.py
"""
Healthcare dashboard API

Facility locator (ambulances, blood banks), appointments, pharmacy,
medical reports with AI summaries, activity timeline and dashboard data.

Run from backend/:
    python main.py
    uvicorn main:app --reload --port 3001
"""

from contextlib import asynccontextmanager
from datetime import datetime

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import activities, ambulance, appointments, blood_bank, dashboard, pharmacy, reports
from utils.config import get_settings
from utils.logger import logger
from utils.session_manager import get_session_count

load_dotenv()

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown logging"""
    logger.info("🚀 [App] Healthcare dashboard API starting")
    if not settings.GOOGLE_MAPS_API_KEY:
        logger.warning("⚠️ [App] GOOGLE_MAPS_API_KEY not set - locator uses static directories only")
    if not settings.report_api_key:
        logger.warning("⚠️ [App] No LLM API key set - report analysis will fail with 'API key not configured'")

    yield

    logger.info(f"👋 [App] Shutting down ({get_session_count()} cached location sessions dropped)")


app = FastAPI(
    title="Healthcare Dashboard API",
    description="Facility locator, appointments, pharmacy and medical report analysis",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ambulance.router)
app.include_router(blood_bank.router)
app.include_router(appointments.router)
app.include_router(pharmacy.router)
app.include_router(reports.router)
app.include_router(activities.router)
app.include_router(dashboard.router)


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "location_sessions": get_session_count()
    }


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.PORT, reload=settings.DEBUG)
