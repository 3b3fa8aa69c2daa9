# services/dashboard_service.py
"""
Dashboard Service

Home page payload: fixed defaults overlaid with whatever the stores
currently hold. Any store failure leaves the defaults in place.
"""

import copy
from datetime import date
from typing import Any, Dict

from services.appointment_service import get_appointment_service
from services.medicine_service import LOW_STOCK, OUT_OF_STOCK, get_medicine_service
from utils.logger import logger

MAX_RUNNING_OUT = 8

DEFAULT_DASHBOARD: Dict[str, Any] = {
    "user": {
        "first_name": "Guest",
        "last_name": "User",
        "profile_picture": "/assets/avatar.png",
    },
    "stats": {
        "total_patients": "200K",
        "total_staff": "120K",
        "total_rooms": "160K",
        "appointments": "0",
        "assigned_doctors": "0",
        "hospital_visits": "0",
    },
    "medicines": [
        {"id": 1, "name": "Amoxicline", "date": "12 Jan 2022"},
        {"id": 2, "name": "Baclofen", "date": "13 Feb 2022"},
        {"id": 3, "name": "Cefuroxime", "date": "14 Mar 2022"},
        {"id": 4, "name": "Diazepam", "date": "15 Apr 2022"},
        {"id": 5, "name": "Estrogen", "date": "16 May 2022"},
        {"id": 6, "name": "Finasteride", "date": "17 Jun 2022"},
        {"id": 7, "name": "Glycerol", "date": "18 Jul 2022"},
        {"id": 8, "name": "Metformin", "date": "19 Aug 2022"},
    ],
    "prescription_data": {
        "months": ["Jan", "Feb", "Mar", "Apr", "May"],
        "values": [160, 240, 190, 70, 190],
    },
}


def format_expiry(expiry: str) -> str:
    """'2025-03-07' → '07 Mar 2025' (unparseable dates are passed through)"""
    try:
        return date.fromisoformat(expiry[:10]).strftime("%d %b %Y")
    except ValueError:
        return expiry


def get_dashboard_data() -> Dict[str, Any]:
    """Defaults + live appointment count + medicines running out"""
    data = copy.deepcopy(DEFAULT_DASHBOARD)

    try:
        appointments = get_appointment_service().list_appointments()
        data["stats"]["appointments"] = str(len(appointments))

        running_out = [
            m for m in get_medicine_service().list_medicines()
            if m["status"] in (LOW_STOCK, OUT_OF_STOCK)
        ][:MAX_RUNNING_OUT]
        if running_out:
            data["medicines"] = [
                {"id": index, "name": m["name"], "date": format_expiry(m["expiry_date"])}
                for index, m in enumerate(running_out, start=1)
            ]

    except Exception as e:
        logger.error(f"❌ [Dashboard] live data unavailable, using defaults: {e}")
        return copy.deepcopy(DEFAULT_DASHBOARD)

    return data
