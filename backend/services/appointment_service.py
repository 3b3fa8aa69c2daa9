# services/appointment_service.py
"""
Appointment Service

Appointment CRUD over the in-memory store. Ids are 9-char random strings.
Dates are ISO "YYYY-MM-DD" strings, so plain string comparison orders them.
"""

from collections import Counter
from datetime import date
from typing import Any, Dict, List, Optional

from models.record_schema import AppointmentCreate, AppointmentUpdate
from utils.logger import logger
from utils.store import get_collection

STATUSES = ("upcoming", "completed", "cancelled")


class AppointmentService:

    def __init__(self):
        self.appointments = get_collection("appointments")

    def list_appointments(self, status: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Appointments, optionally filtered by status

        Args:
            status: "upcoming" | "completed" | "cancelled"; None or "all" = no filter
        """
        records = self.appointments.all()
        if not status or status.lower() == "all":
            return records
        wanted = status.lower()
        return [a for a in records if a["status"].lower() == wanted]

    def get_appointment(self, appointment_id: str) -> Dict[str, Any]:
        return self.appointments.get(appointment_id)

    def create_appointment(self, appointment: AppointmentCreate) -> Dict[str, Any]:
        record = self.appointments.insert(appointment.model_dump())
        logger.info(
            f"📅 [Appointment] created {record['id']}: {record['patient_name']} with "
            f"{record['doctor_name']} on {record['appointment_date']}"
        )
        return record

    def update_appointment(self, appointment_id: str, updates: AppointmentUpdate) -> Dict[str, Any]:
        """Partial update, only fields the client actually sent"""
        return self.appointments.patch(appointment_id, updates.model_dump(exclude_unset=True))

    def cancel_appointment(self, appointment_id: str) -> Dict[str, Any]:
        return self.appointments.patch(appointment_id, {"status": "cancelled"})

    def delete_appointment(self, appointment_id: str):
        self.appointments.delete(appointment_id)

    def by_date_range(self, start_date: str, end_date: str) -> List[Dict[str, Any]]:
        """Appointments with start_date <= appointment_date <= end_date"""
        return self.appointments.filter(lambda a: start_date <= a["appointment_date"] <= end_date)

    def stats(self, today: Optional[date] = None) -> Dict[str, int]:
        """
        Header counters for the appointments page

        Returns:
            {
                "total": int,
                "upcoming": int, "completed": int, "cancelled": int,  # by status
                "today": int,          # scheduled today
                "future": int,         # scheduled after today
                "this_month": int      # scheduled in the current month
            }
        """
        records = self.appointments.all()
        today_str = (today or date.today()).isoformat()
        month_prefix = today_str[:7]

        by_status = Counter(a["status"].lower() for a in records)
        result = {"total": len(records)}
        result.update({s: by_status.get(s, 0) for s in STATUSES})
        result["today"] = sum(1 for a in records if a["appointment_date"] == today_str)
        result["future"] = sum(1 for a in records if a["appointment_date"] > today_str)
        result["this_month"] = sum(1 for a in records if a["appointment_date"].startswith(month_prefix))
        return result


# Singleton instance
_appointment_service: Optional[AppointmentService] = None


def get_appointment_service() -> AppointmentService:
    """Return the AppointmentService singleton"""
    global _appointment_service
    if _appointment_service is None:
        _appointment_service = AppointmentService()
    return _appointment_service
