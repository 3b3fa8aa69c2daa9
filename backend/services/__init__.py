# services/__init__.py
"""
services package: business logic (locator, reports, records)
"""

__all__ = [
    "get_activity_service",
    "get_appointment_service",
    "get_dashboard_data",
    "get_llm_service",
    "get_medicine_service",
    "get_report_service",
    "locate_ambulances",
    "locate_blood_banks",
]
