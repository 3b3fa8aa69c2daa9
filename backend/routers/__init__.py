# routers/__init__.py
"""
routers package: API endpoint modules
- ambulance.py
- blood_bank.py
- appointments.py
- pharmacy.py
- reports.py
- activities.py
- dashboard.py
"""

__all__ = ["ambulance", "blood_bank", "appointments", "pharmacy", "reports", "activities", "dashboard"]
