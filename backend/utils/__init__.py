# utils/__init__.py
"""
utils package: shared helpers
- config.py
- logger.py
- geo.py
- store.py
- session_manager.py
"""

__all__ = ["get_settings", "logger", "calculate_distance", "get_collection"]
