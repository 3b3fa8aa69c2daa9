# models/__init__.py
"""
models package: Pydantic schemas
- facility_schema.py
- record_schema.py
"""

__all__ = ["facility_schema", "record_schema"]
