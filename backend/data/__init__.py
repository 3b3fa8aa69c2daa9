# data/__init__.py
"""
data package: static facility directories and region rules
"""
