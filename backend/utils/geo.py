# utils/geo.py
"""
Geo helpers

Haversine distance and simple geofence checks shared by the ambulance and
blood bank locators.
"""

import math
from typing import Tuple

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in km between two WGS84 points (unrounded)"""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def calculate_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Distance in km rounded to one decimal place

    Args:
        lat1, lng1: first point (degrees)
        lat2, lng2: second point (degrees)

    Returns:
        e.g. 1153.2
    """
    return round(haversine_km(lat1, lng1, lat2, lng2), 1)


def in_bounding_box(lat: float, lng: float, box: Tuple[float, float, float, float]) -> bool:
    """box = (min_lat, max_lat, min_lng, max_lng), exclusive bounds"""
    min_lat, max_lat, min_lng, max_lng = box
    return min_lat < lat < max_lat and min_lng < lng < max_lng


def within_radius(lat: float, lng: float, center: Tuple[float, float], radius_km: float) -> bool:
    return haversine_km(lat, lng, center[0], center[1]) < radius_km
