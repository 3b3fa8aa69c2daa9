# services/map_service.py

"""
Map Service

Google Maps marker payloads, proximity labels and directions links
for the locator pages
"""

from typing import Any, Dict, List, Optional, Sequence

from data.regions import DEFAULT_CENTER
from models.facility_schema import Coordinate, Facility, FacilityCard
from utils.logger import logger

DIRECTIONS_URL = "https://www.google.com/maps/dir/?api=1&destination={lat},{lng}"

ZOOM_WITH_LOCATION = 13
ZOOM_COUNTRY = 5

# (upper bound km, label), checked in order
PROXIMITY_BANDS = [
    (5, "Very nearby"),
    (15, "Nearby"),
    (30, "In your region"),
]


def proximity_label(distance_km: float) -> str:
    for limit, label in PROXIMITY_BANDS:
        if distance_km <= limit:
            return label
    return "Further away"


def directions_url(lat: float, lng: float) -> str:
    """Google Maps directions link to a facility"""
    return DIRECTIONS_URL.format(lat=lat, lng=lng)


def build_cards(facilities: Sequence[Facility]) -> List[FacilityCard]:
    """Display extras, index-aligned with the facility list"""
    return [
        FacilityCard(
            proximity=proximity_label(f.distance),
            directions_url=directions_url(f.latitude, f.longitude),
        )
        for f in facilities
    ]


def _marker(facility: Facility, kind: str) -> Dict[str, Any]:
    return {
        "id": facility.id,
        "name": facility.name,
        "lat": facility.latitude,
        "lng": facility.longitude,
        "kind": kind,
        "desc": f"{facility.address} ({facility.distance} km)" if facility.address else f"{facility.distance} km",
    }


def build_map_data(
    user: Optional[Coordinate],
    facilities: Sequence[Facility],
    hospitals: Sequence[Facility] = (),
    kind: str = "blood_bank",
) -> Dict[str, Any]:
    """
    Map payload for the client

    Args:
        user: user coordinate, None when location is unavailable
        facilities: ranked facilities (primary markers)
        hospitals: secondary markers
        kind: marker kind of the primary facilities

    Returns:
        {
            "center": {"lat": float, "lng": float},
            "zoom": int,
            "user": {"lat": float, "lng": float} | None,
            "markers": [
                {"id": str, "name": str, "lat": float, "lng": float, "kind": str, "desc": str}
            ],
            "link": str  # directions to the nearest facility
        }
    """
    if user is not None:
        center = {"lat": user.lat, "lng": user.lng}
        zoom = ZOOM_WITH_LOCATION
    else:
        center = dict(DEFAULT_CENTER)
        zoom = ZOOM_COUNTRY

    markers = [_marker(f, kind) for f in facilities]
    markers.extend(_marker(h, "hospital") for h in hospitals)

    link = ""
    if facilities:
        nearest = facilities[0]
        link = directions_url(nearest.latitude, nearest.longitude)
    else:
        logger.warning("⚠️ [Map] no facilities to mark")

    logger.info(f"🗺️ [Map] {len(markers)} markers, center ({center['lat']:.4f}, {center['lng']:.4f}), zoom {zoom}")

    return {
        "center": center,
        "zoom": zoom,
        "user": center if user is not None else None,
        "markers": markers,
        "link": link,
    }
