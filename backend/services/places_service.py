# services/places_service.py
"""
Places Service

Google Places Nearby Search for live facility candidates.
An empty list means "no live data" and the caller uses the static
directory on its own.
"""

from typing import Any, Dict, List, Optional

import requests

from utils.config import get_settings
from utils.logger import logger

NEARBY_SEARCH_URL = "https://maps.googleapis.com/maps/api/place/nearbysearch/json"

# Places statuses that carry no usable results but are not failures
EMPTY_STATUSES = {"ZERO_RESULTS"}


def search_nearby(lat: float, lng: float, keyword: str, radius_m: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    Nearby search around the user

    Args:
        lat, lng: user coordinate
        keyword: "blood bank", "ambulance service", ...
        radius_m: search radius in metres (defaults to PLACES_SEARCH_RADIUS_M)

    Returns:
        [
            {
                "place_id": str,
                "name": str,
                "vicinity": str,
                "lat": float,
                "lng": float,
                "open_now": bool | None
            }
        ]
    """
    settings = get_settings()
    api_key = settings.GOOGLE_MAPS_API_KEY
    if not api_key:
        logger.warning(f"⚠️ [Places] API key missing - static data only ({keyword})")
        return []

    params = {
        "location": f"{lat},{lng}",
        "radius": radius_m or settings.PLACES_SEARCH_RADIUS_M,
        "keyword": keyword,
        "key": api_key,
    }

    try:
        logger.info(f"🔍 [Places] nearby search '{keyword}' around ({lat:.4f}, {lng:.4f})")
        response = requests.get(NEARBY_SEARCH_URL, params=params, timeout=settings.HTTP_TIMEOUT)
        response.raise_for_status()
        data = response.json()

    except requests.exceptions.Timeout:
        logger.error(f"❌ [Places] timeout: {keyword}")
        return []

    except requests.exceptions.HTTPError as e:
        logger.error(f"❌ [Places] HTTP error {e.response.status_code}: {keyword}")
        return []

    except (requests.exceptions.RequestException, ValueError) as e:
        logger.error(f"❌ [Places] request failed: {keyword} - {e}")
        return []

    status = data.get("status")
    if status != "OK":
        if status not in EMPTY_STATUSES:
            logger.warning(f"⚠️ [Places] status {status}: {data.get('error_message', '')}")
        return []

    places = []
    for item in data.get("results", []):
        try:
            location = item["geometry"]["location"]
            places.append({
                "place_id": item["place_id"],
                "name": item.get("name", "Unknown"),
                "vicinity": item.get("vicinity", ""),
                "lat": float(location["lat"]),
                "lng": float(location["lng"]),
                "open_now": (item.get("opening_hours") or {}).get("open_now"),
            })
        except (KeyError, TypeError, ValueError):
            logger.debug(f"🧹 [Places] skipped malformed result: {item.get('name')}")

    logger.info(f"✅ [Places] {len(places)} live results for '{keyword}'")
    return places
