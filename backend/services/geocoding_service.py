# services/geocoding_service.py
"""
Geocoding Service

Google Maps reverse geocoding + named-region overrides.
Resolves the user's coordinate to the city name the facility
directories are keyed by.
"""

from typing import Any, Dict, Optional, Tuple

import requests
from dotenv import load_dotenv

from data.regions import CITY_ALIASES, REGION_OVERRIDES
from models.facility_schema import CityContext
from utils.config import get_settings
from utils.geo import in_bounding_box, within_radius
from utils.logger import logger

load_dotenv()

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"

CITY_COMPONENT_TYPES = ("locality", "administrative_area_level_2")
STATE_COMPONENT_TYPE = "administrative_area_level_1"


def reverse_geocode(lat: float, lng: float) -> Optional[Dict[str, Any]]:
    """
    Raw Google reverse geocoding call

    Returns:
        Parsed JSON body, or None when no API key is configured / the call fails
    """
    settings = get_settings()
    api_key = settings.GOOGLE_MAPS_API_KEY
    if not api_key:
        logger.warning("⚠️ [Geocode] GOOGLE_MAPS_API_KEY missing - skipping reverse geocoding")
        return None

    params = {"latlng": f"{lat},{lng}", "key": api_key}
    try:
        logger.info(f"🔍 [Geocode] reverse geocode ({lat:.4f}, {lng:.4f})")
        response = requests.get(GEOCODE_URL, params=params, timeout=settings.HTTP_TIMEOUT)
        response.raise_for_status()
        return response.json()

    except requests.exceptions.Timeout:
        logger.error(f"❌ [Geocode] timeout: ({lat}, {lng})")
        return None

    except requests.exceptions.HTTPError as e:
        logger.error(f"❌ [Geocode] HTTP error {e.response.status_code}: ({lat}, {lng})")
        return None

    except (requests.exceptions.RequestException, ValueError) as e:
        logger.error(f"❌ [Geocode] request failed: ({lat}, {lng}) - {e}")
        return None


def parse_address_components(payload: Optional[Dict[str, Any]]) -> Tuple[Optional[str], Optional[str]]:
    """
    Pull (city, state) out of a geocoding response

    The first result carrying a `locality` or `administrative_area_level_2`
    component wins for the city; the state comes from the first
    `administrative_area_level_1` seen.
    """
    if not payload or payload.get("status") != "OK" or not payload.get("results"):
        return None, None

    city = None
    state = None
    for result in payload["results"]:
        for component in result.get("address_components", []):
            types = component.get("types", [])
            if city is None and any(t in types for t in CITY_COMPONENT_TYPES):
                city = component.get("long_name")
            if state is None and STATE_COMPONENT_TYPE in types:
                state = component.get("long_name")
        if city and state:
            break

    return city, state


def normalize_city(city: Optional[str]) -> Optional[str]:
    """Map geocoder spellings onto the directory's city names"""
    if not city:
        return None
    return CITY_ALIASES.get(city.strip().lower(), city.strip())


def apply_region_overrides(
    lat: float,
    lng: float,
    city: Optional[str],
    state: Optional[str],
) -> Tuple[Optional[str], bool]:
    """
    Apply the hardcoded region rules

    A geocoded city is only normalised, never replaced:
    - geocoded city names a region → that region's city
    - any other geocoded city is kept as is

    Without a geocoded city:
    1. Coordinate inside a region's bounding box → that region's city
    2. Geocoded state matches and the coordinate is within the landmark
       radius → that region's city

    Returns:
        (city, overridden)
    """
    if city:
        for region in REGION_OVERRIDES:
            if region["city"].lower() in city.lower():
                return region["city"], region["city"] != city
        return city, False

    for region in REGION_OVERRIDES:
        if in_bounding_box(lat, lng, region["bbox"]):
            logger.info(f"📍 [Geocode] bbox match: ({lat}, {lng}) → {region['city']}")
            return region["city"], True

    if state:
        for region in REGION_OVERRIDES:
            if state.lower() == region["state"].lower() and within_radius(
                lat, lng, region["landmark"], region["radius_km"]
            ):
                logger.info(f"📍 [Geocode] landmark radius match: {state} → {region['city']}")
                return region["city"], True

    return None, False


def resolve_city(lat: float, lng: float) -> CityContext:
    """
    Best-effort city for a coordinate

    Never raises: a failed geocoding call just means the region rules are
    the only source, and if they do not fire either the city is None and
    ranking falls back to distance only.
    """
    try:
        payload = reverse_geocode(lat, lng)
        city, state = parse_address_components(payload)
    except (KeyError, TypeError, AttributeError) as e:
        logger.error(f"❌ [Geocode] unexpected response shape: {e}")
        city, state = None, None

    geocoded = normalize_city(city)
    resolved, overridden = apply_region_overrides(lat, lng, geocoded, state)

    if resolved is None:
        logger.info(f"⚠️ [Geocode] no city for ({lat:.4f}, {lng:.4f})")
        return CityContext(city=None, administrative_area=state, source="none")

    source = "region_override" if overridden else "geocoder"
    logger.info(f"✅ [Geocode] city resolved: {resolved} ({source})")
    return CityContext(city=resolved, administrative_area=state, source=source)
