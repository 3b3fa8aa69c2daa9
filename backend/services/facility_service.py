# services/facility_service.py
"""
Facility Locator Service

Proximity ranking for the ambulance and blood bank pages.

user coordinate
  → city resolver + live places search (concurrent)
  → distance annotation
  → merge live + static (0.2 km dedupe)
  → tiered filter / rank
  → list + map payload
"""

import asyncio
import math
from typing import List, Optional, Sequence, Tuple, TypeVar

from data.ambulance import AMBULANCE_SERVICES
from data.blood_bank import BLOOD_BANKS
from data.hospitals import HOSPITALS
from models.facility_schema import (
    AmbulanceSearchResponse,
    AmbulanceService,
    BloodBank,
    BloodBankSearchResponse,
    BloodBankStats,
    CityContext,
    Coordinate,
    Facility,
    Hospital,
)
from services.geocoding_service import resolve_city
from services.map_service import build_cards, build_map_data
from services.places_service import search_nearby
from utils.config import get_settings
from utils.geo import calculate_distance, haversine_km
from utils.logger import logger

F = TypeVar("F", bound=Facility)


# ============================================================
# Static directories (parsed once, never mutated)
# ============================================================

STATIC_AMBULANCES: Tuple[AmbulanceService, ...] = tuple(AmbulanceService(**s) for s in AMBULANCE_SERVICES)
STATIC_BLOOD_BANKS: Tuple[BloodBank, ...] = tuple(BloodBank(**b) for b in BLOOD_BANKS)
STATIC_HOSPITALS: Tuple[Hospital, ...] = tuple(Hospital(**h) for h in HOSPITALS)


# ============================================================
# Distance + city annotation
# ============================================================

def city_matches(facility: Facility, city: Optional[str]) -> bool:
    """Case-insensitive substring test of the city against city_area / address / name"""
    if not city:
        return False
    needle = city.lower()
    haystacks = [facility.address, facility.name, getattr(facility, "city_area", None)]
    return any(h and needle in h.lower() for h in haystacks)


def annotate(facilities: Sequence[F], lat: float, lng: float, city: Optional[str] = None) -> List[F]:
    """Copies of the facilities with distance (km, 1 dp) and city_match filled in"""
    return [
        f.model_copy(update={
            "distance": calculate_distance(lat, lng, f.latitude, f.longitude),
            "city_match": city_matches(f, city),
        })
        for f in facilities
    ]


def sort_by_distance(facilities: Sequence[F]) -> List[F]:
    return sorted(facilities, key=lambda f: f.distance)


# ============================================================
# Merge
# ============================================================

def merge_candidates(live: Sequence[F], static: Sequence[F], dedupe_radius_km: Optional[float] = None) -> List[F]:
    """
    Merge live search results with the static directory

    A static entry is dropped when any live entry lies within
    dedupe_radius_km of it. Live entries are always kept.

    Returns:
        merged list, ascending by distance
    """
    radius = dedupe_radius_km if dedupe_radius_km is not None else get_settings().DEDUPE_RADIUS_KM

    kept_static = [
        s for s in static
        if not any(
            haversine_km(s.latitude, s.longitude, l.latitude, l.longitude) <= radius
            for l in live
        )
    ]
    dropped = len(static) - len(kept_static)
    if dropped:
        logger.info(f"🧹 [Locator] {dropped} static duplicates dropped")

    return sort_by_distance(list(live) + kept_static)


# ============================================================
# Rankers
# ============================================================

def rank_ambulances(
    candidates: Sequence[AmbulanceService],
    city: Optional[str] = None,
    radius_km: Optional[float] = None,
    max_results: Optional[int] = None,
    min_city_results: Optional[int] = None,
) -> Tuple[List[AmbulanceService], str]:
    """
    Ambulance policy

    1. City matches, if there are at least min_city_results of them
    2. City matches plus anything within radius_km
    3. Nothing within radius_km → nearest max_results overall

    Candidates must already carry distance / city_match.

    Returns:
        (ranked list capped at max_results, status message)
    """
    settings = get_settings()
    radius = radius_km if radius_km is not None else settings.AMBULANCE_RADIUS_KM
    limit = max_results if max_results is not None else settings.MAX_RESULTS
    min_city = min_city_results if min_city_results is not None else settings.AMBULANCE_MIN_CITY_RESULTS

    ordered = sort_by_distance(candidates)
    if not ordered:
        return [], "No ambulance services found. Please call 102 or 108."

    in_radius = [c for c in ordered if c.distance <= radius]
    city_hits = [c for c in ordered if city and c.city_match]

    if not in_radius:
        results = ordered[:limit]
        farthest = math.ceil(results[-1].distance)
        message = (
            f"No ambulance services found within {int(radius)}km. "
            f"Showing the nearest services up to {farthest}km away."
        )
        logger.info(f"⚠️ [Locator] ambulance fallback: nearest {len(results)} overall")
        return results, message

    if len(city_hits) >= min_city:
        results = city_hits[:limit]
    else:
        results = [c for c in ordered if (city and c.city_match) or c.distance <= radius][:limit]

    message = f"Showing ambulances near {city}" if city else "Showing ambulance services near you"
    logger.info(f"🚑 [Locator] ambulance ranked: {len(results)} (city={city}, city_hits={len(city_hits)})")
    return results, message


def rank_blood_banks(
    candidates: Sequence[BloodBank],
    local_radius_km: Optional[float] = None,
    regional_radius_km: Optional[float] = None,
    min_local: Optional[int] = None,
    max_results: Optional[int] = None,
) -> Tuple[List[BloodBank], str]:
    """
    Blood bank policy (two radius tiers)

    - at least min_local banks within local_radius_km → only those
    - else at least one within regional_radius_km → those
    - else nearest max_results overall, with a disclaimer

    Returns:
        (ranked list ascending by distance, status message)
    """
    settings = get_settings()
    local_radius = local_radius_km if local_radius_km is not None else settings.LOCAL_RADIUS_KM
    regional_radius = regional_radius_km if regional_radius_km is not None else settings.REGIONAL_RADIUS_KM
    need_local = min_local if min_local is not None else settings.MIN_LOCAL_RESULTS
    limit = max_results if max_results is not None else settings.MAX_RESULTS

    ordered = sort_by_distance(candidates)
    local = [b for b in ordered if b.distance <= local_radius]
    regional = [b for b in ordered if b.distance <= regional_radius]

    logger.info(
        f"🩸 [Locator] blood banks: {len(local)} within {local_radius}km, "
        f"{len(regional)} within {regional_radius}km"
    )

    if len(local) >= need_local:
        return local, f"Showing {len(local)} blood banks in your local area"

    if regional:
        return regional, f"Showing blood banks in your city and nearby areas (within {int(regional_radius)}km)"

    nearest = ordered[:limit]
    if not nearest:
        return [], "No blood banks found nearby. Please try changing your location."

    farthest = math.ceil(max(b.distance for b in nearest))
    return nearest, f"No blood banks found in your immediate area. Showing banks up to {farthest}km away."


def select_hospitals(
    candidates: Sequence[Hospital],
    radius_km: Optional[float] = None,
    max_extra: Optional[int] = None,
) -> List[Hospital]:
    """Hospitals for the map: every city match, then up to max_extra others within radius_km"""
    settings = get_settings()
    radius = radius_km if radius_km is not None else settings.HOSPITAL_RADIUS_KM
    extra_limit = max_extra if max_extra is not None else settings.MAX_RESULTS

    ordered = sort_by_distance(candidates)
    in_city = [h for h in ordered if h.city_match]
    nearby = [h for h in ordered if h.distance <= radius and not h.city_match]
    if in_city:
        return in_city + nearby[:extra_limit]
    return nearby


# ============================================================
# Live results → facility models
# ============================================================

def places_to_ambulances(places: List[dict]) -> List[AmbulanceService]:
    return [
        AmbulanceService(
            id=p["place_id"],
            name=p["name"],
            address=p["vicinity"],
            latitude=p["lat"],
            longitude=p["lng"],
            available=p["open_now"] is not False,
            operating_hours="",
            source="places",
        )
        for p in places
    ]


def places_to_blood_banks(places: List[dict]) -> List[BloodBank]:
    return [
        BloodBank(
            id=p["place_id"],
            name=p["name"],
            address=p["vicinity"],
            latitude=p["lat"],
            longitude=p["lng"],
            open=p["open_now"] is not False,
            source="places",
        )
        for p in places
    ]


# ============================================================
# Pipelines
# ============================================================

async def _resolve_and_search(lat: float, lng: float, keyword: str) -> Tuple[CityContext, List[dict]]:
    """City lookup and live search are independent, run them side by side"""
    city_ctx, places = await asyncio.gather(
        asyncio.to_thread(resolve_city, lat, lng),
        asyncio.to_thread(search_nearby, lat, lng, keyword),
    )
    return city_ctx, places


def list_static_ambulances() -> List[AmbulanceService]:
    """Whole directory, no location (shown when location is denied)"""
    return list(STATIC_AMBULANCES)


async def locate_ambulances(lat: float, lng: float) -> AmbulanceSearchResponse:
    """
    Nearby ambulance services for a coordinate

    Any failure past the coordinate degrades to the static directory
    sorted by distance.
    """
    location = Coordinate(lat=lat, lng=lng)
    try:
        city_ctx, places = await _resolve_and_search(lat, lng, "ambulance service")
        city = city_ctx.city

        live = annotate(places_to_ambulances(places), lat, lng, city)
        static = annotate(STATIC_AMBULANCES, lat, lng, city)
        merged = merge_candidates(live, static)

        results, message = rank_ambulances(merged, city)

    except Exception as e:
        logger.error(f"❌ [Locator] ambulance search failed, static fallback: {e}")
        city = None
        results = sort_by_distance(annotate(STATIC_AMBULANCES, lat, lng))
        message = "Could not refresh ambulance services. Showing services from our directory."

    return AmbulanceSearchResponse(
        location=location,
        city=city,
        message=message,
        results=results,
        cards=build_cards(results),
        total_found=len(results),
    )


def summarize_blood_banks(results: Sequence[BloodBank], has_location: bool = True) -> BloodBankStats:
    """Stat cards on the blood bank page"""
    within = math.ceil(max(b.distance for b in results)) if results and has_location else None
    return BloodBankStats(
        available_blood_banks=len(results),
        within_range_km=within,
        open_count=sum(1 for b in results if b.open),
    )


async def locate_blood_banks(lat: float, lng: float) -> BloodBankSearchResponse:
    """
    Nearby blood banks (plus hospitals for the map) for a coordinate

    Same fallback rule as the ambulance pipeline.
    """
    location = Coordinate(lat=lat, lng=lng)
    try:
        city_ctx, places = await _resolve_and_search(lat, lng, "blood bank")
        city = city_ctx.city

        live = annotate(places_to_blood_banks(places), lat, lng, city)
        static = annotate(STATIC_BLOOD_BANKS, lat, lng, city)
        merged = merge_candidates(live, static)

        results, message = rank_blood_banks(merged)
        hospitals = select_hospitals(annotate(STATIC_HOSPITALS, lat, lng, city))

    except Exception as e:
        logger.error(f"❌ [Locator] blood bank search failed, static fallback: {e}")
        city = None
        regional_radius = get_settings().REGIONAL_RADIUS_KM
        results = [b for b in sort_by_distance(annotate(STATIC_BLOOD_BANKS, lat, lng)) if b.distance <= regional_radius]
        hospitals = [h for h in sort_by_distance(annotate(STATIC_HOSPITALS, lat, lng)) if h.distance <= regional_radius]
        message = "Error finding facilities. Showing nearby blood banks and hospitals from our database."

    return BloodBankSearchResponse(
        location=location,
        city=city,
        message=message,
        results=results,
        hospitals=hospitals,
        cards=build_cards(results),
        stats=summarize_blood_banks(results),
        map=build_map_data(location, results, hospitals),
        total_found=len(results),
    )
