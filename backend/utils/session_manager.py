# utils/session_manager.py
"""
Location Session Manager

Remembers the last coordinate and the last locator result per client
session so a jittery location update does not trigger a new round of
geocoding and places calls.
"""

from typing import Any, Dict, Optional, Tuple

from utils.config import get_settings
from utils.geo import calculate_distance
from utils.logger import logger


# Global session store (in-memory), keyed by "<feature>:<session_id>"
_locations: Dict[str, Tuple[float, float]] = {}
_results: Dict[str, Any] = {}


def _key(feature: str, session_id: str) -> str:
    return f"{feature}:{session_id}"


def has_moved_significantly(
    previous: Optional[Tuple[float, float]],
    current: Tuple[float, float],
    threshold_km: Optional[float] = None,
) -> bool:
    """True when there is no previous fix or the user moved past the threshold"""
    if previous is None:
        return True
    threshold = threshold_km if threshold_km is not None else get_settings().LOCATION_UPDATE_THRESHOLD_KM
    return calculate_distance(previous[0], previous[1], current[0], current[1]) > threshold


def get_cached_result(feature: str, session_id: str, lat: float, lng: float) -> Optional[Any]:
    """
    Cached result when the new fix is within the update threshold

    Returns:
        the stored result, or None when a fresh search is needed
    """
    key = _key(feature, session_id)
    if key not in _results:
        return None
    if has_moved_significantly(_locations.get(key), (lat, lng)):
        logger.debug(f"📍 [Session] location changed: {key} -> ({lat}, {lng})")
        return None
    logger.info(f"♻️ [Session] cached result reused: {key}")
    return _results[key]


def save_result(feature: str, session_id: str, lat: float, lng: float, result: Any):
    """Store the latest coordinate and result (last write wins)"""
    key = _key(feature, session_id)
    # re-insert so pruning order follows the latest write
    _results.pop(key, None)
    _locations[key] = (lat, lng)
    _results[key] = result
    logger.debug(f"💾 [Session] saved: {key} ({lat}, {lng})")


def clear_session(session_id: str):
    """Forget every feature's cache for one session"""
    removed = 0
    for key in list(_results.keys()):
        if key.split(":", 1)[1] == session_id:
            del _results[key]
            _locations.pop(key, None)
            removed += 1
    if removed:
        logger.info(f"🗑️ [Session] cleared: {session_id}")


def get_session_count() -> int:
    """Number of distinct cached sessions"""
    return len({key.split(":", 1)[1] for key in _results})


def cleanup_old_sessions(max_sessions: int = 100):
    """
    Drop the oldest entries once the cache grows past max_sessions

    Args:
        max_sessions: entries to keep
    """
    if len(_results) > max_sessions:
        keys_to_delete = list(_results.keys())[:-max_sessions]
        for key in keys_to_delete:
            _results.pop(key, None)
            _locations.pop(key, None)

        logger.info(f"🧹 [Session] pruned {len(keys_to_delete)} entries")


def reset_sessions():
    _results.clear()
    _locations.clear()
