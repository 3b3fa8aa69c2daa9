import pytest
import requests

from services import geocoding_service, places_service
from services.geocoding_service import (
    apply_region_overrides,
    normalize_city,
    parse_address_components,
    resolve_city,
)


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)

    def json(self):
        return self._payload


def geocode_payload(locality, state):
    return {
        "status": "OK",
        "results": [
            {
                "address_components": [
                    {"long_name": "Some Road", "types": ["route"]},
                    {"long_name": locality, "types": ["locality", "political"]},
                    {"long_name": state, "types": ["administrative_area_level_1", "political"]},
                ]
            }
        ],
    }


@pytest.fixture
def maps_key(monkeypatch, settings):
    monkeypatch.setattr(settings, "GOOGLE_MAPS_API_KEY", "test-key")


# ============================================================
# Parsing + overrides
# ============================================================

def test_parse_address_components_picks_locality_and_state():
    assert parse_address_components(geocode_payload("Pune", "Maharashtra")) == ("Pune", "Maharashtra")


def test_parse_address_components_falls_back_to_district():
    payload = {
        "status": "OK",
        "results": [{
            "address_components": [
                {"long_name": "East Singhbhum", "types": ["administrative_area_level_2", "political"]},
                {"long_name": "Jharkhand", "types": ["administrative_area_level_1", "political"]},
            ]
        }],
    }
    assert parse_address_components(payload) == ("East Singhbhum", "Jharkhand")


def test_parse_address_components_rejects_non_ok_status():
    assert parse_address_components({"status": "REQUEST_DENIED", "results": []}) == (None, None)
    assert parse_address_components(None) == (None, None)


def test_normalize_city_applies_aliases():
    assert normalize_city("Bengaluru") == "Bangalore"
    assert normalize_city(" Pune ") == "Pune"
    assert normalize_city(None) is None


def test_bounding_box_fills_missing_city():
    city, overridden = apply_region_overrides(22.80, 86.18, None, "Jharkhand")
    assert (city, overridden) == ("Jamshedpur", True)


def test_bounding_box_keeps_geocoded_suburb():
    assert apply_region_overrides(22.80, 86.18, "Adityapur", "Jharkhand") == ("Adityapur", False)


def test_neighbouring_city_inside_delhi_box_is_kept():
    # Gurgaon sits inside Delhi's bounding box
    city = normalize_city("Gurugram")
    assert apply_region_overrides(28.4595, 77.0266, city, "Haryana") == ("Gurgaon", False)


def test_geocoded_name_is_normalised_to_region():
    city, overridden = apply_region_overrides(28.6139, 77.2090, "New Delhi", "Delhi")
    assert (city, overridden) == ("Delhi", True)


def test_state_and_landmark_radius_fill_missing_city():
    # north of the Jamshedpur box, ~16 km from the landmark
    city, overridden = apply_region_overrides(22.95, 86.20, None, "Jharkhand")
    assert (city, overridden) == ("Jamshedpur", True)


def test_state_rule_needs_matching_state():
    assert apply_region_overrides(22.95, 86.20, None, "Odisha") == (None, False)


def test_unrelated_city_passes_through():
    assert apply_region_overrides(18.5204, 73.8567, "Pune", "Maharashtra") == ("Pune", False)


# ============================================================
# resolve_city
# ============================================================

def test_resolve_city_uses_geocoder(monkeypatch, maps_key):
    captured = {}

    def fake_get(url, params=None, timeout=None):
        captured.update(url=url, params=params, timeout=timeout)
        return FakeResponse(geocode_payload("Pune", "Maharashtra"))

    monkeypatch.setattr(geocoding_service.requests, "get", fake_get)

    ctx = resolve_city(18.5204, 73.8567)

    assert ctx.city == "Pune"
    assert ctx.administrative_area == "Maharashtra"
    assert ctx.source == "geocoder"
    assert captured["params"]["latlng"] == "18.5204,73.8567"
    assert captured["timeout"] == 10


def test_resolve_city_survives_timeout_and_still_applies_regions(monkeypatch, maps_key):
    def timeout(*args, **kwargs):
        raise requests.exceptions.Timeout()

    monkeypatch.setattr(geocoding_service.requests, "get", timeout)

    ctx = resolve_city(28.6139, 77.2090)

    assert ctx.city == "Delhi"
    assert ctx.source == "region_override"


def test_resolve_city_without_key_or_region_is_none(monkeypatch, settings):
    monkeypatch.setattr(settings, "GOOGLE_MAPS_API_KEY", None)

    ctx = resolve_city(18.5204, 73.8567)

    assert ctx.city is None
    assert ctx.source == "none"


# ============================================================
# Places
# ============================================================

def test_search_nearby_parses_results(monkeypatch, maps_key):
    payload = {
        "status": "OK",
        "results": [
            {
                "place_id": "p1",
                "name": "City Blood Centre",
                "vicinity": "MG Road",
                "geometry": {"location": {"lat": 18.52, "lng": 73.85}},
                "opening_hours": {"open_now": False},
            },
            {"place_id": "broken", "name": "No geometry"},
        ],
    }
    monkeypatch.setattr(places_service.requests, "get", lambda *a, **k: FakeResponse(payload))

    places = places_service.search_nearby(18.5204, 73.8567, "blood bank")

    assert places == [{
        "place_id": "p1",
        "name": "City Blood Centre",
        "vicinity": "MG Road",
        "lat": 18.52,
        "lng": 73.85,
        "open_now": False,
    }]


def test_search_nearby_zero_results_and_http_error(monkeypatch, maps_key):
    monkeypatch.setattr(
        places_service.requests, "get", lambda *a, **k: FakeResponse({"status": "ZERO_RESULTS", "results": []})
    )
    assert places_service.search_nearby(0, 0, "ambulance service") == []

    monkeypatch.setattr(places_service.requests, "get", lambda *a, **k: FakeResponse({}, status_code=503))
    assert places_service.search_nearby(0, 0, "ambulance service") == []


def test_search_nearby_without_key_skips_network(monkeypatch, settings):
    monkeypatch.setattr(settings, "GOOGLE_MAPS_API_KEY", None)

    def fail(*args, **kwargs):
        raise AssertionError("network should not be used")

    monkeypatch.setattr(places_service.requests, "get", fail)
    assert places_service.search_nearby(0, 0, "blood bank") == []
