JAMSHEDPUR = {"lat": 22.8046, "lng": 86.2029}
# Tibetan plateau, far from every directory entry
NOWHERE = {"lat": 35.0, "lng": 95.0}


# ============================================================
# Ambulances
# ============================================================

def test_nearby_ambulances_in_jamshedpur(client, offline_locator):
    response = client.get("/ambulance/nearby", params=JAMSHEDPUR)

    assert response.status_code == 200
    body = response.json()
    assert body["city"] == "Jamshedpur"
    assert body["message"] == "Showing ambulances near Jamshedpur"
    assert body["total_found"] == len(body["results"]) == len(body["cards"])
    assert all(a["city_match"] for a in body["results"])

    distances = [a["distance"] for a in body["results"]]
    assert distances == sorted(distances)
    assert len(distances) <= 10
    assert offline_locator == ["ambulance service"]


def test_nearby_ambulances_far_away_falls_back_to_nearest(client, offline_locator):
    body = client.get("/ambulance/nearby", params=NOWHERE).json()

    assert body["city"] is None
    assert len(body["results"]) == 10
    assert body["message"].startswith("No ambulance services found within 50km")


def test_live_results_are_merged(client, monkeypatch):
    live = [{
        "place_id": "live-1",
        "name": "Live Ambulance Co",
        "vicinity": "Bistupur, Jamshedpur",
        "lat": 22.8050,
        "lng": 86.2030,
        "open_now": True,
    }]
    monkeypatch.setattr("services.geocoding_service.reverse_geocode", lambda lat, lng: None)
    monkeypatch.setattr("services.facility_service.search_nearby", lambda lat, lng, keyword: live)

    body = client.get("/ambulance/nearby", params=JAMSHEDPUR).json()

    assert body["results"][0]["id"] == "live-1"
    assert body["results"][0]["source"] == "places"


def test_search_failure_degrades_to_static_directory(client, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("quota exceeded")

    monkeypatch.setattr("services.facility_service.resolve_city", broken)

    body = client.get("/ambulance/nearby", params=JAMSHEDPUR).json()

    assert body["success"] is True
    assert body["message"].startswith("Could not refresh ambulance services")
    assert body["results"][0]["id"].startswith("amb-jamshedpur")


def test_session_cache_skips_small_moves(client, offline_locator):
    params = {**JAMSHEDPUR, "session_id": "s1"}
    client.get("/ambulance/nearby", params=params)
    # ~0.1 km away
    client.get("/ambulance/nearby", params={**params, "lat": 22.8055})
    assert len(offline_locator) == 1

    # ~5 km away
    client.get("/ambulance/nearby", params={**params, "lat": 22.85})
    assert len(offline_locator) == 2

    assert client.delete("/ambulance/sessions/s1").json()["success"] is True
    client.get("/ambulance/nearby", params={**params, "lat": 22.85})
    assert len(offline_locator) == 3


def test_invalid_coordinates_rejected(client, offline_locator):
    assert client.get("/ambulance/nearby", params={"lat": 91, "lng": 0}).status_code == 422


def test_directory_and_helplines(client):
    services = client.get("/ambulance/services").json()
    assert services["total_found"] == len(services["results"]) > 0

    numbers = [h["number"] for h in client.get("/ambulance/helplines").json()["helplines"]]
    assert numbers == ["102", "108"]


# ============================================================
# Blood banks
# ============================================================

def test_nearby_blood_banks_in_jamshedpur(client, offline_locator):
    body = client.get("/blood-bank/nearby", params=JAMSHEDPUR).json()

    assert body["message"] == "Showing 4 blood banks in your local area"
    assert [b["distance"] for b in body["results"]] == sorted(b["distance"] for b in body["results"])
    assert body["stats"]["available_blood_banks"] == 4
    assert body["hospitals"]
    assert body["cards"][0]["directions_url"].startswith("https://www.google.com/maps/dir/?api=1&destination=")

    assert body["map"]["center"] == JAMSHEDPUR
    assert body["map"]["zoom"] == 13
    kinds = {m["kind"] for m in body["map"]["markers"]}
    assert kinds == {"blood_bank", "hospital"}


def test_nearby_blood_banks_far_away(client, offline_locator):
    body = client.get("/blood-bank/nearby", params=NOWHERE).json()

    assert body["total_found"] == 10
    assert body["message"].startswith("No blood banks found in your immediate area. Showing banks up to")
    assert body["hospitals"] == []


def test_blood_inventory(client):
    inventory = client.get("/blood-bank/inventory").json()
    assert {row["blood_type"] for row in inventory} == {"A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"}


def test_enquiry_requires_terms(client):
    enquiry = {"name": "Ravi", "phone": "9876543210", "blood_type": "O+", "purpose": "donation"}

    assert client.post("/blood-bank/enquiries", json=enquiry).status_code == 400

    response = client.post("/blood-bank/enquiries", json={**enquiry, "accept_terms": True})
    assert response.status_code == 201

    activities = client.get("/activities", params={"category": "blood-bank"}).json()
    assert len(activities) == 1
    assert activities[0]["id"] == response.json()["enquiry_id"]
    assert activities[0]["type"] == "enquiry"
