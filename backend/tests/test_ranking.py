import copy

from models.facility_schema import AmbulanceService, BloodBank, Hospital
from services.facility_service import (
    annotate,
    city_matches,
    merge_candidates,
    rank_ambulances,
    rank_blood_banks,
    select_hospitals,
)


def bank(bank_id, distance, lat=0.0, lng=0.0, source="static"):
    return BloodBank(id=bank_id, name=f"Bank {bank_id}", latitude=lat, longitude=lng, distance=distance, source=source)


def ambulance(amb_id, distance, city_match=False):
    return AmbulanceService(
        id=amb_id, name=f"Ambulance {amb_id}", latitude=0.0, longitude=0.0,
        distance=distance, city_match=city_match,
    )


# ============================================================
# Merge
# ============================================================

def test_merge_drops_static_duplicate_of_live_entry():
    live = [bank("live-1", 1.0, lat=22.8000, lng=86.2000, source="places")]
    # ~0.05 km north of the live entry
    duplicate = bank("static-dup", 1.05, lat=22.80045, lng=86.2000)
    distinct = bank("static-far", 3.0, lat=22.8300, lng=86.2000)

    merged = merge_candidates(live, [duplicate, distinct])

    assert [b.id for b in merged] == ["live-1", "static-far"]


def test_merge_keeps_everything_without_live_results():
    static = [bank("b", 5.0), bank("a", 2.0, lat=1.0)]
    merged = merge_candidates([], static)
    assert [b.id for b in merged] == ["a", "b"]


def test_merge_output_is_sorted_by_distance():
    live = [bank("live-far", 9.0, lat=1.0, source="places")]
    static = [bank("static-near", 0.5, lat=2.0)]
    assert [b.distance for b in merge_candidates(live, static)] == [0.5, 9.0]


# ============================================================
# Blood banks
# ============================================================

def test_blood_banks_local_tier_wins_with_three_or_more():
    local = [bank(f"local-{i}", d) for i, d in enumerate([20.0, 3.0, 12.5, 7.0])]
    far = [bank(f"far-{i}", 60.0 + i * 10) for i in range(10)]

    results, message = rank_blood_banks(far + local)

    assert [b.distance for b in results] == [3.0, 7.0, 12.5, 20.0]
    assert message == "Showing 4 blood banks in your local area"


def test_blood_banks_regional_tier_when_local_too_thin():
    candidates = [bank("a", 10.0), bank("b", 40.0), bank("c", 49.9), bank("d", 80.0)]

    results, message = rank_blood_banks(candidates)

    assert [b.id for b in results] == ["a", "b", "c"]
    assert message == "Showing blood banks in your city and nearby areas (within 50km)"


def test_blood_banks_fall_back_to_nearest_ten():
    candidates = [bank(f"b{i}", 100.0 + i * 7.3) for i in range(15)]

    results, message = rank_blood_banks(candidates)

    assert len(results) == 10
    assert results[0].distance == 100.0
    assert message == "No blood banks found in your immediate area. Showing banks up to 166km away."


def test_blood_banks_empty_input():
    results, message = rank_blood_banks([])
    assert results == []
    assert message == "No blood banks found nearby. Please try changing your location."


# ============================================================
# Ambulances
# ============================================================

def test_ambulances_nothing_within_radius_returns_nearest_ten_regardless_of_city():
    candidates = [ambulance(f"a{i}", 60.0 + i, city_match=(i % 2 == 0)) for i in range(14)]

    results, message = rank_ambulances(candidates, city="Jamshedpur")

    assert [a.id for a in results] == [f"a{i}" for i in range(10)]
    assert "No ambulance services found within 50km" in message


def test_ambulances_enough_city_matches_shows_only_city():
    candidates = [
        ambulance("near-other", 2.0),
        ambulance("c1", 4.0, city_match=True),
        ambulance("c2", 8.0, city_match=True),
        ambulance("c3", 30.0, city_match=True),
    ]

    results, message = rank_ambulances(candidates, city="Delhi")

    assert [a.id for a in results] == ["c1", "c2", "c3"]
    assert message == "Showing ambulances near Delhi"


def test_ambulances_few_city_matches_widen_to_radius():
    candidates = [
        ambulance("city-far", 70.0, city_match=True),
        ambulance("near", 10.0),
        ambulance("out", 60.0),
    ]

    results, _ = rank_ambulances(candidates, city="Pune")

    assert [a.id for a in results] == ["near", "city-far"]


def test_ambulances_without_city_use_distance_only():
    candidates = [ambulance("a", 10.0, city_match=True), ambulance("b", 20.0), ambulance("c", 55.0)]

    results, message = rank_ambulances(candidates, city=None)

    assert [a.id for a in results] == ["a", "b"]
    assert message == "Showing ambulance services near you"


def test_ranking_is_idempotent_and_does_not_mutate_input():
    candidates = [bank("x", 30.0), bank("y", 2.0), bank("z", 45.0)]
    snapshot = copy.deepcopy(candidates)

    first = rank_blood_banks(candidates)
    second = rank_blood_banks(candidates)

    assert first == second
    assert candidates == snapshot


# ============================================================
# Annotation + hospitals
# ============================================================

def test_annotate_returns_copies_with_distance_and_city_match():
    original = AmbulanceService(
        id="x", name="Test", address="Sakchi, Jamshedpur", latitude=22.8002, longitude=86.2037,
    )

    annotated = annotate([original], 22.8046, 86.2029, city="jamshedpur")

    assert annotated[0].city_match is True
    assert annotated[0].distance > 0
    assert original.distance == 0.0
    assert original.city_match is False


def test_city_match_uses_city_area():
    amb = AmbulanceService(id="x", name="Ziqitza", address="", latitude=0, longitude=0, city_area="All Delhi")
    assert city_matches(amb, "Delhi")
    assert not city_matches(amb, None)


def test_select_hospitals_puts_city_matches_first():
    hospitals = [
        Hospital(id="near", name="Near", latitude=0, longitude=0, distance=3.0),
        Hospital(id="city", name="City", latitude=0, longitude=0, distance=20.0, city_match=True),
        Hospital(id="far", name="Far", latitude=0, longitude=0, distance=90.0),
    ]

    assert [h.id for h in select_hospitals(hospitals)] == ["city", "near"]
