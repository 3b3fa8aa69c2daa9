from datetime import date

import pytest

from services.appointment_service import get_appointment_service
from services.medicine_service import stock_status
from utils.store import Collection, RecordNotFoundError


def appointment(**overrides):
    data = {
        "appointment_date": "2025-03-10",
        "doctor_name": "Dr. Mehta",
        "start_time": "10:00",
        "end_time": "10:30",
        "patient_name": "Anita Rao",
        "speciality": "Cardiology",
    }
    data.update(overrides)
    return data


def medicine(**overrides):
    data = {
        "name": "Metformin",
        "stock": 50,
        "category": "Diabetes",
        "price": 4.5,
        "expiry_date": "2026-08-19",
    }
    data.update(overrides)
    return data


# ============================================================
# Store
# ============================================================

def test_collection_returns_copies():
    collection = Collection("things")
    record = collection.insert({"name": "a"})
    record["name"] = "changed"

    assert collection.get(record["id"])["name"] == "a"
    assert len(record["id"]) == 9


def test_collection_missing_record():
    collection = Collection("things")
    with pytest.raises(RecordNotFoundError):
        collection.get("nope")
    with pytest.raises(RecordNotFoundError):
        collection.patch("nope", {"a": 1})
    assert collection.find("nope") is None


# ============================================================
# Appointments
# ============================================================

def test_appointment_crud(client):
    created = client.post("/appointments", json=appointment()).json()
    assert created["status"] == "upcoming"
    assert len(created["id"]) == 9

    patched = client.patch(f"/appointments/{created['id']}", json={"notes": "Bring ECG"}).json()
    assert patched["notes"] == "Bring ECG"
    assert patched["doctor_name"] == "Dr. Mehta"

    cancelled = client.post(f"/appointments/{created['id']}/cancel").json()
    assert cancelled["status"] == "cancelled"

    assert client.delete(f"/appointments/{created['id']}").status_code == 200
    assert client.get(f"/appointments/{created['id']}").status_code == 404


def test_appointment_date_must_be_iso(client):
    assert client.post("/appointments", json=appointment(appointment_date="10/03/2025")).status_code == 422


def test_appointment_status_filter(client):
    client.post("/appointments", json=appointment())
    client.post("/appointments", json=appointment(status="completed"))

    assert len(client.get("/appointments").json()) == 2
    assert len(client.get("/appointments", params={"status": "all"}).json()) == 2
    completed = client.get("/appointments", params={"status": "completed"}).json()
    assert [a["status"] for a in completed] == ["completed"]


def test_appointment_date_range_is_inclusive(client):
    for day in ("2025-03-01", "2025-03-05", "2025-03-09", "2025-03-10"):
        client.post("/appointments", json=appointment(appointment_date=day))

    in_range = client.get("/appointments/range", params={"start_date": "2025-03-05", "end_date": "2025-03-09"}).json()

    assert sorted(a["appointment_date"] for a in in_range) == ["2025-03-05", "2025-03-09"]
    assert client.get("/appointments/range", params={"start_date": "2025-03-09", "end_date": "2025-03-01"}).status_code == 400


def test_appointment_stats(client):
    client.post("/appointments", json=appointment(appointment_date="2025-03-10"))
    client.post("/appointments", json=appointment(appointment_date="2025-03-20", status="cancelled"))
    client.post("/appointments", json=appointment(appointment_date="2025-04-02"))

    stats = get_appointment_service().stats(today=date(2025, 3, 10))

    assert stats == {
        "total": 3,
        "upcoming": 2,
        "completed": 0,
        "cancelled": 1,
        "today": 1,
        "future": 2,
        "this_month": 2,
    }


# ============================================================
# Pharmacy
# ============================================================

@pytest.mark.parametrize("stock, expected", [(0, "Out of Stock"), (-3, "Out of Stock"), (9, "Low Stock"), (10, "In Stock")])
def test_stock_status(stock, expected):
    assert stock_status(stock) == expected


def test_medicine_status_derived_on_create_and_stock_update(client):
    created = client.post("/pharmacy/medicines", json=medicine(stock=5)).json()
    assert created["status"] == "Low Stock"

    updated = client.put(f"/pharmacy/medicines/{created['id']}/stock", json={"stock": 0}).json()
    assert updated["status"] == "Out of Stock"

    assert [m["id"] for m in client.get("/pharmacy/medicines/low-stock").json()] == []
    assert client.put("/pharmacy/medicines/missing/stock", json={"stock": 3}).status_code == 404


def test_medicine_filters(client):
    client.post("/pharmacy/medicines", json=medicine())
    client.post("/pharmacy/medicines", json=medicine(name="Amoxicillin", category="Antibiotic", stock=3))

    assert [m["name"] for m in client.get("/pharmacy/medicines", params={"search": "amox"}).json()] == ["Amoxicillin"]
    assert [m["name"] for m in client.get("/pharmacy/medicines", params={"search": "antib"}).json()] == ["Amoxicillin"]
    assert len(client.get("/pharmacy/medicines", params={"category": "all"}).json()) == 2
    assert [m["name"] for m in client.get("/pharmacy/medicines", params={"status": "Low Stock"}).json()] == ["Amoxicillin"]
    assert [m["name"] for m in client.get("/pharmacy/medicines/category/Diabetes").json()] == ["Metformin"]


def test_order_decrements_stock_and_records_activity(client):
    med = client.post("/pharmacy/medicines", json=medicine(stock=12)).json()

    order = client.post("/pharmacy/orders", json={
        "patient_name": "Anita Rao",
        "contact_number": "9876543210",
        "address": "Sakchi, Jamshedpur",
        "items": [{"medicine_id": med["id"], "medicine_name": med["name"], "quantity": 5, "price": 4.5}],
        "total_amount": 22.5,
    })

    assert order.status_code == 201
    assert order.json()["status"] == "Pending"

    after = client.get(f"/pharmacy/medicines/{med['id']}").json()
    assert (after["stock"], after["status"]) == (7, "Low Stock")

    activities = client.get("/activities", params={"type": "order"}).json()
    assert activities[0]["title"] == "Medicine Order Placed"
    assert activities[0]["related_id"] == order.json()["id"]
    assert activities[0]["metadata"]["notes"] == "No additional notes"

    assert [o["id"] for o in client.get("/pharmacy/orders/recent").json()] == [order.json()["id"]]


def test_order_needs_items(client):
    response = client.post("/pharmacy/orders", json={
        "patient_name": "A", "contact_number": "1", "address": "x", "items": [], "total_amount": 0,
    })
    assert response.status_code == 422


def test_pharmacy_overview(client):
    client.post("/pharmacy/medicines", json=medicine(stock=50))
    client.post("/pharmacy/medicines", json=medicine(name="Glipizide", stock=0))
    client.post("/pharmacy/medicines", json=medicine(name="Amoxicillin", category="Antibiotic", stock=4))

    overview = client.get("/pharmacy/overview").json()

    assert overview["total_medicines"] == 3
    assert (overview["low_stock"], overview["out_of_stock"]) == (1, 1)
    diabetes = next(row for row in overview["distribution"] if row["category"] == "Diabetes")
    assert diabetes == {"category": "Diabetes", "total_stock": 50, "in_stock": 1, "low_stock": 0, "out_of_stock": 1}


# ============================================================
# Activities + dashboard
# ============================================================

def test_activities_newest_first(client):
    for title in ("Visited cardiology", "Lab results ready"):
        client.post("/activities", json={
            "type": "visit",
            "title": title,
            "description": "-",
            "timestamp": "2025-03-10T10:00:00Z",
            "category": "hospital",
            "status": "completed",
        })

    assert [a["title"] for a in client.get("/activities").json()] == ["Lab results ready", "Visited cardiology"]
    assert client.get("/activities", params={"category": "pharmacy"}).json() == []


def test_dashboard_defaults(client):
    data = client.get("/dashboard").json()

    assert data["user"]["first_name"] == "Guest"
    assert data["stats"]["appointments"] == "0"
    assert data["stats"]["total_patients"] == "200K"
    assert len(data["medicines"]) == 8
    assert data["prescription_data"]["values"] == [160, 240, 190, 70, 190]


def test_dashboard_overlays_live_data(client):
    client.post("/appointments", json=appointment())
    client.post("/pharmacy/medicines", json=medicine(name="Baclofen", stock=2, expiry_date="2025-03-07"))
    client.post("/pharmacy/medicines", json=medicine(name="Plenty", stock=100))

    data = client.get("/dashboard").json()

    assert data["stats"]["appointments"] == "1"
    assert data["medicines"] == [{"id": 1, "name": "Baclofen", "date": "07 Mar 2025"}]
