"""
Route tests with the FastAPI test client and in-memory collaborators.
"""

from __future__ import annotations

from datetime import date

from fastapi.testclient import TestClient

from salon_planning.application.use_cases.planning_view import PlanningViewUseCase
from salon_planning.application.use_cases.staff_directory import StaffDirectory
from salon_planning.domain.entities.appointment import Appointment
from salon_planning.infrastructure.booking_api.mock_booking import MockBookingApi
from salon_planning.infrastructure.staff.memory_store import MemoryStaffStore
from salon_planning.main import app
from salon_planning.wiring.dependencies import get_planning_view_use_case, get_staff_directory


def make_client() -> tuple[TestClient, MockBookingApi, StaffDirectory]:
    booking = MockBookingApi(
        [
            Appointment(
                id=1,
                client_name="Léa Martin",
                service_name="Coupe femme",
                start_time="14:00",
                end_time="15:00",
                appointment_date="2025-01-27",
                staff_id=1,
            )
        ]
    )
    directory = StaffDirectory(store=MemoryStaffStore())
    use_case = PlanningViewUseCase(
        appointments=booking,
        staff=directory,
        new_appointment=booking,
        clock=lambda: date(2025, 1, 29),
    )
    app.dependency_overrides[get_planning_view_use_case] = lambda: use_case
    app.dependency_overrides[get_staff_directory] = lambda: directory
    return TestClient(app), booking, directory


def teardown_function():
    app.dependency_overrides.clear()


def test_health():
    client, _, _ = make_client()
    assert client.get("/health").json() == {"status": "ok"}


def test_week_planning():
    client, _, _ = make_client()

    response = client.get("/planning/week", params={"anchor": "2025-01-28"})

    assert response.status_code == 200
    data = response.json()
    assert data["anchor"] == "2025-01-27"
    assert data["next_anchor"] == "2025-02-03"
    assert data["mode"] == "group"
    assert len(data["days"]) == 7
    assert data["days"][5]["is_premium"] is True
    row = data["hours"].index(14)
    planned = data["cells"][row][0]["columns"][0]["appointments"]
    assert planned[0]["appointment"]["client_name"] == "Léa Martin"
    assert planned[0]["staff_first_name"] == "Antoine"


def test_week_planning_individual_mode():
    client, _, _ = make_client()

    data = client.get("/planning/week", params={"anchor": "2025-01-27", "mode": "individual", "staff_id": 2}).json()

    row = data["hours"].index(14)
    columns = data["cells"][row][0]["columns"]
    assert [c["staff_id"] for c in columns] == [2]
    assert columns[0]["appointments"] == []


def test_week_planning_rejects_unknown_mode():
    client, _, _ = make_client()
    assert client.get("/planning/week", params={"mode": "team"}).status_code == 422


def test_month_calendar():
    client, _, _ = make_client()

    data = client.get("/planning/month", params={"year": 2025, "month": 1}).json()

    assert data["title"] == "Janvier 2025"
    # 1 January 2025 is a Wednesday
    assert data["cells"][:2] == [None, None]
    assert data["cells"][28]["day"] == "2025-01-27"
    assert data["cells"][28]["appointments"][0]["id"] == 1


def test_new_appointment_slot():
    client, booking, _ = make_client()

    response = client.post("/planning/slots", json={"date": "2025-01-28", "hour": 10, "staff_id": 1})

    assert response.status_code == 201
    assert booking.requests[response.json()["request_id"]] == ("2025-01-28", "10:00", 1)


def test_new_appointment_slot_outside_hours():
    client, _, _ = make_client()
    response = client.post("/planning/slots", json={"date": "2025-01-28", "hour": 6})
    assert response.status_code == 400


def test_staff_crud():
    client, _, _ = make_client()

    assert len(client.get("/staff").json()) == 4

    created = client.post("/staff", json={"first_name": "Nadia", "specialties": ["Balayage"]})
    assert created.status_code == 201
    staff_id = created.json()["id"]

    updated = client.put(f"/staff/{staff_id}", json={"color": "#000000"})
    assert updated.json()["color"] == "#000000"

    assert client.delete(f"/staff/{staff_id}").status_code == 204
    assert client.delete(f"/staff/{staff_id}").status_code == 404
    assert client.put("/staff/999", json={"color": "#000000"}).status_code == 404


def test_staff_update_with_blank_first_name_is_rejected():
    client, _, _ = make_client()

    response = client.put("/staff/1", json={"first_name": "  "})

    assert response.status_code == 400
    assert client.get("/staff").json()[0]["first_name"] == "Antoine"


def test_staff_added_through_the_api_shows_in_the_planning_legend():
    client, _, _ = make_client()

    client.post("/staff", json={"first_name": "Nadia", "color": "#000000"})
    legend = client.get("/planning/week", params={"anchor": "2025-01-27"}).json()["legend"]

    assert {"staff_id": 5, "name": "Nadia", "color": "#000000"} in legend
