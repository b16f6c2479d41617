"""
Tests for the weekly and monthly planning composition.
"""

from __future__ import annotations

from datetime import date

import pytest

from salon_planning.application.exceptions import BookingApiUpstreamError
from salon_planning.application.ports.appointment_source import AppointmentSourcePort
from salon_planning.application.ports.staff_source import StaffSourcePort
from salon_planning.application.use_cases.planning_view import PlanningViewUseCase
from salon_planning.application.use_cases.staff_directory import StaffDirectory
from salon_planning.domain.entities.appointment import Appointment
from salon_planning.domain.entities.staff_member import StaffMember
from salon_planning.infrastructure.booking_api.mock_booking import MockBookingApi
from salon_planning.infrastructure.staff.memory_store import MemoryStaffStore

TODAY = date(2025, 1, 29)
STAFF = [
    StaffMember(id=1, first_name="Antoine", last_name="Roux", color="#3B82F6"),
    StaffMember(id=2, first_name="Marie", last_name="Blanc", color="#EC4899"),
]


def _apt(apt_id: int, day: str, start: str, staff_id: int | None) -> Appointment:
    return Appointment(
        id=apt_id,
        client_name=f"Client {apt_id}",
        service_name="Coupe",
        start_time=start,
        end_time=start,
        appointment_date=day,
        staff_id=staff_id,
    )


class FailingSource(AppointmentSourcePort, StaffSourcePort):
    def list_appointments(self, start=None, end=None):
        raise BookingApiUpstreamError("connection refused")

    def list_staff(self):
        raise BookingApiUpstreamError("connection refused")


def make_use_case(booking: MockBookingApi | None = None, staff: StaffSourcePort | None = None) -> PlanningViewUseCase:
    booking = booking or MockBookingApi(
        [
            _apt(1, "2025-01-27", "14:00", 1),
            _apt(2, "2025-01-27", "14:30", 2),
            _apt(3, "2025-02-01", "09:15", 3),
            _apt(4, "2025-02-05", "10:00", 1),
        ]
    )
    return PlanningViewUseCase(
        appointments=booking,
        staff=staff or StaffDirectory(store=MemoryStaffStore(STAFF)),
        new_appointment=booking,
        locale="fr",
        clock=lambda: TODAY,
    )


def test_group_week_planning():
    planning = make_use_case().build_week()

    assert planning.anchor == date(2025, 1, 27)
    assert planning.previous_anchor == date(2025, 1, 20)
    assert planning.next_anchor == date(2025, 2, 3)
    assert planning.week_label == "5e semaine 2025"
    assert planning.hours == tuple(range(8, 21))
    assert planning.days[0].weekday_name == "lundi"
    assert planning.days[0].short_label == "27 janv."
    assert [d.is_premium for d in planning.days] == [False] * 5 + [True, False]

    cell = planning.cells[planning.hours.index(14)][0]
    assert len(cell.columns) == 1
    planned = cell.columns[0].appointments
    assert [p.appointment.id for p in planned] == [1, 2]
    assert [p.color for p in planned] == ["#3B82F6", "#EC4899"]
    assert [p.staff_first_name for p in planned] == ["Antoine", "Marie"]

    # staff 3 is unknown: default colour, no name
    saturday = planning.cells[planning.hours.index(9)][5].columns[0].appointments
    assert saturday[0].color == "#8B5CF6"
    assert saturday[0].staff_first_name is None

    assert [e.name for e in planning.legend] == ["Antoine Roux", "Marie Blanc"]


def test_individual_week_planning_shows_selected_member_only():
    planning = make_use_case().build_week(anchor=date(2025, 1, 30), mode="individual", selected_staff_id=2)

    cell = planning.cells[planning.hours.index(14)][0]
    assert [c.staff_id for c in cell.columns] == [2]
    assert cell.columns[0].label == "Marie Blanc"
    assert [p.appointment.id for p in cell.columns[0].appointments] == [2]


def test_individual_week_planning_without_selection_has_no_columns():
    planning = make_use_case().build_week(mode="individual")
    assert all(cell.columns == () for row in planning.cells for cell in row)


def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        make_use_case().build_week(mode="team")


def test_failing_collaborators_render_an_empty_grid():
    failing = FailingSource()
    use_case = PlanningViewUseCase(appointments=failing, staff=failing, clock=lambda: TODAY)

    planning = use_case.build_week()

    assert planning.legend == ()
    assert all(not col.appointments for row in planning.cells for cell in row for col in cell.columns)


def test_request_new_appointment_is_delegated():
    booking = MockBookingApi()
    use_case = make_use_case(booking=booking)

    request_id = use_case.request_new_appointment(date(2025, 1, 28), 9, staff_id=2)

    assert booking.requests[request_id] == ("2025-01-28", "9:00", 2)


def test_request_new_appointment_outside_hours_is_rejected():
    with pytest.raises(ValueError):
        make_use_case().request_new_appointment(date(2025, 1, 28), 22)


def test_request_new_appointment_without_flow_is_rejected():
    use_case = PlanningViewUseCase(appointments=MockBookingApi(), staff=StaffDirectory(store=MemoryStaffStore([])))
    with pytest.raises(ValueError):
        use_case.request_new_appointment(date(2025, 1, 28), 10)


def test_month_planning_defaults_to_current_month():
    month = make_use_case().build_month()

    assert (month.year, month.month) == (2025, 1)
    days = {cell.day: cell for cell in month.cells if cell is not None}
    assert [a.id for a in days[date(2025, 1, 27)].appointments] == [1, 2]
    assert days[TODAY].is_today
    assert date(2025, 2, 1) not in days


def test_month_planning_for_given_month():
    month = make_use_case().build_month(2025, 2)
    days = {cell.day: cell for cell in month.cells if cell is not None}
    assert [a.id for a in days[date(2025, 2, 1)].appointments] == [3]
    assert [a.id for a in days[date(2025, 2, 5)].appointments] == [4]
