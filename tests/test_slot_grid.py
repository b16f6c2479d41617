"""
Tests for the day/hour bucketing of appointments.
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from salon_planning.application.exceptions import TimeParseError
from salon_planning.application.use_cases.slot_grid import appointments_for_slot, build_slot_grid, hour_range
from salon_planning.domain.entities.appointment import Appointment

MONDAY = date(2025, 1, 27)
WEEK = [MONDAY + timedelta(days=i) for i in range(7)]
HOURS = list(range(8, 21))


def make_appointment(apt_id: int, day: str, start: str, staff_id: int | None = None) -> Appointment:
    return Appointment(
        id=apt_id,
        client_name=f"Client {apt_id}",
        service_name="Coupe",
        start_time=start,
        end_time=start,
        appointment_date=day,
        staff_id=staff_id,
    )


def test_same_hour_bucket_with_and_without_staff_filter():
    """Two 14:xx appointments on the same day share a bucket; the staff filter keeps one."""
    appointments = [
        make_appointment(1, "2025-01-27", "14:00", staff_id=1),
        make_appointment(2, "2025-01-27", "14:30", staff_id=2),
    ]

    all_staff = appointments_for_slot(appointments, MONDAY, 14)
    assert [a.id for a in all_staff] == [1, 2]

    only_first = appointments_for_slot(appointments, MONDAY, 14, staff_id=1)
    assert [a.id for a in only_first] == [1]

    grid = build_slot_grid(appointments, [MONDAY], [14])
    assert [a.id for a in grid.bucket(MONDAY, 14).appointments] == [1, 2]
    grid = build_slot_grid(appointments, [MONDAY], [14], staff_id=1)
    assert [a.id for a in grid.bucket(MONDAY, 14).appointments] == [1]


def test_grid_keeps_every_displayed_appointment_exactly_once():
    appointments = [
        make_appointment(1, "2025-01-27", "08:15"),
        make_appointment(2, "2025-01-28", "20:45"),
        make_appointment(3, "2025-02-02", "12:00"),
        make_appointment(4, "2025-01-26", "10:00"),  # previous Sunday
        make_appointment(5, "2025-02-03", "10:00"),  # next Monday
        make_appointment(6, "2025-01-29", "07:30"),  # before opening
        make_appointment(7, "2025-01-29", "21:00"),  # after closing
        make_appointment(8, "2025-01-30", "09:00"),
    ]

    grid = build_slot_grid(appointments, WEEK, HOURS)

    ids = [a.id for a in grid.all_appointments()]
    assert sorted(ids) == [1, 2, 3, 8]
    assert len(ids) == len(set(ids))


def test_bucket_keeps_source_order_within_an_hour():
    appointments = [
        make_appointment(1, "2025-01-27", "14:45"),
        make_appointment(2, "2025-01-27", "14:05"),
    ]
    bucket = build_slot_grid(appointments, WEEK, HOURS).bucket(MONDAY, 14)
    assert [a.start_time for a in bucket.appointments] == ["14:45", "14:05"]


def test_grid_shape_follows_hours_then_days():
    grid = build_slot_grid([], WEEK, HOURS)
    assert len(grid.rows) == len(HOURS)
    assert all(len(row) == 7 for row in grid.rows)
    assert grid.rows[0][0].day == MONDAY and grid.rows[0][0].hour == 8
    assert grid.rows[-1][-1].day == WEEK[-1] and grid.rows[-1][-1].hour == 20
    assert all(bucket.is_empty for row in grid.rows for bucket in row)


def test_building_twice_gives_the_same_grid():
    appointments = [
        make_appointment(1, "2025-01-27", "09:00", staff_id=1),
        make_appointment(2, "2025-01-31", "16:30", staff_id=2),
    ]
    assert build_slot_grid(appointments, WEEK, HOURS) == build_slot_grid(appointments, WEEK, HOURS)


def test_datetime_appointment_dates_are_compared_as_calendar_dates():
    appointments = [make_appointment(1, "2025-01-27T00:00:00.000Z", "10:00")]
    assert [a.id for a in appointments_for_slot(appointments, MONDAY, 10)] == [1]


def test_seconds_in_start_time_are_accepted():
    appointments = [make_appointment(1, "2025-01-27", "10:30:00")]
    assert build_slot_grid(appointments, WEEK, HOURS).bucket(MONDAY, 10).appointments[0].id == 1


def test_malformed_start_time_fails_fast():
    appointments = [make_appointment(1, "2025-01-27", "1400")]
    with pytest.raises(TimeParseError):
        build_slot_grid(appointments, WEEK, HOURS)
    with pytest.raises(TimeParseError):
        appointments_for_slot(appointments, MONDAY, 14)


def test_malformed_start_time_outside_displayed_days_is_ignored():
    appointments = [make_appointment(1, "2025-03-01", "bad")]
    assert build_slot_grid(appointments, WEEK, HOURS).all_appointments() == []


def test_hour_range_is_inclusive():
    assert hour_range(8, 20) == HOURS
    with pytest.raises(ValueError):
        hour_range(20, 8)
