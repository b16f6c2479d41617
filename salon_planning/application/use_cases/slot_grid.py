from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date

from salon_planning.application.utils.time_parser import parse_calendar_date, parse_hour
from salon_planning.domain.entities.appointment import Appointment
from salon_planning.domain.entities.slot_grid import SlotBucket, SlotGrid


def appointments_for_slot(
    appointments: Iterable[Appointment],
    day: date,
    hour: int,
    staff_id: int | None = None,
) -> list[Appointment]:
    """Appointments starting on `day` during `hour`, optionally for a single staff member.

    Source order is kept: two appointments in the same hour are not sorted by minute.
    A malformed start time on `day` raises TimeParseError.
    """
    return [
        apt
        for apt in appointments
        if parse_calendar_date(apt.appointment_date) == day
        and parse_hour(apt.start_time) == hour
        and (staff_id is None or apt.staff_id == staff_id)
    ]


def build_slot_grid(
    appointments: Iterable[Appointment],
    days: Sequence[date],
    hours: Sequence[int],
    staff_id: int | None = None,
) -> SlotGrid:
    """Bucket appointments into a (hour, day) grid.

    Gives the same buckets as calling appointments_for_slot for every cell, in a
    single pass over the list. Appointments outside `days` or `hours` are left out.
    """
    day_set = set(days)
    hour_set = set(hours)
    buckets: dict[tuple[date, int], list[Appointment]] = {}

    for apt in appointments:
        apt_day = parse_calendar_date(apt.appointment_date)
        if apt_day not in day_set:
            continue
        apt_hour = parse_hour(apt.start_time)
        if apt_hour not in hour_set:
            continue
        if staff_id is not None and apt.staff_id != staff_id:
            continue
        buckets.setdefault((apt_day, apt_hour), []).append(apt)

    rows = tuple(
        tuple(SlotBucket(day=day, hour=hour, appointments=tuple(buckets.get((day, hour), ()))) for day in days)
        for hour in hours
    )
    return SlotGrid(days=tuple(days), hours=tuple(hours), rows=rows)


def hour_range(start_hour: int, end_hour: int) -> list[int]:
    """Inclusive range of displayed hours, e.g. 8..20."""
    if not 0 <= start_hour <= end_hour <= 23:
        raise ValueError(f"Invalid hour range {start_hour}-{end_hour}")
    return list(range(start_hour, end_hour + 1))
