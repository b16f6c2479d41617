from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from salon_planning.domain.entities.appointment import Appointment


@dataclass(frozen=True)
class PlannedAppointment:
    appointment: Appointment
    color: str
    staff_first_name: str | None = None


@dataclass(frozen=True)
class StaffColumn:
    staff_id: int | None  # None in group view
    label: str | None
    appointments: tuple[PlannedAppointment, ...] = ()


@dataclass(frozen=True)
class PlanningCell:
    day: date
    hour: int
    columns: tuple[StaffColumn, ...] = ()


@dataclass(frozen=True)
class DayHeader:
    day: date
    weekday_name: str
    short_label: str
    is_premium: bool = False


@dataclass(frozen=True)
class LegendEntry:
    staff_id: int
    name: str
    color: str


@dataclass(frozen=True)
class WeekPlanning:
    anchor: date
    previous_anchor: date
    next_anchor: date
    week_label: str
    mode: str
    days: tuple[DayHeader, ...]
    hours: tuple[int, ...]
    # rows follow `hours`, columns follow `days`
    cells: tuple[tuple[PlanningCell, ...], ...]
    legend: tuple[LegendEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MonthDay:
    day: date
    appointments: tuple[Appointment, ...] = ()
    is_today: bool = False


@dataclass(frozen=True)
class MonthCalendar:
    year: int
    month: int
    title: str
    weekday_names: tuple[str, ...]
    # None marks the blank cells before day 1
    cells: tuple[MonthDay | None, ...]
