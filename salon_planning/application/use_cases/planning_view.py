from __future__ import annotations

import calendar
import logging
from collections.abc import Callable
from datetime import date, timedelta

from salon_planning.application.exceptions import BookingApiContractError, BookingApiUpstreamError
from salon_planning.application.ports.appointment_source import AppointmentSourcePort
from salon_planning.application.ports.new_appointment import NewAppointmentPort
from salon_planning.application.ports.staff_source import StaffSourcePort
from salon_planning.application.use_cases.month_calendar import MonthNavigator, build_month_calendar
from salon_planning.application.use_cases.slot_grid import build_slot_grid, hour_range
from salon_planning.application.use_cases.staff_filter import (
    DEFAULT_STAFF_COLOR,
    GROUP,
    INDIVIDUAL,
    VIEW_MODES,
    filter_staff,
    find_staff,
    staff_color,
)
from salon_planning.application.use_cases.week_navigator import WeekNavigator
from salon_planning.application.utils.locale_calendar import short_day_label, weekday_name
from salon_planning.application.utils.time_parser import format_slot_time, parse_calendar_date
from salon_planning.domain.entities.appointment import Appointment
from salon_planning.domain.entities.planning import (
    DayHeader,
    LegendEntry,
    MonthCalendar,
    PlannedAppointment,
    PlanningCell,
    StaffColumn,
    WeekPlanning,
)
from salon_planning.domain.entities.slot_grid import SlotGrid
from salon_planning.domain.entities.staff_member import StaffMember


class PlanningViewUseCase:
    def __init__(
        self,
        appointments: AppointmentSourcePort,
        staff: StaffSourcePort,
        new_appointment: NewAppointmentPort | None = None,
        locale: str = "fr",
        first_weekday: int | None = None,
        start_hour: int = 8,
        end_hour: int = 20,
        default_color: str = DEFAULT_STAFF_COLOR,
        premium_weekdays: tuple[int, ...] = (5,),
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._appointments = appointments
        self._staff = staff
        self._new_appointment = new_appointment
        self._locale = locale
        self._first_weekday = first_weekday
        self._hours = hour_range(start_hour, end_hour)
        self._default_color = default_color
        self._premium_weekdays = frozenset(premium_weekdays)
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    @property
    def hours(self) -> list[int]:
        return list(self._hours)

    def navigator(self, anchor: date | None = None) -> WeekNavigator:
        return WeekNavigator.for_locale(
            self._locale,
            anchor=anchor,
            first_weekday=self._first_weekday,
            clock=self._clock,
        )

    def is_premium_day(self, day: date) -> bool:
        return day.weekday() in self._premium_weekdays

    def build_week(
        self,
        anchor: date | None = None,
        mode: str = GROUP,
        selected_staff_id: int | None = None,
    ) -> WeekPlanning:
        if mode not in VIEW_MODES:
            raise ValueError(f"Unknown view mode: {mode!r}")

        navigator = self.navigator(anchor)
        days = navigator.days()
        appointments = self._load_appointments(days[0], days[-1])
        staff = self._load_staff()
        self._logger.info(
            "Building week planning",
            extra={"anchor": navigator.anchor.isoformat(), "mode": mode, "count": len(appointments)},
        )

        if mode == GROUP:
            grid = build_slot_grid(appointments, days, self._hours)
            column_grids: list[tuple[StaffMember | None, SlotGrid]] = [(None, grid)]
        else:
            column_grids = [
                (member, build_slot_grid(appointments, days, self._hours, staff_id=member.id))
                for member in filter_staff(staff, INDIVIDUAL, selected_staff_id)
            ]

        cells = tuple(
            tuple(
                PlanningCell(
                    day=day,
                    hour=hour,
                    columns=tuple(
                        self._column(member, grid.rows[row][col].appointments, staff)
                        for member, grid in column_grids
                    ),
                )
                for col, day in enumerate(days)
            )
            for row, hour in enumerate(self._hours)
        )

        return WeekPlanning(
            anchor=navigator.anchor,
            previous_anchor=navigator.anchor - timedelta(days=7),
            next_anchor=navigator.anchor + timedelta(days=7),
            week_label=navigator.week_label(),
            mode=mode,
            days=tuple(
                DayHeader(
                    day=day,
                    weekday_name=weekday_name(day, self._locale),
                    short_label=short_day_label(day, self._locale),
                    is_premium=self.is_premium_day(day),
                )
                for day in days
            ),
            hours=tuple(self._hours),
            cells=cells,
            legend=tuple(LegendEntry(staff_id=m.id, name=m.full_name, color=m.color) for m in staff),
        )

    def build_month(self, year: int | None = None, month: int | None = None) -> MonthCalendar:
        navigator = MonthNavigator(year, month, clock=self._clock)
        first = date(navigator.year, navigator.month, 1)
        last = first.replace(day=calendar.monthrange(first.year, first.month)[1])

        appointments = self._load_appointments(first, last)
        return build_month_calendar(
            first.year,
            first.month,
            appointments=[a for a in appointments if _within(a, first, last)],
            first_weekday=self.navigator().first_weekday,
            today=self._clock(),
            locale=self._locale,
        )

    def request_new_appointment(self, day: date, hour: int, staff_id: int | None = None) -> str:
        if self._new_appointment is None:
            raise ValueError("New appointment flow is not configured")
        if hour not in self._hours:
            raise ValueError(f"Hour {hour} is outside the planning range {self._hours[0]}-{self._hours[-1]}")

        request_id = self._new_appointment.start_new_appointment(
            date=day.isoformat(),
            time=format_slot_time(hour),
            staff_id=staff_id,
        )
        self._logger.info(
            "New appointment requested",
            extra={"slot_date": day.isoformat(), "staff_id": staff_id},
        )
        return request_id

    def _column(
        self,
        member: StaffMember | None,
        bucket: tuple[Appointment, ...],
        staff: list[StaffMember],
    ) -> StaffColumn:
        if member is not None:
            return StaffColumn(
                staff_id=member.id,
                label=member.full_name,
                appointments=tuple(
                    PlannedAppointment(
                        appointment=apt,
                        color=member.color or self._default_color,
                        staff_first_name=member.first_name,
                    )
                    for apt in bucket
                ),
            )

        planned = []
        for apt in bucket:
            owner = find_staff(staff, apt.staff_id)
            planned.append(
                PlannedAppointment(
                    appointment=apt,
                    color=staff_color(staff, apt.staff_id, self._default_color),
                    staff_first_name=owner.first_name if owner else None,
                )
            )
        return StaffColumn(staff_id=None, label=None, appointments=tuple(planned))

    def _load_appointments(self, start: date, end: date) -> list[Appointment]:
        try:
            return list(self._appointments.list_appointments(start, end))
        except (BookingApiUpstreamError, BookingApiContractError) as e:
            self._logger.warning("Appointments unavailable, rendering empty planning", extra={"error": str(e)})
            return []

    def _load_staff(self) -> list[StaffMember]:
        try:
            return list(self._staff.list_staff())
        except (BookingApiUpstreamError, BookingApiContractError) as e:
            self._logger.warning("Staff unavailable, rendering planning without staff", extra={"error": str(e)})
            return []


def _within(appointment: Appointment, first: date, last: date) -> bool:
    return first <= parse_calendar_date(appointment.appointment_date) <= last
