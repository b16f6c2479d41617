from __future__ import annotations

import datetime as dt
from datetime import date
from enum import Enum

from pydantic import BaseModel, Field

from salon_planning.domain.entities.appointment import Appointment
from salon_planning.domain.entities.planning import MonthCalendar, WeekPlanning
from salon_planning.domain.entities.staff_member import StaffMember


class ViewMode(str, Enum):
    group = "group"
    individual = "individual"


class AppointmentSchema(BaseModel):
    id: int
    client_name: str
    service_name: str
    start_time: str
    end_time: str
    appointment_date: str
    status: str
    staff_id: int | None = None
    staff_name: str | None = None
    price: float | None = None

    @staticmethod
    def from_entity(apt: Appointment) -> "AppointmentSchema":
        return AppointmentSchema(
            id=apt.id,
            client_name=apt.client_name,
            service_name=apt.service_name,
            start_time=apt.start_time,
            end_time=apt.end_time,
            appointment_date=apt.appointment_date,
            status=apt.status,
            staff_id=apt.staff_id,
            staff_name=apt.staff_name,
            price=apt.price,
        )


class PlannedAppointmentSchema(BaseModel):
    appointment: AppointmentSchema
    color: str
    staff_first_name: str | None = None


class StaffColumnSchema(BaseModel):
    staff_id: int | None = None
    label: str | None = None
    appointments: list[PlannedAppointmentSchema] = Field(default_factory=list)


class PlanningCellSchema(BaseModel):
    day: date
    hour: int
    columns: list[StaffColumnSchema]


class DayHeaderSchema(BaseModel):
    day: date
    weekday_name: str
    short_label: str
    is_premium: bool


class LegendEntrySchema(BaseModel):
    staff_id: int
    name: str
    color: str


class WeekPlanningSchema(BaseModel):
    anchor: date
    previous_anchor: date
    next_anchor: date
    week_label: str
    mode: ViewMode
    days: list[DayHeaderSchema]
    hours: list[int]
    cells: list[list[PlanningCellSchema]]
    legend: list[LegendEntrySchema]

    @staticmethod
    def from_entity(planning: WeekPlanning) -> "WeekPlanningSchema":
        return WeekPlanningSchema(
            anchor=planning.anchor,
            previous_anchor=planning.previous_anchor,
            next_anchor=planning.next_anchor,
            week_label=planning.week_label,
            mode=ViewMode(planning.mode),
            days=[
                DayHeaderSchema(day=d.day, weekday_name=d.weekday_name, short_label=d.short_label, is_premium=d.is_premium)
                for d in planning.days
            ],
            hours=list(planning.hours),
            cells=[
                [
                    PlanningCellSchema(
                        day=cell.day,
                        hour=cell.hour,
                        columns=[
                            StaffColumnSchema(
                                staff_id=col.staff_id,
                                label=col.label,
                                appointments=[
                                    PlannedAppointmentSchema(
                                        appointment=AppointmentSchema.from_entity(p.appointment),
                                        color=p.color,
                                        staff_first_name=p.staff_first_name,
                                    )
                                    for p in col.appointments
                                ],
                            )
                            for col in cell.columns
                        ],
                    )
                    for cell in row
                ]
                for row in planning.cells
            ],
            legend=[LegendEntrySchema(staff_id=e.staff_id, name=e.name, color=e.color) for e in planning.legend],
        )


class MonthDaySchema(BaseModel):
    day: date
    is_today: bool
    appointments: list[AppointmentSchema]


class MonthCalendarSchema(BaseModel):
    year: int
    month: int
    title: str
    weekday_names: list[str]
    cells: list[MonthDaySchema | None]

    @staticmethod
    def from_entity(month: MonthCalendar) -> "MonthCalendarSchema":
        return MonthCalendarSchema(
            year=month.year,
            month=month.month,
            title=month.title,
            weekday_names=list(month.weekday_names),
            cells=[
                None
                if cell is None
                else MonthDaySchema(
                    day=cell.day,
                    is_today=cell.is_today,
                    appointments=[AppointmentSchema.from_entity(a) for a in cell.appointments],
                )
                for cell in month.cells
            ],
        )


class NewAppointmentRequestSchema(BaseModel):
    date: dt.date
    hour: int = Field(ge=0, le=23)
    staff_id: int | None = None


class NewAppointmentResponseSchema(BaseModel):
    request_id: str


class StaffMemberSchema(BaseModel):
    id: int
    first_name: str
    last_name: str
    color: str
    specialties: list[str] = Field(default_factory=list)

    @staticmethod
    def from_entity(member: StaffMember) -> "StaffMemberSchema":
        return StaffMemberSchema(
            id=member.id,
            first_name=member.first_name,
            last_name=member.last_name,
            color=member.color,
            specialties=list(member.specialties),
        )


class StaffCreateSchema(BaseModel):
    first_name: str = Field(min_length=1)
    last_name: str = ""
    color: str | None = None
    specialties: list[str] = Field(default_factory=list)


class StaffUpdateSchema(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    color: str | None = None
    specialties: list[str] | None = None
