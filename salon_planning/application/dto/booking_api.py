from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from salon_planning.application.utils.time_parser import parse_calendar_date, parse_hour
from salon_planning.domain.entities.appointment import Appointment
from salon_planning.domain.entities.staff_member import StaffMember


class AppointmentDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    client_name: str | None = Field(None, alias="clientName")
    service_name: str | None = Field(None, alias="serviceName")
    service: dict[str, Any] | None = None
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    appointment_date: str = Field(alias="appointmentDate")
    staff_id: int | None = Field(None, alias="staffId")
    staff_name: str | None = Field(None, alias="staffName")
    status: str = "scheduled"
    price: float | None = None
    total_price: float | None = Field(None, alias="totalPrice")

    @field_validator("start_time", "end_time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        parse_hour(value)
        return value

    @field_validator("appointment_date")
    @classmethod
    def _check_date(cls, value: str) -> str:
        parse_calendar_date(value)
        return value

    @model_validator(mode="after")
    def _fill_service_name(self) -> "AppointmentDTO":
        if not self.service_name and self.service:
            name = self.service.get("name")
            if name:
                self.service_name = str(name)
        return self

    def to_entity(self) -> Appointment:
        return Appointment(
            id=self.id,
            client_name=self.client_name or "Client",
            service_name=self.service_name or "Service",
            start_time=self.start_time,
            end_time=self.end_time,
            appointment_date=self.appointment_date,
            status=self.status,
            staff_id=self.staff_id,
            staff_name=self.staff_name,
            price=self.price if self.price is not None else self.total_price,
        )


class StaffMemberDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    first_name: str = Field(alias="firstName")
    last_name: str = Field("", alias="lastName")
    color: str | None = None
    specialties: list[str] = Field(default_factory=list)

    def to_entity(self, default_color: str) -> StaffMember:
        return StaffMember(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name or "",
            color=self.color or default_color,
            specialties=tuple(self.specialties),
        )
