from __future__ import annotations

import logging
from datetime import date

from salon_planning.application.ports.appointment_source import AppointmentSourcePort
from salon_planning.application.ports.new_appointment import NewAppointmentPort
from salon_planning.application.utils.time_parser import parse_calendar_date
from salon_planning.domain.entities.appointment import Appointment


class MockBookingApi(AppointmentSourcePort, NewAppointmentPort):
    def __init__(self, appointments: list[Appointment] | None = None) -> None:
        self._appointments: list[Appointment] = list(appointments or [])
        self._requests: dict[str, tuple[str, str, int | None]] = {}
        self._logger = logging.getLogger(__name__)

    @property
    def requests(self) -> dict[str, tuple[str, str, int | None]]:
        return dict(self._requests)

    def add(self, appointment: Appointment) -> None:
        self._appointments.append(appointment)

    def list_appointments(self, start: date | None = None, end: date | None = None) -> list[Appointment]:
        result = []
        for apt in self._appointments:
            day = parse_calendar_date(apt.appointment_date)
            if start and day < start:
                continue
            if end and day > end:
                continue
            result.append(apt)
        return result

    def start_new_appointment(self, date: str, time: str, staff_id: int | None = None) -> str:
        request_id = f"mock_request_{len(self._requests) + 1}"
        self._requests[request_id] = (date, time, staff_id)
        self._logger.info(
            "Mock new appointment request recorded",
            extra={"request_id": request_id, "slot_date": date, "staff_id": staff_id},
        )
        return request_id
