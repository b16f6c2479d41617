from __future__ import annotations

import logging
from datetime import date
from typing import Any

from pydantic import TypeAdapter, ValidationError

from salon_planning.application.dto.booking_api import AppointmentDTO, StaffMemberDTO
from salon_planning.application.exceptions import BookingApiContractError
from salon_planning.application.ports.appointment_source import AppointmentSourcePort
from salon_planning.application.ports.new_appointment import NewAppointmentPort
from salon_planning.application.ports.staff_store import StaffStorePort
from salon_planning.application.use_cases.staff_filter import DEFAULT_STAFF_COLOR
from salon_planning.domain.entities.appointment import Appointment
from salon_planning.domain.entities.staff_member import StaffMember
from salon_planning.infrastructure.booking_api.client import BookingApiClient

_appointments_adapter = TypeAdapter(list[AppointmentDTO])
_staff_adapter = TypeAdapter(list[StaffMemberDTO])


def _unwrap_list(data: Any, key: str) -> Any:
    # some endpoints wrap the list: {"appointments": [...]}
    if isinstance(data, dict) and key in data:
        return data[key]
    return data


class HttpAppointmentSource(AppointmentSourcePort):
    def __init__(self, client: BookingApiClient) -> None:
        self._client = client
        self._logger = logging.getLogger(__name__)

    def list_appointments(self, start: date | None = None, end: date | None = None) -> list[Appointment]:
        params: dict[str, str] = {}
        if start:
            params["startDate"] = start.isoformat()
        if end:
            params["endDate"] = end.isoformat()

        data = _unwrap_list(self._client.get_json("/api/appointments", params=params or None), "appointments")
        try:
            dtos = _appointments_adapter.validate_python(data)
        except ValidationError as e:
            raise BookingApiContractError(f"Invalid appointments payload: {e.error_count()} error(s)") from e

        self._logger.info("Appointments fetched", extra={"count": len(dtos)})
        return [dto.to_entity() for dto in dtos]


class HttpStaffStore(StaffStorePort):
    """Staff kept by the booking API.

    load() never returns None, so the directory does not seed a remote team.
    """

    def __init__(self, client: BookingApiClient, default_color: str = DEFAULT_STAFF_COLOR) -> None:
        self._client = client
        self._default_color = default_color
        self._logger = logging.getLogger(__name__)

    def load(self) -> list[StaffMember]:
        data = _unwrap_list(self._client.get_json("/api/staff"), "staff")
        try:
            dtos = _staff_adapter.validate_python(data)
        except ValidationError as e:
            raise BookingApiContractError(f"Invalid staff payload: {e.error_count()} error(s)") from e
        return [dto.to_entity(self._default_color) for dto in dtos]

    def save(self, staff: list[StaffMember]) -> None:
        """Make the remote list match `staff` with per-member calls."""
        current = {m.id: m for m in self.load()}
        wanted = {m.id for m in staff}

        for staff_id in current:
            if staff_id not in wanted:
                self.delete(staff_id)
        for member in staff:
            if member.id not in current:
                self.add(member)
            elif current[member.id] != member:
                self.update(member)

    def add(self, member: StaffMember) -> StaffMember:
        data = self._client.post_json("/api/staff", _staff_payload(member))
        created = self._to_entity(data)
        self._logger.info("Staff member created upstream", extra={"staff_id": created.id})
        return created

    def update(self, member: StaffMember) -> StaffMember:
        data = self._client.put_json(f"/api/staff/{member.id}", _staff_payload(member))
        if data is None:
            return member
        return self._to_entity(data)

    def delete(self, staff_id: int) -> None:
        self._client.delete(f"/api/staff/{staff_id}")

    def _to_entity(self, data: Any) -> StaffMember:
        try:
            return StaffMemberDTO.model_validate(data).to_entity(self._default_color)
        except ValidationError as e:
            raise BookingApiContractError(f"Invalid staff member payload: {e.error_count()} error(s)") from e


def _staff_payload(member: StaffMember) -> dict[str, Any]:
    return {
        "firstName": member.first_name,
        "lastName": member.last_name,
        "color": member.color,
        "specialties": list(member.specialties),
    }


class HttpNewAppointmentFlow(NewAppointmentPort):
    def __init__(self, client: BookingApiClient) -> None:
        self._client = client

    def start_new_appointment(self, date: str, time: str, staff_id: int | None = None) -> str:
        payload: dict[str, Any] = {"date": date, "time": time}
        if staff_id is not None:
            payload["staffId"] = staff_id

        data = self._client.post_json("/api/appointments/draft", payload)
        request_id = data.get("id") if isinstance(data, dict) else None
        if request_id is None:
            raise BookingApiContractError("No draft id returned by the booking API")
        return str(request_id)
