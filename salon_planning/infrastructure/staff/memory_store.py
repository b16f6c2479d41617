from __future__ import annotations

from salon_planning.application.ports.staff_store import StaffStorePort
from salon_planning.domain.entities.staff_member import StaffMember


class MemoryStaffStore(StaffStorePort):
    def __init__(self, staff: list[StaffMember] | None = None) -> None:
        self._staff: tuple[StaffMember, ...] | None = tuple(staff) if staff is not None else None

    def load(self) -> list[StaffMember] | None:
        if self._staff is None:
            return None
        return list(self._staff)

    def save(self, staff: list[StaffMember]) -> None:
        self._staff = tuple(staff)
