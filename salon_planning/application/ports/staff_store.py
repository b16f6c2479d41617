from __future__ import annotations

from abc import ABC, abstractmethod

from salon_planning.application.exceptions import StaffNotFoundError
from salon_planning.domain.entities.staff_member import StaffMember


class StaffStorePort(ABC):
    """Where the staff directory keeps its members.

    Only load() and save() are required. The per-member writes default to a
    read-modify-write of the whole list; remote stores override them.
    """

    @abstractmethod
    def load(self) -> list[StaffMember] | None:
        """Return the stored staff list, or None when nothing was ever saved."""
        raise NotImplementedError

    @abstractmethod
    def save(self, staff: list[StaffMember]) -> None:
        raise NotImplementedError

    def add(self, member: StaffMember) -> StaffMember:
        """Store a new member and return it as stored (the store may assign the id)."""
        self.save([*(self.load() or []), member])
        return member

    def update(self, member: StaffMember) -> StaffMember:
        staff = self.load() or []
        if not any(m.id == member.id for m in staff):
            raise StaffNotFoundError(f"Staff member {member.id} not found")
        self.save([member if m.id == member.id else m for m in staff])
        return member

    def delete(self, staff_id: int) -> None:
        staff = self.load() or []
        remaining = [m for m in staff if m.id != staff_id]
        if len(remaining) == len(staff):
            raise StaffNotFoundError(f"Staff member {staff_id} not found")
        self.save(remaining)
