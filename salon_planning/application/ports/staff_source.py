from __future__ import annotations

from abc import ABC, abstractmethod

from salon_planning.domain.entities.staff_member import StaffMember


class StaffSourcePort(ABC):
    @abstractmethod
    def list_staff(self) -> list[StaffMember]:
        raise NotImplementedError
