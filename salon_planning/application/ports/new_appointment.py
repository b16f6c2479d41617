from __future__ import annotations

from abc import ABC, abstractmethod


class NewAppointmentPort(ABC):
    @abstractmethod
    def start_new_appointment(self, date: str, time: str, staff_id: int | None = None) -> str:
        """Hand an empty-slot click over to the booking flow. Returns the flow's request id."""
        raise NotImplementedError
