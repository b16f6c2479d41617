from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from salon_planning.domain.entities.appointment import Appointment


class AppointmentSourcePort(ABC):
    @abstractmethod
    def list_appointments(self, start: date | None = None, end: date | None = None) -> list[Appointment]:
        """List appointments, optionally narrowed to [start, end]. Callers must not rely on the narrowing."""
        raise NotImplementedError
