from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from salon_planning.domain.entities.appointment import Appointment


@dataclass(frozen=True)
class SlotBucket:
    day: date
    hour: int
    appointments: tuple[Appointment, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.appointments


@dataclass(frozen=True)
class SlotGrid:
    days: tuple[date, ...]
    hours: tuple[int, ...]
    # rows follow `hours`, columns follow `days`
    rows: tuple[tuple[SlotBucket, ...], ...]

    def bucket(self, day: date, hour: int) -> SlotBucket:
        return self.rows[self.hours.index(hour)][self.days.index(day)]

    def all_appointments(self) -> list[Appointment]:
        return [apt for row in self.rows for bucket in row for apt in bucket.appointments]
