from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Appointment:
    id: int
    client_name: str
    service_name: str
    start_time: str  # HH:MM
    end_time: str  # HH:MM
    appointment_date: str  # YYYY-MM-DD, may carry a time part
    status: str = "scheduled"
    staff_id: int | None = None
    staff_name: str | None = None
    price: float | None = None
