from __future__ import annotations

import threading
import time
from collections.abc import Callable

from salon_planning.domain.entities.staff_member import StaffMember


class StaffCache:
    """In-process copy of the staff list.

    Entries expire after `ttl_seconds`; writers call invalidate() after every save.
    A ttl of 0 disables caching.

    Every invalidate() bumps `generation`. A reader that missed the cache reads the
    generation before loading the store and hands it back to put(); the list is only
    kept when no write happened in between.
    """

    def __init__(self, ttl_seconds: float = 60.0, clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._staff: tuple[StaffMember, ...] | None = None
        self._stored_at: float | None = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def get(self) -> list[StaffMember] | None:
        with self._lock:
            if self._staff is None or self._stored_at is None:
                return None
            if self._clock() - self._stored_at >= self._ttl_seconds:
                self._staff = None
                self._stored_at = None
                return None
            return list(self._staff)

    def put(self, staff: list[StaffMember], generation: int | None = None) -> bool:
        """Store the list. Returns False when `generation` is stale and the list was dropped."""
        with self._lock:
            if generation is not None and generation != self._generation:
                return False
            self._staff = tuple(staff)
            self._stored_at = self._clock()
            return True

    def invalidate(self) -> None:
        with self._lock:
            self._generation += 1
            self._staff = None
            self._stored_at = None
