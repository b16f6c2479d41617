from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import replace

from salon_planning.application.exceptions import StaffNotFoundError
from salon_planning.application.ports.staff_source import StaffSourcePort
from salon_planning.application.ports.staff_store import StaffStorePort
from salon_planning.application.utils.staff_cache import StaffCache
from salon_planning.domain.entities.staff_member import StaffMember

StaffListener = Callable[[list[StaffMember]], None]

STAFF_PALETTE = ("#8B5CF6", "#EC4899", "#10B981", "#F59E0B", "#3B82F6", "#EF4444")

DEFAULT_TEAM = (
    StaffMember(id=1, first_name="Antoine", last_name="", color="#3B82F6",
                specialties=("Coupe homme", "Barbe", "Coiffure classique")),
    StaffMember(id=2, first_name="Marie", last_name="", color="#EC4899",
                specialties=("Coupe femme", "Coloration", "Brushing")),
    StaffMember(id=3, first_name="Julien", last_name="", color="#10B981",
                specialties=("Coupe moderne", "Styling", "Coupe dégradée")),
    StaffMember(id=4, first_name="Sophie", last_name="", color="#F59E0B",
                specialties=("Coiffure mixte", "Extensions", "Chignon")),
)

_EDITABLE_FIELDS = {"first_name", "last_name", "color", "specialties"}


class StaffDirectory(StaffSourcePort):
    """Staff list shared by the planning and the team management screens.

    Writes go to the store, drop the cache, then notify subscribers with the new list.
    """

    def __init__(
        self,
        store: StaffStorePort,
        cache: StaffCache | None = None,
        seed: tuple[StaffMember, ...] | list[StaffMember] = DEFAULT_TEAM,
    ) -> None:
        self._store = store
        self._cache = cache or StaffCache()
        self._seed = tuple(seed)
        self._listeners: list[StaffListener] = []
        # reentrant: writers read the list (and may seed it) while holding the lock
        self._write_lock = threading.RLock()
        self._logger = logging.getLogger(__name__)

    @property
    def store(self) -> StaffStorePort:
        return self._store

    def list_staff(self) -> list[StaffMember]:
        cached = self._cache.get()
        if cached is not None:
            return cached

        generation = self._cache.generation
        stored = self._store.load()
        if stored is None:
            stored = self._seed_store()
        self._cache.put(stored, generation=generation)
        return list(stored)

    def get_staff(self, staff_id: int) -> StaffMember:
        for member in self.list_staff():
            if member.id == staff_id:
                return member
        raise StaffNotFoundError(f"Staff member {staff_id} not found")

    def add_staff(
        self,
        first_name: str,
        last_name: str = "",
        color: str | None = None,
        specialties: list[str] | tuple[str, ...] = (),
    ) -> StaffMember:
        first_name = _required_name(first_name)

        with self._write_lock:
            staff = self.list_staff()
            new_id = max((m.id for m in staff), default=0) + 1
            member = StaffMember(
                id=new_id,
                first_name=first_name,
                last_name=(last_name or "").strip(),
                color=color or STAFF_PALETTE[len(staff) % len(STAFF_PALETTE)],
                specialties=_clean_specialties(specialties),
            )
            member = self._store.add(member)
            self._committed()
        self._logger.info("Staff member added", extra={"staff_id": member.id})
        return member

    def update_staff(self, staff_id: int, **changes: object) -> StaffMember:
        unknown = set(changes) - _EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        if "first_name" in changes:
            changes["first_name"] = _required_name(changes["first_name"])
        if "last_name" in changes:
            changes["last_name"] = str(changes["last_name"] or "").strip()
        if "specialties" in changes:
            changes["specialties"] = _clean_specialties(changes["specialties"] or ())  # type: ignore[arg-type]

        with self._write_lock:
            current = self.get_staff(staff_id)
            updated = self._store.update(replace(current, **changes))
            self._committed()
        self._logger.info("Staff member updated", extra={"staff_id": staff_id})
        return updated

    def delete_staff(self, staff_id: int) -> None:
        with self._write_lock:
            self.get_staff(staff_id)
            self._store.delete(staff_id)
            self._committed()
        self._logger.info("Staff member deleted", extra={"staff_id": staff_id})

    def replace_all(self, staff: list[StaffMember]) -> None:
        with self._write_lock:
            self._store.save(list(staff))
            self._committed()

    def subscribe(self, listener: StaffListener) -> Callable[[], None]:
        """Register a listener for staff changes. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _seed_store(self) -> list[StaffMember]:
        with self._write_lock:
            stored = self._store.load()
            if stored is not None:
                return stored
            stored = list(self._seed)
            self._store.save(stored)
        self._logger.info("Staff store seeded", extra={"count": len(stored)})
        return stored

    def _committed(self) -> None:
        self._cache.invalidate()
        if not self._listeners:
            return
        staff = self.list_staff()
        for listener in list(self._listeners):
            try:
                listener(list(staff))
            except Exception as e:
                self._logger.exception("Staff listener failed", extra={"error": str(e)})


def _required_name(value: object) -> str:
    name = str(value or "").strip()
    if not name:
        raise ValueError("first_name is required")
    return name


def _clean_specialties(specialties: Iterable[str]) -> tuple[str, ...]:
    return tuple(s.strip() for s in specialties if s and s.strip())
