from __future__ import annotations

from collections.abc import Iterable

from salon_planning.domain.entities.staff_member import StaffMember

GROUP = "group"
INDIVIDUAL = "individual"
VIEW_MODES = (GROUP, INDIVIDUAL)

DEFAULT_STAFF_COLOR = "#8B5CF6"


def filter_staff(
    staff: Iterable[StaffMember],
    mode: str,
    selected_staff_id: int | None = None,
) -> list[StaffMember]:
    """Staff shown by the planning.

    Group mode shows everyone. Individual mode shows the selected member only,
    and nobody when no member is selected.
    """
    if mode == GROUP:
        return list(staff)
    if mode == INDIVIDUAL:
        if selected_staff_id is None:
            return []
        return [member for member in staff if member.id == selected_staff_id]
    raise ValueError(f"Unknown view mode: {mode!r}")


def find_staff(staff: Iterable[StaffMember], staff_id: int | None) -> StaffMember | None:
    if staff_id is None:
        return None
    for member in staff:
        if member.id == staff_id:
            return member
    return None


def staff_color(staff: Iterable[StaffMember], staff_id: int | None, default: str = DEFAULT_STAFF_COLOR) -> str:
    member = find_staff(staff, staff_id)
    if member and member.color:
        return member.color
    return default
