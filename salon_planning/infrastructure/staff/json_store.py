from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

from salon_planning.application.ports.staff_store import StaffStorePort
from salon_planning.domain.entities.staff_member import StaffMember


class JsonStaffStore(StaffStorePort):
    def __init__(self, path: str = "./data/staff.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def load(self) -> list[StaffMember] | None:
        """Load staff from the JSON file. Missing or corrupted files count as never saved."""
        with self._lock:
            if not self._path.exists():
                return None
            try:
                with open(self._path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (json.JSONDecodeError, IOError) as e:
                self._logger.warning("Staff file unreadable, ignoring it", extra={"error": str(e)})
                return None

        if not isinstance(data, dict) or not isinstance(data.get("staff"), list):
            self._logger.warning("Staff file has an unexpected layout, ignoring it")
            return None
        try:
            return [self._deserialize(item) for item in data["staff"]]
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            self._logger.warning("Staff file has an invalid entry, ignoring it", extra={"error": repr(e)})
            return None

    def save(self, staff: list[StaffMember]) -> None:
        """Write the staff list atomically (temp file + rename)."""
        data = {"version": 1, "staff": [self._serialize(m) for m in staff]}
        temp_path = self._path.with_suffix(".json.tmp")

        with self._lock:
            try:
                with open(temp_path, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                temp_path.replace(self._path)
            except Exception:
                if temp_path.exists():
                    temp_path.unlink()
                raise

    def _serialize(self, member: StaffMember) -> dict[str, Any]:
        return {
            "id": member.id,
            "first_name": member.first_name,
            "last_name": member.last_name,
            "color": member.color,
            "specialties": list(member.specialties),
        }

    def _deserialize(self, data: dict[str, Any]) -> StaffMember:
        return StaffMember(
            id=int(data["id"]),
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            color=data.get("color", ""),
            specialties=tuple(data.get("specialties") or ()),
        )
