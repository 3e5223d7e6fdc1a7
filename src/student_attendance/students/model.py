from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping

from ..common.datetime_utils import DateLike, to_date_key
from ..core.enums import AttendanceStatus, DayStatus
from ..core.exceptions import PersistenceError, ValidationError


@dataclass(frozen=True)
class Student:
    """Domain entity: one student and their per-day attendance map.

    Note: plain data object (no storage access). Instances are treated as
    immutable; use `with_status` to get an updated copy.
    """

    id: str
    roll_number: str
    name: str
    email: str
    image: str
    attendance: Mapping[str, AttendanceStatus] = field(default_factory=dict)

    def status_on(self, day: DateLike) -> DayStatus:
        return DayStatus.from_stored(self.attendance.get(to_date_key(day)))

    def with_status(self, day: DateLike, status: AttendanceStatus) -> "Student":
        attendance = dict(self.attendance)
        attendance[to_date_key(day)] = status
        return replace(self, attendance=attendance)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "roll_number": self.roll_number,
            "name": self.name,
            "email": self.email,
            "image": self.image,
            "attendance": {k: v.value for k, v in sorted(self.attendance.items())},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Student":
        try:
            return cls(
                id=str(data["id"]),
                roll_number=str(data["roll_number"]),
                name=str(data["name"]),
                email=str(data.get("email") or ""),
                image=str(data.get("image") or ""),
                attendance={
                    to_date_key(str(k)): AttendanceStatus(v)
                    for k, v in dict(data.get("attendance") or {}).items()
                },
            )
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            raise PersistenceError(f"Corrupt student record: {e}") from e
