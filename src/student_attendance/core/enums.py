from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Caller role supplied by whoever authenticated the request."""

    ADMIN = "ADMIN"
    USER = "USER"


class AttendanceStatus(str, Enum):
    """Status values that may be stored for a student on a date."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


class DayStatus(str, Enum):
    """Read-side view of a single day.

    UNMARKED is never stored; it means the attendance map has no key for the day.
    """

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    UNMARKED = "UNMARKED"

    @classmethod
    def from_stored(cls, status: AttendanceStatus | None) -> "DayStatus":
        if status is None:
            return cls.UNMARKED
        return cls(status.value)
