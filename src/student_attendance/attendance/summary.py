"""Derived views over a snapshot of students. Pure functions, nothing cached."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, timedelta
from typing import Iterable, Sequence

from ..common.datetime_utils import DateLike, as_date, to_date_key
from ..core.constants import DEFAULT_TREND_DAYS, MAX_TREND_DAYS
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..students.model import Student


@dataclass(frozen=True)
class DailySummary:
    date: str
    present: int
    absent: int
    total: int
    percentage: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class StudentTotals:
    present_days: int
    absent_days: int

    @property
    def marked_days(self) -> int:
        return self.present_days + self.absent_days

    def to_dict(self) -> dict:
        return {"present_days": self.present_days, "absent_days": self.absent_days, "marked_days": self.marked_days}


def daily_summary(students: Iterable[Student], day: DateLike) -> DailySummary:
    """Present/absent counts for one day across all students.

    Unmarked students are counted as absent; only an explicit PRESENT counts.
    """

    key = to_date_key(day)
    students = list(students)
    total = len(students)
    present = sum(1 for s in students if s.attendance.get(key) == AttendanceStatus.PRESENT)
    percentage = (present / total) * 100 if total else 0.0
    return DailySummary(date=key, present=present, absent=total - present, total=total, percentage=percentage)


def summary_trend(students: Sequence[Student], end: DateLike, *, days: int = DEFAULT_TREND_DAYS) -> list[DailySummary]:
    """Daily summaries for the `days` days ending at `end`, oldest first."""

    if not 1 <= days <= MAX_TREND_DAYS:
        raise ValidationError(f"days must be between 1 and {MAX_TREND_DAYS}")
    end_day: date = as_date(end)
    try:
        start = end_day - timedelta(days=days - 1)
    except OverflowError:
        raise ValidationError("Trend window starts before the first supported date") from None
    return [daily_summary(students, start + timedelta(days=offset)) for offset in range(days)]


def student_totals(student: Student) -> StudentTotals:
    present = sum(1 for v in student.attendance.values() if v == AttendanceStatus.PRESENT)
    return StudentTotals(present_days=present, absent_days=len(student.attendance) - present)
