from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date

from ..common.datetime_utils import to_date_key
from ..core.enums import DayStatus
from ..core.exceptions import ValidationError
from ..students.model import Student


@dataclass(frozen=True)
class CalendarDay:
    date: str
    weekday: int  # 0 = Sunday, matching the dashboard grid
    status: DayStatus


def month_calendar(student: Student, year: int, month: int) -> list[CalendarDay]:
    """Tri-state status for every day of a month (UNMARKED where nothing was recorded)."""

    year, month = int(year), int(month)
    if not MINYEAR <= year <= MAXYEAR:
        raise ValidationError(f"Invalid year {year!r}")
    if not 1 <= month <= 12:
        raise ValidationError(f"Invalid month {month!r}")

    days_in_month = calendar.monthrange(year, month)[1]
    days = (date(year, month, d) for d in range(1, days_in_month + 1))
    return [
        CalendarDay(date=to_date_key(day), weekday=(day.weekday() + 1) % 7, status=student.status_on(day))
        for day in days
    ]
