from __future__ import annotations

import pytest

from student_attendance.attendance.calendar_view import month_calendar
from student_attendance.core.enums import DayStatus
from student_attendance.core.exceptions import ValidationError

from ..conftest import A, P, make_student


def test_month_calendar_covers_every_day_with_tri_state():
    student = make_student(attendance={"2024-07-01": P, "2024-07-02": A})

    days = month_calendar(student, 2024, 7)

    assert len(days) == 31
    assert days[0].date == "2024-07-01"
    assert days[0].weekday == 1  # Monday
    assert [d.status for d in days[:3]] == [DayStatus.PRESENT, DayStatus.ABSENT, DayStatus.UNMARKED]


def test_month_calendar_february_leap_year():
    assert len(month_calendar(make_student(), 2024, 2)) == 29


def test_month_calendar_rejects_bad_month():
    with pytest.raises(ValidationError):
        month_calendar(make_student(), 2024, 13)


@pytest.mark.parametrize("year", [0, -1, 10000])
def test_month_calendar_rejects_year_out_of_range(year):
    with pytest.raises(ValidationError):
        month_calendar(make_student(), year, 1)


def test_month_calendar_first_and_last_supported_months():
    assert month_calendar(make_student(), 1, 1)[0].date == "0001-01-01"
    assert month_calendar(make_student(), 9999, 12)[-1].date == "9999-12-31"
