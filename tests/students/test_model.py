from __future__ import annotations

from datetime import date

import pytest

from student_attendance.core.enums import AttendanceStatus, DayStatus
from student_attendance.core.exceptions import PersistenceError
from student_attendance.students.model import Student

from ..conftest import A, P, make_student


def test_status_on_distinguishes_unmarked_from_absent():
    student = make_student(attendance={"2024-07-30": A, "2024-07-31": P})

    assert student.status_on(date(2024, 7, 31)) == DayStatus.PRESENT
    assert student.status_on("2024-07-30") == DayStatus.ABSENT
    assert student.status_on(date(2024, 7, 29)) == DayStatus.UNMARKED


def test_with_status_returns_copy_and_leaves_original():
    student = make_student(attendance={"2024-07-30": A})

    updated = student.with_status(date(2024, 7, 31), P)

    assert updated.attendance == {"2024-07-30": A, "2024-07-31": P}
    assert student.attendance == {"2024-07-30": A}


def test_dict_round_trip_keeps_statuses():
    student = make_student(attendance={"2024-07-31": P})

    data = student.to_dict()
    assert data["attendance"] == {"2024-07-31": "PRESENT"}
    assert Student.from_dict(data) == student


def test_from_dict_rejects_unknown_status():
    data = make_student().to_dict()
    data["attendance"] = {"2024-07-31": "LATE"}

    with pytest.raises(PersistenceError):
        Student.from_dict(data)


def test_from_dict_requires_id():
    data = make_student().to_dict()
    del data["id"]

    with pytest.raises(PersistenceError):
        Student.from_dict(data)


def test_status_enum_accepts_only_two_values():
    assert {s.value for s in AttendanceStatus} == {"PRESENT", "ABSENT"}


def test_from_dict_rejects_bad_date_key():
    data = make_student().to_dict()
    data["attendance"] = {"2024-13-40": "PRESENT"}

    with pytest.raises(PersistenceError):
        Student.from_dict(data)
