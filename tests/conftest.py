from __future__ import annotations

from datetime import date

import pytest

from student_attendance.attendance.service import AttendanceService
from student_attendance.core.enums import AttendanceStatus
from student_attendance.students.memory_repository import InMemoryStudentRepository
from student_attendance.students.model import Student
from student_attendance.students.store import RecordStore

P = AttendanceStatus.PRESENT
A = AttendanceStatus.ABSENT


def make_student(student_id: str = "1", *, email: str | None = None, attendance=None, name: str = "Jane Smith") -> Student:
    return Student(
        id=student_id,
        roll_number=f"S{int(student_id):03d}" if student_id.isdigit() else student_id,
        name=name,
        email=email or f"student{student_id}@example.com",
        image="img.png",
        attendance=dict(attendance or {}),
    )


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 7, 31)


@pytest.fixture
def repo() -> InMemoryStudentRepository:
    return InMemoryStudentRepository()


@pytest.fixture
def store(repo) -> RecordStore:
    return RecordStore(repo)


@pytest.fixture
def service(store, fixed_today) -> AttendanceService:
    ids = iter(f"id-{n}" for n in range(1, 1000))
    return AttendanceService(store, clock=lambda: fixed_today, id_factory=lambda: next(ids))
