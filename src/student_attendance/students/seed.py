"""Demo data for a fresh store. Not used by the attendance engine itself."""

from __future__ import annotations

import random
from datetime import date
from typing import Optional

from ..common.datetime_utils import iter_days_back, to_date_key
from ..core.constants import DEFAULT_SEED_DAYS, DEFAULT_STUDENT_IMAGES
from ..core.enums import AttendanceStatus
from .model import Student

DEMO_STUDENTS = (
    # (id, roll number, name, email, force present today)
    ("1", "S001", "John Doe", "john.doe@example.com", False),
    ("2", "S002", "Jane Smith", "student@example.com", True),
    ("3", "S003", "Peter Jones", "peter.jones@example.com", False),
    ("4", "S004", "Mary Johnson", "mary.j@example.com", False),
    ("5", "S005", "David Williams", "dave.w@example.com", True),
)


def random_history(today: date, rng: random.Random, *, days: int = DEFAULT_SEED_DAYS) -> dict[str, AttendanceStatus]:
    """Random statuses for the last `days` days; today is present less often than past days."""

    history: dict[str, AttendanceStatus] = {}
    for offset, day in enumerate(iter_days_back(today, days)):
        threshold = 0.6 if offset == 0 else 0.3
        history[to_date_key(day)] = AttendanceStatus.PRESENT if rng.random() > threshold else AttendanceStatus.ABSENT
    return history


def demo_students(today: date, *, seed: Optional[int] = None, days: int = DEFAULT_SEED_DAYS) -> list[Student]:
    rng = random.Random(seed)
    students = []
    for index, (student_id, roll, name, email, present_today) in enumerate(DEMO_STUDENTS):
        history = random_history(today, rng, days=days)
        if present_today:
            history[to_date_key(today)] = AttendanceStatus.PRESENT
        students.append(
            Student(
                id=student_id,
                roll_number=roll,
                name=name,
                email=email,
                image=DEFAULT_STUDENT_IMAGES[index % len(DEFAULT_STUDENT_IMAGES)],
                attendance=history,
            )
        )
    return students


def seed_if_empty(store, today: date, *, seed: Optional[int] = None) -> bool:
    """Fill an empty store with demo students. Returns True if anything was written."""

    with store.transaction():
        if store.list():
            return False
        store.replace(demo_students(today, seed=seed))
    return True
