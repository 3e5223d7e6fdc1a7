from __future__ import annotations

from typing import Iterable, Sequence

from .model import Student
from .repository import StudentRepository


class InMemoryStudentRepository(StudentRepository):
    """Keeps the collection in process memory. Used by tests and the `memory` backend."""

    def __init__(self, students: Iterable[Student] = ()):
        self._students: tuple[Student, ...] = tuple(students)

    def load_all(self) -> Sequence[Student]:
        return self._students

    def save_all(self, students: Sequence[Student]) -> None:
        self._students = tuple(students)
