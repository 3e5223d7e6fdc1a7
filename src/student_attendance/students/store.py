from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Callable, Iterable, Iterator, Optional

from ..core.exceptions import PersistenceError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class RecordStore:
    """Holds the student collection on top of a StudentRepository.

    Every write replaces the whole collection. `transaction()` serializes a
    read-modify-write sequence against other writers in the same process.
    """

    def __init__(self, repository: StudentRepository):
        self._repository = repository
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator["RecordStore"]:
        with self._lock:
            yield self

    def list(self) -> tuple[Student, ...]:
        try:
            return tuple(self._repository.load_all())
        except PersistenceError:
            logger.exception("Loading students failed")
            raise

    def find(self, predicate: Callable[[Student], bool]) -> Optional[Student]:
        for student in self.list():
            if predicate(student):
                return student
        return None

    def find_by_id(self, student_id: str) -> Optional[Student]:
        return self.find(lambda s: s.id == student_id)

    def find_by_email(self, email: str) -> Optional[Student]:
        """First student whose email matches case-insensitively (emails are not unique)."""

        wanted = (email or "").strip().lower()
        if not wanted:
            return None
        return self.find(lambda s: s.email.lower() == wanted)

    def replace(self, students: Iterable[Student]) -> None:
        snapshot = tuple(students)
        with self._lock:
            try:
                self._repository.save_all(snapshot)
            except PersistenceError:
                logger.exception("Saving %d students failed", len(snapshot))
                raise
