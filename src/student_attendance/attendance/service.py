from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import DateLike, as_date, today_local, to_date_key
from ..common.validators import require_non_empty, require_status
from ..core.constants import DEFAULT_STUDENT_IMAGES, EMAIL_DOMAIN
from ..core.enums import AttendanceStatus
from ..core.exceptions import StudentNotFoundError
from ..students.model import Student
from ..students.naming import default_image, email_from_name
from ..students.store import RecordStore

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: mark attendance and enroll students (admin)."""

    def __init__(
        self,
        store: RecordStore,
        *,
        clock: Callable[[], date] = today_local,
        email_domain: str = EMAIL_DOMAIN,
        images: tuple[str, ...] = DEFAULT_STUDENT_IMAGES,
        id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
    ):
        self._store = store
        self._clock = clock
        self._email_domain = email_domain
        self._images = images
        self._id_factory = id_factory

    def today(self) -> date:
        return self._clock()

    def set_status(
        self,
        student_id: str,
        status: AttendanceStatus | str,
        *,
        on_date: Optional[DateLike] = None,
        missing_ok: bool = False,
    ) -> tuple[Student, ...]:
        """Set one student's status for one day and persist the full collection.

        Unknown ids raise StudentNotFoundError unless `missing_ok` is set, in
        which case the collection is returned unchanged.
        """

        status = require_status(status)
        day_key = to_date_key(on_date if on_date is not None else self._clock())

        with self._store.transaction():
            students = self._store.list()
            index = next((i for i, s in enumerate(students) if s.id == student_id), None)
            if index is None:
                logger.warning("set_status for unknown student %s (missing_ok=%s)", student_id, missing_ok)
                if missing_ok:
                    return students
                raise StudentNotFoundError(student_id)

            updated = list(students)
            updated[index] = students[index].with_status(day_key, status)
            self._store.replace(updated)

        logger.info("Student %s marked %s on %s", student_id, status.value, day_key)
        return tuple(updated)

    def add_student(
        self,
        *,
        name: str,
        roll_number: str,
        image: Optional[str] = None,
        email: Optional[str] = None,
        on_date: Optional[DateLike] = None,
    ) -> tuple[Student, ...]:
        name = require_non_empty(name, "Name")
        roll_number = require_non_empty(roll_number, "Roll number")
        today = as_date(on_date) if on_date is not None else self._clock()

        with self._store.transaction():
            students = self._store.list()
            student = Student(
                id=self._id_factory(),
                roll_number=roll_number,
                name=name,
                email=(email or "").strip() or email_from_name(name, domain=self._email_domain, fallback=roll_number),
                image=(image or "").strip() or default_image(len(students), self._images),
                attendance={to_date_key(today): AttendanceStatus.ABSENT},
            )
            updated = students + (student,)
            self._store.replace(updated)

        logger.info("Added student %s (%s, %s)", student.id, student.roll_number, student.email)
        return updated

    def get_student(self, student_id: str) -> Student:
        student = self._store.find_by_id(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return student

    def list_students(self) -> tuple[Student, ...]:
        return self._store.list()
