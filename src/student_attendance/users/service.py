from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from ..attendance.streak import ConsecutivePresentStreak, StreakCalculator
from ..attendance.summary import StudentTotals, student_totals
from ..common.datetime_utils import today_local
from ..core.enums import DayStatus
from ..core.exceptions import AuthorizationError, StudentNotFoundError
from ..students.model import Student
from ..students.store import RecordStore
from .model import Viewer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StudentOverview:
    """What the student dashboard shows for one record."""

    student: Student
    today_status: DayStatus
    streak: int
    totals: StudentTotals


class ViewerService:
    """Use case: read access for the two roles."""

    def __init__(
        self,
        store: RecordStore,
        *,
        streaks: Optional[StreakCalculator] = None,
        clock: Callable[[], date] = today_local,
    ):
        self._store = store
        self._streaks = streaks or ConsecutivePresentStreak()
        self._clock = clock

    @staticmethod
    def require_admin(viewer: Viewer) -> None:
        if not viewer.is_admin:
            logger.warning("User %s denied admin action", viewer.user_id)
            raise AuthorizationError("Admin role required")

    def resolve_student(self, viewer: Viewer, *, email: Optional[str] = None) -> Student:
        """Record the viewer may look at as "their own".

        A USER always gets the record matching their own id (an email). An
        ADMIN may pass `email` to view as that student.
        """

        if email and not viewer.is_admin and email.strip().lower() != viewer.user_id.strip().lower():
            raise AuthorizationError("Cannot view another student's record")
        lookup = email if (email and viewer.is_admin) else viewer.user_id
        student = self._store.find_by_email(lookup)
        if student is None:
            raise StudentNotFoundError(lookup)
        return student

    def overview(self, student: Student, *, as_of: Optional[date] = None) -> StudentOverview:
        day = as_of or self._clock()
        return StudentOverview(
            student=student,
            today_status=student.status_on(day),
            streak=self._streaks.streak(student, day),
            totals=student_totals(student),
        )

    def own_overview(self, viewer: Viewer, *, email: Optional[str] = None, as_of: Optional[date] = None) -> StudentOverview:
        return self.overview(self.resolve_student(viewer, email=email), as_of=as_of)
