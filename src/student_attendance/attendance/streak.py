from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from ..common.datetime_utils import DateLike, as_date, iter_days_back, today_local
from ..core.constants import STREAK_MAX_DAYS
from ..core.enums import DayStatus
from ..students.model import Student


class StreakCalculator(ABC):
    """Calculator interface (Strategy Pattern for streak rules)."""

    @abstractmethod
    def streak(self, student: Student, as_of: date) -> int:
        raise NotImplementedError


class ConsecutivePresentStreak(StreakCalculator):
    """Consecutive PRESENT days ending at `as_of`.

    A day that is not PRESENT on `as_of` itself gives 0 whatever came before;
    later gaps just end the run. Never walks more than `max_days` days.
    """

    def __init__(self, max_days: int = STREAK_MAX_DAYS):
        self._max_days = int(max_days)

    def streak(self, student: Student, as_of: date) -> int:
        count = 0
        for offset, day in enumerate(iter_days_back(as_of, self._max_days)):
            if student.status_on(day) == DayStatus.PRESENT:
                count += 1
                continue
            if offset == 0:
                return 0
            break
        return count


def current_streak(student: Student, as_of: Optional[DateLike] = None, *, max_days: int = STREAK_MAX_DAYS) -> int:
    day = as_date(as_of) if as_of is not None else today_local()
    return ConsecutivePresentStreak(max_days).streak(student, day)
