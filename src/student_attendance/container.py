from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable

from .attendance.service import AttendanceService
from .attendance.streak import ConsecutivePresentStreak
from .common.datetime_utils import today_local
from .core.constants import EMAIL_DOMAIN, STREAK_MAX_DAYS
from .core.exceptions import ValidationError
from .database.connection import DatabaseConnection, DBConfig
from .students.json_repository import JsonFileStudentRepository
from .students.memory_repository import InMemoryStudentRepository
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.store import RecordStore
from .users.service import ViewerService


@dataclass(frozen=True)
class Container:
    store: RecordStore

    attendance_service: AttendanceService
    viewer_service: ViewerService

    clock: Callable[[], date]


def build_repository(settings: Any) -> StudentRepository:
    backend = str(getattr(settings, "STORAGE_BACKEND", "memory")).lower()
    if backend == "memory":
        return InMemoryStudentRepository()
    if backend == "json":
        return JsonFileStudentRepository(getattr(settings, "JSON_STORE_PATH"))
    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        return MySQLStudentRepository(conn)
    raise ValidationError(f"Unknown STORAGE_BACKEND {backend!r}")


def build_container(
    *,
    settings: Any,
    repository: StudentRepository | None = None,
    clock: Callable[[], date] = today_local,
) -> Container:
    students_repo = repository or build_repository(settings)
    store = RecordStore(students_repo)

    attendance_service = AttendanceService(
        store,
        clock=clock,
        email_domain=str(getattr(settings, "EMAIL_DOMAIN", EMAIL_DOMAIN)),
    )
    viewer_service = ViewerService(
        store,
        streaks=ConsecutivePresentStreak(int(getattr(settings, "STREAK_MAX_DAYS", STREAK_MAX_DAYS))),
        clock=clock,
    )

    return Container(
        store=store,
        attendance_service=attendance_service,
        viewer_service=viewer_service,
        clock=clock,
    )
