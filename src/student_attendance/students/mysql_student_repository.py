from __future__ import annotations

import logging
from typing import Sequence

import mysql.connector

from ..common.datetime_utils import to_date_key
from ..core.enums import AttendanceStatus
from ..core.exceptions import PersistenceError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class MySQLStudentRepository(StudentRepository):
    """Students in `students`, one row per marked day in `student_attendance`.

    save_all runs in a single transaction; on any error it is rolled back and
    surfaced as PersistenceError. Rows are upserted, never deleted.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load_all(self) -> Sequence[Student]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    SELECT id, roll_number, name, email, image
                    FROM students
                    ORDER BY position, id
                    """
                )
                student_rows = fetchall(cur)
                cur.execute("SELECT student_id, att_date, status FROM student_attendance")
                attendance_rows = fetchall(cur)
        except mysql.connector.Error as e:
            raise PersistenceError(f"Loading students failed: {e}") from e

        by_student: dict[str, dict[str, AttendanceStatus]] = {}
        try:
            for row in attendance_rows:
                by_student.setdefault(str(row["student_id"]), {})[to_date_key(row["att_date"])] = AttendanceStatus(
                    row["status"]
                )
        except ValueError as e:
            raise PersistenceError(f"Corrupt attendance row: {e}") from e

        return tuple(
            Student(
                id=str(row["id"]),
                roll_number=row["roll_number"],
                name=row["name"],
                email=row["email"],
                image=row["image"],
                attendance=by_student.get(str(row["id"]), {}),
            )
            for row in student_rows
        )

    def save_all(self, students: Sequence[Student]) -> None:
        student_params = [
            (s.id, position, s.roll_number, s.name, s.email, s.image) for position, s in enumerate(students)
        ]
        attendance_params = [
            (s.id, day, status.value) for s in students for day, status in sorted(s.attendance.items())
        ]
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                if student_params:
                    cur.executemany(
                        """
                        INSERT INTO students(id, position, roll_number, name, email, image)
                        VALUES(%s,%s,%s,%s,%s,%s)
                        ON DUPLICATE KEY UPDATE
                            position=VALUES(position),
                            roll_number=VALUES(roll_number),
                            name=VALUES(name),
                            email=VALUES(email),
                            image=VALUES(image)
                        """,
                        student_params,
                    )
                if attendance_params:
                    cur.executemany(
                        """
                        INSERT INTO student_attendance(student_id, att_date, status)
                        VALUES(%s,%s,%s)
                        ON DUPLICATE KEY UPDATE status=VALUES(status)
                        """,
                        attendance_params,
                    )
        except mysql.connector.Error as e:
            raise PersistenceError(f"Saving students failed: {e}") from e
        logger.debug("Upserted %d students, %d attendance rows", len(student_params), len(attendance_params))
