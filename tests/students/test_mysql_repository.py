from __future__ import annotations

from datetime import date

import mysql.connector
import pytest

from student_attendance.core.exceptions import PersistenceError
from student_attendance.students.mysql_student_repository import MySQLStudentRepository

from ..conftest import A, P, make_student


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self._result = []

    def execute(self, sql, params=None):
        if self._conn.fail:
            raise mysql.connector.Error("connection lost")
        self._conn.executed.append((" ".join(sql.split()), params))
        if "FROM students" in sql:
            self._result = self._conn.student_rows
        elif "FROM student_attendance" in sql:
            self._result = self._conn.attendance_rows

    def executemany(self, sql, params):
        if self._conn.fail:
            raise mysql.connector.Error("connection lost")
        self._conn.executed.append((" ".join(sql.split()), list(params)))

    def fetchall(self):
        return self._result

    def close(self):
        pass


class FakeConnection:
    def __init__(self, student_rows=(), attendance_rows=(), fail=False):
        self.student_rows = list(student_rows)
        self.attendance_rows = list(attendance_rows)
        self.fail = fail
        self.executed = []
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=False):
        return FakeCursor(self)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeFactory:
    def __init__(self, conn):
        self.conn = conn

    def connect(self):
        return self.conn


def test_load_all_groups_attendance_by_student():
    conn = FakeConnection(
        student_rows=[
            {"id": "1", "roll_number": "S001", "name": "A", "email": "a@example.com", "image": "i"},
            {"id": "2", "roll_number": "S002", "name": "B", "email": "b@example.com", "image": "i"},
        ],
        attendance_rows=[
            {"student_id": "1", "att_date": date(2024, 7, 31), "status": "PRESENT"},
            {"student_id": "1", "att_date": date(2024, 7, 30), "status": "ABSENT"},
        ],
    )

    students = MySQLStudentRepository(FakeFactory(conn)).load_all()

    assert students[0].attendance == {"2024-07-31": P, "2024-07-30": A}
    assert students[1].attendance == {}


def test_save_all_upserts_students_and_days_in_one_commit():
    conn = FakeConnection()
    repo = MySQLStudentRepository(FakeFactory(conn))

    repo.save_all([make_student("1", attendance={"2024-07-31": P}), make_student("2")])

    (student_sql, student_params), (att_sql, att_params) = conn.executed
    assert student_sql.startswith("INSERT INTO students")
    assert [p[:2] for p in student_params] == [("1", 0), ("2", 1)]
    assert att_params == [("1", "2024-07-31", "PRESENT")]
    assert conn.committed


def test_save_all_error_rolls_back_and_raises_persistence_error():
    conn = FakeConnection(fail=True)

    with pytest.raises(PersistenceError):
        MySQLStudentRepository(FakeFactory(conn)).save_all([make_student("1")])

    assert conn.rolled_back
    assert not conn.committed
