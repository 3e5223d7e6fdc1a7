from __future__ import annotations

from datetime import date

import pytest

from student_attendance.core.enums import DayStatus, Role
from student_attendance.core.exceptions import AuthorizationError, StudentNotFoundError
from student_attendance.users.model import Viewer
from student_attendance.users.service import ViewerService

from ..conftest import A, P, make_student

TODAY = date(2024, 7, 31)


@pytest.fixture
def viewers(store):
    store.replace(
        [
            make_student("1", email="john.doe@example.com", attendance={"2024-07-30": P, "2024-07-31": P}),
            make_student("2", email="Student@Example.com", attendance={"2024-07-30": P, "2024-07-31": A}),
        ]
    )
    return ViewerService(store, clock=lambda: TODAY)


def test_user_sees_own_record_by_email(viewers):
    ov = viewers.own_overview(Viewer("student@example.com", Role.USER))

    assert ov.student.id == "2"
    assert ov.today_status == DayStatus.ABSENT
    assert ov.streak == 0
    assert (ov.totals.present_days, ov.totals.absent_days) == (1, 1)


def test_user_overview_streak(viewers):
    ov = viewers.own_overview(Viewer("JOHN.DOE@example.com", Role.USER))

    assert ov.streak == 2


def test_user_cannot_view_someone_else(viewers):
    with pytest.raises(AuthorizationError):
        viewers.own_overview(Viewer("student@example.com", Role.USER), email="john.doe@example.com")


def test_admin_can_view_as_student(viewers):
    ov = viewers.own_overview(Viewer("admin", Role.ADMIN), email="john.doe@example.com")

    assert ov.student.id == "1"


def test_unknown_email_is_not_found(viewers):
    with pytest.raises(StudentNotFoundError):
        viewers.own_overview(Viewer("ghost@example.com", Role.USER))


def test_require_admin():
    ViewerService.require_admin(Viewer("a", Role.ADMIN))
    with pytest.raises(AuthorizationError):
        ViewerService.require_admin(Viewer("u", Role.USER))
