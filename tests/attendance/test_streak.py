from __future__ import annotations

from datetime import date, timedelta

from student_attendance.attendance.streak import ConsecutivePresentStreak, current_streak

from ..conftest import A, P, make_student

AS_OF = date(2024, 7, 31)


def test_three_consecutive_present_days():
    student = make_student(attendance={"2024-07-29": P, "2024-07-30": P, "2024-07-31": P})

    assert current_streak(student, AS_OF) == 3


def test_absent_today_zeroes_streak():
    student = make_student(attendance={"2024-07-29": P, "2024-07-30": P, "2024-07-31": A})

    assert current_streak(student, AS_OF) == 0


def test_unmarked_today_zeroes_streak():
    student = make_student(attendance={"2024-07-29": P, "2024-07-30": P})

    assert current_streak(student, "2024-07-31") == 0


def test_gap_ends_run():
    student = make_student(attendance={"2024-07-27": P, "2024-07-29": P, "2024-07-30": P, "2024-07-31": P})

    assert current_streak(student, AS_OF) == 3


def test_absent_day_before_run_ends_it():
    student = make_student(attendance={"2024-07-28": A, "2024-07-29": P, "2024-07-30": P, "2024-07-31": P})

    assert current_streak(student, AS_OF) == 3


def test_future_entries_are_ignored():
    student = make_student(attendance={"2024-07-31": P, "2024-08-01": P})

    assert current_streak(student, AS_OF) == 1


def test_streak_is_capped_at_one_year():
    attendance = {(AS_OF - timedelta(days=i)).isoformat(): P for i in range(400)}

    assert current_streak(make_student(attendance=attendance), AS_OF) == 365


def test_custom_bound():
    attendance = {(AS_OF - timedelta(days=i)).isoformat(): P for i in range(10)}

    assert ConsecutivePresentStreak(max_days=5).streak(make_student(attendance=attendance), AS_OF) == 5
