"""Example: use the service layer directly (no Flask)."""

from datetime import date

from student_attendance.attendance.summary import daily_summary
from student_attendance.attendance.streak import current_streak
from student_attendance.container import build_container
from student_attendance.students.memory_repository import InMemoryStudentRepository


class _Settings:
    STORAGE_BACKEND = "memory"


def main():
    today = date(2024, 7, 31)
    container = build_container(settings=_Settings, repository=InMemoryStudentRepository(), clock=lambda: today)
    svc = container.attendance_service

    students = svc.add_student(name="Mary Ann O'Brien", roll_number="S010")
    student_id = students[-1].id
    for day in ("2024-07-29", "2024-07-30", "2024-07-31"):
        svc.set_status(student_id, "PRESENT", on_date=day)

    student = svc.get_student(student_id)
    print(student.email, current_streak(student, today))
    print(daily_summary(svc.list_students(), today))


if __name__ == "__main__":
    main()
