from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..attendance.calendar_view import month_calendar
from ..common.http import admin_required, json_body, login_required
from ..core.exceptions import AuthorizationError, ValidationError
from ..container import Container
from ..users.service import StudentOverview
from .model import Student


def student_row(student: Student, *, today_status) -> dict:
    data = student.to_dict()
    data["today_status"] = today_status.value
    return data


def overview_payload(ov: StudentOverview) -> dict:
    data = ov.student.to_dict()
    data.update(
        {
            "today_status": ov.today_status.value,
            "streak": ov.streak,
            "totals": ov.totals.to_dict(),
        }
    )
    return data


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service
    viewers = container.viewer_service

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    @admin_required
    def list_students():
        today = attendance.today()
        rows = [student_row(s, today_status=s.status_on(today)) for s in attendance.list_students()]
        return jsonify({"success": True, "date": today.isoformat(), "students": rows})

    @app.route("/api/students", methods=["POST"], endpoint="add_student")
    @admin_required
    def add_student():
        data = json_body()
        students = attendance.add_student(
            name=data.get("name"),
            roll_number=data.get("roll_number") or data.get("rollNumber"),
            image=data.get("image"),
            email=data.get("email"),
        )
        today = attendance.today()
        return (
            jsonify(
                {
                    "success": True,
                    "student": student_row(students[-1], today_status=students[-1].status_on(today)),
                    "students": [student_row(s, today_status=s.status_on(today)) for s in students],
                }
            ),
            201,
        )

    @app.route("/api/students/me", methods=["GET"], endpoint="my_record")
    @login_required
    def my_record():
        ov = viewers.own_overview(g.viewer, email=request.args.get("email"))
        return jsonify({"success": True, "student": overview_payload(ov)})

    @app.route("/api/students/<student_id>/calendar", methods=["GET"], endpoint="student_calendar")
    @login_required
    def student_calendar(student_id: str):
        student = attendance.get_student(student_id)
        if not g.viewer.is_admin and student.email.lower() != g.viewer.user_id.lower():
            raise AuthorizationError("Cannot view another student's record")

        today = attendance.today()
        try:
            year = int(request.args.get("year", today.year))
            month = int(request.args.get("month", today.month))
        except ValueError:
            raise ValidationError("year and month must be integers") from None

        days = month_calendar(student, year, month)
        return jsonify(
            {
                "success": True,
                "student_id": student.id,
                "year": year,
                "month": month,
                "days": [{"date": d.date, "weekday": d.weekday, "status": d.status.value} for d in days],
            }
        )
