from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import admin_required, json_body
from ..core.constants import DEFAULT_TREND_DAYS
from ..core.exceptions import ValidationError
from ..container import Container
from .summary import daily_summary, summary_trend


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service

    def _date_arg(name: str):
        value = request.args.get(name)
        return parse_iso_date(value) if value else attendance.today()

    @app.route("/api/students/<student_id>/attendance", methods=["PUT"], endpoint="set_attendance")
    @admin_required
    def set_attendance(student_id: str):
        data = json_body()
        on_date = data.get("date")
        students = attendance.set_status(
            student_id,
            data.get("status"),
            on_date=parse_iso_date(on_date) if on_date else None,
        )
        student = next(s for s in students if s.id == student_id)
        return jsonify({"success": True, "student": student.to_dict()})

    @app.route("/api/attendance/summary", methods=["GET"], endpoint="attendance_summary")
    @admin_required
    def attendance_summary():
        summary = daily_summary(attendance.list_students(), _date_arg("date"))
        return jsonify({"success": True, "summary": summary.to_dict()})

    @app.route("/api/attendance/trend", methods=["GET"], endpoint="attendance_trend")
    @admin_required
    def attendance_trend():
        try:
            days = int(request.args.get("days", DEFAULT_TREND_DAYS))
        except ValueError:
            raise ValidationError("days must be an integer") from None
        trend = summary_trend(attendance.list_students(), _date_arg("end"), days=days)
        return jsonify({"success": True, "trend": [s.to_dict() for s in trend]})
