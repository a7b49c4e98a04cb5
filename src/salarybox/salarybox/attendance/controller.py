from __future__ import annotations

from flask import Flask, g, request

from ..common.http import ok
from ..common.web import json_body, login_required, month_arg
from ..container import Container


def register(app: Flask, container: Container) -> None:
    services = container.data_services

    @app.route("/api/attendance/<employee_id>", methods=["GET"], endpoint="attendance_month")
    @login_required
    async def attendance_month(employee_id: str):
        month = month_arg(request.args.get("month"), default=container.clock().date())
        records = await services.get_attendance(employee_id, month, session=g.current_user)
        return ok(records, month=month.strftime("%Y-%m"))

    @app.route("/api/attendance/<employee_id>/summary", methods=["GET"], endpoint="attendance_summary")
    @login_required
    async def attendance_summary(employee_id: str):
        month = month_arg(request.args.get("month"), default=container.clock().date())
        summary = await services.get_attendance_summary(employee_id, month, session=g.current_user)
        return ok(summary, month=month.strftime("%Y-%m"))

    @app.route("/api/attendance/<employee_id>/today", methods=["GET"], endpoint="attendance_today")
    @login_required
    async def attendance_today(employee_id: str):
        record = await services.get_today_attendance(employee_id, session=g.current_user)
        return ok(record)

    @app.route("/api/attendance/<employee_id>/mark", methods=["POST"], endpoint="attendance_mark")
    @login_required
    async def attendance_mark(employee_id: str):
        """Check-in or check-out with a captured photo: {"direction": "check-in", "photo": "..."}"""
        body = json_body()
        record = await services.mark_attendance(
            employee_id,
            str(body.get("direction", "")),
            str(body.get("photo") or ""),
            session=g.current_user,
        )
        return ok(record, status=201)
