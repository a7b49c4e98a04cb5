from __future__ import annotations

from flask import Flask, g, request

from ..common.http import ok
from ..common.web import admin_required, date_arg, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    services = container.data_services

    @app.route("/api/leaves/<employee_id>", methods=["GET"], endpoint="leaves_for_employee")
    @login_required
    async def leaves_for_employee(employee_id: str):
        requests = await services.get_leave_requests(employee_id, session=g.current_user)
        return ok(requests)

    @app.route("/api/leaves", methods=["POST"], endpoint="leave_create")
    @login_required
    async def leave_create():
        body = json_body()
        leave = await services.create_leave_request(
            employee_id=str(body.get("employee_id") or g.current_user.user_id),
            start_date=date_arg(body.get("start_date"), "start_date"),
            end_date=date_arg(body.get("end_date"), "end_date"),
            type=str(body.get("type", "")),
            reason=str(body.get("reason") or ""),
            session=g.current_user,
        )
        return ok(leave, status=201)

    @app.route("/api/admin/leaves", methods=["GET"], endpoint="admin_leaves")
    @admin_required
    async def admin_leaves():
        status = request.args.get("status") or None
        if status == "all":
            status = None
        requests = await services.list_leave_requests(status=status, session=g.current_user)
        return ok(requests, count=len(requests))

    @app.route("/api/admin/leaves/<request_id>/approve", methods=["POST"], endpoint="admin_leave_approve")
    @admin_required
    async def admin_leave_approve(request_id: str):
        note = (request.get_json(silent=True) or {}).get("admin_note", "")
        leave = await services.approve_leave(request_id, session=g.current_user, admin_note=str(note or ""))
        return ok(leave)

    @app.route("/api/admin/leaves/<request_id>/reject", methods=["POST"], endpoint="admin_leave_reject")
    @admin_required
    async def admin_leave_reject(request_id: str):
        note = (request.get_json(silent=True) or {}).get("admin_note", "")
        leave = await services.reject_leave(request_id, session=g.current_user, admin_note=str(note or ""))
        return ok(leave)
