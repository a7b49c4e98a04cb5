from __future__ import annotations

from flask import Flask, g, request

from ..common.http import ok
from ..common.web import admin_required, login_required, month_arg
from ..container import Container


def register(app: Flask, container: Container) -> None:
    services = container.data_services

    @app.route("/api/payroll/<employee_id>", methods=["GET"], endpoint="payroll_for_employee")
    @login_required
    async def payroll_for_employee(employee_id: str):
        records = await services.get_payroll(employee_id, session=g.current_user)
        return ok(records)

    @app.route("/api/admin/payroll", methods=["GET"], endpoint="admin_payroll")
    @admin_required
    async def admin_payroll():
        month = month_arg(request.args.get("month"), default=container.clock().date())
        records = await services.list_payroll(month, session=g.current_user)
        total = sum(r.net_salary for r in records)
        return ok(records, month=month.strftime("%Y-%m"), total_net=total)

    @app.route("/api/admin/payroll/generate", methods=["POST"], endpoint="admin_payroll_generate")
    @admin_required
    async def admin_payroll_generate():
        body = request.get_json(silent=True) or {}
        month = month_arg(body.get("month"), default=container.clock().date())
        created = await services.generate_payroll(month, session=g.current_user)
        return ok(created, status=201, month=month.strftime("%Y-%m"), created=len(created))

    @app.route("/api/admin/payroll/<record_id>/advance", methods=["POST"], endpoint="admin_payroll_advance")
    @admin_required
    async def admin_payroll_advance(record_id: str):
        record = await services.advance_payroll(record_id, session=g.current_user)
        return ok(record)
