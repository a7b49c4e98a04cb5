from __future__ import annotations

from flask import Flask, g, request

from ..common.http import ok
from ..common.web import admin_required, login_required
from ..container import Container
from ..core.exceptions import NotFoundError


def register(app: Flask, container: Container) -> None:
    services = container.data_services

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @admin_required
    async def employees_list():
        query = request.args.get("q", "")
        department = request.args.get("department") or None
        if query or department:
            employees = await services.search_employees(query, department=department)
        else:
            employees = await services.get_employees()
        return ok(employees, count=len(employees))

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="employee_detail")
    @login_required
    async def employee_detail(employee_id: str):
        g.current_user.ensure_can_access(employee_id)
        employee = await services.get_employee(employee_id)
        if employee is None:
            raise NotFoundError(f"Employee {employee_id} not found")
        return ok(employee)
