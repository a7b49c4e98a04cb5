from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..core.enums import LeaveType
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

log = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> list[Employee]:
        return list(self._employees.list_all())

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get_by_id(str(employee_id))

    def require_employee(self, employee_id: str) -> Employee:
        employee = self.get_employee(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def search(self, query: str = "", *, department: str | None = None) -> list[Employee]:
        """Case-insensitive match on name, email or position, optionally within a department."""
        q = (query or "").strip().lower()
        out = []
        for e in self._employees.list_all():
            if department and e.department != department:
                continue
            if q and q not in e.name.lower() and q not in e.email.lower() and q not in e.position.lower():
                continue
            out.append(e)
        return out

    def adjust_leave_balance(self, employee_id: str, leave_type: LeaveType, delta: int) -> Employee:
        """Add ``delta`` days (negative to consume) to the balance of ``leave_type``."""
        employee = self.require_employee(employee_id)
        current = employee.leave_balance.available(leave_type)
        if current is None:
            return employee

        updated = current + int(delta)
        if updated < 0:
            raise ValidationError(f"Insufficient {leave_type.value} leave balance")

        balance = replace(employee.leave_balance, **{leave_type.value: updated})
        if not self._employees.update_leave_balance(employee.id, balance):
            raise NotFoundError(f"Employee {employee_id} not found")

        log.info("leave balance updated employee=%s type=%s %s -> %s", employee.id, leave_type.value, current, updated)
        return replace(employee, leave_balance=balance)
