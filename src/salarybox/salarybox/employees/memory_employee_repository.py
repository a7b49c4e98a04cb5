from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Iterable, Optional, Sequence

from .model import Employee, LeaveBalance

MOCK_EMPLOYEES: tuple[Employee, ...] = (
    Employee(
        id="2",
        name="John Employee",
        email="employee@salarybox.com",
        position="Software Developer",
        department="Engineering",
        salary=50000,
        joining_date=date(2023, 1, 15),
        leave_balance=LeaveBalance(sick=10, casual=7, paid=15),
    ),
    Employee(
        id="3",
        name="Alice Johnson",
        email="alice@salarybox.com",
        position="UI Designer",
        department="Design",
        salary=48000,
        joining_date=date(2023, 3, 10),
        leave_balance=LeaveBalance(sick=8, casual=5, paid=12),
    ),
    Employee(
        id="4",
        name="Bob Smith",
        email="bob@salarybox.com",
        position="Marketing Specialist",
        department="Marketing",
        salary=45000,
        joining_date=date(2023, 2, 20),
        leave_balance=LeaveBalance(sick=10, casual=6, paid=14),
    ),
    Employee(
        id="5",
        name="Emily Davis",
        email="emily@salarybox.com",
        position="HR Coordinator",
        department="Human Resources",
        salary=47000,
        joining_date=date(2023, 1, 5),
        leave_balance=LeaveBalance(sick=9, casual=7, paid=15),
    ),
)


class InMemoryEmployeeRepository:
    """Mock employee store; insertion order is preserved for listings."""

    def __init__(self, employees: Iterable[Employee] = MOCK_EMPLOYEES):
        self._by_id: dict[str, Employee] = {e.id: e for e in employees}

    def list_all(self) -> Sequence[Employee]:
        return list(self._by_id.values())

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(str(employee_id))

    def update_leave_balance(self, employee_id: str, balance: LeaveBalance) -> bool:
        employee = self._by_id.get(str(employee_id))
        if not employee:
            return False
        self._by_id[employee.id] = replace(employee, leave_balance=balance)
        return True
