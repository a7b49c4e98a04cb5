from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import PayrollStatus


def payroll_id(employee_id: str, month: str) -> str:
    return f"payroll-{employee_id}-{month}"


@dataclass(frozen=True)
class PayrollRecord:
    """One employee's payroll for one period (calendar month, ``YYYY-MM``).

    For closed periods ``net_salary`` is ``base_salary - deductions``; an open
    period (month in progress) carries zero deductions and zero net.
    """

    id: str
    employee_id: str
    month: str
    working_days: int
    present_days: int
    leaves_taken: int
    base_salary: int
    deductions: int
    net_salary: int
    status: PayrollStatus
