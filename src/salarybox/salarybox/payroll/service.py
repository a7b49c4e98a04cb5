from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..attendance.service import AttendanceService
from ..common.datetime_utils import format_month, is_weekend, month_days, month_start, now_local, shift_month
from ..core.constants import HOLIDAY_DAYS
from ..core.enums import PayrollStatus, Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError
from ..employees.model import Employee
from ..employees.service import EmployeeService
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollRecord, payroll_id
from .repository import PayrollRepository

log = logging.getLogger(__name__)


def count_working_days(month: date, holiday_days: frozenset[int] = HOLIDAY_DAYS) -> int:
    """Weekdays of the month containing ``month`` that are not company holidays."""
    return sum(1 for d in month_days(month) if not is_weekend(d) and d.day not in holiday_days)


class PayrollService:
    def __init__(
        self,
        payroll: PayrollRepository,
        employees: EmployeeService,
        attendance: AttendanceService,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payroll = payroll
        self._employees = employees
        self._attendance = attendance
        self._calculator = calculator or StandardPayrollCalculator()

    def build_closed_period(self, employee: Employee, month: date, *, now: datetime, status: PayrollStatus) -> PayrollRecord:
        """Payroll for a finished month, aggregated from that month's attendance."""
        summary = AttendanceService.summarize(self._attendance.get_month(employee.id, month, now=now))
        key = format_month(month)
        return PayrollRecord(
            id=payroll_id(employee.id, key),
            employee_id=employee.id,
            month=key,
            working_days=count_working_days(month),
            present_days=summary.present,
            leaves_taken=summary.leave,
            base_salary=employee.salary,
            deductions=self._calculator.deductions(employee.salary),
            net_salary=self._calculator.net_salary(employee.salary),
            status=status,
        )

    @staticmethod
    def build_open_period(employee: Employee, month: date) -> PayrollRecord:
        """Payroll for a month still in progress: nothing is finalized yet."""
        key = format_month(month)
        return PayrollRecord(
            id=payroll_id(employee.id, key),
            employee_id=employee.id,
            month=key,
            working_days=count_working_days(month),
            present_days=0,
            leaves_taken=0,
            base_salary=employee.salary,
            deductions=0,
            net_salary=0,
            status=PayrollStatus.PENDING,
        )

    def get_payroll(self, employee_id: str, *, now: datetime | None = None) -> list[PayrollRecord]:
        """Payroll history of an employee; prior and current month are always present."""
        now = now or now_local()
        employee = self._employees.require_employee(employee_id)
        current = month_start(now.date())
        prior = shift_month(current, -1)

        if not self._payroll.get(payroll_id(employee.id, format_month(prior))):
            self._payroll.add(self.build_closed_period(employee, prior, now=now, status=PayrollStatus.PAID))
        if not self._payroll.get(payroll_id(employee.id, format_month(current))):
            self._payroll.add(self.build_open_period(employee, current))

        return list(self._payroll.list_records(employee_id=employee.id))

    def list_month(self, month: date) -> list[PayrollRecord]:
        return list(self._payroll.list_records(month=format_month(month)))

    def generate_month(self, *, current_role: Role, month: date, now: datetime | None = None) -> list[PayrollRecord]:
        """Create payroll for every employee lacking one for ``month``.

        The month right before the current one is settled as paid, like in ``get_payroll``;
        older closed months start pending.
        """
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can generate payroll")

        now = now or now_local()
        month = month_start(month)
        current = month_start(now.date())
        closed = month < current
        status = PayrollStatus.PAID if month == shift_month(current, -1) else PayrollStatus.PENDING

        created = []
        for employee in self._employees.list_employees():
            if self._payroll.get(payroll_id(employee.id, format_month(month))):
                continue
            if closed:
                record = self.build_closed_period(employee, month, now=now, status=status)
            else:
                record = self.build_open_period(employee, month)
            created.append(self._payroll.add(record))

        log.info("payroll generated month=%s created=%s", format_month(month), len(created))
        return created

    def advance(self, *, current_role: Role, record_id: str) -> PayrollRecord:
        """Move a record one step forward: pending -> processed -> paid."""
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can update payroll status")

        record = self._payroll.get(record_id)
        if not record:
            raise NotFoundError(f"Payroll record {record_id} not found")

        target = record.status.next()
        if target is None:
            raise ConflictError("Payroll already paid")
        if not self._payroll.update_status(record_id=record.id, expected=record.status, status=target):
            raise ConflictError("Payroll status changed concurrently")

        log.info("payroll %s: %s -> %s", record.id, record.status.value, target.value)
        return self._payroll.get(record.id)
