from __future__ import annotations

from datetime import date, datetime

import pytest

from salarybox.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from salarybox.attendance.service import AttendanceService
from salarybox.core.enums import PayrollStatus, Role
from salarybox.core.exceptions import AuthorizationError, ConflictError, NotFoundError
from salarybox.employees.memory_employee_repository import InMemoryEmployeeRepository
from salarybox.employees.service import EmployeeService
from salarybox.payroll.memory_payroll_repository import InMemoryPayrollRepository
from salarybox.payroll.service import PayrollService, count_working_days

NOW = datetime(2025, 6, 10, 12, 0)


@pytest.fixture
def service():
    employees = EmployeeService(InMemoryEmployeeRepository())
    attendance = AttendanceService(InMemoryAttendanceRepository(), employees, seed=5)
    return PayrollService(InMemoryPayrollRepository(), employees, attendance)


def test_count_working_days_skips_weekends_and_holidays():
    # May 2025: 22 weekdays, the 1st and 15th are both Thursdays
    assert count_working_days(date(2025, 5, 1)) == 20
    # June 2025: the 1st and 15th fall on Sundays
    assert count_working_days(date(2025, 6, 1)) == 21


def test_prior_month_is_paid_and_fully_populated(service):
    prior, current = service.get_payroll("2", now=NOW)

    assert prior.id == "payroll-2-2025-05"
    assert prior.month == "2025-05"
    assert prior.status == PayrollStatus.PAID
    assert prior.base_salary == 50000
    assert prior.deductions == 5000
    assert prior.net_salary == 45000
    assert prior.working_days == 20
    assert prior.present_days + prior.leaves_taken <= prior.working_days


def test_current_month_is_pending_and_zeroed(service):
    _, current = service.get_payroll("2", now=NOW)

    assert current.month == "2025-06"
    assert current.status == PayrollStatus.PENDING
    assert current.working_days == 21
    assert (current.present_days, current.leaves_taken, current.deductions, current.net_salary) == (0, 0, 0, 0)


def test_prior_month_of_january_wraps_year(service):
    records = service.get_payroll("3", now=datetime(2026, 1, 10))

    assert [r.month for r in records] == ["2025-12", "2026-01"]


def test_net_salary_invariant_for_closed_periods(service):
    for employee_id in ("2", "3", "4", "5"):
        prior, _ = service.get_payroll(employee_id, now=NOW)
        assert prior.deductions > 0
        assert prior.net_salary == prior.base_salary - prior.deductions


def test_get_payroll_is_stable_across_reads(service):
    assert service.get_payroll("2", now=NOW) == service.get_payroll("2", now=NOW)


def test_unknown_employee_payroll_is_not_found(service):
    with pytest.raises(NotFoundError):
        service.get_payroll("42", now=NOW)


def test_generate_month_creates_pending_records_once(service):
    created = service.generate_month(current_role=Role.ADMIN, month=date(2025, 4, 1), now=NOW)

    assert [r.employee_id for r in created] == ["2", "3", "4", "5"]
    assert all(r.status == PayrollStatus.PENDING for r in created)
    assert all(r.deductions == round(r.base_salary / 10) for r in created)
    assert service.generate_month(current_role=Role.ADMIN, month=date(2025, 4, 1), now=NOW) == []


def test_generate_month_requires_admin(service):
    with pytest.raises(AuthorizationError):
        service.generate_month(current_role=Role.EMPLOYEE, month=date(2025, 4, 1), now=NOW)


def test_advance_moves_forward_only(service):
    _, current = service.get_payroll("2", now=NOW)

    processed = service.advance(current_role=Role.ADMIN, record_id=current.id)
    assert processed.status == PayrollStatus.PROCESSED
    paid = service.advance(current_role=Role.ADMIN, record_id=current.id)
    assert paid.status == PayrollStatus.PAID

    with pytest.raises(ConflictError):
        service.advance(current_role=Role.ADMIN, record_id=current.id)


def test_advance_unknown_record(service):
    with pytest.raises(NotFoundError):
        service.advance(current_role=Role.ADMIN, record_id="payroll-2-1999-01")


def test_generating_prior_month_first_still_reads_as_paid(service):
    created = service.generate_month(current_role=Role.ADMIN, month=date(2025, 5, 1), now=NOW)
    assert all(r.status == PayrollStatus.PAID for r in created)

    records = service.get_payroll("2", now=NOW)

    assert [(r.month, r.status) for r in records] == [
        ("2025-05", PayrollStatus.PAID),
        ("2025-06", PayrollStatus.PENDING),
    ]


def test_open_period_has_zero_net(service):
    created = service.generate_month(current_role=Role.ADMIN, month=date(2025, 6, 1), now=NOW)

    assert all((r.deductions, r.net_salary) == (0, 0) for r in created)
    assert all(r.status == PayrollStatus.PENDING for r in created)
