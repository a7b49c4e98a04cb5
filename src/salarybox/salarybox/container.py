from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from .attendance.factory import AttendanceStrategyFactory
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_LATENCY_SECONDS, DEFAULT_RANDOM_SEED
from .data_services import DataServices
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.service import EmployeeService
from .leaves.memory_leave_repository import InMemoryLeaveRepository
from .leaves.seed import generate_mock_leave_requests
from .leaves.service import LeaveService
from .payroll.memory_payroll_repository import InMemoryPayrollRepository
from .payroll.service import PayrollService
from .users.memory_user_repository import InMemoryUserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: InMemoryUserRepository
    employees_repo: InMemoryEmployeeRepository
    attendance_repo: InMemoryAttendanceRepository
    leaves_repo: InMemoryLeaveRepository
    payroll_repo: InMemoryPayrollRepository

    auth_service: AuthService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    leave_service: LeaveService
    payroll_service: PayrollService

    data_services: DataServices
    clock: Callable[[], datetime]


def build_container(
    *,
    latency: float = DEFAULT_LATENCY_SECONDS,
    seed: int = DEFAULT_RANDOM_SEED,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    users_repo = InMemoryUserRepository()
    employees_repo = InMemoryEmployeeRepository()
    attendance_repo = InMemoryAttendanceRepository()
    payroll_repo = InMemoryPayrollRepository()

    today = clock().date()
    leaves_repo = InMemoryLeaveRepository(
        r for e in employees_repo.list_all() for r in generate_mock_leave_requests(e.id, today)
    )

    auth_service = AuthService(users_repo)
    employee_service = EmployeeService(employees_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        employee_service,
        strategy_factory=AttendanceStrategyFactory(),
        seed=seed,
    )
    leave_service = LeaveService(leaves_repo, employee_service)
    payroll_service = PayrollService(payroll_repo, employee_service, attendance_service)

    data_services = DataServices(
        auth=auth_service,
        employees=employee_service,
        attendance=attendance_service,
        leaves=leave_service,
        payroll=payroll_service,
        latency=latency,
        clock=clock,
    )

    return Container(
        users_repo=users_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        payroll_repo=payroll_repo,
        auth_service=auth_service,
        employee_service=employee_service,
        attendance_service=attendance_service,
        leave_service=leave_service,
        payroll_service=payroll_service,
        data_services=data_services,
        clock=clock,
    )
