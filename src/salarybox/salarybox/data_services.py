"""Async data-services facade consumed by the web layer.

Every call awaits a simulated network latency before delegating to the
feature services. Guarded calls take the caller's ``SessionUser`` explicitly;
``session=None`` means a trusted in-process caller.
"""
from __future__ import annotations

import asyncio
from datetime import date, datetime
from typing import Callable, Optional

from .attendance.model import AttendanceRecord, AttendanceSummary
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_LATENCY_SECONDS
from .core.enums import LeaveStatus, LeaveType, PunchDirection
from .core.exceptions import AuthenticationError, AuthorizationError
from .employees.model import Employee
from .employees.service import EmployeeService
from .leaves.model import LeaveRequest
from .leaves.service import LeaveService
from .payroll.model import PayrollRecord
from .payroll.service import PayrollService
from .users.service import AuthService, SessionUser


class DataServices:
    def __init__(
        self,
        *,
        auth: AuthService,
        employees: EmployeeService,
        attendance: AttendanceService,
        leaves: LeaveService,
        payroll: PayrollService,
        latency: float = DEFAULT_LATENCY_SECONDS,
        clock: Callable[[], datetime] = now_local,
    ):
        self._auth = auth
        self._employees = employees
        self._attendance = attendance
        self._leaves = leaves
        self._payroll = payroll
        self._latency = max(float(latency), 0.0)
        self._clock = clock

    async def _delay(self) -> None:
        await asyncio.sleep(self._latency)

    @staticmethod
    def _check_access(session: Optional[SessionUser], employee_id: str) -> None:
        if session is not None:
            session.ensure_can_access(employee_id)

    @staticmethod
    def _require_admin(session: Optional[SessionUser]) -> SessionUser:
        if session is None:
            raise AuthenticationError("Login required")
        if not session.is_admin:
            raise AuthorizationError("Admin only")
        return session

    # Auth
    async def login(self, email: str, password: str) -> SessionUser:
        await self._delay()
        return self._auth.authenticate(email, password)

    # Employees
    async def get_employees(self) -> list[Employee]:
        await self._delay()
        return self._employees.list_employees()

    async def get_employee(self, employee_id: str) -> Optional[Employee]:
        await self._delay()
        return self._employees.get_employee(employee_id)

    async def search_employees(self, query: str = "", *, department: str | None = None) -> list[Employee]:
        await self._delay()
        return self._employees.search(query, department=department)

    # Attendance
    async def get_attendance(
        self,
        employee_id: str,
        month: date | None = None,
        *,
        session: Optional[SessionUser] = None,
    ) -> list[AttendanceRecord]:
        await self._delay()
        self._check_access(session, employee_id)
        return self._attendance.get_month(employee_id, month, now=self._clock())

    async def get_attendance_summary(
        self,
        employee_id: str,
        month: date | None = None,
        *,
        session: Optional[SessionUser] = None,
    ) -> AttendanceSummary:
        records = await self.get_attendance(employee_id, month, session=session)
        return AttendanceService.summarize(records)

    async def get_today_attendance(
        self,
        employee_id: str,
        *,
        session: Optional[SessionUser] = None,
    ) -> Optional[AttendanceRecord]:
        """Today's punched record (check-in card), None before the first check-in."""
        await self._delay()
        self._check_access(session, employee_id)
        self._employees.require_employee(employee_id)
        return self._attendance.get_today_record(employee_id, now=self._clock())

    async def mark_attendance(
        self,
        employee_id: str,
        direction: PunchDirection | str,
        photo: str,
        *,
        session: Optional[SessionUser] = None,
    ) -> AttendanceRecord:
        await self._delay()
        self._check_access(session, employee_id)
        return self._attendance.mark(employee_id, direction, photo, now=self._clock())

    # Leave
    async def get_leave_requests(self, employee_id: str, *, session: Optional[SessionUser] = None) -> list[LeaveRequest]:
        await self._delay()
        self._check_access(session, employee_id)
        self._employees.require_employee(employee_id)
        return self._leaves.list_requests(employee_id=employee_id)

    async def list_leave_requests(
        self,
        *,
        status: LeaveStatus | str | None = None,
        session: Optional[SessionUser] = None,
    ) -> list[LeaveRequest]:
        await self._delay()
        self._require_admin(session)
        return self._leaves.list_requests(status=status)

    async def create_leave_request(
        self,
        *,
        employee_id: str,
        start_date: date,
        end_date: date,
        type: LeaveType | str,
        reason: str,
        session: Optional[SessionUser] = None,
    ) -> LeaveRequest:
        await self._delay()
        self._check_access(session, employee_id)
        return self._leaves.create(
            employee_id=employee_id,
            start_date=start_date,
            end_date=end_date,
            leave_type=type,
            reason=reason,
            today=self._clock().date(),
        )

    async def approve_leave(self, request_id: str, *, session: Optional[SessionUser], admin_note: str = "") -> LeaveRequest:
        await self._delay()
        admin = self._require_admin(session)
        return self._leaves.approve(
            current_role=admin.role,
            admin_user_id=admin.user_id,
            request_id=request_id,
            admin_note=admin_note,
            now=self._clock(),
        )

    async def reject_leave(self, request_id: str, *, session: Optional[SessionUser], admin_note: str = "") -> LeaveRequest:
        await self._delay()
        admin = self._require_admin(session)
        return self._leaves.reject(
            current_role=admin.role,
            admin_user_id=admin.user_id,
            request_id=request_id,
            admin_note=admin_note,
            now=self._clock(),
        )

    # Payroll
    async def get_payroll(self, employee_id: str, *, session: Optional[SessionUser] = None) -> list[PayrollRecord]:
        await self._delay()
        self._check_access(session, employee_id)
        return self._payroll.get_payroll(employee_id, now=self._clock())

    async def list_payroll(self, month: date, *, session: Optional[SessionUser]) -> list[PayrollRecord]:
        await self._delay()
        self._require_admin(session)
        return self._payroll.list_month(month)

    async def generate_payroll(self, month: date, *, session: Optional[SessionUser]) -> list[PayrollRecord]:
        await self._delay()
        admin = self._require_admin(session)
        return self._payroll.generate_month(current_role=admin.role, month=month, now=self._clock())

    async def advance_payroll(self, record_id: str, *, session: Optional[SessionUser]) -> PayrollRecord:
        await self._delay()
        admin = self._require_admin(session)
        return self._payroll.advance(current_role=admin.role, record_id=record_id)
