from __future__ import annotations

import logging
import uuid
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_date_range, require_non_empty
from ..core.enums import LeaveStatus, LeaveType, Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from ..employees.service import EmployeeService
from .model import LeaveRequest
from .repository import LeaveRepository

log = logging.getLogger(__name__)


class LeaveService:
    def __init__(self, leaves: LeaveRepository, employees: EmployeeService):
        self._leaves = leaves
        self._employees = employees

    def _mint_id(self, employee_id: str) -> str:
        while True:
            request_id = f"leave-{employee_id}-{uuid.uuid4().hex[:12]}"
            if not self._leaves.get(request_id):
                return request_id

    @staticmethod
    def _parse_type(value: LeaveType | str) -> LeaveType:
        try:
            return LeaveType(value)
        except ValueError:
            raise ValidationError(f"Unknown leave type: {value}")

    def list_requests(
        self,
        *,
        employee_id: Optional[str] = None,
        status: LeaveStatus | str | None = None,
    ) -> list[LeaveRequest]:
        if status is not None:
            try:
                status = LeaveStatus(status)
            except ValueError:
                raise ValidationError(f"Unknown leave status: {status}")
        return list(self._leaves.list_requests(employee_id=employee_id, status=status))

    def get_request(self, request_id: str) -> LeaveRequest:
        req = self._leaves.get(request_id)
        if not req:
            raise NotFoundError(f"Leave request {request_id} not found")
        return req

    def create(
        self,
        *,
        employee_id: str,
        start_date: date,
        end_date: date,
        leave_type: LeaveType | str,
        reason: str,
        today: date | None = None,
    ) -> LeaveRequest:
        today = today or now_local().date()
        employee = self._employees.require_employee(employee_id)
        leave_type = self._parse_type(leave_type)
        require_date_range(start_date, end_date)
        reason = require_non_empty(reason, "Reason")

        for existing in self._leaves.list_requests(employee_id=employee.id, status=LeaveStatus.APPROVED):
            if existing.overlaps(start_date, end_date):
                raise ValidationError(
                    f"Overlaps approved leave {existing.start_date.isoformat()} - {existing.end_date.isoformat()}"
                )

        days = (end_date - start_date).days + 1
        available = employee.leave_balance.available(leave_type)
        if available is not None and available < days:
            raise ValidationError(f"Insufficient {leave_type.value} leave balance ({available} left, {days} requested)")

        request = self._leaves.add(
            LeaveRequest(
                id=self._mint_id(employee.id),
                employee_id=employee.id,
                start_date=start_date,
                end_date=end_date,
                type=leave_type,
                reason=reason,
                status=LeaveStatus.PENDING,
                created_at=today,
            )
        )
        log.info("leave request created id=%s employee=%s type=%s days=%s", request.id, employee.id, leave_type.value, days)
        return request

    def approve(
        self,
        *,
        current_role: Role,
        admin_user_id: str,
        request_id: str,
        admin_note: str = "",
        now: datetime | None = None,
    ) -> LeaveRequest:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can approve leave")

        req = self.get_request(request_id)
        if req.status != LeaveStatus.PENDING:
            raise ConflictError("Leave request already decided")

        for existing in self._leaves.list_requests(employee_id=req.employee_id, status=LeaveStatus.APPROVED):
            if existing.overlaps(req.start_date, req.end_date):
                log.warning("leave approval overlaps id=%s approved=%s", req.id, existing.id)
                raise ValidationError(
                    f"Overlaps approved leave {existing.start_date.isoformat()} - {existing.end_date.isoformat()}"
                )

        employee = self._employees.require_employee(req.employee_id)
        available = employee.leave_balance.available(req.type)
        if available is not None and available < req.days:
            raise ValidationError(f"Insufficient {req.type.value} leave balance")

        self._decide(req, LeaveStatus.APPROVED, admin_user_id, admin_note, now)
        self._employees.adjust_leave_balance(req.employee_id, req.type, -req.days)
        return self.get_request(req.id)

    def reject(
        self,
        *,
        current_role: Role,
        admin_user_id: str,
        request_id: str,
        admin_note: str = "",
        now: datetime | None = None,
    ) -> LeaveRequest:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can reject leave")

        req = self.get_request(request_id)
        self._decide(req, LeaveStatus.REJECTED, admin_user_id, admin_note, now)
        return self.get_request(req.id)

    def _decide(self, req: LeaveRequest, status: LeaveStatus, admin_user_id: str, admin_note: str, now: datetime | None) -> None:
        ok = self._leaves.decide(
            request_id=req.id,
            status=status,
            decided_by=str(admin_user_id),
            decided_at=now or now_local(),
            admin_note=(admin_note or "").strip() or None,
        )
        if not ok:
            log.warning("leave decision rejected id=%s current=%s wanted=%s", req.id, req.status.value, status.value)
            raise ConflictError("Leave request already decided")
        log.info("leave request %s id=%s by=%s", status.value, req.id, admin_user_id)
