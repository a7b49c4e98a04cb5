from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def add(self, request: LeaveRequest) -> LeaveRequest:
        raise NotImplementedError

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_requests(
        self,
        *,
        employee_id: Optional[str] = None,
        status: Optional[LeaveStatus] = None,
    ) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def decide(
        self,
        *,
        request_id: str,
        status: LeaveStatus,
        decided_by: str,
        decided_at: datetime,
        admin_note: Optional[str] = None,
    ) -> bool:
        """Move a PENDING request to ``status``; False when it is no longer pending."""

        raise NotImplementedError
