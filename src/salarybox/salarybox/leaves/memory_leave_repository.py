from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveRequest


class InMemoryLeaveRepository:
    def __init__(self, requests: Iterable[LeaveRequest] = ()):
        self._by_id: dict[str, LeaveRequest] = {}
        for r in requests:
            self.add(r)

    def add(self, request: LeaveRequest) -> LeaveRequest:
        if request.id in self._by_id:
            raise KeyError(f"duplicate leave request id {request.id}")
        self._by_id[request.id] = request
        return request

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        return self._by_id.get(str(request_id))

    def list_requests(
        self,
        *,
        employee_id: Optional[str] = None,
        status: Optional[LeaveStatus] = None,
    ) -> Sequence[LeaveRequest]:
        items = [
            r
            for r in self._by_id.values()
            if (employee_id is None or r.employee_id == str(employee_id)) and (status is None or r.status == status)
        ]
        items.sort(key=lambda r: (r.created_at, r.start_date))
        return items

    def decide(
        self,
        *,
        request_id: str,
        status: LeaveStatus,
        decided_by: str,
        decided_at: datetime,
        admin_note: Optional[str] = None,
    ) -> bool:
        req = self._by_id.get(str(request_id))
        if not req or req.status != LeaveStatus.PENDING:
            return False
        self._by_id[req.id] = replace(
            req,
            status=status,
            decided_by=str(decided_by),
            decided_at=decided_at,
            admin_note=admin_note,
        )
        return True
