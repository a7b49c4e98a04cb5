from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    id: str
    employee_id: str
    start_date: date
    end_date: date
    type: LeaveType
    reason: str
    status: LeaveStatus
    created_at: date
    decided_by: Optional[str] = None
    decided_at: Optional[datetime] = None
    admin_note: Optional[str] = None

    @property
    def days(self) -> int:
        """Inclusive number of calendar days covered."""
        return (self.end_date - self.start_date).days + 1

    def overlaps(self, start: date, end: date) -> bool:
        return self.start_date <= end and start <= self.end_date
