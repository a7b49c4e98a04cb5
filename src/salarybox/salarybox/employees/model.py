from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import LeaveType


@dataclass(frozen=True)
class LeaveBalance:
    """Remaining allotted days per leave type."""

    sick: int
    casual: int
    paid: int

    def available(self, leave_type: LeaveType) -> int | None:
        """Days left for ``leave_type``; None when the type has no allowance (unpaid)."""
        if leave_type == LeaveType.UNPAID:
            return None
        return getattr(self, leave_type.value)


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee (root aggregate of attendance/leave/payroll)."""

    id: str
    name: str
    email: str
    position: str
    department: str
    salary: int
    joining_date: date
    leave_balance: LeaveBalance
