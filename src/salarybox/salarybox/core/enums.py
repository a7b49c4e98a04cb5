from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """One status per calendar day, mutually exclusive."""

    PRESENT = "present"
    ABSENT = "absent"
    LEAVE = "leave"
    HOLIDAY = "holiday"


class PunchDirection(str, Enum):
    CHECK_IN = "check-in"
    CHECK_OUT = "check-out"


class LeaveType(str, Enum):
    SICK = "sick"
    CASUAL = "casual"
    PAID = "paid"
    UNPAID = "unpaid"


class LeaveStatus(str, Enum):
    """Approval flow of a leave request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PayrollStatus(str, Enum):
    """Forward-only payroll progression."""

    PENDING = "pending"
    PROCESSED = "processed"
    PAID = "paid"

    def next(self) -> "PayrollStatus | None":
        order = list(PayrollStatus)
        idx = order.index(self)
        return order[idx + 1] if idx + 1 < len(order) else None
