from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


def attendance_id(employee_id: str, day: date) -> str:
    return f"att-{employee_id}-{day.isoformat()}"


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar day."""

    id: str
    employee_id: str
    date: date
    check_in_time: Optional[datetime]
    check_out_time: Optional[datetime]
    check_in_photo: Optional[str]
    check_out_photo: Optional[str]
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model for the monthly dashboard card."""

    present: int = 0
    absent: int = 0
    leave: int = 0
    holiday: int = 0
