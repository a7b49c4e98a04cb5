from __future__ import annotations

from datetime import date, timedelta

from ..core.enums import LeaveStatus, LeaveType
from .model import LeaveRequest


def generate_mock_leave_requests(employee_id: str, today: date) -> list[LeaveRequest]:
    """Demo history: a past approved sick leave and an upcoming pending casual leave."""
    return [
        LeaveRequest(
            id=f"leave-{employee_id}-1",
            employee_id=employee_id,
            start_date=today - timedelta(days=20),
            end_date=today - timedelta(days=18),
            type=LeaveType.SICK,
            reason="Fever and cold",
            status=LeaveStatus.APPROVED,
            created_at=today - timedelta(days=25),
        ),
        LeaveRequest(
            id=f"leave-{employee_id}-2",
            employee_id=employee_id,
            start_date=today + timedelta(days=5),
            end_date=today + timedelta(days=7),
            type=LeaveType.CASUAL,
            reason="Family function",
            status=LeaveStatus.PENDING,
            created_at=today - timedelta(days=2),
        ),
    ]
