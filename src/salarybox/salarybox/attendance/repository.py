from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Stores punched records; at most one record per (employee_id, date)."""

    def get_for_employee_and_date(self, employee_id: str, day: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, record: AttendanceRecord) -> AttendanceRecord:
        """Insert or replace the record keyed by (employee_id, date)."""

        raise NotImplementedError
