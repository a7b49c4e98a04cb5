from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from .model import AttendanceRecord


class InMemoryAttendanceRepository:
    def __init__(self):
        self._by_key: dict[tuple[str, date], AttendanceRecord] = {}

    def get_for_employee_and_date(self, employee_id: str, day: date) -> Optional[AttendanceRecord]:
        return self._by_key.get((str(employee_id), day))

    def list_for_employee(self, employee_id: str, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        items = [
            r
            for (emp_id, day), r in self._by_key.items()
            if emp_id == str(employee_id) and start_date <= day <= end_date
        ]
        items.sort(key=lambda r: r.date)
        return items

    def upsert(self, record: AttendanceRecord) -> AttendanceRecord:
        self._by_key[(record.employee_id, record.date)] = record
        return record
