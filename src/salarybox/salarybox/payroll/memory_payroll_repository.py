from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..core.enums import PayrollStatus
from .model import PayrollRecord


class InMemoryPayrollRepository:
    def __init__(self):
        self._by_id: dict[str, PayrollRecord] = {}

    def add(self, record: PayrollRecord) -> PayrollRecord:
        if record.id in self._by_id:
            raise KeyError(f"duplicate payroll record id {record.id}")
        self._by_id[record.id] = record
        return record

    def get(self, record_id: str) -> Optional[PayrollRecord]:
        return self._by_id.get(str(record_id))

    def list_records(self, *, employee_id: Optional[str] = None, month: Optional[str] = None) -> Sequence[PayrollRecord]:
        items = [
            r
            for r in self._by_id.values()
            if (employee_id is None or r.employee_id == str(employee_id)) and (month is None or r.month == month)
        ]
        items.sort(key=lambda r: (r.month, r.employee_id))
        return items

    def update_status(self, *, record_id: str, expected: PayrollStatus, status: PayrollStatus) -> bool:
        record = self._by_id.get(str(record_id))
        if not record or record.status != expected:
            return False
        self._by_id[record.id] = replace(record, status=status)
        return True
