from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import PayrollStatus
from .model import PayrollRecord


class PayrollRepository(Protocol):
    def add(self, record: PayrollRecord) -> PayrollRecord:
        raise NotImplementedError

    def get(self, record_id: str) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def list_records(self, *, employee_id: Optional[str] = None, month: Optional[str] = None) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def update_status(self, *, record_id: str, expected: PayrollStatus, status: PayrollStatus) -> bool:
        """Compare-and-set on status; False when the stored status is not ``expected``."""

        raise NotImplementedError
