from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, LeaveBalance


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    The service layer depends on this interface, never on a concrete store.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def update_leave_balance(self, employee_id: str, balance: LeaveBalance) -> bool:
        raise NotImplementedError
