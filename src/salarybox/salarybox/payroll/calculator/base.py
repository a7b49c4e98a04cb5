from __future__ import annotations

from abc import ABC, abstractmethod


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def deductions(self, base_salary: int) -> int:
        raise NotImplementedError

    def net_salary(self, base_salary: int) -> int:
        return int(base_salary) - self.deductions(base_salary)
