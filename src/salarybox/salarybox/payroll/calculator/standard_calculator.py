from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ...core.constants import DEDUCTION_RATE
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: flat percentage of base salary, rounded half-up to a whole unit."""

    def __init__(self, rate: str | Decimal = DEDUCTION_RATE):
        self._rate = Decimal(rate)

    def deductions(self, base_salary: int) -> int:
        amount = Decimal(int(base_salary)) * self._rate
        return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
