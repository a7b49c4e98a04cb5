from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time

from ..common.datetime_utils import is_weekend
from ..core.constants import HOLIDAY_DAYS
from .strategies.base import AttendanceStrategy
from .strategies.fixed_strategy import HolidayStrategy, NotYetDueStrategy, WeekendStrategy
from .strategies.random_strategy import RandomPastDayStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the strategy for a day, rules in priority order."""

    holiday_days: frozenset[int] = field(default=HOLIDAY_DAYS)

    def for_day(self, *, day: date, now: datetime) -> AttendanceStrategy:
        if day.day in self.holiday_days:
            return HolidayStrategy()
        if is_weekend(day):
            return WeekendStrategy()
        if not datetime.combine(day, time.min) < now:
            return NotYetDueStrategy()
        return RandomPastDayStrategy()
