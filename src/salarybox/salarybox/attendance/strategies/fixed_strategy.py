from __future__ import annotations

import random
from datetime import date, datetime

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class HolidayStrategy(AttendanceStrategy):
    """Company holiday (fixed days of month), whatever the weekday."""

    def decide(self, *, day: date, now: datetime, rng: random.Random) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.HOLIDAY)


class WeekendStrategy(AttendanceStrategy):
    """Saturdays and Sundays are recorded as absent."""

    def decide(self, *, day: date, now: datetime, rng: random.Random) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ABSENT)


class NotYetDueStrategy(AttendanceStrategy):
    """Days not yet reached are not evaluated and stay absent."""

    def decide(self, *, day: date, now: datetime, rng: random.Random) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ABSENT)
