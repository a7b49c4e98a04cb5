from __future__ import annotations

import random
from datetime import date, datetime, timedelta

from ...core.constants import (
    ABSENT_THRESHOLD,
    CHECK_IN_SPREAD_MINUTES,
    CHECK_IN_START,
    CHECK_OUT_SPREAD_MINUTES,
    CHECK_OUT_START,
    LEAVE_THRESHOLD,
)
from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class RandomPastDayStrategy(AttendanceStrategy):
    """Past weekday: draw a status, synthesizing punches for present days."""

    def decide(self, *, day: date, now: datetime, rng: random.Random) -> StatusDecision:
        draw = rng.random()
        if draw > LEAVE_THRESHOLD:
            return StatusDecision(status=AttendanceStatus.LEAVE)
        if draw > ABSENT_THRESHOLD:
            return StatusDecision(status=AttendanceStatus.ABSENT)

        check_in = datetime.combine(day, CHECK_IN_START) + timedelta(minutes=rng.randrange(CHECK_IN_SPREAD_MINUTES))
        check_out = datetime.combine(day, CHECK_OUT_START) + timedelta(minutes=rng.randrange(CHECK_OUT_SPREAD_MINUTES))
        return StatusDecision(status=AttendanceStatus.PRESENT, check_in_time=check_in, check_out_time=check_out)
