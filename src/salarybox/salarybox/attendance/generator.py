"""Monthly attendance generation.

Pure functions: the clock (``now``) and the random source are parameters, so a
seeded ``random.Random`` reproduces the same month.
"""
from __future__ import annotations

import random
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import month_days
from ..core.constants import PLACEHOLDER_PHOTO
from ..core.enums import AttendanceStatus
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, attendance_id


def generate_day(
    employee_id: str,
    day: date,
    *,
    now: datetime,
    rng: random.Random,
    factory: Optional[AttendanceStrategyFactory] = None,
) -> AttendanceRecord:
    factory = factory or AttendanceStrategyFactory()
    decision = factory.for_day(day=day, now=now).decide(day=day, now=now, rng=rng)
    photo = PLACEHOLDER_PHOTO if decision.status == AttendanceStatus.PRESENT else None
    return AttendanceRecord(
        id=attendance_id(employee_id, day),
        employee_id=employee_id,
        date=day,
        check_in_time=decision.check_in_time,
        check_out_time=decision.check_out_time,
        check_in_photo=photo,
        check_out_photo=photo,
        status=decision.status,
    )


def generate_month(
    employee_id: str,
    month: date,
    *,
    now: datetime,
    rng: random.Random,
    factory: Optional[AttendanceStrategyFactory] = None,
) -> list[AttendanceRecord]:
    """One record per day of the month containing ``month``, ascending by date."""
    factory = factory or AttendanceStrategyFactory()
    return [generate_day(employee_id, day, now=now, rng=rng, factory=factory) for day in month_days(month)]
