from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_month(value: str) -> date:
    """Parse YYYY-MM string into the first day of that month."""
    return datetime.strptime(value, "%Y-%m").date()


def format_month(d: date) -> str:
    return d.strftime("%Y-%m")


def month_start(d: date) -> date:
    return d.replace(day=1)


def month_end(d: date) -> date:
    return d.replace(day=calendar.monthrange(d.year, d.month)[1])


def month_days(d: date) -> list[date]:
    """Every calendar day of the month containing ``d``, ascending."""
    start = month_start(d)
    return [start + timedelta(days=i) for i in range(month_end(d).day)]


def shift_month(d: date, months: int) -> date:
    """First day of the month ``months`` away from the month containing ``d``."""
    index = d.year * 12 + (d.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def is_weekend(d: date) -> bool:
    return d.weekday() >= 5


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
