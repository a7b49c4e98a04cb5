from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import replace
from datetime import date, datetime
from typing import Iterable, Optional

from ..common.datetime_utils import format_month, month_end, month_start, now_local
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_RANDOM_SEED
from ..core.enums import AttendanceStatus, PunchDirection
from ..core.exceptions import ConflictError, ValidationError
from ..employees.service import EmployeeService
from .factory import AttendanceStrategyFactory
from .generator import generate_month
from .model import AttendanceRecord, AttendanceSummary, attendance_id
from .repository import AttendanceRepository

log = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeService,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        seed: int = DEFAULT_RANDOM_SEED,
    ):
        self._attendance = attendance
        self._employees = employees
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._seed = seed

    def _rng(self, employee_id: str, month: date) -> random.Random:
        # Same seed, employee and month always yield the same calendar.
        return random.Random(f"{self._seed}:{employee_id}:{format_month(month)}")

    def get_month(self, employee_id: str, month: date | None = None, *, now: datetime | None = None) -> list[AttendanceRecord]:
        """Calendar of the month containing ``month``; punched records replace generated days."""
        now = now or now_local()
        month = month or now.date()
        employee = self._employees.require_employee(employee_id)

        generated = generate_month(
            employee.id,
            month,
            now=now,
            rng=self._rng(employee.id, month),
            factory=self._factory,
        )
        stored = {
            r.date: r
            for r in self._attendance.list_for_employee(employee.id, start_date=month_start(month), end_date=month_end(month))
        }
        return [stored.get(r.date, r) for r in generated]

    def get_today_record(self, employee_id: str, *, now: datetime | None = None) -> Optional[AttendanceRecord]:
        now = now or now_local()
        return self._attendance.get_for_employee_and_date(str(employee_id), now.date())

    def mark(
        self,
        employee_id: str,
        direction: PunchDirection | str,
        photo: str,
        *,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        """Record a check-in or check-out for today, merging both into one record."""
        now = now or now_local()
        today = now.date()
        try:
            direction = PunchDirection(direction)
        except ValueError:
            raise ValidationError(f"Unknown attendance action: {direction}")
        photo = require_non_empty(photo, "Photo")

        employee = self._employees.require_employee(employee_id)
        existing = self._attendance.get_for_employee_and_date(employee.id, today)

        if direction == PunchDirection.CHECK_IN:
            if existing and existing.check_in_time is not None:
                log.warning("duplicate check-in employee=%s date=%s", employee.id, today)
                raise ConflictError("Already checked in today")
            record = AttendanceRecord(
                id=attendance_id(employee.id, today),
                employee_id=employee.id,
                date=today,
                check_in_time=now,
                check_out_time=None,
                check_in_photo=photo,
                check_out_photo=None,
                status=AttendanceStatus.PRESENT,
            )
        else:
            if not existing or existing.check_in_time is None:
                log.warning("check-out without check-in employee=%s date=%s", employee.id, today)
                raise ValidationError("Cannot check out before checking in")
            if existing.check_out_time is not None:
                log.warning("duplicate check-out employee=%s date=%s", employee.id, today)
                raise ConflictError("Already checked out today")
            record = replace(existing, check_out_time=now, check_out_photo=photo)

        saved = self._attendance.upsert(record)
        log.info("attendance %s employee=%s at=%s", direction.value, employee.id, now.isoformat(timespec="seconds"))
        return saved

    @staticmethod
    def summarize(records: Iterable[AttendanceRecord]) -> AttendanceSummary:
        counts = Counter(r.status for r in records)
        return AttendanceSummary(
            present=counts[AttendanceStatus.PRESENT],
            absent=counts[AttendanceStatus.ABSENT],
            leave=counts[AttendanceStatus.LEAVE],
            holiday=counts[AttendanceStatus.HOLIDAY],
        )
