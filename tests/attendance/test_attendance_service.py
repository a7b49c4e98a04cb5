from __future__ import annotations

from datetime import date, datetime

import pytest

from salarybox.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from salarybox.attendance.model import AttendanceRecord
from salarybox.attendance.service import AttendanceService
from salarybox.core.enums import AttendanceStatus, PunchDirection
from salarybox.core.exceptions import ConflictError, NotFoundError, ValidationError
from salarybox.employees.memory_employee_repository import InMemoryEmployeeRepository
from salarybox.employees.service import EmployeeService

MORNING = datetime(2025, 5, 6, 9, 5)
EVENING = datetime(2025, 5, 6, 17, 40)


@pytest.fixture
def service():
    return AttendanceService(InMemoryAttendanceRepository(), EmployeeService(InMemoryEmployeeRepository()), seed=99)


def test_check_in_then_check_out_merge_into_one_record(service):
    first = service.mark("2", PunchDirection.CHECK_IN, "photo-a", now=MORNING)
    assert first.check_in_time == MORNING
    assert first.check_out_time is None
    assert first.check_out_photo is None

    merged = service.mark("2", "check-out", "photo-b", now=EVENING)

    assert merged.id == first.id == "att-2-2025-05-06"
    assert merged.status == AttendanceStatus.PRESENT
    assert merged.check_in_time == MORNING
    assert merged.check_in_photo == "photo-a"
    assert merged.check_out_time == EVENING
    assert merged.check_out_photo == "photo-b"
    assert service.get_today_record("2", now=EVENING) == merged


def test_second_check_in_same_day_conflicts(service):
    service.mark("2", "check-in", "photo-a", now=MORNING)

    with pytest.raises(ConflictError):
        service.mark("2", "check-in", "photo-a", now=MORNING.replace(hour=10))


def test_check_out_before_check_in_is_rejected(service):
    with pytest.raises(ValidationError):
        service.mark("2", "check-out", "photo-b", now=EVENING)


def test_second_check_out_conflicts(service):
    service.mark("2", "check-in", "photo-a", now=MORNING)
    service.mark("2", "check-out", "photo-b", now=EVENING)

    with pytest.raises(ConflictError):
        service.mark("2", "check-out", "photo-c", now=EVENING.replace(minute=55))


def test_mark_requires_photo_and_known_direction(service):
    with pytest.raises(ValidationError):
        service.mark("2", "check-in", "  ", now=MORNING)
    with pytest.raises(ValidationError):
        service.mark("2", "lunch", "photo", now=MORNING)


def test_unknown_employee_is_not_found(service):
    with pytest.raises(NotFoundError):
        service.mark("99", "check-in", "photo", now=MORNING)
    with pytest.raises(NotFoundError):
        service.get_month("99", date(2025, 5, 1), now=MORNING)


def test_punched_record_replaces_generated_day(service):
    service.mark("2", "check-in", "photo-a", now=MORNING)

    records = service.get_month("2", date(2025, 5, 1), now=MORNING)
    by_date = {r.date: r for r in records}

    assert len(records) == 31
    assert by_date[date(2025, 5, 6)].check_in_photo == "photo-a"
    assert by_date[date(2025, 5, 6)].check_out_time is None


def test_month_is_reproducible_for_same_seed(service):
    a = service.get_month("3", date(2025, 4, 10), now=MORNING)
    b = service.get_month("3", date(2025, 4, 20), now=MORNING)

    assert a == b


def test_summarize_counts_each_status():
    records = [
        AttendanceRecord("a", "2", date(2025, 5, d), None, None, None, None, status)
        for d, status in enumerate(
            [
                AttendanceStatus.PRESENT,
                AttendanceStatus.PRESENT,
                AttendanceStatus.LEAVE,
                AttendanceStatus.HOLIDAY,
                AttendanceStatus.ABSENT,
            ],
            start=1,
        )
    ]

    summary = AttendanceService.summarize(records)

    assert (summary.present, summary.absent, summary.leave, summary.holiday) == (2, 1, 1, 1)
