import random
from datetime import date, datetime, time

import pytest

from salarybox.attendance.generator import generate_day, generate_month
from salarybox.core.constants import PLACEHOLDER_PHOTO
from salarybox.core.enums import AttendanceStatus

NOW = datetime(2025, 5, 20, 12, 0)


def _month(seed=7, now=NOW, target=date(2025, 5, 9)):
    return generate_month("2", target, now=now, rng=random.Random(seed))


def test_one_record_per_day_in_ascending_order():
    records = _month()

    assert [r.date for r in records] == [date(2025, 5, d) for d in range(1, 32)]
    assert len({r.id for r in records}) == 31
    assert records[0].id == "att-2-2025-05-01"


def test_day_one_is_holiday_regardless_of_weekday():
    record = generate_day("2", date(2025, 5, 1), now=NOW, rng=random.Random(0))

    assert record.status == AttendanceStatus.HOLIDAY
    assert record.check_in_time is None
    assert record.check_in_photo is None


def test_saturday_is_absent():
    record = generate_day("2", date(2025, 5, 3), now=NOW, rng=random.Random(0))

    assert record.status == AttendanceStatus.ABSENT


@pytest.mark.parametrize("seed", range(5))
def test_status_rules_hold_for_every_day(seed):
    for r in _month(seed=seed):
        if r.date.day in (1, 15):
            assert r.status == AttendanceStatus.HOLIDAY
        elif r.date.weekday() >= 5:
            assert r.status == AttendanceStatus.ABSENT
        elif r.date > NOW.date():
            assert r.status == AttendanceStatus.ABSENT


def test_present_days_have_punches_within_windows():
    present = [r for seed in range(5) for r in _month(seed=seed) if r.status == AttendanceStatus.PRESENT]

    assert present
    for r in present:
        assert time(9, 0) <= r.check_in_time.time() <= time(9, 14)
        assert time(17, 30) <= r.check_out_time.time() <= time(17, 59)
        assert r.check_in_time.date() == r.date
        assert r.check_in_photo == PLACEHOLDER_PHOTO
        assert r.check_out_photo == PLACEHOLDER_PHOTO


def test_non_present_days_have_no_punches():
    for r in _month():
        if r.status != AttendanceStatus.PRESENT:
            assert r.check_in_time is None and r.check_out_time is None
            assert r.check_in_photo is None and r.check_out_photo is None


def test_same_seed_reproduces_month():
    assert _month(seed=3) == _month(seed=3)


def test_fully_future_month_has_no_present_days():
    records = generate_month("2", date(2030, 1, 1), now=NOW, rng=random.Random(1))

    assert {r.status for r in records} == {AttendanceStatus.HOLIDAY, AttendanceStatus.ABSENT}
