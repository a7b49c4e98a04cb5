from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a day's attendance status."""

    @abstractmethod
    def decide(self, *, day: date, now: datetime, rng: random.Random) -> StatusDecision:
        raise NotImplementedError
