"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

# Mock holidays: these days of every month are company holidays.
HOLIDAY_DAYS = frozenset({1, 15})

DEDUCTION_RATE = "0.10"

PLACEHOLDER_PHOTO = "/placeholder.svg"

# Synthesized punches for past present days.
CHECK_IN_START = time(9, 0)
CHECK_IN_SPREAD_MINUTES = 15
CHECK_OUT_START = time(17, 30)
CHECK_OUT_SPREAD_MINUTES = 30

# Random draw thresholds for past weekdays (draw > threshold).
LEAVE_THRESHOLD = 0.9
ABSENT_THRESHOLD = 0.8

DEFAULT_LATENCY_SECONDS = 0.3
DEFAULT_RANDOM_SEED = 42
