"""Internal constants for calendardate.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Ordinal limits (days since 0000-01-01)
MIN_VALUE: int = 366  # 0001-01-01
MAX_VALUE: int = 3_652_424  # 9999-12-31

# Year limits
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Ordinal of 1970-01-01
UNIX_EPOCH_VALUE: int = 719_528

SECONDS_PER_DAY: int = 86_400
MILLIS_PER_DAY: int = 1_000 * SECONDS_PER_DAY  # 86_400_000

MONTHS_PER_YEAR: int = 12

# Days elapsed before the first of each month (non-leap year)
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    0,    # Placeholder for 1-indexed access
    0,    # January
    31,   # February
    59,   # March
    90,   # April
    120,  # May
    151,  # June
    181,  # July
    212,  # August
    243,  # September
    273,  # October
    304,  # November
    334,  # December
)


__all__ = [
    "MIN_VALUE",
    "MAX_VALUE",
    "MIN_YEAR",
    "MAX_YEAR",
    "UNIX_EPOCH_VALUE",
    "SECONDS_PER_DAY",
    "MILLIS_PER_DAY",
    "MONTHS_PER_YEAR",
    "DAYS_BEFORE_MONTH",
]
