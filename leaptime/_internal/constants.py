"""Internal constants for Leaptime.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# A fraction at or above this value sits inside a positive leap second
LEAP_FRACTION_BASE: int = NANOS_PER_SECOND

# Exclusive upper bound of the fraction field (leap second included)
MAX_FRACTION: int = 2 * NANOS_PER_SECOND

# Inclusive (min, max) for every TimeOfDay field
FIELD_LIMITS: dict[str, tuple[int, int]] = {
    "hour": (0, 23),
    "minute": (0, 59),
    "second": (0, 59),
    "nanosecond": (0, MAX_FRACTION - 1),
}


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "LEAP_FRACTION_BASE",
    "MAX_FRACTION",
    "FIELD_LIMITS",
]
