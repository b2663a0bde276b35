"""Leaptime: wall-clock times of day with leap second support.

Leaptime provides a time-of-day value with nanosecond precision whose
fraction may run past one second to encode a positive leap second,
together with the arithmetic that combines it with signed durations.

Core Types:
    TimeOfDay: Time of day (hour, minute, second, fraction)
    Duration: Signed time span with nanosecond precision

Format Functions:
    parse_time: Parse ISO 8601 time string
    format_time: Format TimeOfDay as ISO 8601 string

Exceptions:
    LeaptimeError: Base exception
    ValidationError: Field value out of range
    ParseError: Failed to parse string

Example:
    >>> from leaptime import Duration, TimeOfDay
    >>> t = TimeOfDay.from_hms_milli(23, 59, 59, 1_800)
    >>> str(t + Duration.from_milliseconds(400))
    '00:00:00,200'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from leaptime.core.duration import Duration
from leaptime.core.time import TimeOfDay

# Exceptions
from leaptime.errors import (
    LeaptimeError,
    ParseError,
    ValidationError,
)

# Format functions
from leaptime.format import format_time, parse_time

__all__: list[str] = [
    "__version__",
    # Core types
    "Duration",
    "TimeOfDay",
    # Exceptions
    "LeaptimeError",
    "ValidationError",
    "ParseError",
    # Format functions
    "parse_time",
    "format_time",
]
