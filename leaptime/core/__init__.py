"""Core temporal types.

This module provides the fundamental temporal types:
    - TimeOfDay: Time of day with nanosecond precision and leap seconds
    - Duration: Signed time span with nanosecond precision
"""

from __future__ import annotations

from leaptime.core.duration import Duration
from leaptime.core.time import TimeOfDay

__all__: list[str] = [
    "Duration",
    "TimeOfDay",
]
