"""Time-of-day formatting and parsing.

Functions:
    parse_time: Parse ISO 8601 time string.
    format_time: Format TimeOfDay as ISO 8601 string.
"""

from __future__ import annotations

from leaptime.format.iso8601 import format_time, parse_time

__all__: list[str] = [
    "parse_time",
    "format_time",
]
