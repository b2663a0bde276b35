"""ISO 8601 formatting and parsing of times of day.

This module provides functions for converting TimeOfDay values to and
from ISO 8601 string representations.

Functions:
    parse_time: Parse an ISO 8601 time string into a TimeOfDay.
    format_time: Format a TimeOfDay as an ISO 8601 string.

Supported times:
    - HH:MM
    - HH:MM:SS
    - HH:MM:SS,f and HH:MM:SS.f (fractional seconds, 1-9 digits)
    - HH:MM:60 and HH:MM:60,f (leap second)

Examples:
    >>> from leaptime.format import parse_time, format_time

    >>> t = parse_time("23:59:60,5")
    >>> t.nanosecond
    1500000000

    >>> format_time(t)
    '23:59:60,500'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from leaptime.core.time import TimeOfDay


def parse_time(s: str) -> TimeOfDay:
    """Parse an ISO 8601 time string into a TimeOfDay.

    Args:
        s: The ISO 8601 string to parse.

    Returns:
        The parsed TimeOfDay.

    Raises:
        ParseError: If the string is not valid ISO 8601 format.
        ValidationError: If the parsed fields are out of range.
    """
    # Import here to avoid circular imports
    from leaptime.core.time import TimeOfDay

    return TimeOfDay.from_iso_format(s)


def format_time(value: TimeOfDay, *, separator: str = ",") -> str:
    """Format a TimeOfDay as an ISO 8601 string.

    Args:
        value: The TimeOfDay to format.
        separator: Decimal sign before the fraction, "," or ".".

    Returns:
        ISO 8601 formatted string.

    Raises:
        TypeError: If value is not a TimeOfDay.
        ValueError: If separator is neither "," nor ".".

    Examples:
        >>> from leaptime import TimeOfDay
        >>> format_time(TimeOfDay(0, 0, 0, nanosecond=6_543_210))
        '00:00:00,006543210'

        >>> format_time(TimeOfDay(14, 30, 45, nanosecond=123_000_000), separator=".")
        '14:30:45.123'
    """
    # Import here to avoid circular imports
    from leaptime.core.time import TimeOfDay

    if not isinstance(value, TimeOfDay):
        raise TypeError(f"expected TimeOfDay, got {type(value).__name__}")
    if separator not in (",", "."):
        raise ValueError(f"separator must be ',' or '.', got {separator!r}")
    return value.to_iso_format(separator=separator)


__all__ = ["parse_time", "format_time"]
