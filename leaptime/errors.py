"""Leaptime exception hierarchy.

All Leaptime-specific exceptions inherit from LeaptimeError.
"""

from __future__ import annotations


class LeaptimeError(Exception):
    """Base exception for all Leaptime errors."""

    pass


class ValidationError(LeaptimeError):
    """Invalid field value.

    Raised when a time-of-day field is outside its valid range.

    Examples:
        - Hour value outside 0-23
        - Second value outside 0-59
        - Nanosecond value at or past 2,000,000,000
    """

    pass


class ParseError(LeaptimeError):
    """Failed to parse string representation.

    Raised when a string cannot be parsed as a time of day.

    Examples:
        - Missing the minute component
        - More than nine fractional digits
        - Unexpected separator
    """

    pass


__all__ = [
    "LeaptimeError",
    "ValidationError",
    "ParseError",
]
