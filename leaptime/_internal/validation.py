"""Validation utilities for Leaptime.

This module provides the range checks shared by the TimeOfDay
constructors and field mutators. Two flavors exist: `validate_field`
raises ValidationError, `field_in_range` reports a bool for the
constructors that signal failure by returning None.

This module is not part of the public API.
"""

from __future__ import annotations

import logging

from leaptime._internal.constants import FIELD_LIMITS
from leaptime.errors import ValidationError

logger = logging.getLogger(__name__)


def _out_of_range_message(name: str, value: int) -> str:
    min_val, max_val = FIELD_LIMITS[name]
    return f"{name} must be between {min_val} and {max_val}, got {value}"


def field_in_range(name: str, value: int) -> bool:
    """Check a single field against its inclusive limits.

    Rejections are logged at DEBUG level.

    Args:
        name: Field name, one of the keys of FIELD_LIMITS.
        value: The candidate value.

    Returns:
        True if the value is within range.

    Examples:
        >>> field_in_range("minute", 59)
        True
        >>> field_in_range("nanosecond", 2_000_000_000)
        False
    """
    min_val, max_val = FIELD_LIMITS[name]
    if min_val <= value <= max_val:
        return True
    logger.debug("Rejected field: %s", _out_of_range_message(name, value))
    return False


def fields_in_range(hour: int, minute: int, second: int, nanosecond: int) -> bool:
    """Check all four TimeOfDay fields, stopping at the first rejection."""
    return (
        field_in_range("hour", hour)
        and field_in_range("minute", minute)
        and field_in_range("second", second)
        and field_in_range("nanosecond", nanosecond)
    )


def validate_field(name: str, value: int) -> None:
    """Validate a single field against its inclusive limits.

    Args:
        name: Field name, one of the keys of FIELD_LIMITS.
        value: The value to validate.

    Raises:
        ValidationError: If the value is out of range.
    """
    min_val, max_val = FIELD_LIMITS[name]
    if value < min_val or value > max_val:
        raise ValidationError(_out_of_range_message(name, value))


__all__ = [
    "field_in_range",
    "fields_in_range",
    "validate_field",
]
