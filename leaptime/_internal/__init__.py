"""Internal utilities for Leaptime.

This module contains private implementation details:
    - Field limits and unit constants
    - Range validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from leaptime._internal.validation import (
    field_in_range,
    fields_in_range,
    validate_field,
)

__all__: list[str] = [
    "field_in_range",
    "fields_in_range",
    "validate_field",
]
