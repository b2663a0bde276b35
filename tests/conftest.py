"""Pytest configuration and helpers for Leaptime tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add the parent directory to sys.path so leaptime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from leaptime import TimeOfDay  # noqa: E402


def hmsm(hour: int, minute: int, second: int, millis: int) -> TimeOfDay:
    """Build a TimeOfDay from milliseconds, failing the test if invalid."""
    t = TimeOfDay.from_hms_milli(hour, minute, second, millis)
    assert t is not None, f"invalid test time {hour}:{minute}:{second}.{millis}"
    return t
