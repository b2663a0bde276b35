"""Duration class representing a signed span of time.

This module provides the Duration class consumed by TimeOfDay arithmetic.
"""

from __future__ import annotations

from leaptime._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


class Duration:
    """A signed span of time with nanosecond precision.

    Duration stores whole seconds and the nanoseconds within the second.
    The representation is normalized such that:
    - `_seconds` is the floor of the total span in seconds (any sign)
    - `_nanos` is always in the range [0, 1_000_000_000)

    A negative span therefore borrows one second: -0.4s is stored as
    seconds=-1, nanoseconds=600_000_000. Durations are not limited to a
    day and may span any number of days in either direction.

    Attributes:
        seconds: The whole seconds component (can be negative).
        nanoseconds: The nanoseconds within the second [0, 1e9).

    Examples:
        >>> d = Duration(milliseconds=1500)
        >>> d.seconds
        1
        >>> d.nanoseconds
        500000000

        >>> d = Duration.from_milliseconds(-400)
        >>> d.seconds
        -1
        >>> d.nanoseconds
        600000000
    """

    __slots__ = ("_seconds", "_nanos")

    def __init__(
        self,
        days: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        All parameters can be positive, negative, or zero. The components
        are summed and the result is normalized to canonical form.

        Args:
            days: Number of days.
            seconds: Number of seconds.
            milliseconds: Number of milliseconds.
            microseconds: Number of microseconds.
            nanoseconds: Number of nanoseconds.

        Examples:
            >>> Duration(days=1)
            Duration(seconds=86400, nanoseconds=0)

            >>> Duration(seconds=1, milliseconds=-1500)
            Duration(seconds=-1, nanoseconds=500000000)
        """
        total_nanos = (
            (days * SECONDS_PER_DAY + seconds) * NANOS_PER_SECOND
            + milliseconds * NANOS_PER_MILLISECOND
            + microseconds * NANOS_PER_MICROSECOND
            + nanoseconds
        )
        # floor division keeps _nanos non-negative for negative spans
        self._seconds, self._nanos = divmod(total_nanos, NANOS_PER_SECOND)

    @classmethod
    def zero(cls) -> Duration:
        """Create a zero-length duration.

        Examples:
            >>> Duration.zero()
            Duration(seconds=0, nanoseconds=0)
        """
        return cls()

    @classmethod
    def from_days(cls, days: int) -> Duration:
        """Create a Duration from a number of days.

        Args:
            days: Number of days (can be negative).

        Returns:
            A Duration representing the specified number of days.
        """
        return cls(days=days)

    @classmethod
    def from_hours(cls, hours: int) -> Duration:
        """Create a Duration from a number of hours."""
        return cls(seconds=hours * SECONDS_PER_HOUR)

    @classmethod
    def from_minutes(cls, minutes: int) -> Duration:
        """Create a Duration from a number of minutes."""
        return cls(seconds=minutes * SECONDS_PER_MINUTE)

    @classmethod
    def from_seconds(cls, seconds: int) -> Duration:
        """Create a Duration from a number of seconds.

        Args:
            seconds: Number of seconds (can be negative).

        Returns:
            A Duration representing the specified number of seconds.

        Examples:
            >>> Duration.from_seconds(-86399)
            Duration(seconds=-86399, nanoseconds=0)
        """
        return cls(seconds=seconds)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> Duration:
        """Create a Duration from a number of milliseconds."""
        return cls(milliseconds=milliseconds)

    @classmethod
    def from_microseconds(cls, microseconds: int) -> Duration:
        """Create a Duration from a number of microseconds."""
        return cls(microseconds=microseconds)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Duration:
        """Create a Duration from a number of nanoseconds.

        Args:
            nanoseconds: Number of nanoseconds (can be negative).

        Returns:
            A Duration representing the specified number of nanoseconds.

        Examples:
            >>> Duration.from_nanoseconds(1_500_000_000)
            Duration(seconds=1, nanoseconds=500000000)
        """
        return cls(nanoseconds=nanoseconds)

    @property
    def seconds(self) -> int:
        """Return the whole seconds component.

        This is the floor of the span in seconds, so it is negative for
        any negative duration, and it is not limited to a single day.

        Returns:
            Whole seconds (can be negative).
        """
        return self._seconds

    @property
    def nanoseconds(self) -> int:
        """Return the nanoseconds component within the current second.

        This is always in the range [0, 1_000_000_000), even for negative
        durations.

        Returns:
            Nanoseconds within the second [0, 1e9).
        """
        return self._nanos

    @property
    def total_nanoseconds(self) -> int:
        """Return the total duration in nanoseconds (exact).

        Examples:
            >>> Duration(seconds=1, nanoseconds=500).total_nanoseconds
            1000000500
        """
        return self._seconds * NANOS_PER_SECOND + self._nanos

    @property
    def is_negative(self) -> bool:
        """Return True if the total span is less than zero."""
        return self._seconds < 0

    @property
    def is_zero(self) -> bool:
        """Return True if this is a zero-length duration."""
        return self._seconds == 0 and self._nanos == 0

    def __add__(self, other: object) -> Duration:
        """Add two durations.

        Anything other than a Duration is left to the other operand, which
        lets `Duration + TimeOfDay` reach TimeOfDay.__radd__.

        Examples:
            >>> Duration(seconds=30) + Duration(milliseconds=-500)
            Duration(seconds=29, nanoseconds=500000000)
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(
            seconds=self._seconds + other._seconds,
            nanoseconds=self._nanos + other._nanos,
        )

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        """Subtract one duration from another."""
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(
            seconds=self._seconds - other._seconds,
            nanoseconds=self._nanos - other._nanos,
        )

    def __mul__(self, other: object) -> Duration:
        """Multiply a duration by an integer.

        Examples:
            >>> Duration(seconds=30) * 3
            Duration(seconds=90, nanoseconds=0)
        """
        if not isinstance(other, int):
            return NotImplemented
        return Duration(nanoseconds=self.total_nanoseconds * other)

    def __rmul__(self, other: object) -> Duration:
        """Support scalar * Duration."""
        return self.__mul__(other)

    def __neg__(self) -> Duration:
        """Return the negation of this duration.

        Examples:
            >>> -Duration(milliseconds=400)
            Duration(seconds=-1, nanoseconds=600000000)
        """
        return Duration(nanoseconds=-self.total_nanoseconds)

    def __pos__(self) -> Duration:
        """Return a copy of this duration (unary +)."""
        return Duration(seconds=self._seconds, nanoseconds=self._nanos)

    def __abs__(self) -> Duration:
        """Return the absolute value of this duration."""
        if self.is_negative:
            return -self
        return +self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds == other.total_nanoseconds

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds < other.total_nanoseconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds <= other.total_nanoseconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds > other.total_nanoseconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds >= other.total_nanoseconds

    def __hash__(self) -> int:
        return hash(self.total_nanoseconds)

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds}, nanoseconds={self._nanos})"

    def __str__(self) -> str:
        """Return a human-readable string representation.

        Returns:
            String like "2:30:45", "1 day, 0:00:01.5" or "-1 day, 23:59:59.6".
        """
        if self.is_zero:
            return "0:00:00"

        days, day_seconds = divmod(self._seconds, SECONDS_PER_DAY)
        hours = day_seconds // SECONDS_PER_HOUR
        minutes = (day_seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE
        secs = day_seconds % SECONDS_PER_MINUTE

        time_str = f"{hours}:{minutes:02d}:{secs:02d}"
        if self._nanos > 0:
            time_str += f".{self._nanos:09d}".rstrip("0")

        if days == 0:
            return time_str
        elif days == 1:
            return f"1 day, {time_str}"
        elif days == -1:
            return f"-1 day, {time_str}"
        else:
            return f"{days} days, {time_str}"

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return not self.is_zero


__all__ = ["Duration"]
