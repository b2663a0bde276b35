"""TimeOfDay class representing a wall-clock time of day.

This module provides the TimeOfDay class for representing time-of-day
values with nanosecond precision and an in-band positive leap second.
"""

from __future__ import annotations

import re

from leaptime._internal.constants import (
    LEAP_FRACTION_BASE,
    MAX_FRACTION,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from leaptime._internal.validation import (
    field_in_range,
    fields_in_range,
    validate_field,
)
from leaptime.core.duration import Duration
from leaptime.errors import ParseError

_ISO_TIME_PATTERN = re.compile(r"^(\d{2}):(\d{2})(?::(\d{2})(?:[.,](\d{1,9}))?)?$")


class TimeOfDay:
    """A time of day with nanosecond precision and leap second support.

    TimeOfDay holds an hour (0-23), a minute (0-59), a whole second (0-59)
    and a fraction in nanoseconds. The fraction normally lies in
    [0, 1_000_000_000). A fraction in [1_000_000_000, 2_000_000_000)
    means the value sits inside a positive leap second inserted after
    `second`, so 23:59:59 with a fraction of 1_500_000_000 is displayed
    as 23:59:60,5.

    Values are immutable. Equality, ordering and hashing use the exact
    fields, so a leap second value never compares equal to the value
    displayed right after it.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The whole second component (0-59).
        nanosecond: The raw fraction (0-1999999999).

    Examples:
        >>> t = TimeOfDay.from_hms_milli(23, 59, 59, 1_500)
        >>> t.second
        59
        >>> t.nanosecond
        1500000000
        >>> str(t)
        '23:59:60,500'

        >>> TimeOfDay.from_hms(24, 0, 0) is None
        True
    """

    __slots__ = ("_hour", "_minute", "_second", "_frac")

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
    ) -> None:
        """Create a TimeOfDay from its fields.

        Unlike the from_hms* constructors, which return None, this
        constructor raises on an invalid field.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The fraction (0-1999999999), at or above
                1_000_000_000 for a leap second.

        Raises:
            ValidationError: If any field is out of range.

        Examples:
            >>> TimeOfDay(14, 30, 45)
            TimeOfDay(14, 30, 45, nanosecond=0)
        """
        validate_field("hour", hour)
        validate_field("minute", minute)
        validate_field("second", second)
        validate_field("nanosecond", nanosecond)

        self._hour: int = hour
        self._minute: int = minute
        self._second: int = second
        self._frac: int = nanosecond

    @classmethod
    def _from_fields(cls, hour: int, minute: int, second: int, frac: int) -> TimeOfDay:
        """Create a TimeOfDay from fields known to be valid.

        This is an internal factory method that bypasses validation.
        """
        instance = object.__new__(cls)
        instance._hour = hour
        instance._minute = minute
        instance._second = second
        instance._frac = frac
        return instance

    @classmethod
    def from_hms(cls, hour: int, minute: int, second: int) -> TimeOfDay | None:
        """Make a TimeOfDay from hour, minute and second.

        Returns:
            The new value, or None on an invalid hour, minute or second.
        """
        return cls.from_hms_nano(hour, minute, second, 0)

    @classmethod
    def from_hms_milli(
        cls, hour: int, minute: int, second: int, milli: int
    ) -> TimeOfDay | None:
        """Make a TimeOfDay from hour, minute, second and millisecond.

        The millisecond part can exceed 999 in order to represent the
        leap second.

        Returns:
            The new value, or None if any field is out of range.

        Examples:
            >>> TimeOfDay.from_hms_milli(3, 5, 7, 1_300)
            TimeOfDay(3, 5, 7, nanosecond=1300000000)
        """
        return cls.from_hms_nano(hour, minute, second, milli * NANOS_PER_MILLISECOND)

    @classmethod
    def from_hms_micro(
        cls, hour: int, minute: int, second: int, micro: int
    ) -> TimeOfDay | None:
        """Make a TimeOfDay from hour, minute, second and microsecond.

        The microsecond part can exceed 999999 in order to represent the
        leap second.

        Returns:
            The new value, or None if any field is out of range.
        """
        return cls.from_hms_nano(hour, minute, second, micro * NANOS_PER_MICROSECOND)

    @classmethod
    def from_hms_nano(
        cls, hour: int, minute: int, second: int, nano: int
    ) -> TimeOfDay | None:
        """Make a TimeOfDay from hour, minute, second and nanosecond.

        The nanosecond part can exceed 999999999 in order to represent the
        leap second.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nano: The fraction (0-1999999999).

        Returns:
            The new value, or None if any field is out of range.

        Examples:
            >>> TimeOfDay.from_hms_nano(0, 0, 0, 6_543_210)
            TimeOfDay(0, 0, 0, nanosecond=6543210)
            >>> TimeOfDay.from_hms_nano(0, 0, 0, 2_000_000_000) is None
            True
        """
        if not fields_in_range(hour, minute, second, nano):
            return None
        return cls._from_fields(hour, minute, second, nano)

    @classmethod
    def midnight(cls) -> TimeOfDay:
        """Return a TimeOfDay representing midnight (00:00:00)."""
        return cls._from_fields(0, 0, 0, 0)

    @classmethod
    def from_iso_format(cls, s: str) -> TimeOfDay:
        """Parse a time from its ISO 8601 text form.

        Supports formats:
        - HH:MM
        - HH:MM:SS
        - HH:MM:SS,f or HH:MM:SS.f (1-9 fraction digits)

        A second field of 60 is read as the leap second following second
        59, so "23:59:60,5" gives second 59 with a fraction of
        1_500_000_000.

        Args:
            s: The time string to parse.

        Returns:
            A TimeOfDay parsed from the string.

        Raises:
            ParseError: If the string is not a supported format.
            ValidationError: If the fields are out of range.

        Examples:
            >>> TimeOfDay.from_iso_format("23:59:60,001")
            TimeOfDay(23, 59, 59, nanosecond=1001000000)

            >>> TimeOfDay.from_iso_format("14:30")
            TimeOfDay(14, 30, 0, nanosecond=0)
        """
        s = s.strip()
        if not s:
            raise ParseError("empty time string")

        match = _ISO_TIME_PATTERN.match(s)
        if match is None:
            raise ParseError(f"invalid ISO 8601 time format: {s!r}")

        hour_str, minute_str, second_str, frac_str = match.groups()
        second = int(second_str) if second_str else 0
        nanosecond = _parse_fractional_seconds(frac_str) if frac_str else 0
        if second == 60:
            second = 59
            nanosecond += LEAP_FRACTION_BASE
        return cls(int(hour_str), int(minute_str), second, nanosecond=nanosecond)

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._hour

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return self._minute

    @property
    def second(self) -> int:
        """Return the whole second component (0-59).

        The leap second is never folded into this field; see nanosecond.
        """
        return self._second

    @property
    def nanosecond(self) -> int:
        """Return the nanoseconds since the whole non-leap second.

        The range from 1,000,000,000 to 1,999,999,999 represents the
        leap second.

        Returns:
            The raw fraction [0, 2e9).
        """
        return self._frac

    @property
    def is_leap_second(self) -> bool:
        """Return True if this value sits inside a leap second."""
        return self._frac >= LEAP_FRACTION_BASE

    @property
    def hour12(self) -> tuple[bool, int]:
        """Return the hour on a 12-hour clock.

        Returns:
            A tuple (is_pm, hour) with hour from 1 to 12.

        Examples:
            >>> TimeOfDay(0, 0, 0).hour12
            (False, 12)
            >>> TimeOfDay(13, 0, 0).hour12
            (True, 1)
        """
        hour12 = self._hour % 12
        if hour12 == 0:
            hour12 = 12
        return (self._hour >= 12, hour12)

    @property
    def seconds_from_midnight(self) -> int:
        """Return the number of non-leap seconds past the last midnight.

        The leap second, if any, is not counted.

        Examples:
            >>> TimeOfDay(1, 1, 1, nanosecond=1_500_000_000).seconds_from_midnight
            3661
        """
        return (
            self._hour * SECONDS_PER_HOUR
            + self._minute * SECONDS_PER_MINUTE
            + self._second
        )

    def with_hour(self, hour: int) -> TimeOfDay | None:
        """Return a new TimeOfDay with the hour changed, or None if invalid."""
        if not field_in_range("hour", hour):
            return None
        return TimeOfDay._from_fields(hour, self._minute, self._second, self._frac)

    def with_minute(self, minute: int) -> TimeOfDay | None:
        """Return a new TimeOfDay with the minute changed, or None if invalid."""
        if not field_in_range("minute", minute):
            return None
        return TimeOfDay._from_fields(self._hour, minute, self._second, self._frac)

    def with_second(self, second: int) -> TimeOfDay | None:
        """Return a new TimeOfDay with the second changed, or None if invalid.

        A leap second fraction is kept as is.
        """
        if not field_in_range("second", second):
            return None
        return TimeOfDay._from_fields(self._hour, self._minute, second, self._frac)

    def with_nanosecond(self, nanosecond: int) -> TimeOfDay | None:
        """Return a new TimeOfDay with the fraction changed.

        Args:
            nanosecond: New fraction (0-1999999999), leap second included.

        Returns:
            The new value, or None if the fraction is out of range.

        Examples:
            >>> TimeOfDay(23, 59, 59).with_nanosecond(1_000_000_000)
            TimeOfDay(23, 59, 59, nanosecond=1000000000)
        """
        if not field_in_range("nanosecond", nanosecond):
            return None
        return TimeOfDay._from_fields(
            self._hour, self._minute, self._second, nanosecond
        )

    def to_iso_format(self, *, separator: str = ",") -> str:
        """Return the time as an ISO 8601 string.

        A leap second is shown as the following second, so 23:59:59 with
        a fraction of 1_000_000_000 renders as "23:59:60". The fraction
        is omitted when zero, otherwise it takes 3, 6 or 9 digits,
        whichever is the shortest exact form.

        Args:
            separator: Decimal sign placed before the fraction.

        Returns:
            ISO 8601 formatted time string.

        Examples:
            >>> TimeOfDay(23, 59, 59, nanosecond=999_000_000).to_iso_format()
            '23:59:59,999'

            >>> TimeOfDay(0, 0, 0, nanosecond=43_210_000).to_iso_format()
            '00:00:00,043210'

            >>> TimeOfDay(0, 0, 0, nanosecond=500_000_000).to_iso_format(separator=".")
            '00:00:00.500'
        """
        if self._frac >= LEAP_FRACTION_BASE:
            second, nano = self._second + 1, self._frac - LEAP_FRACTION_BASE
        else:
            second, nano = self._second, self._frac

        base = f"{self._hour:02d}:{self._minute:02d}:{second:02d}"
        if nano == 0:
            return base
        elif nano % NANOS_PER_MILLISECOND == 0:
            return f"{base}{separator}{nano // NANOS_PER_MILLISECOND:03d}"
        elif nano % NANOS_PER_MICROSECOND == 0:
            return f"{base}{separator}{nano // NANOS_PER_MICROSECOND:06d}"
        else:
            return f"{base}{separator}{nano:09d}"

    def __add__(self, other: object) -> TimeOfDay:
        """Add a duration, wrapping around midnight.

        The day component of the duration has no effect. A value already
        inside a leap second may run to the end of it before the carry
        into the next second fires; any other value carries at the usual
        one second boundary.

        Args:
            other: A Duration (may be negative or longer than a day).

        Returns:
            A new TimeOfDay.

        Examples:
            >>> TimeOfDay(3, 5, 7, nanosecond=900_000_000) + Duration(seconds=86399)
            TimeOfDay(3, 5, 6, nanosecond=900000000)

            >>> TimeOfDay.from_hms_milli(3, 5, 7, 1_300) + Duration(milliseconds=800)
            TimeOfDay(3, 5, 8, nanosecond=100000000)
        """
        if not isinstance(other, Duration):
            return NotImplemented

        secs = self.seconds_from_midnight + other.seconds
        nanos = self._frac + other.nanoseconds

        # leap seconds after the current whole second are never entered
        max_nanos = (
            MAX_FRACTION if self._frac >= LEAP_FRACTION_BASE else NANOS_PER_SECOND
        )
        if nanos >= max_nanos:
            nanos -= max_nanos
            secs += 1

        secs %= SECONDS_PER_DAY
        hour, rem = divmod(secs, SECONDS_PER_HOUR)
        minute, second = divmod(rem, SECONDS_PER_MINUTE)
        return TimeOfDay._from_fields(hour, minute, second, nanos)

    def __radd__(self, other: object) -> TimeOfDay:
        """Support Duration + TimeOfDay."""
        return self.__add__(other)

    def __sub__(self, other: object) -> TimeOfDay | Duration:
        """Subtract a TimeOfDay or a Duration.

        TimeOfDay - TimeOfDay returns the signed Duration between them. A
        leap second is treated as coinciding with the whole second before
        it, which keeps `a - b == -(b - a)` for every pair. The identity
        `b + (a - b) == a` holds whenever neither value is inside a leap
        second, and fails when only `a` is.

        TimeOfDay - Duration is the same as adding the negated duration.

        Examples:
            >>> a = TimeOfDay.from_hms_milli(3, 5, 7, 200)
            >>> b = TimeOfDay.from_hms_milli(3, 5, 6, 1_800)
            >>> a - b
            Duration(seconds=0, nanoseconds=400000000)
        """
        if isinstance(other, Duration):
            return self + (-other)
        if not isinstance(other, TimeOfDay):
            return NotImplemented

        # the number of whole non-leap seconds
        secs = (
            (self._hour - other._hour) * SECONDS_PER_HOUR
            + (self._minute - other._minute) * SECONDS_PER_MINUTE
            + (self._second - other._second)
            - 1
        )

        # from other to its next non-leap second
        max_nanos = (
            MAX_FRACTION if other._frac >= LEAP_FRACTION_BASE else NANOS_PER_SECOND
        )
        nanos1 = max_nanos - other._frac

        # from the last leap or non-leap second to self
        last_frac = LEAP_FRACTION_BASE if self._frac >= LEAP_FRACTION_BASE else 0
        nanos2 = self._frac - last_frac

        return Duration.from_seconds(secs) + Duration.from_nanoseconds(nanos1 + nanos2)

    def _key(self) -> tuple[int, int, int, int]:
        return (self._hour, self._minute, self._second, self._frac)

    def __eq__(self, other: object) -> bool:
        """Check field-wise equality with another TimeOfDay.

        Examples:
            >>> TimeOfDay(23, 59, 59, nanosecond=1_000_000_000) == TimeOfDay(0, 0, 0)
            False
        """
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this TimeOfDay is earlier than another.

        A leap second orders after every fraction of the second it
        follows and before the next whole second.
        """
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"TimeOfDay({self._hour}, {self._minute}, {self._second}, "
            f"nanosecond={self._frac})"
        )

    def __str__(self) -> str:
        """Return the canonical ISO 8601 form, with a comma decimal sign."""
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Times are always truthy, midnight included."""
        return True


def _parse_fractional_seconds(frac_str: str) -> int:
    """Parse a fractional seconds string (1-9 digits) to nanoseconds.

    Examples:
        >>> _parse_fractional_seconds("1")
        100000000
        >>> _parse_fractional_seconds("043210")
        43210000
    """
    return int(frac_str.ljust(9, "0"))


__all__ = ["TimeOfDay"]
