"""Tests for Duration class.

These tests verify the Duration implementation, including construction,
normalization, arithmetic, and comparison operations.
"""

from __future__ import annotations

import pytest

from leaptime.core import Duration


class TestDurationConstruction:
    """Tests for Duration construction."""

    def test_default_construction_is_zero(self) -> None:
        """Default Duration() creates a zero duration."""
        d = Duration()
        assert d.seconds == 0
        assert d.nanoseconds == 0
        assert d.is_zero
        assert d == Duration.zero()

    def test_construction_with_days(self) -> None:
        """Days are folded into whole seconds."""
        assert Duration(days=2).seconds == 172_800

    def test_construction_with_milliseconds(self) -> None:
        """Milliseconds overflow into seconds."""
        d = Duration(milliseconds=1500)
        assert d.seconds == 1
        assert d.nanoseconds == 500_000_000

    def test_construction_with_all_components(self) -> None:
        """All components are summed."""
        d = Duration(days=1, seconds=1, milliseconds=1, microseconds=1, nanoseconds=1)
        assert d.seconds == 86_401
        assert d.nanoseconds == 1_001_001

    def test_factories(self) -> None:
        """Each from_* factory scales its unit."""
        assert Duration.from_days(1) == Duration(seconds=86_400)
        assert Duration.from_hours(25) == Duration(seconds=90_000)
        assert Duration.from_minutes(90) == Duration(seconds=5_400)
        assert Duration.from_seconds(7) == Duration(seconds=7)
        assert Duration.from_milliseconds(7) == Duration(nanoseconds=7_000_000)
        assert Duration.from_microseconds(7) == Duration(nanoseconds=7_000)
        assert Duration.from_nanoseconds(7).nanoseconds == 7


class TestDurationNormalization:
    """Tests for the floor normalization of negative spans."""

    def test_negative_whole_seconds(self) -> None:
        d = Duration.from_seconds(-86_399)
        assert d.seconds == -86_399
        assert d.nanoseconds == 0
        assert d.is_negative

    def test_negative_fraction_borrows(self) -> None:
        """-0.4s is stored as -1s + 0.6s."""
        d = Duration.from_milliseconds(-400)
        assert d.seconds == -1
        assert d.nanoseconds == 600_000_000
        assert d.total_nanoseconds == -400_000_000

    def test_mixed_signs(self) -> None:
        d = Duration(seconds=1, milliseconds=-1500)
        assert d.seconds == -1
        assert d.nanoseconds == 500_000_000

    def test_multi_day_span(self) -> None:
        """Durations are not limited to a day."""
        d = Duration.from_days(12_345)
        assert d.seconds == 12_345 * 86_400
        assert not d.is_negative


class TestDurationArithmetic:
    """Tests for Duration arithmetic."""

    def test_add(self) -> None:
        assert Duration(seconds=30) + Duration(milliseconds=-500) == Duration(
            milliseconds=29_500
        )

    def test_add_carries_nanoseconds(self) -> None:
        d = Duration(milliseconds=600) + Duration(milliseconds=700)
        assert d.seconds == 1
        assert d.nanoseconds == 300_000_000

    def test_sub(self) -> None:
        assert Duration(seconds=60) - Duration(seconds=90) == Duration(seconds=-30)

    def test_neg(self) -> None:
        assert -Duration(milliseconds=400) == Duration(milliseconds=-400)
        assert -(-Duration(seconds=5)) == Duration(seconds=5)
        assert -Duration.zero() == Duration.zero()

    def test_pos_and_abs(self) -> None:
        d = Duration(milliseconds=-400)
        assert +d == d
        assert abs(d) == Duration(milliseconds=400)

    def test_mul(self) -> None:
        assert Duration(seconds=30) * 3 == Duration(seconds=90)
        assert 2 * Duration(milliseconds=-600) == Duration(milliseconds=-1200)

    def test_sum(self) -> None:
        """sum() starts from 0 and works through __radd__."""
        total = sum([Duration(seconds=1), Duration(milliseconds=500)])
        assert total == Duration(milliseconds=1500)

    def test_add_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            Duration(seconds=1) + 1  # type: ignore[operator]


class TestDurationComparison:
    """Tests for Duration comparison operations."""

    def test_equality(self) -> None:
        assert Duration(seconds=60) == Duration.from_minutes(1)
        assert Duration(seconds=60) != Duration(seconds=61)

    def test_ordering(self) -> None:
        assert Duration(milliseconds=-1) < Duration.zero()
        assert Duration(seconds=30) <= Duration(seconds=30)
        assert Duration(seconds=31) > Duration(seconds=30)
        assert Duration(seconds=30) >= Duration(milliseconds=29_999)

    def test_hash(self) -> None:
        assert hash(Duration(milliseconds=1500)) == hash(Duration(seconds=1, nanoseconds=500_000_000))

    def test_bool(self) -> None:
        assert not Duration.zero()
        assert Duration(nanoseconds=1)


class TestDurationString:
    """Tests for repr and str."""

    def test_repr(self) -> None:
        assert repr(Duration(milliseconds=-400)) == "Duration(seconds=-1, nanoseconds=600000000)"

    @pytest.mark.parametrize(
        ("duration", "expected"),
        [
            (Duration.zero(), "0:00:00"),
            (Duration(seconds=9045), "2:30:45"),
            (Duration(days=1, milliseconds=1500), "1 day, 0:00:01.5"),
            (Duration(milliseconds=-400), "-1 day, 23:59:59.6"),
            (Duration(days=3), "3 days, 0:00:00"),
        ],
    )
    def test_str(self, duration: Duration, expected: str) -> None:
        assert str(duration) == expected
