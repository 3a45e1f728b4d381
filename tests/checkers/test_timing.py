"""Tests for checkers.timing — time range and duration checkers."""

from __future__ import annotations

from datetime import date, timedelta, timezone

import numpy as np
import pytest

from checkers.timing import duration_less_than, time_between, to_nanoseconds
from checkers.types import CheckerUsageError


class TestTimeBetween:
    def test_info(self, noon, hour):
        checker = time_between(noon, noon + hour)
        assert checker.info.name == "TimeBetween"
        assert checker.info.params == ("obtained",)

    def test_inside(self, noon, hour):
        assert time_between(noon - hour, noon + hour)(noon) == (True, "")

    def test_bounds_inclusive(self, noon, hour):
        checker = time_between(noon, noon + hour)
        assert checker(noon).passed
        assert checker(noon + hour).passed

    def test_reversed_bounds_normalised(self, noon, hour):
        checker = time_between(noon + hour, noon)
        assert checker.start == noon
        assert checker.end == noon + hour
        assert checker(noon).passed
        assert checker(noon + hour).passed

    def test_before_start(self, noon, hour):
        passed, error = time_between(noon, noon + hour)(noon - hour)
        assert passed is False
        assert "must not be before start value of" in error
        assert repr(noon) in error

    def test_after_end(self, noon, hour):
        passed, error = time_between(noon, noon + hour)(noon + 2 * hour)
        assert passed is False
        assert "must not be after end value of" in error
        assert repr(noon + hour) in error

    @pytest.mark.parametrize("value", ["2024-03-01", 1709294400, date(2024, 3, 1), None])
    def test_non_datetime_input(self, noon, hour, value):
        passed, error = time_between(noon, noon + hour)(value)
        assert passed is False
        assert error.startswith("obtained value type must be datetime")

    def test_aware_bounds(self, noon_utc, hour):
        checker = time_between(noon_utc, noon_utc + hour)
        plus_two = timezone(timedelta(hours=2))
        assert checker(noon_utc.astimezone(plus_two)).passed

    def test_awareness_mismatch_is_diagnostic(self, noon, noon_utc, hour):
        passed, error = time_between(noon, noon + hour)(noon_utc)
        assert passed is False
        assert "timezone-aware but the bounds are naive" in error

    def test_non_datetime_bound_raises(self, noon):
        with pytest.raises(CheckerUsageError, match="end must be a datetime"):
            time_between(noon, "tomorrow")

    def test_mixed_awareness_bounds_raise(self, noon, noon_utc):
        with pytest.raises(CheckerUsageError, match="both be naive"):
            time_between(noon, noon_utc)


class TestDurationLessThan:
    def test_less(self):
        ms = timedelta(milliseconds=1)
        assert duration_less_than(5 * ms, 10 * ms) == (True, "")

    def test_greater(self):
        ms = timedelta(milliseconds=1)
        assert duration_less_than(10 * ms, 5 * ms) == (False, "")

    def test_equal_is_not_less(self):
        assert duration_less_than(timedelta(seconds=1), timedelta(seconds=1)) == (False, "")

    def test_negative_durations(self):
        assert duration_less_than(timedelta(days=-1), timedelta(0)).passed

    def test_numpy_nanosecond_resolution(self):
        assert duration_less_than(np.timedelta64(999, "ns"), timedelta(microseconds=1)).passed
        assert not duration_less_than(np.timedelta64(1000, "ns"), timedelta(microseconds=1)).passed

    def test_obtained_not_duration(self):
        passed, error = duration_less_than(5, timedelta(seconds=1))
        assert passed is False
        assert error == "obtained value type must be a duration, got int"

    def test_expected_not_duration(self):
        passed, error = duration_less_than(timedelta(seconds=1), 2.5)
        assert passed is False
        assert error == "expected value type must be a duration, got float"

    def test_large_coarse_units_do_not_overflow(self):
        assert duration_less_than(np.timedelta64(200000, "D"), np.timedelta64(1, "D")) == (
            False,
            "",
        )
        assert duration_less_than(np.timedelta64(1, "D"), np.timedelta64(200000, "D")).passed

    def test_calendar_units_rejected(self):
        passed, error = duration_less_than(np.timedelta64(1, "Y"), timedelta(days=1))
        assert passed is False
        assert "calendar unit 'Y'" in error

    def test_nat(self):
        passed, error = duration_less_than(np.timedelta64("NaT"), timedelta(seconds=1))
        assert passed is False
        assert "NaT is not a duration" in error

    def test_arity(self):
        assert duration_less_than(timedelta(0)) == (
            False,
            "DurationLessThan expects 2 argument(s), got 1",
        )


class TestToNanoseconds:
    def test_timedelta(self):
        assert to_nanoseconds(timedelta(days=1, seconds=2, microseconds=3)) == (
            86_402_000_003_000
        )

    def test_timedelta64_units(self):
        assert to_nanoseconds(np.timedelta64(3, "ms")) == 3_000_000
        assert to_nanoseconds(np.timedelta64(2, "s")) == 2_000_000_000

    def test_coarse_units_exact(self):
        assert to_nanoseconds(np.timedelta64(200000, "D")) == 200000 * 86_400 * 10**9
        assert to_nanoseconds(np.timedelta64(3, "W")) == 21 * 86_400 * 10**9

    def test_sub_nanosecond_truncates_toward_zero(self):
        assert to_nanoseconds(np.timedelta64(1500, "ps")) == 1
        assert to_nanoseconds(np.timedelta64(-1500, "ps")) == -1
        assert to_nanoseconds(np.timedelta64(999, "ps")) == 0

    @pytest.mark.parametrize("unit", ["Y", "M"])
    def test_calendar_units_rejected(self, unit):
        with pytest.raises(ValueError, match="calendar unit"):
            to_nanoseconds(np.timedelta64(1, unit))

    def test_generic_unit_rejected(self):
        with pytest.raises(ValueError, match="without a unit"):
            to_nanoseconds(np.timedelta64(5))

    def test_not_a_duration(self):
        with pytest.raises(TypeError):
            to_nanoseconds("1s")
