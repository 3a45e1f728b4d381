"""Checkers over ``datetime`` values and durations."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any

import numpy as np

from checkers.base import Checker
from checkers.shapes import describe_type, short_repr
from checkers.types import CheckerUsageError, CheckResult

logger = logging.getLogger(__name__)

_NS_PER_SECOND = 1_000_000_000
_NS_PER_MICROSECOND = 1_000
_SECONDS_PER_DAY = 86_400

# timedelta64 unit -> nanoseconds per tick
_UNIT_NS = {
    "W": 7 * _SECONDS_PER_DAY * _NS_PER_SECOND,
    "D": _SECONDS_PER_DAY * _NS_PER_SECOND,
    "h": 3_600 * _NS_PER_SECOND,
    "m": 60 * _NS_PER_SECOND,
    "s": _NS_PER_SECOND,
    "ms": 1_000_000,
    "us": _NS_PER_MICROSECOND,
    "ns": 1,
}
# sub-nanosecond unit -> ticks per nanosecond (truncated toward zero)
_UNIT_TICKS_PER_NS = {"ps": 1_000, "fs": 1_000_000, "as": 1_000_000_000}


def _is_aware(dt: datetime) -> bool:
    return dt.tzinfo is not None and dt.utcoffset() is not None


def _awareness(dt: datetime) -> str:
    return "timezone-aware" if _is_aware(dt) else "naive"


# ---------------------------------------------------------------------------
# Time range
# ---------------------------------------------------------------------------

class TimeBetweenChecker(Checker):
    """Checks that a datetime lies within an inclusive ``[start, end]`` range.

    The bounds may be given in either order; the earlier one becomes the
    lower bound.
    """

    def __init__(self, start: datetime, end: datetime) -> None:
        super().__init__("TimeBetween", ("obtained",))
        for label, bound in (("start", start), ("end", end)):
            if not isinstance(bound, datetime):
                raise CheckerUsageError(
                    f"TimeBetween {label} must be a datetime, got {describe_type(bound)}"
                )
        if _is_aware(start) != _is_aware(end):
            raise CheckerUsageError(
                "TimeBetween bounds must both be naive or both be timezone-aware"
            )
        if end < start:
            logger.debug("TimeBetween bounds given in reverse order; swapping")
            start, end = end, start
        self._start = start
        self._end = end

    @property
    def start(self) -> datetime:
        return self._start

    @property
    def end(self) -> datetime:
        return self._end

    def _check(self, params: list[Any], names: list[str]) -> CheckResult:
        when = params[0]
        if not isinstance(when, datetime):
            return CheckResult(
                False, f"obtained value type must be datetime, got {describe_type(when)}"
            )
        if _is_aware(when) != _is_aware(self._start):
            return CheckResult(
                False,
                f"obtained value {short_repr(when)} is {_awareness(when)} "
                f"but the bounds are {_awareness(self._start)}",
            )
        if when < self._start:
            return CheckResult(
                False,
                f"obtained value {short_repr(when)} must not be before "
                f"start value of {short_repr(self._start)}",
            )
        if when > self._end:
            return CheckResult(
                False,
                f"obtained value {short_repr(when)} must not be after "
                f"end value of {short_repr(self._end)}",
            )
        return CheckResult(True)


def time_between(start: datetime, end: datetime) -> TimeBetweenChecker:
    """Return a checker passing for datetimes between *start* and *end* inclusive.

    Raises:
        CheckerUsageError: If a bound is not a datetime, or one bound is
            naive while the other is timezone-aware.
    """
    return TimeBetweenChecker(start, end)


# ---------------------------------------------------------------------------
# Durations
# ---------------------------------------------------------------------------

def to_nanoseconds(value: Any) -> int:
    """Convert a ``timedelta`` or ``numpy.timedelta64`` to integer nanoseconds.

    Raises:
        TypeError: If *value* is not a duration.
        ValueError: If *value* is NaT, a unit-less ``timedelta64`` or uses a
            calendar unit (years, months).
    """
    if isinstance(value, timedelta):
        seconds = value.days * _SECONDS_PER_DAY + value.seconds
        return seconds * _NS_PER_SECOND + value.microseconds * _NS_PER_MICROSECOND
    if isinstance(value, np.timedelta64):
        if np.isnat(value):
            raise ValueError("NaT is not a duration")
        unit, count = np.datetime_data(value.dtype)
        if unit == "generic":
            raise ValueError("timedelta64 without a unit is not a duration")
        if unit in ("Y", "M"):
            raise ValueError(f"timedelta64 in calendar unit {unit!r} has no fixed length")
        # Python ints: converting coarse units to ns in numpy overflows int64.
        ticks = int(value.astype(np.int64)) * count
        if unit in _UNIT_NS:
            return ticks * _UNIT_NS[unit]
        per_ns = _UNIT_TICKS_PER_NS[unit]
        nanos = abs(ticks) // per_ns
        return nanos if ticks >= 0 else -nanos
    raise TypeError(f"expected a duration, got {describe_type(value)}")


class DurationLessThanChecker(Checker):
    """Checks that the obtained duration is strictly shorter than the expected one."""

    def __init__(self) -> None:
        super().__init__("DurationLessThan", ("obtained", "expected"))

    def _check(self, params: list[Any], names: list[str]) -> CheckResult:
        nanos: list[int] = []
        for label, value in zip(("obtained", "expected"), params):
            try:
                nanos.append(to_nanoseconds(value))
            except TypeError:
                return CheckResult(
                    False, f"{label} value type must be a duration, got {describe_type(value)}"
                )
            except ValueError as exc:
                return CheckResult(False, f"{label} value {short_repr(value)} is invalid: {exc}")
        obtained, expected = nanos
        return CheckResult(obtained < expected)


duration_less_than = DurationLessThanChecker()
