"""Checkers over sequences, mappings and strings.

    checker      | params                                  | verdict
    -------------|-----------------------------------------|------------------------------
    Contains     | container, value expected to contain    | value in sequence / substring
    IsIn         | element, container                       | Contains with args swapped
    SliceEquals  | obtained, expected                      | deep-equal sequences
    MapEquals    | obtained, expected                      | deep-equal mappings
    SameContent  | obtained, expected                      | equal multisets
    IsSorted     | container                               | non-decreasing order
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any

from checkers.base import Checker
from checkers.config import get_config
from checkers.equality import deep_equal
from checkers.shapes import (
    MIXED,
    as_ordered,
    classify,
    describe_type,
    element_type,
    same_type,
    type_name,
    value_type,
)
from checkers.types import CheckResult, Shape

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Containment
# ---------------------------------------------------------------------------

class ContainsChecker(Checker):
    """Checks that a sequence holds an element or a string holds a substring."""

    def __init__(self) -> None:
        super().__init__("Contains", ("container", "value expected to contain"))

    def _check(self, params: list[Any], names: list[str]) -> CheckResult:
        return _contains(params[0], params[1])


class IsInChecker(Checker):
    """Checks that an element belongs to a sequence or a string."""

    def __init__(self) -> None:
        super().__init__("IsIn", ("element", "container"))

    def _check(self, params: list[Any], names: list[str]) -> CheckResult:
        return _contains(params[1], params[0])


def _contains(container: Any, value: Any) -> CheckResult:
    shape = classify(container)

    if shape is Shape.SEQUENCE:
        etype = element_type(container)
        if etype is None:
            return CheckResult(False)
        # A type mismatch means "not applicable", not a usage error.
        if etype is not MIXED and not same_type(etype, value_type(value)):
            return CheckResult(False)
        return CheckResult(any(deep_equal(item, value) for item in container))

    if shape is Shape.STRING:
        if not container:
            return CheckResult(False)
        if not isinstance(value, str):
            return CheckResult(False, f"value should have type: str, got {describe_type(value)}")
        return CheckResult(value in container)

    return CheckResult(
        False, f"Unsupported argument types: {shape.value}, {describe_type(value)}"
    )


# ---------------------------------------------------------------------------
# Collection equality
# ---------------------------------------------------------------------------

class SliceEqualsChecker(Checker):
    """Checks that two sequences are deep-equal, element by element in order."""

    def __init__(self) -> None:
        super().__init__("SliceEquals", ("obtained", "expected"))

    def _check(self, params: list[Any], names: list[str]) -> CheckResult:
        obtained, expected = params
        if classify(obtained) is not Shape.SEQUENCE or classify(expected) is not Shape.SEQUENCE:
            return CheckResult(False, "Both arguments must be sequences")
        if len(obtained) != len(expected):
            return CheckResult(False)
        return CheckResult(deep_equal(obtained, expected))


class MapEqualsChecker(Checker):
    """Checks that two mappings hold the same keys with deep-equal values."""

    def __init__(self) -> None:
        super().__init__("MapEquals", ("obtained", "expected"))

    def _check(self, params: list[Any], names: list[str]) -> CheckResult:
        obtained, expected = params
        if classify(obtained) is not Shape.MAP or classify(expected) is not Shape.MAP:
            return CheckResult(False, "Both arguments must be maps")
        if len(obtained) != len(expected):
            return CheckResult(False)
        return CheckResult(deep_equal(obtained, expected))


# ---------------------------------------------------------------------------
# Multiset equality
# ---------------------------------------------------------------------------

class SameContentChecker(Checker):
    """Checks that two sequences hold the same elements, ignoring order.

    Multiplicities matter: ``[1, 2, 2]`` and ``[1, 1, 2]`` differ. Elements
    are counted by ``(type, value)`` so that ``1``, ``1.0`` and ``True`` are
    never merged. Unhashable elements are matched pairwise with
    :func:`~checkers.equality.deep_equal` unless
    ``CheckerConfig.unhashable_fallback`` is off.
    """

    def __init__(self) -> None:
        super().__init__("SameContent", ("obtained", "expected"))

    def arity_error(self, params: list[Any]) -> str:
        if len(params) != 2:
            return "SameContent expects two sequence arguments"
        return ""

    def _check(self, params: list[Any], names: list[str]) -> CheckResult:
        obtained, expected = params

        for label, value in (("obtained", obtained), ("expected", expected)):
            shape = classify(value)
            if shape is not Shape.SEQUENCE:
                return CheckResult(
                    False,
                    f"SameContent expects the {label} value to be a sequence, got {shape.value!r}",
                )

        tob = element_type(obtained)
        texp = element_type(expected)
        if tob is not None and texp is not None and not same_type(tob, texp):
            return CheckResult(
                False,
                "SameContent expects two sequences of the same type, "
                f"expected: {type_name(texp)!r}, got: {type_name(tob)!r}",
            )

        if len(obtained) != len(expected):
            return CheckResult(False)

        try:
            return CheckResult(_count(obtained) == _count(expected))
        except TypeError as exc:
            if not get_config().unhashable_fallback:
                return CheckResult(False, f"SameContent elements must be hashable: {exc}")
            logger.debug("SameContent falling back to pairwise matching: %s", exc)
            return CheckResult(_match_pairwise(obtained, expected))


def _count(seq: Any) -> Counter:
    return Counter(_typed_key(item) for item in seq)


def _typed_key(item: Any) -> Any:
    """Hashable key tagging *item* and every nested tuple/frozenset member with its type."""
    if isinstance(item, tuple):
        return (type(item), tuple(_typed_key(x) for x in item))
    if isinstance(item, frozenset):
        return (type(item), frozenset(_typed_key(x) for x in item))
    return (value_type(item), item)


def _match_pairwise(obtained: Any, expected: Any) -> bool:
    remaining = list(expected)
    for item in obtained:
        for idx, candidate in enumerate(remaining):
            if deep_equal(item, candidate):
                del remaining[idx]
                break
        else:
            return False
    return not remaining


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------

class IsSortedChecker(Checker):
    """Checks that a container is in non-decreasing order.

    Accepts any sequence (compared with ``<``) or an object implementing
    ``__len__`` and ``less(i, j)``.
    """

    def __init__(self) -> None:
        super().__init__("IsSorted", ("container",))

    def _check(self, params: list[Any], names: list[str]) -> CheckResult:
        container = as_ordered(params[0])
        if container is None:
            return CheckResult(False, "value object must support len() and pairwise less-than")

        for i in range(len(container) - 1):
            try:
                out_of_order = container.less(i + 1, i)
            except Exception as exc:  # user-defined less() may raise anything
                return CheckResult(
                    False, f"values at index {i} and {i + 1} are not comparable: {exc}"
                )
            if out_of_order:
                return CheckResult(False, f"value is not ordered at index {i + 1}")
        return CheckResult(True)


contains = ContainsChecker()
is_in = IsInChecker()
slice_equals = SliceEqualsChecker()
map_equals = MapEqualsChecker()
same_content = SameContentChecker()
is_sorted = IsSortedChecker()
