"""Generic assertion checkers for test harnesses.

Each checker compares untyped values and returns a ``CheckResult``
``(passed, error)``. ``error`` is empty for a plain mismatch and explains
the problem when the inputs themselves are unusable::

    from checkers import contains, same_content, time_between

    contains([1, 2, 3], 2)              # CheckResult(passed=True, error='')
    same_content([1, 2, 2], [2, 1, 2])  # CheckResult(passed=True, error='')
    contains("abc", 1)                  # CheckResult(passed=False, error='value should ...')
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from checkers.base import Checker
from checkers.config import (
    CheckerConfig,
    get_config,
    load_config,
    reset_config,
    save_config,
    set_config,
)
from checkers.container import (
    contains,
    is_in,
    is_sorted,
    map_equals,
    same_content,
    slice_equals,
)
from checkers.equality import deep_equal
from checkers.registry import get_checker, list_checkers, register_checker, unregister_checker
from checkers.shapes import OrderedContainer, classify
from checkers.timing import TimeBetweenChecker, duration_less_than, time_between
from checkers.types import (
    CheckerConfigError,
    CheckerError,
    CheckerInfo,
    CheckerNotFoundError,
    CheckerUsageError,
    CheckResult,
    Shape,
)

try:
    __version__ = version("aitf-checkers")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    # types
    "Checker",
    "CheckerInfo",
    "CheckResult",
    "Shape",
    "OrderedContainer",
    "CheckerError",
    "CheckerConfigError",
    "CheckerUsageError",
    "CheckerNotFoundError",
    # checkers
    "contains",
    "is_in",
    "slice_equals",
    "map_equals",
    "same_content",
    "is_sorted",
    "duration_less_than",
    "time_between",
    "TimeBetweenChecker",
    # helpers
    "classify",
    "deep_equal",
    # registry
    "register_checker",
    "unregister_checker",
    "get_checker",
    "list_checkers",
    # config
    "CheckerConfig",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",
    "save_config",
]
