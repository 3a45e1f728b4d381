"""Data classes, enums and exceptions shared by all checkers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class Shape(str, Enum):
    """Runtime shape of a value handed to a checker."""

    SEQUENCE = "sequence"
    MAP = "map"
    STRING = "string"
    ORDERED = "ordered"
    UNSUPPORTED = "unsupported"


# ---------------------------------------------------------------------------
# Descriptor / result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CheckerInfo:
    """Name and ordered parameter labels of a checker."""

    name: str
    params: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of labels but always store a tuple.
        object.__setattr__(self, "params", tuple(self.params))


class CheckResult(NamedTuple):
    """Verdict of a single check.

    ``error`` is empty for a plain comparison mismatch and carries a
    diagnostic when the inputs themselves were unusable.
    """

    passed: bool
    error: str = ""


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class CheckerError(Exception):
    """Base exception for the checkers package."""


class CheckerConfigError(CheckerError):
    """Raised when a checkers config file or value is invalid."""


class CheckerUsageError(CheckerError, TypeError):
    """Raised when a checker factory receives unusable arguments."""


class CheckerNotFoundError(CheckerError, KeyError):
    """Raised when a checker name is not registered."""
