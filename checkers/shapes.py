"""Runtime shape classification of checker arguments.

Every argument handed to a checker is sorted into one of the closed set of
:class:`~checkers.types.Shape` variants before any comparison happens:

    value                                   | shape
    ----------------------------------------|-----------
    str                                     | STRING
    Mapping                                 | MAP
    1-D numpy.ndarray, other abc.Sequence   | SEQUENCE
    object with __len__ and less(i, j)      | ORDERED
    anything else                           | UNSUPPORTED

Element types are exact: ``int`` and ``bool`` differ, and numpy values are
typed by their ``dtype``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

import numpy as np

from checkers.config import get_config
from checkers.types import Shape

# Element type of a sequence whose items do not share one exact type.
MIXED = object


@runtime_checkable
class OrderedContainer(Protocol):
    """Container that reports its length and orders two elements by index."""

    def __len__(self) -> int: ...

    def less(self, i: int, j: int) -> bool: ...


class SequenceOrder:
    """Adapt an indexable sequence to :class:`OrderedContainer` using ``<``."""

    def __init__(self, seq: Any) -> None:
        self._seq = seq

    def __len__(self) -> int:
        return len(self._seq)

    def less(self, i: int, j: int) -> bool:
        return bool(self._seq[i] < self._seq[j])


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def classify(value: Any) -> Shape:
    """Return the :class:`Shape` of *value*."""
    if isinstance(value, str):
        return Shape.STRING
    if isinstance(value, Mapping):
        return Shape.MAP
    if isinstance(value, np.ndarray):
        return Shape.SEQUENCE if value.ndim == 1 else Shape.UNSUPPORTED
    if isinstance(value, Sequence):
        return Shape.SEQUENCE
    if isinstance(value, OrderedContainer):
        return Shape.ORDERED
    return Shape.UNSUPPORTED


def as_ordered(value: Any) -> OrderedContainer | None:
    """Return an ordered-container view of *value*, or ``None``.

    A value implementing ``less`` keeps its own comparison rule; plain
    sequences compare their elements with ``<``.
    """
    if isinstance(value, str):
        return None
    if isinstance(value, OrderedContainer):
        return value
    if classify(value) is Shape.SEQUENCE:
        return SequenceOrder(value)
    return None


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------

def value_type(value: Any) -> Any:
    """Exact type of a scalar: its ``dtype`` for numpy scalars."""
    if isinstance(value, np.generic):
        return value.dtype
    return type(value)


def same_type(a: Any, b: Any) -> bool:
    """Compare two type tokens without numpy's dtype coercion (``dtype == int``)."""
    if isinstance(a, np.dtype) or isinstance(b, np.dtype):
        return isinstance(a, np.dtype) and isinstance(b, np.dtype) and a == b
    return a is b


def element_type(seq: Any) -> Any:
    """Element type of a ``SEQUENCE``-shaped value.

    Returns ``None`` for an empty builtin sequence and :data:`MIXED` when the
    items do not share one exact type.
    """
    if isinstance(seq, np.ndarray):
        return MIXED if seq.dtype.kind == "O" else seq.dtype
    if isinstance(seq, (bytes, bytearray, range)):
        return int

    found = None
    for item in seq:
        t = value_type(item)
        if found is None:
            found = t
        elif not same_type(found, t):
            return MIXED
    return found


def type_name(t: Any) -> str:
    """Human-readable name of a type token."""
    if t is None:
        return "unknown"
    if isinstance(t, np.dtype):
        return str(t)
    return getattr(t, "__name__", repr(t))


def describe_type(value: Any) -> str:
    return type_name(value_type(value))


def short_repr(value: Any) -> str:
    """``repr`` of *value* truncated to the configured ``repr_limit``."""
    limit = get_config().repr_limit
    text = repr(value)
    if len(text) > limit:
        text = text[: limit - 3] + "..."
    return text
