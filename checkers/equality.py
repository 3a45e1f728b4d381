"""Recursive deep structural equality.

Two values are deep-equal when they have the same runtime type and:

- numpy arrays: same shape, dtype and elements (NaN never equals NaN);
- floats: compare with ``==`` (so NaN differs from itself);
- mappings: same keys, deep-equal values;
- sequences: same length, deep-equal items in order;
- sets: ``==``;
- dataclasses and plain objects without a custom ``__eq__``: deep-equal
  fields;
- anything else: ``==``.

Cyclic structures terminate: a pair already under comparison is assumed
equal.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

_FLOATS = (float, complex, np.floating, np.complexfloating)
_ATOMIC_SEQUENCES = (str, bytes, bytearray)


def deep_equal(a: Any, b: Any) -> bool:
    """Return ``True`` if *a* and *b* are structurally equal."""
    return _deep_equal(a, b, set())


def _deep_equal(a: Any, b: Any, seen: set[tuple[int, int]]) -> bool:
    if type(a) is not type(b):
        return False

    if isinstance(a, _FLOATS):
        return bool(a == b)
    if a is b:
        return True
    if isinstance(a, type):
        return False
    if isinstance(a, _ATOMIC_SEQUENCES):
        return a == b

    key = (id(a), id(b))
    if key in seen:
        return True
    seen.add(key)

    if isinstance(a, np.ndarray):
        return _array_equal(a, b, seen)
    if isinstance(a, Mapping):
        return _mapping_equal(a, b, seen)
    if isinstance(a, Sequence):
        return len(a) == len(b) and all(_deep_equal(x, y, seen) for x, y in zip(a, b))
    if isinstance(a, (set, frozenset)):
        return a == b
    if dataclasses.is_dataclass(a):
        return all(
            _deep_equal(getattr(a, f.name), getattr(b, f.name), seen)
            for f in dataclasses.fields(a)
        )
    if type(a).__eq__ is object.__eq__:
        fa, fb = _fields_of(a), _fields_of(b)
        if fa is None or fb is None:
            return False
        return _mapping_equal(fa, fb, seen)
    return bool(a == b)


def _array_equal(a: np.ndarray, b: np.ndarray, seen: set[tuple[int, int]]) -> bool:
    if a.shape != b.shape or a.dtype != b.dtype:
        return False
    if a.dtype.kind == "O":
        return all(_deep_equal(x, y, seen) for x, y in zip(a.flat, b.flat))
    return bool(np.array_equal(a, b))


def _mapping_equal(a: Mapping, b: Mapping, seen: set[tuple[int, int]]) -> bool:
    if len(a) != len(b):
        return False
    for k, v in a.items():
        if k not in b:
            return False
        if not _deep_equal(v, b[k], seen):
            return False
    return True


def _fields_of(obj: Any) -> dict[str, Any] | None:
    """Instance state from ``__dict__`` and ``__slots__``; ``None`` if it has neither."""
    state: dict[str, Any] | None = None
    if hasattr(obj, "__dict__"):
        state = dict(vars(obj))
    for cls in type(obj).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if state is None:
                state = {}
            if hasattr(obj, name):
                state[name] = getattr(obj, name)
    return state
