"""Named lookup of checker instances.

The built-in checkers are registered when this module is imported.
``TimeBetween`` is a factory bound to a range, so only the checkers it
returns (not the factory) can be registered.
"""

from __future__ import annotations

import logging

from checkers.base import Checker
from checkers.container import (
    contains,
    is_in,
    is_sorted,
    map_equals,
    same_content,
    slice_equals,
)
from checkers.timing import duration_less_than
from checkers.types import CheckerError, CheckerInfo, CheckerNotFoundError

logger = logging.getLogger(__name__)

_registry: dict[str, Checker] = {}


def register_checker(checker: Checker, *, replace: bool = False) -> Checker:
    """Register *checker* under ``checker.info.name``.

    Raises:
        CheckerError: If the name is taken and *replace* is false.
    """
    name = checker.info.name
    if name in _registry:
        if not replace:
            raise CheckerError(f"Checker already registered: {name}")
        logger.warning("Replacing registered checker %s", name)
    _registry[name] = checker
    return checker


def unregister_checker(name: str) -> bool:
    """Remove a checker. Returns ``True`` if it was registered."""
    return _registry.pop(name, None) is not None


def get_checker(name: str) -> Checker:
    """Return the checker registered as *name*."""
    try:
        return _registry[name]
    except KeyError:
        raise CheckerNotFoundError(f"Unknown checker: {name}") from None


def list_checkers() -> list[CheckerInfo]:
    """Descriptors of all registered checkers, sorted by name."""
    return [_registry[name].info for name in sorted(_registry)]


for _builtin in (
    contains,
    is_in,
    slice_equals,
    map_equals,
    same_content,
    is_sorted,
    duration_less_than,
):
    register_checker(_builtin)
