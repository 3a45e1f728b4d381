"""Base class shared by every checker."""

from __future__ import annotations

import abc
import logging
from collections.abc import Iterable, Sequence
from typing import Any

from checkers.types import CheckerInfo, CheckResult

logger = logging.getLogger(__name__)


class Checker(abc.ABC):
    """A named predicate over one or more untyped values.

    Subclasses implement :meth:`_check`; callers use :meth:`check` (the
    harness form, with argument labels) or call the checker directly::

        passed, error = contains([1, 2, 3], 2)
    """

    def __init__(self, name: str, params: Iterable[str]) -> None:
        self._info = CheckerInfo(name=name, params=tuple(params))

    @property
    def info(self) -> CheckerInfo:
        return self._info

    def check(self, params: Sequence[Any], names: Sequence[str] | None = None) -> CheckResult:
        """Evaluate the checker.

        Args:
            params: Values in the order given by ``info.params``.
            names: Labels for *params*; defaults to ``info.params``.

        Returns:
            :class:`CheckResult`. Usage errors are reported through
            ``error``, never raised.
        """
        params = list(params)
        error = self.arity_error(params)
        if error:
            result = CheckResult(False, error)
        else:
            labels = list(names) if names is not None else list(self._info.params)
            result = self._check(params, labels)
        if result.error:
            logger.debug("%s: %s", self._info.name, result.error)
        return result

    def __call__(self, *params: Any) -> CheckResult:
        return self.check(params)

    def arity_error(self, params: list[Any]) -> str:
        expected = len(self._info.params)
        if len(params) != expected:
            return f"{self._info.name} expects {expected} argument(s), got {len(params)}"
        return ""

    @abc.abstractmethod
    def _check(self, params: list[Any], names: list[str]) -> CheckResult:
        """Evaluate already arity-checked *params*."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._info.name}>"
