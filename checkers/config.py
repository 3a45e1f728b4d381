"""Checker settings: YAML parsing and the process-wide config instance."""

from __future__ import annotations

import dataclasses
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from checkers.types import CheckerConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "checkers.yaml"
MIN_REPR_LIMIT = 8


@dataclass
class CheckerConfig:
    """Tunables shared by every checker."""

    repr_limit: int = 200            # max repr length embedded in diagnostics
    unhashable_fallback: bool = True  # SameContent: deep-equal matching for unhashable items

    def validate(self) -> None:
        """Raise :class:`CheckerConfigError` if a value is out of range."""
        if isinstance(self.repr_limit, bool) or not isinstance(self.repr_limit, int):
            raise CheckerConfigError(
                f"repr_limit must be an integer, got {type(self.repr_limit).__name__}"
            )
        if self.repr_limit < MIN_REPR_LIMIT:
            raise CheckerConfigError(
                f"repr_limit must be >= {MIN_REPR_LIMIT}, got {self.repr_limit}"
            )
        if not isinstance(self.unhashable_fallback, bool):
            raise CheckerConfigError(
                "unhashable_fallback must be a boolean, "
                f"got {type(self.unhashable_fallback).__name__}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (for writing checkers.yaml)."""
        return dataclasses.asdict(self)


# ---------------------------------------------------------------------------
# YAML loading
# ---------------------------------------------------------------------------

_FIELDS = frozenset(f.name for f in dataclasses.fields(CheckerConfig))


def parse_config(data: dict[str, Any]) -> CheckerConfig:
    """Build a validated :class:`CheckerConfig` from a plain mapping.

    The settings may sit at the top level or under a ``checkers`` key.
    """
    section = data.get("checkers", data) if isinstance(data, dict) else data
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise CheckerConfigError(
            f"Expected a mapping of checker settings, got {type(section).__name__}"
        )

    unknown = sorted(set(section) - _FIELDS)
    if unknown:
        raise CheckerConfigError(f"Unknown checker setting(s): {', '.join(unknown)}")

    cfg = CheckerConfig(**section)
    cfg.validate()
    return cfg


def load_config(path: str | Path = DEFAULT_CONFIG_FILE, *, apply: bool = False) -> CheckerConfig:
    """Load and parse a checkers YAML file.

    Args:
        path: Path to the configuration file.
        apply: Also install the result as the process-wide config.

    Returns:
        Parsed :class:`CheckerConfig`.

    Raises:
        CheckerConfigError: If the file is missing or malformed.
    """
    p = Path(path)
    if not p.exists():
        raise CheckerConfigError(f"Configuration file not found: {p}")

    try:
        with open(p, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        raise CheckerConfigError(f"Failed to parse {p}: {exc}") from exc

    if not isinstance(data, dict):
        raise CheckerConfigError(f"Expected a YAML mapping in {p}, got {type(data).__name__}")

    cfg = parse_config(data)
    logger.info("Loaded checker config from %s", p)
    if apply:
        set_config(**cfg.to_dict())
    return cfg


def save_config(cfg: CheckerConfig, path: str | Path = DEFAULT_CONFIG_FILE) -> None:
    """Write *cfg* under a ``checkers`` key."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as fh:
        yaml.dump({"checkers": cfg.to_dict()}, fh, default_flow_style=False, sort_keys=False)


# ---------------------------------------------------------------------------
# Process-wide instance (thread-safe)
# ---------------------------------------------------------------------------

_config_lock = threading.Lock()
_global_config: CheckerConfig | None = None


def get_config() -> CheckerConfig:
    """Return the process-wide config, creating defaults on first use."""
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        if _global_config is None:
            _global_config = CheckerConfig()
        return _global_config


def set_config(
    repr_limit: int | None = None,
    unhashable_fallback: bool | None = None,
) -> CheckerConfig:
    """Update the process-wide config; ``None`` leaves a setting unchanged.

    The new values are validated before they replace the current ones.

    Example:
        set_config(repr_limit=80)
    """
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        current = _global_config or CheckerConfig()
        updates = {
            "repr_limit": repr_limit,
            "unhashable_fallback": unhashable_fallback,
        }
        candidate = dataclasses.replace(
            current, **{k: v for k, v in updates.items() if v is not None}
        )
        candidate.validate()
        _global_config = candidate
        return _global_config


def reset_config() -> None:
    """Restore the default config."""
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        _global_config = CheckerConfig()
