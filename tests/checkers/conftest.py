"""Shared fixtures for checkers tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import yaml

from checkers.config import reset_config


@pytest.fixture(autouse=True)
def _default_config():
    """Every test starts and ends with the default process-wide config."""
    reset_config()
    yield
    reset_config()


@pytest.fixture()
def write_yaml(tmp_path: Path):
    """Return a helper writing *data* to ``<tmp>/<name>`` as YAML."""

    def _write(data, name: str = "checkers.yaml") -> Path:
        p = tmp_path / name
        with open(p, "w") as fh:
            yaml.dump(data, fh)
        return p

    return _write


@pytest.fixture()
def noon() -> datetime:
    return datetime(2024, 3, 1, 12, 0, 0)


@pytest.fixture()
def noon_utc(noon: datetime) -> datetime:
    return noon.replace(tzinfo=timezone.utc)


@pytest.fixture()
def hour() -> timedelta:
    return timedelta(hours=1)
