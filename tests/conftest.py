"""Pytest configuration and shared fixtures."""

import csv
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

import numpy as np
import pytest

from synthdata.config.loader import ConfigLoader, DatasetConfig

JAN_FEB_2024 = "2024-01-01 00:00:00|2024-03-01 00:00:00"


@pytest.fixture
def jan_feb_range() -> str:
    """Two-month date range string, Jan 1 to Mar 1 2024."""
    return JAN_FEB_2024


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source for exact-value assertions."""
    return np.random.default_rng(1234)


@pytest.fixture
def make_dataset() -> Callable[..., DatasetConfig]:
    """Factory building DatasetConfig objects from config-file style entries."""
    loader = ConfigLoader.create()

    def _make(**entry: Any) -> DatasetConfig:
        raw: dict[str, Any] = {
            "name": "test",
            "dataset_type": "futures",
            "date_range": JAN_FEB_2024,
        }
        raw.update(entry)
        return loader.build_dataset(raw)

    return _make


@pytest.fixture
def read_csv() -> Callable[[Path], list[dict[str, str]]]:
    """Read a generated CSV into a list of row dictionaries."""

    def _read(path: Path) -> list[dict[str, str]]:
        with open(path, newline="") as f:
            return list(csv.DictReader(f))

    return _read


@pytest.fixture
def bar_time() -> datetime:
    """Timestamp used for single-bar tests."""
    return datetime(2024, 1, 1, 9, 30, 0)
