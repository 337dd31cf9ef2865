from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports without
   being installed.
2. Provides the puzzle example inputs stored under tests/data.
"""

import os
import sys
from pathlib import Path
from typing import Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

DATA_DIR = Path(__file__).resolve().parent / "data"


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def data_dir() -> Path:
    """Directory containing the example inputs."""
    return DATA_DIR


@pytest.fixture
def example() -> Callable[..., str]:
    """
    Return a loader for example inputs.

    `example(7)` reads tests/data/day07_example.txt and
    `example(9, "2")` reads tests/data/day09_example2.txt.
    """
    def _load(day: int, suffix: str = "") -> str:
        path = DATA_DIR / f"day{day:02d}_example{suffix}.txt"
        return path.read_text(encoding="utf-8")

    return _load


@pytest.fixture(autouse=True)
def clean_logging():
    """Detach the package's logging handlers around every test."""
    from aoc2022.infra.logging import reset_logging

    reset_logging()
    yield
    reset_logging()
