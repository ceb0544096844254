"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`wartycoon` package without requiring an editable install in CI.
"""

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings so environment tweaks in one test do not leak."""

    from wartycoon.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
