"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import logging
import sys
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog

# Insert local src directory at the beginning of sys.path
# This ensures that the local covgap package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Drop handlers bound to streams captured by a previous test."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def fixture_path() -> Callable[[str], Path]:
    """Resolve a file under tests/fixtures."""

    def _resolve(name: str) -> Path:
        return FIXTURES_DIR / name

    return _resolve


@pytest.fixture
def load_fixture(fixture_path: Callable[[str], Path]) -> Callable[[str], str]:
    """Read a JSON fixture as text."""

    def _load(name: str) -> str:
        return fixture_path(name).read_text(encoding="utf-8")

    return _load
