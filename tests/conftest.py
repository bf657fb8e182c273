"""
Shared pytest fixtures and configuration for fmtref tests.

This module provides:
- Settings cache isolation (no test sees another test's FMTREF_* values)
- A quiet structlog configuration restored before each test
- An in-memory output stream for printf tests
"""

import io
import os
import sys
from pathlib import Path
from typing import Generator

import pytest

# Ensure fmtref package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fmtref.core.config import clear_settings_cache
from fmtref.core.logging import clear_context, configure_logging
from fmtref.template import parse_template


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)

        if test_path.parts[0] == "cli":
            item.add_marker(pytest.mark.cli)
        else:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """
    Run every test with a clean settings cache and no stray FMTREF_* env.

    The working directory is moved to an empty tmp dir so a developer's
    ``.env`` file cannot leak in.
    """
    for key in list(os.environ):
        if key.startswith("FMTREF_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("FMTREF_LINE_SEPARATOR", "\n")
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def quiet_logging() -> Generator[None, None, None]:
    """Restore the default WARNING-level console logging around each test."""
    configure_logging(level="WARNING", json_format=False)
    clear_context()
    yield
    clear_context()


@pytest.fixture(autouse=True)
def clear_template_cache() -> Generator[None, None, None]:
    parse_template.cache_clear()
    yield


# =============================================================================
# Output Fixtures
# =============================================================================


@pytest.fixture
def stream() -> io.StringIO:
    """In-memory text stream to pass as ``file=``."""
    return io.StringIO()
