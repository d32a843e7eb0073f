"""
Pytest fixtures for golden-match tests.

- unit tests run with an explicit mode or a cleared environment
- tests/golden compares against committed files in tests/golden/gold/
"""

import shutil
from collections.abc import Generator
from pathlib import Path

import pytest

from golden_match.core.config import GoldenSettings


@pytest.fixture
def require_diff() -> None:
    """Skip when no external diff executable is on PATH."""
    if shutil.which("diff") is None:
        pytest.skip("external diff executable not available")


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def gold_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """
    Scratch golden directory.

    Layout:
    - tmp_path/test_sample.py  (stands in for the calling test file)
    - tmp_path/gold/
    """
    (tmp_path / "test_sample.py").write_text("", encoding="utf-8")
    gold = tmp_path / "gold"
    gold.mkdir()
    yield gold


@pytest.fixture
def caller_path(gold_dir: Path) -> Path:
    """Fake caller next to gold_dir."""
    return gold_dir.parent / "test_sample.py"


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Isolated directory for comparison temp files."""
    path = tmp_path / "tmp"
    path.mkdir()
    return path


@pytest.fixture
def difflib_settings(temp_dir: Path) -> GoldenSettings:
    """Settings using the in-process differ (no external diff needed)."""
    return GoldenSettings(differ="difflib", temp_dir=str(temp_dir))


@pytest.fixture
def external_settings(temp_dir: Path) -> GoldenSettings:
    """Settings using the external diff command."""
    return GoldenSettings(temp_dir=str(temp_dir))


# =============================================================================
# Sample Data
# =============================================================================

@pytest.fixture
def sample_structs() -> dict:
    """Nested structure used across formatter and matcher tests."""
    return {"fox": ["quick", "brown"], "dog": "lazy"}


@pytest.fixture
def volatile_record() -> dict:
    """Record with a volatile key at several nesting levels."""
    return {"a": 1, "b": {"a": 2, "c": [{"a": 3}, {"d": 4}]}}
