"""
pytest integration.

Registered through the `pytest11` entry point. Provides:
- --golden-record: record golden files for this session (same as golden=record)
- golden: helper bound to the requesting test file
- golden_mode / golden_settings fixtures

Usage:
    def test_report(golden):
        golden.assert_match(build_report(), "gold/report.json")
"""

import os
from collections.abc import Callable, Generator, Iterable
from pathlib import Path
from typing import Any

import pytest

from golden_match.api import assert_golden, match_golden, match_golden_json
from golden_match.core.config import GoldenSettings, load_settings
from golden_match.core.formatters import FormatterSpec
from golden_match.core.matcher import GoldenMatcher
from golden_match.core.mode import Mode, current_mode
from golden_match.domain.constants import RECORD_VALUE

_RECORD_ENV_KEY = pytest.StashKey[tuple[str, str | None]]()


class GoldenHelper:
    """Golden entry points with the caller path fixed to one test file."""

    def __init__(self, caller_path: str | os.PathLike[str], settings: GoldenSettings):
        self.caller_path = Path(caller_path)
        self.settings = settings

    def match(
        self,
        golden_filename: str,
        formatter: FormatterSpec = None,
        format_fn: Callable[[Any], Any] | None = None,
    ) -> GoldenMatcher:
        return match_golden(
            golden_filename,
            self.caller_path,
            formatter,
            format_fn,
            settings=self.settings,
        )

    def match_json(
        self,
        golden_filename: str,
        exclude: Iterable[Any] | None = None,
    ) -> GoldenMatcher:
        return match_golden_json(
            golden_filename, exclude, self.caller_path, settings=self.settings
        )

    def assert_match(
        self,
        value: Any,
        golden_filename: str,
        formatter: FormatterSpec = None,
        format_fn: Callable[[Any], Any] | None = None,
        *,
        exclude: Iterable[Any] | None = None,
    ) -> GoldenMatcher:
        return assert_golden(
            value,
            golden_filename,
            self.caller_path,
            formatter,
            format_fn,
            exclude=exclude,
            settings=self.settings,
        )


# ---------------------------------------------------------------------------
# Hooks
# ---------------------------------------------------------------------------


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("golden", "golden master matching")
    group.addoption(
        "--golden-record",
        action="store_true",
        default=False,
        help="Record golden files instead of comparing (same as golden=record)",
    )


def pytest_configure(config: pytest.Config) -> None:
    if not config.getoption("--golden-record", default=False):
        return
    env_var = load_settings().env_var
    config.stash[_RECORD_ENV_KEY] = (env_var, os.environ.get(env_var))
    os.environ[env_var] = RECORD_VALUE


def pytest_unconfigure(config: pytest.Config) -> None:
    saved = config.stash.get(_RECORD_ENV_KEY, None)
    if saved is None:
        return
    env_var, previous = saved
    if previous is None:
        os.environ.pop(env_var, None)
    else:
        os.environ[env_var] = previous


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def golden_settings() -> GoldenSettings:
    """Settings from GOLDEN_MATCH_CONFIG (or defaults)."""
    return load_settings()


@pytest.fixture
def golden_mode(golden_settings: GoldenSettings) -> Mode:
    """Mode selected when the fixture was requested."""
    return current_mode(golden_settings.env_var)


@pytest.fixture
def golden(
    request: pytest.FixtureRequest,
    golden_settings: GoldenSettings,
) -> Generator[GoldenHelper, None, None]:
    """Golden helper resolving relative names next to the test file."""
    yield GoldenHelper(request.path, golden_settings)
