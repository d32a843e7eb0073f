"""
Operating mode: record or compare.

To record golden masters:
    golden=record pytest tests/test_report.py

To verify them:
    pytest tests/test_report.py

The flag is read on every check, never cached, so toggling it between two
assertions changes the behavior of the second one.
"""

import os
from collections.abc import Mapping
from enum import Enum

from golden_match.domain.constants import CI_INDICATORS, GOLDEN_ENV, RECORD_VALUE
from golden_match.domain.errors import ErrorCodes, GoldenConfigurationError


class Mode(str, Enum):
    """Matcher operating mode."""
    RECORD = "record"
    COMPARE = "compare"

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        env_var: str = GOLDEN_ENV,
    ) -> "Mode":
        """RECORD iff the flag equals "record" exactly, else COMPARE."""
        if environ is None:
            environ = os.environ
        return cls.RECORD if environ.get(env_var) == RECORD_VALUE else cls.COMPARE


def current_mode(env_var: str = GOLDEN_ENV) -> Mode:
    """Read the mode from the process environment."""
    return Mode.from_env(os.environ, env_var)


def detect_ci(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the first CI indicator variable that is set, or None."""
    if environ is None:
        environ = os.environ
    for indicator in CI_INDICATORS:
        if environ.get(indicator):
            return indicator
    return None


def check_record_allowed(
    block_in_ci: bool,
    environ: Mapping[str, str] | None = None,
) -> None:
    """
    Block recording in CI environments when requested.

    Golden masters must be recorded locally and reviewed before committing;
    recording in CI silently turns every mismatch into a pass.

    Raises:
        GoldenConfigurationError: block_in_ci is set and a CI indicator is present
    """
    if not block_in_ci:
        return

    indicator = detect_ci(environ)
    if indicator is not None:
        raise GoldenConfigurationError(
            ErrorCodes.RECORD_IN_CI,
            "golden files cannot be recorded in a CI environment",
            indicator=indicator,
        )
