"""
Golden matcher: test a value against the text saved in a golden file.

If the saved value (the golden master) does not match the actual value, the
diff is reported and the match fails.

States per check: Idle → Recording | Comparing → Pass | Fail.
No state survives between checks apart from the files on disk.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

from golden_match.core.config import GoldenSettings
from golden_match.core.diff import Differ, DiffResult, build_differ
from golden_match.core.formatters import DefaultFormatter, Formatter
from golden_match.core.mode import Mode, check_record_allowed, current_mode
from golden_match.core.paths import resolve_golden_path
from golden_match.core.store import GoldenStore
from golden_match.domain.errors import ErrorCodes, GoldenConfigurationError

logger = logging.getLogger(__name__)

_UNSET = object()


class GoldenMatcher:
    """
    Matcher for one golden file.

    Usage:
        matcher = GoldenMatcher("gold/four.txt", __file__, DefaultFormatter())
        assert matcher.matches(2 + 2), matcher.failure_message()

    Args:
        golden_filename: Golden identifier (see resolve_golden_path)
        caller_path: Path of the invoking test file
        formatter: Formatter producing the golden text
        store: GoldenStore override (default: built from the resolved path)
        differ: Differ override (default: from settings)
        settings: GoldenSettings (default: built-in defaults)
        mode_provider: Called on every `matches()` to get the mode
            (default: the environment flag named by settings.env_var)
    """

    def __init__(
        self,
        golden_filename: str | os.PathLike[str],
        caller_path: str | os.PathLike[str],
        formatter: Formatter | None = None,
        *,
        store: GoldenStore | None = None,
        differ: Differ | None = None,
        settings: GoldenSettings | None = None,
        mode_provider: Callable[[], Mode] | None = None,
    ):
        self.settings = settings or GoldenSettings()
        self.filename = resolve_golden_path(golden_filename, caller_path)
        self.formatter = formatter or DefaultFormatter()
        self.store = store or GoldenStore(
            self.filename,
            encoding=self.settings.encoding,
            temp_dir=self.settings.temp_dir,
        )
        self.differ = differ or build_differ(self.settings)
        self.mode_provider = mode_provider or (lambda: current_mode(self.settings.env_var))

        self.value: Any = _UNSET
        self.last_result: DiffResult | None = None

    # =========================================================================
    # Matching
    # =========================================================================

    def matches(self, value: Any) -> bool:
        """Check `value` in the mode currently selected by the environment."""
        return self.check(value, self.mode_provider())

    def check(self, value: Any, mode: Mode) -> bool:
        """
        Record or compare `value`.

        Returns:
            True on record, or when the formatted value equals the golden file

        Raises:
            GoldenConfigurationError: Unsupported value for the formatter,
                golden file missing in compare mode, recording blocked in CI
            OSError: Filesystem or diff tool failure
        """
        self.value = value
        self.last_result = None
        self.formatter.validate(value)

        if Mode(mode) is Mode.RECORD:
            self._record_golden(value)
            return True
        return self._compare_to_golden(value)

    def assert_matches(self, value: Any) -> None:
        """
        Raises:
            AssertionError: With failure_message() if the value does not match
        """
        if not self.matches(value):
            raise AssertionError(self.failure_message())

    def _record_golden(self, value: Any) -> None:
        check_record_allowed(self.settings.block_record_in_ci)
        self.store.write(self.formatter.format(value))
        logger.info(f"Recorded golden file {self.filename}")

    def _compare_to_golden(self, value: Any) -> bool:
        self._check_golden_exists()

        with self.store.temporary(self.formatter.format(value)) as actual_path:
            result = self.differ.diff(actual_path, self.store.path)

        self.last_result = result
        logger.debug(
            f"Golden file {self.filename}: {'match' if result.equal else 'mismatch'}"
        )
        return result.equal

    def _check_golden_exists(self) -> None:
        if not self.store.exists():
            raise GoldenConfigurationError(
                ErrorCodes.GOLDEN_NOT_FOUND,
                f"golden file '{self.filename}' not found",
                path=self.filename,
            )

    # =========================================================================
    # Messages
    # =========================================================================

    @property
    def report(self) -> str:
        """Diff output of the last failing comparison ("" otherwise)."""
        if self.last_result is None or self.last_result.equal:
            return ""
        return self.last_result.report

    def failure_message(self) -> str:
        message = f"expected {self._describe_value()} does not match golden file '{self.filename}'"
        if self.report:
            message += f"\n{self.report}"
        return message

    def failure_message_when_negated(self) -> str:
        return f"expected {self._describe_value()} matches golden file '{self.filename}'"

    def _describe_value(self) -> str:
        return "<no value>" if self.value is _UNSET else repr(self.value)

    @property
    def path(self) -> Path:
        return self.store.path

    def __repr__(self) -> str:
        return f"GoldenMatcher({self.filename!r}, formatter={self.formatter!r})"
