"""
Diff reporters: compare the actual file with the golden file.

The diff output is the failure narrative; there is no custom rendering.

- ExternalDiffer: runs `diff <actual> <golden>` (exit 0 = identical)
- UnifiedDiffer: in-process difflib fallback for hosts without `diff`
"""

import difflib
import logging
import os
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from golden_match.core.config import GoldenSettings
from golden_match.core.store import GoldenStore
from golden_match.domain.constants import DEFAULT_DIFF_COMMAND, DEFAULT_ENCODING, DIFFER_DIFFLIB
from golden_match.domain.errors import ErrorCodes, GoldenDiffError

logger = logging.getLogger(__name__)


@dataclass
class DiffResult:
    """Result of comparing two files."""
    equal: bool
    report: str = ""
    returncode: int = 0

    def __str__(self) -> str:
        if self.equal:
            return "OK"
        return self.report


class Differ(Protocol):
    def diff(
        self,
        actual_path: str | os.PathLike[str],
        golden_path: str | os.PathLike[str],
    ) -> DiffResult:
        ...


class ExternalDiffer:
    """
    Line diff through an external command.

    Exit status 0 → equal, 1 → different (stdout is the report),
    anything else → the tool itself failed.
    """

    def __init__(
        self,
        command: Sequence[str] = DEFAULT_DIFF_COMMAND,
        encoding: str = DEFAULT_ENCODING,
    ):
        self.command = list(command)
        self.encoding = encoding

    def diff(
        self,
        actual_path: str | os.PathLike[str],
        golden_path: str | os.PathLike[str],
    ) -> DiffResult:
        """
        Raises:
            FileNotFoundError: The diff executable does not exist
            GoldenDiffError: The diff tool exited with status > 1
        """
        args = [*self.command, os.fspath(actual_path), os.fspath(golden_path)]
        logger.debug(f"Running {args}")

        # Output quotes lines of both files, so decode it like the files.
        proc = subprocess.run(
            args,
            capture_output=True,
            encoding=self.encoding,
            errors="replace",
            check=False,
        )

        if proc.returncode == 0:
            return DiffResult(equal=True)
        if proc.returncode == 1:
            return DiffResult(equal=False, report=proc.stdout, returncode=1)

        raise GoldenDiffError(
            ErrorCodes.DIFF_FAILED,
            proc.stderr.strip() or "diff tool failed",
            command=args,
            returncode=proc.returncode,
        )


class UnifiedDiffer:
    """Unified diff computed with difflib."""

    def __init__(self, encoding: str = DEFAULT_ENCODING, context_lines: int = 3):
        self.encoding = encoding
        self.context_lines = context_lines

    def diff(
        self,
        actual_path: str | os.PathLike[str],
        golden_path: str | os.PathLike[str],
    ) -> DiffResult:
        actual = GoldenStore(actual_path, self.encoding).read()
        golden = GoldenStore(golden_path, self.encoding).read()

        if actual == golden:
            return DiffResult(equal=True)

        lines = difflib.unified_diff(
            actual.splitlines(keepends=True),
            golden.splitlines(keepends=True),
            fromfile=os.fspath(actual_path),
            tofile=os.fspath(golden_path),
            n=self.context_lines,
        )
        report = "".join(line if line.endswith("\n") else line + "\n" for line in lines)
        return DiffResult(equal=False, report=report, returncode=1)


def build_differ(settings: GoldenSettings | None = None) -> Differ:
    """Differ selected by settings (external diff by default)."""
    settings = settings or GoldenSettings()
    if settings.differ == DIFFER_DIFFLIB:
        return UnifiedDiffer(encoding=settings.encoding)
    return ExternalDiffer(settings.diff_command, encoding=settings.encoding)
