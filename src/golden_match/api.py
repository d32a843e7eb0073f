"""
Entry points for tests.

The typical use:

    from golden_match import assert_golden, match_golden

    def test_four():
        assert_golden(2 + 2, "gold/four.txt")

    def test_report():
        matcher = match_golden("gold/report.txt", formatter="to_text")
        assert matcher.matches(build_report()), matcher.failure_message()

To record golden masters, run `golden=record pytest tests/test_x.py`
(or `pytest --golden-record`); to verify them, run pytest normally.

Relative golden names are resolved against the directory of the calling
test file, taken from the caller's frame unless `caller_path` is given.
Passing `caller_path` explicitly is handy when building new helpers on top
of `match_golden`.
"""

import os
import sys
from collections.abc import Callable, Iterable
from typing import Any

from golden_match.core.config import GoldenSettings, load_settings
from golden_match.core.formatters import ExcludingJsonFormatter, FormatterSpec, build_formatter
from golden_match.core.matcher import GoldenMatcher
from golden_match.domain.errors import ErrorCodes, GoldenConfigurationError

PathArg = str | os.PathLike[str]


def _caller_path(stacklevel: int = 2) -> str:
    """Source file of the frame `stacklevel` levels above this function."""
    return sys._getframe(stacklevel).f_code.co_filename


def match_golden(
    golden_filename: PathArg,
    caller_path: PathArg | None = None,
    formatter: FormatterSpec = None,
    format_fn: Callable[[Any], Any] | None = None,
    *,
    settings: GoldenSettings | None = None,
) -> GoldenMatcher:
    """
    Build a matcher for a golden file.

    Four ways to specify the formatter:
    (1) omit it: pretty JSON
        match_golden("gold/my_file.json")
    (2) a method name of the value
        match_golden("gold/my_file.txt", formatter="to_text")
    (3) a function
        match_golden("gold/my_file.fmt", formatter=my_formatter)
    (4) a function passed as format_fn
        match_golden("gold/my_file.fmt", format_fn=lambda v: my_format(v, params))

    Raises:
        GoldenConfigurationError: formatter and format_fn both given
    """
    fmt = build_formatter(formatter, format_fn)
    if caller_path is None:
        caller_path = _caller_path()
    return GoldenMatcher(
        golden_filename,
        caller_path,
        fmt,
        settings=settings or load_settings(),
    )


def match_golden_json(
    golden_filename: PathArg,
    exclude: Iterable[Any] | None = None,
    caller_path: PathArg | None = None,
    *,
    settings: GoldenSettings | None = None,
) -> GoldenMatcher:
    """
    Build a matcher storing a mapping as JSON without volatile keys.

    Usage:
        matcher = match_golden_json("gold/job.json", exclude={"created_at", "id"})
    """
    if caller_path is None:
        caller_path = _caller_path()
    return GoldenMatcher(
        golden_filename,
        caller_path,
        ExcludingJsonFormatter(exclude),
        settings=settings or load_settings(),
    )


def assert_golden(
    value: Any,
    golden_filename: PathArg,
    caller_path: PathArg | None = None,
    formatter: FormatterSpec = None,
    format_fn: Callable[[Any], Any] | None = None,
    *,
    exclude: Iterable[Any] | None = None,
    settings: GoldenSettings | None = None,
) -> GoldenMatcher:
    """
    Assert that `value` matches its golden file (or record it).

    `exclude` selects the exclusion JSON formatter and cannot be combined
    with `formatter` or `format_fn`.

    Returns:
        The matcher, for further inspection

    Raises:
        AssertionError: Value does not match (message includes the diff)
        GoldenConfigurationError: Misuse, or golden file missing
    """
    if caller_path is None:
        caller_path = _caller_path()

    if exclude is not None:
        if formatter is not None or format_fn is not None:
            raise GoldenConfigurationError(
                ErrorCodes.FORMATTER_CONFLICT,
                "exclude cannot be combined with formatter or format_fn",
            )
        matcher = match_golden_json(golden_filename, exclude, caller_path, settings=settings)
    else:
        matcher = match_golden(
            golden_filename, caller_path, formatter, format_fn, settings=settings
        )

    matcher.assert_matches(value)
    return matcher
