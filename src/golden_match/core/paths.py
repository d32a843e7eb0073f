"""
Golden file name resolution.

By convention, names that start with `/`, `./` or `../` are fully specified
and used as-is. Every other name is relative to the directory of the test
file that asked for the match (`caller_path`). Keeping masters in `gold/`
next to the tests is the usual layout.

Note: `.gold/one.txt` is relative. Only `.` or `..` immediately followed
by `/` marks an explicit path.
"""

import os
import re

ABSOLUTE_LIKE_PATTERN = re.compile(r"^\.{0,2}/")


def is_absolute_like(identifier: str | os.PathLike[str]) -> bool:
    """True if the identifier is used verbatim."""
    return ABSOLUTE_LIKE_PATTERN.match(os.fspath(identifier)) is not None


def resolve_golden_path(
    identifier: str | os.PathLike[str],
    caller_path: str | os.PathLike[str],
) -> str:
    """
    Resolve a golden identifier to a concrete path.

    Pure string operation: no I/O, no errors. Validity is checked only when
    the file is actually read or written.

    Args:
        identifier: Golden file name (explicit or relative)
        caller_path: Path of the invoking test file

    Returns:
        Path string

    Examples:
        resolve_golden_path("gold/x.txt", "/a/b/test_x.py") → "/a/b/gold/x.txt"
        resolve_golden_path("./x.txt", "/a/b/test_x.py") → "./x.txt"
    """
    name = os.fspath(identifier)
    if is_absolute_like(name):
        return name
    return os.path.join(os.path.dirname(os.fspath(caller_path)), name)
