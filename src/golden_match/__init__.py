"""
Golden master matching for tests.

Compares a value against text recorded in a golden file and reports the
`diff` on mismatch.

Philosophy:
- Golden files are plain text, diff-friendly (pretty JSON by default)
- Recording is explicit (golden=record), comparing is the default
- A missing golden file is an error, never "no difference"
"""

from .api import assert_golden, match_golden, match_golden_json
from .core.config import GoldenSettings, load_settings
from .core.formatters import (
    CallableFormatter,
    DefaultFormatter,
    ExcludingJsonFormatter,
    Formatter,
    MethodFormatter,
)
from .core.matcher import GoldenMatcher
from .core.mode import Mode
from .core.paths import resolve_golden_path
from .domain.errors import ErrorCodes, GoldenConfigurationError, GoldenDiffError, GoldenError

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "match_golden",
    "match_golden_json",
    "assert_golden",
    # Matcher
    "GoldenMatcher",
    "Mode",
    "resolve_golden_path",
    # Formatters
    "Formatter",
    "DefaultFormatter",
    "MethodFormatter",
    "CallableFormatter",
    "ExcludingJsonFormatter",
    # Settings
    "GoldenSettings",
    "load_settings",
    # Errors
    "ErrorCodes",
    "GoldenError",
    "GoldenConfigurationError",
    "GoldenDiffError",
]
