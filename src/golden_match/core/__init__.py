"""
Core layer: golden matching engine.

- paths: golden identifier → file path
- formatters / normalize: value → golden text
- store / diff: golden files, temp files, diff reports
- mode / config: record vs compare, settings
- matcher: record/compare protocol
"""

from .config import GoldenSettings, load_settings
from .diff import DiffResult, ExternalDiffer, UnifiedDiffer, build_differ
from .formatters import (
    CallableFormatter,
    DefaultFormatter,
    ExcludingJsonFormatter,
    Formatter,
    MethodFormatter,
    build_formatter,
    serialize_json,
)
from .matcher import GoldenMatcher
from .mode import Mode, check_record_allowed, current_mode
from .normalize import canonical_key, exclude_keys
from .paths import resolve_golden_path
from .store import GoldenStore

__all__ = [
    # paths
    "resolve_golden_path",
    # formatters
    "Formatter",
    "DefaultFormatter",
    "MethodFormatter",
    "CallableFormatter",
    "ExcludingJsonFormatter",
    "build_formatter",
    "serialize_json",
    "canonical_key",
    "exclude_keys",
    # store / diff
    "GoldenStore",
    "DiffResult",
    "ExternalDiffer",
    "UnifiedDiffer",
    "build_differ",
    # mode / config
    "Mode",
    "current_mode",
    "check_record_allowed",
    "GoldenSettings",
    "load_settings",
    # matcher
    "GoldenMatcher",
]
