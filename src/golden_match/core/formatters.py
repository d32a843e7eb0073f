"""
Formatters: turn a value into the text stored in (and compared with) a
golden file.

A good formatter:
- keeps all relevant information (there is no value in the test otherwise)
- handles every expected input gracefully
- produces sparse, line-oriented output so the diff is easy to read

Variants:
- DefaultFormatter: pretty JSON, compact JSON fallback
- MethodFormatter: call a zero-argument method of the value by name
- CallableFormatter: call a user function with the value
- ExcludingJsonFormatter: drop volatile keys, then pretty JSON
"""

import json
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from golden_match.core.normalize import normalize_exclusions, to_plain
from golden_match.domain.errors import ErrorCodes, GoldenConfigurationError


def serialize_json(value: Any) -> str:
    """
    Serialize a value as JSON for golden files.

    Best-effort pretty output (insertion order, 2-space indent). Values JSON
    cannot represent fall back to a compact form with `repr()` leaves, and
    anything that still fails (circular references) to `repr(value)`.
    Never raises.
    """
    try:
        return json.dumps(value, indent=2, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError):
        pass

    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=repr)
    except (TypeError, ValueError, RecursionError):
        return repr(value)


def _as_text(result: Any) -> str:
    return result if isinstance(result, str) else str(result)


# =============================================================================
# Formatter Interface
# =============================================================================

class Formatter(ABC):
    """Strategy converting a value into golden file text."""

    def validate(self, value: Any) -> None:
        """
        Reject unsupported values before any formatting or I/O.

        Raises:
            GoldenConfigurationError: If the value cannot be formatted
        """

    @abstractmethod
    def format(self, value: Any) -> str:
        ...


class DefaultFormatter(Formatter):
    """Pretty JSON with compact fallback."""

    def format(self, value: Any) -> str:
        return serialize_json(value)

    def __repr__(self) -> str:
        return "DefaultFormatter()"


class MethodFormatter(Formatter):
    """
    Invoke a named zero-argument method on the value.

    Usage:
        match_golden("gold/report.txt", formatter="to_text")
    """

    def __init__(self, name: str):
        self.name = name

    def validate(self, value: Any) -> None:
        if not callable(getattr(value, self.name, None)):
            raise GoldenConfigurationError(
                ErrorCodes.FORMATTER_NOT_FOUND,
                f"value of type {type(value).__name__} has no method {self.name!r}",
                formatter=self.name,
            )

    def format(self, value: Any) -> str:
        return _as_text(getattr(value, self.name)())

    def __repr__(self) -> str:
        return f"MethodFormatter({self.name!r})"


class CallableFormatter(Formatter):
    """Call a user-supplied single-argument function."""

    def __init__(self, fn: Callable[[Any], Any]):
        self.fn = fn

    def format(self, value: Any) -> str:
        return _as_text(self.fn(value))

    def __repr__(self) -> str:
        return f"CallableFormatter({self.fn!r})"


class ExcludingJsonFormatter(Formatter):
    """
    JSON formatter that drops excluded keys at every nesting level.

    Only mappings are accepted at the top level.

    Usage:
        formatter = ExcludingJsonFormatter({"created_at", "id"})
        formatter.format({"id": 7, "items": [{"id": 8, "name": "a"}]})
        # → {"items": [{"name": "a"}]} (pretty printed)
    """

    def __init__(self, exclude: Iterable[Any] | None = None):
        self.exclude = normalize_exclusions(exclude)

    def validate(self, value: Any) -> None:
        if not isinstance(value, Mapping):
            raise GoldenConfigurationError(
                ErrorCodes.NOT_A_MAPPING,
                "exclusion JSON formatter expects a mapping",
                value_type=type(value).__name__,
            )

    def format(self, value: Any) -> str:
        self.validate(value)
        return serialize_json(to_plain(value, self.exclude))

    def __repr__(self) -> str:
        return f"ExcludingJsonFormatter({sorted(self.exclude)!r})"


# =============================================================================
# Factory
# =============================================================================

FormatterSpec = Formatter | str | Callable[[Any], Any] | None


def build_formatter(
    formatter: FormatterSpec = None,
    format_fn: Callable[[Any], Any] | None = None,
) -> Formatter:
    """
    Resolve a formatter specification.

    Four ways to specify a formatter:
    (1) omit it: pretty JSON
    (2) a method name: `formatter="to_text"`
    (3) a function: `formatter=my_format` or `format_fn=my_format`
    (4) a Formatter instance

    Raises:
        GoldenConfigurationError: Both formatter and format_fn given,
            or an unsupported specification
    """
    if formatter is not None and format_fn is not None:
        raise GoldenConfigurationError(
            ErrorCodes.FORMATTER_CONFLICT,
            "formatter and format_fn cannot be specified simultaneously",
        )

    spec = formatter if formatter is not None else format_fn

    if spec is None:
        return DefaultFormatter()
    if isinstance(spec, Formatter):
        return spec
    if isinstance(spec, str):
        return MethodFormatter(spec)
    if callable(spec):
        return CallableFormatter(spec)

    raise GoldenConfigurationError(
        ErrorCodes.UNSUPPORTED_FORMATTER,
        "formatter must be a method name, a callable or a Formatter",
        formatter_type=type(spec).__name__,
    )
