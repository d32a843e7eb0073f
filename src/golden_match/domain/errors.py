"""
Error definitions for golden matching.

Rules:
- Caller misuse (conflicting formatters, non-mapping input to the exclusion
  formatter, missing golden file) → GoldenConfigurationError, raised at once
- Filesystem and process failures → OSError, propagated untouched
- A value that differs from its golden file is NOT an exception:
  it is reported through the matcher verdict and failure messages
"""

from typing import Any


class GoldenError(Exception):
    """
    Base error for golden matching.

    Carries a stable error code plus keyword context, so failures can be
    logged or serialized without parsing the message.

    Usage:
        raise GoldenConfigurationError(ErrorCodes.GOLDEN_NOT_FOUND, path="gold/one.txt")
    """

    def __init__(self, code: str, message: str | None = None, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        head = f"[{self.code}] {self.message}" if self.message else f"[{self.code}]"
        return f"{head} ({ctx_str})" if ctx_str else head

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logs/JSON."""
        data: dict[str, Any] = {"code": self.code}
        if self.message:
            data["message"] = self.message
        data.update(self.context)
        return data


class GoldenConfigurationError(GoldenError, ValueError):
    """
    Raised when the matcher is used incorrectly.

    Always surfaced immediately and never downgraded to a failed match:
    - formatter and format_fn given together
    - unsupported formatter specification
    - non-mapping value for the exclusion JSON formatter
    - golden file missing at comparison time
    - recording attempted in CI while blocked by settings
    - invalid settings file
    """


class GoldenDiffError(GoldenError, OSError):
    """Raised when the external diff tool reports trouble (exit status > 1)."""


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """Error code constants."""

    # === Formatter ===
    FORMATTER_CONFLICT = "FORMATTER_CONFLICT"
    UNSUPPORTED_FORMATTER = "UNSUPPORTED_FORMATTER"
    FORMATTER_NOT_FOUND = "FORMATTER_NOT_FOUND"
    NOT_A_MAPPING = "NOT_A_MAPPING"

    # === Golden file ===
    GOLDEN_NOT_FOUND = "GOLDEN_NOT_FOUND"
    RECORD_IN_CI = "RECORD_IN_CI"

    # === Settings ===
    INVALID_SETTINGS = "INVALID_SETTINGS"

    # === Diff ===
    DIFF_FAILED = "DIFF_FAILED"
