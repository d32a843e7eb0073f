"""Domain layer: errors and constants."""

from .errors import ErrorCodes, GoldenConfigurationError, GoldenDiffError, GoldenError

__all__ = [
    "ErrorCodes",
    "GoldenError",
    "GoldenConfigurationError",
    "GoldenDiffError",
]
