"""Custom exceptions for parsedtext."""

from typing import Any


class ParsedTextError(Exception):
    """Base exception for all parsedtext errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize parsedtext error.

        Args:
            message: Error message
            details: Additional error details

        """
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(ParsedTextError):
    """Raised when configuration is invalid or missing."""


class ValidationError(ParsedTextError):
    """Raised when input validation fails."""

    def __init__(self, field: str, value: Any, message: str) -> None:
        super().__init__(message, {"field": field, "value": value})
        self.field = field
        self.value = value


class InvalidRangeError(ValidationError):
    """Raised when a highlight range is malformed or falls outside the text."""

    def __init__(self, value: Any, reason: str) -> None:
        super().__init__("ranges", value, f"Invalid highlight range {value!r}: {reason}")
        self.reason = reason


class OverlappingRangeError(InvalidRangeError):
    """Raised when two highlight ranges overlap."""

    def __init__(self, first: tuple[int, int], second: tuple[int, int]) -> None:
        super().__init__(second, f"overlaps range {first!r}")
        self.first = first
        self.second = second


class RegexValidationError(ValidationError):
    """Raised when regex pattern validation fails."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__("pattern", pattern, f"Invalid regex pattern: {reason}")
        self.pattern = pattern
        self.reason = reason
