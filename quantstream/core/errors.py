"""Error types raised by the indicator library.

Indicators validate their configuration once, at construction time. Any failure
is surfaced as an ``IndicatorError`` carrying an ``ErrorKind`` so callers can
branch on the category without parsing messages.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Categories of indicator errors."""

    INVALID_INPUT = "InvalidInput"
    INVALID_OPERATION = "InvalidOperation"
    DIVIDE_BY_ZERO = "DivideByZero"


class IndicatorError(ValueError):
    """Raised when an indicator cannot be constructed or used.

    Only ``ErrorKind.INVALID_INPUT`` is produced today (a period of zero at
    construction). The remaining kinds are reserved.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        """Initialize the error.

        Args:
            kind: Error category
            message: Human readable description
        """
        super().__init__(message)
        self.kind = ErrorKind(kind)
        self.message = message

    def __str__(self) -> str:
        """Render the error as ``Error: <kind> - <message>``."""
        return f"Error: {self.kind.value} - {self.message}"

    def __repr__(self) -> str:
        """Return a debug representation of the error."""
        return f"IndicatorError(kind={self.kind.value!r}, message={self.message!r})"
