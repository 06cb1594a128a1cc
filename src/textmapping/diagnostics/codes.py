"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
exception raised from this package.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Span construction errors
        2000-2999: Line map lookup errors
        3000-3999: Position helper errors
    """

    # Span construction errors (1000-1999)
    SPAN_BOUND_NEGATIVE = 1001
    SPAN_LENGTH_NEGATIVE = 1002

    # Line map lookup errors (2000-2999)
    LINE_NUMBER_OUT_OF_RANGE = 2001
    POSITION_OUT_OF_RANGE = 2002
    LINE_TABLE_EMPTY = 2003

    # Position helper errors (3000-3999)
    CONTEXT_LINES_NEGATIVE = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (IDEs, LSP servers).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        argument_name: Name of the parameter that was rejected
        received_value: The rejected value, rendered as text
        expected: Description of the accepted range for the parameter
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    argument_name: str | None = None
    received_value: str | None = None
    expected: str | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[POSITION_OUT_OF_RANGE]: Character position 13 is out of range
              = argument: position
              = expected: 0 <= position <= 12
              = received: 13

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
