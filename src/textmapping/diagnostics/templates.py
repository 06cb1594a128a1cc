"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps every message testable and documents all error cases in one
    place.
    """

    @staticmethod
    def span_bound_negative(name: str, value: int) -> Diagnostic:
        """Span start, end or anchor position below zero.

        Args:
            name: Parameter name ("start", "end" or "at")
            value: The rejected value

        Returns:
            Diagnostic for SPAN_BOUND_NEGATIVE
        """
        msg = f"{name.capitalize()} cannot be less than 0, got {value}"
        return Diagnostic(
            code=DiagnosticCode.SPAN_BOUND_NEGATIVE,
            message=msg,
            argument_name=name,
            received_value=str(value),
            expected=f"{name} >= 0",
        )

    @staticmethod
    def span_length_negative(length: int) -> Diagnostic:
        """Span length below zero.

        Args:
            length: The rejected length

        Returns:
            Diagnostic for SPAN_LENGTH_NEGATIVE
        """
        msg = f"Length cannot be less than 0, got {length}"
        return Diagnostic(
            code=DiagnosticCode.SPAN_LENGTH_NEGATIVE,
            message=msg,
            argument_name="length",
            received_value=str(length),
            expected="length >= 0",
            hint="Use Span(start, end) to build a span from two positions in any order",
        )

    @staticmethod
    def line_number_out_of_range(line_number: int, line_count: int) -> Diagnostic:
        """Line number outside the line table.

        Args:
            line_number: The rejected 0-indexed line number
            line_count: Number of lines in the map

        Returns:
            Diagnostic for LINE_NUMBER_OUT_OF_RANGE
        """
        if line_number < 0:
            msg = f"Line number cannot be negative, got {line_number}"
        else:
            msg = (
                f"Line number {line_number} is out of range "
                f"(the line map has {line_count} line(s))"
            )
        return Diagnostic(
            code=DiagnosticCode.LINE_NUMBER_OUT_OF_RANGE,
            message=msg,
            argument_name="line_number",
            received_value=str(line_number),
            expected=f"0 <= line_number < {line_count}",
            hint="Line numbers are 0-indexed",
        )

    @staticmethod
    def position_out_of_range(position: int, size: int) -> Diagnostic:
        """Character position outside the mapped text.

        Args:
            position: The rejected absolute position
            size: Size of the mapped text

        Returns:
            Diagnostic for POSITION_OUT_OF_RANGE
        """
        if position < 0:
            msg = f"Character position cannot be negative, got {position}"
        else:
            msg = (
                f"Character position {position} is past the end of the mapped "
                f"text (size {size})"
            )
        return Diagnostic(
            code=DiagnosticCode.POSITION_OUT_OF_RANGE,
            message=msg,
            argument_name="position",
            received_value=str(position),
            expected=f"0 <= position <= {size}",
            hint="The position one past the last character is valid",
        )

    @staticmethod
    def line_table_empty() -> Diagnostic:
        """Line map constructed from an empty line table.

        Returns:
            Diagnostic for LINE_TABLE_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.LINE_TABLE_EMPTY,
            message="A line map must contain at least one line",
            argument_name="lines",
            received_value="0",
            expected="len(lines) >= 1",
            hint="Build line maps with LineMap.create(text)",
        )

    @staticmethod
    def context_lines_negative(context_lines: int) -> Diagnostic:
        """Negative context window for an error excerpt.

        Args:
            context_lines: The rejected number of context lines

        Returns:
            Diagnostic for CONTEXT_LINES_NEGATIVE
        """
        msg = f"Context lines cannot be negative, got {context_lines}"
        return Diagnostic(
            code=DiagnosticCode.CONTEXT_LINES_NEGATIVE,
            message=msg,
            argument_name="context_lines",
            received_value=str(context_lines),
            expected="context_lines >= 0",
        )
