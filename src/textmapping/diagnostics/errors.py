"""Exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["OutOfRangeError", "TextMappingError"]


class TextMappingError(Exception):
    """Base exception for all textmapping errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TextMappingError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class OutOfRangeError(TextMappingError, ValueError, IndexError):
    """A position, length or line number lies outside its valid range.

    Raised synchronously by the call that received the bad argument. Callers
    are expected to treat it as a programming error or validate upstream.
    Also a ``ValueError`` and an ``IndexError``, so code already guarding
    list or range misuse catches it unchanged.

    Attributes:
        value: The rejected value
        parameter: Name of the rejected parameter
        bound: Human-readable description of the accepted range

    Example:
        >>> try:
        ...     Span(-1, 4)
        ... except OutOfRangeError as e:
        ...     print(e.parameter, e.value, e.bound)
        start -1 start >= 0
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        value: int,
        parameter: str | None = None,
        bound: str | None = None,
    ) -> None:
        """Initialize OutOfRangeError.

        Args:
            message: Error message string OR Diagnostic object
            value: The rejected value
            parameter: Name of the rejected parameter (defaults to the
                diagnostic's argument_name)
            bound: Description of the accepted range (defaults to the
                diagnostic's expected)
        """
        super().__init__(message)
        diagnostic = self.diagnostic
        if parameter is None and diagnostic is not None:
            parameter = diagnostic.argument_name
        if bound is None and diagnostic is not None:
            bound = diagnostic.expected
        self.value = value
        self.parameter = parameter or ""
        self.bound = bound or ""
