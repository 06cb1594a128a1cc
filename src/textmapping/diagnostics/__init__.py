"""Diagnostic system for textmapping errors.

Provides structured error diagnostics with codes, hints and the accepted
range of every rejected argument.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import OutOfRangeError, TextMappingError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutOfRangeError",
    "OutputFormat",
    "TextMappingError",
]
