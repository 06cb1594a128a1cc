"""Shared constants for textmapping.

Centralized here to avoid circular imports between the span, line map and
position helper modules.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "DEFAULT_CONTEXT_LINES",
    "ERROR_MARKER",
    "LINE_DELIMITER",
]

# The only recognised line delimiter. CRLF text still maps correctly because
# the \n is present; the \r stays part of the line's content.
LINE_DELIMITER = "\n"

# Lines shown before and after the offending line by position.error_context()
DEFAULT_CONTEXT_LINES = 2

# Character repeated under the offending column in error excerpts
ERROR_MARKER = "^"
