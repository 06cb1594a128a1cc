"""textmapping - character spans and line/column mapping for text.

Small immutable primitives for translating between flat character offsets
and human-readable line/column coordinates. Intended for editors, compilers,
linters and diagnostic reporters.

Public API:
    Span - Half-open character interval [start, end)
    LineMap - Line index built once from a text, O(log n) offset lookup
    Line - A line number and its span
    CharacterPosition - Line and offset of a character
    format_position - "line:col" rendering of an absolute position
    line_text - Content of one line of a text
    error_context - Source excerpt with a marker under a position

Exceptions:
    TextMappingError - Base exception class
    OutOfRangeError - Position, length or line number out of range

Submodules:
    textmapping.diagnostics - Error types, codes and formatting
    textmapping.constants - Shared constants
"""

from .diagnostics import OutOfRangeError, TextMappingError
from .line_map import CharacterPosition, Line, LineMap
from .position import error_context, format_position, line_text
from .span import Span

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("textmapping")
except PackageNotFoundError:
    # Development mode: package not installed yet
    # Run: uv sync
    __version__ = "0.0.0+dev"

__all__ = [
    "CharacterPosition",
    "Line",
    "LineMap",
    "OutOfRangeError",
    "Span",
    "TextMappingError",
    "__version__",
    "error_context",
    "format_position",
    "line_text",
]
