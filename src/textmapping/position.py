"""Position utilities for error reporting and tooling.

Helpers that combine a text with a LineMap built from it, for showing
human-readable locations and source excerpts. The LineMap still never
stores the text: callers pass the same text the map was created from.

Python 3.13+. Zero external dependencies.
"""

from textmapping.constants import DEFAULT_CONTEXT_LINES, ERROR_MARKER, LINE_DELIMITER
from textmapping.diagnostics import ErrorTemplate, OutOfRangeError
from textmapping.line_map import LineMap

__all__ = ["error_context", "format_position", "line_text"]


def format_position(line_map: LineMap, position: int, zero_based: bool = True) -> str:
    """Format an absolute position as a human-readable line:column string.

    Args:
        line_map: Line map of the text
        position: Absolute character position (0 <= position <= size)
        zero_based: If True, use 0-based indexing; if False, use 1-based

    Returns:
        Position string like "line:col" (e.g., "1:0" or "2:1")

    Raises:
        OutOfRangeError: If position is outside the mapped text.

    Example:
        >>> line_map = LineMap.create("hello\\nworld\\ntest")
        >>> format_position(line_map, 6, zero_based=True)
        '1:0'
        >>> format_position(line_map, 6, zero_based=False)
        '2:1'
    """
    return line_map.get_character_position(position).format(zero_based=zero_based)


def line_text(text: str, line_map: LineMap, line_number: int, keep_ends: bool = False) -> str:
    """Extract the content of a specific line.

    Args:
        text: The text line_map was created from
        line_map: Line map of the text
        line_number: 0-indexed line number
        keep_ends: If True, keep the trailing \\n

    Returns:
        Content of the line

    Raises:
        OutOfRangeError: If line_number is outside the map.

    Example:
        >>> text = "hello\\nworld\\ntest"
        >>> line_text(text, LineMap.create(text), 1)
        'world'
    """
    content = line_map.get_line(line_number).span.extract(text)
    if not keep_ends and content.endswith(LINE_DELIMITER):
        return content[: -len(LINE_DELIMITER)]
    return content


def error_context(
    text: str,
    line_map: LineMap,
    position: int,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    marker: str = ERROR_MARKER,
) -> str:
    """Get formatted context showing a position in the text.

    Creates a multi-line string with the lines surrounding the position
    and a marker line pointing at its column.

    Args:
        text: The text line_map was created from
        line_map: Line map of the text
        position: Absolute character position to point at
        context_lines: Number of lines to show before/after the position's line
        marker: Character(s) to use for the marker

    Returns:
        Formatted context string

    Raises:
        OutOfRangeError: If position is outside the mapped text or
            context_lines is negative.

    Example:
        >>> text = "line1\\nline2\\nerror here\\nline4\\nline5"
        >>> print(error_context(text, LineMap.create(text), 12, context_lines=1))
        line2
        error here
        ^
        line4
    """
    if context_lines < 0:
        raise OutOfRangeError(
            ErrorTemplate.context_lines_negative(context_lines), value=context_lines
        )

    char_pos = line_map.get_character_position(position)
    current = char_pos.line_number

    first = max(0, current - context_lines)
    last = min(line_map.line_count, current + context_lines + 1)

    context: list[str] = []
    for line_number in range(first, last):
        context.append(line_text(text, line_map, line_number))
        if line_number == current:
            context.append(" " * char_pos.column + marker)

    return "\n".join(context)
