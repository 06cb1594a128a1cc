"""Line index mapping absolute character offsets to line/column positions.

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Supported (\\n is the line delimiter, the \\r
      stays part of the line)
    - CR-only (Classic Mac, \\r): NOT supported

Positions are Python string indices (code points). No grapheme or UTF-16
aware indexing is performed.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import overload

from textmapping.constants import LINE_DELIMITER
from textmapping.diagnostics import ErrorTemplate, OutOfRangeError
from textmapping.span import Span

__all__ = ["CharacterPosition", "Line", "LineMap"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Line:
    """A single line of text within a larger text.

    Attributes:
        line_number: 0-indexed line number
        span: Extent of the line, including its trailing \\n if it has one.
            The final line of a text never has a trailing delimiter.
    """

    line_number: int
    span: Span


@dataclass(frozen=True, slots=True)
class CharacterPosition:
    """A character position in a text, relative to its line.

    Attributes:
        line: The line containing the character
        offset: Distance of the character from the start of the line

    Example:
        >>> line_map = LineMap.create("all\\nbabel\\ncs")
        >>> pos = line_map.get_character_position(6)
        >>> pos.line_number, pos.column
        (1, 2)
        >>> pos.absolute_position
        6
        >>> pos.format(zero_based=False)
        '2:3'
    """

    line: Line
    offset: int

    @property
    def absolute_position(self) -> int:
        """Position of the character from the start of the whole text."""
        return self.line.span.start + self.offset

    @property
    def line_number(self) -> int:
        """0-indexed line number of the character."""
        return self.line.line_number

    @property
    def column(self) -> int:
        """0-indexed column of the character (same as offset)."""
        return self.offset

    def format(self, zero_based: bool = True) -> str:
        """Format as a "line:column" string.

        Args:
            zero_based: If True, use 0-based indexing; if False, use 1-based
        """
        line = self.line_number
        col = self.offset
        if not zero_based:
            line += 1
            col += 1
        return f"{line}:{col}"


class LineMap(Sequence[Line]):
    """Mapping between the lines and character positions of a text.

    Built once from the full text in a single O(n) pass, then answers
    line lookups in O(1) and offset lookups in O(log n) by binary search.
    The map keeps only offsets, never the text, and cannot be updated;
    rebuild it after an edit.

    Example:
        >>> line_map = LineMap.create("foo\\nbar\\n")
        >>> line_map.line_count
        3
        >>> [str(line.span) for line in line_map]
        ['0..4', '4..8', '8..8']
        >>> line_map.get_character_position(5).format()
        '1:1'

    Thread Safety:
        Thread-safe. Internal state is only set during construction.
    """

    __slots__ = ("_lines",)

    def __init__(self, lines: Iterable[Line]) -> None:
        """Wrap an already built line table. Use LineMap.create() instead.

        The lines are copied into a tuple, so later changes to the argument
        do not affect the map.

        Raises:
            OutOfRangeError: If lines is empty.
        """
        table = tuple(lines)
        if not table:
            raise OutOfRangeError(ErrorTemplate.line_table_empty(), value=0)
        self._lines = table

    @classmethod
    def create(cls, text: str) -> "LineMap":
        """Build a line map from a text.

        Args:
            text: The text to index

        Returns:
            New LineMap with at least one line

        Raises:
            TypeError: If text is not a str.

        Complexity:
            O(n) where n = len(text)
        """
        # Runtime check: a list of multi-character strings would be counted
        # one item per character and miss embedded newlines
        if not isinstance(text, str):
            msg = f"Expected str, got {type(text).__name__}"  # type: ignore[unreachable]
            raise TypeError(msg)

        lines: list[Line] = []

        line_number = 0
        line_start = 0
        line_end = 0

        for i, char in enumerate(text):
            line_end += 1

            if char != LINE_DELIMITER:
                continue

            lines.append(Line(line_number, Span(line_start, line_end)))

            line_number += 1
            line_start = i + 1
            line_end = line_start

        # Trailing line: always present, empty after a final \n or for ""
        lines.append(Line(line_number, Span(line_start, line_end)))

        logger.debug("Built line map: %d line(s), %d character(s)", len(lines), line_end)
        return cls(lines)

    @property
    def line_count(self) -> int:
        """Total number of lines in the map."""
        return len(self._lines)

    @property
    def size(self) -> int:
        """Size of the mapped text, in characters."""
        return self._lines[-1].span.end

    def get_line(self, line_number: int) -> Line:
        """Get the line with a given line number.

        Args:
            line_number: 0-indexed line number

        Raises:
            OutOfRangeError: If line_number < 0 or line_number >= line_count.
        """
        if line_number < 0 or line_number >= len(self._lines):
            raise OutOfRangeError(
                ErrorTemplate.line_number_out_of_range(line_number, len(self._lines)),
                value=line_number,
            )
        return self._lines[line_number]

    def get_character_position(self, position: int) -> CharacterPosition:
        """Get the line and offset of an absolute position using binary search.

        Args:
            position: Character position from the start of the text. The
                position one past the last character (== size) is valid and
                resolves to the end of the final line.

        Returns:
            CharacterPosition of the character at position

        Raises:
            OutOfRangeError: If position < 0 or position > size.

        Complexity:
            O(log n) where n = number of lines

        Example:
            >>> line_map = LineMap.create("all\\nbabel\\ncs")
            >>> line_map.get_character_position(4).format()
            '1:0'
            >>> line_map.get_character_position(12).format()  # End of text
            '2:2'
        """
        size = self.size
        if position < 0 or position > size:
            raise OutOfRangeError(
                ErrorTemplate.position_out_of_range(position, size), value=position
            )

        lines = self._lines
        start_line = 0
        end_line = len(lines)

        while True:
            if start_line >= end_line:
                # Past every line's half-open span: only position == size
                # gets here, which is one past the final character.
                line = lines[-1]
                return CharacterPosition(line, line.span.length)

            index = start_line + (end_line - start_line) // 2
            line = lines[index]

            if line.span.start <= position < line.span.end:
                return CharacterPosition(line, position - line.span.start)

            if position < line.span.start:
                end_line = index
            else:
                start_line = index + 1

    @overload
    def __getitem__(self, index: int) -> Line: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Line, ...]: ...

    def __getitem__(self, index: int | slice) -> Line | tuple[Line, ...]:
        """Index lines by line number. Negative indices are not wrapped."""
        if isinstance(index, slice):
            return self._lines[index]
        return self.get_line(index)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineMap):
            return NotImplemented
        return self._lines == other._lines

    def __hash__(self) -> int:
        return hash(self._lines)

    def __repr__(self) -> str:
        return f"LineMap(line_count={self.line_count}, size={self.size})"
