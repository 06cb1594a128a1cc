"""Half-open character spans.

A Span is the interval [start, end) over character offsets in some text.
Spans hold positions only, never the text itself.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from textmapping.diagnostics import ErrorTemplate, OutOfRangeError

__all__ = ["Span"]


@dataclass(frozen=True, slots=True)
class Span:
    """Span of characters within a text.

    Attributes:
        start: Inclusive, 0-indexed starting offset
        end: Exclusive, 0-indexed ending offset

    Both bounds must be >= 0. If start is greater than end the two are
    swapped, so ``start <= end`` holds for every Span.

    Example:
        >>> Span(2, 5)
        Span(start=2, end=5)
        >>> Span(5, 2)  # Reversed bounds are swapped
        Span(start=2, end=5)
        >>> str(Span(0, 3))
        '0..3'
        >>> Span(0, 3).extract("foobar")
        'foo'
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate bounds and normalize their order.

        Raises:
            OutOfRangeError: If start or end is negative.
        """
        if self.start < 0:
            raise OutOfRangeError(
                ErrorTemplate.span_bound_negative("start", self.start), value=self.start
            )
        if self.end < 0:
            raise OutOfRangeError(
                ErrorTemplate.span_bound_negative("end", self.end), value=self.end
            )
        if self.start > self.end:
            start, end = self.end, self.start
            object.__setattr__(self, "start", start)
            object.__setattr__(self, "end", end)

    @classmethod
    def from_length(cls, start: int, length: int) -> "Span":
        """Create a span from a start offset and a length.

        Args:
            start: Inclusive, 0-indexed starting offset
            length: Number of characters covered

        Returns:
            Span covering [start, start + length)

        Raises:
            OutOfRangeError: If start or length is negative.
        """
        if start < 0:
            raise OutOfRangeError(ErrorTemplate.span_bound_negative("start", start), value=start)
        if length < 0:
            raise OutOfRangeError(ErrorTemplate.span_length_negative(length), value=length)
        return cls(start, start + length)

    @classmethod
    def empty(cls, at: int) -> "Span":
        """Create a zero-length span at a position.

        Raises:
            OutOfRangeError: If at is negative.
        """
        if at < 0:
            raise OutOfRangeError(ErrorTemplate.span_bound_negative("at", at), value=at)
        return cls(at, at)

    @staticmethod
    def between(a: "Span", b: "Span | None" = None) -> "Span":
        """Return the smallest span covering both a and b.

        Commutative: ``between(a, b) == between(b, a)``. When b is None,
        a is returned unchanged, which covers the "extend if present" case.

        Example:
            >>> Span.between(Span(4, 6), Span(1, 2))
            Span(start=1, end=6)
            >>> Span.between(Span(4, 6), None)
            Span(start=4, end=6)
        """
        if b is None:
            return a
        return Span(min(a.start, b.start), max(a.end, b.end))

    @property
    def length(self) -> int:
        """Number of characters in the span."""
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        """True if the span covers no characters."""
        return self.start >= self.end

    def contains(self, position: int) -> bool:
        """Check whether position lies in [start, end).

        The end offset itself is not contained.
        """
        return self.start <= position < self.end

    def __contains__(self, position: int) -> bool:
        return self.contains(position)

    def to_range(self) -> range:
        """Return the span as a range of offsets."""
        return range(self.start, self.end)

    def to_slice(self) -> slice:
        """Return the span as a slice usable on any sequence."""
        return slice(self.start, self.end)

    def extract(self, text: str) -> str:
        """Return the part of text covered by the span."""
        return text[self.start : self.end]

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"
