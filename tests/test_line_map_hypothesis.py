"""Hypothesis property-based tests for LineMap.

Tests line tiling, lookup round-trips and boundary handling against
arbitrary text, including texts built line by line.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from textmapping import LineMap, OutOfRangeError
from tests.strategies import multiline_texts, text_and_position, texts


class TestLineTableProperties:
    """Invariants of the line table built by create()."""

    @given(text=texts)
    @settings(max_examples=200)
    def test_at_least_one_line(self, text: str) -> None:
        """INVARIANT: Every map has at least one line."""
        assert LineMap.create(text).line_count >= 1

    @given(text=texts)
    @settings(max_examples=200)
    def test_line_count_is_newlines_plus_one(self, text: str) -> None:
        """PROPERTY: line_count == number of \\n + 1."""
        assert LineMap.create(text).line_count == text.count("\n") + 1

    @given(text=texts)
    @settings(max_examples=200)
    def test_lines_tile_text(self, text: str) -> None:
        """INVARIANT: Line spans tile [0, len(text)] with no gaps or overlaps."""
        line_map = LineMap.create(text)
        lines = list(line_map)

        assert lines[0].span.start == 0
        assert lines[-1].span.end == len(text) == line_map.size
        for current, following in zip(lines, lines[1:], strict=False):
            assert current.span.end == following.span.start

    @given(text=texts)
    @settings(max_examples=200)
    def test_line_numbers_match_indices(self, text: str) -> None:
        """INVARIANT: lines[i].line_number == i."""
        for index, line in enumerate(LineMap.create(text)):
            assert line.line_number == index

    @given(text=texts)
    @settings(max_examples=200)
    def test_lines_rebuild_text(self, text: str) -> None:
        """PROPERTY: Concatenating line contents reproduces the text."""
        line_map = LineMap.create(text)

        assert "".join(line.span.extract(text) for line in line_map) == text

    @given(text=multiline_texts)
    @settings(max_examples=200)
    def test_only_final_line_lacks_delimiter(self, text: str) -> None:
        """PROPERTY: Every line but the last ends with \\n; the last never does."""
        lines = list(LineMap.create(text))

        for line in lines[:-1]:
            assert line.span.extract(text).endswith("\n")
        assert "\n" not in lines[-1].span.extract(text)


class TestLookupProperties:
    """Properties of get_character_position() and get_line()."""

    @given(data=text_and_position())
    @settings(max_examples=300)
    def test_absolute_position_round_trip(self, data: tuple[str, int]) -> None:
        """PROPERTY: get_character_position(p).absolute_position == p."""
        text, position = data
        line_map = LineMap.create(text)

        assert line_map.get_character_position(position).absolute_position == position

    @given(text=texts)
    @settings(max_examples=100)
    def test_round_trip_every_position(self, text: str) -> None:
        """PROPERTY: Round-trip holds for every position in [0, size]."""
        line_map = LineMap.create(text)

        for position in range(line_map.size + 1):
            result = line_map.get_character_position(position)
            assert result.absolute_position == position

    @given(data=text_and_position())
    @settings(max_examples=300)
    def test_line_matches_linear_scan(self, data: tuple[str, int]) -> None:
        """PROPERTY: Binary search agrees with counting newlines before p."""
        text, position = data
        line_map = LineMap.create(text)

        result = line_map.get_character_position(position)

        assert result.line_number == text.count("\n", 0, position)
        assert result.column == position - (text.rfind("\n", 0, position) + 1)

    @given(data=text_and_position())
    def test_position_inside_line_span(self, data: tuple[str, int]) -> None:
        """PROPERTY: Offset stays within [0, line length]."""
        text, position = data
        result = LineMap.create(text).get_character_position(position)

        assert 0 <= result.offset <= result.line.span.length

    @given(data=text_and_position())
    def test_lookup_idempotent(self, data: tuple[str, int]) -> None:
        """PROPERTY: Repeated lookups return equal results."""
        text, position = data
        line_map = LineMap.create(text)

        assert line_map.get_character_position(position) == line_map.get_character_position(
            position
        )

    @given(text=texts, excess=st.integers(min_value=1, max_value=1000))
    def test_past_end_rejected(self, text: str, excess: int) -> None:
        """BOUNDARY: Positions beyond size raise OutOfRangeError."""
        line_map = LineMap.create(text)

        with pytest.raises(OutOfRangeError):
            line_map.get_character_position(line_map.size + excess)

    @given(text=texts, position=st.integers(max_value=-1))
    def test_negative_rejected(self, text: str, position: int) -> None:
        """BOUNDARY: Negative positions raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError):
            LineMap.create(text).get_character_position(position)

    @given(text=texts, excess=st.integers(min_value=0, max_value=100))
    def test_line_number_past_end_rejected(self, text: str, excess: int) -> None:
        """BOUNDARY: line_number >= line_count raises OutOfRangeError."""
        line_map = LineMap.create(text)

        with pytest.raises(OutOfRangeError):
            line_map.get_line(line_map.line_count + excess)


@pytest.mark.fuzz
class TestLargeTextFuzz:
    """Intensive round-trip checks on large inputs."""

    @given(
        text=st.text(
            alphabet=st.sampled_from("ab\n\r "),
            min_size=1000,
            max_size=20_000,
        )
    )
    @settings(max_examples=200, deadline=None)
    def test_round_trip_large(self, text: str) -> None:
        """PROPERTY: Round-trip holds on large texts."""
        line_map = LineMap.create(text)

        for position in range(0, line_map.size + 1, 37):
            assert line_map.get_character_position(position).absolute_position == position
