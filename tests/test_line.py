"""Tests for layout/line.py.

Tests Line two-phase storage, logical offsets, splitting and lazily
materialized indentation.

Python 3.11+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from valuegraph.diagnostics import DiagnosticCode, UsageError
from valuegraph.layout.line import BuildingState, FlushedState, Line

# ============================================================================
# Storage States
# ============================================================================


class TestLineStates:
    """Test Building -> Flushed transition."""

    def test_new_line_is_building(self) -> None:
        """A new line accumulates chunks."""
        line = Line(0, "ab")
        line.append("cd")

        assert isinstance(line.state, BuildingState)
        assert line.text == "abcd"
        assert line.length == 4

    def test_flush_freezes_content(self) -> None:
        """flush() moves the line to the flushed state."""
        line = Line(0, "ab")
        line.flush()

        assert line.is_flushed
        assert line.state == FlushedState("ab")

    def test_flush_is_idempotent(self) -> None:
        """Flushing twice keeps the content."""
        line = Line(0, "ab")
        line.flush()
        line.flush()

        assert line.text == "ab"

    def test_append_after_flush(self) -> None:
        """Appending to a flushed line takes the slow path."""
        line = Line(0, "ab")
        line.flush()
        line.append(",")

        assert line.text == "ab,"
        assert line.is_flushed

    def test_negative_indentation_rejected(self) -> None:
        """Indentation must not be negative."""
        with pytest.raises(ValueError, match="indentation must be >= 0"):
            Line(-1)


# ============================================================================
# Insertion and Splitting
# ============================================================================


class TestLineInsert:
    """Test insert() with logical offsets."""

    def test_insert_middle(self) -> None:
        """Text is inserted at the given offset."""
        line = Line(0, "abc")
        line.insert(1, "X")

        assert line.text == "aXbc"

    def test_insert_into_flushed_line(self) -> None:
        """Flushed lines accept insertions."""
        line = Line(0, "XY")
        line.flush()
        line.insert(0, "Z")

        assert line.text == "ZXY"

    def test_insert_out_of_range(self) -> None:
        """Offsets beyond the content are rejected."""
        line = Line(0, "abc")

        with pytest.raises(UsageError) as exc_info:
            line.insert(4, "X")

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_SPLIT_INDEX

    def test_insert_ignores_whitespace_prefix(self) -> None:
        """Offsets exclude materialized indentation."""
        line = Line(1, "bc")
        line.ensure_whitespace()
        line.insert(0, "a")

        assert line.text == "abc"
        assert line.to_string() == "    abc"


class TestLineTruncate:
    """Test truncate() splitting."""

    def test_truncate_returns_remainder(self) -> None:
        """The remainder becomes a new line at the same indentation."""
        line = Line(2, "abcd")
        remainder = line.truncate(2)

        assert line.text == "ab"
        assert line.is_flushed
        assert remainder is not None
        assert remainder.text == "cd"
        assert remainder.indentation == 2

    def test_truncate_at_end_has_no_remainder(self) -> None:
        """Splitting at the end leaves nothing to move."""
        assert Line(0, "abc").truncate(3) is None

    def test_truncate_blank_remainder_dropped(self) -> None:
        """A whitespace-only remainder is discarded."""
        line = Line(0, "ab  ")

        assert line.truncate(2) is None
        assert line.text == "ab"

    def test_remainder_inherits_whitespace(self) -> None:
        """A remainder of an indented line is indented as well."""
        line = Line(1, "ab")
        line.ensure_whitespace()
        remainder = line.truncate(1)

        assert remainder is not None
        assert remainder.to_string() == "    b"

    def test_truncate_out_of_range(self) -> None:
        """Split offsets beyond the content are rejected."""
        with pytest.raises(UsageError):
            Line(0, "ab").truncate(3)


# ============================================================================
# Indentation
# ============================================================================


class TestLineIndentation:
    """Test lazy indentation materialization."""

    def test_no_whitespace_until_materialized(self) -> None:
        """A fresh line renders without indentation."""
        assert Line(3, "x").to_string() == "x"

    def test_ensure_whitespace(self) -> None:
        """Materialization adds four spaces per level."""
        line = Line(2, "x")
        line.ensure_whitespace()

        assert line.to_string() == "        x"
        assert line.text == "x"
        assert line.length == 1
        assert line.has_whitespace

    def test_ensure_whitespace_idempotent(self) -> None:
        """Materializing twice adds the prefix once."""
        line = Line(1, "x")
        line.ensure_whitespace()
        line.ensure_whitespace()

        assert line.to_string() == "    x"

    def test_set_indentation_rematerializes(self) -> None:
        """Changing the level of an indented line rewrites its prefix."""
        line = Line(1, "x")
        line.ensure_whitespace()
        line.flush()
        line.set_indentation(3)

        assert line.to_string() == "            x"
        assert line.indentation == 3

    def test_set_indentation_before_materialization(self) -> None:
        """Changing the level of a plain line only records the level."""
        line = Line(1, "x")
        line.set_indentation(2)

        assert line.to_string() == "x"
        line.ensure_whitespace()
        assert line.to_string() == "        x"

    def test_trailing_spaces_stripped(self) -> None:
        """to_string() drops trailing spaces."""
        assert Line(0, "a, ").to_string() == "a,"

    def test_blank_line(self) -> None:
        """Whitespace-only content counts as blank."""
        line = Line(2, "  ")
        line.ensure_whitespace()

        assert line.is_blank
        assert line.to_string() == ""


# ============================================================================
# Properties
# ============================================================================


@given(
    text=st.text(alphabet="abc ,", max_size=20),
    data=st.data(),
)
def test_property_truncate_preserves_content(text: str, data: st.DataObject) -> None:
    """Property: prefix plus remainder equals the original content.

    Blank remainders are dropped, so the comparison ignores trailing spaces.
    """
    index = data.draw(st.integers(min_value=0, max_value=len(text)))
    event(f"remainder_blank={not text[index:].strip()}")
    line = Line(0, text)
    remainder = line.truncate(index)

    joined = line.text + (remainder.text if remainder is not None else "")
    assert joined.rstrip() == text.rstrip()
    assert line.text == text[:index]


@given(
    level=st.integers(min_value=0, max_value=6),
    text=st.text(alphabet="xyz", min_size=1, max_size=10),
)
def test_property_logical_length_excludes_indentation(level: int, text: str) -> None:
    """Property: materialized whitespace never changes the logical length."""
    event(f"level={level}")
    line = Line(level, text)
    before = line.length
    line.ensure_whitespace()

    assert line.length == before
    assert line.text == text
    assert line.to_string() == " " * (4 * level) + text
