"""Ordered, capped store of output lines.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from valuegraph.constants import DEFAULT_MAX_LINES, PLACEHOLDER_MAX_LINES
from valuegraph.diagnostics import ErrorTemplate, MaxLinesExceededError

from .line import Line

__all__ = ["LineCollection"]

logger = logging.getLogger(__name__)


class LineCollection:
    """Ordered lines with a hard cap on their number.

    Lines are compared by identity. Once two or more lines exist, every
    line has its indentation materialized as leading whitespace; a single
    line never does.

    Growing past ``max_lines`` appends an empty line and the overflow
    notice, then raises MaxLinesExceededError. The collection therefore
    never holds more than ``max_lines + 2`` lines.
    """

    __slots__ = ("_lines", "_max_lines", "_multiline")

    def __init__(self, max_lines: int = DEFAULT_MAX_LINES) -> None:
        if max_lines < 1:
            msg = f"max_lines must be >= 1, got {max_lines}"
            raise ValueError(msg)
        self._max_lines = max_lines
        self._lines: list[Line] = []
        self._multiline = False

    @property
    def max_lines(self) -> int:
        """Configured line cap."""
        return self._max_lines

    @property
    def count(self) -> int:
        """Number of lines."""
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    @property
    def first(self) -> Line | None:
        """First line, or None when empty."""
        return self._lines[0] if self._lines else None

    @property
    def last(self) -> Line | None:
        """Last line, or None when empty."""
        return self._lines[-1] if self._lines else None

    def index_of(self, line: Line) -> int:
        """Position of a line (identity based).

        Raises:
            ValueError: If the line is not part of the collection
        """
        for position, candidate in enumerate(self._lines):
            if candidate is line:
                return position
        msg = f"{line!r} is not in the collection"
        raise ValueError(msg)

    # ------------------------------------------------------------------
    # Growth
    # ------------------------------------------------------------------

    def add(self, line: Line) -> None:
        """Append a line at the end."""
        self._insert(len(self._lines), line)

    def insert_after(self, line: Line, new_line: Line) -> None:
        """Insert new_line directly after line."""
        self._insert(self.index_of(line) + 1, new_line)

    def insert_before(self, line: Line, new_line: Line) -> None:
        """Insert new_line directly before line."""
        self._insert(self.index_of(line), new_line)

    def insert_at_top(self, new_line: Line) -> None:
        """Insert new_line as the first line."""
        self._insert(0, new_line)

    def insert_at_line_start_or_top(self, fragment: str, indentation: int = 0) -> Line:
        """Prefix the sole line with fragment, or add it as a new first line.

        Returns:
            The line now holding the fragment
        """
        if len(self._lines) == 1:
            line = self._lines[0]
            line.insert(0, fragment)
            return line
        line = Line(indentation, fragment)
        self.insert_at_top(line)
        return line

    def split_line(self, line: Line, index: int) -> Line | None:
        """Split line at a logical offset, inserting the remainder after it.

        When the cap leaves no room for the remainder the line is kept
        whole and the overflow is raised before anything is cut.

        Returns:
            The remainder line, or None when the remainder was blank
        """
        if line.text[index:].strip():
            self._ensure_capacity()
        remainder = line.truncate(index)
        if remainder is not None:
            self.insert_after(line, remainder)
        return remainder

    def _ensure_capacity(self) -> None:
        if len(self._lines) >= self._max_lines:
            self._overflow()

    def _insert(self, position: int, line: Line) -> None:
        self._ensure_capacity()
        self._lines.insert(position, line)
        self._track_whitespace(line)

    def _track_whitespace(self, line: Line) -> None:
        if self._multiline:
            line.ensure_whitespace()
        elif len(self._lines) >= 2:
            self._multiline = True
            for existing in self._lines:
                existing.ensure_whitespace()

    def _overflow(self) -> None:
        logger.debug("Line cap of %d reached, truncating output", self._max_lines)
        notice = PLACEHOLDER_MAX_LINES.format(max_lines=self._max_lines)
        for line in (Line(0), Line(0, notice)):
            self._lines.append(line)
            self._track_whitespace(line)
        raise MaxLinesExceededError(
            ErrorTemplate.max_lines_exceeded(self._max_lines), max_lines=self._max_lines
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_lines_beyond(self, line: Line | None) -> bool:
        """True when any line follows line.

        ``None`` stands for the position before the first line; lines lie
        beyond it as soon as the collection holds more than one line.
        """
        if line is None:
            return len(self._lines) > 1
        return self.index_of(line) < len(self._lines) - 1

    def line_after(self, line: Line | None) -> Line | None:
        """Line following line (``None`` = before the first line)."""
        if line is None:
            return self.first
        position = self.index_of(line) + 1
        return self._lines[position] if position < len(self._lines) else None

    def line_before(self, line: Line) -> Line | None:
        """Line preceding line, or None for the first line."""
        position = self.index_of(line)
        return self._lines[position - 1] if position > 0 else None

    def to_string(self) -> str:
        """Join all lines with newlines."""
        return "\n".join(line.to_string() for line in self._lines)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        """Return debug representation."""
        return f"LineCollection(count={len(self._lines)}, max_lines={self._max_lines})"
