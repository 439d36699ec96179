"""Single output line with two-phase storage.

A line is built by many small appends while a strategy is writing it and is
then frozen (flushed) when the layout moves on. Later insertions into a
flushed line are rare, so they take a slower copy-based path.

Indentation is stored as a level, not as text. Leading whitespace is only
materialized once the owning collection holds two or more lines, which
keeps single-line output free of indentation. All public offsets are
logical: they exclude that materialized whitespace.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from valuegraph.constants import SPACES_PER_INDENT
from valuegraph.diagnostics import ErrorTemplate, UsageError

__all__ = ["BuildingState", "FlushedState", "Line", "LineState"]


@dataclass(slots=True)
class BuildingState:
    """Growable chunk buffer used while the line is being written.

    Attributes:
        chunks: Appended fragments in order
        length: Total length of all chunks
    """

    chunks: list[str] = field(default_factory=list)
    length: int = 0


@dataclass(frozen=True, slots=True)
class FlushedState:
    """Immutable text of a line that is no longer being appended to.

    Attributes:
        text: Complete line content including materialized whitespace
    """

    text: str = ""


LineState = BuildingState | FlushedState


class Line:
    """One line of rendered output.

    Attributes:
        indentation: Indentation level (not spaces)
    """

    __slots__ = ("_indentation", "_spaces_per_indent", "_state", "_whitespace")

    def __init__(
        self,
        indentation: int = 0,
        text: str = "",
        *,
        spaces_per_indent: int = SPACES_PER_INDENT,
    ) -> None:
        if indentation < 0:
            msg = f"Line.indentation must be >= 0, got {indentation}"
            raise ValueError(msg)
        self._indentation = indentation
        self._spaces_per_indent = spaces_per_indent
        # Length of the materialized whitespace prefix, None while not materialized
        self._whitespace: int | None = None
        self._state: LineState = BuildingState()
        if text:
            self.append(text)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def _raw(self) -> str:
        match self._state:
            case BuildingState(chunks=chunks):
                if len(chunks) > 1:
                    chunks[:] = ["".join(chunks)]
                return chunks[0] if chunks else ""
            case FlushedState(text=text):
                return text
        raise AssertionError(self._state)  # pragma: no cover

    def _replace(self, raw: str) -> None:
        match self._state:
            case BuildingState():
                self._state = BuildingState(chunks=[raw] if raw else [], length=len(raw))
            case FlushedState():
                self._state = FlushedState(raw)

    @property
    def _offset(self) -> int:
        return self._whitespace or 0

    @property
    def text(self) -> str:
        """Logical content, without materialized indentation."""
        return self._raw()[self._offset :]

    @property
    def length(self) -> int:
        """Length of the logical content."""
        match self._state:
            case BuildingState(length=length):
                return length - self._offset
            case FlushedState(text=text):
                return len(text) - self._offset
        raise AssertionError(self._state)  # pragma: no cover

    @property
    def is_blank(self) -> bool:
        """True when the logical content is empty or whitespace only."""
        return not self.text.strip()

    @property
    def is_flushed(self) -> bool:
        """True once the line has been frozen."""
        return isinstance(self._state, FlushedState)

    @property
    def state(self) -> LineState:
        """Current storage state."""
        return self._state

    def append(self, fragment: str) -> None:
        """Append text at the end of the line."""
        if not fragment:
            return
        match self._state:
            case BuildingState() as building:
                building.chunks.append(fragment)
                building.length += len(fragment)
            case FlushedState(text=text):
                self._state = FlushedState(text + fragment)

    def insert(self, index: int, fragment: str) -> None:
        """Insert text at a logical offset.

        Raises:
            UsageError: If index is outside the content
        """
        self._check_index(index)
        if not fragment:
            return
        raw = self._raw()
        position = index + self._offset
        self._replace(raw[:position] + fragment + raw[position:])

    def flush(self) -> None:
        """Freeze the line. Subsequent appends take the slow path."""
        if isinstance(self._state, BuildingState):
            self._state = FlushedState(self._raw())

    def truncate(self, index: int) -> Line | None:
        """Split the line at a logical offset.

        The line keeps the content before ``index`` and is flushed. The
        remainder becomes a new line at the same indentation unless it is
        blank, in which case it is dropped.

        Args:
            index: Logical split offset

        Returns:
            New line holding the remainder, or None

        Raises:
            UsageError: If index is outside the content
        """
        self._check_index(index)
        raw = self._raw()
        position = index + self._offset
        remainder = raw[position:]
        self._state = FlushedState(raw[:position])

        if not remainder.strip():
            return None
        line = Line(self._indentation, remainder, spaces_per_indent=self._spaces_per_indent)
        if self._whitespace is not None:
            line.ensure_whitespace()
        return line

    def _check_index(self, index: int) -> None:
        length = self.length
        if not 0 <= index <= length:
            raise UsageError(ErrorTemplate.invalid_split_index(index, length))

    # ------------------------------------------------------------------
    # Indentation
    # ------------------------------------------------------------------

    @property
    def indentation(self) -> int:
        """Indentation level."""
        return self._indentation

    @property
    def has_whitespace(self) -> bool:
        """True once indentation has been materialized as leading spaces."""
        return self._whitespace is not None

    def set_indentation(self, level: int) -> None:
        """Change the indentation level, re-materializing whitespace if present."""
        if level < 0:
            msg = f"Line.indentation must be >= 0, got {level}"
            raise ValueError(msg)
        if level == self._indentation:
            return
        if self._whitespace is None:
            self._indentation = level
            return
        content = self.text
        self._indentation = level
        prefix = " " * (level * self._spaces_per_indent)
        self._whitespace = len(prefix)
        self._replace(prefix + content)

    def ensure_whitespace(self) -> None:
        """Materialize the indentation as leading spaces (idempotent)."""
        if self._whitespace is not None:
            return
        prefix = " " * (self._indentation * self._spaces_per_indent)
        raw = self._raw()
        self._whitespace = len(prefix)
        self._replace(prefix + raw)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """Return the line with materialized indentation and no trailing spaces."""
        return self._raw().rstrip(" ")

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        """Return debug representation."""
        return f"Line(indentation={self._indentation}, text={self.text!r})"
