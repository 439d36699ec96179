"""Rendered graph: the layout surface strategies write to.

A strategy appends fragments to the current line, starts new lines, and
opens indentation scopes. Because a composite cannot know in advance
whether its children will fit on one line, it captures positions
(anchors) before writing children and decides afterwards where opening
brackets go and whether separators end their line:

    start = graph.keep_on_single_line()
    ...  # children are written
    start.add_fragment_at_start("{")  # inline, or on its own line if wrapped

Content written after an anchor comes from child renders, so when an
anchor splits a line the remainder is moved one level deeper than the
anchor itself.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from valuegraph.constants import DEFAULT_MAX_LINES

from .line import Line
from .lines import LineCollection

__all__ = ["Anchor", "IndentationScope", "PossibleMultilineFragment", "RenderedGraph"]


class IndentationScope:
    """Context manager raising the graph indentation by one level.

    The level is restored exactly once on exit, also when the nested
    render raises.

    Usage:
        with graph.with_indentation():
            graph.add_fragment_on_new_line("a = ")
    """

    __slots__ = ("_graph",)

    def __init__(self, graph: RenderedGraph) -> None:
        self._graph = graph

    def __enter__(self) -> IndentationScope:
        self._graph._indentation += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self._graph._indentation -= 1


class RenderedGraph:
    """Output of one render: a line store plus the line being written.

    Attributes:
        indentation: Level used for lines started from now on
    """

    __slots__ = ("_current", "_indentation", "_lines")

    def __init__(self, max_lines: int = DEFAULT_MAX_LINES) -> None:
        self._lines = LineCollection(max_lines)
        self._current: Line | None = None
        self._indentation = 0

    @property
    def lines(self) -> LineCollection:
        """Underlying line store."""
        return self._lines

    @property
    def line_count(self) -> int:
        """Number of lines written so far."""
        return self._lines.count

    @property
    def indentation(self) -> int:
        """Current indentation level."""
        return self._indentation

    @property
    def current_line(self) -> Line | None:
        """Line receiving fragments, or None after a line was completed."""
        return self._current

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def add_fragment(self, fragment: str) -> None:
        """Append to the current line, starting one if there is none."""
        if self._current is None:
            line = Line(self._indentation)
            self._lines.add(line)
            self._current = line
        self._current.append(fragment)

    def add_line(self, line: str) -> None:
        """Write a complete standalone line.

        The current line is flushed first; afterwards there is no current
        line, so the next fragment starts a new one.
        """
        self._flush_current()
        standalone = Line(self._indentation, line)
        self._lines.add(standalone)
        standalone.flush()

    def add_fragment_on_new_line(self, fragment: str) -> None:
        """Flush the current line and start a new one with fragment."""
        self._flush_current()
        self.add_fragment(fragment)

    def add_line_or_fragment(self, fragment: str) -> None:
        """Continue inline while output is a single line, else start a new line."""
        if self._lines.count <= 1:
            self.add_fragment(fragment)
        else:
            self.add_line(fragment)

    def add_delimiter(self, delimiter: str) -> PossibleMultilineFragment:
        """Append a separator to the end of the output.

        The separator joins the last line even when that line is already
        complete. Returns the position right after it, whose
        ``break_line_if_wrapped()`` later moves what follows onto a new line.
        """
        target = self._current if self._current is not None else self._lines.last
        if target is None:
            self.add_fragment(delimiter)
        else:
            target.append(delimiter)
        return PossibleMultilineFragment(self)

    def with_indentation(self) -> IndentationScope:
        """Scope raising the indentation by one level."""
        return IndentationScope(self)

    def get_anchor(self) -> Anchor:
        """Capture the current write position."""
        return Anchor(self)

    def keep_on_single_line(self) -> PossibleMultilineFragment:
        """Capture a position whose later insertions adapt to wrapping."""
        return PossibleMultilineFragment(self)

    def _flush_current(self) -> None:
        if self._current is not None:
            self._current.flush()
            self._current = None

    def _split(self, line: Line, index: int) -> Line | None:
        remainder = self._lines.split_line(line, index)
        if remainder is not None and line is self._current:
            self._current = remainder
        return remainder

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """Return the rendered text."""
        return self._lines.to_string()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        """Return debug representation."""
        return (
            f"RenderedGraph(lines={self._lines.count}, "
            f"indentation={self._indentation})"
        )


class Anchor:
    """Recorded write position inside a rendered graph.

    When the graph had no current line at capture time the anchor is
    pending: it stands for the start of whatever line follows ``line``
    (or the first line when ``line`` is None).
    """

    __slots__ = ("_graph", "_indentation", "_line", "_offset", "_pending")

    def __init__(self, graph: RenderedGraph) -> None:
        self._graph = graph
        self._indentation = graph.indentation
        current = graph.current_line
        if current is not None:
            self._line: Line | None = current
            self._offset = current.length
            self._pending = False
        else:
            self._line = graph.lines.last
            self._offset = self._line.length if self._line is not None else 0
            self._pending = True

    @property
    def line(self) -> Line | None:
        """Captured line (None = before the first line)."""
        return self._line

    @property
    def offset(self) -> int:
        """Logical offset within the captured line."""
        return self._offset

    @property
    def is_pending(self) -> bool:
        """True when the anchor stands for the start of the following line."""
        return self._pending

    @property
    def indentation(self) -> int:
        """Indentation level at capture time."""
        return self._indentation

    def has_content_beyond(self) -> bool:
        """True when anything was written after the anchor since capture."""
        lines = self._graph.lines
        if self._pending:
            return lines.line_after(self._line) is not None
        line = self._captured_line()
        return line.length > self._offset or lines.has_lines_beyond(line)

    def insert_fragment(self, fragment: str) -> None:
        """Insert fragment at the anchor, moving what follows to a new line.

        A pending anchor appends to its line instead. Before the first line
        it prefixes a sole line, or becomes a new first line above several.
        """
        graph = self._graph
        lines = graph.lines
        if self._pending:
            if self._line is None:
                top = lines.insert_at_line_start_or_top(fragment, self._indentation)
                if lines.count > 1:
                    self._nest(lines.line_after(top))
            else:
                self._line.append(fragment)
                self._nest(lines.line_after(self._line))
            return

        line = self._captured_line()
        line.insert(self._offset, fragment)
        remainder = graph._split(line, self._offset + len(fragment))
        self._nest(remainder if remainder is not None else lines.line_after(line))

    def break_line(self) -> None:
        """Move what follows the anchor on its line to a new, nested line."""
        graph = self._graph
        if self._pending:
            self._nest(graph.lines.line_after(self._line))
            return

        line = self._captured_line()
        remainder = graph._split(line, self._offset)
        self._nest(remainder if remainder is not None else graph.lines.line_after(line))

    def insert_line_or_fragment(self, fragment: str) -> None:
        """Insert inline if nothing follows the anchor, else on a line of its own.

        The own line goes before the content following the anchor when the
        anchor sat at the start of an empty line, otherwise directly after
        the anchor's line.
        """
        graph = self._graph
        if not self.has_content_beyond():
            self.insert_inline(fragment)
            return

        new_line = Line(self._indentation, fragment)
        if self._pending:
            if self._line is None:
                graph.lines.insert_at_top(new_line)
            else:
                graph.lines.insert_after(self._line, new_line)
            return

        line = self._captured_line()
        if self._offset == 0:
            graph.lines.insert_before(line, new_line)
        else:
            graph.lines.insert_after(line, new_line)

    def insert_inline(self, fragment: str) -> None:
        """Insert fragment at the anchor position without any line break."""
        graph = self._graph
        if not self._pending:
            self._captured_line().insert(self._offset, fragment)
            return

        following = graph.lines.line_after(self._line)
        if following is None:
            graph.add_fragment(fragment)
        elif self._line is None:
            graph.lines.insert_at_line_start_or_top(fragment, self._indentation)
        else:
            following.insert(0, fragment)

    def insert_line(self, fragment: str) -> None:
        """Put fragment on a new line at the anchor position.

        A non-blank prefix before the anchor stays on its line; content
        after the anchor is nested one level deeper.
        """
        graph = self._graph
        lines = graph.lines
        new_line = Line(self._indentation, fragment)

        if self._pending:
            if self._line is None:
                lines.insert_at_top(new_line)
            else:
                lines.insert_after(self._line, new_line)
            self._nest(lines.line_after(new_line))
            return

        line = self._captured_line()
        if line.is_blank:
            line.insert(0, fragment)
            line.set_indentation(self._indentation)
            self._nest(lines.line_after(line))
            return
        if not line.text[: self._offset].strip():
            lines.insert_before(line, new_line)
            self._nest(line)
            return

        remainder = graph._split(line, self._offset)
        lines.insert_after(line, new_line)
        if remainder is None and line is graph.current_line:
            graph._flush_current()
        self._nest(lines.line_after(new_line))

    def _captured_line(self) -> Line:
        line = self._line
        assert line is not None  # Type narrowing: only pending anchors lack a line
        return line

    def _nest(self, line: Line | None) -> None:
        if line is not None:
            line.set_indentation(self._indentation + 1)

    def __repr__(self) -> str:
        """Return debug representation."""
        return (
            f"Anchor(line={self._line!r}, offset={self._offset}, "
            f"pending={self._pending}, indentation={self._indentation})"
        )


class PossibleMultilineFragment:
    """Position whose insertions stay inline unless the output wrapped.

    The output has wrapped when lines were added after capture beyond the
    line the captured position itself needs.
    """

    __slots__ = ("_anchor", "_graph", "_line_count")

    def __init__(self, graph: RenderedGraph) -> None:
        self._graph = graph
        self._anchor = Anchor(graph)
        self._line_count = graph.line_count

    @property
    def anchor(self) -> Anchor:
        """Underlying anchor."""
        return self._anchor

    @property
    def has_wrapped(self) -> bool:
        """True when content after the capture spans more than one line."""
        count = self._graph.line_count
        if not self._anchor.is_pending:
            return count > self._line_count
        if count > self._line_count + 1:
            return True
        # One new line that is already complete: the next fragment wraps.
        return count > self._line_count and self._graph.current_line is None

    def add_fragment_at_start(self, fragment: str) -> None:
        """Insert at the captured position; on its own line if wrapped."""
        if self.has_wrapped:
            self._anchor.insert_line(fragment)
        else:
            self._anchor.insert_inline(fragment)

    def add_line_or_fragment(self, fragment: str) -> None:
        """Write a standalone line if wrapped, else continue inline."""
        if self.has_wrapped:
            self._graph.add_line(fragment)
        else:
            self._graph.add_fragment(fragment)

    def add_fragment_at_end_of_line(self, fragment: str, *, force_new_line: bool = False) -> None:
        """Append at the end; on a new line if wrapped or forced."""
        if force_new_line or self.has_wrapped:
            self._graph.add_fragment_on_new_line(fragment)
        else:
            self._graph.add_fragment(fragment)

    def break_line_if_wrapped(self) -> None:
        """Move the content after the captured position to a new line if wrapped."""
        if self.has_wrapped:
            self._anchor.break_line()

    def __repr__(self) -> str:
        """Return debug representation."""
        return f"PossibleMultilineFragment(anchor={self._anchor!r}, lines={self._line_count})"
