"""Sequence strategy: any non-text iterable.

Layout:
    Single line while every element fits:  {1, 2, 3}
    Otherwise one element per line:

        {
            1,
            "multi
            line"
        }

Each separator is written as soon as the element before it is complete.
Whether separators end their line, and where the brackets go, is decided
after all elements were written, because only then is it known whether
the elements wrapped.

Python 3.11+.
"""

from __future__ import annotations

from collections.abc import Iterable, Sized
from typing import TYPE_CHECKING

from valuegraph.constants import (
    PLACEHOLDER_EMPTY,
    PLACEHOLDER_MORE_ITEMS,
    PLACEHOLDER_MORE_ITEMS_UNKNOWN,
)
from valuegraph.core.lookahead import LookaheadSequence

if TYPE_CHECKING:
    from valuegraph.layout.graph import PossibleMultilineFragment, RenderedGraph
    from valuegraph.runtime.options import FormattingContext

    from .base import FormatChild

__all__ = ["SequenceFormatter", "elision_marker"]

_TEXT_TYPES = (str, bytes, bytearray, memoryview)


def elision_marker(value: object, shown: int) -> str:
    """Marker for the elements of value beyond the first ``shown``.

    Uses the exact count when the size is cheaply known.
    """
    if isinstance(value, Sized):
        return PLACEHOLDER_MORE_ITEMS.format(count=len(value) - shown)
    return PLACEHOLDER_MORE_ITEMS_UNKNOWN


class SequenceFormatter:
    """Renders iterables as ``{a, b, c}``.

    Subclasses may set ``max_items`` to override the configured element
    cap for the values they handle.

    Attributes:
        max_items: Element cap (None = use FormattingContext.max_items)
    """

    max_items: int | None = None

    def can_handle(self, value: object) -> bool:
        return (
            isinstance(value, Iterable)
            and not isinstance(value, _TEXT_TYPES)
            and not isinstance(value, type)
        )

    def item_cap(self, context: FormattingContext) -> int:
        """Element cap for this strategy under context."""
        return self.max_items if self.max_items is not None else context.max_items

    def format(
        self,
        value: object,
        graph: RenderedGraph,
        context: FormattingContext,
        format_child: FormatChild,
    ) -> None:
        cap = self.item_cap(context)
        items = LookaheadSequence(value, max_items=cap)  # type: ignore[arg-type]
        start = graph.keep_on_single_line()
        separators: list[PossibleMultilineFragment] = []

        while items.advance():
            if items.has_reached_cap:
                with graph.with_indentation():
                    start.add_line_or_fragment(elision_marker(value, cap))
            else:
                format_child(str(items.index), items.current)
            if not items.is_last:
                separators.append(graph.add_delimiter(", "))

        if items.is_empty:
            graph.add_fragment(PLACEHOLDER_EMPTY)
            return

        start.add_fragment_at_end_of_line("}", force_new_line=context.use_line_breaks)
        # Later separators first so earlier anchors stay valid.
        for separator in reversed(separators):
            separator.break_line_if_wrapped()
        start.add_fragment_at_start("{")
