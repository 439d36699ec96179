"""Mapping strategy: ``{[key] = value, ...}``.

Keys and values are both rendered through ``format_child`` so that they
take part in cycle detection and the depth limit. The layout follows the
sequence strategy: one line while everything fits, one entry per line
otherwise.

Python 3.11+.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, cast

from valuegraph.constants import PLACEHOLDER_EMPTY
from valuegraph.core.lookahead import LookaheadSequence

from .sequence import elision_marker

if TYPE_CHECKING:
    from valuegraph.layout.graph import PossibleMultilineFragment, RenderedGraph
    from valuegraph.runtime.options import FormattingContext

    from .base import FormatChild

__all__ = ["MappingFormatter"]


class MappingFormatter:
    """Renders mappings as ``{[key] = value, ...}``.

    Attributes:
        max_items: Entry cap (None = use FormattingContext.max_items)
    """

    max_items: int | None = None

    def can_handle(self, value: object) -> bool:
        return isinstance(value, Mapping)

    def format(
        self,
        value: object,
        graph: RenderedGraph,
        context: FormattingContext,
        format_child: FormatChild,
    ) -> None:
        # Cast is safe: can_handle() accepted value
        mapping = cast(Mapping[object, object], value)
        cap = self.max_items if self.max_items is not None else context.max_items
        entries = LookaheadSequence(mapping.items(), max_items=cap)
        start = graph.keep_on_single_line()
        separators: list[PossibleMultilineFragment] = []

        while entries.advance():
            if entries.has_reached_cap:
                with graph.with_indentation():
                    start.add_line_or_fragment(elision_marker(mapping, cap))
            else:
                key, item = entries.current
                index = entries.index
                graph.add_fragment("[")
                format_child(f"Key-{index}", key)
                graph.add_fragment("] = ")
                format_child(f"Value-{index}", item)
            if not entries.is_last:
                separators.append(graph.add_delimiter(", "))

        if entries.is_empty:
            graph.add_fragment(PLACEHOLDER_EMPTY)
            return

        start.add_fragment_at_end_of_line("}", force_new_line=context.use_line_breaks)
        for separator in reversed(separators):
            separator.break_line_if_wrapped()
        start.add_fragment_at_start("{")
