"""Formatting strategy protocols and shared helpers.

A strategy claims values through ``can_handle`` and writes them to a
RenderedGraph through ``format``. Nested values are never rendered
directly: they go through the ``format_child`` callable, which applies
cycle detection, the depth limit and indentation.

Python 3.11+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from valuegraph.layout.graph import RenderedGraph
    from valuegraph.runtime.options import FormattingContext

__all__ = ["FormatChild", "ValueFormatter", "type_name", "write_text"]


class FormatChild(Protocol):
    """Callable rendering a nested value at the current write position.

    Args:
        label: Short, non-blank name of the child (index, key, member)
        value: The nested value

    Raises:
        UsageError: If label is blank
    """

    def __call__(self, label: str, value: object) -> None: ...


class ValueFormatter(Protocol):
    """Rendering strategy for a family of values.

    Strategies are consulted in registry order; the first whose
    ``can_handle`` returns True renders the value.

    Example:
        >>> class PointFormatter:
        ...     def can_handle(self, value: object) -> bool:
        ...         return isinstance(value, Point)
        ...     def format(self, value, graph, context, format_child) -> None:
        ...         graph.add_fragment(f"({value.x}, {value.y})")
    """

    def can_handle(self, value: object) -> bool: ...

    def format(
        self,
        value: object,
        graph: RenderedGraph,
        context: FormattingContext,
        format_child: FormatChild,
    ) -> None: ...


def type_name(value: object) -> str:
    """Qualified type name of value, without module."""
    return type(value).__qualname__


def write_text(graph: RenderedGraph, text: str) -> None:
    """Write possibly multi-line text: first line inline, the rest on new lines."""
    first, *rest = text.splitlines() or [""]
    graph.add_fragment(first)
    for line in rest:
        graph.add_fragment_on_new_line(line)
