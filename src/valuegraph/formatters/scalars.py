"""Strategies for None, text and enum members.

Python 3.11+.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, cast

from .base import type_name, write_text

if TYPE_CHECKING:
    from valuegraph.layout.graph import RenderedGraph
    from valuegraph.runtime.options import FormattingContext

    from .base import FormatChild

__all__ = ["EnumFormatter", "NoneFormatter", "StringFormatter"]


class NoneFormatter:
    """Renders ``None``."""

    def can_handle(self, value: object) -> bool:
        return value is None

    def format(
        self,
        value: object,
        graph: RenderedGraph,
        context: FormattingContext,
        format_child: FormatChild,
    ) -> None:
        graph.add_fragment("None")


class StringFormatter:
    """Renders text in double quotes.

    Multi-line text keeps its line structure: each source line becomes one
    output line, with the quotes around the whole text.
    """

    def can_handle(self, value: object) -> bool:
        return isinstance(value, str)

    def format(
        self,
        value: object,
        graph: RenderedGraph,
        context: FormattingContext,
        format_child: FormatChild,
    ) -> None:
        write_text(graph, f'"{value}"')


class EnumFormatter:
    """Renders enum members as ``Color.RED {value: 1}``."""

    def can_handle(self, value: object) -> bool:
        return isinstance(value, enum.Enum)

    def format(
        self,
        value: object,
        graph: RenderedGraph,
        context: FormattingContext,
        format_child: FormatChild,
    ) -> None:
        # Cast is safe: can_handle() accepted value
        member = cast(enum.Enum, value)
        # Flag combinations may have no name on older interpreters.
        name = member.name if member.name is not None else str(member)
        graph.add_fragment(f"{type_name(member)}.{name} {{value: {member.value!r}}}")
