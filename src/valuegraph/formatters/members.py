"""Strategy for dataclass instances.

    Point
    {
        x = 1,
        y = 2
    }

Members are rendered through ``format_child`` with the field name as
label. Fields declared with ``repr=False`` are skipped.

Python 3.11+.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from .base import type_name

if TYPE_CHECKING:
    from valuegraph.layout.graph import RenderedGraph
    from valuegraph.runtime.options import FormattingContext

    from .base import FormatChild

__all__ = ["DataclassFormatter"]


class DataclassFormatter:
    """Renders dataclass instances member by member."""

    def can_handle(self, value: object) -> bool:
        return dataclasses.is_dataclass(value) and not isinstance(value, type)

    def format(
        self,
        value: object,
        graph: RenderedGraph,
        context: FormattingContext,
        format_child: FormatChild,
    ) -> None:
        graph.add_fragment(type_name(value))
        fields = dataclasses.fields(value)  # type: ignore[arg-type]
        names = [field.name for field in fields if field.repr]
        if not names:
            graph.add_fragment(" { }")
            return

        graph.add_line("{")
        for position, name in enumerate(names):
            with graph.with_indentation():
                graph.add_fragment_on_new_line(f"{name} = ")
            format_child(name, getattr(value, name))
            if position < len(names) - 1:
                graph.get_anchor().insert_fragment(",")
        graph.add_fragment_on_new_line("}")
