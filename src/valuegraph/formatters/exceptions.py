"""Strategy for exceptions, including chains and groups.

    ValueError with message "bad input"
        Caused by: KeyError with message "'k'"

Chained and grouped exceptions are rendered through ``format_child`` so an
exception chain that loops back on itself ends in a cyclic-reference
placeholder instead of recursing.

Python 3.11+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from .base import write_text

if TYPE_CHECKING:
    from valuegraph.layout.graph import RenderedGraph
    from valuegraph.runtime.options import FormattingContext

    from .base import FormatChild

__all__ = ["ExceptionFormatter"]


def _qualified_name(error: BaseException) -> str:
    cls = type(error)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


class ExceptionFormatter:
    """Renders exceptions with their message, chain and sub-exceptions."""

    def can_handle(self, value: object) -> bool:
        return isinstance(value, BaseException)

    def format(
        self,
        value: object,
        graph: RenderedGraph,
        context: FormattingContext,
        format_child: FormatChild,
    ) -> None:
        # Cast is safe: can_handle() accepted value
        error = cast(BaseException, value)
        write_text(graph, f'{_qualified_name(error)} with message "{error}"')

        if isinstance(error, BaseExceptionGroup):
            for index, inner in enumerate(error.exceptions):
                with graph.with_indentation():
                    graph.add_fragment_on_new_line(f"[{index}] ")
                format_child(f"exceptions-{index}", inner)

        if error.__cause__ is not None:
            self._chain(graph, format_child, "Caused by: ", "__cause__", error.__cause__)
        elif error.__context__ is not None and not error.__suppress_context__:
            self._chain(graph, format_child, "While handling: ", "__context__", error.__context__)

    @staticmethod
    def _chain(
        graph: RenderedGraph,
        format_child: FormatChild,
        prefix: str,
        label: str,
        linked: BaseException,
    ) -> None:
        with graph.with_indentation():
            graph.add_fragment_on_new_line(prefix)
        format_child(label, linked)
