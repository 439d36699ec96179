"""Graph formatter: renders an arbitrary value graph as bounded text.

Architecture:
    GraphFormatter.format() sets up one render (graph, path, context) and
    hands the root to the first matching strategy. Strategies render
    nested values through the ``format_child`` callable they receive,
    which owns cycle detection, the depth limit and indentation.

    Overflow of the line cap aborts the render from wherever it happens;
    format() absorbs it and returns the partial output, which already
    ends in the overflow notice.

Thread Safety:
    A GraphFormatter holds no per-render state and can be shared. The
    reentrancy guard is context-local (contextvars), so concurrent renders
    on different threads or tasks do not interfere.

Python 3.11+.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar, Token
from dataclasses import replace

from valuegraph.constants import PLACEHOLDER_CYCLIC_REFERENCE, PLACEHOLDER_MAX_DEPTH, ROOT_LABEL
from valuegraph.core.recursion import depth_clamp
from valuegraph.diagnostics import ErrorTemplate, MaxLinesExceededError, UsageError
from valuegraph.formatters.base import type_name
from valuegraph.layout.graph import RenderedGraph

from .graph_path import GraphPath
from .options import FormattingContext, FormattingOptions
from .registry import FormatterRegistry, create_default_registry, get_shared_registry

__all__ = ["GraphFormatter", "format_value"]

logger = logging.getLogger(__name__)

# Set while a top-level render runs in the current context. Strategies
# must render nested values through format_child, never through format().
_render_active: ContextVar[bool] = ContextVar("valuegraph_render_active", default=False)


class _ReentrancyGuard:
    """Context manager rejecting nested top-level renders.

    Usage:
        with _ReentrancyGuard():
            ...  # one complete render
    """

    __slots__ = ("_token",)

    def __init__(self) -> None:
        self._token: Token[bool] | None = None

    def __enter__(self) -> _ReentrancyGuard:
        if _render_active.get():
            raise UsageError(ErrorTemplate.reentrant_format())
        self._token = _render_active.set(True)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        if self._token is not None:
            _render_active.reset(self._token)


class _ChildRender:
    """The ``format_child`` callable of one render."""

    __slots__ = ("_context", "_graph", "_max_depth", "_path", "_registry")

    def __init__(
        self,
        registry: FormatterRegistry,
        graph: RenderedGraph,
        path: GraphPath,
        context: FormattingContext,
        max_depth: int,
    ) -> None:
        self._registry = registry
        self._graph = graph
        self._path = path
        self._context = context
        self._max_depth = max_depth

    def __call__(self, label: str, value: object) -> None:
        if not label or label.isspace():
            raise UsageError(ErrorTemplate.blank_child_label(self._path.labels))

        graph = self._graph
        if not self._path.push(label, value):
            graph.add_fragment(PLACEHOLDER_CYCLIC_REFERENCE.format(type_name=type_name(value)))
            return

        try:
            with graph.with_indentation():
                if self._path.is_depth_exceeded():
                    graph.add_line(PLACEHOLDER_MAX_DEPTH.format(max_depth=self._max_depth))
                else:
                    self.dispatch(value)
        finally:
            self._path.pop()

    def dispatch(self, value: object) -> None:
        """Render value with the first strategy that can handle it."""
        formatter = self._registry.select(value)
        logger.debug(
            "Formatting %s at %s with %s", type_name(value), self._path, type(formatter).__name__
        )
        formatter.format(value, self._graph, self._context, self)


class GraphFormatter:
    """Renders value graphs with a registry of strategies.

    Example:
        >>> formatter = GraphFormatter()
        >>> formatter.format([1, 2, 3])
        '{1, 2, 3}'
        >>> formatter.format([], FormattingOptions(use_line_breaks=True))
        '{empty}'
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: FormatterRegistry | None = None) -> None:
        """Initialize formatter.

        Args:
            registry: Strategy registry (default: fresh default registry)
        """
        self._registry = registry if registry is not None else create_default_registry()

    @property
    def registry(self) -> FormatterRegistry:
        """Strategy registry used for dispatch."""
        return self._registry

    def format(self, value: object, options: FormattingOptions | None = None) -> str:
        """Render value as text.

        Args:
            value: Root of the value graph
            options: Limits and layout preferences (default: FormattingOptions())

        Returns:
            Rendered text. When the line cap was hit the text is partial and
            ends with the overflow notice.

        Raises:
            UsageError: If called from within a strategy during a render, or
                a strategy passes a blank child label
        """
        if options is None:
            options = FormattingOptions()

        with _ReentrancyGuard():
            max_depth = depth_clamp(options.max_depth)
            graph = RenderedGraph(max_lines=options.max_lines)
            path = GraphPath(max_depth=max_depth)
            path.push(ROOT_LABEL, value)
            render = _ChildRender(
                self._registry, graph, path, FormattingContext.from_options(options), max_depth
            )
            try:
                render.dispatch(value)
            except MaxLinesExceededError as error:
                logger.debug("Render truncated after %d lines", error.max_lines)
            return graph.to_string()

    def __repr__(self) -> str:
        """Return debug representation."""
        return f"GraphFormatter(registry={self._registry!r})"


# Shared formatter for format_value(); created lazily on first use.
_SHARED_FORMATTER: GraphFormatter | None = None


def format_value(
    value: object, options: FormattingOptions | None = None, **overrides: object
) -> str:
    """Render value with the built-in strategies.

    Args:
        value: Root of the value graph
        options: Limits and layout preferences (default: FormattingOptions())
        **overrides: Individual FormattingOptions fields, applied on top of
            options (e.g. ``max_items=3``)

    Returns:
        Rendered text

    Example:
        >>> format_value({"a": 1})
        '{["a"] = 1}'
        >>> format_value(list(range(40)), max_items=2)
        '{0, 1, …38 more…}'
    """
    global _SHARED_FORMATTER  # noqa: PLW0603
    if _SHARED_FORMATTER is None:
        _SHARED_FORMATTER = GraphFormatter(get_shared_registry())
    if overrides:
        base = options if options is not None else FormattingOptions()
        options = replace(base, **overrides)  # type: ignore[arg-type]
    return _SHARED_FORMATTER.format(value, options)
