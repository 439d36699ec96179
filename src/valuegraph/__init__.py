"""valuegraph - bounded, cycle-safe text rendering of arbitrary value graphs.

Renders nested Python values (sequences, mappings, dataclasses, exceptions,
dates, arbitrary objects) as readable text for diagnostics. Output stays on
one line while it fits and switches to an indented multi-line layout when
it does not. Cycles, depth, element counts and total lines are bounded.

Public API:
    format_value - Render a value with the built-in strategies
    GraphFormatter - Renderer bound to a strategy registry
    FormattingOptions - Limits and layout preferences
    FormatterRegistry - Ordered strategy lookup
    create_default_registry - Fresh mutable registry with built-ins
    get_shared_registry - Shared frozen registry with built-ins

Strategy authoring:
    ValueFormatter, FormatChild - Strategy protocols
    RenderedGraph - Write surface handed to strategies
    FormattingContext - Settings visible to strategies

Exceptions:
    ValueGraphError - Base exception
    UsageError, StateError, MaxLinesExceededError

Example:
    >>> from valuegraph import format_value
    >>> format_value([1, 2, 3])
    '{1, 2, 3}'

Python 3.11+. Runtime dependency: Babel (date and time patterns).
"""

from .diagnostics import (
    Diagnostic,
    DiagnosticCode,
    MaxLinesExceededError,
    StateError,
    UsageError,
    ValueGraphError,
)
from .formatters import FormatChild, ValueFormatter
from .layout import RenderedGraph
from .runtime import (
    FormatterRegistry,
    FormattingContext,
    FormattingOptions,
    GraphFormatter,
    create_default_registry,
    format_value,
    get_shared_registry,
)

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "FormatChild",
    "FormatterRegistry",
    "FormattingContext",
    "FormattingOptions",
    "GraphFormatter",
    "MaxLinesExceededError",
    "RenderedGraph",
    "StateError",
    "UsageError",
    "ValueFormatter",
    "ValueGraphError",
    "__version__",
    "create_default_registry",
    "format_value",
    "get_shared_registry",
]
