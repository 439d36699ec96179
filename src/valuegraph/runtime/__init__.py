"""Runtime layer: options, graph path, strategy registry and dispatch.

Python 3.11+.
"""

from .dispatcher import GraphFormatter, format_value
from .graph_path import GraphPath
from .options import FormattingContext, FormattingOptions
from .registry import FormatterRegistry, create_default_registry, get_shared_registry

__all__ = [
    "FormatterRegistry",
    "FormattingContext",
    "FormattingOptions",
    "GraphFormatter",
    "GraphPath",
    "create_default_registry",
    "format_value",
    "get_shared_registry",
]
