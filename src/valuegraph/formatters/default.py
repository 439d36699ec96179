"""Catch-all strategy based on ``repr()``.

Python 3.11+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .base import type_name, write_text

if TYPE_CHECKING:
    from valuegraph.layout.graph import RenderedGraph
    from valuegraph.runtime.options import FormattingContext

    from .base import FormatChild

__all__ = ["DefaultFormatter", "safe_repr"]

logger = logging.getLogger(__name__)


def safe_repr(value: object) -> str:
    """Return repr(value), or a placeholder when the object's __repr__ raises."""
    try:
        return repr(value)
    except Exception as error:  # noqa: BLE001 - arbitrary user __repr__
        logger.debug("repr() of %s failed: %s", type_name(value), error)
        return f"<{type_name(value)} (repr failed: {type(error).__name__})>"


class DefaultFormatter:
    """Renders any value through its ``repr``; multi-line reprs keep their lines."""

    def can_handle(self, value: object) -> bool:
        return True

    def format(
        self,
        value: object,
        graph: RenderedGraph,
        context: FormattingContext,
        format_child: FormatChild,
    ) -> None:
        write_text(graph, safe_repr(value))
