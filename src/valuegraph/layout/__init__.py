"""Layout layer: lines, line store and the rendered graph.

Exports:
    Line: One output line with two-phase storage
    LineCollection: Capped, ordered line store
    RenderedGraph: Write surface handed to formatting strategies
    Anchor: Recorded write position
    PossibleMultilineFragment: Position that adapts to wrapping

Python 3.11+. Zero external dependencies.
"""

from .graph import Anchor, IndentationScope, PossibleMultilineFragment, RenderedGraph
from .line import BuildingState, FlushedState, Line, LineState
from .lines import LineCollection

__all__ = [
    "Anchor",
    "BuildingState",
    "FlushedState",
    "IndentationScope",
    "Line",
    "LineCollection",
    "LineState",
    "PossibleMultilineFragment",
    "RenderedGraph",
]
