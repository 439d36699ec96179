"""Core utilities shared across the layout and runtime layers.

This package provides foundational utilities that the layout layer
(lines, anchors) and the runtime layer (dispatch, strategies) depend on:

    core <- layout <- runtime <- formatters

Exports:
    LookaheadSequence: Capped iteration with one element of lookahead
    depth_clamp: Clamp a depth limit against the recursion limit

Python 3.11+.
"""

from .lookahead import LookaheadSequence
from .recursion import depth_clamp

__all__ = ["LookaheadSequence", "depth_clamp"]
