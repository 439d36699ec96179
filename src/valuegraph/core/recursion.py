"""Recursion budget for nested rendering.

Every rendered child level costs several Python frames (child render,
dispatch, strategy). A configured maximum depth is therefore only safe when
the interpreter's recursion limit leaves room for all of them.

Python 3.11+.
"""

from __future__ import annotations

import logging
import sys

from valuegraph.constants import FRAMES_PER_LEVEL, RESERVED_FRAMES

__all__ = ["depth_clamp"]

logger = logging.getLogger(__name__)


def depth_clamp(
    requested_depth: int,
    frames_per_level: int = FRAMES_PER_LEVEL,
    reserve_frames: int = RESERVED_FRAMES,
) -> int:
    """Clamp requested depth against Python recursion limit.

    Validates requested depth against sys.getrecursionlimit() to prevent
    RecursionError on systems with constrained stack limits. Logs warning
    if clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        frames_per_level: Stack frames consumed per rendered level
        reserve_frames: Stack frames to reserve for caller overhead

    Returns:
        Safe depth value, clamped if necessary (never below 0)

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(500)
        >>> depth_clamp(5)  # OK, within limit
        5
        >>> depth_clamp(1000)  # (500 - 100) // 4
        100
    """
    max_safe_depth = max(0, (sys.getrecursionlimit() - reserve_frames) // frames_per_level)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
