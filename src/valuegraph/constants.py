"""Shared constants for valuegraph.

This module provides centralized configuration constants used across the
layout, runtime and formatters packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Rendering limits: Default bounds for depth, lines and items
- Layout: Indentation width and recursion bookkeeping
- Placeholders: Fixed replacement texts for content that is not rendered

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Rendering limits
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_MAX_LINES",
    "DEFAULT_MAX_ITEMS",
    # Layout
    "SPACES_PER_INDENT",
    "FRAMES_PER_LEVEL",
    "RESERVED_FRAMES",
    "ROOT_LABEL",
    # Placeholders
    "PLACEHOLDER_EMPTY",
    "PLACEHOLDER_CYCLIC_REFERENCE",
    "PLACEHOLDER_MAX_DEPTH",
    "PLACEHOLDER_MORE_ITEMS",
    "PLACEHOLDER_MORE_ITEMS_UNKNOWN",
    "PLACEHOLDER_MAX_LINES",
]

# ============================================================================
# RENDERING LIMITS
# ============================================================================
#
# The three limits bound the work done for a single top-level call:
#
# 1. DEPTH (runtime/dispatcher.py):
#    - Tracks: Number of child levels below the root value
#    - Purpose: Keep deep graphs readable and the Python stack bounded
#
# 2. LINES (layout/lines.py):
#    - Tracks: Total output lines of one render
#    - Purpose: Abort runaway output; partial output carries a notice
#
# 3. ITEMS (formatters/sequence.py, formatters/mapping.py):
#    - Tracks: Elements shown per composite
#    - Purpose: Bound consumption of large or infinite iterables
#
# ============================================================================

# Child levels rendered below the root before the depth placeholder is used.
DEFAULT_MAX_DEPTH: int = 5

# Output lines kept before rendering is cut off with a notice.
DEFAULT_MAX_LINES: int = 100

# Elements shown per sequence or mapping before the elision marker.
DEFAULT_MAX_ITEMS: int = 32

# ============================================================================
# LAYOUT
# ============================================================================

# Spaces emitted per indentation level once output spans multiple lines.
SPACES_PER_INDENT: int = 4

# Python frames consumed per rendered child level
# (child render -> dispatch -> strategy -> child render).
FRAMES_PER_LEVEL: int = 4

# Frames kept free for the caller's own stack (test runners, frameworks).
RESERVED_FRAMES: int = 100

# Label of the root entry in every graph path.
ROOT_LABEL: str = "root"

# ============================================================================
# PLACEHOLDERS
# ============================================================================

# Unified placeholder texts. They are fixed and deterministic for a given
# input shape. Templates are format strings - use .format(name=...).

# Composite without any element
PLACEHOLDER_EMPTY: str = "{empty}"

# Value already present on the active path
PLACEHOLDER_CYCLIC_REFERENCE: str = "{{Cyclic reference to type {type_name} detected}}"

# Child level below the configured maximum depth
PLACEHOLDER_MAX_DEPTH: str = (
    "Maximum recursion depth of {max_depth} was reached. "
    "Increase max_depth in FormattingOptions to get more details."
)

# Elided elements of a composite whose size is cheaply known
PLACEHOLDER_MORE_ITEMS: str = "…{count} more…"

# Elided elements of a composite whose size is unknown
PLACEHOLDER_MORE_ITEMS_UNKNOWN: str = "…more…"

# Final notice after the line cap was hit
PLACEHOLDER_MAX_LINES: str = (
    "(Output has exceeded the maximum of {max_lines} lines. "
    "Increase max_lines in FormattingOptions to include more lines.)"
)
