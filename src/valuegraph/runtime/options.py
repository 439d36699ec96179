"""Rendering configuration.

Provides the frozen dataclass callers pass to a render and the narrower
context handed to every formatting strategy.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from valuegraph.constants import DEFAULT_MAX_DEPTH, DEFAULT_MAX_ITEMS, DEFAULT_MAX_LINES

__all__ = ["FormattingContext", "FormattingOptions"]


@dataclass(frozen=True, slots=True)
class FormattingOptions:
    """Immutable limits and layout preferences for one render.

    All fields have sensible defaults; ``FormattingOptions()`` renders up to
    five child levels, one hundred lines and 32 elements per composite.

    Attributes:
        max_depth: Child levels rendered below the root (default: 5).
            Deeper levels are replaced by a placeholder line.
        max_lines: Output lines kept (default: 100). Longer output is cut
            off with a notice naming the limit.
        max_items: Elements shown per sequence or mapping (default: 32).
            Further elements are summarized by an elision marker.
        use_line_breaks: Prefer multi-line layout for composites even when
            they would fit on one line (default: False).

    Example:
        >>> from valuegraph import FormattingOptions, format_value
        >>> format_value(list(range(5)), FormattingOptions(max_items=2))
        '{0, 1, …3 more…}'
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    max_lines: int = DEFAULT_MAX_LINES
    max_items: int = DEFAULT_MAX_ITEMS
    use_line_breaks: bool = False

    def __post_init__(self) -> None:
        """Validate limits.

        Raises:
            ValueError: If max_depth or max_items is negative, or max_lines
                is less than 1.
        """
        if self.max_depth < 0:
            msg = f"FormattingOptions.max_depth must be >= 0, got {self.max_depth}"
            raise ValueError(msg)
        if self.max_lines < 1:
            msg = f"FormattingOptions.max_lines must be >= 1, got {self.max_lines}"
            raise ValueError(msg)
        if self.max_items < 0:
            msg = f"FormattingOptions.max_items must be >= 0, got {self.max_items}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class FormattingContext:
    """Settings visible to formatting strategies.

    Attributes:
        use_line_breaks: Composites should break lines even when short
        max_items: Default element cap for composites
    """

    use_line_breaks: bool = False
    max_items: int = DEFAULT_MAX_ITEMS

    @classmethod
    def from_options(cls, options: FormattingOptions) -> FormattingContext:
        """Derive the strategy context from render options."""
        return cls(use_line_breaks=options.use_line_breaks, max_items=options.max_items)
