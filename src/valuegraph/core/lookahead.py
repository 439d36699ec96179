"""Lazy, capped iteration with one element of lookahead.

Composite strategies need to know whether the element they are rendering
is the last one (to decide on separators) without materializing the whole
iterable. LookaheadSequence pulls at most one element ahead of the caller
and stops pulling once the configured cap is reached, so rendering a huge
or infinite iterable consumes at most ``max_items + 1`` elements.

Python 3.11+.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from valuegraph.diagnostics import ErrorTemplate, StateError

__all__ = ["LookaheadSequence"]

T = TypeVar("T")

_MISSING = object()


class LookaheadSequence(Generic[T]):
    """Forward cursor over an iterable with a one-element lookahead.

    Usage:
        items = LookaheadSequence([1, 2, 3], max_items=2)
        while items.advance():
            if items.has_reached_cap:
                ...  # one element past the cap; render an elision marker
            else:
                render(items.current, last=items.is_last)

    State:
        index is -1 before the first advance. Each successful advance()
        moves it forward by one. When the cap is configured, the element
        at index ``max_items`` is the cap position: it is current but is
        never meant to be rendered, and advance() returns False afterwards.

    Attributes:
        max_items: Maximum number of elements to yield before the cap
            position (None = unbounded)
    """

    __slots__ = (
        "_completed",
        "_current",
        "_index",
        "_iterator",
        "_next",
        "_started",
        "max_items",
    )

    def __init__(self, source: Iterable[T], max_items: int | None = None) -> None:
        """Initialize lookahead cursor.

        Args:
            source: Any iterable; it is not consumed until advance()
            max_items: Optional cap on yielded elements (must be >= 0)

        Raises:
            ValueError: If max_items is negative
        """
        if max_items is not None and max_items < 0:
            msg = f"max_items must be >= 0, got {max_items}"
            raise ValueError(msg)
        self.max_items = max_items
        self._iterator: Iterator[T] = iter(source)
        self._index = -1
        self._current: object = _MISSING
        self._next: object = _MISSING
        self._started = False
        self._completed = False

    def advance(self) -> bool:
        """Move to the next element.

        Returns:
            True if a new current element is available, False once the
            source is exhausted or the cap position has been passed
        """
        if self._completed:
            return False

        if not self._started:
            self._started = True
            self._next = self._fetch()

        if self._next is _MISSING or self.has_reached_cap:
            self._completed = True
            self._current = _MISSING
            return False

        self._current = self._next
        self._index += 1
        # Never pull past the cap position.
        self._next = _MISSING if self.has_reached_cap else self._fetch()
        return True

    def _fetch(self) -> object:
        return next(self._iterator, _MISSING)

    @property
    def index(self) -> int:
        """Zero-based position of the current element (-1 before start)."""
        return self._index

    @property
    def current(self) -> T:
        """Current element.

        Raises:
            StateError: Before the first advance() or after exhaustion
        """
        if not self._started:
            raise StateError(ErrorTemplate.lookahead_not_started("current"))
        if self._current is _MISSING:
            raise StateError(ErrorTemplate.lookahead_exhausted())
        return self._current  # type: ignore[return-value]

    @property
    def is_first(self) -> bool:
        """True when the current element is the first one."""
        return self._index == 0

    @property
    def is_last(self) -> bool:
        """True when no further element will be yielded after the current one."""
        has_current = self._current is not _MISSING
        return (has_current and self._next is _MISSING) or self.has_reached_cap

    @property
    def has_reached_cap(self) -> bool:
        """True when the current position is the cap position."""
        return self.max_items is not None and self._index == self.max_items

    @property
    def is_empty(self) -> bool:
        """True when the source yielded no element at all.

        Raises:
            StateError: Before the first advance()
        """
        if not self._started:
            raise StateError(ErrorTemplate.lookahead_not_started("is_empty"))
        return self._index == -1

    def __repr__(self) -> str:
        """Return debug representation."""
        return (
            f"LookaheadSequence(index={self._index}, max_items={self.max_items}, "
            f"completed={self._completed})"
        )
