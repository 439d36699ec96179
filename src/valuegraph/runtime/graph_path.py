"""Active path from the root value to the value being rendered.

Cycle detection is by object identity along the current root-to-node path
only. The same object reached through two different paths is rendered
twice; it is a cycle only when it is its own ancestor.

Thread Safety:
    A GraphPath is created per render and never shared.

Python 3.11+.
"""

from __future__ import annotations

import datetime
import decimal
import enum
import fractions
import uuid
from dataclasses import dataclass, field

from valuegraph.constants import DEFAULT_MAX_DEPTH

__all__ = ["GraphPath"]

# Immutable leaf types. Identity is meaningless for them (small ints and
# interned strings are shared), so they never count as cycles.
_UNTRACKED_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    decimal.Decimal,
    fractions.Fraction,
    enum.Enum,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
)


def _identity(value: object) -> int | None:
    if isinstance(value, _UNTRACKED_TYPES):
        return None
    return id(value)


@dataclass(slots=True)
class GraphPath:
    """Stack of (label, value) pairs from the root to the current node.

    Performance: Uses both list (for ordered path) and set (for O(1)
    lookup) to keep cycle detection constant time while preserving the
    labels for diagnostics. Values are held alongside their ids so that an
    id cannot be reused by another object while it is on the path.

    Attributes:
        max_depth: Child levels allowed below the root
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    _labels: list[str] = field(default_factory=list)
    _values: list[object] = field(default_factory=list)
    _identities: list[int | None] = field(default_factory=list)
    _seen: set[int] = field(default_factory=set)

    def push(self, label: str, value: object) -> bool:
        """Push value onto the path unless it is already on it.

        Returns:
            False (and leaves the path unchanged) when value is its own
            ancestor, True otherwise
        """
        identity = _identity(value)
        if identity is not None:
            if identity in self._seen:
                return False
            self._seen.add(identity)
        self._labels.append(label)
        self._values.append(value)
        self._identities.append(identity)
        return True

    def pop(self) -> str:
        """Pop the innermost entry and return its label."""
        identity = self._identities.pop()
        self._values.pop()
        if identity is not None:
            self._seen.discard(identity)
        return self._labels.pop()

    def contains(self, value: object) -> bool:
        """Check if value is on the path (cycle detection)."""
        identity = _identity(value)
        return identity is not None and identity in self._seen

    @property
    def depth(self) -> int:
        """Child levels below the root of the innermost entry (root = 0)."""
        return len(self._labels) - 1

    def is_depth_exceeded(self) -> bool:
        """Check if the innermost entry lies beyond max_depth."""
        return self.depth > self.max_depth

    @property
    def labels(self) -> tuple[str, ...]:
        """Labels from root to the innermost entry."""
        return tuple(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __str__(self) -> str:
        return ".".join(self._labels)
