"""Ordered registry of formatting strategies.

Custom strategies are consulted before the built-ins, most recently
registered first, so a registration can override how any type renders.

Python 3.11+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from valuegraph.diagnostics import ErrorTemplate, UsageError
from valuegraph.formatters import DefaultFormatter, ValueFormatter, builtin_formatters

__all__ = ["FormatterRegistry", "create_default_registry", "get_shared_registry"]

logger = logging.getLogger(__name__)

_FALLBACK: ValueFormatter = DefaultFormatter()


class FormatterRegistry:
    """Strategy lookup for GraphFormatter.

    Supports list-like introspection:
        - __iter__: Iterate over strategies in lookup order
        - __len__: Count strategies
        - __contains__: Check if a strategy instance is registered

    Example:
        >>> registry = create_default_registry()
        >>> registry.register(PointFormatter())
        >>> registry.select(Point(1, 2))
        <PointFormatter ...>
    """

    __slots__ = ("_builtins", "_custom", "_frozen")

    def __init__(self, builtins: Iterable[ValueFormatter] = ()) -> None:
        """Initialize registry.

        Args:
            builtins: Strategies consulted after all custom strategies
        """
        self._builtins: tuple[ValueFormatter, ...] = tuple(builtins)
        self._custom: list[ValueFormatter] = []
        self._frozen = False

    def register(self, formatter: ValueFormatter) -> None:
        """Add a strategy ahead of all previously registered ones.

        Raises:
            TypeError: If the registry is frozen
        """
        if self._frozen:
            raise TypeError(ErrorTemplate.registry_frozen())
        self._custom.insert(0, formatter)
        logger.debug("Registered formatter %s", type(formatter).__name__)

    def unregister(self, formatter: ValueFormatter) -> None:
        """Remove a strategy added with register().

        Raises:
            TypeError: If the registry is frozen
            UsageError: If formatter was not registered
        """
        if self._frozen:
            raise TypeError(ErrorTemplate.registry_frozen())
        for position, candidate in enumerate(self._custom):
            if candidate is formatter:
                del self._custom[position]
                logger.debug("Unregistered formatter %s", type(formatter).__name__)
                return
        raise UsageError(ErrorTemplate.formatter_not_registered(type(formatter).__name__))

    def select(self, value: object) -> ValueFormatter:
        """First strategy that can handle value.

        Falls back to DefaultFormatter when no strategy claims the value,
        so selection always succeeds.
        """
        for formatter in self:
            if formatter.can_handle(value):
                return formatter
        return _FALLBACK

    def freeze(self) -> None:
        """Reject further register()/unregister() calls."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        """True once freeze() was called."""
        return self._frozen

    def copy(self) -> FormatterRegistry:
        """Create an unfrozen shallow copy.

        Strategy instances are shared; registrations on the copy do not
        affect the original.
        """
        new_registry = FormatterRegistry(self._builtins)
        new_registry._custom = self._custom.copy()
        return new_registry

    def __iter__(self) -> Iterator[ValueFormatter]:
        yield from self._custom
        yield from self._builtins

    def __len__(self) -> int:
        return len(self._custom) + len(self._builtins)

    def __contains__(self, formatter: object) -> bool:
        return any(candidate is formatter for candidate in self)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"FormatterRegistry(custom={len(self._custom)}, "
            f"builtins={len(self._builtins)}, frozen={self._frozen})"
        )


def create_default_registry() -> FormatterRegistry:
    """Create a new FormatterRegistry holding the built-in strategies.

    Each call returns a fresh, mutable instance.

    Example:
        >>> registry = create_default_registry()
        >>> registry.register(PointFormatter())
        >>> formatter = GraphFormatter(registry)
    """
    return FormatterRegistry(builtin_formatters())


# Module-level cached default registry for sharing across formatters.
# Initialized lazily on first access to avoid import-time side effects.
_SHARED_REGISTRY: FormatterRegistry | None = None


def get_shared_registry() -> FormatterRegistry:
    """Get a shared, frozen FormatterRegistry with the built-in strategies.

    Immutability:
        The returned registry is FROZEN. Calling register() on it raises
        TypeError. To add custom strategies, use copy() or
        create_default_registry().
    """
    global _SHARED_REGISTRY  # noqa: PLW0603
    if _SHARED_REGISTRY is None:
        _SHARED_REGISTRY = create_default_registry()
        _SHARED_REGISTRY.freeze()
    return _SHARED_REGISTRY
