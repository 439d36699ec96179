"""Hypothesis strategies for valuegraph property-based testing.

Usage:
    from tests.strategies import value_graphs, self_referencing_lists

Event-Emitting Strategies (HypoFuzz-Optimized):
    - value_graphs: Emits ``strategy=graph_{root_kind}``
    - self_referencing_lists: Emits ``strategy=cycle_{position}``
    - nested_chains: Emits ``strategy=chain_{relation}``
"""

from .values import (
    leaf_values,
    nested_chains,
    self_referencing_lists,
    value_graphs,
)

__all__ = [
    "leaf_values",
    "nested_chains",
    "self_referencing_lists",
    "value_graphs",
]
