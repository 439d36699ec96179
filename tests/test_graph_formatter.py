"""Tests for runtime/dispatcher.py.

Tests GraphFormatter end to end: layout of composites, cycle and depth
placeholders, the item and line caps, reentrancy and custom strategies.

Python 3.11+.
"""

from __future__ import annotations

import itertools
import re

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from tests.strategies import nested_chains, self_referencing_lists, value_graphs
from valuegraph import (
    FormattingOptions,
    GraphFormatter,
    UsageError,
    create_default_registry,
    format_value,
)
from valuegraph.diagnostics import DiagnosticCode
from valuegraph.formatters import SequenceFormatter

DEPTH_NOTICE = (
    "Maximum recursion depth of {depth} was reached. "
    "Increase max_depth in FormattingOptions to get more details."
)


# ============================================================================
# Sequences
# ============================================================================


class TestSequenceLayout:
    """Test single-line and multi-line sequence layout."""

    def test_flat_list(self) -> None:
        """A short list renders on one line."""
        assert format_value([1, 2, 3]) == "{1, 2, 3}"

    def test_empty_list(self) -> None:
        """An empty list renders the empty placeholder."""
        assert format_value([]) == "{empty}"

    def test_tuple_set_range(self) -> None:
        """Any non-text iterable is a sequence."""
        assert format_value((1,)) == "{1}"
        assert format_value({5}) == "{5}"
        assert format_value(range(3)) == "{0, 1, 2}"

    def test_nested_lists_stay_inline(self) -> None:
        """Nested short lists keep a single line."""
        assert format_value([[1, 2], [3, 4]]) == "{{1, 2}, {3, 4}}"

    def test_elision_with_count(self) -> None:
        """40 elements with the default cap show 32 and an exact marker."""
        expected = "{" + ", ".join(str(i) for i in range(32)) + ", …8 more…}"

        assert format_value(list(range(40))) == expected

    def test_elision_unknown_size(self) -> None:
        """Infinite iterables end in a generic marker."""
        assert format_value(itertools.count(), max_items=3) == "{0, 1, 2, …more…}"

    def test_use_line_breaks(self) -> None:
        """The multi-line preference puts each element on its own line."""
        assert format_value([1, 2], use_line_breaks=True) == "{\n    1,\n    2\n}"

    def test_multiline_element_wraps_list(self) -> None:
        """A multi-line element forces the surrounding list to wrap."""
        assert format_value([1, "a\nb", 3]) == '{\n    1,\n    "a\n    b",\n    3\n}'

    def test_strategy_item_cap_override(self) -> None:
        """A strategy's own max_items wins over the configured cap."""

        class SingleItemFormatter(SequenceFormatter):
            max_items = 1

            def can_handle(self, value: object) -> bool:
                return isinstance(value, tuple)

        registry = create_default_registry()
        registry.register(SingleItemFormatter())
        formatter = GraphFormatter(registry)

        assert formatter.format((1, 2, 3)) == "{1, …2 more…}"
        assert formatter.format([1, 2, 3]) == "{1, 2, 3}"


# ============================================================================
# Mappings
# ============================================================================


class TestMappingLayout:
    """Test mapping layout."""

    def test_flat_mapping(self) -> None:
        """Entries render as [key] = value."""
        assert format_value({"a": 1, "b": None}) == '{["a"] = 1, ["b"] = None}'

    def test_empty_mapping(self) -> None:
        """An empty mapping renders the empty placeholder."""
        assert format_value({}) == "{empty}"

    def test_nested_value_inline(self) -> None:
        """Short nested values stay on the entry line."""
        assert format_value({"a": [1, 2]}) == '{["a"] = {1, 2}}'

    def test_multiline_value_wraps_mapping(self) -> None:
        """A multi-line value wraps the mapping one entry per line."""
        assert format_value({"a": "x\ny"}) == '{\n    ["a"] = "x\n    y"\n}'

    def test_wrapped_nested_list_value(self) -> None:
        """A wrapped list value opens its own block below the entry."""
        result = format_value({"a": [1, 2]}, use_line_breaks=True)

        assert result == '{\n    ["a"] =\n    {\n        1,\n        2\n    }\n}'

    def test_entry_cap(self) -> None:
        """Entries beyond the cap are summarized."""
        assert format_value({0: 0, 1: 1, 2: 2}, max_items=1) == "{[0] = 0, …2 more…}"


# ============================================================================
# Cycles and Depth
# ============================================================================


class TestCyclesAndDepth:
    """Test cycle and depth placeholders."""

    def test_self_reference(self) -> None:
        """A list containing itself renders one cyclic placeholder."""
        value: list[object] = [1]
        value.append(value)

        assert format_value(value) == "{1, {Cyclic reference to type list detected}}"

    def test_indirect_cycle(self) -> None:
        """A two-step cycle is detected at the repeated ancestor."""
        first: list[object] = []
        second: list[object] = [first]
        first.append(second)

        result = format_value(first)

        assert result == "{{{Cyclic reference to type list detected}}}"

    def test_cyclic_mapping(self) -> None:
        """Mappings participate in cycle detection."""
        value: dict[str, object] = {}
        value["self"] = value

        assert format_value(value) == '{["self"] = {Cyclic reference to type dict detected}}'

    def test_shared_object_is_not_a_cycle(self) -> None:
        """The same object under two siblings renders twice."""
        shared = [1]

        assert format_value([shared, shared]) == "{{1}, {1}}"

    def test_depth_limit(self) -> None:
        """Eight nested levels show five child levels and a depth notice."""
        value: list[object] = ["leaf"]
        for _ in range(7):
            value = [value]

        lines = ["    " * level + "{" for level in range(6)]
        lines.append("    " * 6 + DEPTH_NOTICE.format(depth=5))
        lines.extend("    " * level + "}" for level in reversed(range(6)))

        assert format_value(value) == "\n".join(lines)

    def test_zero_depth(self) -> None:
        """max_depth=0 renders only the root."""
        result = format_value([1], max_depth=0)

        assert result == "{\n    " + DEPTH_NOTICE.format(depth=0) + "\n}"


# ============================================================================
# Line Cap
# ============================================================================


class TestLineCap:
    """Test truncation by max_lines."""

    def test_overflow_notice(self) -> None:
        """Output longer than the cap ends with the notice."""
        result = format_value(list(range(200)), max_items=200, use_line_breaks=True)
        lines = result.split("\n")

        assert len(lines) <= 102
        assert "maximum" in lines[-1]
        assert "100" in lines[-1]

    def test_truncated_sequence_keeps_every_item(self) -> None:
        """Partial output still separates every item and loses none."""
        result = format_value(list(range(200)), max_items=200, use_line_breaks=True, max_lines=6)
        lines = result.split("\n")
        body = [line.strip().rstrip(",") for line in lines[:-2]]

        assert lines[-2] == ""
        assert "maximum of 6 lines" in lines[-1]
        numbers = [int(part) for line in body if line != "}" for part in line.split(", ")]
        assert numbers == list(range(200))

    def test_truncated_mapping_keeps_entries_apart(self) -> None:
        """Entries of a cut-off mapping remain separated."""
        mapping = {f"k{index}": index for index in range(10)}
        result = format_value(mapping, use_line_breaks=True, max_lines=4)
        body = "\n".join(result.split("\n")[:-2])

        assert "maximum of 4 lines" in result
        entries = re.findall(r'\["k(\d+)"\] = (\d+)', body)
        assert entries == [(str(index), str(index)) for index in range(10)]
        assert body.count(",") == 9
        assert re.search(r"\d\[", body) is None

    def test_small_cap(self) -> None:
        """Even a one-line cap produces the notice."""
        result = format_value(["a\nb"], max_lines=1)
        lines = result.split("\n")

        assert len(lines) <= 3
        assert "maximum of 1 lines" in lines[-1]

    def test_output_within_cap_untouched(self) -> None:
        """Output that fits is not truncated."""
        assert "maximum" not in format_value([1, 2], max_lines=1)


# ============================================================================
# Contract Enforcement
# ============================================================================


class ReentrantFormatter:
    """Misbehaving strategy calling the top-level API."""

    def can_handle(self, value: object) -> bool:
        return isinstance(value, int)

    def format(self, value, graph, context, format_child) -> None:  # noqa: ANN001
        graph.add_fragment(format_value(str(value)))


class BlankLabelFormatter:
    """Misbehaving strategy passing a blank child label."""

    def can_handle(self, value: object) -> bool:
        return isinstance(value, int)

    def format(self, value, graph, context, format_child) -> None:  # noqa: ANN001
        format_child("  ", str(value))


class TestContracts:
    """Test UsageError conditions."""

    def test_reentrant_format_rejected(self) -> None:
        """Calling format from inside a strategy is a usage error."""
        registry = create_default_registry()
        registry.register(ReentrantFormatter())

        with pytest.raises(UsageError) as exc_info:
            GraphFormatter(registry).format(1)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.REENTRANT_FORMAT

    def test_guard_released_after_error(self) -> None:
        """A failed render does not block later renders."""
        registry = create_default_registry()
        registry.register(ReentrantFormatter())

        with pytest.raises(UsageError):
            GraphFormatter(registry).format(1)

        assert format_value([1]) == "{1}"

    def test_blank_label_rejected(self) -> None:
        """format_child requires a non-blank label."""
        registry = create_default_registry()
        registry.register(BlankLabelFormatter())

        with pytest.raises(UsageError) as exc_info:
            GraphFormatter(registry).format(1)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.BLANK_CHILD_LABEL

    def test_custom_strategy_for_children(self) -> None:
        """Custom strategies also render nested values."""

        class HashFormatter:
            def can_handle(self, value: object) -> bool:
                return isinstance(value, int)

            def format(self, value, graph, context, format_child) -> None:  # noqa: ANN001
                graph.add_fragment(f"#{value}")

        registry = create_default_registry()
        registry.register(HashFormatter())

        assert GraphFormatter(registry).format([1, [2]]) == "{#1, {#2}}"

    def test_options_and_overrides(self) -> None:
        """Keyword overrides apply on top of explicit options."""
        options = FormattingOptions(max_items=1)

        assert format_value([1, 2], options) == "{1, …1 more…}"
        assert format_value([1, 2], options, max_items=2) == "{1, 2}"

    def test_invalid_override(self) -> None:
        """Overrides are validated like options."""
        with pytest.raises(ValueError, match="max_lines"):
            format_value([1], max_lines=0)


# ============================================================================
# Properties
# ============================================================================


@given(value=value_graphs())
def test_property_deterministic(value: object) -> None:
    """Property: rendering the same graph twice gives identical text."""
    assert format_value(value) == format_value(value)


@given(value=value_graphs(), max_lines=st.integers(min_value=1, max_value=12))
def test_property_line_cap(value: object, max_lines: int) -> None:
    """Property: output never exceeds max_lines + 2 lines.

    Overflowing output always ends with the notice naming the cap.
    """
    result = format_value(value, max_lines=max_lines)
    lines = result.split("\n")
    truncated = "Output has exceeded" in lines[-1]
    event(f"truncated={truncated}")

    assert len(lines) <= max_lines + 2
    if len(lines) > max_lines:
        assert truncated
        assert f"maximum of {max_lines} lines" in lines[-1]


@given(value=self_referencing_lists())
def test_property_single_cycle_placeholder(value: list[object]) -> None:
    """Property: a list containing itself once yields one placeholder."""
    result = format_value(value)

    assert result.count("Cyclic reference to type list detected") == 1


@given(chain=nested_chains())
def test_property_depth_notice(chain: tuple[list[object], int]) -> None:
    """Property: the depth notice appears iff nesting exceeds the limit."""
    value, levels = chain
    result = format_value(value)
    beyond = levels > 5

    assert ("Maximum recursion depth of 5" in result) == beyond
    assert ('"leaf"' in result) == (not beyond)


@given(st.lists(st.integers(min_value=-999, max_value=999), min_size=1, max_size=32))
def test_property_flat_int_list_single_line(values: list[int]) -> None:
    """Property: short flat integer lists render on one comma separated line."""
    event(f"length={min(len(values), 10)}")

    assert format_value(values) == "{" + ", ".join(map(str, values)) + "}"


@pytest.mark.fuzz
@settings(max_examples=2000)
@given(value=value_graphs(max_leaves=200), use_line_breaks=st.booleans())
def test_fuzz_large_graphs(value: object, use_line_breaks: bool) -> None:
    """Fuzz: large graphs render within bounds in both layout modes."""
    event(f"use_line_breaks={use_line_breaks}")
    result = format_value(value, use_line_breaks=use_line_breaks)

    assert len(result.split("\n")) <= 102
