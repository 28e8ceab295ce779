"""Tests for catalog entries and key resolution.

Covers the tagged Template/Group variant, build_group() conversion of plain
nested mappings, and resolve_key() with flat-key precedence over dotted
traversal.
"""

from __future__ import annotations

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from intlresolver.catalog import (
    Group,
    Template,
    build_catalog,
    build_group,
    resolve_key,
    to_plain,
)
from intlresolver.diagnostics import ContractViolationError, DiagnosticCode

# ============================================================================
# build_group / build_catalog
# ============================================================================


class TestBuildGroup:
    """Conversion of nested mappings into Template/Group entries."""

    def test_string_leaves_become_templates(self) -> None:
        """String values are wrapped in Template."""
        group = build_group({"greeting": "Hello"})
        assert group.get("greeting") == Template("Hello")

    def test_nested_mappings_become_groups(self) -> None:
        """Mapping values become nested groups."""
        group = build_group({"menu": {"file": {"open": "Open"}}})
        menu = group.get("menu")
        assert isinstance(menu, Group)
        assert isinstance(menu.get("file"), Group)

    def test_unsupported_values_are_skipped_with_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Non-string, non-mapping leaves are logged and dropped."""
        with caplog.at_level(logging.WARNING, logger="intlresolver.catalog.entries"):
            group = build_group({"count": 3, "ok": "yes", "nested": {"flag": True}})

        assert "count" not in group
        assert "ok" in group
        nested = group.get("nested")
        assert isinstance(nested, Group)
        assert len(nested) == 0
        assert "nested.flag" in caplog.text
        assert "count" in caplog.text

    def test_existing_entries_pass_through(self) -> None:
        """Already-built entries are reused, not rebuilt."""
        inner = build_group({"b": "x"})
        group = build_group({"a": inner})
        assert group.get("a") is inner

    def test_group_is_read_only(self) -> None:
        """Group entries cannot be mutated after construction."""
        group = build_group({"a": "1"})
        with pytest.raises(TypeError):
            group.entries["b"] = Template("2")  # type: ignore[index]

    def test_build_catalog_rejects_non_mapping_locale(self) -> None:
        """A locale whose messages are not a mapping is a contract violation."""
        with pytest.raises(ContractViolationError) as exc_info:
            build_catalog({"en-US": "not a mapping"})
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_CATALOG

    def test_to_plain_round_trips_structure(self) -> None:
        """to_plain() restores the plain nested structure."""
        data = {"a": {"b": "nested"}, "c": "flat"}
        assert to_plain(build_group(data)) == data


# ============================================================================
# resolve_key
# ============================================================================


class TestResolveKey:
    """Flat and dotted key lookup."""

    def test_flat_key(self) -> None:
        group = build_group({"greeting": "Hello, {name}!"})
        assert resolve_key(group, "greeting") == "Hello, {name}!"

    def test_dotted_key_walks_nested_groups(self) -> None:
        """'a.b' steps into group 'a' and returns template 'b'."""
        group = build_group({"a": {"b": "nested"}})
        assert resolve_key(group, "a.b") == "nested"

    def test_flat_key_with_dots(self) -> None:
        """A key that literally contains dots resolves without splitting."""
        group = build_group({"a.b": "flat-wins"})
        assert resolve_key(group, "a.b") == "flat-wins"

    def test_flat_key_wins_over_nested_path(self) -> None:
        """Literal top-level key takes precedence over dotted traversal."""
        group = build_group({"a.b": "flat-wins", "a": {"b": "nested"}})
        assert resolve_key(group, "a.b") == "flat-wins"

    def test_missing_segment_returns_none(self) -> None:
        group = build_group({"a": {"b": "nested"}})
        assert resolve_key(group, "a.c") is None
        assert resolve_key(group, "x.y.z") is None

    def test_stepping_into_template_returns_none(self) -> None:
        """Traversal past a template short-circuits to None."""
        group = build_group({"a": "leaf"})
        assert resolve_key(group, "a.b") is None

    def test_path_ending_on_group_returns_none(self) -> None:
        group = build_group({"a": {"b": {"c": "deep"}}})
        assert resolve_key(group, "a.b") is None
        assert resolve_key(group, "a") is None

    def test_empty_template_is_returned(self) -> None:
        """An empty template is a resolved value, not a miss."""
        group = build_group({"blank": ""})
        assert resolve_key(group, "blank") == ""

    def test_empty_segments_do_not_raise(self) -> None:
        group = build_group({"a": {"b": "x"}})
        assert resolve_key(group, "a..b") is None
        assert resolve_key(group, ".") is None


class TestResolveKeyProperties:
    """Property-based checks of resolve_key()."""

    @given(
        st.dictionaries(
            st.text(alphabet="abcxyz.", min_size=1, max_size=6),
            st.text(max_size=20),
            min_size=1,
            max_size=8,
        )
    )
    def test_every_top_level_key_resolves_to_its_value(self, data: dict[str, str]) -> None:
        """Any literal top-level key, dotted or not, returns its own template."""
        group = build_group(data)
        for key, value in data.items():
            assert resolve_key(group, key) == value

    @given(st.text(max_size=30))
    def test_never_raises(self, key: str) -> None:
        group = build_group({"a": {"b": "x"}, "c": "y"})
        resolve_key(group, key)
