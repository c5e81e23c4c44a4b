"""Tests for yangref.paths module."""

import pytest

from tests.trees import node_at
from yangref.nodes import SchemaNode
from yangref.paths import (
    LeafrefPath,
    absolute_path_to,
    count_ascents,
    descent_list,
    has_enough_components,
    is_absolute,
    parse_path,
    strip_module_prefix,
)


class TestClassification:
    """Test telling absolute paths from relative ones."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/t1:cont/t1:leaf", True),
            ("/a/b", True),
            ("../a/b", False),
            ("a/b", False),
            ("", False),
        ],
    )
    def test_is_absolute(self, path: str, expected: bool) -> None:
        """Test that only a leading slash makes a path absolute."""
        assert is_absolute(path) is expected

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("config/name", 0),
            ("../config/name", 1),
            ("../../../config/mtu", 3),
            ("a/../b", 1),
        ],
    )
    def test_count_ascents(self, path: str, expected: int) -> None:
        """Test that ../ markers are counted wherever they appear."""
        assert count_ascents(path) == expected

    @pytest.mark.parametrize(
        ("path", "expected"),
        [("", False), ("name", False), ("/name", True), ("../name", True)],
    )
    def test_has_enough_components(self, path: str, expected: bool) -> None:
        """Test the minimal shape check for a path."""
        assert has_enough_components(path) is expected


class TestStripModulePrefix:
    """Test removing module qualifiers from segments."""

    @pytest.mark.parametrize(
        ("segment", "expected"),
        [
            ("pfx:config", "config"),
            ("config", "config"),
            ("oc-if:interface", "interface"),
            ("a:b:c", "a:b:c"),
            ("", ""),
        ],
    )
    def test_strip(self, segment: str, expected: str) -> None:
        """Test prefixed, bare, and over-qualified segments."""
        assert strip_module_prefix(segment) == expected

    @pytest.mark.parametrize("segment", ["pfx:config", "config", "a:b:c"])
    def test_idempotent(self, segment: str) -> None:
        """Test that stripping twice is the same as stripping once."""
        once = strip_module_prefix(segment)
        assert strip_module_prefix(once) == once


class TestDescentList:
    """Test splitting paths into downward segments."""

    def test_absolute_drops_leading_slash(self) -> None:
        """Test that absolute paths keep prefixes and lose the root marker."""
        assert descent_list("/t1:cont/t1:leaf") == ["t1:cont", "t1:leaf"]

    def test_relative_drops_ascents(self) -> None:
        """Test that relative paths lose every ../ marker."""
        assert descent_list("../../pfx:config/pfx:name") == ["pfx:config", "pfx:name"]

    def test_empty_segments_are_kept(self) -> None:
        """Test that doubled and trailing slashes yield empty names."""
        assert descent_list("/a//b/") == ["a", "", "b", ""]


class TestParsePath:
    """Test composing the passes into a LeafrefPath."""

    def test_relative(self) -> None:
        """Test a relative path with prefixes."""
        assert parse_path("../pfx:config/pfx:keyleafref") == LeafrefPath(
            raw="../pfx:config/pfx:keyleafref",
            absolute=False,
            ascents=1,
            segments=("config", "keyleafref"),
        )

    def test_absolute(self) -> None:
        """Test that absolute paths never count ascents."""
        parsed = parse_path("/t1:cont1a/t1:list2a/t1:name")
        assert parsed.absolute is True
        assert parsed.ascents == 0
        assert parsed.segments == ("cont1a", "list2a", "name")

    def test_order_preserved(self) -> None:
        """Test that stripping keeps the segment order."""
        parsed = parse_path("/z:c/y:b/x:a")
        assert parsed.segments == ("c", "b", "a")

    def test_is_frozen(self) -> None:
        """Test that a parsed path is immutable."""
        parsed = parse_path("/a/b")
        with pytest.raises(AttributeError):
            parsed.ascents = 3  # type: ignore[misc]


class TestAbsolutePathTo:
    """Test building the absolute path of a node."""

    def test_skips_root(self, interfaces: SchemaNode) -> None:
        """Test that the root anchors the path and is not named."""
        node = node_at(interfaces, "interfaces", "interface", "config", "mtu")
        assert absolute_path_to(node) == "/interfaces/interface/config/mtu"

    def test_with_prefix(self, interfaces: SchemaNode) -> None:
        """Test qualifying every segment with a module prefix."""
        node = node_at(interfaces, "interfaces", "interface")
        assert absolute_path_to(node, "t1") == "/t1:interfaces/t1:interface"

    def test_root_cannot_be_addressed(self, interfaces: SchemaNode) -> None:
        """Test that the root has no path of its own."""
        with pytest.raises(ValueError, match="is the root"):
            absolute_path_to(interfaces)

    def test_parse_round_trip(self, interfaces: SchemaNode) -> None:
        """Test that parsing a built path gives back the node's lineage."""
        node = node_at(interfaces, "interfaces", "interface", "state", "counters")
        parsed = parse_path(absolute_path_to(node, "t1"))
        assert parsed.segments == ("interfaces", "interface", "state", "counters")
