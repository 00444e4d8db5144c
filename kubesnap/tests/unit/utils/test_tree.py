"""Tests for tree traversal helpers."""

from __future__ import annotations

import pytest

from kubesnap.utils.tree import (
    TreeNodeKind,
    as_list,
    as_mapping,
    find_items,
    is_present,
    node_kind,
    resolve_path,
    split_path,
    with_string_keys,
)


class TestNodeKind:
    """Tests for node_kind classification."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ({}, TreeNodeKind.MAPPING),
            ([], TreeNodeKind.SEQUENCE),
            ((1, 2), TreeNodeKind.SEQUENCE),
            ("items", TreeNodeKind.SCALAR),
            (b"raw", TreeNodeKind.SCALAR),
            (3, TreeNodeKind.SCALAR),
            (None, TreeNodeKind.SCALAR),
        ],
    )
    def test_classification(self, value: object, expected: TreeNodeKind) -> None:
        assert node_kind(value) is expected


class TestFindItems:
    """Tests for the recursive items search."""

    def test_direct_items(self) -> None:
        assert find_items({"items": [1, 2]}) == [1, 2]

    def test_nested_items(self) -> None:
        tree = {"response": {"body": {"payload": {"items": [{"a": 1}]}}}}
        assert find_items(tree) == [{"a": 1}]

    def test_items_inside_sequence(self) -> None:
        tree = {"pages": [{"meta": {}}, {"items": ["x"]}]}
        assert find_items(tree) == ["x"]

    def test_first_match_is_depth_first(self) -> None:
        """The first subtree is exhausted before a later sibling is visited."""
        tree = {
            "first": {"deeper": {"items": ["deep"]}},
            "items": ["shallow-but-later"],
        }
        assert find_items(tree) == ["deep"]

    def test_non_sequence_items_are_skipped(self) -> None:
        tree = {"items": {"count": 3}, "other": {"items": ["found"]}}
        assert find_items(tree) == ["found"]

    def test_string_items_value_is_not_a_sequence(self) -> None:
        assert find_items({"items": "abc"}) is None

    def test_missing_returns_none(self) -> None:
        assert find_items({"a": {"b": [1, 2, {"c": 3}]}}) is None

    def test_scalar_root(self) -> None:
        assert find_items(42) is None

    def test_depth_limit(self) -> None:
        tree: dict = {"items": ["bottom"]}
        for _ in range(10):
            tree = {"wrap": tree}
        assert find_items(tree, max_depth=5) is None
        assert find_items(tree, max_depth=20) == ["bottom"]

    def test_custom_key(self) -> None:
        assert find_items({"wrapper": {"results": [1]}}, key="results") == [1]

    def test_does_not_mutate_input(self) -> None:
        items = [{"a": 1}]
        tree = {"x": {"items": items}}
        found = find_items(tree)
        assert found == items
        assert found is not items


class TestResolvePath:
    """Tests for dotted path resolution."""

    def test_split_path(self) -> None:
        assert split_path("affinity.nodeAffinity") == ("affinity", "nodeAffinity")
        assert split_path(("a", "b")) == ("a", "b")
        assert split_path("") == ()

    def test_resolves_nested_value(self) -> None:
        spec = {"affinity": {"nodeAffinity": {"required": True}}}
        assert resolve_path(spec, "affinity.nodeAffinity") == {"required": True}

    def test_missing_segment(self) -> None:
        assert resolve_path({"affinity": {}}, "affinity.nodeAffinity") is None

    def test_scalar_at_intermediate_segment(self) -> None:
        assert resolve_path({"affinity": "none"}, "affinity.nodeAffinity") is None

    def test_sequence_at_intermediate_segment(self) -> None:
        assert resolve_path({"affinity": [1, 2]}, "affinity.nodeAffinity") is None

    def test_non_mapping_root(self) -> None:
        assert resolve_path(None, "a") is None
        assert resolve_path([], "a") is None

    def test_empty_path_returns_root(self) -> None:
        root = {"a": 1}
        assert resolve_path(root, "") is root


class TestIsPresent:
    """Tests for presence semantics."""

    @pytest.mark.parametrize("value", [None, {}, [], "", ()])
    def test_absent_values(self, value: object) -> None:
        assert is_present(value) is False

    @pytest.mark.parametrize("value", [{"a": 1}, [0], "x", 0, False, 1.5])
    def test_present_values(self, value: object) -> None:
        assert is_present(value) is True


class TestCoercion:
    """Tests for as_mapping and as_list."""

    def test_as_mapping(self) -> None:
        assert as_mapping({"a": 1}) == {"a": 1}
        assert as_mapping([("a", 1)]) == {}
        assert as_mapping(None) == {}

    def test_as_list(self) -> None:
        assert as_list((1, 2)) == [1, 2]
        assert as_list("ab") == []
        assert as_list({"a": 1}) == []


class TestWithStringKeys:
    """Tests for with_string_keys."""

    def test_converts_nested_keys(self) -> None:
        tree = {1: {True: [{None: "x"}]}, "a": ("b", 2)}
        assert with_string_keys(tree) == {"1": {"True": [{"None": "x"}]}, "a": ["b", 2]}

    def test_copies_containers(self) -> None:
        tree = {"a": {"b": [1]}}
        copied = with_string_keys(tree)
        tree["a"]["b"].append(2)
        assert copied == {"a": {"b": [1]}}

    def test_scalars_pass_through(self) -> None:
        assert with_string_keys("text") == "text"
        assert with_string_keys(None) is None

    def test_shared_nodes_are_copied_once(self) -> None:
        shared = {1: "x"}
        copied = with_string_keys({"a": shared, "b": shared})
        assert copied["a"] is copied["b"]

    def test_cyclic_tree(self) -> None:
        tree: dict = {"name": "root"}
        tree["self"] = tree
        copied = with_string_keys(tree)
        assert copied["self"] is copied
