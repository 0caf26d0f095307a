from __future__ import annotations

import pytest

from xcstrings_codegen.generator.tree import Leaf, TreeNode, build_tree

KEYS = [
    "",
    "home",
    "home.title",
    "home.subtitle",
    "cart.items.count",
    "a..b",
    ".leading",
    "trailing.",
]


def test_leaves_attach_under_their_namespace():
    root = build_tree(["home.title", "home.subtitle"], ".")

    assert list(root.children) == ["home"]
    assert root.leaves == []
    assert root.children["home"].leaves == [
        Leaf("subtitle", "home.subtitle"),
        Leaf("title", "home.title"),
    ]


def test_node_can_hold_leaf_and_children():
    root = build_tree(["home", "home.title"], ".")

    assert root.leaves == [Leaf("home", "home")]
    assert root.children["home"].leaves == [Leaf("title", "home.title")]


@pytest.mark.parametrize(
    "key, path, leaf_name",
    [
        ("", (), ""),
        ("a..b", ("a", ""), "b"),
        (".leading", ("",), "leading"),
        ("trailing.", ("trailing",), ""),
    ],
)
def test_empty_segments_are_kept(key, path, leaf_name):
    root = build_tree([key], ".")
    node = root
    for segment in path:
        node = node.children[segment]
    assert node.leaves == [Leaf(leaf_name, key)]


def test_construction_is_order_independent():
    forward = build_tree(KEYS, ".")
    backward = build_tree(list(reversed(KEYS)), ".")
    assert forward == backward


def test_walk_rejoins_to_original_keys_and_depth_matches_segments():
    root = build_tree(KEYS, ".")
    seen = []
    for path, leaf in root.walk():
        assert ".".join(path + (leaf.name,)) == leaf.full_key
        assert len(path) + 1 == len(leaf.full_key.split("."))
        seen.append(leaf.full_key)
    assert sorted(seen) == sorted(KEYS)


def test_underscore_separator_splits_on_underscore_only():
    root = build_tree(["home_title", "home.title"], "_")

    assert root.leaves == [Leaf("home.title", "home.title")]
    assert root.children["home"].leaves == [Leaf("title", "home_title")]


def test_is_empty():
    node = TreeNode(separator=".")
    assert node.is_empty()

    node.children["ghost"] = TreeNode(separator=".")
    assert node.is_empty()

    node.insert("ghost.value")
    assert not node.is_empty()
