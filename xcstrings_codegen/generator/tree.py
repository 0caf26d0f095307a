"""
Key hierarchy built from flat, separator-delimited catalog keys.

    home.title      -> children["home"].leaves == [Leaf("title", "home.title")]
    home            -> leaves == [Leaf("home", "home")]
    ""              -> leaves == [Leaf("", "")]

Empty segments are kept: "a..b" descends through "a" and "" before the
leaf "b" is attached.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class Leaf:
    """A key whose final segment terminates at the owning node."""

    name: str  # last segment, e.g. "title"
    full_key: str  # original key, e.g. "home.title"


@dataclass
class TreeNode:
    """One path segment of the key hierarchy."""

    separator: str
    children: dict[str, TreeNode] = field(default_factory=dict)
    leaves: list[Leaf] = field(default_factory=list)

    def split(self, key: str) -> list[str]:
        # str.split keeps empty parts, so "".split(".") == [""]
        return key.split(self.separator)

    def insert(self, key: str) -> None:
        """Insert `key`, creating intermediate nodes on first encounter."""
        *namespaces, last = self.split(key)
        node = self
        for segment in namespaces:
            child = node.children.get(segment)
            if child is None:
                child = TreeNode(separator=self.separator)
                node.children[segment] = child
            node = child
        # Sorted insertion keeps equal key sets structurally equal
        # regardless of insertion order.
        bisect.insort(node.leaves, Leaf(name=last, full_key=key))

    def sorted_children(self) -> list[tuple[str, TreeNode]]:
        return sorted(self.children.items(), key=lambda item: item[0])

    def is_empty(self) -> bool:
        """True when no leaf exists anywhere in this subtree."""
        if self.leaves:
            return False
        return all(child.is_empty() for child in self.children.values())

    def walk(self, prefix: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], Leaf]]:
        """Yield `(namespace_path, leaf)` pairs depth first in sorted order."""
        for leaf in self.leaves:
            yield prefix, leaf
        for name, child in self.sorted_children():
            yield from child.walk(prefix + (name,))


def build_tree(keys: Iterable[str], separator: str) -> TreeNode:
    """Build the hierarchy for all `keys` under a fresh root node."""
    root = TreeNode(separator=separator)
    for key in keys:
        root.insert(key)
    return root
