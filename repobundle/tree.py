# repobundle/tree.py

"""
Directory tree reconstruction.

This module folds a flat list of selected file paths into a single rooted
tree of :class:`TreeNode` objects. Paths sharing a prefix share the nodes of
that prefix, so every directory appears exactly once no matter how many
selected files it contains.

Each node keeps its children in a mapping keyed by name, so building is
linear in the number of path segments even for very wide directories. Nodes
expose a ``children`` tuple, which is all :mod:`anytree` iterators such as
:class:`anytree.PreOrderIter` need to walk the tree.

The tree carries no ordering information: rendering sorts children by name
at every level (see :mod:`repobundle.render`). Building is therefore
independent of the order in which paths are given.
"""


from __future__ import annotations

import os
from typing import Iterable, Iterator

from repobundle.paths import path_segments


class TreeNode:
    """
    One path segment.

    Attributes
    ----------
    name : str
        Segment name, unique among its siblings. Empty for the root.
    is_file : bool
        ``True`` if the segment ends at least one selected path.
    """

    __slots__ = ("name", "is_file", "_children")

    def __init__(self, name: str, is_file: bool = False) -> None:
        self.name = name
        self.is_file = is_file
        self._children: dict[str, TreeNode] = {}

    @property
    def children(self) -> tuple[TreeNode, ...]:
        return tuple(self._children.values())

    def child(self, name: str) -> TreeNode | None:
        return self._children.get(name)

    def add_child(self, name: str, is_file: bool = False) -> TreeNode:
        node = TreeNode(name, is_file=is_file)
        self._children[name] = node
        return node

    def __repr__(self) -> str:
        return f"TreeNode({self.name!r}, is_file={self.is_file})"


def build_tree(paths: Iterable[str | os.PathLike[str]]) -> TreeNode:
    """
    Build a directory tree from normalized relative paths.

    Each path is split into segments. Starting from an unnamed root, each
    segment is looked up among the children of the current node and created
    when missing. The node of the last segment is flagged as a file.

    Leaf status is monotonic: once a node has been flagged as a file it stays
    a file, even if another path later walks through it as a directory.
    Duplicate paths are idempotent.

    Parameters
    ----------
    paths : Iterable[str | os.PathLike]
        Relative paths, typically produced by
        :func:`repobundle.paths.normalize_path`.

    Returns
    -------
    TreeNode
        The root node. It has an empty ``name``, ``is_file`` set to
        ``False``, and no children when ``paths`` is empty.
    """

    root = TreeNode("")

    for path in paths:
        segments = path_segments(path)
        current = root
        for i, segment in enumerate(segments):
            last = i == len(segments) - 1
            node = current.child(segment)
            if node is None:
                node = current.add_child(segment, is_file=last)
            elif last:
                node.is_file = True
            current = node

    return root


def find_child(node: TreeNode, name: str) -> TreeNode | None:
    """Return the direct child of ``node`` called ``name``, if any."""
    return node.child(name)


def iter_paths(root: TreeNode) -> Iterator[tuple[str, TreeNode]]:
    """Yield ``(path, node)`` for every node below ``root``, depth first."""
    stack = [("", child) for child in reversed(root.children)]
    while stack:
        prefix, node = stack.pop()
        path = f"{prefix}/{node.name}" if prefix else node.name
        yield path, node
        stack.extend((path, child) for child in reversed(node.children))


def tree_paths(root: TreeNode) -> set[tuple[str, bool]]:
    """
    Return the canonical content of a tree.

    Two trees built from the same set of paths compare equal under this
    form, whatever the insertion order of their children.

    Parameters
    ----------
    root : TreeNode
        Root node returned by :func:`build_tree`.

    Returns
    -------
    set[tuple[str, bool]]
        ``(path, is_file)`` for every node except the root.
    """

    return {(path, node.is_file) for path, node in iter_paths(root)}
