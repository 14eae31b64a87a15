"""Index arithmetic for left-balanced binary trees stored in array form.

Leaves occupy even node indices, intermediate nodes odd ones. A tree with
``n`` leaves has ``2n - 1`` nodes. A tree of one leaf has no intermediate
nodes, and its root is the leaf itself.
"""

from __future__ import annotations

__all__ = [
    "TreeMathError",
    "NodeCountNotOddError",
    "LeafNotEvenError",
    "EmptyTreeError",
    "LeafHasNoChildrenError",
    "NodeOutOfRangeError",
    "RootHasNoParentError",
    "log2",
    "node_count",
    "leaf_count",
    "leaf_to_node",
    "node_to_leaf",
    "ancestor",
    "root",
    "is_leaf",
    "level",
    "is_in_subtree",
    "left",
    "right",
    "immediate_parent",
    "parent",
    "sibling",
    "dirpath",
    "copath",
]


class TreeMathError(Exception):
    """Base class for tree index errors."""


class NodeCountNotOddError(TreeMathError):
    """A non-empty tree must have an odd number of nodes."""

    def __init__(self) -> None:
        super().__init__("node count must be odd")


class LeafNotEvenError(TreeMathError):
    """Leaves live at even node indices only."""

    def __init__(self) -> None:
        super().__init__("leaf must be even in node space")


class EmptyTreeError(TreeMathError):
    """An empty tree has no root."""

    def __init__(self) -> None:
        super().__init__("no root for an empty tree")


class LeafHasNoChildrenError(TreeMathError):
    """A leaf has neither a left nor a right child."""

    def __init__(self) -> None:
        super().__init__("leaf can't have children")


class NodeOutOfRangeError(TreeMathError):
    """The node index lies outside a tree of the given size."""

    def __init__(self, node: int, node_count: int) -> None:
        super().__init__(f"node {node} out of range for {node_count} nodes")
        self.node = node
        self.node_count = node_count


class RootHasNoParentError(TreeMathError):
    """The root of a tree has no parent."""

    def __init__(self) -> None:
        super().__init__("root can't have a parent")


def log2(x: int) -> int:
    """Floor of the binary logarithm of ``x``; 0 for 0."""
    return x.bit_length() - 1 if x > 0 else 0


def node_count(leaf_count: int) -> int:
    """Number of nodes in a tree with ``leaf_count`` leaves."""
    if leaf_count == 0:
        return 0
    return ((leaf_count - 1) << 1) + 1


def leaf_count(node_count: int) -> int:
    """Number of leaves in a tree with ``node_count`` nodes."""
    if node_count == 0:
        return 0
    if node_count & 1 == 0:
        raise NodeCountNotOddError()
    return (node_count >> 1) + 1


def leaf_to_node(leaf: int) -> int:
    """Node index of the given leaf index."""
    return leaf << 1


def node_to_leaf(node: int) -> int:
    """Leaf index of the given node index, which must be even."""
    if node & 1:
        raise LeafNotEvenError()
    return node >> 1


def ancestor(left_leaf: int, right_leaf: int) -> int:
    """Node index of the lowest common ancestor of two leaves."""
    ln = leaf_to_node(left_leaf)
    rn = leaf_to_node(right_leaf)
    if ln == rn:
        return ln

    k = 0
    while ln != rn:
        ln >>= 1
        rn >>= 1
        k += 1

    return (ln << k) + ((1 << (k - 1)) - 1)


def root(leaf_count: int) -> int:
    """Root node index of a tree with ``leaf_count`` leaves."""
    if leaf_count == 0:
        raise EmptyTreeError()
    return (1 << log2(node_count(leaf_count))) - 1


def is_leaf(node: int) -> bool:
    """Whether ``node`` is a leaf."""
    return node & 1 == 0


def level(node: int) -> int:
    """Height of ``node`` above the leaves: the number of trailing one bits."""
    k = 0
    while (node >> k) & 1:
        k += 1
    return k


def is_in_subtree(node: int, other: int) -> bool:
    """Whether ``node`` lies in the subtree rooted at ``other`` (inclusive)."""
    lx = level(node)
    ly = level(other)
    return lx <= ly and (node >> (ly + 1)) == (other >> (ly + 1))


def left(node: int) -> int:
    """Left child of ``node``."""
    if is_leaf(node):
        raise LeafHasNoChildrenError()
    return node ^ (1 << (level(node) - 1))


def right(node: int, leaf_count: int) -> int:
    """Right child of ``node`` in a tree with ``leaf_count`` leaves."""
    nc = node_count(leaf_count)
    if nc <= node:
        raise NodeOutOfRangeError(node, nc)
    if is_leaf(node):
        raise LeafHasNoChildrenError()

    r = node ^ (0x03 << (level(node) - 1))
    while r >= nc:
        r = left(r)
    return r


def immediate_parent(node: int) -> int:
    """Parent of ``node`` in a complete tree large enough to contain it."""
    k = level(node)
    return (node | (1 << k)) & ~(1 << (k + 1))


def parent(node: int, leaf_count: int) -> int:
    """Parent of ``node`` in a tree with ``leaf_count`` leaves."""
    if node == root(leaf_count):
        raise RootHasNoParentError()

    nc = node_count(leaf_count)
    if nc <= node:
        raise NodeOutOfRangeError(node, nc)

    p = immediate_parent(node)
    while p >= nc:
        p = immediate_parent(p)
    return p


def sibling(node: int, leaf_count: int) -> int:
    """The other child of ``node``'s parent."""
    p = parent(node, leaf_count)
    return right(p, leaf_count) if node < p else left(p)


def dirpath(node: int, leaf_count: int) -> list[int]:
    """Ancestors of ``node`` from its parent up to the root, inclusive."""
    r = root(leaf_count)
    path = []
    x = node
    while x != r:
        x = parent(x, leaf_count)
        path.append(x)
    return path


def copath(node: int, leaf_count: int) -> list[int]:
    """Siblings of ``node`` and of each of its ancestors below the root."""
    if node == root(leaf_count):
        return []
    path = [node, *dirpath(node, leaf_count)][:-1]
    return [sibling(n, leaf_count) for n in path]