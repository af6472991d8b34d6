"""
Sorted tree containers backed by self-balancing binary trees.

This package provides a red-black tree with:
- insert(value) / remove(value) - O(log N) with rebalancing
- contains(value) - O(log N) lookup
- successor(value) / predecessor(value) - ordered neighbours
- parent, children, siblings, ancestry and common ancestor queries
- In-order, pre-order, post-order and level-order traversals
- Structural equality, hashing and deep copy
"""

from sortedtrees.interfaces import SortedTree, Tree
from sortedtrees.models.exceptions import (
    InvalidArgumentError,
    NodeNotFoundError,
    TreeError,
    TreeModifiedError,
    UnsupportedOperationError,
)
from sortedtrees.models.sortedcontainers import RedBlackTree, ReplacementPolicy

__all__ = [
    "InvalidArgumentError",
    "NodeNotFoundError",
    "RedBlackTree",
    "ReplacementPolicy",
    "SortedTree",
    "Tree",
    "TreeError",
    "TreeModifiedError",
    "UnsupportedOperationError",
]
