"""
Sorted container implementations.
"""

from sortedtrees.models.sortedcontainers.red_black_tree import Color, Node, RedBlackTree
from sortedtrees.models.sortedcontainers.replacement import ReplacementPolicy

__all__ = ["Color", "Node", "RedBlackTree", "ReplacementPolicy"]
