"""
Abstract base classes and protocols for tree containers.
"""

from sortedtrees.interfaces.sorted_tree import SortedTree
from sortedtrees.interfaces.traversable import Traversable
from sortedtrees.interfaces.tree import Tree

__all__ = ["SortedTree", "Traversable", "Tree"]
