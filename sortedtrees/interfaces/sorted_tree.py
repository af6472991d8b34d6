"""
SortedTree abstract base class for trees that keep their values ordered.
"""

from abc import abstractmethod
from typing import Any

from sortedtrees.interfaces.tree import Tree


class SortedTree(Tree):
    """
    Abstract base class for trees that place values by comparison.

    In-order traversal of a sorted tree is ascending order, which gives
    every value a well defined neighbour on each side.
    """

    @abstractmethod
    def successor(self, value: Any) -> Any | None:
        """
        Return the smallest value greater than value.

        Args:
            value: A value present in the tree.

        Returns:
            The next value in ascending order, or None if value is the maximum.

        Raises:
            NodeNotFoundError: If value is not in the tree.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def predecessor(self, value: Any) -> Any | None:
        """
        Return the largest value smaller than value.

        Args:
            value: A value present in the tree.

        Returns:
            The previous value in ascending order, or None if value is the
            minimum.

        Raises:
            NodeNotFoundError: If value is not in the tree.

        Time complexity: O(log N)
        """
        pass
