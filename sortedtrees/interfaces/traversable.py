"""
Traversable protocol for trees whose values can be walked in fixed orders.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class Traversable(ABC):
    """
    Protocol for tree structures that expose their values in traversal order.

    Implementations must support:
    - Full iteration via __iter__
    - Async iteration via __aiter__
    - Materialized in-order, pre-order, post-order and level-order snapshots
    - The list of leaves
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all values in in-order."""
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Any]:
        """Return an async iterator over all values in in-order."""
        pass

    @abstractmethod
    def in_order_traversal(self) -> list[Any]:
        """
        Return values as left subtree, node, right subtree.

        For sorted trees this is ascending order.
        """
        pass

    @abstractmethod
    def pre_order_traversal(self) -> list[Any]:
        """Return values as node, left subtree, right subtree."""
        pass

    @abstractmethod
    def post_order_traversal(self) -> list[Any]:
        """Return values as left subtree, right subtree, node."""
        pass

    @abstractmethod
    def level_order_traversal(self) -> list[Any]:
        """Return values breadth first, starting from the root."""
        pass

    @abstractmethod
    def leaves(self) -> list[Any]:
        """Return all values that have no children, left to right."""
        pass
