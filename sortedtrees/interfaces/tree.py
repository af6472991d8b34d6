"""
Tree abstract base class, the contract shared by every tree variant.
"""

from abc import abstractmethod
from collections.abc import Iterable
from typing import Any

from sortedtrees.interfaces.traversable import Traversable


class Tree(Traversable):
    """
    Abstract base class for trees holding unique, non-None values.

    Inherits traversal capabilities from Traversable. Nodes are addressed by
    the value they hold, so every query takes and returns values.

    Implementations:
    - RedBlackTree: self-balancing sorted tree
    """

    @abstractmethod
    def insert(self, value: Any) -> bool:
        """
        Insert a value, letting the tree choose its position.

        Args:
            value: The value to insert. Must not be None.

        Returns:
            True if a new node was created, False if an equal value was
            already present and has been replaced.
        """
        pass

    @abstractmethod
    def add_child(self, parent: Any, child: Any) -> bool:
        """
        Insert child under a caller-chosen parent.

        Args:
            parent: Value of the parent node, None only for an empty tree.
            child: Value to attach.

        Returns:
            True if the child was attached.
        """
        pass

    @abstractmethod
    def add_children(self, parent: Any, values: Iterable[Any]) -> bool:
        """Attach every value under parent using add_child."""
        pass

    @abstractmethod
    def remove(self, value: Any) -> bool:
        """
        Remove a value.

        Returns:
            True if the value was found and removed, False otherwise.
        """
        pass

    @abstractmethod
    def retain_all(self, values: Iterable[Any]) -> bool:
        """Keep only the given values."""
        pass

    @abstractmethod
    def contains(self, value: Any) -> bool:
        """Check if a value is stored in the tree."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every value."""
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of values.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def depth(self) -> int:
        """
        Return the number of nodes on the longest root-to-leaf path.

        An empty tree has depth 0, a lone root has depth 1.
        """
        pass

    @abstractmethod
    def root(self) -> Any | None:
        """Return the root value, or None if the tree is empty."""
        pass

    @abstractmethod
    def children(self, value: Any) -> list[Any]:
        """
        Return the values of the children of value.

        Raises:
            NodeNotFoundError: If value is not in the tree.
        """
        pass

    @abstractmethod
    def parent(self, value: Any) -> Any | None:
        """
        Return the parent value of value, None for the root.

        Raises:
            NodeNotFoundError: If value is not in the tree.
        """
        pass

    @abstractmethod
    def siblings(self, value: Any) -> list[Any]:
        """
        Return the values sharing a parent with value.

        Raises:
            NodeNotFoundError: If value is not in the tree.
        """
        pass

    @abstractmethod
    def common_ancestor(self, first: Any, second: Any) -> Any | None:
        """Return the deepest value that is an ancestor of both, or either."""
        pass

    @abstractmethod
    def is_ancestor(self, node: Any, child: Any) -> bool:
        """Check if node lies on the path from child up to the root."""
        pass

    @abstractmethod
    def is_descendant(self, parent: Any, node: Any) -> bool:
        """Check if node lies in the subtree rooted at parent."""
        pass

    @abstractmethod
    def copy(self) -> "Tree":
        """Return a deep copy of the node structure."""
        pass

    def is_empty(self) -> bool:
        return self.size() == 0

    def insert_all(self, values: Iterable[Any]) -> bool:
        """
        Insert every value.

        Returns:
            True if at least one new node was created.
        """
        changed = False
        for value in values:
            changed |= self.insert(value)
        return changed

    def remove_all(self, values: Iterable[Any]) -> bool:
        """
        Remove every value.

        Returns:
            True if at least one value was removed.
        """
        changed = False
        for value in values:
            changed |= self.remove(value)
        return changed

    def contains_all(self, values: Iterable[Any]) -> bool:
        return all(self.contains(value) for value in values)

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return self.size()
