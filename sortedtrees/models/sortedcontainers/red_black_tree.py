"""
Red-Black Tree implementation for sorted value storage.

Keeps unique values in ascending order with O(log N) insert, remove and
lookup. Balance is restored after every mutation by recolouring and rotating.
"""

import logging
import random
from collections import deque
from collections.abc import AsyncIterator, Iterable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from sortedtrees.interfaces.sorted_tree import SortedTree
from sortedtrees.models import tree_helper
from sortedtrees.models.exceptions import (
    InvalidArgumentError,
    NodeNotFoundError,
    TreeModifiedError,
    UnsupportedOperationError,
)
from sortedtrees.models.sortedcontainers.replacement import ReplacementPolicy

logger = logging.getLogger(__name__)


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class Node:
    """Node in the Red-Black Tree. Nodes compare by identity."""

    value: Any
    color: Color = Color.RED
    left: "Node | None" = field(default=None, repr=False)
    right: "Node | None" = field(default=None, repr=False)
    parent: "Node | None" = field(default=None, repr=False)


def _is_red(node: Node | None) -> bool:
    # Missing children count as black
    return node is not None and node.color == Color.RED


class RedBlackTree(SortedTree):
    """
    Red-Black Tree implementation of SortedTree.

    Properties maintained:
    1. Every node is either red or black
    2. Root is always black
    3. Red nodes cannot have red children
    4. Every path from a node to a missing child has the same number of
       black nodes
    5. In-order traversal is strictly ascending

    Not thread safe. Iterators fail fast if the tree changes structurally
    while they are in use.
    """

    def __init__(
        self,
        values: Iterable[Any] | None = None,
        *,
        replacement: ReplacementPolicy = ReplacementPolicy.SUCCESSOR,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize the tree.

        Args:
            values: Optional values to insert right away.
            replacement: Which neighbour replaces a removed node that has two
                children (default: successor).
            rng: Random generator used by ReplacementPolicy.RANDOM. Pass a
                seeded instance for reproducible removals.
        """
        if not isinstance(replacement, ReplacementPolicy):
            raise InvalidArgumentError(
                f"replacement must be a ReplacementPolicy, got {replacement!r}"
            )
        if rng is not None and not isinstance(rng, random.Random):
            raise InvalidArgumentError(
                f"rng must be a random.Random instance, got {type(rng).__name__}"
            )

        self._root: Node | None = None
        self._size: int = 0
        self._depth: int = 0
        self._mod_count: int = 0
        self._replacement = replacement
        self._random = rng if rng is not None else random.Random()

        if values is not None:
            self.insert_all(values)

    @property
    def replacement(self) -> ReplacementPolicy:
        return self._replacement

    # Mutation

    def insert(self, value: Any) -> bool:
        """
        Insert a value, or replace an equal one. O(log N)

        Values must be totally ordered against each other. A value that is not
        equal to itself, such as float("nan"), has no place in that order and
        is rejected.
        """
        self._check_value(value)
        if value != value:
            raise InvalidArgumentError(
                f"{value!r} is not equal to itself and cannot be ordered"
            )
        if self._root is None:
            self._root = Node(value=value, color=Color.BLACK)
            self._size = 1
            self._depth = 1
            self._mod_count += 1
            return True

        # Find insertion point
        parent = None
        current = self._root

        while current is not None:
            parent = current
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                # Equal value exists, keep the node and swap the stored object
                current.value = value
                return False

        new_node = Node(value=value, parent=parent)
        if value < parent.value:
            parent.left = new_node
        else:
            parent.right = new_node

        self._fix_insert(new_node)
        self._size += 1
        self._mod_count += 1
        self._depth = self._recalculate_depth()
        return True

    def add_child(self, parent: Any, child: Any) -> bool:
        raise UnsupportedOperationError(
            "A red-black tree determines the parent of a value on its own, "
            "use insert(value) instead"
        )

    def add_children(self, parent: Any, values: Iterable[Any]) -> bool:
        raise UnsupportedOperationError(
            "A red-black tree determines the parent of a value on its own, "
            "use insert_all(values) instead"
        )

    def remove(self, value: Any) -> bool:
        """Remove a value. O(log N)"""
        self._check_value(value)
        node = self._find_node(value)
        if node is None:
            return False

        self._delete_node(node)
        self._size -= 1
        self._mod_count += 1
        self._depth = self._recalculate_depth()
        return True

    def retain_all(self, values: Iterable[Any]) -> bool:
        raise UnsupportedOperationError("Tree interface doesn't support retain_all")

    def clear(self) -> None:
        logger.debug(f"Clearing tree of {self._size} values")
        self._root = None
        self._size = 0
        self._depth = 0
        self._mod_count += 1

    # Queries

    def contains(self, value: Any) -> bool:
        if value is None:
            return False
        return self._find_node(value) is not None

    def size(self) -> int:
        return self._size

    def depth(self) -> int:
        return self._depth

    def root(self) -> Any | None:
        return self._root.value if self._root is not None else None

    def children(self, value: Any) -> list[Any]:
        node = self._node(value)
        return [child.value for child in (node.left, node.right) if child is not None]

    def left(self, value: Any) -> Any | None:
        """Return the left child of value, or None if it has none."""
        node = self._node(value)
        return node.left.value if node.left is not None else None

    def right(self, value: Any) -> Any | None:
        """Return the right child of value, or None if it has none."""
        node = self._node(value)
        return node.right.value if node.right is not None else None

    def parent(self, value: Any) -> Any | None:
        node = self._node(value)
        return node.parent.value if node.parent is not None else None

    def siblings(self, value: Any) -> list[Any]:
        node = self._node(value)
        parent = node.parent
        if parent is None:
            return []
        sibling = parent.right if node is parent.left else parent.left
        return [sibling.value] if sibling is not None else []

    def successor(self, value: Any) -> Any | None:
        node = self._successor_node(self._node(value))
        return node.value if node is not None else None

    def predecessor(self, value: Any) -> Any | None:
        node = self._predecessor_node(self._node(value))
        return node.value if node is not None else None

    def common_ancestor(self, first: Any, second: Any) -> Any | None:
        self._check_value(first)
        self._check_value(second)
        return tree_helper.common_ancestor(self, first, second)

    def is_ancestor(self, node: Any, child: Any) -> bool:
        self._check_value(child)
        return tree_helper.is_ancestor(self, node, child)

    def is_descendant(self, parent: Any, node: Any) -> bool:
        self._check_value(parent)
        return tree_helper.is_descendant(self, parent, node)

    # Traversals

    def __iter__(self) -> Iterator[Any]:
        return _InOrderIterator(self)

    def __aiter__(self) -> AsyncIterator[Any]:
        return _AsyncInOrderIterator(self)

    def in_order_traversal(self) -> list[Any]:
        return [node.value for node in self._nodes_in_order()]

    def pre_order_traversal(self) -> list[Any]:
        result = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            # Right first so the left subtree is popped first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order_traversal(self) -> list[Any]:
        # Walk node, right, left and reverse to get left, right, node
        result = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def level_order_traversal(self) -> list[Any]:
        result = []
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def leaves(self) -> list[Any]:
        return [
            node.value
            for node in self._nodes_in_order()
            if node.left is None and node.right is None
        ]

    def to_list(self) -> list[Any]:
        """Return all values in ascending order."""
        return self.in_order_traversal()

    # Copy and equality

    def copy(self) -> "RedBlackTree":
        """
        Deep copy the node structure.

        The copy gets new nodes with the same values and colours, the same
        replacement policy and its own random generator starting from the same
        state. Stored values themselves are shared.
        """
        rng = random.Random()
        rng.setstate(self._random.getstate())
        clone = type(self)(replacement=self._replacement, rng=rng)
        if self._root is not None:
            clone._root = Node(value=self._root.value, color=self._root.color)
            pending = [(self._root, clone._root)]
            while pending:
                source, target = pending.pop()
                if source.left is not None:
                    target.left = Node(
                        value=source.left.value, color=source.left.color, parent=target
                    )
                    pending.append((source.left, target.left))
                if source.right is not None:
                    target.right = Node(
                        value=source.right.value, color=source.right.color, parent=target
                    )
                    pending.append((source.right, target.right))

        clone._size = self._size
        clone._depth = self._depth
        logger.debug(f"Copied tree of {self._size} values")
        return clone

    def __copy__(self) -> "RedBlackTree":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        # Trees of another concrete type are never equal, even with equal content
        if type(other) is not type(self):
            return NotImplemented
        return tree_helper.is_equal(self, other)

    def __hash__(self) -> int:
        """Hash the in-order values, so every stored value must be hashable."""
        return hash((type(self).__name__, tuple(self.in_order_traversal())))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.in_order_traversal()!r})"

    # Lookup helpers

    def _check_value(self, value: Any) -> None:
        if value is None:
            raise InvalidArgumentError("None values are not allowed in the tree")

    def _node(self, value: Any) -> Node:
        """Find node by value, raising if it is missing."""
        self._check_value(value)
        node = self._find_node(value)
        if node is None:
            raise NodeNotFoundError(value)
        return node

    def _find_node(self, value: Any) -> Node | None:
        """Find node by value."""
        try:
            return self._search_ordered(value)
        except TypeError:
            # Value cannot be ordered against the stored values, match by equality
            return self._search_equal(value)

    def _search_ordered(self, value: Any) -> Node | None:
        current = self._root
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return current
        return None

    def _search_equal(self, value: Any) -> Node | None:
        for node in self._nodes_in_order():
            if node.value == value:
                return node
        return None

    def _nodes_in_order(self) -> Iterator[Node]:
        stack: list[Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node
            current = node.right

    def _successor_node(self, node: Node) -> Node | None:
        if node.right is not None:
            current = node.right
            while current.left is not None:
                current = current.left
            return current

        # Climb until we arrive from a left child
        parent = node.parent
        while parent is not None and node is parent.right:
            node = parent
            parent = parent.parent
        return parent

    def _predecessor_node(self, node: Node) -> Node | None:
        if node.left is not None:
            current = node.left
            while current.right is not None:
                current = current.right
            return current

        # Climb until we arrive from a right child
        parent = node.parent
        while parent is not None and node is parent.left:
            node = parent
            parent = parent.parent
        return parent

    def _recalculate_depth(self) -> int:
        """Count nodes on the longest root-to-leaf path."""
        depth = 0
        stack = [(self._root, 1)] if self._root is not None else []
        while stack:
            node, level = stack.pop()
            depth = max(depth, level)
            if node.left is not None:
                stack.append((node.left, level + 1))
            if node.right is not None:
                stack.append((node.right, level + 1))
        return depth

    # Rebalancing

    def _fix_insert(self, node: Node) -> None:
        """Fix Red-Black Tree properties after attaching a red node."""
        while True:
            parent = node.parent

            # Case 1: node is the root
            if parent is None:
                node.color = Color.BLACK
                return

            # Case 2: black parent, nothing is violated
            if parent.color == Color.BLACK:
                return

            # A red parent is never the root, so the grandparent exists
            grandparent = parent.parent
            uncle = grandparent.right if parent is grandparent.left else grandparent.left

            # Case 3: red uncle, push the red up to the grandparent
            if _is_red(uncle):
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                grandparent.color = Color.RED
                node = grandparent
                continue

            if parent is grandparent.left:
                # Case 4: node is an inner child, straighten the zig-zag
                if node is parent.right:
                    self._rotate_left(parent)
                    node, parent = parent, node

                # Case 5: outer child, rotate the grandparent down
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_right(grandparent)
            else:
                if node is parent.left:
                    self._rotate_right(parent)
                    node, parent = parent, node

                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_left(grandparent)
            return

    def _rotate_left(self, node: Node) -> None:
        """Left rotation."""
        right_child = node.right
        if right_child is None:
            return

        node.right = right_child.left
        if right_child.left:
            right_child.left.parent = node

        right_child.parent = node.parent

        if node.parent is None:
            self._root = right_child
        elif node is node.parent.left:
            node.parent.left = right_child
        else:
            node.parent.right = right_child

        right_child.left = node
        node.parent = right_child

    def _rotate_right(self, node: Node) -> None:
        """Right rotation."""
        left_child = node.left
        if left_child is None:
            return

        node.left = left_child.right
        if left_child.right:
            left_child.right.parent = node

        left_child.parent = node.parent

        if node.parent is None:
            self._root = left_child
        elif node is node.parent.right:
            node.parent.right = left_child
        else:
            node.parent.left = left_child

        left_child.right = node
        node.parent = left_child

    def _pick_replacement(self, node: Node) -> Node:
        """Choose the neighbour that stands in for a node with two children."""
        policy = self._replacement
        if policy is ReplacementPolicy.RANDOM:
            policy = (
                ReplacementPolicy.SUCCESSOR
                if self._random.random() > 0.5
                else ReplacementPolicy.PREDECESSOR
            )

        if policy is ReplacementPolicy.SUCCESSOR:
            replacement = self._successor_node(node)
        else:
            replacement = self._predecessor_node(node)

        logger.debug(
            f"Removing {node.value!r} via its {policy.value} {replacement.value!r}"
        )
        return replacement

    def _delete_node(self, node: Node) -> None:
        """Delete a node from the tree."""
        if node.left is not None and node.right is not None:
            # Copy the neighbour's value in and unlink the neighbour instead,
            # it has at most one child
            replacement = self._pick_replacement(node)
            node.value = replacement.value
            node = replacement

        child = node.left if node.left is not None else node.right

        if node.color == Color.BLACK:
            if _is_red(child):
                child.color = Color.BLACK
            else:
                # Node stays linked during the fixup and stands in for the
                # doubly black position its child will occupy
                self._fix_delete(node)

        self._replace_node(node, child)

    def _replace_node(self, node: Node, child: Node | None) -> None:
        """Replace node with child in tree."""
        if node.parent is None:
            self._root = child
        elif node is node.parent.left:
            node.parent.left = child
        else:
            node.parent.right = child

        if child:
            child.parent = node.parent

    def _fix_delete(self, node: Node) -> None:
        """Fix Red-Black Tree properties for a doubly black node."""
        # Case 1: the extra black reached the root and is simply dropped
        while node is not self._root:
            parent = node.parent
            is_left = node is parent.left
            sibling = parent.right if is_left else parent.left

            # Case 2: red sibling, rotate it above the parent so that the
            # node gets a black sibling
            if _is_red(sibling):
                sibling.color = Color.BLACK
                parent.color = Color.RED
                if is_left:
                    self._rotate_left(parent)
                    sibling = parent.right
                else:
                    self._rotate_right(parent)
                    sibling = parent.left

            near = sibling.left if is_left else sibling.right
            far = sibling.right if is_left else sibling.left

            if not _is_red(near) and not _is_red(far):
                sibling.color = Color.RED
                # Case 4: red parent absorbs the extra black
                if parent.color == Color.RED:
                    parent.color = Color.BLACK
                    return
                # Case 3: everything black, push the extra black up
                node = parent
                continue

            # Case 5: only the near nephew is red, rotate it into the far spot
            if not _is_red(far):
                sibling.color = Color.RED
                near.color = Color.BLACK
                if is_left:
                    self._rotate_right(sibling)
                else:
                    self._rotate_left(sibling)
                far = sibling
                sibling = near

            # Case 6: far nephew is red, rotate the sibling above the parent
            sibling.color = parent.color
            parent.color = Color.BLACK
            far.color = Color.BLACK
            if is_left:
                self._rotate_left(parent)
            else:
                self._rotate_right(parent)
            return


class _InOrderIterator(Iterator[Any]):
    """Fail-fast ascending iterator over a Red-Black Tree."""

    def __init__(self, tree: RedBlackTree) -> None:
        self._tree = tree
        self._expected_mod_count = tree._mod_count
        self._stack: list[Node] = []
        self._push_left_path(tree._root)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._tree._mod_count != self._expected_mod_count:
            raise TreeModifiedError(self._expected_mod_count, self._tree._mod_count)
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Push right subtree's left path
        self._push_left_path(node.right)

        return node.value

    def _push_left_path(self, node: Node | None) -> None:
        while node:
            self._stack.append(node)
            node = node.left


class _AsyncInOrderIterator(AsyncIterator[Any]):
    """Async iterator for Red-Black Tree (in-memory, no I/O)."""

    def __init__(self, tree: RedBlackTree) -> None:
        self._iterator = _InOrderIterator(tree)

    def __aiter__(self) -> "_AsyncInOrderIterator":
        return self

    async def __anext__(self) -> Any:
        try:
            return next(self._iterator)
        except StopIteration:
            raise StopAsyncIteration from None
