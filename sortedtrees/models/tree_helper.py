"""
Queries expressed purely through the Tree contract.

Every tree variant answers children/parent/root/contains, so structural
equality and ancestry can be computed once here instead of per variant.
"""

from collections import deque
from typing import Any

from sortedtrees.interfaces.tree import Tree
from sortedtrees.models.exceptions import NodeNotFoundError


def is_equal(first: Tree, second: Tree) -> bool:
    """
    Compare two trees by visible structure.

    Root values must be equal, and for every pair of matching nodes the
    lists of child values must be equal. Node colours or any other balancing
    bookkeeping are ignored.
    """
    pending: deque[tuple[Any, Any]] = deque([(first.root(), second.root())])
    while pending:
        left, right = pending.popleft()
        if left is None and right is None:
            continue
        if left is None or right is None or left != right:
            return False

        left_children = first.children(left)
        right_children = second.children(right)
        if left_children != right_children:
            return False
        pending.extend(zip(left_children, right_children))
    return True


def is_ancestor(tree: Tree, node: Any, child: Any) -> bool:
    """
    Check if node is on the parent chain of child.

    A value is never its own ancestor.

    Raises:
        NodeNotFoundError: If child is not in the tree.
    """
    if not tree.contains(child):
        raise NodeNotFoundError(child, f"Child node {child!r} not found in the tree")
    if node is None:
        return False

    current = tree.parent(child)
    while current is not None:
        if current == node:
            return True
        current = tree.parent(current)
    return False


def is_descendant(tree: Tree, parent: Any, node: Any) -> bool:
    """
    Check if node is inside the subtree rooted at parent.

    Raises:
        NodeNotFoundError: If parent, or a non-None node, is not in the tree.
    """
    if not tree.contains(parent):
        raise NodeNotFoundError(parent, f"Parent node {parent!r} not found in the tree")
    if node is None:
        return False
    return is_ancestor(tree, parent, node)


def _height(tree: Tree, value: Any) -> int:
    # Number of nodes from value up to the root, both included.
    height = 0
    while value is not None:
        height += 1
        value = tree.parent(value)
    return height


def common_ancestor(tree: Tree, first: Any, second: Any) -> Any | None:
    """
    Find the deepest value having both first and second in its subtree.

    The deeper value is walked up until both sit at the same height, then
    both are walked up together until they meet.

    Raises:
        NodeNotFoundError: If either value is not in the tree.
    """
    first_height = _height(tree, first)
    second_height = _height(tree, second)

    while first_height > second_height:
        first = tree.parent(first)
        first_height -= 1
    while second_height > first_height:
        second = tree.parent(second)
        second_height -= 1

    while first is not None and first != second:
        first = tree.parent(first)
        second = tree.parent(second)
    return first
