"""
Data models for tree containers.
"""

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
    "TreeError",
    "TreeModifiedError",
    "UnsupportedOperationError",
    "RedBlackTree",
    "ReplacementPolicy",
]
