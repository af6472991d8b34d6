"""
Replacement policies for deleting a node that has two children.
"""

from enum import Enum


class ReplacementPolicy(Enum):
    """
    Which neighbour takes the place of a deleted node with two children.

    The neighbour's value is copied into the deleted node and the
    neighbour, which has at most one child, is unlinked instead.
    """

    SUCCESSOR = "successor"
    PREDECESSOR = "predecessor"
    # Coin flip between the two, drawn from the tree's random generator
    RANDOM = "random"
