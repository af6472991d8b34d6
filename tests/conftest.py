"""
Shared pytest fixtures for tree container tests.
"""

import pytest

from sortedtrees import RedBlackTree

# Insertion order that builds a perfectly shaped tree:
#
#                    C6
#              ______|______
#             |             |
#             C3            C9
#         ____|__       ____|______
#        |       |     |           |
#        C1      C4    C7          CB
#        |__     |__   |__      ___|___
#           |       |     |    |       |
#           C2      C5    C8   CA      CC
SAMPLE_VALUES = ["C6", "C3", "C9", "C1", "C4", "C7", "CB", "C2", "C5", "C8", "CA", "CC"]


@pytest.fixture
def empty_tree():
    """Provide a fresh, empty RedBlackTree."""
    return RedBlackTree()


@pytest.fixture
def tree():
    """Provide the twelve value sample tree."""
    return RedBlackTree(SAMPLE_VALUES)


@pytest.fixture
def sorted_values():
    """Provide the sample values in ascending order."""
    return sorted(SAMPLE_VALUES)
