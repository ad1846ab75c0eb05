"""Test fixtures for SearchTreeLib consumers.

A small, fully known tree plus its expected traversal orders, so test suites
of projects using SearchTreeLib don't have to rebuild them by hand.
"""

from typing import Optional

from ..config import TreeConfig
from ..api import build_tree
from ..core.node import BinarySearchTree


#            5
#          /   \
#         3     8
#        / \   / \
#       1   4 7   9
SAMPLE_VALUES = (5, 3, 8, 1, 4, 7, 9)

SAMPLE_IN_ORDER = [1, 3, 4, 5, 7, 8, 9]
SAMPLE_PRE_ORDER = [5, 3, 1, 4, 8, 7, 9]
SAMPLE_POST_ORDER = [1, 4, 3, 7, 9, 8, 5]


def sample_tree(config: Optional[TreeConfig] = None) -> BinarySearchTree:
    """Build the seven-node sample tree.

    Args:
        config: Optional tree configuration

    Returns:
        Root node holding 5
    """
    return build_tree(SAMPLE_VALUES, config)


def skewed_tree(size: int, config: Optional[TreeConfig] = None) -> BinarySearchTree:
    """Build a right-leaning chain 0..size-1 (worst case for an unbalanced tree)."""
    return build_tree(range(size), config)
