"""Core components of SearchTreeLib.

This package contains the tree node, the traversal strategies and the
buffered sequences built on top of them.
"""

from .node import BinarySearchTree
from .sequence import TraversalSequence
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
    parse_order,
)

__all__ = [
    "BinarySearchTree",
    "TraversalSequence",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "create_traverser",
    "parse_order",
]
