"""SearchTreeLib - Unbalanced Binary Search Tree.

SearchTreeLib provides a generic binary search tree over any mutually
comparable values, with membership lookup and buffered in-order, pre-order
and post-order traversal sequences.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from searchtreelib import BinarySearchTree

    tree = BinarySearchTree(5)
    tree.insert(3)
    seq = tree.in_order_sequence()
    while seq.has_next():
        print(seq.next())
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core.node import BinarySearchTree
from .core.sequence import TraversalSequence
from .core.traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
    parse_order,
)
from .config import TreeConfig, TraversalOrder, DuplicatePolicyKind
from .error_policies import (
    DuplicatePolicy,
    IgnoreDuplicatesPolicy,
    RaiseOnDuplicatePolicy,
    CollectDuplicatesPolicy,
)
from .errors import (
    SearchTreeError,
    EmptySequenceError,
    UnsupportedOperationError,
    DuplicateValueError,
    InvalidConfigError,
)
from .api import (
    build_tree,
    traverse_tree,
    collect_values,
    count_nodes,
    tree_height,
    get_leaf_values,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'BinarySearchTree',
    'TraversalSequence',
    'TreeTraverser',
    'InOrderTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'create_traverser',
    'parse_order',
    # Config
    'TreeConfig',
    'TraversalOrder',
    'DuplicatePolicyKind',
    # Policies
    'DuplicatePolicy',
    'IgnoreDuplicatesPolicy',
    'RaiseOnDuplicatePolicy',
    'CollectDuplicatesPolicy',
    # Errors
    'SearchTreeError',
    'EmptySequenceError',
    'UnsupportedOperationError',
    'DuplicateValueError',
    'InvalidConfigError',
    # API
    'build_tree',
    'traverse_tree',
    'collect_values',
    'count_nodes',
    'tree_height',
    'get_leaf_values',
    'get_tree_stats',
]
