"""High-level API for SearchTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API for ease of use in
simple cases.
"""

from typing import Any, Dict, Iterable, List, Optional, Union

from .config import TreeConfig, TraversalOrder
from .core.node import BinarySearchTree
from .core.sequence import TraversalSequence
from .core.traverser import PreOrderTraverser, create_traverser


def build_tree(values: Iterable[Any], config: Optional[TreeConfig] = None) -> BinarySearchTree:
    """Build a tree by inserting values in the order given.

    The first value becomes the root, so the input order fixes the shape.

    Args:
        values: Values to insert; must not be empty
        config: Tree configuration (duplicate policy, default order)

    Returns:
        Root of the new tree

    Raises:
        ValueError: If values is empty
        DuplicateValueError: If a value repeats under the strict policy

    Example:
        >>> tree = build_tree([5, 3, 8])
        >>> collect_values(tree, "pre")
        [5, 3, 8]
    """
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("build_tree() requires at least one value") from None

    tree = BinarySearchTree(first, config)
    for value in iterator:
        tree.insert(value)
    return tree


def traverse_tree(
    tree: BinarySearchTree,
    order: Union[TraversalOrder, str, None] = None
) -> TraversalSequence:
    """Return a fresh one-shot sequence over the tree.

    Args:
        tree: Root of the tree
        order: Traversal order (in, pre, post); the tree's default if None

    Returns:
        TraversalSequence with every value buffered
    """
    return tree.sequence(order)


def collect_values(
    tree: BinarySearchTree,
    order: Union[TraversalOrder, str, None] = None
) -> List[Any]:
    """Traverse the tree and return its values as a list."""
    return list(traverse_tree(tree, order))


def count_nodes(tree: BinarySearchTree) -> int:
    """Count nodes in a tree.

    Example:
        >>> count_nodes(build_tree([2, 1, 3]))
        3
    """
    count = 0
    for _ in PreOrderTraverser().traverse(tree):
        count += 1
    return count


def tree_height(tree: BinarySearchTree) -> int:
    """Return the depth of the deepest node (a single node has height 0)."""
    return max(depth for _, depth in PreOrderTraverser().traverse(tree))


def get_leaf_values(tree: BinarySearchTree) -> List[Any]:
    """Get the values of all leaf nodes in ascending order."""
    return [
        node.value
        for node, _ in create_traverser(TraversalOrder.IN_ORDER).traverse(tree)
        if node.is_leaf()
    ]


def get_tree_stats(tree: BinarySearchTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        tree: Root of the tree

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(build_tree([5, 3, 8, 1]))
        >>> stats['total_nodes'], stats['leaf_nodes'], stats['max_depth']
        (4, 2, 2)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {},
        'min_value': None,
        'max_value': None,
    }

    for node, depth in create_traverser(TraversalOrder.IN_ORDER).traverse(tree):
        # In-order: the first node seen is the minimum, the last the maximum
        if stats['total_nodes'] == 0:
            stats['min_value'] = node.value
        stats['max_value'] = node.value
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']

    return stats
