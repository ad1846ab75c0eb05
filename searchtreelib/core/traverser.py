"""Tree traversal strategies for SearchTreeLib.

Traversers implement the three depth-first visiting orders. They only rely on
a node exposing ``left``, ``right`` and ``value``, and they yield nodes lazily;
buffering for one-shot consumption is done by TraversalSequence.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Tuple, Union, Optional, TYPE_CHECKING

from ..config import TraversalOrder

if TYPE_CHECKING:
    from .node import BinarySearchTree


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Each subclass fixes when a node is emitted relative to its two subtrees.
    Custom strategies only need traverse(); ``order`` stays None for them.
    """

    order: Optional[TraversalOrder] = None

    @abstractmethod
    def traverse(self, root: 'BinarySearchTree') -> Iterator[Tuple['BinarySearchTree', int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def values(self, root: 'BinarySearchTree') -> Iterator:
        """Yield just the stored values in traversal order."""
        for node, _ in self.traverse(root):
            yield node.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class InOrderTraverser(TreeTraverser):
    """In-order traversal: left subtree, node, right subtree.

    On a search tree this yields values in ascending order.
    """

    order = TraversalOrder.IN_ORDER

    def traverse(self, root: 'BinarySearchTree') -> Iterator[Tuple['BinarySearchTree', int]]:
        def _traverse_recursive(node, depth):
            if node.left is not None:
                yield from _traverse_recursive(node.left, depth + 1)
            yield (node, depth)
            if node.right is not None:
                yield from _traverse_recursive(node.right, depth + 1)

        yield from _traverse_recursive(root, 0)


class PreOrderTraverser(TreeTraverser):
    """Pre-order traversal: node, left subtree, right subtree.

    Root comes first. Re-inserting the output into an empty tree rebuilds
    the same shape.
    """

    order = TraversalOrder.PRE_ORDER

    def traverse(self, root: 'BinarySearchTree') -> Iterator[Tuple['BinarySearchTree', int]]:
        def _traverse_recursive(node, depth):
            # Yield parent first (pre-order)
            yield (node, depth)
            if node.left is not None:
                yield from _traverse_recursive(node.left, depth + 1)
            if node.right is not None:
                yield from _traverse_recursive(node.right, depth + 1)

        yield from _traverse_recursive(root, 0)


class PostOrderTraverser(TreeTraverser):
    """Post-order traversal: left subtree, right subtree, node.

    Children come before their parent, so the root is always last. Good for
    bottom-up work such as teardown or aggregating subtree sizes.
    """

    order = TraversalOrder.POST_ORDER

    def traverse(self, root: 'BinarySearchTree') -> Iterator[Tuple['BinarySearchTree', int]]:
        def _traverse_recursive(node, depth):
            if node.left is not None:
                yield from _traverse_recursive(node.left, depth + 1)
            if node.right is not None:
                yield from _traverse_recursive(node.right, depth + 1)
            # Then yield parent (post-order)
            yield (node, depth)

        yield from _traverse_recursive(root, 0)


_ORDER_ALIASES = {
    'in': TraversalOrder.IN_ORDER,
    'in_order': TraversalOrder.IN_ORDER,
    'inorder': TraversalOrder.IN_ORDER,
    'pre': TraversalOrder.PRE_ORDER,
    'pre_order': TraversalOrder.PRE_ORDER,
    'preorder': TraversalOrder.PRE_ORDER,
    'post': TraversalOrder.POST_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
    'postorder': TraversalOrder.POST_ORDER,
}

_TRAVERSERS = {
    TraversalOrder.IN_ORDER: InOrderTraverser,
    TraversalOrder.PRE_ORDER: PreOrderTraverser,
    TraversalOrder.POST_ORDER: PostOrderTraverser,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from string or enum.

    Args:
        order: Order as enum or one of its string aliases

    Returns:
        TraversalOrder enum value

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    order_lower = order.lower().replace('-', '_') if isinstance(order, str) else str(order)
    if order_lower in _ORDER_ALIASES:
        return _ORDER_ALIASES[order_lower]

    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
    )


def create_traverser(order: Optional[Union[TraversalOrder, str]] = None) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        order: Traversal order (in, pre, post); defaults to in-order

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If order name is not recognized
    """
    if order is None:
        order = TraversalOrder.IN_ORDER
    return _TRAVERSERS[parse_order(order)]()
