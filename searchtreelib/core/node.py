"""Binary search tree node for SearchTreeLib.

A tree is just its root node: there is no separate container object and no
empty-tree sentinel. Every node owns at most two children, and nodes are
never removed once attached.
"""

import logging
from typing import Any, Iterator, Optional, Union

from ..config import TreeConfig, TraversalOrder
from ..error_policies import DuplicatePolicy
from ..errors import InvalidConfigError
from .sequence import TraversalSequence
from .traverser import (
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
)


logger = logging.getLogger(__name__)


class BinarySearchTree:
    """Unbalanced binary search tree over mutually comparable values.

    For every node, values in the left subtree compare strictly less than the
    node's value and values in the right subtree strictly greater. Values are
    compared with ``<`` and ``>`` only; a value that is neither is treated as
    equal to the node's value. Values outside a total order such as
    ``float("nan")`` are therefore unsupported: contains(nan) is always True.

    The tree does not rebalance, so sorted input degrades it to a linked
    list. Insert, contains and traversal all recurse to the tree's depth and
    will hit Python's recursion limit on very deep, skewed trees.

    Not thread-safe: callers sharing a tree between threads must serialize
    access themselves.
    """

    __slots__ = ('_value', '_left', '_right', '_config', '_policy')

    def __init__(self, value: Any, config: Optional[TreeConfig] = None, *,
                 _policy: Optional[DuplicatePolicy] = None):
        """Create a single-node tree.

        Subclasses overriding ``__init__`` must pass ``_policy`` through to
        this one, since insert() builds every child with
        ``type(self)(value, config, _policy=...)``.

        Args:
            value: The root value
            config: Tree configuration shared with every inserted node
            _policy: Duplicate policy of the parent when building a child;
                the config is then taken as already validated

        Raises:
            InvalidConfigError: If config fails validation
        """
        config = config or TreeConfig()
        if _policy is None:
            config_errors = config.validate()
            if config_errors:
                raise InvalidConfigError(
                    f"Invalid configuration: {'; '.join(config_errors)}"
                )
            _policy = config.create_policy()

        self._value = value
        self._left: Optional['BinarySearchTree'] = None
        self._right: Optional['BinarySearchTree'] = None
        self._config = config
        self._policy = _policy

    def _new_child(self, value: Any) -> 'BinarySearchTree':
        """Create a leaf that shares this node's config and policy."""
        return type(self)(value, self._config, _policy=self._policy)

    @property
    def value(self) -> Any:
        """The value stored at this node."""
        return self._value

    def get_value(self) -> Any:
        return self._value

    @property
    def left(self) -> Optional['BinarySearchTree']:
        return self._left

    @property
    def right(self) -> Optional['BinarySearchTree']:
        return self._right

    @property
    def config(self) -> TreeConfig:
        return self._config

    @property
    def policy(self) -> DuplicatePolicy:
        """Duplicate policy shared by every node of this tree."""
        return self._policy

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self._left is None and self._right is None

    def children(self) -> Iterator['BinarySearchTree']:
        """Yield the children that are present, left before right."""
        if self._left is not None:
            yield self._left
        if self._right is not None:
            yield self._right

    def insert(self, value: Any) -> bool:
        """Insert a value, attaching it as a new leaf.

        Walks the comparison path from this node and attaches the value at
        the first vacant slot. Exactly one child link changes. A value equal
        to one already stored is passed to the tree's duplicate policy
        instead.

        Args:
            value: The value to insert

        Returns:
            True if a node was attached, otherwise whatever the duplicate
            policy returns (False for the built-in non-raising policies)

        Raises:
            DuplicateValueError: If the value is already stored and the
                tree was configured with the strict policy
        """
        if value < self._value:
            if self._left is None:
                self._left = self._new_child(value)
                logger.debug("Attached %r left of %r", value, self._value)
                return True
            return self._left.insert(value)

        if value > self._value:
            if self._right is None:
                self._right = self._new_child(value)
                logger.debug("Attached %r right of %r", value, self._value)
                return True
            return self._right.insert(value)

        return self._policy.handle(value, self)

    def contains(self, value: Any) -> bool:
        """Return True if a value equal to ``value`` is stored in the tree.

        Only the comparison path is visited, so this is O(depth).
        """
        if value < self._value:
            return self._left is not None and self._left.contains(value)
        if value > self._value:
            return self._right is not None and self._right.contains(value)
        return True

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def in_order_sequence(self) -> TraversalSequence:
        """Return a sequence of values in ascending order."""
        return TraversalSequence(self, InOrderTraverser())

    def pre_order_sequence(self) -> TraversalSequence:
        """Return a sequence of values with each node before its children."""
        return TraversalSequence(self, PreOrderTraverser())

    def post_order_sequence(self) -> TraversalSequence:
        """Return a sequence of values with each node after its children."""
        return TraversalSequence(self, PostOrderTraverser())

    def sequence(self, order: Union[TraversalOrder, str, None] = None) -> TraversalSequence:
        """Return a sequence in the given order.

        Args:
            order: TraversalOrder or alias such as "in", "pre", "post";
                the config's default_order when None

        Raises:
            ValueError: If order name is not recognized
        """
        if order is None:
            order = self._config.default_order
        return TraversalSequence(self, create_traverser(order))

    def __iter__(self) -> Iterator[Any]:
        """Iterate values in the config's default order."""
        return self.sequence()

    def __len__(self) -> int:
        """Count the nodes in this subtree (O(n))."""
        return sum(1 for _ in InOrderTraverser().traverse(self))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self._value!r})"
