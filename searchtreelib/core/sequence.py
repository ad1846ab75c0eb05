"""One-shot traversal sequences.

A TraversalSequence walks the whole tree when it is created and then hands
the buffered values out front to back. It cannot be rewound; ask the tree for
a new one to traverse again.
"""

import logging
from collections import deque
from typing import Any, Deque, Iterator, Optional, TYPE_CHECKING

from ..config import TraversalOrder
from ..errors import EmptySequenceError, UnsupportedOperationError
from .traverser import TreeTraverser, InOrderTraverser

if TYPE_CHECKING:
    from .node import BinarySearchTree


logger = logging.getLogger(__name__)


class TraversalSequence:
    """Forward-only, destructively consumed sequence of tree values.

    The traversal order is fully determined at construction. Inserting into
    the tree afterwards does not change a sequence that already exists, and
    inserting while one is being built is not supported.

    Example:
        seq = tree.in_order_sequence()
        while seq.has_next():
            print(seq.next())
    """

    def __init__(self, root: 'BinarySearchTree', traverser: Optional[TreeTraverser] = None):
        """Walk the tree once and buffer its values.

        Args:
            root: Node to start the traversal from
            traverser: Strategy fixing the visiting order (in-order if None)
        """
        self.traverser = traverser or InOrderTraverser()
        self.order = getattr(self.traverser, 'order', None)
        self._buffer: Deque[Any] = deque(self.traverser.values(root))
        logger.debug("Buffered %d values in %s order", len(self._buffer), self._order_name())

    def has_next(self) -> bool:
        """Return True while buffered values remain."""
        return bool(self._buffer)

    def next(self) -> Any:
        """Remove and return the next value.

        Raises:
            EmptySequenceError: If the sequence is exhausted
        """
        if not self._buffer:
            raise EmptySequenceError(
                f"{self._order_name()}-order sequence is exhausted"
            )
        return self._buffer.popleft()

    def remove(self) -> None:
        """Removing values from the tree through a sequence is not supported."""
        raise UnsupportedOperationError(
            "TraversalSequence cannot remove values from the tree"
        )

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if not self._buffer:
            raise StopIteration
        return self._buffer.popleft()

    def __len__(self) -> int:
        """Number of values not yet consumed."""
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"TraversalSequence(order={self._order_name()!r}, remaining={len(self._buffer)})"

    def _order_name(self) -> str:
        """Short order name, or the traverser's class name for custom ones."""
        if isinstance(self.order, TraversalOrder):
            return self.order.value
        return type(self.traverser).__name__
