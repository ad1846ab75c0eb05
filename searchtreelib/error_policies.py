"""
Duplicate-insert policies for SearchTreeLib.

The tree never stores two values that compare equal. What happens when a
caller tries anyway is delegated to a DuplicatePolicy, so the behavior is an
explicit, swappable choice rather than an accident of the insert algorithm.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List

from .errors import DuplicateValueError


logger = logging.getLogger(__name__)


class DuplicatePolicy(ABC):
    """
    Base class for duplicate handling policies.

    Subclasses decide what insert() does when it reaches a node whose value
    compares equal to the value being inserted.
    """

    @abstractmethod
    def handle(self, value: Any, node: Any) -> bool:
        """
        Handle an attempt to insert a value that is already stored.

        Args:
            value: The value the caller tried to insert
            node: The existing node holding an equal value

        Returns:
            The result insert() hands back to the caller (False means
            nothing was attached), or raises to reject the insert.
        """
        pass


class IgnoreDuplicatesPolicy(DuplicatePolicy):
    """
    Policy that silently drops duplicates.

    This is the default: the tree is left untouched and insert() returns
    False so callers that care can still tell nothing happened.
    """

    def handle(self, value: Any, node: Any) -> bool:
        """Drop the value and report that nothing was inserted."""
        logger.debug("Ignoring duplicate value %r", value)
        return False


class RaiseOnDuplicatePolicy(DuplicatePolicy):
    """
    Policy that treats a duplicate insert as a caller error.

    Useful when the input is expected to be unique and a repeat points at a
    bug upstream.
    """

    def handle(self, value: Any, node: Any) -> bool:
        """Raise DuplicateValueError."""
        raise DuplicateValueError(value)


class CollectDuplicatesPolicy(DuplicatePolicy):
    """
    Policy that records rejected values without raising.

    Similar to IgnoreDuplicatesPolicy but keeps every dropped value so they
    can be reported after a bulk load.
    """

    def __init__(self):
        """Initialize the policy."""
        self.duplicates: List[Any] = []

    def handle(self, value: Any, node: Any) -> bool:
        """Record the value and report that nothing was inserted."""
        self.duplicates.append(value)
        logger.debug("Collected duplicate value %r (%d so far)", value, len(self.duplicates))
        return False

    def get_statistics(self) -> dict:
        """
        Get statistics about rejected values.

        Returns:
            Dictionary with the rejection count and the values themselves
        """
        return {
            'total_duplicates': len(self.duplicates),
            'distinct_duplicates': self._count_distinct(),
            'duplicates': list(self.duplicates),
        }

    def _count_distinct(self) -> int:
        """Count rejected values using the tree's equality (neither < nor >)."""
        distinct: List[Any] = []
        for value in self.duplicates:
            if not any(not (value < seen or value > seen) for seen in distinct):
                distinct.append(value)
        return len(distinct)
