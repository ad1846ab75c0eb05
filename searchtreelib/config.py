"""Configuration system for SearchTreeLib.

This module defines how users choose traversal orders and what the tree
should do when asked to insert a value it already holds.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, List

from .error_policies import (
    DuplicatePolicy,
    IgnoreDuplicatesPolicy,
    RaiseOnDuplicatePolicy,
    CollectDuplicatesPolicy,
)


class TraversalOrder(Enum):
    """Depth-first visiting orders supported by the tree."""
    IN_ORDER = "in"        # Left, node, right (ascending)
    PRE_ORDER = "pre"      # Node before children
    POST_ORDER = "post"    # Children before node


class DuplicatePolicyKind(Enum):
    """What insert() does with a value that is already stored."""
    IGNORE = "ignore"      # Silent no-op, insert() returns False
    RAISE = "raise"        # DuplicateValueError
    COLLECT = "collect"    # Record and continue
    CUSTOM = "custom"      # User-supplied DuplicatePolicy


@dataclass
class TreeConfig:
    """Complete configuration for a search tree.

    One config is shared by the root and every node inserted beneath it.
    """

    duplicates: DuplicatePolicyKind = DuplicatePolicyKind.IGNORE
    custom_policy: Optional[DuplicatePolicy] = None

    # Order used by iter(tree) and by api helpers when none is given
    default_order: TraversalOrder = TraversalOrder.IN_ORDER

    @classmethod
    def lenient(cls) -> 'TreeConfig':
        """Create config that silently drops duplicates.

        Returns:
            TreeConfig with the ignore policy
        """
        return cls(duplicates=DuplicatePolicyKind.IGNORE)

    @classmethod
    def strict(cls) -> 'TreeConfig':
        """Create config that rejects duplicates with an exception.

        Returns:
            TreeConfig with the raise policy
        """
        return cls(duplicates=DuplicatePolicyKind.RAISE)

    def create_policy(self) -> DuplicatePolicy:
        """Build the duplicate policy this config describes.

        Returns:
            A fresh DuplicatePolicy instance, or the custom one as given
        """
        if self.duplicates == DuplicatePolicyKind.CUSTOM:
            return self.custom_policy
        if self.duplicates == DuplicatePolicyKind.RAISE:
            return RaiseOnDuplicatePolicy()
        if self.duplicates == DuplicatePolicyKind.COLLECT:
            return CollectDuplicatesPolicy()
        return IgnoreDuplicatesPolicy()

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.duplicates, DuplicatePolicyKind):
            errors.append(f"duplicates must be a DuplicatePolicyKind, got {self.duplicates!r}")

        if not isinstance(self.default_order, TraversalOrder):
            errors.append(f"default_order must be a TraversalOrder, got {self.default_order!r}")

        if self.duplicates == DuplicatePolicyKind.CUSTOM:
            if self.custom_policy is None:
                errors.append("custom_policy required when duplicates is CUSTOM")
            elif not isinstance(self.custom_policy, DuplicatePolicy):
                errors.append("custom_policy must be a DuplicatePolicy instance")
        elif self.custom_policy is not None:
            errors.append("custom_policy is only used when duplicates is CUSTOM")

        return errors
