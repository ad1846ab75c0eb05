"""Exception hierarchy for SearchTreeLib.

Every error raised by the library derives from SearchTreeError, and each one
also derives from the closest built-in exception so callers can catch either.
"""

from typing import Any


class SearchTreeError(Exception):
    """Base class for all SearchTreeLib errors."""
    pass


class EmptySequenceError(SearchTreeError, LookupError):
    """Raised when next() is called on an exhausted traversal sequence.

    Callers are expected to check has_next() first.
    """
    pass


class UnsupportedOperationError(SearchTreeError, NotImplementedError):
    """Raised when removal is attempted through a traversal sequence."""
    pass


class DuplicateValueError(SearchTreeError, ValueError):
    """Raised by the strict duplicate policy when a value is already stored."""

    def __init__(self, value: Any):
        super().__init__(f"Value already present in tree: {value!r}")
        self.value = value


class InvalidConfigError(SearchTreeError):
    """Raised when a TreeConfig fails validation."""
    pass
