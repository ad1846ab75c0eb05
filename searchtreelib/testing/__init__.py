"""Testing utilities for SearchTreeLib consumers."""

from .fixtures import (
    SAMPLE_VALUES,
    SAMPLE_IN_ORDER,
    SAMPLE_PRE_ORDER,
    SAMPLE_POST_ORDER,
    sample_tree,
    skewed_tree,
)

__all__ = [
    'SAMPLE_VALUES',
    'SAMPLE_IN_ORDER',
    'SAMPLE_PRE_ORDER',
    'SAMPLE_POST_ORDER',
    'sample_tree',
    'skewed_tree',
]
