"""Tests for the high-level functional API."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import (
    BinarySearchTree,
    TraversalOrder,
    TraversalSequence,
    TreeConfig,
    build_tree,
    traverse_tree,
    collect_values,
    count_nodes,
    tree_height,
    get_leaf_values,
    get_tree_stats,
)
from searchtreelib.testing import (
    sample_tree,
    skewed_tree,
    SAMPLE_VALUES,
    SAMPLE_IN_ORDER,
    SAMPLE_PRE_ORDER,
    SAMPLE_POST_ORDER,
)


def test_build_tree_uses_first_value_as_root():
    tree = build_tree(SAMPLE_VALUES)
    assert isinstance(tree, BinarySearchTree)
    assert tree.value == 5
    assert collect_values(tree, "pre") == SAMPLE_PRE_ORDER


def test_build_tree_accepts_generators():
    tree = build_tree(v for v in [2, 1, 3])
    assert collect_values(tree) == [1, 2, 3]


def test_build_tree_empty():
    with pytest.raises(ValueError, match="at least one value"):
        build_tree([])


def test_build_tree_passes_config():
    config = TreeConfig.strict()
    assert build_tree([1, 2], config).config is config


def test_traverse_tree_returns_fresh_sequence():
    tree = sample_tree()
    first = traverse_tree(tree, TraversalOrder.POST_ORDER)
    second = traverse_tree(tree, TraversalOrder.POST_ORDER)
    assert isinstance(first, TraversalSequence)
    assert first is not second
    assert list(first) == SAMPLE_POST_ORDER
    assert list(second) == SAMPLE_POST_ORDER


def test_collect_values_orders():
    tree = sample_tree()
    assert collect_values(tree) == SAMPLE_IN_ORDER
    assert collect_values(tree, "in") == SAMPLE_IN_ORDER
    assert collect_values(tree, "pre") == SAMPLE_PRE_ORDER
    assert collect_values(tree, "post") == SAMPLE_POST_ORDER


def test_collect_values_unknown_order():
    with pytest.raises(ValueError):
        collect_values(sample_tree(), "zigzag")


def test_count_nodes():
    assert count_nodes(BinarySearchTree(10)) == 1
    assert count_nodes(sample_tree()) == 7
    assert count_nodes(skewed_tree(50)) == 50


def test_tree_height():
    assert tree_height(BinarySearchTree(10)) == 0
    assert tree_height(sample_tree()) == 2
    assert tree_height(skewed_tree(50)) == 49


def test_get_leaf_values():
    assert get_leaf_values(sample_tree()) == [1, 4, 7, 9]
    assert get_leaf_values(BinarySearchTree(10)) == [10]
    assert get_leaf_values(skewed_tree(5)) == [4]


def test_get_tree_stats_sample():
    stats = get_tree_stats(sample_tree())
    assert stats['total_nodes'] == 7
    assert stats['leaf_nodes'] == 4
    assert stats['internal_nodes'] == 3
    assert stats['max_depth'] == 2
    assert stats['depths'] == {0: 1, 1: 2, 2: 4}
    assert stats['min_value'] == 1
    assert stats['max_value'] == 9


def test_get_tree_stats_single_node():
    stats = get_tree_stats(BinarySearchTree("only"))
    assert stats['total_nodes'] == 1
    assert stats['leaf_nodes'] == 1
    assert stats['internal_nodes'] == 0
    assert stats['max_depth'] == 0
    assert stats['min_value'] == stats['max_value'] == "only"
