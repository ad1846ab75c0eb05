#!/usr/bin/env python3
"""
Basic example showing how to build and walk a search tree.

This example demonstrates:
- Building a tree from a list of values
- Membership checks
- Consuming the three traversal sequences
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import build_tree, get_tree_stats


def main():
    """Build a tree from command line integers (or a default set) and print it."""
    values = [int(arg) for arg in sys.argv[1:]] or [5, 3, 8, 1, 4, 7, 9]
    tree = build_tree(values)

    print(f"Inserted: {values}")
    print("-" * 50)

    for name, sequence in (
        ("in-order", tree.in_order_sequence()),
        ("pre-order", tree.pre_order_sequence()),
        ("post-order", tree.post_order_sequence()),
    ):
        ordered = []
        while sequence.has_next():
            ordered.append(sequence.next())
        print(f"{name:>10}: {ordered}")

    print("-" * 50)
    for probe in (4, 6):
        print(f"contains({probe}) = {tree.contains(probe)}")

    stats = get_tree_stats(tree)
    print(f"Nodes: {stats['total_nodes']}, leaves: {stats['leaf_nodes']}, height: {stats['max_depth']}")


if __name__ == "__main__":
    main()
