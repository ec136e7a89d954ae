"""
Shared fixtures for decision tree core tests.
"""

import pytest

from decision_tree.core import DecisionTree, Node


@pytest.fixture
def binary_tree() -> DecisionTree[str]:
    """Root picks children[1] for inputs above 5, children[0] otherwise."""
    tree: DecisionTree[str] = DecisionTree()
    tree.root = Node[str].decision_node(lambda x: 1 if x > 5 else 0, "size check")
    tree.add_child(tree.root, Node[str].leaf("low", "small input"))
    tree.add_child(tree.root, Node[str].leaf("high", "large input"))
    return tree


@pytest.fixture
def chain_tree() -> DecisionTree[str]:
    """Three-level chain: level 1 -> level 2 -> leaf."""
    tree: DecisionTree[str] = DecisionTree()
    tree.root = Node[str].decision_node(lambda _: 0, "level 1")
    level2 = Node[str].decision_node(lambda _: 0, "level 2")
    tree.add_child(tree.root, level2)
    tree.add_child(level2, Node[str].leaf("final", "leaf"))
    return tree
