"""
Decision tree core.

Components:
- Node: A vertex holding a value, ordered children and a decision function
- DecisionTree: Owns the root and walks it for an input
- TraversalResult: Value, effects and path of a single walk

Example:
    from decision_tree.core import DecisionTree, Node

    tree = DecisionTree[str](Node.decision_node(lambda x: 1 if x > 5 else 0, "size"))
    tree.add_child(tree.root, Node.leaf("low"))
    tree.add_child(tree.root, Node.leaf("high"))
    tree.traverse(7)  # "high"
"""

from decision_tree.core.errors import DecisionTreeError, MissingChildError, NoRootError
from decision_tree.core.models import TraversalResult
from decision_tree.core.node import STOP, Decision, Node
from decision_tree.core.tree import DecisionTree

__all__ = [
    "Decision",
    "DecisionTree",
    "DecisionTreeError",
    "MissingChildError",
    "NoRootError",
    "Node",
    "STOP",
    "TraversalResult",
]
