"""Generic decision tree engine with an effects trace."""

from decision_tree.core import (
    STOP,
    DecisionTree,
    DecisionTreeError,
    MissingChildError,
    Node,
    NoRootError,
    TraversalResult,
)

__all__ = [
    "DecisionTree",
    "DecisionTreeError",
    "MissingChildError",
    "Node",
    "NoRootError",
    "STOP",
    "TraversalResult",
]
