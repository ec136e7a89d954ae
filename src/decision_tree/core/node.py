"""
Decision tree node model.

A node is either a leaf (holds a value, never branches) or a decision node
(holds a decision function that picks one of its children by index). Both
forms share the same fields:

- value: Returned when a traversal stops on this node
- children: Ordered child slots; the decision result indexes into them
- decision: Opaque input -> child index. Negative or out-of-range means stop
- description: Label folded into the effects trace
- original_input / effects: Stamped by DecisionTree.traverse

Example tree:
    Budget check (decision)
    ├── [0] Low budget options (decision)
    │   ├── [0] Paris
    │   └── [1] Thailand
    └── [1] High budget options (decision)
"""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, field_validator

T = TypeVar("T")

# Canonical "stop here" index returned by leaf decisions
STOP = -1

Decision = Callable[[Any], int]


def _stop(_input: Any) -> int:
    return STOP


class Node(BaseModel, Generic[T]):
    """
    A single vertex of a decision tree.

    The node is generic only in its value type. Decision functions always
    receive the caller's input as an opaque object, so one tree can serve
    inputs of different shapes.
    """

    value: Optional[T] = None
    children: List[Optional[Node]] = Field(default_factory=list)
    decision: Decision = _stop
    description: str = ""

    # Traversal-time fields (overwritten by every traverse call)
    original_input: Any = None
    effects: List[str] = Field(default_factory=list)

    model_config = {"arbitrary_types_allowed": True}

    @field_validator("description", mode="before")
    @classmethod
    def _absent_description(cls, v: Optional[str]) -> str:
        # None and "" both mean "no label"
        return "" if v is None else v

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def leaf(cls, value: Optional[T], description: Optional[str] = "") -> "Node[T]":
        """Create a leaf node whose decision always signals stop."""
        return cls(value=value, description=description, decision=_stop)

    @classmethod
    def decision_node(cls, decision: Decision, description: Optional[str] = "") -> "Node[T]":
        """Create a branching node with no value; wire children with add_child."""
        return cls(decision=decision, description=description)

    # =========================================================================
    # Inspection
    # =========================================================================

    @property
    def is_leaf(self) -> bool:
        """True when the node has no child slots."""
        return len(self.children) == 0

    @property
    def child_count(self) -> int:
        return len(self.children)

    def describe(self) -> str:
        """Human-readable label: description, value, or both."""
        label = self.description or ""
        if self.value is None:
            return label or "<decision>"
        if label:
            return f"{label} -> {self.value!r}"
        return repr(self.value)


Node.model_rebuild()


__all__ = ["Decision", "Node", "STOP"]
