"""
Vacation recommender built on the decision tree core.

Tree structure:
    Budget check (budget > 2000?)
    ├── [0] Low budget options (prefers beach?)
    │   ├── [0] Paris        "Affordable city break"
    │   └── [1] Thailand     "Budget beach destination"
    └── [1] High budget options (prefers adventure?)
        ├── [0] New Zealand  "Adventure paradise"
        └── [1] Maldives     "Luxury relaxation"

Inputs that are not VacationPreferences follow branch 0 at every level,
which lands on Paris.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from decision_tree.core.node import Node
from decision_tree.core.tree import DecisionTree

HIGH_BUDGET_THRESHOLD = 2000


class VacationPreferences(BaseModel):
    """What a traveler wants from a trip."""

    name: Optional[str] = None
    budget: int = Field(0, ge=0)
    prefers_beach: bool = False
    prefers_adventure: bool = False
    notes: Optional[str] = None


def _budget_check(input: Any) -> int:
    if not isinstance(input, VacationPreferences):
        return 0
    return 1 if input.budget > HIGH_BUDGET_THRESHOLD else 0


def _low_budget_choice(input: Any) -> int:
    if not isinstance(input, VacationPreferences):
        return 0
    return 1 if input.prefers_beach else 0


def _high_budget_choice(input: Any) -> int:
    if not isinstance(input, VacationPreferences):
        return 0
    # Adventure -> New Zealand, otherwise relax in the Maldives
    return 0 if input.prefers_adventure else 1


def build_vacation_tree() -> DecisionTree[str]:
    """Build the vacation destination tree."""
    tree: DecisionTree[str] = DecisionTree()
    tree.root = Node[str].decision_node(_budget_check, "Budget check")

    low_budget = Node[str].decision_node(_low_budget_choice, "Low budget options")
    high_budget = Node[str].decision_node(_high_budget_choice, "High budget options")
    tree.add_child(tree.root, low_budget)
    tree.add_child(tree.root, high_budget)

    tree.add_child(low_budget, Node[str].leaf("Paris", "Affordable city break"))
    tree.add_child(low_budget, Node[str].leaf("Thailand", "Budget beach destination"))

    tree.add_child(high_budget, Node[str].leaf("New Zealand", "Adventure paradise"))
    tree.add_child(high_budget, Node[str].leaf("Maldives", "Luxury relaxation"))

    return tree


def recommend(preferences: VacationPreferences) -> Optional[str]:
    """Shortcut: build a fresh tree and return the recommended destination."""
    return build_vacation_tree().traverse(preferences)


__all__ = [
    "HIGH_BUDGET_THRESHOLD",
    "VacationPreferences",
    "build_vacation_tree",
    "recommend",
]
