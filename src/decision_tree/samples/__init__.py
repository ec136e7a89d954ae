"""
Ready-made decision trees.

Example:
    from decision_tree.samples import default_samples

    tree = default_samples().build("vacation")
"""

from decision_tree.samples.registry import SampleTree, SampleTreeRegistry
from decision_tree.samples.vacation import VacationPreferences, build_vacation_tree, recommend


def default_samples() -> SampleTreeRegistry:
    """Registry holding every bundled sample tree."""
    registry = SampleTreeRegistry()
    registry.add(
        SampleTree(
            name="vacation",
            summary="Vacation destination by budget, beach and adventure preferences",
            builder=build_vacation_tree,
        )
    )
    return registry


__all__ = [
    "SampleTree",
    "SampleTreeRegistry",
    "VacationPreferences",
    "build_vacation_tree",
    "default_samples",
    "recommend",
]
