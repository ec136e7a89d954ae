from __future__ import annotations

"""Traversal-scoped result models."""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class TraversalResult(BaseModel, Generic[T]):
    """
    Outcome of a single walk through a decision tree.

    Unlike the fields stamped on nodes by ``traverse``, a result belongs to
    one call only and is never shared with other traversals.

    ``path`` holds the child index chosen at each level, so ``[]`` means the
    root was the terminal node and ``[1, 0]`` means root -> children[1] ->
    children[0]. ``descriptions`` is aligned with the visited nodes (root
    first) and keeps empty labels; ``effects`` only holds the labels of
    nodes that branched.
    """

    value: Optional[T] = None
    effects: List[str] = Field(default_factory=list)
    path: List[int] = Field(default_factory=list)
    descriptions: List[str] = Field(default_factory=list)
    stopped_early: bool = False

    @property
    def depth(self) -> int:
        """Number of edges walked from the root."""
        return len(self.path)

    @property
    def terminal_description(self) -> str:
        return self.descriptions[-1] if self.descriptions else ""

    def describe_path(self) -> str:
        """Describe the walked path, e.g. ``Budget check -> [0] Low budget options``."""
        if not self.descriptions:
            return ""
        parts = [self.descriptions[0] or "<root>"]
        for index, label in zip(self.path, self.descriptions[1:]):
            parts.append(f"[{index}] {label}" if label else f"[{index}]")
        return " -> ".join(parts)


__all__ = ["TraversalResult"]
