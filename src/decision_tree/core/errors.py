from __future__ import annotations

"""Errors raised while walking a decision tree."""

from typing import List, Optional


class DecisionTreeError(RuntimeError):
    """Base class for decision tree failures."""


class NoRootError(DecisionTreeError):
    """Raised when a tree without a root node is traversed."""

    def __init__(self, message: str = "Decision tree has no root node."):
        super().__init__(message)


class MissingChildError(DecisionTreeError):
    """A decision selected a child slot that holds no node."""

    def __init__(self, index: int, path: Optional[List[int]] = None):
        self.index = index
        self.path = list(path or [])
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        where = "/".join(str(i) for i in self.path) or "<root>"
        return f"Child slot {self.index} under {where} is empty"


__all__ = ["DecisionTreeError", "MissingChildError", "NoRootError"]
