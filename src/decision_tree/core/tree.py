"""
Decision tree traversal engine.

Walks from the root, asking each branching node's decision function which
child to follow, until it reaches a node without children or the decision
returns an index outside the children range. The value of that terminal
node is the result.

Effects trace:
    A branching node appends its description to the running effects just
    before its decision is evaluated. Every node entered is stamped with a
    copy of the running effects as they were on arrival, so a pure leaf sees
    its ancestors' labels only, while a branching node also ends up with its
    own label.

    root "level 1"    effects = ["level 1"]
    └── "level 2"     effects = ["level 1", "level 2"]
        └── leaf      effects = ["level 1", "level 2"]
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Iterator, List, Optional, Tuple, TypeVar

from decision_tree.core.errors import MissingChildError, NoRootError
from decision_tree.core.models import TraversalResult
from decision_tree.core.node import Node

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DecisionTree(Generic[T]):
    """Owns a root node and walks it for a given input."""

    def __init__(self, root: Optional[Node[T]] = None, *, strict: bool = False):
        self.root = root
        # strict trees reject None arguments to add_child instead of deferring
        self.strict = strict

    # =========================================================================
    # Structure
    # =========================================================================

    def add_child(self, parent: Optional[Node[T]], child: Optional[Node[T]]) -> None:
        """
        Append ``child`` to ``parent.children``.

        A ``None`` parent is ignored. A ``None`` child is stored as-is and
        only fails when a traversal selects that slot (MissingChildError).
        Strict trees raise ValueError for either case instead.
        """
        if parent is None:
            if self.strict:
                raise ValueError("add_child requires a parent node")
            logger.debug("add_child called without parent; ignoring")
            return
        if child is None:
            if self.strict:
                raise ValueError("add_child requires a child node")
            logger.debug("Appending empty child slot %d to %r", len(parent.children), parent.description)
        parent.children.append(child)

    # =========================================================================
    # Traversal
    # =========================================================================

    def traverse(self, input: Any) -> Optional[T]:
        """
        Walk the tree for ``input`` and return the terminal node's value.

        Stamps ``original_input`` and ``effects`` on every node of the path,
        overwriting whatever a previous traversal left there.

        Raises:
            NoRootError: The tree has no root.
            MissingChildError: A decision selected an empty child slot.
        """
        return self._walk(input, stamp=True).value

    def trace(self, input: Any) -> TraversalResult[T]:
        """
        Walk the tree for ``input`` without modifying any node.

        Returns the value together with the effects trace and the path taken.
        Safe to call from several threads on a shared tree as long as the
        decision functions are pure.
        """
        return self._walk(input, stamp=False)

    def _walk(self, input: Any, *, stamp: bool) -> TraversalResult[T]:
        if self.root is None:
            raise NoRootError()

        current = self.root
        effects: List[str] = []
        path: List[int] = []
        descriptions: List[str] = [current.description]
        stopped_early = False

        if stamp:
            current.original_input = input
            current.effects = list(effects)

        while current.children:
            if current.description:
                effects.append(current.description)
                if stamp:
                    current.effects = list(effects)

            index = current.decision(input)
            if index < 0 or index >= len(current.children):
                logger.debug(
                    "Decision at %r returned %d (children=%d); stopping",
                    current.description,
                    index,
                    len(current.children),
                )
                stopped_early = True
                break

            child = current.children[index]
            if child is None:
                raise MissingChildError(index, path)

            current = child
            path.append(index)
            descriptions.append(current.description)
            if stamp:
                current.original_input = input
                current.effects = list(effects)

        logger.debug("Traversal ended at depth %d: %r", len(path), current.description)
        return TraversalResult(
            value=current.value,
            effects=effects,
            path=path,
            descriptions=descriptions,
            stopped_early=stopped_early,
        )

    # =========================================================================
    # Inspection
    # =========================================================================

    def iter_nodes(self) -> Iterator[Tuple[List[int], Node[T]]]:
        """Yield ``(path, node)`` pairs in pre-order; empty slots are skipped."""
        if self.root is None:
            return
        stack = [([], self.root)]
        while stack:
            path, node = stack.pop()
            yield path, node
            for index in range(len(node.children) - 1, -1, -1):
                child = node.children[index]
                if child is not None:
                    stack.append((path + [index], child))

    def get_node(self, path: List[int]) -> Optional[Node[T]]:
        """Resolve a path of child indices (as in TraversalResult.path)."""
        current = self.root
        for index in path:
            if current is None or not 0 <= index < len(current.children):
                return None
            current = current.children[index]
        return current

    def count_nodes(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def get_depth(self) -> int:
        """Maximum number of edges from the root to any node."""
        return max((len(path) for path, _ in self.iter_nodes()), default=0)


__all__ = ["DecisionTree"]
