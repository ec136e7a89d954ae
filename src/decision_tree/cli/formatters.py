"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from decision_tree.core.models import TraversalResult
from decision_tree.core.node import Node
from decision_tree.core.tree import DecisionTree


def format_node(node: Optional[Node[Any]], index: Optional[int] = None) -> str:
    """Format a node label for display, prefixed with its child index."""
    prefix = f"[dim][{index}][/dim] " if index is not None else ""
    if node is None:
        return f"{prefix}[red]<empty slot>[/red]"
    label = escape(node.describe())
    if node.is_leaf:
        return f"{prefix}[green]{label}[/green]"
    return f"{prefix}[bold]{label}[/bold]"


def build_tree_view(tree: DecisionTree[Any], title: str = "Decision tree") -> Tree:
    view = Tree(f"[bold blue]{title}[/bold blue]")
    if tree.root is None:
        view.add("[red]<no root>[/red]")
        return view

    stack: List[Tuple[Tree, Optional[Node[Any]], Optional[int]]] = [(view, tree.root, None)]
    while stack:
        branch, node, index = stack.pop()
        child_view = branch.add(format_node(node, index))
        if node is None:
            continue
        # Reverse push keeps children in index order on pop
        for child_index in range(len(node.children) - 1, -1, -1):
            stack.append((child_view, node.children[child_index], child_index))
    return view


def build_effects_table(result: TraversalResult[Any]) -> Table:
    table = Table(title="Effects")
    table.add_column("#", style="dim")
    table.add_column("Effect", style="cyan")
    for idx, effect in enumerate(result.effects, start=1):
        table.add_row(str(idx), escape(effect))
    return table


def build_batch_table(rows: Sequence[Tuple[str, TraversalResult[Any]]]) -> Table:
    table = Table(title="Recommendations", show_header=True, header_style="bold blue")
    table.add_column("Profile", style="cyan")
    table.add_column("Destination", style="green")
    table.add_column("Path", style="dim")
    table.add_column("Effects")
    for name, result in rows:
        table.add_row(
            name,
            str(result.value) if result.value is not None else "-",
            "/".join(str(i) for i in result.path) or "<root>",
            escape(" > ".join(result.effects)),
        )
    return table


__all__ = [
    "build_batch_table",
    "build_effects_table",
    "build_tree_view",
    "format_node",
]
