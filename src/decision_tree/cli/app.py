"""
Decision tree CLI: inspect sample trees and run the vacation recommender.

- samples: list bundled trees
- show: render a tree's structure
- recommend: walk the vacation tree for preferences given as options
- batch: walk the vacation tree for every profile in a YAML file or folder
"""

from __future__ import annotations

import typer
from rich.console import Console

from decision_tree.cli.formatters import build_batch_table, build_effects_table, build_tree_view
from decision_tree.cli.load_helpers import load_or_exit
from decision_tree.cli.paths import profiles_path
from decision_tree.io.loaders import load_profiles
from decision_tree.samples import VacationPreferences, build_vacation_tree, default_samples
from decision_tree.utils.logging import configure_logging

app = typer.Typer(help="Decision tree CLI: inspect sample trees and run the vacation recommender.")
console = Console()


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR); defaults to $DECISION_TREE_LOG_LEVEL or WARNING",
    ),
) -> None:
    """Configure logging before any command runs."""
    try:
        configure_logging(log_level)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2)


@app.command()
def samples() -> None:
    """List the bundled sample trees."""
    registry = default_samples()
    for sample in registry.all():
        console.print(f"[bold]{sample.name}[/bold]  {sample.summary}")


@app.command()
def show(name: str = typer.Argument(..., help="Sample tree name (see 'samples')")) -> None:
    """Render the structure of a sample tree."""
    registry = default_samples()
    try:
        sample = registry.get(name)
    except KeyError:
        console.print(f"[red]Sample tree not found[/red]: {name}")
        raise typer.Exit(code=2)

    tree = sample.build()
    console.print(build_tree_view(tree, title=sample.name))
    console.print(f"Nodes: {tree.count_nodes()}, Depth: {tree.get_depth()}")


@app.command()
def recommend(
    budget: int = typer.Option(0, "--budget", "-b", min=0, help="Trip budget"),
    beach: bool = typer.Option(False, "--beach/--no-beach", help="Prefer a beach destination"),
    adventure: bool = typer.Option(False, "--adventure/--no-adventure", help="Prefer an adventure trip"),
    trace: bool = typer.Option(False, "--trace", help="Show the effects trace and the path taken"),
) -> None:
    """Recommend a vacation destination."""
    preferences = VacationPreferences(budget=budget, prefers_beach=beach, prefers_adventure=adventure)
    result = build_vacation_tree().trace(preferences)

    console.print(f"[bold]Destination:[/bold] [green]{result.value}[/green]")
    if trace:
        console.print(build_effects_table(result))
        console.print(f"\n[dim]Path: {result.describe_path()}[/dim]")


@app.command()
def batch(
    path: str | None = typer.Argument(None, help="Profiles YAML file or folder (default: ./profiles)"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Recommend destinations for every profile in a YAML file or folder."""
    profiles = load_or_exit(load_profiles, profiles_path(path), console=console, verbose_errors=verbose)
    if not profiles:
        console.print("[yellow]No profiles found[/yellow]")
        return

    tree = build_vacation_tree()
    rows = [(profile.name, tree.trace(profile)) for profile in profiles]
    console.print(build_batch_table(rows))
    console.print(f"[green]OK[/green] Evaluated {len(rows)} profile(s)")


__all__ = ["app"]
