"""Rich rendering utilities for graph commands."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rich.console import Console

    from graphkit._types import ExtractedPath, PathEntry

    from .graph_query import GraphSummary, SpanningTree


def _format_distance(distance: float) -> str:
    if distance == math.inf:
        return "[dim]unreachable[/dim]"
    if float(distance).is_integer():
        return str(int(distance))
    return f"{distance:g}"


def _yes_no(value: bool) -> str:  # noqa: FBT001
    return "[green]yes[/green]" if value else "[yellow]no[/yellow]"


def render_summary(summary: GraphSummary, console: Console) -> None:
    """Render a graph summary.

    Args:
        summary: GraphSummary to render.
        console: Rich Console to output to.

    """
    table = Table(show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Directed", _yes_no(summary.directed))
    table.add_row("Multigraph", _yes_no(summary.multigraph))
    table.add_row("Compound", _yes_no(summary.compound))
    table.add_row("Nodes", str(summary.node_count))
    table.add_row("Edges", str(summary.edge_count))
    table.add_row("Components", str(summary.component_count))
    table.add_row("Acyclic", _yes_no(summary.acyclic))
    table.add_row("Sources", escape(", ".join(summary.sources)) or "[dim]None[/dim]")
    table.add_row("Sinks", escape(", ".join(summary.sinks)) or "[dim]None[/dim]")

    console.print(table)


def render_node_groups(groups: list[list[str]], console: Console, *, title: str) -> None:
    """Render groups of nodes (components or cycles) as a numbered table.

    Args:
        groups: Lists of node names.
        console: Rich Console to output to.
        title: Column header naming what the groups are.

    """
    if not groups:
        console.print(f"[dim]No {title.lower()} found[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column(title)
    table.add_column("Size", justify="right")

    for i, group in enumerate(groups, start=1):
        table.add_row(str(i), escape(", ".join(group)), str(len(group)))

    console.print(table)
    console.print(f"\n[dim]Total: {len(groups)} {title.lower()}[/dim]")


def render_order(order: list[str], console: Console) -> None:
    """Render a node ordering, one node per line.

    Args:
        order: Node names in order.
        console: Rich Console to output to.

    """
    for i, v in enumerate(order, start=1):
        console.print(f"[dim]{i:>4}[/dim]  {escape(v)}")


def render_paths(results: Mapping[str, PathEntry], source: str, console: Console) -> None:
    """Render a single-source shortest path result as a table.

    Args:
        results: Mapping from node to PathEntry.
        source: Source node of the result.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan", title=f"Shortest paths from {escape(source)}")
    table.add_column("Node", style="bold")
    table.add_column("Distance", justify="right")
    table.add_column("Predecessor", style="dim")

    for v, entry in results.items():
        table.add_row(escape(v), _format_distance(entry.distance), escape(entry.predecessor) or "-")

    console.print(table)


def render_path(path: ExtractedPath, console: Console) -> None:
    """Render one extracted path with its weight."""
    console.print(" -> ".join(escape(v) for v in path.path))
    console.print(f"[cyan]Weight:[/cyan] {_format_distance(path.weight)}")


def render_spanning_tree(spanning_tree: SpanningTree, console: Console) -> None:
    """Render the edges of a minimum spanning tree and its total weight.

    Args:
        spanning_tree: SpanningTree to render.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Weight", justify="right")

    for v, w, weight in spanning_tree.edges:
        table.add_row(escape(v), escape(w), _format_distance(weight))

    console.print(table)
    console.print(f"\n[cyan]Total weight:[/cyan] {_format_distance(spanning_tree.total_weight)}")
