import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from graphkit import alg
from graphkit._errors import CycleDetectedError, GraphError
from graphkit._graph import Graph
from graphkit._io import load_graph, save_graph

from .config import ConfigError, GraphkitConfig, get_config
from .graph_query import (
    Algorithm,
    TraversalOrder,
    WeightError,
    find_shortest_paths,
    make_weight_fn,
    minimum_spanning_tree,
    summarize,
)
from .graph_render import (
    render_node_groups,
    render_order,
    render_path,
    render_paths,
    render_spanning_tree,
    render_summary,
)

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Graphkit CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _load_config() -> GraphkitConfig:
    try:
        return get_config()
    except ConfigError as e:
        err_console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _load(file: Path | None, config: GraphkitConfig) -> Graph:
    """Load the graph file given on the command line, or the configured one.

    Exits with code 1 when no file is available or the file cannot be read.
    """
    effective_file = file if file is not None else config.input
    if effective_file is None:
        err_console.print("[red]Error: Graph file required. Pass FILE or configure \\[tool.graphkit].input[/red]")
        raise typer.Exit(code=1)

    logger.debug(f"Loading graph from {effective_file}")
    try:
        return load_graph(effective_file)
    except FileNotFoundError as e:
        err_console.print(f"[red]Error: File not found: {effective_file}[/red]")
        raise typer.Exit(code=1) from e
    except (ValueError, ValidationError, GraphError) as e:
        err_console.print(f"[red]Error: Cannot read {effective_file}: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


GraphFileArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to a .json or .toml graph file (defaults to the configured input)"),
]
WeightOption = Annotated[
    str | None,
    typer.Option("--weight", help="Key of the weight in mapping edge labels"),
]


@app.command()
def info(file: GraphFileArgument = None) -> None:
    """Show the flags, counts and structure of a graph."""
    graph = _load(file, _load_config())
    render_summary(summarize(graph), out_console)


@app.command()
def topsort(file: GraphFileArgument = None) -> None:
    """Print a topological order of a directed graph."""
    graph = _load(file, _load_config())
    try:
        order = alg.topsort(graph)
    except CycleDetectedError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    render_order(order, out_console)


@app.command()
def cycles(file: GraphFileArgument = None) -> None:
    """List the cycles of a graph (strongly connected components that form a cycle)."""
    graph = _load(file, _load_config())
    render_node_groups(alg.find_cycles(graph), out_console, title="Cycles")


@app.command()
def components(
    file: GraphFileArgument = None,
    *,
    strong: Annotated[
        bool,
        typer.Option("--strong", help="Find strongly connected components instead"),
    ] = False,
) -> None:
    """List the connected components of a graph."""
    graph = _load(file, _load_config())
    groups = alg.tarjan(graph) if strong else alg.components(graph)
    render_node_groups(groups, out_console, title="Components")


@app.command()
def path(
    file: Annotated[Path, typer.Argument(help="Path to a .json or .toml graph file")],
    source: Annotated[str, typer.Argument(help="Source node")],
    target: Annotated[str | None, typer.Argument(help="Target node, prints only the path to it")] = None,
    *,
    algorithm: Annotated[
        Algorithm | None,
        typer.Option("--algorithm", help="Shortest path algorithm (defaults to the configured algorithm)"),
    ] = None,
    weight: WeightOption = None,
) -> None:
    """Compute shortest paths from SOURCE."""
    config = _load_config()
    graph = _load(file, config)
    effective_algorithm = algorithm if algorithm is not None else config.algorithm
    weight_fn = make_weight_fn(graph, weight if weight is not None else config.weight)

    logger.debug(f"Running {effective_algorithm} from {source}")
    try:
        results = find_shortest_paths(graph, source, algorithm=effective_algorithm, weight_fn=weight_fn)
        if target is None:
            render_paths(results, source, out_console)
            return
        extracted = alg.extract_path(results, source, target)
    except KeyError as e:
        err_console.print(f"[red]Error: {escape(str(e.args[0]))}[/red]")
        raise typer.Exit(code=1) from e
    except (GraphError, WeightError, ValueError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    render_path(extracted, out_console)


@app.command()
def traverse(
    file: Annotated[Path, typer.Argument(help="Path to a .json or .toml graph file")],
    seeds: Annotated[list[str], typer.Argument(help="Nodes to start the traversal from")],
    *,
    order: Annotated[
        TraversalOrder,
        typer.Option("--order", help="Visit nodes in pre-order or post-order"),
    ] = TraversalOrder.PRE,
) -> None:
    """Print the depth-first traversal order from the SEEDS."""
    graph = _load(file, _load_config())
    try:
        visited = alg.dfs(graph, seeds, order.value)
    except GraphError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    render_order(visited, out_console)


@app.command()
def mst(
    file: GraphFileArgument = None,
    *,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Save the spanning tree to this .json or .toml file"),
    ] = None,
    weight: WeightOption = None,
) -> None:
    """Compute a minimum spanning tree with Prim's algorithm."""
    config = _load_config()
    graph = _load(file, config)
    weight_fn = make_weight_fn(graph, weight if weight is not None else config.weight)

    try:
        spanning_tree = minimum_spanning_tree(graph, weight_fn)
    except (GraphError, WeightError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    render_spanning_tree(spanning_tree, out_console)

    if output is not None:
        try:
            save_graph(spanning_tree.tree, output)
        except ValueError as e:
            err_console.print(f"[red]Error: {escape(str(e))}[/red]")
            raise typer.Exit(code=1) from e
        err_console.print(f"[green]✓ Spanning tree written to {output}[/green]")


@app.command()
def convert(
    input: Annotated[  # noqa: A002
        Path,
        typer.Argument(help="Graph file to read"),
    ],
    output: Annotated[
        Path,
        typer.Argument(help="Graph file to write, format chosen from its suffix"),
    ],
) -> None:
    """Rewrite a graph file in another format."""
    graph = _load(input, _load_config())
    try:
        save_graph(graph, output)
    except ValueError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    err_console.print(f"[green]✓ Wrote {output}[/green]")


def main() -> None:
    app()
