"""Graph query functions for CLI commands.

This module provides pure functions for running the algorithms on a loaded graph.
These are the functional core - no I/O, no Rich rendering.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from numbers import Real
from typing import TYPE_CHECKING

from graphkit import alg
from graphkit._graph import Graph

if TYPE_CHECKING:
    from graphkit._types import Edge, PathEntry, WeightFn


class Algorithm(StrEnum):
    """Single-source shortest path algorithm selectable from the CLI."""

    AUTO = "auto"
    DIJKSTRA = "dijkstra"
    BELLMAN_FORD = "bellman-ford"


class TraversalOrder(StrEnum):
    """Depth-first visiting order selectable from the CLI."""

    PRE = "pre"
    POST = "post"


class WeightError(Exception):
    """Raised when an edge label cannot be interpreted as a weight."""

    def __init__(self, edge: Edge, label: object) -> None:
        self.edge = edge
        self.label = label
        super().__init__(f"Edge '{edge}' has a non-numeric weight: {label!r}")


@dataclass(frozen=True, slots=True)
class GraphSummary:
    """Summary of a graph's shape."""

    directed: bool
    multigraph: bool
    compound: bool
    node_count: int
    edge_count: int
    sources: list[str]
    sinks: list[str]
    acyclic: bool
    component_count: int


@dataclass(frozen=True, slots=True)
class SpanningTree:
    """A minimum spanning tree together with the weight of each tree edge."""

    tree: Graph
    edges: list[tuple[str, str, float]]

    @property
    def total_weight(self) -> float:
        """Sum of the tree edge weights."""
        return sum(weight for _, _, weight in self.edges)


def make_weight_fn(graph: Graph, key: str = "weight") -> WeightFn:
    """Build a weight function reading edge labels of ``graph``.

    A numeric label is the weight itself. A mapping label is looked up with
    ``key``. Edges without a label, or whose mapping lacks ``key``, weigh 1.

    Args:
        graph: Graph whose edge labels hold the weights.
        key: Key to read from mapping labels.

    Returns:
        A function from edge to weight. It raises WeightError for labels that
        are neither numbers, mappings nor None.

    """

    def weight_fn(edge: Edge) -> float:
        label = graph.edge_obj(edge)
        if isinstance(label, Mapping):
            label = label.get(key, 1)
        if label is None:
            return 1
        if isinstance(label, bool) or not isinstance(label, Real):
            raise WeightError(edge, label)
        return float(label)

    return weight_fn


def summarize(graph: Graph) -> GraphSummary:
    """Collect counts and structural facts about a graph.

    Args:
        graph: The graph to analyze.

    Returns:
        GraphSummary for the graph.

    """
    return GraphSummary(
        directed=graph.is_directed(),
        multigraph=graph.is_multigraph(),
        compound=graph.is_compound(),
        node_count=graph.node_count(),
        edge_count=graph.edge_count(),
        sources=graph.sources(),
        sinks=graph.sinks(),
        acyclic=alg.is_acyclic(graph),
        component_count=len(alg.components(graph)),
    )


def find_shortest_paths(
    graph: Graph,
    source: str,
    *,
    algorithm: Algorithm = Algorithm.AUTO,
    weight_fn: WeightFn | None = None,
) -> dict[str, PathEntry]:
    """Run the selected single-source shortest path algorithm.

    Raises:
        KeyError: If ``source`` is not in the graph.

    """
    if not graph.has_node(source):
        msg = f"Node not found: {source}"
        raise KeyError(msg)

    match algorithm:
        case Algorithm.DIJKSTRA:
            return alg.dijkstra(graph, source, weight_fn)
        case Algorithm.BELLMAN_FORD:
            return alg.bellman_ford(graph, source, weight_fn)
        case _:
            return alg.shortest_paths(graph, source, weight_fn)


def minimum_spanning_tree(graph: Graph, weight_fn: WeightFn) -> SpanningTree:
    """Run Prim's algorithm and weigh the resulting tree edges.

    The weight of a tree edge is the smallest weight among the source graph
    edges joining its endpoints, in either direction. Tree edges are labelled
    with that weight.

    """
    tree = alg.prim(graph, weight_fn)
    weighted: list[tuple[str, str, float]] = []
    for edge in tree.edges():
        weight = min(weight_fn(e) for e in graph.node_edges(edge.v, edge.w) or [])
        tree.set_edge_obj(edge, weight)
        weighted.append((edge.v, edge.w, weight))
    return SpanningTree(tree=tree, edges=weighted)
