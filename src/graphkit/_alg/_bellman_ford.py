"""Bellman-Ford single-source shortest paths with negative weights."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from graphkit._errors import NegativeCycleError
from graphkit._types import PathEntry

from ._defaults import out_edges_fn, unit_weight

if TYPE_CHECKING:
    from graphkit._graph import Graph
    from graphkit._types import EdgeFn, WeightFn

logger = logging.getLogger(__name__)


def bellman_ford(
    graph: Graph,
    source: str,
    weight_fn: WeightFn | None = None,
    edge_fn: EdgeFn | None = None,
) -> dict[str, PathEntry]:
    """Find the shortest paths from ``source``, allowing negative edge weights.

    Every edge reported by ``edge_fn`` for a node is relaxed in the direction
    leading away from that node, so undirected graphs are handled too. At most
    |V| - 1 rounds are run, stopping early once a round changes nothing.

    Complexity: O(|V| * |E|).

    Args:
        graph: Graph to search.
        source: Node the paths start from.
        weight_fn: Returns the weight of an edge. Defaults to 1 for every edge.
        edge_fn: Returns the edges to relax for a node. Defaults to ``graph.out_edges``.

    Returns:
        Mapping from node to its PathEntry, as for :func:`dijkstra`.

    Raises:
        NegativeCycleError: If a negative weight cycle is reachable from ``source``.

    """
    source = str(source)
    weight_fn = weight_fn or unit_weight
    edge_fn = edge_fn or out_edges_fn(graph)

    nodes = graph.nodes()
    results = {v: PathEntry(distance=0 if v == source else math.inf) for v in nodes}

    def relax_all_edges() -> bool:
        improved = False
        for vertex in nodes:
            for edge in edge_fn(vertex):
                # An edge reported for its target is followed backwards
                in_vertex = edge.v if edge.v == vertex else edge.w
                out_vertex = edge.w if in_vertex == edge.v else edge.v
                distance = results[in_vertex].distance + weight_fn(edge)
                if distance < results[out_vertex].distance:
                    results[out_vertex] = PathEntry(distance=distance, predecessor=in_vertex)
                    improved = True
        return improved

    node_count = len(nodes)
    iterations = 0
    for _ in range(1, node_count):
        iterations += 1
        if not relax_all_edges():
            break
    logger.debug("Bellman-Ford from %s settled after %d rounds", source, iterations)

    if iterations == node_count - 1 and relax_all_edges():
        msg = "The graph contains a negative weight cycle"
        raise NegativeCycleError(msg)

    return results
