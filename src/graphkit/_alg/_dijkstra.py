"""Dijkstra single-source and all-pairs shortest paths."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from graphkit._data import PriorityQueue
from graphkit._errors import NegativeWeightError
from graphkit._types import PathEntry

from ._defaults import out_edges_fn, unit_weight

if TYPE_CHECKING:
    from graphkit._graph import Graph
    from graphkit._types import EdgeFn, WeightFn

logger = logging.getLogger(__name__)


def dijkstra(
    graph: Graph,
    source: str,
    weight_fn: WeightFn | None = None,
    edge_fn: EdgeFn | None = None,
) -> dict[str, PathEntry]:
    """Find the shortest paths from ``source`` to every node of ``graph``.

    Complexity: O((|E| + |V|) * log |V|).

    Args:
        graph: Graph to search.
        source: Node the paths start from.
        weight_fn: Returns the weight of an edge. Defaults to 1 for every edge.
        edge_fn: Returns the edges to follow from a node. Defaults to
            ``graph.out_edges``. The far end of an edge is whichever endpoint is
            not the current node, so incident edges work for undirected searches.

    Returns:
        Mapping from node to its PathEntry. Unreachable nodes have distance
        ``inf`` and predecessor ``""``; so does the source's predecessor.

    Raises:
        NegativeWeightError: If a traversed edge has a negative weight.

    Example:
        >>> from graphkit import Graph
        >>> g = Graph()
        >>> g.set_path(["a", "b", "c"])
        Graph(directed=True, multigraph=False, compound=False, nodes=3, edges=2)
        >>> dijkstra(g, "a")["c"]
        PathEntry(distance=2, predecessor='b')

    """
    source = str(source)
    weight_fn = weight_fn or unit_weight
    edge_fn = edge_fn or out_edges_fn(graph)

    results: dict[str, PathEntry] = {}
    pq = PriorityQueue()
    for v in graph.nodes():
        distance = 0 if v == source else math.inf
        results[v] = PathEntry(distance=distance)
        pq.add(v, distance)

    logger.debug("Running Dijkstra from %s over %d nodes", source, len(results))
    while pq.size() > 0:
        v = pq.remove_min()
        v_entry = results[v]
        if v_entry.distance == math.inf:
            # Everything left in the queue is unreachable
            logger.debug("Stopping at %s, %d nodes unreachable", v, pq.size() + 1)
            break

        for edge in edge_fn(v):
            w = edge.v if edge.v != v else edge.w
            w_entry = results[w]
            weight = weight_fn(edge)
            if weight < 0:
                msg = f"dijkstra does not allow negative edge weights. Bad edge: {edge} Weight: {weight}"
                raise NegativeWeightError(msg)

            distance = v_entry.distance + weight
            if distance < w_entry.distance:
                w_entry.distance = distance
                w_entry.predecessor = v
                pq.decrease(w, distance)

    return results


def dijkstra_all(
    graph: Graph,
    weight_fn: WeightFn | None = None,
    edge_fn: EdgeFn | None = None,
) -> dict[str, dict[str, PathEntry]]:
    """Run :func:`dijkstra` from every node.

    Complexity: O(|V| * (|E| + |V|) * log |V|).

    Returns:
        Mapping from source node to its single-source result.

    """
    return {v: dijkstra(graph, v, weight_fn, edge_fn) for v in graph.nodes()}
