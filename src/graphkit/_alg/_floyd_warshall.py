"""Floyd-Warshall all-pairs shortest paths."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from graphkit._types import PathEntry

from ._defaults import out_edges_fn, unit_weight

if TYPE_CHECKING:
    from graphkit._graph import Graph
    from graphkit._types import EdgeFn, WeightFn

logger = logging.getLogger(__name__)


def floyd_warshall(
    graph: Graph,
    weight_fn: WeightFn | None = None,
    edge_fn: EdgeFn | None = None,
) -> dict[str, dict[str, PathEntry]]:
    """Find the shortest path between every pair of nodes.

    Unlike :func:`dijkstra_all` this accepts negative edge weights. Results
    are not meaningful if the graph has a negative weight cycle.

    Complexity: O(|V|^3).

    Args:
        graph: Graph to search.
        weight_fn: Returns the weight of an edge. Defaults to 1 for every edge.
        edge_fn: Returns the direct edges of a node. Defaults to ``graph.out_edges``.

    Returns:
        Mapping ``source -> target -> PathEntry``.

    """
    weight_fn = weight_fn or unit_weight
    edge_fn = edge_fn or out_edges_fn(graph)
    nodes = graph.nodes()
    logger.debug("Running Floyd-Warshall over %d nodes", len(nodes))

    results: dict[str, dict[str, PathEntry]] = {}
    for v in nodes:
        row = {w: PathEntry(distance=0 if w == v else math.inf) for w in nodes}
        for edge in edge_fn(v):
            w = edge.w if edge.v == v else edge.v
            distance = weight_fn(edge)
            if distance < row[w].distance:
                row[w] = PathEntry(distance=distance, predecessor=v)
        results[v] = row

    for k in nodes:
        row_k = results[k]
        for i in nodes:
            row_i = results[i]
            for j in nodes:
                ik = row_i[k]
                kj = row_k[j]
                ij = row_i[j]
                alt_distance = ik.distance + kj.distance
                if alt_distance < ij.distance:
                    ij.distance = alt_distance
                    ij.predecessor = kj.predecessor

    return results
