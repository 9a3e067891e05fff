"""Prim's minimum spanning tree."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from graphkit._data import PriorityQueue
from graphkit._errors import DisconnectedGraphError
from graphkit._graph import Graph

if TYPE_CHECKING:
    from graphkit._types import WeightFn

logger = logging.getLogger(__name__)


def prim(graph: Graph, weight_fn: WeightFn) -> Graph:
    """Build a minimum spanning tree of a connected graph with Prim's algorithm.

    Edge direction is ignored. Follows "Introduction to Algorithms", Third
    Edition, Cormen et al., p. 634.

    Complexity: O(|E| * log |V|).

    Args:
        graph: Connected graph to span.
        weight_fn: Returns the weight of an edge.

    Returns:
        A new undirected graph holding every node of ``graph`` and the tree edges.

    Raises:
        DisconnectedGraphError: If ``graph`` is not connected.

    """
    result: Graph = Graph(directed=False)
    if graph.node_count() == 0:
        return result

    # node -> tree node it is cheapest to attach it to
    parents: dict[str, str] = {}
    pq = PriorityQueue()
    for v in graph.nodes():
        pq.add(v, math.inf)
        result.set_node(v)

    start = graph.nodes()[0]
    pq.decrease(start, 0)
    logger.debug("Running Prim from %s over %d nodes", start, graph.node_count())

    init = False
    while pq.size() > 0:
        v = pq.remove_min()
        if v in parents:
            result.set_edge(v, parents[v])
        elif init:
            msg = f"Input graph is not connected: {graph!r}"
            raise DisconnectedGraphError(msg)
        else:
            init = True

        for edge in graph.node_edges(v) or []:
            w = edge.w if edge.v == v else edge.v
            priority = pq.priority(w)
            if priority is not None:
                edge_weight = weight_fn(edge)
                if edge_weight < priority:
                    parents[w] = v
                    pq.decrease(w, edge_weight)

    return result
