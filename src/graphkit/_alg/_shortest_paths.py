"""Shortest path dispatch and path reconstruction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graphkit._types import ExtractedPath

from ._bellman_ford import bellman_ford
from ._defaults import out_edges_fn
from ._dijkstra import dijkstra

if TYPE_CHECKING:
    from collections.abc import Mapping

    from graphkit._graph import Graph
    from graphkit._types import EdgeFn, PathEntry, WeightFn

logger = logging.getLogger(__name__)


def shortest_paths(
    graph: Graph,
    source: str,
    weight_fn: WeightFn | None = None,
    edge_fn: EdgeFn | None = None,
) -> dict[str, PathEntry]:
    """Find single-source shortest paths with the cheapest suitable algorithm.

    Without a weight function every edge weighs 1 and :func:`dijkstra` is
    used. Otherwise the edges are scanned once: if any has a negative weight
    :func:`bellman_ford` is used, else :func:`dijkstra`.
    """
    edge_fn = edge_fn or out_edges_fn(graph)
    if weight_fn is None:
        return dijkstra(graph, source, weight_fn, edge_fn)

    for v in graph.nodes():
        if any(weight_fn(edge) < 0 for edge in edge_fn(v)):
            logger.debug("Negative edge weight found at %s, using Bellman-Ford", v)
            return bellman_ford(graph, source, weight_fn, edge_fn)

    return dijkstra(graph, source, weight_fn, edge_fn)


def extract_path(results: Mapping[str, PathEntry], source: str, destination: str) -> ExtractedPath:
    """Rebuild the path from ``source`` to ``destination`` out of a shortest path result.

    Args:
        results: Single-source result, e.g. from :func:`dijkstra`.
        source: The node ``results`` was computed from.
        destination: Node the path should end at.

    Returns:
        The total weight and the nodes from ``source`` to ``destination``.

    Raises:
        ValueError: If ``results`` is not rooted at ``source``, or if
            ``destination`` is unknown or unreachable.

    """
    source_entry = results.get(source)
    if source_entry is None or source_entry.predecessor != "":
        msg = f"Invalid source vertex: {source}"
        raise ValueError(msg)

    destination_entry = results.get(destination)
    if destination_entry is None or (destination_entry.predecessor == "" and destination != source):
        msg = f"Invalid destination vertex: {destination}"
        raise ValueError(msg)

    path: list[str] = []
    current = destination
    while current != source:
        path.append(current)
        current = results[current].predecessor
    path.append(source)
    path.reverse()
    return ExtractedPath(weight=destination_entry.distance, path=path)
