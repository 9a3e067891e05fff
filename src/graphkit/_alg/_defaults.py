"""Default weight and edge functions shared by the path algorithms."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphkit._graph import Graph
    from graphkit._types import Edge, EdgeFn


def unit_weight(_edge: Edge) -> float:
    """Weight every edge as 1."""
    return 1


def out_edges_fn(graph: Graph) -> EdgeFn:
    """Return an edge function listing the out-edges of a node of ``graph``."""

    def edge_fn(v: str) -> list[Edge]:
        return graph.out_edges(v) or []

    return edge_fn
