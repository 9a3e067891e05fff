"""Topological sorting and acyclicity check."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graphkit._errors import CycleDetectedError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from graphkit._graph import Graph

logger = logging.getLogger(__name__)


def topsort(graph: Graph) -> list[str]:
    """Sort the nodes of a graph topologically.

    Starting from every sink, predecessors are visited depth first and a node
    is emitted once all of its predecessors have been emitted.

    Complexity: O(|V| + |E|).

    Args:
        graph: Directed graph to sort.

    Returns:
        List of nodes such that for every edge u -> v, u appears before v.

    Raises:
        CycleDetectedError: If the graph contains a cycle.

    Example:
        >>> from graphkit import Graph
        >>> g = Graph()
        >>> g.set_path(["b", "c", "a"])
        Graph(directed=True, multigraph=False, compound=False, nodes=3, edges=2)
        >>> topsort(g)
        ['b', 'c', 'a']

    """
    visited: set[str] = set()
    # nodes on the current depth-first path
    on_stack: set[str] = set()
    results: list[str] = []

    def enter(node: str) -> tuple[str, Iterator[str]]:
        on_stack.add(node)
        visited.add(node)
        return node, iter(graph.predecessors(node) or [])

    for sink in graph.sinks():
        if sink in visited:
            continue
        work = [enter(sink)]
        while work:
            node, preds = work[-1]
            for pred in preds:
                if pred in on_stack:
                    msg = f"Cycle detected in graph at {pred}"
                    raise CycleDetectedError(msg)
                if pred not in visited:
                    work.append(enter(pred))
                    break
            else:
                work.pop()
                on_stack.discard(node)
                results.append(node)

    if len(visited) != graph.node_count():
        # The remaining nodes lie on cycles no sink can reach
        msg = "Cycle detected in graph"
        raise CycleDetectedError(msg)

    return results


def is_acyclic(graph: Graph) -> bool:
    """Check if the graph has no cycles.

    Returns as soon as the first cycle is found; use :func:`find_cycles` to
    list them.
    """
    try:
        topsort(graph)
    except CycleDetectedError:
        logger.debug("Graph has a cycle")
        return False
    return True
