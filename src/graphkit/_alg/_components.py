"""Connected components, strongly connected components and cycles."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from graphkit._graph import Graph


def components(graph: Graph) -> list[list[str]]:
    """Find the connected components of ``graph``, ignoring edge direction.

    Complexity: O(|V| + |E|).

    Returns:
        One list of node names per component. Every node is in exactly one.

    """
    visited: set[str] = set()
    cmpts: list[list[str]] = []

    def adjacent(v: str) -> Iterator[str]:
        return chain(graph.successors(v) or [], graph.predecessors(v) or [])

    for start in graph.nodes():
        if start in visited:
            continue
        visited.add(start)
        cmpt = [start]
        stack = [adjacent(start)]
        while stack:
            for w in stack[-1]:
                if w not in visited:
                    visited.add(w)
                    cmpt.append(w)
                    stack.append(adjacent(w))
                    break
            else:
                stack.pop()
        cmpts.append(cmpt)

    return cmpts


@dataclass(slots=True)
class _VisitedEntry:
    index: int
    lowlink: int
    on_stack: bool = True


def tarjan(graph: Graph) -> list[list[str]]:
    """Find the strongly connected components of ``graph`` with Tarjan's algorithm.

    Each component holds nodes that can all reach one another along directed
    edges. A node that is on no cycle forms a component on its own;
    components of more than one node always contain a cycle.

    Complexity: O(|V| + |E|).

    Returns:
        One list of node names per component.

    """
    index = 0
    stack: list[str] = []
    visited: dict[str, _VisitedEntry] = {}
    results: list[list[str]] = []

    def enter(v: str) -> tuple[str, Iterator[str]]:
        nonlocal index
        visited[v] = _VisitedEntry(index=index, lowlink=index)
        index += 1
        stack.append(v)
        return v, iter(graph.successors(v) or [])

    for root in graph.nodes():
        if root in visited:
            continue
        work = [enter(root)]
        while work:
            v, successors = work[-1]
            entry = visited[v]
            for w in successors:
                if w not in visited:
                    work.append(enter(w))
                    break
                w_entry = visited[w]
                if w_entry.on_stack:
                    entry.lowlink = min(entry.lowlink, w_entry.index)
            else:
                work.pop()
                if entry.lowlink == entry.index:
                    cmpt: list[str] = []
                    while True:
                        w = stack.pop()
                        visited[w].on_stack = False
                        cmpt.append(w)
                        if w == v:
                            break
                    results.append(cmpt)
                if work:
                    caller = visited[work[-1][0]]
                    caller.lowlink = min(caller.lowlink, entry.lowlink)

    return results


def find_cycles(graph: Graph) -> list[list[str]]:
    """Return the strongly connected components that contain a cycle.

    These are the components with more than one node, plus single nodes
    with an edge to themselves.
    """
    return [
        cmpt
        for cmpt in tarjan(graph)
        if len(cmpt) > 1 or (len(cmpt) == 1 and graph.has_edge(cmpt[0], cmpt[0]))
    ]
