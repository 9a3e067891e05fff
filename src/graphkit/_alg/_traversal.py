"""Depth-first traversal in pre or post order."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from graphkit._errors import MissingNodeError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from graphkit._graph import Graph

Order = Literal["pre", "post"]


def reduce[T](
    graph: Graph,
    vs: str | Iterable[str],
    order: Order | str,
    fn: Callable[[T, str], T],
    acc: T,
) -> T:
    """Fold ``fn`` over the nodes reachable from ``vs`` in depth-first order.

    Directed graphs are navigated through successors, undirected ones through
    neighbors. Each node is visited at most once, even across several seeds.

    Args:
        graph: Graph to traverse.
        vs: A seed node or a sequence of seed nodes.
        order: ``"post"`` applies ``fn`` to a node after its descendants;
            anything else applies it before them.
        fn: Called as ``fn(acc, node)``; its return value is the new accumulator.
        acc: Initial accumulator.

    Returns:
        The final accumulator.

    Raises:
        MissingNodeError: If a seed is not in the graph.

    """
    seeds = [vs] if isinstance(vs, str) else vs
    navigation = graph.successors if graph.is_directed() else graph.neighbors
    postorder = order == "post"
    visited: set[str] = set()

    def adjacent(v: str) -> Iterator[str]:
        return iter(navigation(v) or [])

    for seed in seeds:
        if not graph.has_node(seed):
            raise MissingNodeError(seed)
        if seed in visited:
            continue

        visited.add(seed)
        if not postorder:
            acc = fn(acc, seed)
        work = [(seed, adjacent(seed))]
        while work:
            node, children = work[-1]
            for w in children:
                if w not in visited:
                    visited.add(w)
                    if not postorder:
                        acc = fn(acc, w)
                    work.append((w, adjacent(w)))
                    break
            else:
                work.pop()
                if postorder:
                    acc = fn(acc, node)

    return acc


def dfs(graph: Graph, vs: str | Iterable[str], order: Order | str) -> list[str]:
    """Return the nodes reachable from ``vs`` in depth-first pre or post order."""

    def collect(acc: list[str], v: str) -> list[str]:
        acc.append(v)
        return acc

    return reduce(graph, vs, order, collect, [])


def preorder(graph: Graph, vs: str | Iterable[str]) -> list[str]:
    """Return the nodes reachable from ``vs`` in depth-first pre-order."""
    return dfs(graph, vs, "pre")


def postorder(graph: Graph, vs: str | Iterable[str]) -> list[str]:
    """Return the nodes reachable from ``vs`` in depth-first post-order."""
    return dfs(graph, vs, "post")
