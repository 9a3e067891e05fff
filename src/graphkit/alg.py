"""Public namespace for the graph algorithms, e.g. ``graphkit.alg.dijkstra``."""

from ._alg import (
    bellman_ford,
    components,
    dfs,
    dijkstra,
    dijkstra_all,
    extract_path,
    find_cycles,
    floyd_warshall,
    is_acyclic,
    postorder,
    preorder,
    prim,
    reduce,
    shortest_paths,
    tarjan,
    topsort,
)

__all__ = [
    "bellman_ford",
    "components",
    "dfs",
    "dijkstra",
    "dijkstra_all",
    "extract_path",
    "find_cycles",
    "floyd_warshall",
    "is_acyclic",
    "postorder",
    "preorder",
    "prim",
    "reduce",
    "shortest_paths",
    "tarjan",
    "topsort",
]
