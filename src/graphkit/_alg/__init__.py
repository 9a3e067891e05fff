"""Graph algorithms operating on a Graph through its public methods.

This module contains:
- Shortest paths: dijkstra, dijkstra_all, bellman_ford, floyd_warshall,
  shortest_paths (dispatcher) and extract_path
- Connectivity: components, tarjan, find_cycles
- Ordering: topsort, is_acyclic
- Traversal: reduce, dfs, preorder, postorder
- Spanning trees: prim
"""

from ._bellman_ford import bellman_ford
from ._components import components, find_cycles, tarjan
from ._dijkstra import dijkstra, dijkstra_all
from ._floyd_warshall import floyd_warshall
from ._prim import prim
from ._shortest_paths import extract_path, shortest_paths
from ._topsort import is_acyclic, topsort
from ._traversal import dfs, postorder, preorder, reduce

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
