"""Graph module providing the core graph data type.

This module contains:
- Graph[GraphLabel, NodeLabel, EdgeLabel]: A mutable directed or undirected
  graph with optional multigraph and compound (hierarchy) modes
"""

from ._graph import Graph

__all__ = ["Graph"]
