"""Data structures supporting the graph algorithms.

This module contains:
- PriorityQueue: A binary min-heap keyed by string with decrease-key support
"""

from ._priority_queue import PriorityQueue

__all__ = ["PriorityQueue"]
