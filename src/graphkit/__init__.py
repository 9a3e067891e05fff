"""Graph data type with classical graph algorithms."""

__all__ = [
    "ConstantLabel",
    "CycleDetectedError",
    "DisconnectedGraphError",
    "Edge",
    "ExtractedPath",
    "Graph",
    "GraphError",
    "GraphOptions",
    "InvalidPriorityError",
    "KeyNotFoundError",
    "MissingNodeError",
    "MultigraphError",
    "NegativeCycleError",
    "NegativeWeightError",
    "PathEntry",
    "PriorityQueue",
    "PriorityQueueError",
    "QueueUnderflowError",
    "StructuralError",
    "alg",
    "json_read",
    "json_write",
    "load_graph",
    "save_graph",
]

from . import alg
from ._data import PriorityQueue
from ._errors import (
    CycleDetectedError,
    DisconnectedGraphError,
    GraphError,
    InvalidPriorityError,
    KeyNotFoundError,
    MissingNodeError,
    MultigraphError,
    NegativeCycleError,
    NegativeWeightError,
    PriorityQueueError,
    QueueUnderflowError,
    StructuralError,
)
from ._graph import Graph
from ._io import load_graph, save_graph
from ._json import read as json_read
from ._json import write as json_write
from ._types import ConstantLabel, Edge, ExtractedPath, GraphOptions, PathEntry
