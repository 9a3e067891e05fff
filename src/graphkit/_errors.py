"""Exception hierarchy for graph, queue and algorithm failures."""


class GraphError(Exception):
    """Base class for all graphkit errors."""


class StructuralError(GraphError):
    """Raised when a compound hierarchy operation is invalid."""


class MultigraphError(GraphError):
    """Raised when a named edge is set on a graph that is not a multigraph."""


class PriorityQueueError(GraphError):
    """Base class for priority queue errors."""


class QueueUnderflowError(PriorityQueueError):
    """Raised when reading or removing the minimum of an empty queue."""


class KeyNotFoundError(PriorityQueueError):
    """Raised when decreasing the priority of a key that is not queued."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Key not found: {key}")


class InvalidPriorityError(PriorityQueueError):
    """Raised when a decrease would raise the priority of a key."""

    def __init__(self, key: str, current: float, requested: float) -> None:
        self.key = key
        self.current = current
        self.requested = requested
        super().__init__(
            f"New priority is greater than current priority. Key: {key} Old: {current} New: {requested}",
        )


class NegativeWeightError(GraphError):
    """Raised when Dijkstra traverses an edge with a negative weight."""


class NegativeCycleError(GraphError):
    """Raised when Bellman-Ford detects a negative weight cycle."""


class DisconnectedGraphError(GraphError):
    """Raised when a spanning tree is requested for a disconnected graph."""


class CycleDetectedError(GraphError):
    """Raised when a topological order is requested for a cyclic graph."""


class MissingNodeError(GraphError):
    """Raised when a traversal is seeded with a node that is not in the graph."""

    def __init__(self, node: str) -> None:
        self.node = node
        super().__init__(f"Graph does not have node: {node}")
