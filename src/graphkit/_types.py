"""Value types shared by the graph and the algorithms."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Final


class _Unset(Enum):
    """Marker for a label argument that was not supplied."""

    UNSET = auto()


UNSET: Final = _Unset.UNSET


@dataclass(slots=True, frozen=True)
class GraphOptions:
    """Flags fixed when a graph is constructed."""

    directed: bool = True
    multigraph: bool = False
    compound: bool = False


@dataclass(slots=True, frozen=True)
class Edge:
    """Descriptor identifying an edge: its endpoints and, in a multigraph, its name.

    For undirected graphs the descriptors handed out by the graph are canonical,
    i.e. ``v <= w``. Descriptors are immutable, so callers cannot alter the
    graph through them.
    """

    v: str
    w: str
    name: str | None = None

    def __str__(self) -> str:
        if self.name is None:
            return f"{self.v} -> {self.w}"
        return f"{self.v} -> {self.w} ({self.name})"


@dataclass(slots=True)
class PathEntry:
    """Tentative or final shortest path information for one node.

    Attributes:
        distance: Sum of the edge weights from the source, ``inf`` if unreachable.
        predecessor: Previous node on the path, ``""`` for the source and for
            unreachable nodes.

    """

    distance: float
    predecessor: str = ""


@dataclass(slots=True, frozen=True)
class ExtractedPath:
    """A single path reconstructed from a shortest path result."""

    weight: float
    path: list[str]


@dataclass(slots=True, frozen=True)
class ConstantLabel[L]:
    """Default label strategy returning the same value for every key."""

    value: L

    def __call__(self, *_key: object) -> L:
        return self.value


NodeLabelFactory = Callable[[str], object]
EdgeLabelFactory = Callable[[str, str, str | None], object]
WeightFn = Callable[[Edge], float]
EdgeFn = Callable[[str], list[Edge]]
