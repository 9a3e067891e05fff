"""JSON interchange format for graphs.

The document layout is::

    {
      "options": {"directed": bool, "multigraph": bool, "compound": bool},
      "nodes": [{"v": str, "value"?: any, "parent"?: str}, ...],
      "edges": [{"v": str, "w": str, "name"?: str, "value"?: any}, ...],
      "value"?: any
    }

Optional fields are left out when they are None.
"""

import copy
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from ._graph import Graph
from ._types import Edge, GraphOptions

logger = logging.getLogger(__name__)


class JsonOptions(BaseModel):
    """Graph flags as stored in a document."""

    directed: bool = True
    multigraph: bool = False
    compound: bool = False


class JsonNode(BaseModel):
    """A node entry: name, optional label and optional parent."""

    v: str
    value: Any = None
    parent: str | None = None


class JsonEdge(BaseModel):
    """An edge entry: endpoints, optional name and optional label."""

    v: str
    w: str
    name: str | None = None
    value: Any = None


class JsonGraph(BaseModel):
    """A whole graph document."""

    options: JsonOptions = Field(default_factory=JsonOptions)
    nodes: list[JsonNode] = Field(default_factory=list)
    edges: list[JsonEdge] = Field(default_factory=list)
    value: Any = None


def _node_entry(graph: Graph, v: str) -> JsonNode:
    fields: dict[str, Any] = {"v": v}
    value = graph.node(v)
    if value is not None:
        fields["value"] = value
    parent = graph.parent(v)
    if parent is not None:
        fields["parent"] = parent
    return JsonNode(**fields)


def _edge_entry(graph: Graph, edge: Edge) -> JsonEdge:
    fields: dict[str, Any] = {"v": edge.v, "w": edge.w}
    if edge.name is not None:
        fields["name"] = edge.name
    value = graph.edge_obj(edge)
    if value is not None:
        fields["value"] = value
    return JsonEdge(**fields)


def to_document(graph: Graph) -> JsonGraph:
    """Describe ``graph`` as a JsonGraph model."""
    options = graph.options()
    fields: dict[str, Any] = {
        "options": JsonOptions(
            directed=options.directed,
            multigraph=options.multigraph,
            compound=options.compound,
        ),
        "nodes": [_node_entry(graph, v) for v in graph.nodes()],
        "edges": [_edge_entry(graph, e) for e in graph.edges()],
    }
    label = graph.graph()
    if label is not None:
        fields["value"] = copy.deepcopy(label)
    return JsonGraph(**fields)


def write(graph: Graph) -> dict[str, Any]:
    """Create a JSON-serializable representation of ``graph``.

    Nodes and edges are written in the graph's own iteration order. The
    result can be passed to :func:`json.dumps` and restored with :func:`read`.
    """
    return to_document(graph).model_dump(mode="python", exclude_unset=True)


def read(data: Mapping[str, Any] | JsonGraph) -> Graph:
    """Build a graph from its JSON representation.

    All nodes are created first, then attached to their parents, then the
    edges are added, each step in document order.

    Args:
        data: A mapping as produced by :func:`write` (e.g. from :func:`json.loads`)
            or an already validated JsonGraph.

    Returns:
        The restored graph.

    Raises:
        pydantic.ValidationError: If ``data`` does not follow the document layout.

    Example:
        >>> g = read({"options": {"directed": True}, "nodes": [{"v": "a"}], "edges": [{"v": "a", "w": "b"}]})
        >>> g.nodes()
        ['a', 'b']
        >>> g.edges()
        [Edge(v='a', w='b', name=None)]

    """
    doc = data if isinstance(data, JsonGraph) else JsonGraph.model_validate(data)

    graph: Graph = Graph.from_options(
        GraphOptions(
            directed=doc.options.directed,
            multigraph=doc.options.multigraph,
            compound=doc.options.compound,
        ),
    )
    if doc.value is not None:
        graph.set_graph(doc.value)

    for node in doc.nodes:
        graph.set_node(node.v, node.value)
    for node in doc.nodes:
        if node.parent:
            graph.set_parent(node.v, node.parent)

    for edge in doc.edges:
        graph.set_edge_obj(Edge(v=edge.v, w=edge.w, name=edge.name), edge.value)

    logger.debug("Read graph with %d nodes and %d edges", graph.node_count(), graph.edge_count())
    return graph
