"""Mutable graph with directed, multigraph and compound modes."""

from __future__ import annotations

from collections.abc import Mapping
from itertools import pairwise
from typing import TYPE_CHECKING, Any, Final

from graphkit._errors import MultigraphError, StructuralError
from graphkit._types import UNSET, ConstantLabel, Edge, GraphOptions

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from graphkit._types import EdgeLabelFactory, NodeLabelFactory, _Unset

# Name used for unnamed edges in edge ids
DEFAULT_EDGE_NAME: Final = "\x00"
# Virtual root of the compound hierarchy
GRAPH_NODE: Final = "\x00"
EDGE_KEY_DELIM: Final = "\x01"


def _increment_or_init(counts: dict[str, int], key: str) -> None:
    counts[key] = counts.get(key, 0) + 1


def _decrement_or_remove(counts: dict[str, int], key: str) -> None:
    count = counts.get(key)
    if count is None:
        return
    if count <= 1:
        del counts[key]
    else:
        counts[key] = count - 1


def _canonical_endpoints(is_directed: bool, v: str, w: str) -> tuple[str, str]:  # noqa: FBT001
    if not is_directed and v > w:
        return w, v
    return v, w


def _edge_args_to_id(is_directed: bool, v: str, w: str, name: str | None) -> str:  # noqa: FBT001
    v, w = _canonical_endpoints(is_directed, str(v), str(w))
    return v + EDGE_KEY_DELIM + w + EDGE_KEY_DELIM + (DEFAULT_EDGE_NAME if name is None else str(name))


def _edge_args_to_obj(is_directed: bool, v: str, w: str, name: str | None) -> Edge:  # noqa: FBT001
    v, w = _canonical_endpoints(is_directed, str(v), str(w))
    return Edge(v=v, w=w, name=name)


def _filter_edges(edges: dict[str, Edge] | None, local: str, remote: str | None) -> list[Edge] | None:
    if edges is None:
        return None
    if remote is None:
        return list(edges.values())
    return [
        edge
        for edge in edges.values()
        if (edge.v == local and edge.w == remote) or (edge.v == remote and edge.w == local)
    ]


class Graph[GraphLabel, NodeLabel, EdgeLabel]:
    """A graph of string-keyed nodes with optional labels on nodes, edges and the graph.

    The three flags are fixed for the lifetime of the instance:

    - ``directed``: edges have an orientation. Undirected edges are stored with
      their endpoints in ascending string order, so ``(a, b)`` and ``(b, a)``
      refer to the same edge.
    - ``multigraph``: several edges between the same pair of nodes may exist,
      told apart by their ``name``.
    - ``compound``: nodes form a parent/child forest under a virtual root.

    Edges are stored under a composite id built from ``v``, ``w`` and ``name``
    joined by control characters. Each node keeps its in and out edges plus
    predecessor and successor multiplicity counters, so adjacency queries are
    O(1) or O(degree).

    Methods that mutate the graph return it, so calls can be chained.

    Example:
        >>> g = Graph()
        >>> g.set_path(["a", "b", "c"]).set_edge("a", "c", 5)
        Graph(directed=True, multigraph=False, compound=False, nodes=3, edges=3)
        >>> g.successors("a")
        ['b', 'c']

    """

    def __init__(self, *, directed: bool = True, multigraph: bool = False, compound: bool = False) -> None:
        self._is_directed = directed
        self._is_multigraph = multigraph
        self._is_compound = compound

        self._label: GraphLabel | None = None
        # v -> label
        self._nodes: dict[str, NodeLabel] = {}
        # v -> edge id -> edge
        self._in: dict[str, dict[str, Edge]] = {}
        # w -> v -> multiplicity
        self._preds: dict[str, dict[str, int]] = {}
        # v -> edge id -> edge
        self._out: dict[str, dict[str, Edge]] = {}
        # v -> w -> multiplicity
        self._sucs: dict[str, dict[str, int]] = {}
        # edge id -> edge
        self._edge_objs: dict[str, Edge] = {}
        # edge id -> label
        self._edge_labels: dict[str, EdgeLabel] = {}
        self._node_count = 0
        self._edge_count = 0

        self._parent: dict[str, str] = {}
        self._children: dict[str, dict[str, bool]] = {}
        if compound:
            self._children[GRAPH_NODE] = {}

        self._default_node_label_fn: NodeLabelFactory = ConstantLabel(None)
        self._default_edge_label_fn: EdgeLabelFactory = ConstantLabel(None)

    @classmethod
    def from_options(cls, options: GraphOptions) -> Graph[GraphLabel, NodeLabel, EdgeLabel]:
        """Create an empty graph with the flags held by ``options``."""
        return cls(directed=options.directed, multigraph=options.multigraph, compound=options.compound)

    # === Graph functions =====================================================

    def is_directed(self) -> bool:
        """Whether the graph edges have an orientation."""
        return self._is_directed

    def is_multigraph(self) -> bool:
        """Whether a pair of nodes can be joined by several named edges."""
        return self._is_multigraph

    def is_compound(self) -> bool:
        """Whether nodes can have a parent node."""
        return self._is_compound

    def options(self) -> GraphOptions:
        """Return the construction flags of this graph."""
        return GraphOptions(
            directed=self._is_directed,
            multigraph=self._is_multigraph,
            compound=self._is_compound,
        )

    def set_graph(self, label: GraphLabel | None) -> Graph[GraphLabel, NodeLabel, EdgeLabel]:
        """Set the label of the graph itself."""
        self._label = label
        return self

    def graph(self) -> GraphLabel | None:
        """Return the label of the graph itself, or None if none was set."""
        return self._label

    def set_default_node_label(
        self,
        label_or_factory: NodeLabel | Callable[[str], NodeLabel],
    ) -> Graph[GraphLabel, NodeLabel, EdgeLabel]:
        """Set the label given to nodes created without an explicit label.

        Args:
            label_or_factory: A callable is used as a factory and called with the
                node name; any other value is used as a constant label.

        """
        if callable(label_or_factory):
            self._default_node_label_fn = label_or_factory
        else:
            self._default_node_label_fn = ConstantLabel(label_or_factory)
        return self

    def set_default_edge_label(
        self,
        label_or_factory: EdgeLabel | Callable[[str, str, str | None], EdgeLabel],
    ) -> Graph[GraphLabel, NodeLabel, EdgeLabel]:
        """Set the label given to edges created without an explicit label.

        Args:
            label_or_factory: A callable is used as a factory and called with
                ``(v, w, name)``; any other value is used as a constant label.

        """
        if callable(label_or_factory):
            self._default_edge_label_fn = label_or_factory
        else:
            self._default_edge_label_fn = ConstantLabel(label_or_factory)
        return self

    # === Node functions ======================================================

    def node_count(self) -> int:
        """Return the number of nodes in the graph."""
        return self._node_count

    def nodes(self) -> list[str]:
        """Return all node names in insertion order."""
        return list(self._nodes)

    def sources(self) -> list[str]:
        """Return the nodes without in-edges."""
        return [v for v in self._nodes if not self._in[v]]

    def sinks(self) -> list[str]:
        """Return the nodes without out-edges."""
        return [v for v in self._nodes if not self._out[v]]

    def set_nodes(
        self,
        names: Iterable[str],
        label: NodeLabel | _Unset = UNSET,
    ) -> Graph[GraphLabel, NodeLabel, EdgeLabel]:
        """Call :meth:`set_node` for each name in ``names``."""
        for name in names:
            self.set_node(name, label)
        return self

    def set_node(self, name: str, label: NodeLabel | _Unset = UNSET) -> Graph[GraphLabel, NodeLabel, EdgeLabel]:
        """Create or update a node.

        If ``label`` is supplied it becomes the node's label. If it is omitted
        and the node is created by this call, the default node label is used;
        an existing node keeps its label.

        Args:
            name: Node name.
            label: Label to assign. ``None`` is a valid label.

        Returns:
            The graph.

        """
        if name in self._nodes:
            if label is not UNSET:
                self._nodes[name] = label
            return self

        self._nodes[name] = self._default_node_label_fn(name) if label is UNSET else label
        if self._is_compound:
            self._parent[name] = GRAPH_NODE
            self._children[name] = {}
            self._children[GRAPH_NODE][name] = True
        self._in[name] = {}
        self._preds[name] = {}
        self._out[name] = {}
        self._sucs[name] = {}
        self._node_count += 1
        return self

    def node(self, name: str) -> NodeLabel | None:
        """Return the label of a node, or None if the node does not exist."""
        return self._nodes.get(name)

    def has_node(self, name: str) -> bool:
        """Return whether the graph has a node called ``name``."""
        return name in self._nodes

    def remove_node(self, name: str) -> Graph[GraphLabel, NodeLabel, EdgeLabel]:
        """Remove a node and all its incident edges.

        In a compound graph the children of the node are moved to the root.
        Removing a node that does not exist does nothing.
        """
        if name not in self._nodes:
            return self

        del self._nodes[name]
        if self._is_compound:
            self._remove_from_parents_child_list(name)
            del self._parent[name]
            for child in list(self._children[name]):
                self.set_parent(child)
            del self._children[name]
        for edge_id in list(self._in[name]):
            self._remove_edge_by_id(edge_id)
        del self._in[name]
        del self._preds[name]
        for edge_id in list(self._out[name]):
            self._remove_edge_by_id(edge_id)
        del self._out[name]
        del self._sucs[name]
        self._node_count -= 1
        return self

    # === Hierarchy functions =================================================

    def set_parent(self, v: str, parent: str | None = None) -> Graph[GraphLabel, NodeLabel, EdgeLabel]:
        """Set the parent of ``v``, or move ``v`` to the root if ``parent`` is None.

        Both nodes are created if they do not exist yet.

        Raises:
            StructuralError: If the graph is not compound, or if ``parent`` is
                ``v`` itself or one of its descendants.

        """
        if not self._is_compound:
            msg = "Cannot set parent in a non-compound graph"
            raise StructuralError(msg)

        if parent is None:
            parent = GRAPH_NODE
        else:
            parent = str(parent)
            ancestor: str | None = parent
            while ancestor is not None:
                if ancestor == v:
                    msg = f"Setting {parent} as parent of {v} would create a cycle"
                    raise StructuralError(msg)
                ancestor = self.parent(ancestor)
            self.set_node(parent)

        self.set_node(v)
        self._remove_from_parents_child_list(v)
        self._parent[v] = parent
        self._children[parent][v] = True
        return self

    def parent(self, v: str) -> str | None:
        """Return the parent of ``v``, or None if it is at the root or unknown."""
        if self._is_compound:
            parent = self._parent.get(v)
            if parent is not None and parent != GRAPH_NODE:
                return parent
        return None

    def children(self, v: str | None = None) -> list[str] | None:
        """Return the direct children of ``v``.

        Args:
            v: Node whose children are wanted. Omit it to get the top-level nodes.

        Returns:
            The children, an empty list for an existing node without children,
            or None if ``v`` is not in the graph.

        """
        if self._is_compound:
            children = self._children.get(GRAPH_NODE if v is None else v)
            if children is not None:
                return list(children)
        elif v is None:
            return self.nodes()
        elif v in self._nodes:
            return []
        return None

    # === Topology queries ====================================================

    def predecessors(self, v: str) -> list[str] | None:
        """Return the nodes with an edge into ``v``, or None if ``v`` is not in the graph."""
        preds = self._preds.get(v)
        if preds is None:
            return None
        return list(preds)

    def successors(self, v: str) -> list[str] | None:
        """Return the nodes ``v`` has an edge to, or None if ``v`` is not in the graph."""
        sucs = self._sucs.get(v)
        if sucs is None:
            return None
        return list(sucs)

    def neighbors(self, v: str) -> list[str] | None:
        """Return predecessors and successors of ``v`` without duplicates.

        Returns None if ``v`` is not in the graph.
        """
        preds = self._preds.get(v)
        if preds is None:
            return None
        return list(dict.fromkeys([*preds, *self._sucs[v]]))

    def is_leaf(self, v: str) -> bool:
        """Return whether ``v`` has no successors (directed) or no neighbors (undirected).

        Raises:
            KeyError: If ``v`` is not in the graph.

        """
        adjacent = self.successors(v) if self._is_directed else self.neighbors(v)
        if adjacent is None:
            msg = f"Node not found: {v}"
            raise KeyError(msg)
        return len(adjacent) == 0

    def filter_nodes(self, predicate: Callable[[str], bool]) -> Graph[GraphLabel, NodeLabel, EdgeLabel]:
        """Create a new graph keeping only the nodes accepted by ``predicate``.

        Edges are kept when both endpoints are kept, with their labels. In a
        compound graph each kept node is attached to its nearest kept ancestor.

        Args:
            predicate: Called with each node name; the node is kept if it returns True.

        Returns:
            A new graph with the same flags and graph label.

        """
        copy: Graph[GraphLabel, NodeLabel, EdgeLabel] = type(self)(
            directed=self._is_directed,
            multigraph=self._is_multigraph,
            compound=self._is_compound,
        )
        copy.set_graph(self._label)

        for v, value in self._nodes.items():
            if predicate(v):
                copy.set_node(v, value)

        for edge_id, edge in self._edge_objs.items():
            if copy.has_node(edge.v) and copy.has_node(edge.w):
                copy.set_edge_obj(edge, self._edge_labels[edge_id])

        if self._is_compound:
            # rejected node -> nearest kept ancestor
            nearest: dict[str, str | None] = {}

            def find_parent(v: str) -> str | None:
                rejected: list[str] = []
                parent = self.parent(v)
                while parent is not None and not copy.has_node(parent):
                    if parent in nearest:
                        parent = nearest[parent]
                        break
                    rejected.append(parent)
                    parent = self.parent(parent)
                for r in rejected:
                    nearest[r] = parent
                return parent

            for v in copy.nodes():
                copy.set_parent(v, find_parent(v))

        return copy

    # === Edge functions ======================================================

    def edge_count(self) -> int:
        """Return the number of edges in the graph."""
        return self._edge_count

    def edges(self) -> list[Edge]:
        """Return the descriptors of all edges."""
        return list(self._edge_objs.values())

    def set_path(self, nodes: Iterable[str], label: EdgeLabel | _Unset = UNSET) -> Graph[GraphLabel, NodeLabel, EdgeLabel]:
        """Create or update an edge between each pair of consecutive nodes."""
        for v, w in pairwise(nodes):
            self.set_edge(v, w, label)
        return self

    def set_edge(
        self,
        v: str,
        w: str,
        label: EdgeLabel | _Unset = UNSET,
        name: str | None = None,
    ) -> Graph[GraphLabel, NodeLabel, EdgeLabel]:
        """Create or update the edge from ``v`` to ``w``.

        Missing endpoints are created. If ``label`` is omitted and the edge is
        created by this call, the default edge label is used; an existing edge
        keeps its label.

        Args:
            v: Source node.
            w: Target node.
            label: Label to assign. ``None`` is a valid label.
            name: Name telling parallel edges apart; multigraphs only.

        Returns:
            The graph.

        Raises:
            MultigraphError: If ``name`` is given and the graph is not a multigraph.

        """
        v = str(v)
        w = str(w)
        if name is not None:
            name = str(name)

        edge_id = _edge_args_to_id(self._is_directed, v, w, name)
        if edge_id in self._edge_labels:
            if label is not UNSET:
                self._edge_labels[edge_id] = label
            return self

        if name is not None and not self._is_multigraph:
            msg = "Cannot set a named edge when multigraph is False"
            raise MultigraphError(msg)

        self.set_node(v)
        self.set_node(w)

        self._edge_labels[edge_id] = self._default_edge_label_fn(v, w, name) if label is UNSET else label

        edge = _edge_args_to_obj(self._is_directed, v, w, name)
        self._edge_objs[edge_id] = edge
        _increment_or_init(self._preds[edge.w], edge.v)
        _increment_or_init(self._sucs[edge.v], edge.w)
        self._in[edge.w][edge_id] = edge
        self._out[edge.v][edge_id] = edge
        self._edge_count += 1
        return self

    def set_edge_obj(self, edge: Edge, label: EdgeLabel | _Unset = UNSET) -> Graph[GraphLabel, NodeLabel, EdgeLabel]:
        """Create or update the edge identified by ``edge``. See :meth:`set_edge`."""
        return self.set_edge(edge.v, edge.w, label, edge.name)

    def edge(self, v: str, w: str, name: str | None = None) -> EdgeLabel | None:
        """Return the label of the edge from ``v`` to ``w``, or None if there is no such edge."""
        return self._edge_labels.get(_edge_args_to_id(self._is_directed, v, w, name))

    def edge_obj(self, edge: Edge) -> EdgeLabel | None:
        """Return the label of the edge identified by ``edge``."""
        return self.edge(edge.v, edge.w, edge.name)

    def edge_as_obj(self, v: str, w: str, name: str | None = None) -> Mapping[str, Any]:
        """Return the edge label as a mapping.

        A label that is already a mapping is returned as is; any other value
        is wrapped as ``{"label": value}``.
        """
        label = self.edge(v, w, name)
        if isinstance(label, Mapping):
            return label
        return {"label": label}

    def edge_obj_as_obj(self, edge: Edge) -> Mapping[str, Any]:
        """Return the label of the edge identified by ``edge`` as a mapping."""
        return self.edge_as_obj(edge.v, edge.w, edge.name)

    def has_edge(self, v: str, w: str, name: str | None = None) -> bool:
        """Return whether the edge from ``v`` to ``w`` exists."""
        return _edge_args_to_id(self._is_directed, v, w, name) in self._edge_labels

    def has_edge_obj(self, edge: Edge) -> bool:
        """Return whether the edge identified by ``edge`` exists."""
        return self.has_edge(edge.v, edge.w, edge.name)

    def remove_edge(self, v: str, w: str, name: str | None = None) -> Graph[GraphLabel, NodeLabel, EdgeLabel]:
        """Remove the edge from ``v`` to ``w`` if it exists."""
        self._remove_edge_by_id(_edge_args_to_id(self._is_directed, v, w, name))
        return self

    def remove_edge_obj(self, edge: Edge) -> Graph[GraphLabel, NodeLabel, EdgeLabel]:
        """Remove the edge identified by ``edge`` if it exists."""
        return self.remove_edge(edge.v, edge.w, edge.name)

    def in_edges(self, v: str, w: str | None = None) -> list[Edge] | None:
        """Return the edges pointing to ``v``, optionally only those coming from ``w``.

        For undirected graphs this is the same as :meth:`node_edges`.
        Returns None if ``v`` is not in the graph.
        """
        if self._is_directed:
            return _filter_edges(self._in.get(v), v, w)
        return self.node_edges(v, w)

    def out_edges(self, v: str, w: str | None = None) -> list[Edge] | None:
        """Return the edges leaving ``v``, optionally only those going to ``w``.

        For undirected graphs this is the same as :meth:`node_edges`.
        Returns None if ``v`` is not in the graph.
        """
        if self._is_directed:
            return _filter_edges(self._out.get(v), v, w)
        return self.node_edges(v, w)

    def node_edges(self, v: str, w: str | None = None) -> list[Edge] | None:
        """Return the edges incident to ``v`` regardless of direction.

        Args:
            v: Node whose edges are wanted.
            w: If given, only edges between ``v`` and ``w`` (either way) are returned.

        Returns:
            The edges, or None if ``v`` is not in the graph.

        """
        if v not in self._nodes:
            return None
        return _filter_edges({**self._in[v], **self._out[v]}, v, w)

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return self._node_count

    def __contains__(self, name: object) -> bool:
        """Check if a node is in the graph."""
        return name in self._nodes

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(directed={self._is_directed}, multigraph={self._is_multigraph}, "
            f"compound={self._is_compound}, nodes={self._node_count}, edges={self._edge_count})"
        )

    def _remove_from_parents_child_list(self, v: str) -> None:
        del self._children[self._parent[v]][v]

    def _remove_edge_by_id(self, edge_id: str) -> None:
        edge = self._edge_objs.get(edge_id)
        if edge is None:
            return
        del self._edge_labels[edge_id]
        del self._edge_objs[edge_id]
        _decrement_or_remove(self._preds[edge.w], edge.v)
        _decrement_or_remove(self._sucs[edge.v], edge.w)
        del self._in[edge.w][edge_id]
        del self._out[edge.v][edge_id]
        self._edge_count -= 1
