"""Tests for the JSON interchange format."""

import json
from itertools import product

import pytest
from pydantic import ValidationError

from graphkit import Edge, Graph, MultigraphError, json_read, json_write


def _assert_same_graph(actual: Graph, expected: Graph) -> None:
    assert actual.options() == expected.options()
    assert actual.graph() == expected.graph()
    assert actual.nodes() == expected.nodes()
    for v in expected.nodes():
        assert actual.node(v) == expected.node(v)
        assert actual.parent(v) == expected.parent(v)
    assert actual.edges() == expected.edges()
    for edge in expected.edges():
        assert actual.edge_obj(edge) == expected.edge_obj(edge)


class TestWrite:
    """Tests for json_write."""

    def test_empty_graph(self) -> None:
        assert json_write(Graph()) == {
            "options": {"directed": True, "multigraph": False, "compound": False},
            "nodes": [],
            "edges": [],
        }

    def test_omits_none_fields(self) -> None:
        g = Graph()
        g.set_node("a")
        g.set_edge("a", "b", "label")
        assert json_write(g) == {
            "options": {"directed": True, "multigraph": False, "compound": False},
            "nodes": [{"v": "a"}, {"v": "b"}],
            "edges": [{"v": "a", "w": "b", "value": "label"}],
        }

    def test_writes_labels_parents_and_names(self) -> None:
        g = Graph(multigraph=True, compound=True)
        g.set_graph({"title": "demo"})
        g.set_node("a", {"size": 2})
        g.set_parent("a", "group")
        g.set_edge("a", "b", 3, "x")
        assert json_write(g) == {
            "options": {"directed": True, "multigraph": True, "compound": True},
            "nodes": [{"v": "a", "value": {"size": 2}, "parent": "group"}, {"v": "group"}, {"v": "b"}],
            "edges": [{"v": "a", "w": "b", "name": "x", "value": 3}],
            "value": {"title": "demo"},
        }

    def test_graph_label_is_copied(self) -> None:
        label = {"nested": [1, 2]}
        g = Graph()
        g.set_graph(label)
        document = json_write(g)
        document["value"]["nested"].append(3)
        assert label == {"nested": [1, 2]}

    def test_output_is_json_serializable(self) -> None:
        g = Graph(directed=False)
        g.set_edge("b", "a", {"weight": 1.5})
        assert json.loads(json.dumps(json_write(g))) == json_write(g)


class TestRead:
    """Tests for json_read."""

    def test_minimal_document(self) -> None:
        g = json_read({"options": {"directed": True}, "nodes": [{"v": "a"}], "edges": [{"v": "a", "w": "b"}]})
        assert g.nodes() == ["a", "b"]
        assert g.edges() == [Edge("a", "b")]
        assert g.edge("a", "b") is None

    def test_missing_sections_use_defaults(self) -> None:
        g = json_read({})
        assert g.is_directed()
        assert not g.is_multigraph()
        assert not g.is_compound()
        assert g.node_count() == 0

    def test_parent_before_own_entry(self) -> None:
        g = json_read(
            {
                "options": {"compound": True},
                "nodes": [{"v": "a", "parent": "p"}, {"v": "p", "value": "group"}],
                "edges": [],
            },
        )
        assert g.parent("a") == "p"
        assert g.node("p") == "group"

    def test_invalid_document_raises(self) -> None:
        with pytest.raises(ValidationError):
            json_read({"nodes": [{"value": 1}]})

    def test_named_edge_on_simple_graph_raises(self) -> None:
        with pytest.raises(MultigraphError):
            json_read({"edges": [{"v": "a", "w": "b", "name": "x"}]})


class TestRoundTrip:
    """json_read(json_write(g)) reproduces g."""

    @pytest.mark.parametrize(
        ("directed", "multigraph", "compound"),
        list(product([True, False], repeat=3)),
    )
    def test_all_flag_combinations(self, *, directed: bool, multigraph: bool, compound: bool) -> None:
        g = Graph(directed=directed, multigraph=multigraph, compound=compound)
        g.set_graph("graph-label")
        g.set_node("a", "label-a")
        g.set_node("b")
        g.set_edge("b", "a", {"weight": 2})
        g.set_edge("c", "d")
        if multigraph:
            g.set_edge("a", "b", "named", "n1")
        if compound:
            g.set_parent("a", "group")
            g.set_parent("c", "group")

        _assert_same_graph(json_read(json_write(g)), g)

    def test_through_json_text(self) -> None:
        g = Graph()
        g.set_path(["a", "b", "c"], 1)
        g.set_node("d", [1, "two", None])
        restored = json_read(json.loads(json.dumps(json_write(g))))
        _assert_same_graph(restored, g)
