"""Tests for topsort and is_acyclic."""

import pytest

from graphkit import CycleDetectedError, Graph, GraphError
from graphkit import alg


class TestTopsort:
    """Tests for topological sorting."""

    def test_empty_graph(self) -> None:
        assert alg.topsort(Graph()) == []

    def test_single_node(self) -> None:
        g = Graph()
        g.set_node("a")
        assert alg.topsort(g) == ["a"]

    def test_path(self) -> None:
        g = Graph()
        g.set_path(["b", "c", "a"])
        assert alg.topsort(g) == ["b", "c", "a"]

    def test_diamond(self) -> None:
        g = Graph()
        g.set_path(["a", "b", "d"])
        g.set_path(["a", "c", "d"])
        result = alg.topsort(g)
        assert result[0] == "a"
        assert result[-1] == "d"
        assert result.index("b") < result.index("d")
        assert result.index("c") < result.index("d")

    def test_every_edge_points_forward(self) -> None:
        g = Graph()
        g.set_path(["e", "d", "c"])
        g.set_path(["a", "b", "c"])
        g.set_edge("a", "d")
        g.set_edge("f", "b")
        result = alg.topsort(g)
        assert sorted(result) == sorted(g.nodes())
        for edge in g.edges():
            assert result.index(edge.v) < result.index(edge.w)

    @pytest.mark.parametrize(
        "extra",
        [
            pytest.param(None, id="cycle-only"),
            pytest.param(("b", "d"), id="cycle-with-sink"),
            pytest.param(("d", None), id="cycle-with-isolated-node"),
        ],
    )
    def test_cycle_raises(self, extra: tuple[str, str | None] | None) -> None:
        g = Graph()
        g.set_path(["b", "c", "a", "b"])
        if extra is not None:
            v, w = extra
            if w is None:
                g.set_node(v)
            else:
                g.set_edge(v, w)
        with pytest.raises(CycleDetectedError, match="Cycle detected"):
            alg.topsort(g)

    def test_self_loop_raises(self) -> None:
        g = Graph()
        g.set_path(["a", "a"])
        with pytest.raises(CycleDetectedError):
            alg.topsort(g)

    def test_cycle_error_is_a_graph_error(self) -> None:
        g = Graph()
        g.set_path(["a", "b", "a"])
        with pytest.raises(GraphError):
            alg.topsort(g)

    def test_deep_path_does_not_overflow(self) -> None:
        g = Graph()
        nodes = [str(i) for i in range(5000)]
        g.set_path(nodes)
        assert alg.topsort(g) == nodes


class TestIsAcyclic:
    """Tests for is_acyclic."""

    def test_acyclic(self) -> None:
        g = Graph()
        g.set_path(["a", "b", "c"])
        assert alg.is_acyclic(g)

    def test_empty_graph(self) -> None:
        assert alg.is_acyclic(Graph())

    def test_cycle(self) -> None:
        g = Graph()
        g.set_path(["a", "b", "c", "a"])
        assert not alg.is_acyclic(g)

    def test_self_loop(self) -> None:
        g = Graph()
        g.set_path(["a", "a"])
        assert not alg.is_acyclic(g)

    def test_other_errors_propagate(self) -> None:
        with pytest.raises(AttributeError):
            alg.is_acyclic(None)  # type: ignore[arg-type]
