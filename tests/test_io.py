"""Tests for loading and saving graph files."""

import json
import logging
import tomllib
from pathlib import Path

import pytest
from pydantic import ValidationError

from graphkit import Edge, Graph, load_graph, save_graph


@pytest.fixture
def sample_graph() -> Graph:
    g = Graph(multigraph=True, compound=True)
    g.set_graph({"title": "network"})
    g.set_node("a", {"kind": "router"})
    g.set_parent("a", "site")
    g.set_edge("a", "b", {"weight": 2.5})
    g.set_edge("a", "b", {"weight": 7}, "backup")
    g.set_edge("b", "c", 3)
    return g


class TestRoundTrip:
    """save_graph then load_graph reproduces the graph."""

    @pytest.mark.parametrize("suffix", [".json", ".toml"])
    def test_round_trip(self, tmp_path: Path, sample_graph: Graph, suffix: str) -> None:
        path = tmp_path / f"graph{suffix}"

        save_graph(sample_graph, path)
        restored = load_graph(path)

        assert restored.options() == sample_graph.options()
        assert restored.graph() == {"title": "network"}
        assert restored.nodes() == sample_graph.nodes()
        assert restored.node("a") == {"kind": "router"}
        assert restored.parent("a") == "site"
        assert restored.edges() == sample_graph.edges()
        assert restored.edge("a", "b") == {"weight": 2.5}
        assert restored.edge("a", "b", "backup") == {"weight": 7}
        assert restored.edge("b", "c") == 3

    def test_suffix_is_case_insensitive(self, tmp_path: Path, sample_graph: Graph) -> None:
        path = tmp_path / "GRAPH.JSON"

        save_graph(sample_graph, path)

        assert load_graph(path).node_count() == sample_graph.node_count()


class TestSaveGraph:
    """Tests for save_graph."""

    def test_json_output(self, tmp_path: Path) -> None:
        g = Graph()
        g.set_edge("a", "b", 1)
        path = tmp_path / "g.json"

        save_graph(g, path)

        text = path.read_text(encoding="utf-8")
        assert text.endswith("}\n")
        assert json.loads(text)["edges"] == [{"v": "a", "w": "b", "value": 1}]

    def test_toml_output(self, tmp_path: Path) -> None:
        g = Graph(directed=False)
        g.set_edge("b", "a", 1)
        path = tmp_path / "g.toml"

        save_graph(g, path)

        with path.open("rb") as f:
            data = tomllib.load(f)
        assert data["options"] == {"directed": False, "multigraph": False, "compound": False}
        assert data["edges"] == [{"v": "a", "w": "b", "value": 1}]

    def test_toml_drops_none_inside_labels(self, tmp_path: Path) -> None:
        g = Graph()
        g.set_node("a", {"x": 1, "y": None})
        path = tmp_path / "g.toml"

        save_graph(g, path)

        assert load_graph(path).node("a") == {"x": 1}

    def test_toml_warns_on_dropped_none(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        g = Graph()
        g.set_node("a", {"w": [1, None], "y": None})
        path = tmp_path / "g.toml"

        with caplog.at_level(logging.WARNING, logger="graphkit._io"):
            save_graph(g, path)

        assert load_graph(path).node("a") == {"w": [1]}
        messages = [record.getMessage() for record in caplog.records]
        assert any("document.nodes[0].value.w[1]" in m for m in messages)
        assert any("document.nodes[0].value.y" in m for m in messages)

    def test_json_keeps_none_without_warning(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        g = Graph()
        g.set_node("a", {"w": [1, None]})
        path = tmp_path / "g.json"

        with caplog.at_level(logging.WARNING, logger="graphkit._io"):
            save_graph(g, path)

        assert load_graph(path).node("a") == {"w": [1, None]}
        assert not caplog.records

    def test_unsupported_suffix_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Unsupported graph file format '.yaml'"):
            save_graph(Graph(), tmp_path / "g.yaml")
        assert not (tmp_path / "g.yaml").exists()


class TestLoadGraph:
    """Tests for load_graph."""

    def test_loads_handwritten_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "g.toml"
        path.write_text(
            """
[options]
directed = true

[[nodes]]
v = "a"

[[edges]]
v = "a"
w = "b"
value = { weight = 4 }
""",
        )

        g = load_graph(path)

        assert g.nodes() == ["a", "b"]
        assert g.edges() == [Edge("a", "b")]
        assert g.edge("a", "b") == {"weight": 4}

    def test_unsupported_suffix_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "g.txt"
        path.write_text("{}")

        with pytest.raises(ValueError, match="Unsupported graph file format"):
            load_graph(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_graph(tmp_path / "missing.json")

    def test_invalid_document_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "g.json"
        path.write_text(json.dumps({"edges": [{"v": "a"}]}))

        with pytest.raises(ValidationError):
            load_graph(path)
