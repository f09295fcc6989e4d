import pickle

import pytest

from roadgraph.graph.builder import GraphBuilder
from roadgraph.runtime.resources import load_graph_from_path, save_graph


@pytest.fixture
def graph():
    b = GraphBuilder(name="snap")
    b.add_node({"id": "1", "lon": "0", "lat": "0", "name": "Origin Sq"})
    b.add_node({"id": "2", "lon": "0", "lat": "1"})
    b.add_edge(1, 2, "Meridian Rd")
    return b.build()


def test_pickle_round_trip_keeps_queries(graph, tmp_path):
    path = str(tmp_path / "g.pkl")
    save_graph(graph, path)
    g = load_graph_from_path(path, "pickle")
    assert g.name == "snap"
    assert g.get_streets(1) == {2: "Meridian Rd"}
    assert g.names.display_name("originsq") == "Origin Sq"
    assert g.closest(0.0, 0.9) == 2


def test_unsupported_format(graph, tmp_path):
    with pytest.raises(ValueError):
        save_graph(graph, str(tmp_path / "g.graphml"), fmt="graphml")
    with pytest.raises(ValueError):
        load_graph_from_path(str(tmp_path / "g.graphml"), "graphml")


def test_rejects_foreign_pickles(tmp_path):
    path = tmp_path / "not_a_graph.pkl"
    path.write_bytes(pickle.dumps({"nodes": []}))
    with pytest.raises(TypeError):
        load_graph_from_path(str(path), "pickle")


def test_rewritten_snapshot_is_reloaded(graph, tmp_path):
    path = str(tmp_path / "g.pkl")
    save_graph(graph, path)
    assert load_graph_from_path(path, "pickle").name == "snap"

    b = GraphBuilder(name="rebuilt")
    b.add_node({"id": "5", "lon": "1", "lat": "1"})
    b.add_node({"id": "6", "lon": "1", "lat": "2"})
    b.add_edge(5, 6, "Parallel St")
    save_graph(b.build(), path)
    again = load_graph_from_path(path, "pickle")
    assert again.name == "rebuilt"
    assert again.vertices() == [5, 6]
