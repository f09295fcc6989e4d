# tests/graph/test_graph_queries.py
import pytest

from roadgraph.config.models import NearestArrayModel
from roadgraph.domain import geo
from roadgraph.domain.errors import EmptyGraphError, UnknownVertexError
from roadgraph.graph.builder import GraphBuilder
from roadgraph.graph.graph import Graph


def _load(b: GraphBuilder) -> GraphBuilder:
    b.add_node({"id": "1", "lon": "0", "lat": "0"})
    b.add_node({"id": "2", "lon": "0", "lat": "1"})
    b.add_node({"id": "3", "lon": "5", "lat": "5", "name": "O'Brien Ave"})
    b.add_edge("1", "2", "Main St")
    return b


@pytest.fixture
def graph() -> Graph:
    return _load(GraphBuilder(name="small")).build()


# ---------- worked examples


def test_two_vertex_example(graph: Graph):
    assert graph.distance(1, 2) == pytest.approx(69.0, abs=0.5)
    assert graph.adjacent(1) == (2,)
    assert graph.get_streets(1)[2] == "Main St"


def test_isolated_named_vertex_example():
    b = _load(GraphBuilder())
    assert 3 in b  # before clean
    g = b.build()
    assert 3 not in g.vertices()
    assert g.get_name(3) == "obrienave"
    assert g.names.display_names["obrienave"] == "O'Brien Ave"
    assert 3 in g.names.locations["obrienave"]


def test_closest_example(graph: Graph):
    assert graph.closest(0.001, 0.999) == 2
    assert graph.closest(0.0, -3.0) == 1


# ---------- lookups


def test_full_set_lookups_survive_pruning(graph: Graph):
    assert graph.lon(3) == 5.0 and graph.lat(3) == 5.0
    assert graph.distance(1, 3) > 0
    assert -180.0 < graph.bearing(1, 3) <= 180.0
    assert graph.bearing(1, 2) == pytest.approx(0.0)
    assert graph.get_name(1) is None


def test_active_set_lookups_reject_pruned(graph: Graph):
    for fn in (graph.adjacent, graph.get_streets, graph.get_neighbors):
        with pytest.raises(UnknownVertexError):
            fn(3)


@pytest.mark.parametrize("op", ["lon", "lat", "get_name", "vertex"])
def test_unknown_ids_raise(graph: Graph, op):
    with pytest.raises(UnknownVertexError) as exc:
        getattr(graph, op)(404)
    assert exc.value.vertex_id == 404


def test_distance_and_bearing_unknown_ids(graph: Graph):
    with pytest.raises(UnknownVertexError):
        graph.distance(1, 404)
    with pytest.raises(UnknownVertexError):
        graph.bearing(404, 1)


def test_sizes_and_membership(graph: Graph):
    assert len(graph) == 2
    assert graph.total == 3
    assert 1 in graph and 3 not in graph
    assert "small" in repr(graph)


# ---------- read-only surface


def test_query_results_do_not_expose_internals(graph: Graph):
    streets = graph.get_streets(1)
    with pytest.raises(TypeError):
        streets[99] = "Hacked Way"
    v = graph.vertex(1)
    v.neighbors.append(99)
    assert graph.adjacent(1) == (2,)
    ids = graph.vertices()
    ids.append(77)
    assert graph.vertices() == [1, 2]


def test_names_are_frozen(graph: Graph):
    with pytest.raises(RuntimeError):
        graph.names.register("x", "X", 1)


# ---------- closest


def test_closest_on_empty_graph_raises():
    b = GraphBuilder()
    b.add_node({"id": "1", "lon": "0", "lat": "0"})
    g = b.build()  # lone vertex is pruned
    with pytest.raises(EmptyGraphError):
        g.closest(0.0, 0.0)


@pytest.mark.parametrize("nearest", [None, NearestArrayModel()])
def test_closest_breaks_ties_by_lowest_id(nearest):
    b = GraphBuilder(nearest=nearest)
    b.add_node({"id": "20", "lon": "1", "lat": "0"})
    b.add_node({"id": "10", "lon": "-1", "lat": "0"})
    b.add_edge(20, 10, "Equator Rd")
    g = b.build()
    assert g.closest(0.0, 0.0) == 10


def test_closest_is_a_true_minimum(graph: Graph):
    for lon, lat in [(0.3, 0.2), (0.0, 0.6), (-4.0, 2.0), (10.0, 10.0)]:
        best = graph.closest(lon, lat)
        assert best in graph.vertices()
        b = graph.vertex(best)
        d_best = geo.distance(lon, lat, b.lon, b.lat)
        for vid in graph.vertices():
            assert d_best <= geo.distance(lon, lat, graph.lon(vid), graph.lat(vid))
