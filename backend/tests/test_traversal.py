import networkx as nx
import pytest

from decaygraph.core.exceptions import (
    InvalidExpiration,
    InvalidVertexLabel,
    TraversalStateError,
    VertexNotFound,
)
from decaygraph.graph.decay_graph import DecayGraph
from decaygraph.graph.graph_query import TraversalEngine
from decaygraph.graph.graph_store import GraphStore

from conftest import EDGE_LISTS


def test_sample_traversal_order_and_distances(sample_graph):
    assert sample_graph.traverse("A") == "ABCDE"
    assert sample_graph.get_distances() == "1:BC 2:DE "
    assert sample_graph.distance_table() == {1: "BC", 2: "DE"}

    result = sample_graph.last_traversal
    assert result.start == "A"
    assert result.distances == {"A": 0, "B": 1, "C": 1, "D": 2, "E": 2}


def test_sample_traversal_from_leaf(sample_graph):
    assert sample_graph.traverse("D") == "DBACE"
    assert sample_graph.get_distances() == "1:B 2:ACE "


def test_neighbors_enqueued_alphabetically(graph):
    graph.build("M ZCA Z Q C B")

    assert graph.traverse("M") == "MACZBQ"
    assert graph.get_distances() == "1:ACZ 2:BQ "


def test_sample_unreachable_count(sample_graph):
    assert sample_graph.unreachable_nodes("A", 1) == 2
    assert sample_graph.unreachable_nodes("A", 2) == 0
    assert sample_graph.unreachable_nodes("D", 1) == 3


def test_unreachable_runs_a_fresh_traversal(sample_graph):
    sample_graph.traverse("E")
    sample_graph.unreachable_nodes("A", 1)

    assert sample_graph.last_traversal.start == "A"
    assert sample_graph.get_distances() == "1:BC 2:DE "


def test_disconnected_vertices_are_not_counted(graph):
    graph.build("A B B C X Y")

    # X and Y are never reached from A, so only C (dist 2) counts.
    assert graph.unreachable_nodes("A", 1) == 1
    assert graph.traverse("A") == "ABC"
    assert graph.get_distances() == "1:B 2:C "


def test_second_traversal_resets_state(graph):
    graph.build("A B B C X Y")

    graph.traverse("A")
    graph.traverse("X")

    assert graph.get_distances() == "1:Y "
    assert graph.store.get_vertex("A").dist == -1
    assert not graph.store.get_vertex("C").known
    assert graph.last_traversal.distances == {"X": 0, "Y": 1}


@pytest.mark.parametrize("edges", EDGE_LISTS)
def test_bfs_distances_match_shortest_paths(edges):
    g = DecayGraph()
    g.build(edges)
    reference = g.store.as_networkx()

    for start in g.vertices():
        order = g.traverse(start)
        expected = nx.single_source_shortest_path_length(reference, start)

        assert sorted(order) == sorted(expected)
        for label in g.vertices():
            assert g.store.get_vertex(label).dist == expected.get(label, -1)


@pytest.mark.parametrize("edges", EDGE_LISTS)
def test_distance_buckets_are_alphabetical(edges):
    g = DecayGraph()
    g.build(edges)
    g.traverse(g.vertices()[0])

    for letters in g.distance_table().values():
        assert letters == "".join(sorted(letters))


def test_distances_before_traversal_raise(sample_graph):
    with pytest.raises(TraversalStateError):
        sample_graph.get_distances()


def test_traverse_requires_present_start(sample_graph):
    with pytest.raises(VertexNotFound):
        sample_graph.traverse("Q")
    with pytest.raises(InvalidVertexLabel):
        sample_graph.traverse("q")
    with pytest.raises(VertexNotFound):
        sample_graph.unreachable_nodes("Q", 1)


@pytest.mark.parametrize("expiration", [0, -1, True, 1.5, "2"])
def test_invalid_expiration_is_rejected(sample_graph, expiration):
    with pytest.raises(InvalidExpiration):
        sample_graph.unreachable_nodes("A", expiration)


def test_engine_visits_isolated_start_trivially():
    store = GraphStore()
    store.add_edge("A", "B")
    engine = TraversalEngine(store)

    result = engine.traverse("K")

    assert result.order == "K"
    assert result.distances == {"K": 0}
    assert store.get_vertex("K").dist == 0
    assert store.get_vertex("A").dist == -1
    assert engine.get_distances() == ""
