import pytest

from dsakit.graph import Graph, WeightedGraph


def _sample_graph():
    graph = Graph(4)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 3)
    graph.add_edge(2, 3)
    return graph


def test_display_of_sample_graph():
    assert str(_sample_graph()) == "0 -> 1 2 \n1 -> 0 3 \n2 -> 0 3 \n3 -> 1 2 "


def test_edges_are_symmetric():
    graph = _sample_graph()
    for u in range(4):
        for v in graph.neighbors(u):
            assert u in graph.neighbors(v)


def test_neighbors_in_insertion_order():
    graph = _sample_graph()
    assert graph.neighbors(0) == [1, 2]
    assert graph.neighbors(3) == [1, 2]


def test_neighbors_returns_copy():
    graph = _sample_graph()
    graph.neighbors(0).append(99)
    assert 99 not in graph.neighbors(0)


def test_isolated_vertex_display():
    graph = Graph(2)
    assert str(graph) == "0 -> \n1 -> "
    assert graph.neighbors(1) == []


def test_add_edge_out_of_range():
    graph = Graph(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 2)
    with pytest.raises(IndexError):
        graph.add_edge(-1, 0)


def test_neighbors_out_of_range():
    with pytest.raises(IndexError):
        Graph(1).neighbors(1)


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        Graph(-1)


def test_weighted_edges_symmetric_with_weight():
    graph = WeightedGraph(3)
    graph.add_edge(0, 1, 5)
    graph.add_edge(1, 2, 7)
    assert graph.neighbors(0) == [(1, 5)]
    assert graph.neighbors(1) == [(0, 5), (2, 7)]
    assert graph.neighbors(2) == [(1, 7)]


def test_weighted_display():
    graph = WeightedGraph(2)
    graph.add_edge(0, 1, 4)
    assert str(graph) == "0 -> (1, weight=4) \n1 -> (0, weight=4) "


def test_weighted_out_of_range():
    with pytest.raises(IndexError):
        WeightedGraph(2).add_edge(0, 5, 1)


def test_vertex_count():
    assert len(_sample_graph()) == 4
    assert WeightedGraph(6).vertices == 6