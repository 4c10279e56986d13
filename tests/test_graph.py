import pytest

from cs8lab.graph import Edge, Vertex, WeightedGraph, shortest_path


def build(count, edges):
    graph = WeightedGraph()
    for _ in range(count):
        graph.add_vertex()
    for source, target, weight in edges:
        graph.add_edge(source, target, weight)
    return graph


def test_add_vertex_assigns_sequential_ids():
    graph = WeightedGraph()
    ids = [graph.add_vertex() for _ in range(3)]
    assert ids == [0, 1, 2]
    assert [v.id for v in graph.vertices] == ids
    assert len(graph) == 3


def test_add_edge_records_weight_and_target():
    graph = build(2, [(0, 1, 5)])
    assert graph.vertices[0].edges == [Edge(5, 1)]
    assert graph.vertices[1].edges == []


@pytest.mark.parametrize("source,target", [(-1, 0), (0, 2), (3, 1)])
def test_add_edge_out_of_range_raises(source, target):
    graph = build(2, [])
    with pytest.raises(IndexError):
        graph.add_edge(source, target, 1)


def test_vertex_ordering_by_id():
    assert Vertex(1) < Vertex(2)
    assert not Vertex(3) < Vertex(2)


def test_shortest_path_prefers_cheaper_route():
    graph = build(3, [(0, 1, 4), (0, 2, 1), (2, 1, 2)])
    assert shortest_path(graph, 0) == [-1, 2, 0]


def test_shortest_path_unreachable_is_minus_one():
    graph = build(4, [(0, 1, 1), (2, 3, 1)])
    result = shortest_path(graph, 0)
    assert result[0] == -1
    assert result[1] == 0
    assert result[2] == -1
    assert result[3] == -1


def test_shortest_path_edges_are_directed():
    graph = build(2, [(0, 1, 1)])
    assert shortest_path(graph, 1) == [-1, -1]


def test_shortest_path_chain_reconstructs_route():
    graph = build(5, [(0, 1, 1), (1, 2, 1), (2, 3, 1), (3, 4, 1), (0, 4, 10)])
    path = shortest_path(graph, 0)
    route = [4]
    while path[route[-1]] != -1:
        route.append(path[route[-1]])
    assert list(reversed(route)) == [0, 1, 2, 3, 4]


def test_shortest_path_bad_start_raises():
    graph = build(2, [])
    with pytest.raises(IndexError):
        shortest_path(graph, 2)