import pytest

from algokit.adjacency import Graph, build_adjacency, format_adjacency


def test_undirected_edge_is_stored_both_ways():
    graph = Graph()
    graph.add_edge(0, 1, False)
    assert graph.neighbours(0) == [1]
    assert graph.neighbours(1) == [0]


def test_directed_edge_is_stored_one_way():
    graph = Graph()
    graph.add_edge(2, 5, True)
    assert graph.neighbours(2) == [5]
    assert graph.neighbours(5) == []


def test_neighbours_keep_insertion_order():
    graph = Graph()
    for target in (4, 1, 3):
        graph.add_edge(0, target, False)
    assert graph.neighbours(0) == [4, 1, 3]


def test_neighbours_returns_a_copy():
    graph = Graph()
    graph.add_edge(0, 1, False)
    graph.neighbours(0).append(99)
    assert graph.neighbours(0) == [1]


def test_graph_format():
    graph = Graph()
    graph.add_edge(0, 1, False)
    assert graph.format() == "0 -> 1, \n1 -> 0, \n"


def test_graph_format_omits_targets_of_directed_edges():
    graph = Graph()
    graph.add_edge(7, 8, True)
    lines = graph.format().splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("7 -> ")


def test_graph_format_has_a_line_per_node():
    graph = Graph()
    edges = [(0, 1), (0, 4), (1, 3), (1, 2), (2, 3), (3, 4)]
    for u, v in edges:
        graph.add_edge(u, v, False)
    lines = graph.format().splitlines()
    assert len(lines) == 5
    assert {int(line.split(" -> ")[0]) for line in lines} == {0, 1, 2, 3, 4}


def test_build_adjacency_example():
    adjacency = build_adjacency(4, [[1, 2], [0, 3], [2, 3]])
    assert adjacency == [[0, 3], [1, 2], [2, 1, 3], [3, 0, 2]]


def test_build_adjacency_rows_start_with_node_and_are_symmetric():
    edges = [(0, 1), (1, 2), (2, 4), (3, 0)]
    adjacency = build_adjacency(5, edges)
    assert [row[0] for row in adjacency] == list(range(5))
    for node, row in enumerate(adjacency):
        for neighbour in row[1:]:
            assert node in adjacency[neighbour][1:]


def test_build_adjacency_rejects_out_of_range_node():
    with pytest.raises(ValueError):
        build_adjacency(2, [(0, 2)])


def test_format_adjacency():
    assert format_adjacency([[0, 3], [1]]) == "0 -> 0, 3, \n1 -> 1, \n"


def test_format_adjacency_line_count_matches_rows():
    adjacency = build_adjacency(6, [(0, 5)])
    assert len(format_adjacency(adjacency).splitlines()) == len(adjacency)