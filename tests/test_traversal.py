import pytest

from algokit.traversal import (
    bfs_traversal,
    depth_first_search,
    shortest_path_unweighted,
)


def test_bfs_example():
    adjacency = [[1, 2, 3], [4], [5], [], [], []]
    assert bfs_traversal(6, adjacency) == [0, 1, 2, 3, 4, 5]


def test_bfs_visits_only_reachable_nodes_once():
    adjacency = [[1], [0, 2], [1, 0], [4], [3]]
    order = bfs_traversal(5, adjacency)
    assert order[0] == 0
    assert sorted(order) == [0, 1, 2]
    assert len(order) == len(set(order))


def test_bfs_rejects_empty_graph():
    with pytest.raises(ValueError):
        bfs_traversal(0, [])


def test_bfs_rejects_out_of_range_neighbour():
    with pytest.raises(ValueError):
        bfs_traversal(2, [[5], []])


def test_dfs_example():
    edges = [(0, 2), (0, 1), (1, 2), (3, 4)]
    assert depth_first_search(5, edges) == [[0, 2, 1], [3, 4]]


def test_dfs_components_partition_nodes():
    edges = [(0, 3), (3, 5), (1, 4), (6, 6)]
    components = depth_first_search(8, edges)
    flat = [node for component in components for node in component]
    assert sorted(flat) == list(range(8))
    assert all(component[0] == min(component) for component in components)


def test_dfs_isolated_nodes_are_singletons():
    components = depth_first_search(3, [])
    assert components == [[0], [1], [2]]


def test_dfs_rejects_out_of_range_node():
    with pytest.raises(ValueError):
        depth_first_search(2, [(0, 2)])


def test_shortest_path_single_edge():
    assert shortest_path_unweighted([(1, 2)], 2, 1, 2) == [1, 2]


def test_shortest_path_larger_graph():
    edges = [(1, 2), (1, 3), (1, 4), (2, 5), (5, 8), (3, 8), (4, 6), (6, 7), (7, 8)]
    path = shortest_path_unweighted(edges, 8, 1, 8)
    assert path == [1, 3, 8]
    edge_set = {frozenset(edge) for edge in edges}
    for a, b in zip(path, path[1:]):
        assert frozenset((a, b)) in edge_set


def test_shortest_path_to_self():
    assert shortest_path_unweighted([(1, 2)], 2, 2, 2) == [2]


def test_shortest_path_is_reversible_in_length():
    edges = [(1, 2), (2, 3), (3, 4), (1, 5), (5, 4)]
    forward = shortest_path_unweighted(edges, 5, 1, 4)
    backward = shortest_path_unweighted(edges, 5, 4, 1)
    assert len(forward) == len(backward)
    assert forward[0] == backward[-1]


def test_shortest_path_unreachable_target():
    with pytest.raises(ValueError):
        shortest_path_unweighted([(1, 2)], 3, 1, 3)


def test_shortest_path_rejects_bad_source():
    with pytest.raises(ValueError):
        shortest_path_unweighted([(1, 2)], 2, 0, 2)