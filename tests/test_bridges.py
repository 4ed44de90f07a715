import pytest

from algokit.bridges import critical_connections, find_bridges


def test_critical_connections_source_example():
    connections = [[0, 1], [1, 2], [2, 0], [1, 3]]
    assert critical_connections(4, connections) == [(1, 3)]


def test_tree_edges_are_all_bridges():
    edges = [[0, 1], [1, 2], [1, 3], [3, 4]]
    bridges = find_bridges(edges, 5)
    assert len(bridges) == 4
    assert {frozenset(b) for b in bridges} == {frozenset(e) for e in edges}


def test_cycle_has_no_bridges():
    assert find_bridges([[0, 1], [1, 2], [2, 3], [3, 0]], 4) == []


def test_both_entry_points_agree():
    edges = [[0, 1], [1, 2], [2, 0], [2, 3], [3, 4], [4, 5], [5, 3], [5, 6]]
    assert find_bridges(edges, 7) == critical_connections(7, edges)
    assert {frozenset(b) for b in find_bridges(edges, 7)} == {
        frozenset((2, 3)),
        frozenset((5, 6)),
    }


def test_disconnected_components_are_all_searched():
    edges = [[0, 1], [2, 3], [3, 4], [4, 2]]
    assert {frozenset(b) for b in find_bridges(edges, 6)} == {frozenset((0, 1))}


def test_long_path_does_not_hit_recursion_limit():
    n = 5000
    edges = [[i, i + 1] for i in range(n - 1)]
    assert len(find_bridges(edges, n)) == n - 1


def test_out_of_range_node_raises():
    with pytest.raises(ValueError):
        critical_connections(2, [[0, 2]])