import pytest

from dsakit.graphs import (
    adjacency_list,
    bfs_distances,
    bfs_order,
    compromised_neighbours,
    dfs_order,
    is_reachable,
    nearest_meeting_node,
    prim_mst,
    rotting_time,
)

EDGES = [(1, 2), (1, 3), (2, 4), (3, 4), (4, 5), (6, 7)]


def test_adjacency_list_is_symmetric():
    adjacency = adjacency_list(7, EDGES)
    assert len(adjacency) == 8
    for u, v in EDGES:
        assert v in adjacency[u]
        assert u in adjacency[v]
    assert sum(len(row) for row in adjacency) == 2 * len(EDGES)


def test_adjacency_list_keeps_edge_order():
    adjacency = adjacency_list(3, [(1, 3), (1, 2)])
    assert adjacency[1] == [3, 2]


def test_adjacency_list_rejects_out_of_range_edge():
    with pytest.raises(ValueError):
        adjacency_list(3, [(1, 4)])


def test_bfs_order_covers_component_once():
    adjacency = adjacency_list(7, EDGES)
    order = bfs_order(adjacency, 1)
    assert order[0] == 1
    assert sorted(order) == [1, 2, 3, 4, 5]
    assert 6 not in order


def test_bfs_order_is_sorted_by_distance():
    adjacency = adjacency_list(7, EDGES)
    distances = bfs_distances(adjacency, 1)
    order = bfs_order(adjacency, 1)
    levels = [distances[v] for v in order]
    assert levels == sorted(levels)


def test_dfs_order_on_star_pops_last_pushed_first():
    adjacency = adjacency_list(4, [(1, 2), (1, 3), (1, 4)])
    assert dfs_order(adjacency, 1) == [1, 4, 3, 2]


def test_dfs_and_bfs_reach_same_vertices():
    adjacency = adjacency_list(7, EDGES)
    assert sorted(dfs_order(adjacency, 6)) == sorted(bfs_order(adjacency, 6)) == [6, 7]


def test_bfs_distances_invariants():
    adjacency = adjacency_list(7, EDGES)
    distances = bfs_distances(adjacency, 1)
    assert distances[1] == 0
    assert distances[6] is None and distances[7] is None
    for u, v in EDGES:
        if distances[u] is not None:
            assert abs(distances[u] - distances[v]) <= 1


def test_nearest_meeting_node_example():
    assert nearest_meeting_node([2, 2, 3, -1], 0, 1) == 2


def test_nearest_meeting_node_same_start():
    assert nearest_meeting_node([1, 2, -1], 1, 1) == 1


def test_nearest_meeting_node_none_when_disjoint():
    assert nearest_meeting_node([-1, -1], 0, 1) is None


def test_nearest_meeting_node_follows_cycle():
    assert nearest_meeting_node([1, 2, 0], 0, 0) == 0


def test_nearest_meeting_node_rejects_bad_start():
    with pytest.raises(ValueError):
        nearest_meeting_node([1, -1], 0, 5)


def test_compromised_neighbours_through_chain():
    result = compromised_neighbours([0, 1, 2, 3], [(1, 0), (2, 0), (3, 1)], 3, 0)
    assert result == [1]


def test_compromised_neighbours_direct_contact():
    result = compromised_neighbours([0, 1, 2], [(1, 0), (2, 0)], 2, 0)
    assert result == [2]


def test_compromised_neighbours_unreachable_enemy():
    assert compromised_neighbours([0, 1, 2], [(1, 0)], 2, 0) == []


def test_compromised_neighbours_rejects_bad_edge():
    with pytest.raises(ValueError):
        compromised_neighbours([0, 1], [(5, 0)], 1, 0)


def test_is_reachable():
    edges = [(1, 2), (2, 3), (4, 5)]
    assert is_reachable(edges, 1, 3) is True
    assert is_reachable(edges, 3, 1) is True
    assert is_reachable(edges, 1, 5) is False
    assert is_reachable(edges, 9, 9) is True


PRIM_GRAPH = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]


def test_prim_mst_example():
    assert prim_mst(PRIM_GRAPH) == [(0, 1, 2), (1, 2, 3), (0, 3, 6), (1, 4, 5)]


def test_prim_mst_edges_exist_in_graph():
    tree = prim_mst(PRIM_GRAPH)
    assert [child for _, child, _ in tree] == [1, 2, 3, 4]
    for parent, child, weight in tree:
        assert PRIM_GRAPH[parent][child] == weight != 0


def test_prim_mst_trivial_graphs():
    assert prim_mst([]) == []
    assert prim_mst([[0]]) == []


def test_prim_mst_disconnected():
    with pytest.raises(ValueError):
        prim_mst([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


def test_prim_mst_non_square():
    with pytest.raises(ValueError):
        prim_mst([[0, 1], [1]])


def test_rotting_time_example():
    assert rotting_time([[2, 1, 1], [1, 1, 0], [0, 1, 1]]) == 4


def test_rotting_time_nothing_fresh():
    assert rotting_time([[2, 0], [0, 2]]) == 0
    assert rotting_time([]) == 0


def test_rotting_time_unreachable_fresh():
    assert rotting_time([[2, 0, 1]]) is None


def test_rotting_time_ragged_grid():
    with pytest.raises(ValueError):
        rotting_time([[2, 1], [1]])