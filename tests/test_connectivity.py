import pytest

from csesgraphs.connectivity import (
    assign_teams,
    connect_components,
    find_round_trip,
    message_route,
    topological_sort,
)


def test_connect_components_example():
    assert connect_components(4, [(1, 2), (3, 4)]) == [(2, 3)]


def test_connect_components_result_connects_graph():
    edges = [(1, 2), (4, 5), (7, 8), (8, 9)]
    n = 10
    roads = connect_components(n, edges)
    assert connect_components(n, edges + roads) == []
    assert message_route(n, edges + roads) is not None


def test_connect_components_already_connected():
    assert connect_components(3, [(1, 2), (2, 3)]) == []


def test_connect_components_isolated_nodes():
    n = 5
    roads = connect_components(n, [])
    assert len(roads) == n - 1
    assert connect_components(n, roads) == []


def test_connect_components_rejects_bad_node():
    with pytest.raises(ValueError):
        connect_components(3, [(1, 4)])


def test_message_route_example():
    edges = [(1, 2), (1, 3), (1, 4), (2, 3), (5, 4)]
    route = message_route(5, edges)
    assert route == [1, 4, 5]


def test_message_route_uses_edges():
    edges = [(1, 2), (2, 3), (3, 6), (1, 4), (4, 5), (5, 6), (2, 5)]
    route = message_route(6, edges)
    assert route[0] == 1 and route[-1] == 6
    edge_set = {frozenset(e) for e in edges}
    assert all(frozenset(pair) in edge_set for pair in zip(route, route[1:]))


def test_message_route_impossible():
    assert message_route(4, [(1, 2), (3, 4)]) is None


def test_message_route_single_node():
    assert message_route(1, []) == [1]


def test_assign_teams_example():
    edges = [(1, 2), (1, 3), (4, 5)]
    teams = assign_teams(5, edges)
    assert teams is not None
    assert len(teams) == 5
    assert teams[0] == 1
    assert all(teams[a - 1] != teams[b - 1] for a, b in edges)
    assert set(teams) <= {1, 2}


def test_assign_teams_even_cycle():
    edges = [(1, 2), (2, 3), (3, 4), (4, 1)]
    teams = assign_teams(4, edges)
    assert all(teams[a - 1] != teams[b - 1] for a, b in edges)


def test_assign_teams_odd_cycle():
    assert assign_teams(3, [(1, 2), (2, 3), (3, 1)]) is None


def test_find_round_trip_example():
    edges = [(1, 3), (1, 2), (5, 3), (1, 5), (2, 4), (4, 5)]
    cycle = find_round_trip(5, edges)
    assert cycle is not None
    assert cycle[0] == cycle[-1]
    assert len(cycle) >= 4
    assert len(set(cycle[:-1])) == len(cycle) - 1
    edge_set = {frozenset(e) for e in edges}
    assert all(frozenset(pair) in edge_set for pair in zip(cycle, cycle[1:]))


def test_find_round_trip_tree():
    assert find_round_trip(5, [(1, 2), (1, 3), (3, 4), (3, 5)]) is None


def test_find_round_trip_second_component():
    edges = [(1, 2), (3, 4), (4, 5), (5, 3)]
    cycle = find_round_trip(5, edges)
    assert cycle is not None
    assert set(cycle) == {3, 4, 5}


def test_topological_sort_example():
    adjacency = [[], [], [3], [1], [0, 1], [2, 0]]
    assert topological_sort(6, adjacency) == [5, 4, 2, 3, 1, 0]


def test_topological_sort_respects_edges():
    adjacency = [[1, 2], [3], [3, 4], [5], [5], [], [0]]
    order = topological_sort(7, adjacency)
    assert sorted(order) == list(range(7))
    position = {v: i for i, v in enumerate(order)}
    for u, targets in enumerate(adjacency):
        for v in targets:
            assert position[u] < position[v]


def test_topological_sort_size_mismatch():
    with pytest.raises(ValueError):
        topological_sort(3, [[], []])