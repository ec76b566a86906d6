import pytest

from dsakit.shortest_paths import (
    find_city,
    has_negative_cycle,
    network_delay_time,
    shortest_path,
)

GRAPH = [(0, 1, 4), (0, 2, 1), (2, 1, 2), (1, 3, 1), (2, 3, 5), (3, 4, 3)]


def _weight(u, v):
    return min(w for a, b, w in GRAPH if {a, b} == {u, v})


def test_shortest_path_is_consistent():
    distance, path = shortest_path(5, GRAPH, 0, 4)
    assert path[0] == 0 and path[-1] == 4
    assert sum(_weight(a, b) for a, b in zip(path, path[1:])) == distance


def test_shortest_path_no_longer_than_any_edge_route():
    distance, _ = shortest_path(5, GRAPH, 0, 3)
    assert distance <= 4 + 1
    assert distance <= 1 + 5


def test_shortest_path_symmetric_distance():
    assert shortest_path(5, GRAPH, 0, 4)[0] == shortest_path(5, GRAPH, 4, 0)[0]


def test_shortest_path_to_self():
    assert shortest_path(5, GRAPH, 2, 2) == (0, [2])


def test_shortest_path_unreachable():
    assert shortest_path(4, [(0, 1, 1)], 0, 3) is None


def test_shortest_path_bad_vertex():
    with pytest.raises(IndexError):
        shortest_path(2, [], 0, 2)


def test_network_delay_source_example():
    assert network_delay_time([[2, 1, 1], [2, 3, 1], [3, 4, 1]], 4, 2) == 2


def test_network_delay_unreachable():
    assert network_delay_time([[1, 2, 1]], 2, 2) == -1


def test_network_delay_single_node():
    assert network_delay_time([], 1, 1) == 0


def test_network_delay_matches_farthest_shortest_path():
    times = [[1, 2, 3], [1, 3, 1], [3, 2, 1], [2, 4, 2]]
    undirected = [(u - 1, v - 1, w) for u, v, w in times]
    # On this graph the shortest routes use edges in their given direction.
    expected = max(shortest_path(4, undirected, 0, t)[0] for t in range(1, 4))
    assert network_delay_time(times, 4, 1) == expected


def test_find_city_source_examples():
    assert find_city(4, [[0, 1, 3], [1, 2, 1], [1, 3, 4], [2, 3, 1]], 4) == 3
    edges = [[0, 1, 2], [0, 4, 8], [1, 2, 3], [1, 4, 2], [2, 3, 1], [3, 4, 1]]
    assert find_city(5, edges, 2) == 0


def test_find_city_ties_go_to_largest_index():
    assert find_city(3, [], 10) == 2


def test_find_city_no_cities():
    assert find_city(0, [], 1) == -1


def test_negative_cycle_detected():
    assert has_negative_cycle(3, [(0, 1, 1), (1, 2, -3), (2, 0, 1)]) is True


def test_negative_cycle_absent():
    assert has_negative_cycle(3, [(0, 1, 1), (1, 2, -3), (2, 0, 3)]) is False


def test_negative_edge_without_cycle():
    assert has_negative_cycle(3, [(0, 1, -5), (1, 2, -5)]) is False


def test_negative_cycle_bad_edge():
    with pytest.raises(IndexError):
        has_negative_cycle(2, [(0, 3, 1)])