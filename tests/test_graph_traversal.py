import pytest

from dsakit.graph_traversal import bfs, bfs_all, build_adjacency, dfs


def test_build_adjacency_undirected_is_symmetric():
    edges = [(0, 1), (1, 2), (2, 0), (2, 3)]
    adjacency = build_adjacency(4, edges)
    for u, v in edges:
        assert v in adjacency[u]
        assert u in adjacency[v]


def test_build_adjacency_directed_one_way():
    adjacency = build_adjacency(3, [(0, 1), (1, 2)], directed=True)
    assert adjacency == [[1], [2], []]


def test_build_adjacency_rejects_bad_vertex():
    with pytest.raises(IndexError):
        build_adjacency(2, [(0, 5)])


def test_bfs_on_path_follows_path():
    adjacency = build_adjacency(5, [(0, 1), (1, 2), (2, 3), (3, 4)])
    assert bfs(adjacency, 0) == list(range(5))


def test_bfs_visits_by_distance():
    adjacency = build_adjacency(6, [(0, 1), (0, 2), (1, 3), (2, 4), (4, 5)])
    order = bfs(adjacency, 0)
    assert order[0] == 0
    assert set(order[1:3]) == {1, 2}
    assert order.index(5) == len(order) - 1


def test_bfs_only_reaches_component():
    adjacency = build_adjacency(5, [(0, 1), (3, 4)])
    assert sorted(bfs(adjacency, 3)) == [3, 4]


def test_bfs_all_covers_every_vertex_once():
    adjacency = build_adjacency(7, [(0, 1), (2, 3), (3, 4), (6, 5)])
    order = bfs_all(adjacency, 7)
    assert sorted(order) == list(range(7))


def test_bfs_all_respects_vertex_count():
    adjacency = build_adjacency(4, [(0, 1)])
    assert sorted(bfs_all(adjacency, 3)) == [0, 1, 2]


def test_dfs_on_path_follows_path():
    adjacency = build_adjacency(4, [(0, 1), (1, 2), (2, 3)], directed=True)
    assert dfs(adjacency, 0) == [0, 1, 2, 3]


def test_dfs_reaches_same_set_as_bfs():
    adjacency = build_adjacency(8, [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (6, 7)])
    for start in range(8):
        assert sorted(dfs(adjacency, start)) == sorted(bfs(adjacency, start))


def test_dfs_takes_last_pushed_neighbour_first():
    adjacency = build_adjacency(3, [(0, 1), (0, 2)], directed=True)
    order = dfs(adjacency, 0)
    assert order[1] == adjacency[0][-1]


def test_invalid_start_vertex():
    adjacency = build_adjacency(3, [])
    with pytest.raises(IndexError):
        dfs(adjacency, 3)
    with pytest.raises(IndexError):
        bfs(adjacency, -1)