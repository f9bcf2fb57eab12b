import pytest

from dsakit.graphs import bfs, dfs

GRAPH = [
    [0, 1, 1, 1, 0, 0, 0],
    [1, 0, 1, 0, 0, 0, 0],
    [1, 1, 0, 1, 1, 0, 0],
    [1, 0, 1, 0, 1, 0, 0],
    [0, 0, 1, 1, 0, 1, 1],
    [0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 0],
]

DISCONNECTED = [
    [0, 1, 0],
    [1, 0, 0],
    [0, 0, 0],
]


def test_bfs_sample_graph():
    assert bfs(GRAPH, 1) == [1, 0, 2, 3, 4, 5, 6]


def test_dfs_sample_graph():
    assert dfs(GRAPH, 0) == [0, 1, 2, 3, 4, 5, 6]


@pytest.mark.parametrize("traverse", [bfs, dfs])
@pytest.mark.parametrize("start", range(len(GRAPH)))
def test_connected_graph_visits_every_vertex_once(traverse, start):
    order = traverse(GRAPH, start)
    assert order[0] == start
    assert sorted(order) == list(range(len(GRAPH)))


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_unreachable_vertex_is_not_visited(traverse):
    order = traverse(DISCONNECTED, 0)
    assert 2 not in order
    assert len(order) == len(set(order)) == 2


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_isolated_start(traverse):
    assert traverse(DISCONNECTED, 2) == [2]


def test_bfs_and_dfs_reach_the_same_vertices():
    for start in range(len(DISCONNECTED)):
        assert set(bfs(DISCONNECTED, start)) == set(dfs(DISCONNECTED, start))


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_directed_edges_are_followed_one_way(traverse):
    directed = [[0, 1], [0, 0]]
    assert traverse(directed, 1) == [1]
    assert traverse(directed, 0) == [0, 1]


def test_bfs_visits_by_distance():
    order = bfs(GRAPH, 1)
    assert order.index(4) > order.index(3)
    assert order.index(5) > order.index(4)


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_non_square_matrix_is_rejected(traverse):
    with pytest.raises(ValueError):
        traverse([[0, 1], [1, 0, 0]], 0)


@pytest.mark.parametrize("traverse", [bfs, dfs])
@pytest.mark.parametrize("start", [-1, 7])
def test_start_out_of_range(traverse, start):
    with pytest.raises(IndexError):
        traverse(GRAPH, start)