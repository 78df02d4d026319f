import itertools
import random

import pytest

import nx_utils
from kruskal import (DisconnectedGraphError, Edge, Graph, UnionFind, compute_mst,
                     format_mst, is_spanning_tree, kruskal_mst, main, total_weight)


def test_union_find_starts_as_singletons():
    uf = UnionFind(5)
    assert len(uf) == 5
    assert uf.n_components == 5
    assert all(uf.find(v) == v for v in range(5))
    assert uf.rank == [0] * 5


def test_union_by_rank_attaches_second_root_on_tie():
    uf = UnionFind(4)
    assert uf.union(0, 1)
    assert uf.parent[1] == 0
    assert uf.rank[0] == 1

    # lower-rank root goes under the higher-rank one
    assert uf.union(2, 0)
    assert uf.find(2) == 0
    assert uf.rank[0] == 1
    assert uf.rank[2] == 0


def test_union_of_same_component_is_noop():
    uf = UnionFind(3)
    uf.union(0, 1)
    parent, rank = list(uf.parent), list(uf.rank)

    assert not uf.union(1, 0)
    assert uf.parent == parent
    assert uf.rank == rank
    assert uf.n_components == 2


def test_find_compresses_path():
    uf = UnionFind(5)
    # build the chain 4 -> 3 -> 2 -> 1 -> 0 by hand
    uf.parent = [0, 0, 1, 2, 3]

    assert uf.find(4) == 0
    assert uf.parent == [0, 0, 0, 0, 0]


def test_find_is_idempotent():
    uf = UnionFind(8)
    for a, b in [(0, 1), (2, 3), (1, 3), (4, 5), (5, 3)]:
        uf.union(a, b)

    roots = [uf.find(v) for v in range(8)]
    assert roots == [uf.find(v) for v in range(8)]
    assert len({roots[v] for v in range(6)}) == 1
    assert uf.connected(0, 4)
    assert not uf.connected(0, 6)


@pytest.mark.parametrize('index', [-1, 3, 100])
def test_find_out_of_bounds(index):
    uf = UnionFind(3)
    with pytest.raises(IndexError):
        uf.find(index)


def test_sample_graph():
    mst = kruskal_mst(Graph.sample())

    assert mst == [Edge(2, 3, 4), Edge(0, 3, 5), Edge(0, 1, 10)]
    assert total_weight(mst) == 19
    assert Edge(0, 2, 6) not in mst
    assert Edge(1, 3, 15) not in mst


def test_input_edges_are_not_mutated():
    graph = Graph.sample()
    edges = list(graph.edges)
    compute_mst(graph.n_vertices, edges)
    assert edges == list(graph.edges)


def test_single_vertex_gives_empty_tree():
    assert compute_mst(1, []) == []
    assert compute_mst(1, [], require_connected=True) == []


@pytest.mark.parametrize('n_vertices', [0, -3])
def test_invalid_vertex_count(n_vertices):
    with pytest.raises(ValueError):
        compute_mst(n_vertices, [])


@pytest.mark.parametrize('edge', [Edge(0, 3, 1), Edge(-1, 0, 1)])
def test_edge_outside_range(edge):
    with pytest.raises(ValueError):
        compute_mst(3, [Edge(0, 1, 1), edge])


def test_disconnected_graph_gives_forest():
    edges = [
        Edge(0, 1, 3), Edge(1, 2, 1), Edge(0, 2, 2),
        Edge(3, 4, 7),
    ]
    forest = compute_mst(5, edges)

    assert len(forest) == (3 - 1) + (2 - 1)
    assert total_weight(forest) == 10
    assert not is_spanning_tree(5, forest)


def test_disconnected_graph_can_be_rejected():
    with pytest.raises(DisconnectedGraphError):
        compute_mst(5, [Edge(0, 1, 3), Edge(3, 4, 7)], require_connected=True)


def test_self_loops_and_parallel_edges():
    edges = [Edge(0, 0, -10), Edge(0, 1, 8), Edge(0, 1, 2), Edge(1, 1, 0)]
    assert compute_mst(2, edges) == [Edge(0, 1, 2)]


def test_negative_and_float_weights():
    edges = [Edge(0, 1, -2.5), Edge(1, 2, 0), Edge(0, 2, -1)]
    mst = compute_mst(3, edges)
    assert mst == [Edge(0, 1, -2.5), Edge(0, 2, -1)]


def test_equal_weights_keep_total():
    # a 4-cycle with two equal heaviest edges, either one completes the tree
    edges = [Edge(0, 1, 1), Edge(1, 2, 1), Edge(2, 3, 5), Edge(3, 0, 5)]
    weights = {total_weight(compute_mst(4, list(order)))
               for order in itertools.permutations(edges)}
    assert weights == {7}


def _random_connected_graph(rng: random.Random, n: int) -> Graph:
    edges = [Edge(rng.randrange(v), v, rng.randint(-5, 20)) for v in range(1, n)]
    for u, v in itertools.combinations(range(n), 2):
        if rng.random() < 0.4:
            edges.append(Edge(u, v, rng.randint(-5, 20)))
    rng.shuffle(edges)
    return Graph(n, edges)


@pytest.mark.parametrize('seed', range(25))
def test_matches_prim(seed):
    rng = random.Random(seed)
    graph = _random_connected_graph(rng, rng.randint(1, 12))

    mst = kruskal_mst(graph, require_connected=True)

    assert total_weight(mst) == nx_utils.reference_mst_weight(graph)
    assert is_spanning_tree(graph.n_vertices, mst)
    if graph.n_vertices > 1:
        touched = {v for e in mst for v in (e.u, e.v)}
        assert touched == set(range(graph.n_vertices))


def test_is_spanning_tree_detects_cycle():
    assert is_spanning_tree(3, [Edge(0, 1, 1), Edge(1, 2, 1)])
    assert not is_spanning_tree(3, [Edge(0, 1, 1), Edge(1, 0, 1)])


def test_edge_from_line():
    assert Edge.from_line('1 2 30\n') == Edge(1, 2, 30)
    assert Edge.from_line('1 2 0.5') == Edge(1, 2, 0.5)
    with pytest.raises(ValueError):
        Edge.from_line('1 2')


def test_format_mst():
    assert format_mst([Edge(2, 3, 4), Edge(0, 3, 5)]) == (
        'Minimum Spanning Tree:\n'
        '2 - 3 : 4\n'
        '0 - 3 : 5'
    )


def test_main_runs_sample(capsys):
    assert main([]) == 0

    out = capsys.readouterr().out
    assert out == (
        'Minimum Spanning Tree:\n'
        '2 - 3 : 4\n'
        '0 - 3 : 5\n'
        '0 - 1 : 10\n'
        'Total weight: 19\n'
    )


def test_main_reports_invalid_graph(tmp_path, capsys):
    path = tmp_path / 'bad.txt'
    path.write_text('2 1\n0 5 1\n')

    assert main([str(path)]) == 1
    assert 'ERROR' in capsys.readouterr().err


def test_main_require_connected(tmp_path, capsys):
    path = tmp_path / 'split.txt'
    path.write_text('4 2\n0 1 1\n2 3 1\n')

    assert main([str(path)]) == 0
    assert main([str(path), '--require-connected']) == 1
    assert 'not connected' in capsys.readouterr().err


@pytest.mark.parametrize('token', ['nan', 'inf', '-inf'])
def test_edge_from_line_rejects_non_finite_weight(token):
    with pytest.raises(ValueError, match='finite'):
        Edge.from_line(f'0 1 {token}')


def test_non_finite_weight_is_invalid():
    edges = [Edge(0, 1, float('nan')), Edge(1, 2, 5), Edge(0, 2, 1)]
    with pytest.raises(ValueError, match='non-finite'):
        compute_mst(3, edges)


def test_main_rejects_nan_weight(tmp_path, capsys):
    path = tmp_path / 'nan.txt'
    path.write_text('3 3\n0 1 nan\n1 2 5\n0 2 1\n')

    assert main([str(path)]) == 1
    assert 'ERROR' in capsys.readouterr().err


def test_edges_may_be_a_one_shot_iterator():
    graph = Graph.sample()
    mst = compute_mst(graph.n_vertices, iter(graph.edges))
    assert total_weight(mst) == 19
