import numpy as np
import pytest

from adjgraph.graph.weighted_matrix import WeightedGraph, from_edges


@pytest.fixture
def cycle4():
    # Unit square, every node has valency 2:
    #
    #      [1]
    #   0 ───── 1
    #   │       │
    #   │[1]    │[1]
    #   │       │
    #   3 ───── 2
    #      [1]
    return from_edges(4, [(0, 1, 1), (1, 2, 1), (2, 3, 1), (3, 0, 1)])


@pytest.fixture
def path3():
    # Two odd end nodes:
    #
    #      [2]     [3]
    #   0 ───── 1 ───── 2
    return WeightedGraph.from_matrix(
        [
            [None, 2, None],
            [2, None, 3],
            [None, 3, None],
        ]
    )


@pytest.fixture
def triangle1():
    #        [1]
    #   0 ───────── 1
    #    \         /
    #  [3] \     / [2]
    #        \ /
    #         2
    return WeightedGraph.from_matrix(
        [
            [None, 1, 3],
            [1, None, 2],
            [3, 2, None],
        ]
    )


@pytest.fixture
def asymmetric1():
    # 0 -> 1 costs 1, 1 -> 0 costs 2
    return WeightedGraph.from_matrix([[None, 1], [2, None]])


@pytest.fixture
def chain_directed():
    # 0 -> 1 -> 2, no way back
    g = WeightedGraph(3)
    g.set_edge(0, 1, 1)
    g.set_edge(1, 2, 1)
    return g


@pytest.fixture
def two_components():
    #      [1]          [1]
    #   0 ───── 1    2 ───── 3
    return from_edges(4, [(0, 1, 1), (2, 3, 1)])


@pytest.fixture
def k4_unit():
    # Complete graph on four nodes, unit weights; every node is odd
    return from_edges(4, [(u, v, 1) for u in range(4) for v in range(u + 1, 4)])


@pytest.fixture
def k4_weighted():
    # Complete graph on four nodes; every node is odd.
    #
    # Direct weights:       Shortest distances:
    #   0-1: 1  1-2: 2        0-1: 1  1-2: 2
    #   0-2: 4  1-3: 5        0-2: 3  1-3: 4
    #   0-3: 3  2-3: 6        0-3: 3  2-3: 6
    return from_edges(
        4,
        [(0, 1, 1), (0, 2, 4), (0, 3, 3), (1, 2, 2), (1, 3, 5), (2, 3, 6)],
    )


@pytest.fixture
def zero_weight_triangle():
    return from_edges(3, [(0, 1, 0), (1, 2, 0), (0, 2, 0)])


@pytest.fixture
def single_node():
    return WeightedGraph(1)


@pytest.fixture
def single_edge():
    return from_edges(2, [(0, 1, 4)])


def random_connected_graph(node_count: int, seed: int) -> WeightedGraph:
    """Undirected graph with a spanning path plus random chords, integer weights."""
    rng = np.random.default_rng(seed)
    g = WeightedGraph(node_count)
    for u in range(node_count - 1):
        g.set_edge_undirected(u, u + 1, int(rng.integers(1, 10)))
    for u in range(node_count):
        for v in range(u + 2, node_count):
            if rng.random() < 0.4:
                g.set_edge_undirected(u, v, int(rng.integers(1, 10)))
    return g
