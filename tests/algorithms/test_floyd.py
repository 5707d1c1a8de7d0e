import dataclasses
import math

import networkx as nx
import numpy as np
import pytest

from adjgraph.algorithms.base import UNREACHABLE
from adjgraph.algorithms.floyd import (
    AllPairsTables,
    closure_graph,
    find_route,
    floyd_warshall,
)
from adjgraph.errors import IndexOutOfRangeError, InvalidShapeError, UnreachableError
from adjgraph.graph.convert import to_networkx
from adjgraph.graph.weighted_matrix import WeightedGraph
from tests.algorithms.sample_graphs import random_connected_graph


class TestFloydWarshall:
    def test_path3_tables(self, path3):
        tables = floyd_warshall(path3)
        assert tables.distance(0, 2) == 5.0
        assert tables.distance(2, 0) == 5.0
        assert tables.distance(0, 1) == 2.0
        assert tables.detours[0, 2] == 1
        assert tables.detours[0, 1] == 1
        assert tables.route(0, 2) == [0, 1, 2]
        assert tables.route(2, 0) == [2, 1, 0]

    def test_direct_edge_detour_is_destination(self, triangle1):
        tables = floyd_warshall(triangle1)
        assert tables.detours[0, 1] == 1
        assert tables.detours[1, 2] == 2
        # 0 -> 2 directly costs 3, the same as 0 -> 1 -> 2; not strictly shorter
        assert tables.detours[0, 2] == 2
        assert tables.route(0, 2) == [0, 2]

    def test_nested_detours(self, k4_weighted):
        tables = floyd_warshall(k4_weighted)
        expected = {
            (0, 1): 1.0,
            (0, 2): 3.0,
            (0, 3): 3.0,
            (1, 2): 2.0,
            (1, 3): 4.0,
            (2, 3): 6.0,
        }
        for (u, v), dist in expected.items():
            assert tables.distance(u, v) == dist
            assert tables.distance(v, u) == dist
        assert tables.route(0, 2) == [0, 1, 2]
        assert tables.route(1, 3) == [1, 0, 3]
        assert tables.route(2, 3) == [2, 3]

    def test_diagonal_unreachable(self, path3):
        tables = floyd_warshall(path3)
        for node in path3.nodes():
            assert tables.distance(node, node) == UNREACHABLE
            assert tables.is_reachable(node, node)
            assert tables.route(node, node) == [node]
            assert tables.find_route(node, node).cost == 0.0

    def test_disconnected(self, two_components):
        tables = floyd_warshall(two_components)
        assert tables.distance(0, 1) == 1.0
        assert math.isinf(tables.distance(0, 2))
        assert not tables.is_reachable(0, 3)
        assert not tables.is_complete
        with pytest.raises(UnreachableError):
            tables.route(0, 3)

    def test_directed(self, chain_directed):
        tables = floyd_warshall(chain_directed)
        assert tables.distance(0, 2) == 2.0
        assert tables.distance(2, 0) == UNREACHABLE
        assert tables.route(0, 2) == [0, 1, 2]

    def test_complete_flag(self, path3, single_node):
        assert floyd_warshall(path3).is_complete
        assert floyd_warshall(single_node).is_complete

    def test_graph_not_mutated(self, k4_weighted):
        before = k4_weighted.copy()
        floyd_warshall(k4_weighted)
        assert k4_weighted == before

    def test_tables_read_only(self, path3):
        tables = floyd_warshall(path3)
        with pytest.raises(ValueError):
            tables.distances[0, 1] = 0.0
        with pytest.raises(dataclasses.FrozenInstanceError):
            tables.detours = np.zeros((3, 3), dtype=int)

    def test_bad_node(self, path3):
        tables = floyd_warshall(path3)
        with pytest.raises(IndexOutOfRangeError):
            tables.distance(0, 5)


@pytest.mark.parametrize("seed", range(5))
def test_matches_networkx(seed):
    """Distances agree with networkx and every route is walkable."""
    g = random_connected_graph(9, seed)
    expected = nx.floyd_warshall(to_networkx(g), weight="weight")
    tables = floyd_warshall(g)
    for u in g.nodes():
        for v in g.nodes():
            if u == v:
                continue
            assert tables.distance(u, v) == pytest.approx(expected[u][v])
            route = tables.route(u, v)
            assert route[0] == u and route[-1] == v
            walked = sum(g.get_edge(a, b) for a, b in zip(route, route[1:]))
            assert walked == pytest.approx(tables.distance(u, v))


class TestAllPairsTables:
    def test_equal_tables_compare_equal(self, k4_weighted, path3):
        assert floyd_warshall(k4_weighted) == floyd_warshall(k4_weighted)
        assert floyd_warshall(k4_weighted) != floyd_warshall(path3)
        assert floyd_warshall(path3) != "tables"

    def test_tables_not_hashable(self, path3):
        with pytest.raises(TypeError):
            hash(floyd_warshall(path3))

    def test_distinct_detours_not_equal(self):
        distances = np.array([[np.inf, 1.0], [1.0, np.inf]])
        a = AllPairsTables(distances=distances, detours=np.array([[0, 1], [0, 1]]))
        b = AllPairsTables(distances=distances, detours=np.array([[1, 1], [0, 1]]))
        assert a != b

    def test_shape_validated(self):
        with pytest.raises(InvalidShapeError):
            AllPairsTables(distances=np.zeros((2, 3)), detours=np.zeros((2, 3)))
        with pytest.raises(InvalidShapeError):
            AllPairsTables(distances=np.zeros((2, 2)), detours=np.zeros((3, 3)))

    def test_inputs_copied(self):
        distances = np.array([[np.inf, 1.0], [1.0, np.inf]])
        detours = np.array([[0, 1], [0, 1]])
        tables = AllPairsTables(distances=distances, detours=detours)
        distances[0, 1] = 9.0
        assert tables.distance(0, 1) == 1.0
        assert distances.flags.writeable

    def test_find_route_path(self, path3):
        path = floyd_warshall(path3).find_route(0, 2)
        assert path.nodes == (0, 1, 2)
        assert path.cost == 5.0


class TestFindRoute:
    def test_computes_tables_on_demand(self, k4_weighted):
        path = find_route(k4_weighted, 1, 3)
        assert path.nodes == (1, 0, 3)
        assert path.cost == 4.0

    def test_reuses_tables(self, k4_weighted):
        tables = floyd_warshall(k4_weighted)
        assert find_route(k4_weighted, 3, 1, tables) == tables.find_route(3, 1)

    def test_same_node(self, path3):
        path = find_route(path3, 2, 2)
        assert path.nodes == (2,)
        assert path.cost == 0.0

    def test_mismatched_tables(self, path3, k4_weighted):
        with pytest.raises(InvalidShapeError):
            find_route(path3, 0, 2, floyd_warshall(k4_weighted))

    def test_unreachable(self, two_components):
        with pytest.raises(UnreachableError):
            find_route(two_components, 1, 2)


class TestClosureGraph:
    def test_path3_closure(self, path3):
        closure = closure_graph(path3)
        assert closure.get_matrix_copy() == [
            [None, 2.0, 5.0],
            [2.0, None, 3.0],
            [5.0, 3.0, None],
        ]

    def test_disconnected_closure_keeps_components(self, two_components):
        closure = closure_graph(two_components)
        assert closure.edges() == [(0, 1, 1.0), (1, 0, 1.0), (2, 3, 1.0), (3, 2, 1.0)]

    def test_closure_of_directed_graph(self, chain_directed):
        closure = closure_graph(chain_directed)
        assert closure[0, 2] == 2.0
        assert closure[2, 0] is None
        assert isinstance(closure, WeightedGraph)
