"""Bounds for the Traveling Salesman Problem.

Every bound works on the distance closure of the input graph, in which each
pair of nodes is joined by an edge weighted with their shortest distance. The
closure must be complete; otherwise some node cannot be visited and no tour
exists.

Bounds:
  - ``mst_upper_bound``: twice the closure's minimum spanning tree weight.
  - ``one_tree_lower_bound``: for each node ``v``, the MST weight of the
    closure without ``v`` plus the two cheapest closure edges at ``v``; the
    largest such value over all ``v``.
  - ``nearest_neighbor_upper_bound``: the shortest greedy nearest-neighbour
    tour over all start nodes.

Graphs with fewer than two nodes have a tour of length zero.
"""

from __future__ import annotations

from typing import List

import numpy as np

from adjgraph.algorithms.base import Cost
from adjgraph.algorithms.floyd import closure_graph, floyd_warshall
from adjgraph.algorithms.mst import mst_weight
from adjgraph.algorithms.types import Path, TspBounds
from adjgraph.errors import DisconnectedGraphError
from adjgraph.graph.weighted_matrix import NodeIndex, WeightedGraph
from adjgraph.logging import get_logger

logger = get_logger(__name__)


def _complete_closure(graph: WeightedGraph, operation: str) -> WeightedGraph:
    graph.require_undirected(operation)
    tables = floyd_warshall(graph)
    if not tables.is_complete:
        raise DisconnectedGraphError(f"{operation} requires a connected graph.")
    return closure_graph(graph, tables)


def _mst_upper(closure: WeightedGraph) -> Cost:
    if closure.node_count < 2:
        return 0.0
    return 2 * mst_weight(closure)


def _one_tree_lower(closure: WeightedGraph) -> Cost:
    node_count = closure.node_count
    if node_count < 2:
        return 0.0

    weights = closure.to_numpy()
    best: Cost = 0.0
    for node in range(node_count):
        residual = mst_weight(closure.without_node(node))
        incident = np.sort(np.delete(weights[node], node))
        # A two-node tour leaves and returns along the same edge
        reconnect = 2 * incident[0] if incident.size == 1 else incident[0] + incident[1]
        bound = residual + float(reconnect)
        logger.debug("One-tree bound removing node %d: %s", node, bound)
        best = max(best, bound)
    return best


def _greedy_tour(closure: WeightedGraph, start: NodeIndex) -> Path:
    weights = closure.to_numpy()
    visited = np.zeros(closure.node_count, dtype=bool)
    visited[start] = True
    tour: List[NodeIndex] = [start]
    length: Cost = 0.0

    current = start
    while not visited.all():
        candidates = np.where(visited, np.inf, weights[current])
        # argmin keeps the lowest index on ties
        nearest = int(np.argmin(candidates))
        length += float(candidates[nearest])
        visited[nearest] = True
        tour.append(nearest)
        current = nearest

    if current != start:
        # Closure edges already carry the shortest distance back
        length += float(weights[current, start])
        tour.append(start)
    return Path(nodes=tuple(tour), cost=length)


def _nearest_neighbor_upper(closure: WeightedGraph) -> Cost:
    if closure.node_count < 2:
        return 0.0
    return min(_greedy_tour(closure, start).cost for start in closure.nodes())


def mst_upper_bound(graph: WeightedGraph) -> Cost:
    """Return twice the weight of the closure's minimum spanning tree.

    Raises:
        NotUndirectedError: If the weight matrix is not symmetric.
        DisconnectedGraphError: If the graph is not connected.
    """
    return _mst_upper(_complete_closure(graph, "MST upper bound"))


def one_tree_lower_bound(graph: WeightedGraph) -> Cost:
    """Return the best one-tree lower bound over all removed nodes.

    Raises:
        NotUndirectedError: If the weight matrix is not symmetric.
        DisconnectedGraphError: If the graph is not connected.
    """
    return _one_tree_lower(_complete_closure(graph, "One-tree lower bound"))


def nearest_neighbor_upper_bound(graph: WeightedGraph) -> Cost:
    """Return the length of the best nearest-neighbour tour over all starts.

    Raises:
        NotUndirectedError: If the weight matrix is not symmetric.
        DisconnectedGraphError: If the graph is not connected.
    """
    return _nearest_neighbor_upper(_complete_closure(graph, "Nearest-neighbour bound"))


def nearest_neighbor_tour(graph: WeightedGraph, start: NodeIndex = 0) -> Path:
    """Return the closed nearest-neighbour tour from `start` on the closure.

    The tour lists closure nodes, so consecutive nodes need not be adjacent in
    the original graph. It ends back at `start`.

    Raises:
        NotUndirectedError: If the weight matrix is not symmetric.
        DisconnectedGraphError: If the graph is not connected.
        IndexOutOfRangeError: If `start` is outside the graph.
    """
    start = graph.check_node(start)
    closure = _complete_closure(graph, "Nearest-neighbour tour")
    return _greedy_tour(closure, start)


def tsp_bounds(graph: WeightedGraph) -> TspBounds:
    """Compute all three bounds from a single closure graph.

    Example:
        >>> g = WeightedGraph(4)
        >>> for u in range(4):
        ...     g.set_edge_undirected(u, (u + 1) % 4, 1.0)
        >>> tsp_bounds(g)
        TspBounds(lower=4.0, mst_upper=6.0, nearest_neighbor_upper=4.0)
    """
    closure = _complete_closure(graph, "TSP bounds")
    bounds = TspBounds(
        lower=_one_tree_lower(closure),
        mst_upper=_mst_upper(closure),
        nearest_neighbor_upper=_nearest_neighbor_upper(closure),
    )
    logger.debug("TSP bounds for %d nodes: %s", graph.node_count, bounds)
    return bounds
