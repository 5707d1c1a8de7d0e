"""Single-source shortest path (SPF) on a dense weight matrix.

Implements label-setting (Dijkstra) search over `WeightedGraph`. Each round
relaxes the edges of finalized nodes, then finalizes the unsettled node with
the smallest tentative distance. Ties go to the lowest node index so results
are reproducible. The search stops as soon as the destination is finalized.

Notes:
    The path is recovered by walking backward from the destination and picking,
    among its in-neighbours, a node finalized earlier whose distance plus the
    connecting weight equals the destination's distance. Requiring an earlier
    finalization order keeps the walk acyclic when zero-weight edges exist.
"""

from __future__ import annotations

from typing import List

import numpy as np

from adjgraph.algorithms.base import UNREACHABLE
from adjgraph.algorithms.types import Path
from adjgraph.errors import UnreachableError
from adjgraph.graph.weighted_matrix import NodeIndex, WeightedGraph
from adjgraph.logging import get_logger

logger = get_logger(__name__)


def _settle(
    weights: np.ndarray, start: NodeIndex, end: NodeIndex
) -> tuple[np.ndarray, np.ndarray]:
    """Run label-setting until `end` is finalized.

    Args:
        weights: Weight table with NaN for missing edges.
        start: Source node.
        end: Destination node.

    Returns:
        A tuple of (distances, order) where ``order[v]`` is the round in which
        ``v`` was finalized, or -1 if it never was.

    Raises:
        UnreachableError: If `end` cannot be reached from `start`.
    """
    node_count = weights.shape[0]
    distances = np.full(node_count, UNREACHABLE)
    order = np.full(node_count, -1, dtype=np.int64)

    distances[start] = 0.0
    order[start] = 0
    newly_finalized = start
    finalized_count = 1

    while order[end] < 0:
        # Edges of earlier finalized nodes were relaxed in their own round.
        row = weights[newly_finalized]
        candidates = distances[newly_finalized] + row
        improve = (order < 0) & ~np.isnan(row) & (candidates < distances)
        distances[improve] = candidates[improve]

        tentative = np.where(order < 0, distances, UNREACHABLE)
        # argmin returns the lowest index among equal minima
        nearest = int(np.argmin(tentative))
        if tentative[nearest] == UNREACHABLE:
            raise UnreachableError(f"Node {end} is not reachable from node {start}.")

        order[nearest] = finalized_count
        finalized_count += 1
        newly_finalized = nearest

    return distances, order


def _trace_back(
    graph: WeightedGraph,
    distances: np.ndarray,
    order: np.ndarray,
    start: NodeIndex,
    end: NodeIndex,
) -> List[NodeIndex]:
    nodes = [end]
    current = end
    while current != start:
        for candidate in graph.sources(current):
            if order[candidate] < 0 or order[candidate] >= order[current]:
                continue
            edge = graph.get_edge(candidate, current)
            if distances[candidate] + edge == distances[current]:
                nodes.append(candidate)
                current = candidate
                break
        else:
            # The node that set this label always qualifies.
            raise RuntimeError(f"No settled predecessor found for node {current}.")
    nodes.reverse()
    return nodes


def shortest_path(graph: WeightedGraph, start: NodeIndex, end: NodeIndex) -> Path:
    """Find the shortest path from `start` to `end`.

    Args:
        graph: Graph with non-negative weights (directed or undirected).
        start: Source node.
        end: Destination node.

    Returns:
        The path (both endpoints inclusive) and its total length.

    Raises:
        IndexOutOfRangeError: If either node is outside the graph.
        UnreachableError: If no path from `start` to `end` exists.

    Example:
        >>> g = WeightedGraph.from_matrix([[None, 2, None], [2, None, 3], [None, 3, None]])
        >>> shortest_path(g, 0, 2)
        Path(nodes=(0, 1, 2), cost=5.0)
    """
    start = graph.check_node(start)
    end = graph.check_node(end)
    if start == end:
        return Path(nodes=(start,), cost=0.0)

    distances, order = _settle(graph.to_numpy(), start, end)
    nodes = _trace_back(graph, distances, order, start, end)
    logger.debug(
        "Shortest path %d -> %d: %d hops, cost %s", start, end, len(nodes) - 1, distances[end]
    )
    return Path(nodes=tuple(nodes), cost=float(distances[end]))


def shortest_distance(graph: WeightedGraph, start: NodeIndex, end: NodeIndex) -> float:
    """Return only the length of the shortest path from `start` to `end`."""
    return shortest_path(graph, start, end).cost
