"""Minimum spanning tree: Prim's algorithm on a dense weight matrix.

The tree grows from node 0. Each step scans every edge from a tree node to a
non-tree node and commits the cheapest one; ties go to the first edge in scan
order (tree node ascending, then outside node ascending).
"""

from __future__ import annotations

from typing import Iterable, List

import numpy as np

from adjgraph.algorithms.base import Cost, TreeEdge
from adjgraph.errors import DisconnectedGraphError
from adjgraph.graph.weighted_matrix import WeightedGraph
from adjgraph.logging import get_logger

logger = get_logger(__name__)


def prim_mst(graph: WeightedGraph) -> List[TreeEdge]:
    """Compute a minimum spanning tree of an undirected graph.

    Args:
        graph: Undirected, connected graph.

    Returns:
        Tree edges as ``(node_in_tree, node_joined)`` in the order they were
        added; ``node_count - 1`` edges in total.

    Raises:
        NotUndirectedError: If the weight matrix is not symmetric.
        DisconnectedGraphError: If some node cannot be reached from node 0.

    Complexity: O(n^3) for the repeated full scans.

    Example:
        >>> g = WeightedGraph.from_matrix(
        ...     [[None, 1, 3], [1, None, 2], [3, 2, None]]
        ... )
        >>> prim_mst(g)
        [(0, 1), (1, 2)]
    """
    graph.require_undirected("Minimum spanning tree")

    weights = graph.to_numpy()
    node_count = weights.shape[0]
    in_tree = np.zeros(node_count, dtype=bool)
    in_tree[0] = True
    tree: List[TreeEdge] = []

    while not in_tree.all():
        tree_nodes = np.flatnonzero(in_tree)
        outside_nodes = np.flatnonzero(~in_tree)
        crossing = weights[np.ix_(tree_nodes, outside_nodes)]
        if np.isnan(crossing).all():
            raise DisconnectedGraphError(
                f"Nodes {outside_nodes.tolist()} are not reachable from node 0."
            )
        # Row-major nanargmin matches the scan order and keeps the first minimum
        row, col = np.unravel_index(np.nanargmin(crossing), crossing.shape)
        joined = int(outside_nodes[col])
        tree.append((int(tree_nodes[row]), joined))
        in_tree[joined] = True

    logger.debug("Prim MST over %d nodes selected %d edges", node_count, len(tree))
    return tree


def tree_weight(graph: WeightedGraph, edges: Iterable[TreeEdge]) -> Cost:
    """Return the summed weight of `edges` in `graph`.

    Raises:
        DisconnectedGraphError: If an edge is missing from the graph.
    """
    total = 0.0
    for u, v in edges:
        weight = graph.get_edge(u, v)
        if weight is None:
            raise DisconnectedGraphError(f"Edge ({u}, {v}) is not in the graph.")
        total += weight
    return total


def mst_weight(graph: WeightedGraph) -> Cost:
    """Return the total weight of the minimum spanning tree of `graph`."""
    return tree_weight(graph, prim_mst(graph))
