"""adjgraph: graph algorithms on dense weighted adjacency matrices.

adjgraph provides a numpy-backed adjacency-matrix graph and the classic
algorithms built on it: shortest paths, all-pairs tables, minimum spanning
trees, route inspection (Chinese postman) and Traveling Salesman bounds.

Primary API:
    WeightedGraph - Dense weighted graph over nodes 0..n-1
    shortest_path(), floyd_warshall() - Single-source and all-pairs paths
    prim_mst() - Minimum spanning tree
    shortest_route_length(), inspect_route() - Route inspection
    tsp_bounds() and the individual bound functions - TSP estimates
    from_networkx(), to_networkx() - NetworkX interoperability

Example:
    from adjgraph import WeightedGraph, shortest_route_length, tsp_bounds

    g = WeightedGraph(4)
    for u in range(4):
        g.set_edge_undirected(u, (u + 1) % 4, 1.0)

    shortest_route_length(g)  # 4.0, the cycle is Eulerian
    tsp_bounds(g).mst_upper  # 6.0
"""

from __future__ import annotations

from adjgraph import logging
from adjgraph.algorithms import (
    UNREACHABLE,
    AllPairsTables,
    GraphClass,
    Path,
    RouteInspectionResult,
    TspBounds,
    classify,
    closure_graph,
    find_best_pairing,
    find_route,
    floyd_warshall,
    inspect_route,
    iter_pairings,
    mst_upper_bound,
    mst_weight,
    nearest_neighbor_tour,
    nearest_neighbor_upper_bound,
    one_tree_lower_bound,
    pairing_count,
    prim_mst,
    shortest_distance,
    shortest_path,
    shortest_route_length,
    tree_weight,
    tsp_bounds,
)
from adjgraph.config import ENGINE_CONFIG, EngineConfig
from adjgraph.errors import (
    DisconnectedGraphError,
    ErrorKind,
    GraphError,
    IndexOutOfRangeError,
    InvalidPairingError,
    InvalidShapeError,
    InvalidWeightError,
    NotConnectedError,
    NotUndirectedError,
    PairingBudgetExceededError,
    SelfLoopError,
    UnreachableError,
)
from adjgraph.graph import WeightedGraph, from_edges
from adjgraph.graph.convert import NodeMap, from_networkx, to_networkx
from adjgraph.outcome import Err, Ok, Outcome, attempt

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "WeightedGraph",
    "from_edges",
    # Results
    "Path",
    "AllPairsTables",
    "RouteInspectionResult",
    "TspBounds",
    "GraphClass",
    "UNREACHABLE",
    # Algorithms
    "shortest_path",
    "shortest_distance",
    "floyd_warshall",
    "find_route",
    "closure_graph",
    "prim_mst",
    "tree_weight",
    "mst_weight",
    "classify",
    "iter_pairings",
    "pairing_count",
    "find_best_pairing",
    "inspect_route",
    "shortest_route_length",
    "mst_upper_bound",
    "one_tree_lower_bound",
    "nearest_neighbor_upper_bound",
    "nearest_neighbor_tour",
    "tsp_bounds",
    # Errors and outcomes
    "GraphError",
    "ErrorKind",
    "InvalidShapeError",
    "InvalidWeightError",
    "SelfLoopError",
    "IndexOutOfRangeError",
    "NotUndirectedError",
    "UnreachableError",
    "DisconnectedGraphError",
    "NotConnectedError",
    "InvalidPairingError",
    "PairingBudgetExceededError",
    "Ok",
    "Err",
    "Outcome",
    "attempt",
    # Configuration
    "EngineConfig",
    "ENGINE_CONFIG",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
