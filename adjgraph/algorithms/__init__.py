"""Graph algorithms over `WeightedGraph`.

Modules:
    spf: single-source shortest path (label-setting search).
    floyd: all-pairs shortest paths, route reconstruction and closure graphs.
    mst: Prim minimum spanning tree.
    route_inspection: Eulerian classification and Chinese postman route length.
    tsp: Traveling Salesman upper and lower bounds.
"""

from adjgraph.algorithms.base import UNREACHABLE, Cost, GraphClass, Pair, Pairing, TreeEdge
from adjgraph.algorithms.floyd import AllPairsTables, closure_graph, find_route, floyd_warshall
from adjgraph.algorithms.mst import mst_weight, prim_mst, tree_weight
from adjgraph.algorithms.route_inspection import (
    classify,
    find_best_pairing,
    inspect_route,
    iter_pairings,
    pairing_count,
    shortest_route_length,
)
from adjgraph.algorithms.spf import shortest_distance, shortest_path
from adjgraph.algorithms.tsp import (
    mst_upper_bound,
    nearest_neighbor_tour,
    nearest_neighbor_upper_bound,
    one_tree_lower_bound,
    tsp_bounds,
)
from adjgraph.algorithms.types import Path, RouteInspectionResult, TspBounds

__all__ = [
    "UNREACHABLE",
    "Cost",
    "GraphClass",
    "Pair",
    "Pairing",
    "TreeEdge",
    "Path",
    "AllPairsTables",
    "RouteInspectionResult",
    "TspBounds",
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
]
