"""Types and data structures for algorithm results.

Defines immutable result containers. None of them hold a reference to the
graph they were computed from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Tuple

from adjgraph.algorithms.base import Cost, GraphClass, Pairing
from adjgraph.graph.weighted_matrix import NodeIndex


@dataclass(frozen=True)
class Path:
    """A route through the graph.

    Attributes:
        nodes: Node indices from start to end, both inclusive.
        cost: Total weight of the edges along the route.
    """

    nodes: Tuple[NodeIndex, ...]
    cost: Cost

    def __iter__(self) -> Iterator[NodeIndex]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    @property
    def src_node(self) -> NodeIndex:
        """Return the first node in the path."""
        return self.nodes[0]

    @property
    def dst_node(self) -> NodeIndex:
        """Return the last node in the path."""
        return self.nodes[-1]

    @property
    def hops(self) -> List[Tuple[NodeIndex, NodeIndex]]:
        """Consecutive ``(from, to)`` node pairs along the path."""
        return list(zip(self.nodes, self.nodes[1:]))


@dataclass(frozen=True)
class RouteInspectionResult:
    """Outcome of a route-inspection (Chinese postman) computation.

    Attributes:
        graph_class: Eulerian classification of the inspected graph.
        odd_nodes: Odd-valency nodes in index order.
        pairing: Pairing of odd nodes whose connecting paths are repeated.
            Empty for Eulerian graphs.
        edge_length: Total length of all edges (each traversed at least once).
        repeated_length: Length of the paths that must be traversed twice.
    """

    graph_class: GraphClass
    odd_nodes: Tuple[NodeIndex, ...]
    pairing: Pairing
    edge_length: Cost
    repeated_length: Cost

    @property
    def length(self) -> Cost:
        """Length of the shortest closed walk covering every edge."""
        return self.edge_length + self.repeated_length


@dataclass(frozen=True)
class TspBounds:
    """Bounds on the optimal Traveling Salesman tour length.

    Attributes:
        lower: One-tree lower bound.
        mst_upper: Doubled minimum-spanning-tree upper bound.
        nearest_neighbor_upper: Best nearest-neighbour tour length.
    """

    lower: Cost
    mst_upper: Cost
    nearest_neighbor_upper: Cost

    @property
    def upper(self) -> Cost:
        """Tightest of the two upper bounds."""
        return min(self.mst_upper, self.nearest_neighbor_upper)
