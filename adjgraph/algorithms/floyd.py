"""All-pairs shortest paths (Floyd-Warshall) and route reconstruction.

`floyd_warshall` returns an `AllPairsTables` value holding a distance table and
a detour table. ``detour[i, j] == j`` means the best route from ``i`` to ``j``
is the direct edge; any other value ``m`` names an intermediate node, and the
full route is rebuilt by expanding ``i -> m`` and ``m -> j`` recursively.

Distances for pairs with no connecting path stay at `UNREACHABLE`. The
diagonal is never relaxed, so ``distance(i, i)`` is `UNREACHABLE` as well.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from adjgraph.algorithms.base import UNREACHABLE, Cost
from adjgraph.algorithms.types import Path
from adjgraph.errors import IndexOutOfRangeError, InvalidShapeError, UnreachableError
from adjgraph.graph.weighted_matrix import NodeIndex, WeightedGraph
from adjgraph.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class AllPairsTables:
    """Distance and detour tables produced by Floyd-Warshall.

    Attributes:
        distances: ``n x n`` float table; `UNREACHABLE` where no path exists.
        detours: ``n x n`` int table naming the node to route through.
    """

    distances: np.ndarray
    detours: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "distances", np.array(self.distances, dtype=np.float64))
        object.__setattr__(self, "detours", np.array(self.detours, dtype=np.int64))
        if (
            self.distances.ndim != 2
            or self.distances.shape[0] != self.distances.shape[1]
            or self.distances.shape != self.detours.shape
        ):
            raise InvalidShapeError(
                "Distance and detour tables must be square and of equal shape, got "
                f"{self.distances.shape} and {self.detours.shape}."
            )
        self.distances.setflags(write=False)
        self.detours.setflags(write=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AllPairsTables):
            return NotImplemented
        return bool(
            np.array_equal(self.distances, other.distances)
            and np.array_equal(self.detours, other.detours)
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def node_count(self) -> int:
        return self.distances.shape[0]

    def _check_node(self, node: NodeIndex) -> NodeIndex:
        if not 0 <= node < self.node_count:
            raise IndexOutOfRangeError(f"Node {node} is outside [0, {self.node_count}).")
        return node

    def distance(self, start: NodeIndex, end: NodeIndex) -> float:
        """Return the raw table entry for `start` -> `end`.

        The diagonal is never relaxed, so ``distance(i, i)`` is `UNREACHABLE`
        even though `is_reachable(i, i)` is True and `route(i, i)` is ``[i]``.
        Use `find_route` for a zero-cost result on ``start == end``.
        """
        return float(self.distances[self._check_node(start), self._check_node(end)])

    def is_reachable(self, start: NodeIndex, end: NodeIndex) -> bool:
        """Return True if a path from `start` to `end` exists."""
        return start == end or self.distance(start, end) != UNREACHABLE

    @property
    def is_complete(self) -> bool:
        """True if every pair of distinct nodes has a finite distance."""
        off_diagonal = ~np.eye(self.node_count, dtype=bool)
        return bool(np.all(np.isfinite(self.distances[off_diagonal])))

    def route(self, start: NodeIndex, end: NodeIndex) -> List[NodeIndex]:
        """Rebuild the node sequence of the shortest route.

        Raises:
            UnreachableError: If no path from `start` to `end` exists.
        """
        start, end = self._check_node(start), self._check_node(end)
        if start == end:
            return [start]
        if self.distances[start, end] == UNREACHABLE:
            raise UnreachableError(f"Node {end} is not reachable from node {start}.")
        return self._expand(start, end)

    def _expand(self, start: NodeIndex, end: NodeIndex) -> List[NodeIndex]:
        via = int(self.detours[start, end])
        if via == end:
            return [start, end]
        return self._expand(start, via) + self._expand(via, end)[1:]

    def find_route(self, start: NodeIndex, end: NodeIndex) -> Path:
        """Return the shortest route and its length as a `Path`."""
        nodes = self.route(start, end)
        cost: Cost = 0.0 if start == end else self.distance(start, end)
        return Path(nodes=tuple(nodes), cost=cost)


def floyd_warshall(graph: WeightedGraph) -> AllPairsTables:
    """Compute shortest distances and detours between all pairs of nodes.

    For each intermediate node ``k`` (outer loop), every pair ``(i, j)`` with
    ``i``, ``j`` and ``k`` pairwise distinct takes the route through ``k`` if
    it is strictly shorter. Row and column ``k`` are never updated during pass
    ``k``, so each pass is applied to the whole table at once.

    Args:
        graph: Graph with non-negative weights (directed or undirected).

    Returns:
        The distance and detour tables.

    Complexity: O(n^3) where n is the number of nodes.

    Example:
        >>> g = WeightedGraph.from_matrix([[None, 2, None], [2, None, 3], [None, 3, None]])
        >>> tables = floyd_warshall(g)
        >>> tables.distance(0, 2), tables.route(0, 2)
        (5.0, [0, 1, 2])
    """
    weights = graph.to_numpy()
    node_count = weights.shape[0]

    distances = np.where(np.isnan(weights), UNREACHABLE, weights)
    detours = np.tile(np.arange(node_count, dtype=np.int64), (node_count, 1))

    eligible = ~np.eye(node_count, dtype=bool)
    for k in range(node_count):
        through_k = distances[:, k, None] + distances[None, k, :]
        improve = (through_k < distances) & eligible
        improve[k, :] = False
        improve[:, k] = False
        distances[improve] = through_k[improve]
        detours[improve] = k

    logger.debug("Floyd-Warshall completed for %d nodes", node_count)
    return AllPairsTables(distances=distances, detours=detours)


def find_route(
    graph: WeightedGraph,
    start: NodeIndex,
    end: NodeIndex,
    tables: Optional[AllPairsTables] = None,
) -> Path:
    """Return the shortest route between two nodes using all-pairs tables.

    Args:
        graph: Graph the tables describe.
        start: Source node.
        end: Destination node.
        tables: Precomputed tables for `graph`; computed when omitted.

    Raises:
        UnreachableError: If no path from `start` to `end` exists.
    """
    tables = ensure_tables(graph, tables)
    return tables.find_route(graph.check_node(start), graph.check_node(end))


def closure_graph(
    graph: WeightedGraph, tables: Optional[AllPairsTables] = None
) -> WeightedGraph:
    """Build the distance closure of `graph`.

    Every pair of distinct nodes connected by some path gets an edge whose
    weight is their shortest distance; unreachable pairs stay without edge.

    Args:
        graph: Source graph.
        tables: Precomputed tables for `graph`; computed when omitted.

    Returns:
        A new graph with the same node count.
    """
    tables = ensure_tables(graph, tables)
    closure = np.where(np.isfinite(tables.distances), tables.distances, np.nan)
    np.fill_diagonal(closure, np.nan)
    return WeightedGraph.from_matrix(closure)


def ensure_tables(graph: WeightedGraph, tables: Optional[AllPairsTables]) -> AllPairsTables:
    """Return `tables` if they fit `graph`, or compute fresh ones when None."""
    if tables is None:
        return floyd_warshall(graph)
    if tables.node_count != graph.node_count:
        raise InvalidShapeError(
            f"Tables cover {tables.node_count} nodes but the graph has {graph.node_count}."
        )
    return tables
