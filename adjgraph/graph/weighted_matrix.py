"""Dense weighted adjacency matrix with validation and convenience APIs.

`WeightedGraph` stores an ``n x n`` table of optional edge weights in a numpy
array where ``NaN`` means "no direct edge". Cell ``[u, v]`` is the weight of
the directed edge from ``u`` to ``v``. The class enforces:
  - A square table with at least one node.
  - Finite, non-negative weights.
  - No self-loops (the diagonal is always empty).
  - Node indices within ``[0, node_count)``.

Undirected-only queries (valency, Eulerian classification) check symmetry on
every call because the matrix can be mutated between calls.
"""

from __future__ import annotations

import math
import operator
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

import networkx as nx
import numpy as np

from adjgraph.errors import (
    IndexOutOfRangeError,
    InvalidShapeError,
    InvalidWeightError,
    NotUndirectedError,
    SelfLoopError,
)

NodeIndex = int
Weight = float
MatrixLike = Union[np.ndarray, Sequence[Sequence[Optional[float]]]]


def _validate_weight(value: Any) -> float:
    weight = float(value)
    if not math.isfinite(weight) or weight < 0:
        raise InvalidWeightError(
            f"Edge weights must be finite and non-negative, got {value!r}."
        )
    return weight


class WeightedGraph:
    """Dense weighted graph over nodes ``0 .. node_count - 1``.

    Example:
        >>> g = WeightedGraph(3)
        >>> g.set_edge_undirected(0, 1, 2.0)
        >>> g.set_edge_undirected(1, 2, 3.0)
        >>> g[0, 1], g[0, 2]
        (2.0, None)
        >>> g.is_undirected, g.total_valency
        (True, 5.0)
    """

    def __init__(self, node_count: int) -> None:
        """Create a graph with `node_count` nodes and no edges.

        Args:
            node_count: Number of nodes; must be a positive integer.

        Raises:
            InvalidShapeError: If `node_count` is not positive.
        """
        size = operator.index(node_count)
        if size < 1:
            raise InvalidShapeError(f"Graph needs at least one node, got {size}.")
        self._weights: np.ndarray = np.full((size, size), np.nan, dtype=np.float64)

    @classmethod
    def from_matrix(cls, values: MatrixLike) -> WeightedGraph:
        """Build a graph from an explicit weight table.

        Args:
            values: Square table indexed ``[from][to]``. Nested sequences use
                ``None`` for "no edge"; numpy arrays use ``NaN``.

        Returns:
            A new graph holding a copy of the table.

        Raises:
            InvalidShapeError: If the table is empty or not square.
            InvalidWeightError: If any weight is negative or not finite.
            SelfLoopError: If any diagonal cell holds a weight.
        """
        if isinstance(values, np.ndarray):
            if values.ndim != 2 or values.shape[0] != values.shape[1]:
                raise InvalidShapeError(
                    f"Weight table must be square, got shape {values.shape}."
                )
            rows: List[List[Optional[float]]] = [
                [None if np.isnan(cell) else cell for cell in row]
                for row in values.astype(np.float64)
            ]
        else:
            rows = [list(row) for row in values]
            for row_idx, row in enumerate(rows):
                if len(row) != len(rows):
                    raise InvalidShapeError(
                        f"Weight table must be square: row {row_idx} has "
                        f"{len(row)} entries, expected {len(rows)}."
                    )

        graph = cls(len(rows))
        for u, row in enumerate(rows):
            for v, cell in enumerate(row):
                if cell is not None:
                    graph.set_edge(u, v, cell)
        return graph

    #
    # Size and indexing
    #
    @property
    def node_count(self) -> int:
        """Number of nodes in the graph."""
        return self._weights.shape[0]

    def __len__(self) -> int:
        return self.node_count

    def nodes(self) -> range:
        """Return the node indices in ascending order."""
        return range(self.node_count)

    def check_node(self, node: Any) -> NodeIndex:
        index = operator.index(node)
        if not 0 <= index < self.node_count:
            raise IndexOutOfRangeError(
                f"Node {index} is outside [0, {self.node_count})."
            )
        return index

    #
    # Edge management
    #
    def get_edge(self, u: NodeIndex, v: NodeIndex) -> Optional[Weight]:
        """Return the weight of edge ``u -> v`` or None if there is no edge."""
        value = self._weights[self.check_node(u), self.check_node(v)]
        return None if np.isnan(value) else float(value)

    def has_edge(self, u: NodeIndex, v: NodeIndex) -> bool:
        """Return True if edge ``u -> v`` exists."""
        return self.get_edge(u, v) is not None

    def set_edge(self, u: NodeIndex, v: NodeIndex, weight: float) -> None:
        """Set the weight of the directed edge ``u -> v``.

        Raises:
            IndexOutOfRangeError: If either node is out of range.
            SelfLoopError: If ``u == v``.
            InvalidWeightError: If the weight is negative or not finite.
        """
        u, v = self.check_node(u), self.check_node(v)
        if u == v:
            raise SelfLoopError(f"Self-loops are not supported (node {u}).")
        self._weights[u, v] = _validate_weight(weight)

    def clear_edge(self, u: NodeIndex, v: NodeIndex) -> None:
        """Remove the directed edge ``u -> v`` if present."""
        self._weights[self.check_node(u), self.check_node(v)] = np.nan

    def set_edge_undirected(self, u: NodeIndex, v: NodeIndex, weight: float) -> None:
        """Set the edge between `u` and `v` in both directions."""
        self.set_edge(u, v, weight)
        self.set_edge(v, u, weight)

    def clear_edge_undirected(self, u: NodeIndex, v: NodeIndex) -> None:
        """Remove the edge between `u` and `v` in both directions."""
        self.clear_edge(u, v)
        self.clear_edge(v, u)

    def __getitem__(self, key: Tuple[NodeIndex, NodeIndex]) -> Optional[Weight]:
        u, v = key
        return self.get_edge(u, v)

    def __setitem__(self, key: Tuple[NodeIndex, NodeIndex], weight: Optional[float]) -> None:
        u, v = key
        if weight is None:
            self.clear_edge(u, v)
        else:
            self.set_edge(u, v, weight)

    def edges(self) -> List[Tuple[NodeIndex, NodeIndex, Weight]]:
        """Return all directed edges as ``(u, v, weight)`` in row-major order."""
        rows, cols = np.nonzero(~np.isnan(self._weights))
        return [
            (int(u), int(v), float(self._weights[u, v])) for u, v in zip(rows, cols)
        ]

    def destinations(self, node: NodeIndex) -> List[NodeIndex]:
        """Return nodes that `node` has an outgoing edge to, in index order."""
        row = self._weights[self.check_node(node)]
        return [int(v) for v in np.flatnonzero(~np.isnan(row))]

    def sources(self, node: NodeIndex) -> List[NodeIndex]:
        """Return nodes that have an edge into `node`, in index order."""
        column = self._weights[:, self.check_node(node)]
        return [int(u) for u in np.flatnonzero(~np.isnan(column))]

    #
    # Copies and views
    #
    def get_matrix_copy(self) -> List[List[Optional[Weight]]]:
        """Return the weight table as nested lists with None for missing edges."""
        return [
            [None if np.isnan(cell) else float(cell) for cell in row]
            for row in self._weights
        ]

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the weight table with NaN for missing edges."""
        return self._weights.copy()

    def copy(self) -> WeightedGraph:
        """Return an independent copy of this graph."""
        clone = WeightedGraph(self.node_count)
        clone._weights = self._weights.copy()
        return clone

    def without_node(self, node: NodeIndex) -> WeightedGraph:
        """Return a new graph with `node` and its edges removed.

        Remaining nodes keep their relative order and are renumbered densely.

        Raises:
            InvalidShapeError: If removing the node would leave an empty graph.
        """
        node = self.check_node(node)
        if self.node_count == 1:
            raise InvalidShapeError("Cannot remove the only node of a graph.")
        reduced = WeightedGraph(self.node_count - 1)
        reduced._weights = np.delete(np.delete(self._weights, node, axis=0), node, axis=1)
        return reduced

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightedGraph):
            return NotImplemented
        return self._weights.shape == other._weights.shape and bool(
            np.array_equal(self._weights, other._weights, equal_nan=True)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"WeightedGraph(node_count={self.node_count}, edges={len(self.edges())})"

    #
    # Structural queries
    #
    @property
    def is_undirected(self) -> bool:
        """True if ``weight(a, b) == weight(b, a)`` for every pair of nodes."""
        return bool(np.array_equal(self._weights, self._weights.T, equal_nan=True))

    def require_undirected(self, operation: str) -> None:
        """Raise `NotUndirectedError` unless the matrix is symmetric.

        Args:
            operation: Name of the caller, used in the error message.
        """
        if not self.is_undirected:
            raise NotUndirectedError(
                f"{operation} requires an undirected graph (symmetric weights)."
            )

    def _upper_triangle(self) -> np.ndarray:
        # Strictly above the diagonal, one cell per undirected pair
        rows, cols = np.triu_indices(self.node_count, k=1)
        return self._weights[rows, cols]

    def node_valency(self, node: NodeIndex) -> int:
        """Return the number of edges incident to `node` in an undirected graph."""
        self.require_undirected("Node valency")
        return len(self.destinations(node))

    def valencies(self) -> List[int]:
        """Return the valency of every node, indexed by node."""
        self.require_undirected("Node valency")
        return [int(count) for count in np.sum(~np.isnan(self._weights), axis=1)]

    @property
    def total_valency(self) -> float:
        """Total edge length, each undirected edge counted once."""
        self.require_undirected("Total valency")
        return float(np.nansum(self._upper_triangle()))

    @property
    def edge_count(self) -> int:
        """Number of undirected edges."""
        self.require_undirected("Edge count")
        return int(np.count_nonzero(~np.isnan(self._upper_triangle())))

    def odd_nodes(self) -> List[NodeIndex]:
        """Return nodes of odd valency in index order."""
        return [node for node, valency in enumerate(self.valencies()) if valency % 2]

    @property
    def is_eulerian(self) -> bool:
        """True if every node has even valency."""
        return not self.odd_nodes()

    @property
    def is_semi_eulerian(self) -> bool:
        """True if exactly two nodes have odd valency."""
        return len(self.odd_nodes()) == 2

    @property
    def is_connected(self) -> bool:
        """True if the graph forms a single component when edge direction is ignored."""
        linked = ~np.isnan(self._weights)
        linked |= linked.T
        return nx.is_connected(nx.from_numpy_array(linked.astype(np.int8)))


def from_edges(
    node_count: int, edges: Iterable[Tuple[NodeIndex, NodeIndex, float]]
) -> WeightedGraph:
    """Build an undirected graph from ``(u, v, weight)`` triples."""
    graph = WeightedGraph(node_count)
    for u, v, weight in edges:
        graph.set_edge_undirected(u, v, weight)
    return graph
