"""Route inspection (Chinese postman) on undirected graphs.

Finds the length of the shortest closed walk that traverses every edge at
least once. The walk length is the total edge length plus the length of the
paths that must be walked twice to make every node even:

  - Eulerian graph (no odd nodes): nothing is repeated.
  - Semi-Eulerian graph (two odd nodes): the shortest path between them.
  - General graph: the cheapest way to pair up all odd nodes, scoring each
    pairing by the summed shortest distances of its pairs.

Distinct pairings are generated directly: the first remaining node is paired
with each other node in turn and the rest is paired recursively. For ``2k``
odd nodes this yields ``(2k - 1)!!`` pairings with no duplicates.
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple

from adjgraph.algorithms.base import Cost, GraphClass, Pairing
from adjgraph.algorithms.floyd import AllPairsTables, ensure_tables
from adjgraph.algorithms.spf import shortest_path
from adjgraph.algorithms.types import RouteInspectionResult
from adjgraph.config import ENGINE_CONFIG, EngineConfig
from adjgraph.errors import (
    InvalidPairingError,
    NotConnectedError,
    PairingBudgetExceededError,
)
from adjgraph.graph.weighted_matrix import NodeIndex, WeightedGraph
from adjgraph.logging import get_logger

logger = get_logger(__name__)


def classify(graph: WeightedGraph) -> GraphClass:
    """Return the Eulerian classification of an undirected graph.

    Raises:
        NotUndirectedError: If the weight matrix is not symmetric.
        InvalidPairingError: If the number of odd nodes is odd.
    """
    odd_count = len(graph.odd_nodes())
    if odd_count % 2:
        raise InvalidPairingError(
            f"Found {odd_count} odd-valency nodes; a valid graph has an even count."
        )
    if odd_count == 0:
        return GraphClass.EULERIAN
    if odd_count == 2:
        return GraphClass.SEMI_EULERIAN
    return GraphClass.GENERAL


def pairing_count(node_count: int) -> int:
    """Return the number of distinct pairings of `node_count` nodes.

    Raises:
        InvalidPairingError: If `node_count` is odd.
    """
    if node_count % 2:
        raise InvalidPairingError(f"Cannot pair an odd number of nodes ({node_count}).")
    count = 1
    for factor in range(node_count - 1, 0, -2):
        count *= factor
    return count


def iter_pairings(nodes: Sequence[NodeIndex]) -> Iterator[Pairing]:
    """Lazily yield every distinct pairing of `nodes`.

    Each pairing is a tuple of ``(a, b)`` pairs with ``a < b``. Pairs appear in
    the order of their first node within `nodes`.

    Raises:
        InvalidPairingError: If `nodes` has odd length (raised immediately).

    Example:
        >>> list(iter_pairings([0, 1, 2, 3]))
        [((0, 1), (2, 3)), ((0, 2), (1, 3)), ((0, 3), (1, 2))]
    """
    nodes = tuple(nodes)
    if len(nodes) % 2:
        raise InvalidPairingError(f"Cannot pair an odd number of nodes ({len(nodes)}).")
    return _pairings(nodes)


def _pairings(nodes: Tuple[NodeIndex, ...]) -> Iterator[Pairing]:
    if not nodes:
        yield ()
        return
    pivot, rest = nodes[0], nodes[1:]
    for idx, partner in enumerate(rest):
        pair = (pivot, partner) if pivot < partner else (partner, pivot)
        for tail in _pairings(rest[:idx] + rest[idx + 1 :]):
            yield (pair,) + tail


def pairing_length(pairing: Pairing, tables: AllPairsTables) -> Cost:
    """Return the summed shortest distance over the pairs of `pairing`."""
    return sum(tables.distance(a, b) for a, b in pairing)


def find_best_pairing(
    nodes: Sequence[NodeIndex],
    tables: AllPairsTables,
    config: Optional[EngineConfig] = None,
) -> Tuple[Pairing, Cost]:
    """Find the pairing of `nodes` with the least total distance.

    Ties keep the first pairing generated.

    Args:
        nodes: Even number of nodes to pair.
        tables: All-pairs tables providing the pair distances.
        config: Budget settings; defaults to `ENGINE_CONFIG`.

    Returns:
        Tuple of (best_pairing, its_length).

    Raises:
        InvalidPairingError: If `nodes` has odd length.
        PairingBudgetExceededError: If more pairings exist than
            ``config.max_pairings`` allows.
    """
    config = config or ENGINE_CONFIG
    total = pairing_count(len(nodes))
    if not config.allows_pairings(total):
        raise PairingBudgetExceededError(
            f"{len(nodes)} odd nodes need {total} pairings, budget is {config.max_pairings}."
        )
    logger.debug("Scoring %d pairings of %d nodes", total, len(nodes))

    best_pairing: Pairing = ()
    best_length: Cost = float("inf")
    for pairing in iter_pairings(nodes):
        length = pairing_length(pairing, tables)
        if length < best_length:
            best_pairing, best_length = pairing, length
    return best_pairing, best_length


def inspect_route(
    graph: WeightedGraph,
    tables: Optional[AllPairsTables] = None,
    config: Optional[EngineConfig] = None,
) -> RouteInspectionResult:
    """Solve route inspection and report how the length was obtained.

    Args:
        graph: Undirected, connected graph.
        tables: Precomputed Floyd-Warshall tables for `graph`, used for the
            general case; computed on demand when omitted.
        config: Engine settings; defaults to `ENGINE_CONFIG`.

    Returns:
        Classification, odd nodes, chosen pairing and length breakdown.

    Raises:
        NotUndirectedError: If the weight matrix is not symmetric.
        NotConnectedError: If the graph is not connected.
        InvalidShapeError: If `tables` does not match the graph size.
        PairingBudgetExceededError: If the pairing search exceeds the budget.
    """
    config = config or ENGINE_CONFIG
    graph.require_undirected("Route inspection")
    if not graph.is_connected:
        raise NotConnectedError("Route inspection requires a connected graph.")

    graph_class = classify(graph)
    odd_nodes = tuple(graph.odd_nodes())
    edge_length = graph.total_valency

    if len(odd_nodes) > config.odd_node_warning_threshold:
        logger.warning(
            "Route inspection over %d odd nodes scores %d pairings",
            len(odd_nodes),
            pairing_count(len(odd_nodes)),
        )

    if graph_class is GraphClass.EULERIAN:
        pairing: Pairing = ()
        repeated: Cost = 0.0
    elif graph_class is GraphClass.SEMI_EULERIAN:
        pairing = (odd_nodes,)
        repeated = shortest_path(graph, odd_nodes[0], odd_nodes[1]).cost
    else:
        tables = ensure_tables(graph, tables)
        pairing, repeated = find_best_pairing(odd_nodes, tables, config)

    logger.debug(
        "Route inspection: %s, %d odd nodes, edge length %s, repeated %s",
        graph_class.name,
        len(odd_nodes),
        edge_length,
        repeated,
    )
    return RouteInspectionResult(
        graph_class=graph_class,
        odd_nodes=odd_nodes,
        pairing=pairing,
        edge_length=edge_length,
        repeated_length=repeated,
    )


def shortest_route_length(
    graph: WeightedGraph,
    tables: Optional[AllPairsTables] = None,
    config: Optional[EngineConfig] = None,
) -> Cost:
    """Return the length of the shortest closed walk using every edge.

    See `inspect_route` for arguments and failures.

    Example:
        >>> g = WeightedGraph.from_matrix([[None, 2, None], [2, None, 3], [None, 3, None]])
        >>> shortest_route_length(g)
        10.0
    """
    return inspect_route(graph, tables, config).length
