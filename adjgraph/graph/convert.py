"""NetworkX graph conversion utilities.

Converts between `WeightedGraph` and NetworkX ``Graph``/``DiGraph`` objects.
Node names (any hashable) are mapped to contiguous matrix indices through a
`NodeMap`, which is also used to restore the names on the way back.

Example:
    >>> import networkx as nx
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", weight=2.0)
    >>> G.add_edge("B", "C", weight=3.0)
    >>> graph, node_map = from_networkx(G)
    >>> graph[node_map.to_index["A"], node_map.to_index["B"]]
    2.0
    >>> sorted(to_networkx(graph, node_map).edges(data="weight"))
    [('A', 'B', 2.0), ('B', 'C', 3.0)]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Tuple, Union

import networkx as nx

from adjgraph.errors import InvalidShapeError
from adjgraph.graph.weighted_matrix import NodeIndex, WeightedGraph

NxGraph = Union[nx.Graph, nx.DiGraph]


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and matrix indices.

    Attributes:
        to_index: Maps original node names to matrix indices.
        to_name: Maps matrix indices back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, NodeIndex] = field(default_factory=dict)
    to_name: Dict[NodeIndex, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> NodeMap:
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, indices: List[NodeIndex]) -> List[Hashable]:
        """Translate a sequence of indices (e.g. a path) to node names."""
        return [self.to_name[i] for i in indices]

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: float = 1.0,
    nodelist: Optional[List[Hashable]] = None,
) -> Tuple[WeightedGraph, NodeMap]:
    """Convert a NetworkX graph to a `WeightedGraph`.

    Undirected input produces a symmetric matrix; directed input sets only
    the given direction of each edge.

    Args:
        G: NetworkX ``Graph`` or ``DiGraph``. Multigraphs are rejected.
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.
        nodelist: Optional explicit node order. Defaults to nodes sorted by
            their string form for deterministic indices.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If `G` is not a supported NetworkX graph.
        InvalidShapeError: If the graph has no nodes, or `nodelist` does not
            list exactly the nodes of `G`.
    """
    if isinstance(G, (nx.MultiGraph, nx.MultiDiGraph)) or not isinstance(
        G, (nx.Graph, nx.DiGraph)
    ):
        raise TypeError(
            f"Expected NetworkX Graph or DiGraph, got {type(G).__name__}"
        )

    if G.number_of_nodes() == 0:
        raise InvalidShapeError("Graph has no nodes")

    if nodelist is None:
        names = sorted(G.nodes(), key=str)
    else:
        names = list(nodelist)
        if len(set(names)) != len(names) or set(names) != set(G.nodes()):
            raise InvalidShapeError("nodelist must contain each graph node exactly once")

    node_map = NodeMap.from_names(names)
    graph = WeightedGraph(len(names))

    for u, v, data in G.edges(data=True):
        weight = data.get(weight_attr, default_weight)
        src_idx = node_map.to_index[u]
        dst_idx = node_map.to_index[v]
        if G.is_directed():
            graph.set_edge(src_idx, dst_idx, weight)
        else:
            graph.set_edge_undirected(src_idx, dst_idx, weight)

    return graph, node_map


def to_networkx(
    graph: WeightedGraph,
    node_map: Optional[NodeMap] = None,
    *,
    weight_attr: str = "weight",
) -> NxGraph:
    """Convert a `WeightedGraph` to NetworkX.

    Symmetric matrices become an ``nx.Graph``; anything else an ``nx.DiGraph``.
    If a NodeMap is provided, original node names are restored; otherwise
    nodes are labeled with their matrix indices.

    Args:
        graph: Graph to convert.
        node_map: Optional NodeMap restoring original node names.
        weight_attr: Edge attribute name for the weight.

    Returns:
        NetworkX graph with one edge per matrix entry (per symmetric pair for
        undirected graphs).
    """
    undirected = graph.is_undirected
    G: NxGraph = nx.Graph() if undirected else nx.DiGraph()

    def name(idx: NodeIndex) -> Hashable:
        return idx if node_map is None else node_map.to_name.get(idx, idx)

    G.add_nodes_from(name(idx) for idx in graph.nodes())
    for u, v, weight in graph.edges():
        if undirected and v < u:
            continue
        G.add_edge(name(u), name(v), **{weight_attr: weight})

    return G
