"""Base aliases, constants and enums for graph algorithms."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Tuple, Union

from adjgraph.graph.weighted_matrix import NodeIndex

#: Represents numeric cost in the graph (e.g. distance, length, etc.).
Cost = Union[int, float]

#: Distance reported for node pairs with no connecting path.
UNREACHABLE: float = math.inf

#: Unordered pair of nodes, stored with the smaller index first.
Pair = Tuple[NodeIndex, NodeIndex]

#: Disjoint pairs covering a node set.
Pairing = Tuple[Pair, ...]

#: Spanning-tree edge as ``(node_in_tree, node_joined)``.
TreeEdge = Tuple[NodeIndex, NodeIndex]


class GraphClass(IntEnum):
    """Eulerian classification of an undirected graph."""

    #: Every node has even valency; an Eulerian circuit exists.
    EULERIAN = 1
    #: Exactly two nodes have odd valency.
    SEMI_EULERIAN = 2
    #: More than two nodes have odd valency.
    GENERAL = 3
