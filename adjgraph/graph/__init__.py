"""Graph primitives and helpers.

This package provides the dense adjacency-matrix graph type `WeightedGraph`
and the `convert` helper module for NetworkX interoperability.
"""

from adjgraph.graph.weighted_matrix import NodeIndex, WeightedGraph, from_edges

__all__ = ["NodeIndex", "WeightedGraph", "from_edges"]
