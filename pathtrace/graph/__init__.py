"""
Graph module.

Provides the graph store and random graph generation:
- Graph: Nodes plus an edge arena with per-node adjacency lists
- create_random_graph: Connected random graph at a target density
"""

from pathtrace.graph.generator import create_random_graph
from pathtrace.graph.store import Edge, Graph, Node, edge_id_for

__all__ = [
    "Graph",
    "Node",
    "Edge",
    "edge_id_for",
    "create_random_graph",
]
