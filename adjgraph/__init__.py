"""
adjgraph
--------
In-memory directed and weighted undirected graphs.

    from adjgraph import DirectedGraph, WeightedGraph

    g = WeightedGraph()
    for label in "ABC":
        g.add_node(label)
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 2)
    g.get_shortest_distance("A", "C")   # Path(nodes=('A', 'B', 'C'), distance=3)
"""

from adjgraph.errors import (
    CycleError,
    DuplicateNodeError,
    EmptyGraphError,
    GraphError,
    InvalidWeightError,
    NoPathError,
    UnknownAlgorithmError,
    UnknownNodeError,
)
from adjgraph.graph import DirectedGraph, Path, WeightedGraph, build_path

__version__ = "0.1.0"

__all__ = [
    "DirectedGraph",
    "WeightedGraph",
    "Path",
    "build_path",
    "GraphError",
    "DuplicateNodeError",
    "UnknownNodeError",
    "InvalidWeightError",
    "CycleError",
    "NoPathError",
    "EmptyGraphError",
    "UnknownAlgorithmError",
]
