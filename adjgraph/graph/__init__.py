"""
graph/
------
Core data layer.  Public API:

    from adjgraph.graph import DirectedGraph, WeightedGraph
    from adjgraph.graph import Path, build_path
    from adjgraph.graph import Node, NodeState, Edge, NodeRegistry
"""

from adjgraph.graph.edge     import Edge
from adjgraph.graph.node     import Node, NodeState
from adjgraph.graph.registry import NodeRegistry
from adjgraph.graph.path     import Path, build_path
from adjgraph.graph.directed import DirectedGraph
from adjgraph.graph.weighted import WeightedGraph

__all__ = [
    "Edge",
    "Node",          "NodeState",
    "NodeRegistry",
    "Path",          "build_path",
    "DirectedGraph", "WeightedGraph",
]
