"""
node.py - Graph Node
====================
A slot in the node arena. Owns its label and its adjacency list, so the
registry and the adjacency store can never drift apart.

Design decisions:
  - `index` is the node identity: the slot the node occupies in the
    registry arena. It never changes while the node is alive.
  - `edges` holds Edge records whose endpoints are slot indices, not Node
    references, so removing a node never leaves a dangling reference.
"""

from enum import Enum
from typing import Hashable, List

from adjgraph.graph.edge import Edge


# ---------------------------------------------------------------------------
# Node State Enum - per-traversal colouring
# ---------------------------------------------------------------------------
class NodeState(Enum):
    UNVISITED   = "unvisited"     # not reached yet
    IN_PROGRESS = "in_progress"   # on the current recursion / stack path
    DONE        = "done"          # fully explored


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Attributes:
        index : Slot index in the registry arena (the node identity).
        label : Unique external key.
        edges : Outgoing (directed) or mirrored (undirected) edges,
                insertion order preserved.
    """

    __slots__ = ("index", "label", "edges")

    def __init__(self, index: int, label: Hashable):
        self.index: int        = index
        self.label: Hashable   = label
        self.edges: List[Edge] = []

    def edges_to(self, target: int) -> List[Edge]:
        """Every edge in this node's list that points at `target`."""
        return [e for e in self.edges if e.target == target]

    def __repr__(self) -> str:
        return f"Node(index={self.index}, label={self.label!r}, degree={len(self.edges)})"
