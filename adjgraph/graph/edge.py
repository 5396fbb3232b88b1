"""
edge.py - Graph Edge
====================
One adjacency-list entry.

Design decisions:
  - `source` and `target` are slot indices, NOT Node references.
  - Weight defaults to 1 for the unweighted directed graph; algorithms
    that ignore weights simply never read it.
  - `key` identifies the logical edge. An undirected edge is stored as two
    mirrored entries sharing one key, which is how cycle detection tells
    "the edge I came in on" apart from a parallel edge.
"""

from typing import Union

Weight = Union[int, float]


class Edge:
    """
    Attributes:
        source : Slot index of the tail node.
        target : Slot index of the head node.
        weight : Non-negative cost (default 1).
        key    : Logical edge id, shared by mirrored entries.
    """

    __slots__ = ("source", "target", "weight", "key")

    def __init__(self, source: int, target: int, weight: Weight = 1, key: int = 0):
        self.source: int    = source
        self.target: int    = target
        self.weight: Weight = weight
        self.key: int       = key

    def mirrored(self) -> "Edge":
        """The twin entry stored in the target's list for undirected edges."""
        return Edge(self.target, self.source, self.weight, self.key)

    def __repr__(self) -> str:
        return f"Edge({self.source} -> {self.target}, w={self.weight}, key={self.key})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Edge)
            and self.source == other.source
            and self.target == other.target
            and self.weight == other.weight
            and self.key == other.key
        )

    def __hash__(self) -> int:
        return hash((self.source, self.target, self.weight, self.key))
