"""
registry.py - Node Registry / Adjacency Arena
==============================================
Single source of truth for which nodes exist and what they point at.
Both graph classes and every algorithm talk to this object.

Responsibilities:
  1. Label -> identity lookup                 (index_of / get / label_of)
  2. Node lifecycle                           (add / remove, with cascade)
  3. Slot bookkeeping                         (tombstones + free list)

Design decisions:
  - Nodes live in a dense list of slots. Removing a node writes a `None`
    tombstone into its slot and pushes the index onto a free list; the
    next `add` reuses it.
  - A label -> index dict, kept in label insertion order, gives O(1)
    lookup and a deterministic iteration order for whole-graph passes.
  - Each Node owns its own adjacency list, so "every registered node has
    exactly one adjacency entry" holds by construction.
"""

import itertools
import logging
from typing import Dict, Hashable, Iterator, List, Optional

from adjgraph.errors import DuplicateNodeError, UnknownNodeError
from adjgraph.graph.node import Node

logger = logging.getLogger(__name__)


class NodeRegistry:
    """
    Attributes:
        _slots     : [Node | None] - the arena, None marks a free slot
        _index     : {label: slot index}
        _free      : indices of tombstoned slots, reused LIFO
        _edge_keys : counter handing out logical edge ids
    """

    def __init__(self):
        self._slots: List[Optional[Node]] = []
        self._index: Dict[Hashable, int]  = {}
        self._free:  List[int]            = []
        self._edge_keys = itertools.count()

    # ==================================================================
    # LOOKUP
    # ==================================================================
    def index_of(self, label: Hashable) -> int:
        try:
            return self._index[label]
        except KeyError:
            raise UnknownNodeError(f"Unknown node: {label!r}", label=label) from None

    def get(self, label: Hashable) -> Node:
        return self._slots[self.index_of(label)]

    def node_at(self, index: int) -> Node:
        node = self._slots[index]
        if node is None:
            raise IndexError(f"Slot {index} is free")
        return node

    def label_of(self, index: int) -> Hashable:
        return self.node_at(index).label

    @property
    def capacity(self) -> int:
        """Number of slots, live or free. State arrays are sized to this."""
        return len(self._slots)

    def labels(self) -> List[Hashable]:
        return list(self._index)

    def edge_count(self) -> int:
        """Total adjacency entries (mirrored undirected edges count twice)."""
        return sum(len(node.edges) for node in self)

    def new_edge_key(self) -> int:
        return next(self._edge_keys)

    # ==================================================================
    # LIFECYCLE
    # ==================================================================
    def add(self, label: Hashable) -> Node:
        if label in self._index:
            raise DuplicateNodeError(f"Node already exists: {label!r}", label=label)

        if self._free:
            index = self._free.pop()
            node = Node(index, label)
            self._slots[index] = node
        else:
            index = len(self._slots)
            node = Node(index, label)
            self._slots.append(node)
        self._index[label] = index
        logger.debug(f"Added node {label!r} at slot {index}")
        return node

    def remove(self, label: Hashable) -> Node:
        """Remove a node and every edge, in any list, that points at it."""
        index = self.index_of(label)
        removed = self._slots[index]

        purged = 0
        for node in self:
            if node.index == index:
                continue
            before = len(node.edges)
            node.edges[:] = [e for e in node.edges if e.target != index]
            purged += before - len(node.edges)

        self._slots[index] = None
        self._free.append(index)
        del self._index[label]
        logger.debug(
            f"Removed node {label!r} from slot {index} "
            f"({len(removed.edges)} own edges, {purged} incoming edges purged)"
        )
        return removed

    def clear(self) -> None:
        self._slots.clear()
        self._index.clear()
        self._free.clear()

    # ==================================================================
    # DUNDER
    # ==================================================================
    def __contains__(self, label) -> bool:
        try:
            return label in self._index
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[Node]:
        """Live nodes in label insertion order."""
        for index in list(self._index.values()):
            yield self._slots[index]

    def __repr__(self) -> str:
        return f"NodeRegistry(nodes={len(self)}, slots={self.capacity}, free={len(self._free)})"
