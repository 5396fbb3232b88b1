"""
base.py - Shared graph surface
==============================
Node-side bookkeeping and strategy dispatch common to DirectedGraph and
WeightedGraph. Subclasses add their own edge semantics.
"""

from typing import Hashable, List, Optional

from adjgraph.algorithms import require_algorithm
from adjgraph.config import get_config
from adjgraph.graph.registry import NodeRegistry


class BaseGraph:
    """
    Attributes:
        _registry : NodeRegistry owning every node and its adjacency list.
    """

    def __init__(self):
        self._registry = NodeRegistry()

    # ==================================================================
    # NODES
    # ==================================================================
    def add_node(self, label: Hashable) -> None:
        self._registry.add(label)

    def remove_node(self, label: Hashable) -> None:
        """Remove `label` and every edge referencing it, from every list."""
        self._registry.remove(label)

    def has_edge(self, source: Hashable, target: Hashable) -> bool:
        if source not in self._registry or target not in self._registry:
            return False
        dst = self._registry.index_of(target)
        return bool(self._registry.get(source).edges_to(dst))

    def nodes(self) -> List[Hashable]:
        return self._registry.labels()

    def degree(self, label: Hashable) -> int:
        return len(self._registry.get(label).edges)

    def edge_count(self) -> int:
        """Adjacency entries across all nodes."""
        return self._registry.edge_count()

    def is_empty(self) -> bool:
        return not len(self._registry)

    def clear(self) -> None:
        self._registry.clear()

    # ==================================================================
    # STRATEGY DISPATCH
    # ==================================================================
    def _run(self, family: str, strategy: Optional[str], *args):
        strategy = strategy or get_config().traversal.strategy
        info = require_algorithm(f"{family}_{strategy}")
        return info.fn(self._registry, *args)

    # ==================================================================
    # DUNDER
    # ==================================================================
    def __contains__(self, label) -> bool:
        return label in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={len(self)}, edges={self.edge_count()})"
