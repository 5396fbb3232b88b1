"""
directed.py - Directed Unweighted Graph
=======================================
Adjacency-list digraph with traversal, topological ordering and cycle
detection.

Parallel edges are allowed: adding (u, v) twice stores two entries, and
`remove_edge(u, v)` takes out only the first one.
"""

import logging
from typing import Hashable, List, Optional, Tuple

from adjgraph.algorithms import require_algorithm
from adjgraph.graph.base import BaseGraph
from adjgraph.graph.edge import Edge

logger = logging.getLogger(__name__)


class DirectedGraph(BaseGraph):

    # ==================================================================
    # EDGES
    # ==================================================================
    def add_edge(self, source: Hashable, target: Hashable) -> None:
        src = self._registry.index_of(source)
        dst = self._registry.index_of(target)
        self._registry.node_at(src).edges.append(
            Edge(src, dst, key=self._registry.new_edge_key())
        )
        logger.debug(f"Added edge {source!r} -> {target!r}")

    def remove_edge(self, source: Hashable, target: Hashable) -> None:
        """Remove the first `source -> target` entry; no-op if there is none."""
        src = self._registry.index_of(source)
        dst = self._registry.index_of(target)
        edges = self._registry.node_at(src).edges
        for i, edge in enumerate(edges):
            if edge.target == dst:
                del edges[i]
                logger.debug(f"Removed edge {source!r} -> {target!r}")
                return

    def neighbours(self, label: Hashable) -> List[Hashable]:
        """Targets of `label`'s outgoing edges, in insertion order."""
        return [self._registry.label_of(e.target) for e in self._registry.get(label).edges]

    def edges(self) -> List[Tuple[Hashable, Hashable]]:
        return [
            (node.label, self._registry.label_of(e.target))
            for node in self._registry
            for e in node.edges
        ]

    # ==================================================================
    # TRAVERSAL
    # ==================================================================
    def dfs(self, root: Hashable, strategy: Optional[str] = None) -> List[Hashable]:
        return self._run("dfs", strategy, root)

    def dfs_recursive(self, root: Hashable) -> List[Hashable]:
        return self.dfs(root, strategy="recursive")

    def dfs_iterative(self, root: Hashable) -> List[Hashable]:
        return self.dfs(root, strategy="iterative")

    def bfs(self, root: Hashable) -> List[Hashable]:
        return require_algorithm("bfs").fn(self._registry, root)

    # ==================================================================
    # ORDERING / CYCLES
    # ==================================================================
    def topological_sort(self, strategy: Optional[str] = None) -> List[Hashable]:
        """Every edge u -> v has u before v. Raises CycleError if impossible."""
        return self._run("topological_sort", strategy)

    def has_cycle(self, strategy: Optional[str] = None) -> bool:
        return self._run("has_cycle_directed", strategy)
