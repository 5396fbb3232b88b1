"""
weighted.py - Weighted Undirected Graph
=======================================
Every undirected edge is stored as two mirrored entries (u -> v and
v -> u) sharing one weight and one logical key. Both entries are written
after all validation has passed, so a failed `add_edge` never leaves one
direction behind without the other.

Weights must be finite and non-negative because `get_shortest_distance`
runs Dijkstra.
"""

import logging
import math
import numbers
from typing import Hashable, List, Mapping, Optional, Tuple

from adjgraph.algorithms import require_algorithm
from adjgraph.errors import InvalidWeightError
from adjgraph.graph.base import BaseGraph
from adjgraph.graph.edge import Edge, Weight
from adjgraph.graph.path import Path, build_path

logger = logging.getLogger(__name__)


def _check_weight(weight) -> None:
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise InvalidWeightError(f"Weight must be a real number, got {weight!r}", weight=weight)
    if not math.isfinite(weight) or weight < 0:
        raise InvalidWeightError(
            f"Weight must be finite and non-negative, got {weight!r}", weight=weight
        )


class WeightedGraph(BaseGraph):

    # ==================================================================
    # EDGES
    # ==================================================================
    def add_edge(self, source: Hashable, target: Hashable, weight: Weight) -> None:
        _check_weight(weight)
        src = self._registry.index_of(source)
        dst = self._registry.index_of(target)

        forward = Edge(src, dst, weight, key=self._registry.new_edge_key())
        self._registry.node_at(src).edges.append(forward)
        self._registry.node_at(dst).edges.append(forward.mirrored())
        logger.debug(f"Added edge {source!r} <-> {target!r} (w={weight})")

    def remove_edge(self, source: Hashable, target: Hashable) -> None:
        """Remove the first `source - target` edge and its mirror; no-op if absent."""
        src = self._registry.index_of(source)
        dst = self._registry.index_of(target)

        forward = self._registry.node_at(src).edges
        for i, edge in enumerate(forward):
            if edge.target == dst:
                key = edge.key
                del forward[i]
                break
        else:
            return

        backward = self._registry.node_at(dst).edges
        backward[:] = [e for e in backward if e.key != key]
        logger.debug(f"Removed edge {source!r} <-> {target!r}")

    def neighbours(self, label: Hashable) -> List[Tuple[Hashable, Weight]]:
        """(neighbour, weight) pairs for every edge incident to `label`."""
        return [
            (self._registry.label_of(e.target), e.weight)
            for e in self._registry.get(label).edges
        ]

    def edges(self) -> List[Tuple[Hashable, Hashable, Weight]]:
        """Each logical edge once, oriented the way it was added."""
        seen = set()
        result = []
        for node in self._registry:
            for e in node.edges:
                if e.key in seen:
                    continue
                seen.add(e.key)
                result.append((node.label, self._registry.label_of(e.target), e.weight))
        return result

    def edge_count(self) -> int:
        """Logical edges; each is stored as two mirrored entries."""
        return super().edge_count() // 2

    # ==================================================================
    # SHORTEST PATH
    # ==================================================================
    def get_shortest_distance(self, source: Hashable, target: Hashable) -> Path:
        """
        Dijkstra from `source`, stopping once `target` is settled.

        Returns:
            Path - labels from source to target plus the total weight.

        Raises:
            UnknownNodeError - either label is absent.
            NoPathError      - target is unreachable from source.
            EmptyGraphError  - the graph has no nodes.
        """
        return require_algorithm("dijkstra").fn(self._registry, source, target)

    @staticmethod
    def build_path(to: Hashable, previous: Mapping[Hashable, Optional[Hashable]]) -> List[Hashable]:
        return build_path(to, previous)

    # ==================================================================
    # CYCLES
    # ==================================================================
    def has_cycle(self, strategy: Optional[str] = None) -> bool:
        return self._run("has_cycle_undirected", strategy)
