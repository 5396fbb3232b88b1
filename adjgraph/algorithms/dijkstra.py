"""
dijkstra.py - Dijkstra's Shortest-Path Algorithm
================================================
Single-source shortest path over non-negative weights using a min-heap
(heapq).

  1. dist = inf for every node, dist[source] = 0
  2. Pop the unsettled node with the smallest distance
  3. Relax each incident edge: if dist[u] + w < dist[v], update dist[v],
     set previous[v] = u and push v again
  4. Stop as soon as the target is settled, or the heap runs dry

Heap entries are (distance, sequence, index). The sequence number breaks
distance ties by insertion order, and stale entries for settled nodes are
skipped when popped.

Correctness note: Dijkstra requires non-negative weights. WeightedGraph
rejects negative weights at insertion time, so nothing is checked here.
"""

import heapq
import itertools
import logging
from typing import Dict, Hashable, List, Optional, Tuple

from adjgraph.errors import EmptyGraphError, NoPathError
from adjgraph.graph.path import Path, build_path
from adjgraph.graph.registry import NodeRegistry

logger = logging.getLogger(__name__)

INF = float("inf")


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source, target):",        # 0
    "    dist ← {v: ∞ for v in V}",                # 1
    "    dist[source] ← 0",                        # 2
    "    pq ← [(0, source)]",                      # 3
    "    previous ← {source: None}",               # 4
    "    while pq is not empty:",                  # 5
    "        (d, node) ← pq.pop_min()",            # 6
    "        if node settled: continue",           # 7
    "        settle(node)",                        # 8
    "        if node == target: break",            # 9
    "        for (neighbour, w) in adj(node):",    # 10
    "            new_dist ← dist[node] + w",       # 11
    "            if new_dist < dist[neighbour]:",  # 12
    "                dist[neighbour] ← new_dist",  # 13
    "                previous[neighbour] ← node",  # 14
    "                pq.push((new_dist, nbr))",    # 15
    "    if dist[target] = ∞: raise NoPath",       # 16
    "    return build_path(target, previous)",     # 17
]


def dijkstra(registry: NodeRegistry, source: Hashable, target: Hashable) -> Path:
    if not len(registry):
        raise EmptyGraphError("Cannot search an empty graph")
    src = registry.index_of(source)
    dst = registry.index_of(target)

    dist:     List[float]              = [INF] * registry.capacity
    settled:  List[bool]               = [False] * registry.capacity
    previous: Dict[int, Optional[int]] = {src: None}
    dist[src] = 0

    sequence = itertools.count()
    pq: List[Tuple[float, int, int]] = [(0, next(sequence), src)]

    while pq:
        d, _, index = heapq.heappop(pq)
        if settled[index]:
            continue
        settled[index] = True
        if index == dst:
            break

        for edge in registry.node_at(index).edges:
            if settled[edge.target]:
                continue
            new_dist = d + edge.weight
            if new_dist < dist[edge.target]:
                dist[edge.target]     = new_dist
                previous[edge.target] = index
                heapq.heappush(pq, (new_dist, next(sequence), edge.target))

    if dist[dst] == INF:
        logger.debug(f"No path from {source!r} to {target!r}")
        raise NoPathError(
            f"No path from {source!r} to {target!r}", source=source, target=target
        )

    path = Path(
        nodes=tuple(registry.label_of(i) for i in build_path(dst, previous)),
        distance=dist[dst],
    )
    logger.debug(f"Shortest path {path}")
    return path
