"""
bfs.py - Breadth-First Search
=============================
FIFO frontier, mark-on-enqueue. Nodes come out in non-decreasing hop
count from the root; within one layer, in adjacency-list insertion order.
"""

import logging
from collections import deque
from typing import Hashable, List

from adjgraph.errors import EmptyGraphError
from adjgraph.graph.registry import NodeRegistry

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, root):",                    # 0
    "    queue ← [root]",                       # 1
    "    visited ← {root}",                     # 2
    "    while queue is not empty:",            # 3
    "        node ← queue.dequeue()",           # 4
    "        report(node)",                     # 5
    "        for neighbour in adj(node):",      # 6
    "            if neighbour not in visited:", # 7
    "                visited.add(neighbour)",   # 8
    "                queue.enqueue(neighbour)", # 9
]


def bfs(registry: NodeRegistry, root: Hashable) -> List[Hashable]:
    if not len(registry):
        raise EmptyGraphError("Cannot traverse an empty graph")
    start = registry.index_of(root)

    visited = [False] * registry.capacity
    visited[start] = True
    queue = deque([start])
    order: List[Hashable] = []

    while queue:
        node = registry.node_at(queue.popleft())
        order.append(node.label)
        for edge in node.edges:
            if not visited[edge.target]:
                visited[edge.target] = True
                queue.append(edge.target)

    logger.debug(f"BFS from {root!r} reached {len(order)} node(s)")
    return order
