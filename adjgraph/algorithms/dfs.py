"""
dfs.py - Depth-First Search
===========================
Two DFS variants that visit nodes in exactly the same order:

  - `dfs_recursive` follows the textbook recursion.
  - `dfs_iterative` replaces the call stack with an explicit stack of
    (node, edge-iterator) frames, so it never hits Python's recursion
    limit on long chains.

Neighbours are explored in adjacency-list insertion order. Each reachable
node is reported once, when it is first entered (pre-order).
"""

import logging
from typing import Hashable, List

from adjgraph.errors import EmptyGraphError
from adjgraph.graph.registry import NodeRegistry

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS(graph, node, visited):",           # 0
    "    visited.add(node)",                    # 1
    "    report(node)",                         # 2
    "    for neighbour in adj(node):",          # 3
    "        if neighbour not in visited:",     # 4
    "            DFS(graph, neighbour, visited)",  # 5
]


def _require_root(registry: NodeRegistry, root: Hashable) -> int:
    if not len(registry):
        raise EmptyGraphError("Cannot traverse an empty graph")
    return registry.index_of(root)


# ---------------------------------------------------------------------------
# Recursive
# ---------------------------------------------------------------------------
def dfs_recursive(registry: NodeRegistry, root: Hashable) -> List[Hashable]:
    start   = _require_root(registry, root)
    visited = [False] * registry.capacity
    order: List[Hashable] = []

    def visit(index: int) -> None:
        visited[index] = True
        node = registry.node_at(index)
        order.append(node.label)
        for edge in node.edges:
            if not visited[edge.target]:
                visit(edge.target)

    visit(start)
    logger.debug(f"Recursive DFS from {root!r} reached {len(order)} node(s)")
    return order


# ---------------------------------------------------------------------------
# Iterative
# ---------------------------------------------------------------------------
def dfs_iterative(registry: NodeRegistry, root: Hashable) -> List[Hashable]:
    """
    Each stack frame keeps the live iterator over its node's edges, so
    resuming a frame continues exactly where the recursive version would
    return to.
    """
    start   = _require_root(registry, root)
    visited = [False] * registry.capacity
    order: List[Hashable] = []

    visited[start] = True
    order.append(registry.label_of(start))
    stack = [iter(registry.node_at(start).edges)]

    while stack:
        for edge in stack[-1]:
            if not visited[edge.target]:
                visited[edge.target] = True
                child = registry.node_at(edge.target)
                order.append(child.label)
                stack.append(iter(child.edges))
                break
        else:
            stack.pop()

    logger.debug(f"Iterative DFS from {root!r} reached {len(order)} node(s)")
    return order
