"""
cycles.py - Cycle Detection
===========================
Directed graphs: three-state colouring. A cycle exists iff the walk meets
an edge into a node that is still IN_PROGRESS (a back-edge).

Undirected graphs: every visited node remembers the logical edge it was
reached through. Meeting an already visited node over any other edge means
there is a second route to it, i.e. a cycle. Tracking the parent *edge*
rather than the parent node makes parallel edges and self-loops count as
cycles, as they should in a multigraph.

Both families come in recursive and explicit-stack iterative flavours.
"""

import logging
from typing import List, Optional

from adjgraph.graph.node import NodeState
from adjgraph.graph.registry import NodeRegistry

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE_DIRECTED: List[str] = [
    "def HasCycle(graph):",                         # 0
    "    for node in V:",                           # 1
    "        if node unvisited and visit(node):",   # 2
    "            return True",                      # 3
    "    return False",                             # 4
    "def visit(node):",                             # 5
    "    mark node IN_PROGRESS",                    # 6
    "    for neighbour in adj(node):",              # 7
    "        if neighbour IN_PROGRESS: return True",  # 8
    "        if neighbour unvisited and visit(neighbour):",  # 9
    "            return True",                      # 10
    "    mark node DONE",                           # 11
    "    return False",                             # 12
]

PSEUDOCODE_UNDIRECTED: List[str] = [
    "def HasCycle(graph):",                         # 0
    "    for node in V:",                           # 1
    "        if node unvisited and visit(node, None):",  # 2
    "            return True",                      # 3
    "    return False",                             # 4
    "def visit(node, parent_edge):",                # 5
    "    visited.add(node)",                        # 6
    "    for edge in adj(node):",                   # 7
    "        if edge == parent_edge: continue",     # 8
    "        if edge.to in visited: return True",   # 9
    "        if visit(edge.to, edge): return True", # 10
    "    return False",                             # 11
]


# ===========================================================================
# DIRECTED
# ===========================================================================
def has_cycle_directed_recursive(registry: NodeRegistry) -> bool:
    state = [NodeState.UNVISITED] * registry.capacity

    def visit(index: int) -> bool:
        state[index] = NodeState.IN_PROGRESS
        for edge in registry.node_at(index).edges:
            if state[edge.target] is NodeState.IN_PROGRESS:
                logger.debug(f"Back-edge into {registry.label_of(edge.target)!r}")
                return True
            if state[edge.target] is NodeState.UNVISITED and visit(edge.target):
                return True
        state[index] = NodeState.DONE
        return False

    return any(
        visit(node.index)
        for node in registry
        if state[node.index] is NodeState.UNVISITED
    )


def has_cycle_directed_iterative(registry: NodeRegistry) -> bool:
    state = [NodeState.UNVISITED] * registry.capacity

    for root in registry:
        if state[root.index] is not NodeState.UNVISITED:
            continue

        state[root.index] = NodeState.IN_PROGRESS
        frames = [(root.index, iter(root.edges))]
        while frames:
            index, edges = frames[-1]
            for edge in edges:
                if state[edge.target] is NodeState.IN_PROGRESS:
                    logger.debug(f"Back-edge into {registry.label_of(edge.target)!r}")
                    return True
                if state[edge.target] is NodeState.UNVISITED:
                    state[edge.target] = NodeState.IN_PROGRESS
                    frames.append((edge.target, iter(registry.node_at(edge.target).edges)))
                    break
            else:
                frames.pop()
                state[index] = NodeState.DONE
    return False


# ===========================================================================
# UNDIRECTED
# ===========================================================================
def has_cycle_undirected_recursive(registry: NodeRegistry) -> bool:
    state = [NodeState.UNVISITED] * registry.capacity

    def visit(index: int, parent_key: Optional[int]) -> bool:
        state[index] = NodeState.IN_PROGRESS
        for edge in registry.node_at(index).edges:
            if edge.key == parent_key:
                continue
            if state[edge.target] is not NodeState.UNVISITED:
                logger.debug(f"Second route into {registry.label_of(edge.target)!r}")
                return True
            if visit(edge.target, edge.key):
                return True
        state[index] = NodeState.DONE
        return False

    return any(
        visit(node.index, None)
        for node in registry
        if state[node.index] is NodeState.UNVISITED
    )


def has_cycle_undirected_iterative(registry: NodeRegistry) -> bool:
    state = [NodeState.UNVISITED] * registry.capacity

    for root in registry:
        if state[root.index] is not NodeState.UNVISITED:
            continue

        state[root.index] = NodeState.IN_PROGRESS
        frames = [(root.index, None, iter(root.edges))]
        while frames:
            index, parent_key, edges = frames[-1]
            for edge in edges:
                if edge.key == parent_key:
                    continue
                if state[edge.target] is not NodeState.UNVISITED:
                    logger.debug(f"Second route into {registry.label_of(edge.target)!r}")
                    return True
                state[edge.target] = NodeState.IN_PROGRESS
                frames.append((edge.target, edge.key, iter(registry.node_at(edge.target).edges)))
                break
            else:
                frames.pop()
                state[index] = NodeState.DONE
    return False
