"""
topological.py - Topological Sort
=================================
Post-order DFS from every unvisited node (label insertion order). A node
is pushed onto the output stack only after all of its descendants are
done; reversing the stack gives an order where every edge u -> v has u
before v.

The sort colours nodes UNVISITED / IN_PROGRESS / DONE while it walks, so
it detects cycles itself: an edge into an IN_PROGRESS node is a back-edge
and raises CycleError. Callers do not need to call has_cycle first.
"""

import logging
from typing import Hashable, List

from adjgraph.errors import CycleError
from adjgraph.graph.node import NodeState
from adjgraph.graph.registry import NodeRegistry

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def TopologicalSort(graph):",                  # 0
    "    stack ← []",                               # 1
    "    for node in V:",                           # 2
    "        if node unvisited: visit(node)",       # 3
    "    return reversed(stack)",                   # 4
    "def visit(node):",                             # 5
    "    mark node IN_PROGRESS",                    # 6
    "    for neighbour in adj(node):",              # 7
    "        if neighbour IN_PROGRESS: raise Cycle",  # 8
    "        if neighbour unvisited: visit(neighbour)",  # 9
    "    mark node DONE",                           # 10
    "    stack.push(node)",                         # 11
]


def _cycle(registry: NodeRegistry, index: int) -> CycleError:
    label = registry.label_of(index)
    logger.warning(f"Topological sort aborted: back-edge into {label!r}")
    return CycleError(f"Graph has a cycle through {label!r}", label=label)


# ---------------------------------------------------------------------------
# Recursive
# ---------------------------------------------------------------------------
def topological_sort_recursive(registry: NodeRegistry) -> List[Hashable]:
    state = [NodeState.UNVISITED] * registry.capacity
    stack: List[Hashable] = []

    def visit(index: int) -> None:
        state[index] = NodeState.IN_PROGRESS
        node = registry.node_at(index)
        for edge in node.edges:
            if state[edge.target] is NodeState.IN_PROGRESS:
                raise _cycle(registry, edge.target)
            if state[edge.target] is NodeState.UNVISITED:
                visit(edge.target)
        state[index] = NodeState.DONE
        stack.append(node.label)

    for node in registry:
        if state[node.index] is NodeState.UNVISITED:
            visit(node.index)

    stack.reverse()
    logger.debug(f"Topological order of {len(stack)} node(s) computed recursively")
    return stack


# ---------------------------------------------------------------------------
# Iterative
# ---------------------------------------------------------------------------
def topological_sort_iterative(registry: NodeRegistry) -> List[Hashable]:
    state = [NodeState.UNVISITED] * registry.capacity
    stack: List[Hashable] = []

    for root in registry:
        if state[root.index] is not NodeState.UNVISITED:
            continue

        state[root.index] = NodeState.IN_PROGRESS
        frames = [(root, iter(root.edges))]
        while frames:
            node, edges = frames[-1]
            for edge in edges:
                if state[edge.target] is NodeState.IN_PROGRESS:
                    raise _cycle(registry, edge.target)
                if state[edge.target] is NodeState.UNVISITED:
                    state[edge.target] = NodeState.IN_PROGRESS
                    child = registry.node_at(edge.target)
                    frames.append((child, iter(child.edges)))
                    break
            else:
                frames.pop()
                state[node.index] = NodeState.DONE
                stack.append(node.label)

    stack.reverse()
    logger.debug(f"Topological order of {len(stack)} node(s) computed iteratively")
    return stack
