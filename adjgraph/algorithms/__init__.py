"""
algorithms/__init__.py - Algorithm Registry
===========================================
Single source of truth for every algorithm the graphs know about.

    from adjgraph.algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "dfs_iterative": AlgoInfo(key, label, fn, pseudocode, tags, ...),
        ...
    }

Every algorithm takes a NodeRegistry as its first argument. The graph
classes look algorithms up here by key, so swapping a strategy is a
matter of picking a different entry.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from adjgraph.errors import UnknownAlgorithmError

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from adjgraph.algorithms.bfs         import bfs as _bfs, PSEUDOCODE as _bfs_pc
from adjgraph.algorithms.dfs         import (
    dfs_iterative as _dfs_iter, dfs_recursive as _dfs_rec, PSEUDOCODE as _dfs_pc,
)
from adjgraph.algorithms.topological import (
    topological_sort_iterative as _topo_iter,
    topological_sort_recursive as _topo_rec,
    PSEUDOCODE as _topo_pc,
)
from adjgraph.algorithms.cycles      import (
    has_cycle_directed_iterative   as _dcyc_iter,
    has_cycle_directed_recursive   as _dcyc_rec,
    has_cycle_undirected_iterative as _ucyc_iter,
    has_cycle_undirected_recursive as _ucyc_rec,
    PSEUDOCODE_DIRECTED   as _dcyc_pc,
    PSEUDOCODE_UNDIRECTED as _ucyc_pc,
)
from adjgraph.algorithms.dijkstra    import dijkstra as _dijkstra, PSEUDOCODE as _dij_pc


# ---------------------------------------------------------------------------
# AlgoInfo - metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                     # registry key, e.g. "bfs"
    label:            str                     # human label, e.g. "Breadth-First Search"
    fn:               Callable                # fn(registry, ...)
    pseudocode:       List[str]
    tags:             List[str] = field(default_factory=list)
    graph_kind:       str       = "any"       # "directed" | "undirected" | "any"
    complexity_time:  str       = ""
    complexity_space: str       = ""
    description:      str       = ""


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "dfs_recursive": AlgoInfo(
        key="dfs_recursive", label="Depth-First Search (recursive)",
        fn=_dfs_rec, pseudocode=_dfs_pc,
        tags=["traversal", "recursive"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking, on the Python call stack.",
    ),

    "dfs_iterative": AlgoInfo(
        key="dfs_iterative", label="Depth-First Search (iterative)",
        fn=_dfs_iter, pseudocode=_dfs_pc,
        tags=["traversal", "iterative"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Same visit order as the recursive DFS, explicit stack.",
    ),

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs, pseudocode=_bfs_pc,
        tags=["traversal", "iterative"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer in hop-count order.",
    ),

    "topological_sort_recursive": AlgoInfo(
        key="topological_sort_recursive", label="Topological Sort (recursive)",
        fn=_topo_rec, pseudocode=_topo_pc,
        tags=["ordering", "recursive"], graph_kind="directed",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Reversed DFS post-order. Raises CycleError on a back-edge.",
    ),

    "topological_sort_iterative": AlgoInfo(
        key="topological_sort_iterative", label="Topological Sort (iterative)",
        fn=_topo_iter, pseudocode=_topo_pc,
        tags=["ordering", "iterative"], graph_kind="directed",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Reversed DFS post-order with an explicit stack.",
    ),

    "has_cycle_directed_recursive": AlgoInfo(
        key="has_cycle_directed_recursive", label="Cycle Detection (directed, recursive)",
        fn=_dcyc_rec, pseudocode=_dcyc_pc,
        tags=["cycle", "recursive"], graph_kind="directed",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Three-colour DFS; a back-edge means a cycle.",
    ),

    "has_cycle_directed_iterative": AlgoInfo(
        key="has_cycle_directed_iterative", label="Cycle Detection (directed, iterative)",
        fn=_dcyc_iter, pseudocode=_dcyc_pc,
        tags=["cycle", "iterative"], graph_kind="directed",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Three-colour DFS with an explicit stack.",
    ),

    "has_cycle_undirected_recursive": AlgoInfo(
        key="has_cycle_undirected_recursive", label="Cycle Detection (undirected, recursive)",
        fn=_ucyc_rec, pseudocode=_ucyc_pc,
        tags=["cycle", "recursive"], graph_kind="undirected",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="DFS remembering the parent edge; any other route back is a cycle.",
    ),

    "has_cycle_undirected_iterative": AlgoInfo(
        key="has_cycle_undirected_iterative", label="Cycle Detection (undirected, iterative)",
        fn=_ucyc_iter, pseudocode=_ucyc_pc,
        tags=["cycle", "iterative"], graph_kind="undirected",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Parent-edge DFS with an explicit stack.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra, pseudocode=_dij_pc,
        tags=["weighted", "shortest-path"], graph_kind="undirected",
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Greedily settles the closest node. Needs non-negative weights.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def require_algorithm(key: str) -> AlgoInfo:
    """Return AlgoInfo by key, raising UnknownAlgorithmError if absent."""
    info = REGISTRY.get(key)
    if info is None:
        raise UnknownAlgorithmError(f"No algorithm registered as {key!r}", key=key)
    return info


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "require_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
