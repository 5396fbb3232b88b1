"""Typed errors for the adjacency graphs.

Every error inherits from GraphError and can optionally wrap a root cause
exception. Operations validate before they mutate, so when one of these is
raised the graph is exactly as it was before the call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Optional


@dataclass(eq=False)
class GraphError(Exception):
    """Base error for graph operations.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass(eq=False)
class DuplicateNodeError(GraphError):
    """A node with this label already exists.

    Attributes:
        label: The label that was added twice
    """

    label: Hashable = None


@dataclass(eq=False)
class UnknownNodeError(GraphError):
    """An edge, removal or traversal referenced a label that is not in the graph.

    Attributes:
        label: The missing label
    """

    label: Hashable = None


@dataclass(eq=False)
class InvalidWeightError(GraphError):
    """Edge weight is not a finite, non-negative number.

    Attributes:
        weight: The rejected weight
    """

    weight: Any = None


@dataclass(eq=False)
class CycleError(GraphError):
    """Topological sort was attempted on a cyclic graph.

    Attributes:
        label: Node the back-edge pointed at
    """

    label: Hashable = None


@dataclass(eq=False)
class NoPathError(GraphError):
    """No path exists between the requested nodes.

    Attributes:
        source: Source label
        target: Target label
    """

    source: Hashable = None
    target: Hashable = None


@dataclass(eq=False)
class EmptyGraphError(GraphError):
    """A traversal or shortest-path query ran against a graph with no nodes."""


@dataclass(eq=False)
class UnknownAlgorithmError(GraphError):
    """No algorithm is registered under the requested key.

    Attributes:
        key: The unknown registry key
    """

    key: str = ""
