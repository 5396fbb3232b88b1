"""
path.py - Shortest-path result
==============================
`build_path` turns a predecessor map into an ordered source -> target
sequence; `Path` pairs that sequence with its total weight.

The predecessor map follows the usual convention: the source maps to
None, every other reached node maps to the node it was relaxed from.
A target missing from the map was never reached.
"""

from dataclasses import dataclass
from typing import Hashable, Iterator, List, Mapping, Optional, Tuple

from adjgraph.errors import NoPathError


@dataclass(frozen=True)
class Path:
    """
    Attributes:
        nodes    : Labels from source to target, both inclusive.
        distance : Sum of edge weights along `nodes`.
    """

    nodes:    Tuple[Hashable, ...]
    distance: float

    @property
    def source(self) -> Hashable:
        return self.nodes[0]

    @property
    def target(self) -> Hashable:
        return self.nodes[-1]

    @property
    def hops(self) -> int:
        return len(self.nodes) - 1

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __str__(self) -> str:
        return f"{' -> '.join(str(n) for n in self.nodes)} ({self.distance})"


def build_path(to: Hashable, previous: Mapping[Hashable, Optional[Hashable]]) -> List[Hashable]:
    """Walk back from `to` until a node with no predecessor, then reverse."""
    if to not in previous:
        raise NoPathError(f"{to!r} was never reached", target=to)

    path, cur = [], to
    seen = set()
    while cur is not None:
        if cur in seen:
            raise NoPathError(f"Predecessor chain of {to!r} loops at {cur!r}", target=to)
        seen.add(cur)
        path.append(cur)
        cur = previous.get(cur)
    path.reverse()
    return path
