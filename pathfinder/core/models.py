"""Data models for Pathfinder."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class AdjacencyKind(Enum):
    """Storage strategies for outgoing edges."""

    LIST = "list"
    MATRIX = "matrix"


@dataclass(eq=False)
class Node:
    """A graph vertex.

    Nodes compare and hash by key. ``index`` is the node's position in its
    graph's registry and ``visited`` is traversal scratch state; both are
    managed by the graph.
    """

    key: str
    index: int = 0
    visited: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"Node({self.key!r})"


@dataclass
class MapFile:
    """Parsed contents of a map file."""

    declared_edges: int
    edges: list[tuple[str, str]] = field(default_factory=list)

    @property
    def nodes(self) -> list[str]:
        """Unique node names in order of first appearance."""
        seen: dict[str, None] = {}
        for origin, destination in self.edges:
            seen.setdefault(origin)
            seen.setdefault(destination)
        return list(seen)

    def __len__(self) -> int:
        return len(self.edges)
