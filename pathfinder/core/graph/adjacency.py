"""Adjacency stores: the two ways a graph keeps its outgoing edges.

ListAdjacency keeps an ordered list of neighbour references per node.
Memory is O(E) and suits sparse graphs.

MatrixAdjacency keeps a boolean row of ``capacity`` cells per node, where
``row[j]`` is set iff there is an edge to the node at registry position ``j``.
Memory is O(capacity^2) and suits small dense graphs.

Both are driven by the Graph, which has already validated the endpoints.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from pathfinder.core.models import AdjacencyKind

if TYPE_CHECKING:
    from pathfinder.core.graph.registry import NodeRegistry
    from pathfinder.core.models import Node


class AdjacencyStore(Protocol):
    """Protocol for adjacency stores."""

    def add_node(self, node: Node) -> None:
        """Allocate the edge set of a newly registered node."""
        ...

    def remove_node(self, node: Node) -> None:
        """Drop a node's edge set and every edge pointing at it."""
        ...

    def add_edge(self, src: Node, dst: Node) -> bool:
        """Add src -> dst. Returns False if it was already present."""
        ...

    def remove_edge(self, src: Node, dst: Node) -> bool:
        """Remove src -> dst. Returns False if it was not present."""
        ...

    def has_edge(self, src: Node, dst: Node) -> bool: ...

    def neighbours(self, src: Node) -> list[Node]:
        """Direct successors of src."""
        ...

    def out_degree(self, src: Node) -> int: ...


class ListAdjacency:
    """Per-node neighbour lists, in edge insertion order."""

    __slots__ = ("_out",)

    def __init__(self) -> None:
        self._out: dict[str, list[Node]] = {}

    def add_node(self, node: Node) -> None:
        self._out[node.key] = []

    def remove_node(self, node: Node) -> None:
        del self._out[node.key]
        for key, targets in self._out.items():
            if node in targets:
                self._out[key] = [t for t in targets if t != node]

    def add_edge(self, src: Node, dst: Node) -> bool:
        """O(out-degree)."""
        targets = self._out[src.key]
        if dst in targets:
            return False
        targets.append(dst)
        return True

    def remove_edge(self, src: Node, dst: Node) -> bool:
        targets = self._out[src.key]
        if dst not in targets:
            return False
        targets.remove(dst)
        return True

    def has_edge(self, src: Node, dst: Node) -> bool:
        return dst in self._out[src.key]

    def neighbours(self, src: Node) -> list[Node]:
        """O(out-degree)."""
        return list(self._out[src.key])

    def out_degree(self, src: Node) -> int:
        return len(self._out[src.key])


class MatrixAdjacency:
    """Fixed-width boolean rows indexed by registry position."""

    __slots__ = ("_registry", "_capacity", "_rows")

    def __init__(self, registry: NodeRegistry, capacity: int) -> None:
        self._registry = registry
        self._capacity = capacity
        self._rows: list[list[bool]] = []

    def add_node(self, node: Node) -> None:
        self._rows.insert(node.index, [False] * self._capacity)

    def remove_node(self, node: Node) -> None:
        """Drop the node's row and column; later columns shift left."""
        position = node.index
        del self._rows[position]
        for row in self._rows:
            del row[position]
            row.append(False)

    def add_edge(self, src: Node, dst: Node) -> bool:
        """O(1)."""
        row = self._rows[src.index]
        if row[dst.index]:
            return False
        row[dst.index] = True
        return True

    def remove_edge(self, src: Node, dst: Node) -> bool:
        row = self._rows[src.index]
        if not row[dst.index]:
            return False
        row[dst.index] = False
        return True

    def has_edge(self, src: Node, dst: Node) -> bool:
        return self._rows[src.index][dst.index]

    def neighbours(self, src: Node) -> list[Node]:
        """O(n), in registry order."""
        row = self._rows[src.index]
        return [self._registry.at(j) for j in range(len(self._registry)) if row[j]]

    def out_degree(self, src: Node) -> int:
        return sum(self._rows[src.index])


def create_store(
    kind: AdjacencyKind, registry: NodeRegistry, capacity: int | None
) -> AdjacencyStore:
    """Build the adjacency store for a strategy."""
    if kind is AdjacencyKind.MATRIX:
        if capacity is None:
            raise ValueError("Matrix adjacency requires a capacity")
        return MatrixAdjacency(registry, capacity)
    return ListAdjacency()
