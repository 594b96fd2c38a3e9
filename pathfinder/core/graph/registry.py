"""Node registry: identity, insertion order and visited flags."""

from __future__ import annotations

from collections.abc import Iterator

from pathfinder.core.exceptions import DuplicateNodeError, GraphFullError, NodeNotFoundError
from pathfinder.core.models import Node


class NodeRegistry:
    """Ordered node store with a key index.

    Positions are dense: the node at ``at(i)`` has ``index == i``.
    """

    __slots__ = ("_nodes", "_index", "_capacity")

    def __init__(self, capacity: int | None = None) -> None:
        self._nodes: list[Node] = []
        self._index: dict[str, int] = {}
        self._capacity = capacity

    def insert(self, key: str) -> Node:
        """Add a node. O(1)."""
        if key in self._index:
            raise DuplicateNodeError(key)
        if self._capacity is not None and len(self._nodes) >= self._capacity:
            raise GraphFullError(self._capacity)
        node = Node(key=key, index=len(self._nodes))
        self._nodes.append(node)
        self._index[key] = node.index
        return node

    def find(self, key: str) -> Node | None:
        """Get node by key. O(1)."""
        position = self._index.get(key)
        return None if position is None else self._nodes[position]

    def at(self, position: int) -> Node:
        """Get node by position. O(1)."""
        return self._nodes[position]

    def all(self) -> list[Node]:
        """All nodes in insertion order."""
        return list(self._nodes)

    def remove(self, node: Node) -> None:
        """Remove a node and shift the positions after it. O(n)."""
        if self.find(node.key) is not node:
            raise NodeNotFoundError(node.key)
        del self._nodes[node.index]
        del self._index[node.key]
        for position in range(node.index, len(self._nodes)):
            moved = self._nodes[position]
            moved.index = position
            self._index[moved.key] = position

    def set_visited(self, node: Node, visited: bool) -> None:
        node.visited = visited

    def is_visited(self, node: Node) -> bool:
        return node.visited

    def reset_all_visited(self) -> None:
        """Clear every node's visited flag. O(n)."""
        for node in self._nodes:
            node.visited = False

    @property
    def capacity(self) -> int | None:
        return self._capacity

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)
