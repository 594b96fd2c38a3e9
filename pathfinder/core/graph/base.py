"""Core Graph class composing a node registry and an adjacency store."""

from __future__ import annotations

import logging

from pathfinder.core.exceptions import EdgeNotFoundError, NodeNotFoundError
from pathfinder.core.graph.adjacency import create_store
from pathfinder.core.graph.registry import NodeRegistry
from pathfinder.core.models import AdjacencyKind, Node

logger = logging.getLogger(__name__)


class Graph:
    """Directed, unweighted graph with string-keyed nodes.

    Node lookups go through a hash index, so they are O(1) for both
    strategies. The matrix strategy needs a fixed capacity; the list
    strategy is unbounded unless one is given.
    """

    __slots__ = ("_registry", "_adjacency", "_strategy")

    def __init__(
        self,
        strategy: AdjacencyKind = AdjacencyKind.LIST,
        capacity: int | None = None,
    ) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        self._strategy = strategy
        self._registry = NodeRegistry(capacity)
        self._adjacency = create_store(strategy, self._registry, capacity)

    @classmethod
    def empty(cls, max_nodes: int, strategy: AdjacencyKind = AdjacencyKind.LIST) -> Graph:
        """Create an empty graph that can hold ``max_nodes`` nodes."""
        return cls(strategy=strategy, capacity=max_nodes)

    def insert_node(self, key: str) -> Node:
        """Add a node. O(1), O(capacity) for matrix rows."""
        node = self._registry.insert(key)
        self._adjacency.add_node(node)
        logger.debug("Inserted node %s", key)
        return node

    def find_node(self, key: str) -> Node | None:
        """Get node by key. O(1)."""
        return self._registry.find(key)

    def insert_edge(self, src_key: str, dst_key: str) -> None:
        """Add the edge src -> dst. Inserting an existing edge is a no-op."""
        src, dst = self._require(src_key), self._require(dst_key)
        if self._adjacency.add_edge(src, dst):
            logger.debug("Inserted edge %s -> %s", src_key, dst_key)

    def delete_node(self, node: Node) -> None:
        """Remove a node together with every edge touching it."""
        if self._registry.find(node.key) is not node:
            raise NodeNotFoundError(node.key)
        self._adjacency.remove_node(node)
        self._registry.remove(node)
        logger.debug("Deleted node %s", node.key)

    def delete_edge(self, src_key: str, dst_key: str) -> None:
        """Remove the edge src -> dst."""
        src, dst = self._require(src_key), self._require(dst_key)
        if not self._adjacency.remove_edge(src, dst):
            raise EdgeNotFoundError(src_key, dst_key)
        logger.debug("Deleted edge %s -> %s", src_key, dst_key)

    def has_edge(self, src_key: str, dst_key: str) -> bool:
        src, dst = self.find_node(src_key), self.find_node(dst_key)
        if src is None or dst is None:
            return False
        return self._adjacency.has_edge(src, dst)

    def neighbours(self, node: Node) -> list[Node]:
        """Get direct successors of a node."""
        return self._adjacency.neighbours(node)

    def has_edges(self) -> bool:
        """Check whether any node has an outgoing edge."""
        return any(self._adjacency.out_degree(node) for node in self._registry)

    def is_empty(self) -> bool:
        return len(self._registry) == 0

    def choose_node(self) -> Node:
        """Get the first node in insertion order."""
        if self.is_empty():
            raise NodeNotFoundError("<any>")
        return self._registry.at(0)

    def node_is_seen(self, node: Node) -> bool:
        return self._registry.is_visited(node)

    def node_set_seen(self, node: Node, seen: bool) -> None:
        self._registry.set_visited(node, seen)

    def reset_seen(self) -> None:
        """Reset the seen status on all nodes."""
        self._registry.reset_all_visited()

    def edges(self) -> list[tuple[str, str]]:
        """All edges as (source, destination) key pairs."""
        return [
            (node.key, neighbour.key)
            for node in self._registry
            for neighbour in self._adjacency.neighbours(node)
        ]

    def _require(self, key: str) -> Node:
        node = self._registry.find(key)
        if node is None:
            raise NodeNotFoundError(key)
        return node

    @property
    def nodes(self) -> list[Node]:
        return self._registry.all()

    @property
    def num_nodes(self) -> int:
        return len(self._registry)

    @property
    def num_edges(self) -> int:
        return sum(self._adjacency.out_degree(node) for node in self._registry)

    @property
    def strategy(self) -> AdjacencyKind:
        return self._strategy

    @property
    def capacity(self) -> int | None:
        return self._registry.capacity

    def __contains__(self, key: object) -> bool:
        return key in self._registry

    def __len__(self) -> int:
        return self.num_nodes

    def __repr__(self) -> str:
        return (
            f"Graph(strategy={self._strategy.value}, "
            f"nodes={self.num_nodes}, edges={self.num_edges})"
        )
