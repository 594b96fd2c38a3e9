"""Reachability queries using breadth-first search."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from contextlib import closing
from enum import Enum
from typing import TYPE_CHECKING

from pathfinder.core.exceptions import NodeNotFoundError

if TYPE_CHECKING:
    from pathfinder.core.graph.base import Graph
    from pathfinder.core.models import Node

logger = logging.getLogger(__name__)


class SearchState(Enum):
    """Lifecycle of a single query."""

    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"


class ReachabilityEngine:
    """Answers "is there a path from A to B?" over a Graph.

    ``is_reachable`` marks nodes through the graph's seen flags and resets
    them before returning, whatever way the search ended. ``traverse`` and
    ``shortest_route`` keep a seen-set of their own.
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph
        self.state = SearchState.IDLE
        self.steps = 0

    def is_reachable(self, src_key: str, dst_key: str) -> bool:
        """Check for a path from src to dst. O(V + E).

        The goal test happens when a node is dequeued, not when it is
        discovered.

        Raises:
            NodeNotFoundError: if either key is not in the graph
        """
        src = self._require(src_key)
        dst = self._require(dst_key)
        self.steps = 0

        if src == dst:
            self.state = SearchState.DONE
            return True

        found = False
        with closing(self._bfs(src)) as visits:
            for node in visits:
                if node == dst:
                    found = True
                    break

        logger.debug(
            "Query %s -> %s: %s after %d steps",
            src_key,
            dst_key,
            "reachable" if found else "unreachable",
            self.steps,
        )
        return found

    def traverse(self, src_key: str) -> Iterator[Node]:
        """Yield nodes reachable from src in BFS order, src first.

        Keeps its own seen-set, so it may be paused while other queries
        run on the same graph.
        """
        return _walk(self._graph, self._require(src_key))

    def reachable_from(self, src_key: str) -> list[Node]:
        """All nodes reachable from src, in BFS order."""
        with closing(self.traverse(src_key)) as visits:
            return list(visits)

    def shortest_route(self, src_key: str, dst_key: str) -> list[Node] | None:
        """Find a shortest route using BFS with a parent map. O(V + E).

        Uses its own seen-set and leaves the graph's flags untouched.
        """
        src = self._require(src_key)
        dst = self._require(dst_key)
        if src == dst:
            return [src]

        queue: deque[Node] = deque([src])
        parent: dict[str, Node] = {}
        visited: set[str] = {src.key}

        while queue:
            current = queue.popleft()
            for neighbour in self._graph.neighbours(current):
                if neighbour.key not in visited:
                    visited.add(neighbour.key)
                    parent[neighbour.key] = current
                    if neighbour == dst:
                        return _reconstruct(src, dst, parent)
                    queue.append(neighbour)

        return None

    def _bfs(self, src: Node) -> Iterator[Node]:
        graph = self._graph
        self.state = SearchState.RUNNING
        self.steps = 0
        try:
            graph.node_set_seen(src, True)
            queue: deque[Node] = deque([src])
            while queue:
                current = queue.popleft()
                self.steps += 1
                yield current
                for neighbour in graph.neighbours(current):
                    if not graph.node_is_seen(neighbour):
                        graph.node_set_seen(neighbour, True)
                        queue.append(neighbour)
        finally:
            graph.reset_seen()
            self.state = SearchState.DONE

    def _require(self, key: str) -> Node:
        node = self._graph.find_node(key)
        if node is None:
            raise NodeNotFoundError(key)
        return node


def is_reachable(graph: Graph, src_key: str, dst_key: str) -> bool:
    """Check for a path from src to dst."""
    return ReachabilityEngine(graph).is_reachable(src_key, dst_key)


def shortest_route(graph: Graph, src_key: str, dst_key: str) -> list[Node] | None:
    """Find a shortest route from src to dst, or None."""
    return ReachabilityEngine(graph).shortest_route(src_key, dst_key)


def _walk(graph: Graph, src: Node) -> Iterator[Node]:
    """BFS over a per-call seen-set, leaving the graph's flags alone."""
    queue: deque[Node] = deque([src])
    visited: set[str] = {src.key}
    while queue:
        current = queue.popleft()
        yield current
        for neighbour in graph.neighbours(current):
            if neighbour.key not in visited:
                visited.add(neighbour.key)
                queue.append(neighbour)


def _reconstruct(src: Node, dst: Node, parent: dict[str, Node]) -> list[Node]:
    """Reconstruct route from BFS parent map."""
    route = [dst]
    current = dst
    while current != src:
        current = parent[current.key]
        route.append(current)
    route.reverse()
    return route
