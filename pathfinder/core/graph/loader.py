"""Build a Graph from map file edges."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pathfinder.core.graph.base import Graph
from pathfinder.core.mapfile import read_map
from pathfinder.core.models import AdjacencyKind, MapFile

logger = logging.getLogger(__name__)


def build_graph(
    edges: Iterable[tuple[str, str]],
    strategy: AdjacencyKind = AdjacencyKind.LIST,
    capacity: int | None = None,
) -> Graph:
    """Build a graph from (origin, destination) pairs. O(V + E).

    Each name becomes a node the first time it appears. For the matrix
    strategy the capacity defaults to the number of distinct names.
    """
    pairs = list(edges)
    if capacity is None and strategy is AdjacencyKind.MATRIX:
        capacity = len(MapFile(declared_edges=len(pairs), edges=pairs).nodes)

    graph = Graph(strategy=strategy, capacity=capacity)
    for origin, destination in pairs:
        if graph.find_node(origin) is None:
            graph.insert_node(origin)
        if graph.find_node(destination) is None:
            graph.insert_node(destination)
        graph.insert_edge(origin, destination)

    logger.debug("Built %r", graph)
    return graph


def load_map(
    path: Path,
    strategy: AdjacencyKind = AdjacencyKind.LIST,
    capacity: int | None = None,
) -> tuple[Graph, MapFile]:
    """Read a map file and build its graph."""
    map_file = read_map(path)
    return build_graph(map_file.edges, strategy, capacity), map_file
