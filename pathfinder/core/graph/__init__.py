"""
Graph data structures and algorithms.

Data Structures:
    - Graph: Directed graph with O(1) node lookup by key
    - NodeRegistry: Node identity, insertion order, seen flags
    - ListAdjacency / MatrixAdjacency: The two adjacency strategies

Algorithms:
    - reachability: BFS reachability, BFS order, shortest route

Loading:
    - build_graph(): Build from (origin, destination) pairs
    - load_map(): Read a map file and build its graph
"""

from pathfinder.core.graph.adjacency import AdjacencyStore, ListAdjacency, MatrixAdjacency
from pathfinder.core.graph.base import Graph
from pathfinder.core.graph.loader import build_graph, load_map
from pathfinder.core.graph.reachability import (
    ReachabilityEngine,
    SearchState,
    is_reachable,
    shortest_route,
)
from pathfinder.core.graph.registry import NodeRegistry

__all__ = [
    "AdjacencyStore",
    "Graph",
    "ListAdjacency",
    "MatrixAdjacency",
    "NodeRegistry",
    "ReachabilityEngine",
    "SearchState",
    "build_graph",
    "is_reachable",
    "load_map",
    "shortest_route",
]
