"""
Pathfinder: Reachability queries over directed graphs.

Pathfinder reads a graph from an edge-list map file and answers whether
one named node can be reached from another, using breadth-first search over
either a neighbour-list or an adjacency-matrix representation.

Usage:
    from pathfinder.core.graph import load_map, is_reachable

    graph, _ = load_map(Path("airmap.map"))
    is_reachable(graph, "UME", "GOT")
"""

__version__ = "0.1.0"
