"""
MCP server for Pathfinder.

Exposes reachability queries over map files via the Model Context Protocol.

Tools:
    - pathfinder_reachable: Is there a path between two nodes?
    - pathfinder_neighbours: Direct successors of a node
    - pathfinder_stats: Node and edge counts of a map

Usage:
    Run: mcp-server-pathfinder
    The map file is passed per call or taken from PATHFINDER_MAP.
"""

import asyncio

from pathfinder.mcp.server import serve as _serve


def serve() -> None:
    """Entry point for the MCP server."""
    asyncio.run(_serve())


__all__ = ["serve"]
