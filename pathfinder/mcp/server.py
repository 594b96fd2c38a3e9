"""MCP server implementation for Pathfinder."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from pathfinder.core.config import ENV_MAP, Settings
from pathfinder.core.exceptions import PathfinderError
from pathfinder.core.graph import Graph, ReachabilityEngine, load_map
from pathfinder.core.models import MapFile

logger = logging.getLogger(__name__)

server = Server("pathfinder")

_MAP_FILE_PROPERTY = {
    "type": "string",
    "description": f"Path to the map file (default: ${ENV_MAP})",
}


def _open_map(map_file: str | None) -> tuple[Graph, MapFile]:
    """Load the requested map, falling back to the configured one."""
    settings = Settings.from_env()
    path = Path(map_file) if map_file else settings.map_file
    if path is None:
        raise FileNotFoundError(f"No map file given and {ENV_MAP} is not set")
    return load_map(path, settings.strategy, settings.capacity)


@server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="pathfinder_reachable",
            description=(
                "Check whether a destination node can be reached from an origin node "
                "following directed edges. Returns a shortest route when one exists."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "origin": {"type": "string", "description": "Node to start from"},
                    "destination": {"type": "string", "description": "Node to reach"},
                    "map_file": _MAP_FILE_PROPERTY,
                },
                "required": ["origin", "destination"],
            },
        ),
        Tool(
            name="pathfinder_neighbours",
            description="List the nodes directly reachable from a node.",
            inputSchema={
                "type": "object",
                "properties": {
                    "name": {"type": "string", "description": "Node name"},
                    "map_file": _MAP_FILE_PROPERTY,
                },
                "required": ["name"],
            },
        ),
        Tool(
            name="pathfinder_stats",
            description="Get node and edge counts for a map file.",
            inputSchema={
                "type": "object",
                "properties": {"map_file": _MAP_FILE_PROPERTY},
            },
        ),
    ]


@server.call_tool()  # type: ignore[untyped-decorator]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        map_file = arguments.get("map_file")
        if name == "pathfinder_reachable":
            result = _handle_reachable(arguments["origin"], arguments["destination"], map_file)
        elif name == "pathfinder_neighbours":
            result = _handle_neighbours(arguments["name"], map_file)
        elif name == "pathfinder_stats":
            result = _handle_stats(map_file)
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except (FileNotFoundError, PathfinderError) as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]
    except Exception as e:
        logger.exception("Tool %s failed", name)
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]


def _handle_reachable(origin: str, destination: str, map_file: str | None) -> dict[str, Any]:
    """Handle pathfinder_reachable tool."""
    graph, _ = _open_map(map_file)
    engine = ReachabilityEngine(graph)
    reachable = engine.is_reachable(origin, destination)
    route = engine.shortest_route(origin, destination) if reachable else None
    return {
        "origin": origin,
        "destination": destination,
        "reachable": reachable,
        "route": [node.key for node in route] if route else None,
    }


def _handle_neighbours(name: str, map_file: str | None) -> dict[str, Any]:
    """Handle pathfinder_neighbours tool."""
    graph, _ = _open_map(map_file)
    node = graph.find_node(name)
    if node is None:
        return {"error": f"Node '{name}' does not exist", "results": []}
    return {"name": name, "results": [n.key for n in graph.neighbours(node)]}


def _handle_stats(map_file: str | None) -> dict[str, Any]:
    """Handle pathfinder_stats tool."""
    graph, parsed = _open_map(map_file)
    return {
        "nodes": graph.num_nodes,
        "edges": graph.num_edges,
        "declared_edges": parsed.declared_edges,
        "strategy": graph.strategy.value,
        "has_edges": graph.has_edges(),
    }


async def serve() -> None:
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
