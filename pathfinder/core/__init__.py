"""
Core module: data models, exceptions, parsing and configuration.

Models (models.py):
    - Node: A named graph vertex with its traversal flag
    - MapFile: Parsed edge list with its declared edge count
    - AdjacencyKind: Enum of adjacency strategies (list, matrix)

Exceptions (exceptions.py):
    - PathfinderError: Base exception for all pathfinder errors
    - DuplicateNodeError / NodeNotFoundError / EdgeNotFoundError
    - GraphFullError: Node insertion beyond capacity
    - MalformedInputError: Map file could not be read or parsed

Parsing (mapfile.py):
    - parse_map / read_map: Map file text to MapFile

Configuration (config.py):
    - Settings: Strategy, capacity and default map from PATHFINDER_* variables
"""

from pathfinder.core.config import Settings
from pathfinder.core.exceptions import (
    ConfigurationError,
    DuplicateNodeError,
    EdgeNotFoundError,
    GraphFullError,
    MalformedInputError,
    NodeNotFoundError,
    PathfinderError,
)
from pathfinder.core.mapfile import parse_map, read_map
from pathfinder.core.models import AdjacencyKind, MapFile, Node

__all__ = [
    # Models
    "Node",
    "MapFile",
    "AdjacencyKind",
    # Exceptions
    "PathfinderError",
    "ConfigurationError",
    "DuplicateNodeError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
    "GraphFullError",
    "MalformedInputError",
    # Parsing
    "parse_map",
    "read_map",
    # Configuration
    "Settings",
]
