"""Pathfinder custom exceptions."""


class PathfinderError(Exception):
    """Base exception for Pathfinder errors."""


class ConfigurationError(PathfinderError):
    """Invalid configuration value."""


class DuplicateNodeError(PathfinderError):
    """A node with the same key is already in the graph."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Node '{key}' already exists")
        self.key = key


class NodeNotFoundError(PathfinderError):
    """Node not found in the graph."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Node '{key}' does not exist")
        self.key = key


class EdgeNotFoundError(PathfinderError):
    """Edge not found in the graph."""

    def __init__(self, source: str, destination: str) -> None:
        super().__init__(f"Edge '{source}' -> '{destination}' does not exist")
        self.source = source
        self.destination = destination


class GraphFullError(PathfinderError):
    """The graph already holds as many nodes as its capacity allows."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"Graph is full (capacity {capacity})")
        self.capacity = capacity


class MalformedInputError(PathfinderError):
    """Error reading or parsing a map file."""

    def __init__(self, message: str, line_no: int | None = None) -> None:
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no
