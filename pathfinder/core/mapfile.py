"""Map file parser.

A map file describes a directed graph as an edge list::

    # Comment lines and blank lines are ignored
    3           # declared number of edges
    A B
    B C         # trailing comments are stripped
    C A

The first significant line is the declared edge count. It is informational:
the real edges are the data lines that follow, each holding exactly two
whitespace-separated names, origin then destination.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pathfinder.core.exceptions import MalformedInputError
from pathfinder.core.models import MapFile

logger = logging.getLogger(__name__)

_COMMENT = "#"


def strip_comment(line: str) -> str:
    """Drop everything from the first comment marker and trim whitespace."""
    return line.split(_COMMENT, 1)[0].strip()


def parse_map(text: str) -> MapFile:
    """Parse map file text.

    Raises:
        MalformedInputError: on a bad count line, a data line without exactly
            two names, or when there are no data lines
    """
    declared: int | None = None
    edges: list[tuple[str, str]] = []

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = strip_comment(raw)
        if not line:
            continue

        tokens = line.split()
        if declared is None:
            if len(tokens) != 1:
                raise MalformedInputError("The first line contains more than one string", line_no)
            if not (tokens[0].isascii() and tokens[0].isdigit()):
                raise MalformedInputError("The first line is not a number", line_no)
            declared = int(tokens[0])
            continue

        if len(tokens) != 2:
            raise MalformedInputError(
                f"Expected 'origin destination', got {len(tokens)} string(s)", line_no
            )
        edges.append((tokens[0], tokens[1]))

    if declared is None or not edges:
        raise MalformedInputError("Empty file, no edges found")

    if declared != len(edges):
        logger.warning("Map declares %d edges but lists %d", declared, len(edges))

    return MapFile(declared_edges=declared, edges=edges)


def read_map(path: Path) -> MapFile:
    """Read and parse a map file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedInputError(f"Cannot read {path}: {e}") from e

    logger.debug("Parsing map file %s", path)
    return parse_map(text)
