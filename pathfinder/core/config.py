"""Runtime settings with environment defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from pathfinder.core.exceptions import ConfigurationError
from pathfinder.core.models import AdjacencyKind

ENV_STRATEGY = "PATHFINDER_STRATEGY"
ENV_CAPACITY = "PATHFINDER_CAPACITY"
ENV_MAP = "PATHFINDER_MAP"


@dataclass
class Settings:
    """How graphs are built and where the default map lives."""

    strategy: AdjacencyKind = AdjacencyKind.LIST
    capacity: int | None = None
    map_file: Path | None = None

    @classmethod
    def from_env(cls) -> Settings:
        """Read settings from PATHFINDER_* environment variables."""
        return cls(
            strategy=parse_strategy(os.getenv(ENV_STRATEGY, AdjacencyKind.LIST.value)),
            capacity=parse_capacity(os.getenv(ENV_CAPACITY)),
            map_file=Path(os.environ[ENV_MAP]) if os.getenv(ENV_MAP) else None,
        )


def parse_strategy(value: str) -> AdjacencyKind:
    try:
        return AdjacencyKind(value.strip().lower())
    except ValueError:
        choices = ", ".join(kind.value for kind in AdjacencyKind)
        raise ConfigurationError(f"Unknown strategy '{value}', expected one of: {choices}") from None


def parse_capacity(value: str | int | None) -> int | None:
    if value is None or value == "":
        return None
    try:
        capacity = int(value)
    except ValueError:
        raise ConfigurationError(f"Capacity must be an integer, got '{value}'") from None
    if capacity < 0:
        raise ConfigurationError(f"Capacity must be non-negative, got {capacity}")
    return capacity
