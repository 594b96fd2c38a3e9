"""CLI entry point for Pathfinder."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from pathfinder.core.config import ENV_CAPACITY, ENV_STRATEGY
from pathfinder.core.exceptions import GraphFullError, MalformedInputError
from pathfinder.core.graph import Graph, ReachabilityEngine, load_map
from pathfinder.core.models import AdjacencyKind, MapFile

app = typer.Typer(
    name="pathfinder",
    help="Reachability queries over directed graphs read from map files.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

PROMPT = "Enter origin and destination (quit to exit): "
QUIT = "quit"

MapArg = Annotated[
    Path, typer.Argument(help="Map file with the edge list", dir_okay=False, show_default=False)
]
StrategyOpt = Annotated[
    AdjacencyKind,
    typer.Option(
        "--strategy",
        "-s",
        help="Adjacency representation",
        envvar=ENV_STRATEGY,
        case_sensitive=False,
    ),
]
CapacityOpt = Annotated[
    int | None,
    typer.Option(
        "--capacity", "-c", min=0, help="Maximum number of nodes", envvar=ENV_CAPACITY
    ),
]
JsonOpt = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
) -> None:
    """Reachability queries over directed graphs read from map files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def open_map(path: Path, strategy: AdjacencyKind, capacity: int | None) -> tuple[Graph, MapFile]:
    """Load a map file, exiting with status 1 if it cannot be used."""
    try:
        return load_map(path, strategy, capacity)
    except (MalformedInputError, GraphFullError) as e:
        err_console.print(f"[red]ERROR:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e


def say(text: str) -> None:
    """Print plain text without markup or highlighting."""
    console.print(text, markup=False, highlight=False)


def outcome(origin: str, destination: str, reachable: bool) -> str:
    if reachable:
        return f"There is a path from {origin} to {destination}."
    return f"There is no path from {origin} to {destination}."


@app.command()
def query(
    map_file: MapArg,
    strategy: StrategyOpt = AdjacencyKind.LIST,
    capacity: CapacityOpt = None,
) -> None:
    """Answer reachability questions interactively until 'quit'."""
    graph, _ = open_map(map_file, strategy, capacity)
    engine = ReachabilityEngine(graph)

    while True:
        try:
            line = console.input(PROMPT, markup=False)
        except EOFError:
            console.print()
            break

        tokens = line.split()
        if tokens and tokens[0] == QUIT:
            break
        if len(tokens) < 2:
            say("Please enter both an origin and a destination\n")
            continue

        origin, destination = tokens[0], tokens[1]
        missing = next((name for name in (origin, destination) if name not in graph), None)
        if missing is not None:
            say(f"Node {missing} does not exist, try again!\n")
            continue

        say(outcome(origin, destination, engine.is_reachable(origin, destination)) + "\n")

    say("Normal exit.")


@app.command()
def check(
    map_file: MapArg,
    origin: Annotated[str, typer.Argument(help="Node to start from")],
    destination: Annotated[str, typer.Argument(help="Node to reach")],
    route: Annotated[bool, typer.Option("--route", "-r", help="Show a shortest route")] = False,
    strategy: StrategyOpt = AdjacencyKind.LIST,
    capacity: CapacityOpt = None,
    output_json: JsonOpt = False,
) -> None:
    """Check whether DESTINATION can be reached from ORIGIN."""
    graph, _ = open_map(map_file, strategy, capacity)

    for name in (origin, destination):
        if name not in graph:
            err_console.print(f"Node [cyan]{escape(name)}[/cyan] does not exist")
            raise typer.Exit(code=1)

    engine = ReachabilityEngine(graph)
    reachable = engine.is_reachable(origin, destination)
    path = engine.shortest_route(origin, destination) if route and reachable else None

    if output_json:
        result = {
            "origin": origin,
            "destination": destination,
            "reachable": reachable,
            "route": [node.key for node in path] if path else None,
        }
        print(json.dumps(result))
        return

    say(outcome(origin, destination, reachable))
    if path:
        say("Route: " + " -> ".join(node.key for node in path))


@app.command()
def show(
    map_file: MapArg,
    strategy: StrategyOpt = AdjacencyKind.LIST,
    capacity: CapacityOpt = None,
    output_json: JsonOpt = False,
) -> None:
    """Print every node with its neighbours."""
    graph, _ = open_map(map_file, strategy, capacity)

    if output_json:
        result = [
            {
                "name": node.key,
                "neighbours": [n.key for n in graph.neighbours(node)],
                "seen": graph.node_is_seen(node),
            }
            for node in graph.nodes
        ]
        print(json.dumps(result))
        return

    table = Table(title=f"{map_file.name} ({graph.strategy.value})")
    table.add_column("Node", style="cyan")
    table.add_column("Neighbours")
    table.add_column("Seen", justify="center")
    for node in graph.nodes:
        neighbours = ", ".join(n.key for n in graph.neighbours(node))
        table.add_row(
            escape(node.key),
            escape(neighbours) or "[dim]-[/]",
            "yes" if graph.node_is_seen(node) else "no",
        )
    console.print(table)


@app.command()
def stats(
    map_file: MapArg,
    strategy: StrategyOpt = AdjacencyKind.LIST,
    capacity: CapacityOpt = None,
    output_json: JsonOpt = False,
) -> None:
    """Show graph statistics."""
    graph, parsed = open_map(map_file, strategy, capacity)
    result = {
        "nodes": graph.num_nodes,
        "edges": graph.num_edges,
        "declared_edges": parsed.declared_edges,
        "strategy": graph.strategy.value,
        "capacity": graph.capacity,
        "has_edges": graph.has_edges(),
    }

    if output_json:
        print(json.dumps(result))
    else:
        console.print(f"Nodes: {result['nodes']}")
        console.print(f"Edges: {result['edges']}")
        console.print(f"Declared edges: {result['declared_edges']}")
        if result["edges"] != result["declared_edges"]:
            console.print("  [yellow]Declared count differs from the edge list[/]")
        console.print(f"Strategy: {result['strategy']}")
        capacity = result["capacity"]
        console.print(f"Capacity: {capacity if capacity is not None else 'unbounded'}")
        console.print(f"Has edges: {'yes' if result['has_edges'] else 'no'}")


if __name__ == "__main__":
    app()
