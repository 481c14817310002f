"""CLI entry point — graph listing and route queries over a graph file."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from weightgraph.config import load_config
from weightgraph.graph import find_path, max_edge_weight
from weightgraph.loader import GraphFileError, LoadedGraph, load_graph_file
from weightgraph.output_console import render_graph, render_route
from weightgraph.output_json import build_route_report, render_json

app = typer.Typer(no_args_is_help=True)


@app.callback(invoke_without_command=True)
def _callback() -> None:
    """weightgraph — fewest-hop routes under an edge weight ceiling."""


def _setup_logging(verbose: bool) -> None:
    if verbose:
        import logging

        logging.basicConfig(level=logging.DEBUG)


def _load(graph_path: Path) -> LoadedGraph:
    try:
        return load_graph_file(graph_path)
    except GraphFileError as e:
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(2)  # noqa: B904


@app.command()
def show(
    graph: Annotated[Path, typer.Option("--graph", help="Path to graph YAML file")],
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable verbose logging")] = False,
) -> None:
    """Print every vertex with its neighbours and edge weights."""
    _setup_logging(verbose)
    loaded = _load(graph)
    render_graph(loaded.graph, loaded.names)


@app.command()
def route(
    graph: Annotated[Path, typer.Option("--graph", help="Path to graph YAML file")],
    source: Annotated[str, typer.Option("--from", help="Start vertex name")],
    destination: Annotated[str, typer.Option("--to", help="End vertex name")],
    max_weight: Annotated[
        int | None,
        typer.Option("--max", help="Exclusive ceiling on edge weight"),
    ] = None,
    config_path: Annotated[
        Path | None, typer.Option("--config", help="Path to weightgraph.yml")
    ] = None,
    json_out: Annotated[bool, typer.Option("--json", help="Emit a JSON route report")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable verbose logging")] = False,
) -> None:
    """Find the fewest-hop route using only edges lighter than the ceiling."""
    _setup_logging(verbose)
    cfg = load_config(config_path)
    loaded = _load(graph)

    try:
        src = loaded.name_to_index(source)
        dest = loaded.name_to_index(destination)
    except GraphFileError as e:
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(2)  # noqa: B904

    if max_weight is None:
        max_weight = cfg.search.default_max_weight
    if max_weight is None:
        max_weight = max_edge_weight(loaded.graph) + 1

    result = find_path(loaded.graph, src, dest, max_weight)

    if json_out:
        report = build_route_report(loaded.names, src, dest, max_weight, result)
        typer.echo(render_json(report), nl=False)
    elif result.hops > 0:
        render_route(loaded.graph, loaded.names, result, cfg.display.show_weights)
    else:
        typer.echo(f"No route from {source} to {destination}")

    if result.hops == 0:
        raise SystemExit(1)
