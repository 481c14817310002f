"""Console output — adjacency listing and route listing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from weightgraph.graph import ContractViolation, edge_weight, neighbours

if TYPE_CHECKING:
    from collections.abc import Sequence

    from weightgraph.graph import Graph, PathResult


def format_graph(g: Graph, names: Sequence[str]) -> str:
    """Adjacency listing of *g*, vertices labelled through *names*."""
    if len(names) < g.n_vertices:
        raise ContractViolation(
            f"name table has {len(names)} entries, graph has {g.n_vertices} vertices"
        )

    lines: list[str] = [f"#vertices={g.n_vertices}, #edges={g.n_edges}", ""]
    for v in range(g.n_vertices):
        lines.append(f"{v} {names[v]}")
        for w, wt in neighbours(g, v):
            lines.append(f"\t{names[w]} ({wt})")
        lines.append("")
    return "\n".join(lines) + "\n"


def format_route(
    g: Graph, names: Sequence[str], result: PathResult, show_weights: bool = True
) -> str:
    """Travel-planner style listing of a found route, one stop per line."""
    lines = ["Least-hops route:", names[result.path[0]]]
    for prev, curr in zip(result.path, result.path[1:]):
        leg = f"->{names[curr]}"
        if show_weights:
            leg += f" ({edge_weight(g, prev, curr)})"
        lines.append(leg)
    return "\n".join(lines) + "\n"


def render_graph(g: Graph, names: Sequence[str], console: Console | None = None) -> None:
    """Print the adjacency listing to stdout, tabs intact."""
    console = console or Console()
    # Bypasses rich rendering, which expands tabs and parses markup.
    console.file.write(format_graph(g, names))
    console.file.flush()


def render_route(
    g: Graph,
    names: Sequence[str],
    result: PathResult,
    show_weights: bool = True,
    console: Console | None = None,
) -> None:
    # Names are user data; keep rich from reading them as markup.
    console = console or Console(highlight=False, soft_wrap=True)
    console.print(format_route(g, names, result, show_weights), markup=False, end="")
