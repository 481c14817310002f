"""JSON output — deterministic route report."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from weightgraph.model import RouteReport

if TYPE_CHECKING:
    from collections.abc import Sequence

    from weightgraph.graph import PathResult


def build_route_report(
    names: Sequence[str],
    src: int,
    dest: int,
    max_weight: int,
    result: PathResult,
) -> RouteReport:
    return RouteReport(
        source=names[src],
        destination=names[dest],
        max_weight=max_weight,
        hops=result.hops,
        path=[names[v] for v in result.path],
        indices=list(result.path),
    )


def render_json(report: RouteReport) -> str:
    """Byte-deterministic JSON text for *report*."""
    data = report.model_dump(mode="json")
    return json.dumps(data, sort_keys=True, indent=2) + "\n"
