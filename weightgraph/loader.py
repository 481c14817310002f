"""Graph file loader — YAML name table and edge list into a Graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import ValidationError

from weightgraph.graph import Graph, insert_edge, new_graph
from weightgraph.logger import logger
from weightgraph.model import GraphFile
from weightgraph.yamlfile import YamlFileError, read_mapping

if TYPE_CHECKING:
    from pathlib import Path


class GraphFileError(Exception):
    """Raised when a graph file cannot be read, parsed or resolved."""


@dataclass
class LoadedGraph:
    graph: Graph
    names: list[str]

    def name_to_index(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            raise GraphFileError(f"unknown vertex {name!r}") from None


def load_graph_file(path: Path) -> LoadedGraph:
    """Read *path* and build the graph it describes.

    Edges are inserted in file order, so a repeated pair keeps the weight
    of its first occurrence.
    """
    try:
        raw = read_mapping(path)
    except YamlFileError as e:
        raise GraphFileError(f"graph file: {e}") from e

    try:
        doc = GraphFile.model_validate(raw)
    except ValidationError as e:
        raise GraphFileError(f"invalid graph file {path}: {e}") from e

    return build_loaded_graph(doc)


def build_loaded_graph(doc: GraphFile) -> LoadedGraph:
    index = {name: i for i, name in enumerate(doc.vertices)}
    g = new_graph(len(doc.vertices))
    for edge in doc.edges:
        insert_edge(g, index[edge.from_name], index[edge.to_name], edge.weight)

    logger.info("Loaded graph: %d vertices, %d edges", g.n_vertices, g.n_edges)
    return LoadedGraph(graph=g, names=list(doc.vertices))
