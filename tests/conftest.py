"""Shared test fixtures."""

from pathlib import Path

import pytest

from weightgraph.graph import Graph, insert_edge, new_graph

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture()
def diamond() -> Graph:
    """Vertices 0..3; light chain 0-1-2-3 and a heavy 0-2 shortcut."""
    g = new_graph(4)
    insert_edge(g, 0, 1, 5)
    insert_edge(g, 1, 2, 5)
    insert_edge(g, 0, 2, 20)
    insert_edge(g, 2, 3, 5)
    return g
