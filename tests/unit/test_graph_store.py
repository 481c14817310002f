"""Tests for graph store operations."""

from __future__ import annotations

import pytest

from weightgraph.graph import (
    ContractViolation,
    Graph,
    drop_graph,
    edge_weight,
    find_path,
    insert_edge,
    max_edge_weight,
    neighbours,
    new_graph,
    remove_edge,
    valid_vertex,
)
from weightgraph.output_console import format_graph


def _assert_symmetric(g: Graph) -> None:
    for v in range(g.n_vertices):
        for w in range(g.n_vertices):
            assert edge_weight(g, v, w) == edge_weight(g, w, v)


class TestCreate:
    def test_empty_graph(self) -> None:
        g = new_graph(3)
        assert g.n_vertices == 3
        assert g.n_edges == 0
        assert all(edge_weight(g, v, w) == 0 for v in range(3) for w in range(3))

    @pytest.mark.parametrize("n", [0, -1, 2.5, "3", True, None])
    def test_rejects_bad_vertex_count(self, n: object) -> None:
        with pytest.raises(ContractViolation):
            new_graph(n)  # type: ignore[arg-type]


class TestValidVertex:
    def test_range(self) -> None:
        g = new_graph(2)
        assert valid_vertex(g, 0)
        assert valid_vertex(g, 1)
        assert not valid_vertex(g, 2)
        assert not valid_vertex(g, -1)

    def test_none_graph(self) -> None:
        assert not valid_vertex(None, 0)

    def test_non_int_vertex(self) -> None:
        g = new_graph(2)
        assert not valid_vertex(g, "0")
        assert not valid_vertex(g, False)


class TestInsertEdge:
    def test_sets_both_directions(self) -> None:
        g = new_graph(3)
        insert_edge(g, 0, 2, 7)
        assert edge_weight(g, 0, 2) == 7
        assert edge_weight(g, 2, 0) == 7
        assert g.n_edges == 1

    def test_duplicate_keeps_first_weight(self) -> None:
        g = new_graph(3)
        insert_edge(g, 0, 1, 4)
        insert_edge(g, 0, 1, 9)
        insert_edge(g, 1, 0, 2)
        assert edge_weight(g, 0, 1) == 4
        assert g.n_edges == 1

    def test_invalid_vertex_leaves_graph_untouched(self) -> None:
        g = new_graph(2)
        with pytest.raises(ContractViolation):
            insert_edge(g, 0, 2, 1)
        assert g.n_edges == 0
        assert max_edge_weight(g) == 0

    @pytest.mark.parametrize("weight", [0, -3, 1.5])
    def test_rejects_non_positive_weight(self, weight: object) -> None:
        g = new_graph(2)
        with pytest.raises(ContractViolation):
            insert_edge(g, 0, 1, weight)  # type: ignore[arg-type]
        assert g.n_edges == 0

    def test_none_graph(self) -> None:
        with pytest.raises(ContractViolation):
            insert_edge(None, 0, 1, 1)  # type: ignore[arg-type]


class TestRemoveEdge:
    def test_removes_both_directions(self) -> None:
        g = new_graph(3)
        insert_edge(g, 0, 1, 4)
        insert_edge(g, 1, 2, 6)
        remove_edge(g, 1, 0)
        assert edge_weight(g, 0, 1) == 0
        assert edge_weight(g, 1, 0) == 0
        assert g.n_edges == 1

    def test_absent_edge_is_noop(self) -> None:
        g = new_graph(3)
        insert_edge(g, 0, 1, 4)
        remove_edge(g, 1, 2)
        assert g.n_edges == 1
        assert edge_weight(g, 0, 1) == 4

    def test_reinsert_after_remove_takes_new_weight(self) -> None:
        g = new_graph(2)
        insert_edge(g, 0, 1, 4)
        remove_edge(g, 0, 1)
        insert_edge(g, 0, 1, 8)
        assert edge_weight(g, 0, 1) == 8
        assert g.n_edges == 1


class TestEdgeCountAndSymmetry:
    def test_mixed_mutations(self) -> None:
        g = new_graph(5)
        ops = [
            ("ins", 0, 1, 3),
            ("ins", 1, 2, 4),
            ("ins", 2, 1, 9),
            ("rem", 3, 4, 0),
            ("ins", 3, 4, 1),
            ("rem", 0, 1, 0),
            ("ins", 4, 0, 2),
        ]
        for op, v, w, wt in ops:
            if op == "ins":
                insert_edge(g, v, w, wt)
            else:
                remove_edge(g, v, w)
            _assert_symmetric(g)

        pairs = sum(
            1 for v in range(5) for w in range(v + 1, 5) if edge_weight(g, v, w) != 0
        )
        assert g.n_edges == pairs == 3


class TestReadAccessors:
    def test_neighbours_ascending(self) -> None:
        g = new_graph(4)
        insert_edge(g, 2, 3, 1)
        insert_edge(g, 2, 0, 5)
        assert neighbours(g, 2) == [(0, 5), (3, 1)]
        assert neighbours(g, 1) == []

    def test_max_edge_weight(self, diamond: Graph) -> None:
        assert max_edge_weight(diamond) == 20


class TestDrop:
    def test_use_after_drop_is_violation(self) -> None:
        g = new_graph(2)
        insert_edge(g, 0, 1, 1)
        drop_graph(g)
        assert not valid_vertex(g, 0)
        with pytest.raises(ContractViolation):
            insert_edge(g, 0, 1, 1)
        with pytest.raises(ContractViolation):
            drop_graph(g)


class TestSelfLoop:
    def test_insert_and_remove_diagonal(self) -> None:
        g = new_graph(3)
        insert_edge(g, 0, 1, 2)
        insert_edge(g, 1, 1, 4)
        assert g.n_edges == 2
        assert edge_weight(g, 1, 1) == 4
        assert neighbours(g, 1) == [(0, 2), (1, 4)]
        assert "1 B\n\tA (2)\n\tB (4)\n" in format_graph(g, ["A", "B", "C"])

        insert_edge(g, 1, 1, 9)
        assert g.n_edges == 2
        assert edge_weight(g, 1, 1) == 4

        remove_edge(g, 1, 1)
        assert g.n_edges == 1
        assert neighbours(g, 1) == [(0, 2)]

    def test_search_terminates_with_loop(self) -> None:
        g = new_graph(3)
        insert_edge(g, 0, 0, 1)
        insert_edge(g, 0, 1, 1)
        assert find_path(g, 0, 2, 10).hops == 0
        assert find_path(g, 0, 1, 10).path == [0, 1]
