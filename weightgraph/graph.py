"""Graph engine — adjacency-matrix store and weight-capped BFS path finder."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from weightgraph.logger import logger


class ContractViolation(ValueError):
    """A caller broke the preconditions of a graph operation."""


@dataclass
class Graph:
    """Undirected weighted graph over vertices ``0 .. n_vertices - 1``.

    Weights live in a flat ``n * n`` list addressed ``row * n + col``.
    A weight of 0 means "no edge". The matrix is kept symmetric by
    ``insert_edge`` and ``remove_edge``, the only mutators.
    """

    n_vertices: int
    n_edges: int = field(default=0, init=False)
    weights: list[int] | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        n = self.n_vertices
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ContractViolation(f"vertex count must be a positive int, got {n!r}")
        self.weights = [0] * (n * n)


@dataclass
class PathResult:
    path: list[int] = field(default_factory=list)
    hops: int = 0


def new_graph(n_vertices: int) -> Graph:
    """Create a graph with *n_vertices* vertices and no edges."""
    return Graph(n_vertices)


def drop_graph(g: Graph) -> None:
    """Release the matrix owned by *g*. Any later use of *g* is a violation."""
    _require_graph(g)
    g.weights = None
    g.n_edges = 0


def valid_vertex(g: Graph | None, v: object) -> bool:
    if g is None or g.weights is None:
        return False
    if isinstance(v, bool) or not isinstance(v, int):
        return False
    return 0 <= v < g.n_vertices


def insert_edge(g: Graph, v: int, w: int, weight: int) -> None:
    """Add edge v-w with *weight*.

    An existing edge is left untouched, even if *weight* differs:
    the first weight written wins.
    """
    m = _require_vertices(g, v, w)
    if isinstance(weight, bool) or not isinstance(weight, int) or weight < 1:
        raise ContractViolation(f"edge weight must be a positive int, got {weight!r}")

    n = g.n_vertices
    if m[v * n + w] != 0 and m[w * n + v] != 0:
        logger.debug("Edge %d-%d already present, insert ignored", v, w)
        return

    m[v * n + w] = weight
    m[w * n + v] = weight
    g.n_edges += 1


def remove_edge(g: Graph, v: int, w: int) -> None:
    """Remove edge v-w if present."""
    m = _require_vertices(g, v, w)

    n = g.n_vertices
    if m[v * n + w] == 0 and m[w * n + v] == 0:
        logger.debug("Edge %d-%d absent, remove ignored", v, w)
        return

    m[v * n + w] = 0
    m[w * n + v] = 0
    g.n_edges -= 1


def edge_weight(g: Graph, v: int, w: int) -> int:
    """Weight of edge v-w, or 0 when there is none."""
    m = _require_vertices(g, v, w)
    return m[v * g.n_vertices + w]


def neighbours(g: Graph, v: int) -> list[tuple[int, int]]:
    """(vertex, weight) pairs adjacent to *v*, in ascending vertex order."""
    m = _require_vertices(g, v)
    n = g.n_vertices
    row = m[v * n : (v + 1) * n]
    return [(w, wt) for w, wt in enumerate(row) if wt != 0]


def max_edge_weight(g: Graph) -> int:
    """Largest stored weight, 0 for an edgeless graph."""
    return max(_require_graph(g))


def find_path(
    g: Graph,
    src: int,
    dest: int,
    max_weight: int,
    path_out: list[int] | None = None,
) -> PathResult:
    """Fewest-hop path from *src* to *dest* using only edges lighter than *max_weight*.

    Neighbours are explored in ascending index order, which fixes the path
    returned when several shortest ones exist. The destination is recognised
    when it is dequeued, not when it is first discovered.

    When *path_out* is given the path is also written into its leading slots;
    it must hold at least ``n_vertices`` entries. On a miss the result has
    ``hops == 0`` and *path_out* is left as it was.
    """
    m = _require_vertices(g, src, dest)
    n = g.n_vertices
    if path_out is not None and len(path_out) < n:
        raise ContractViolation(
            f"path buffer holds {len(path_out)} entries, need at least {n}"
        )

    if src == dest:
        return _emit([src], path_out)

    # None means no parent assigned yet; doubles as the visited set.
    parents: list[int | None] = [None] * n
    parents[src] = src
    queue: deque[int] = deque([src])
    found = False

    while queue:
        curr = queue.popleft()
        if curr == dest:
            found = True
            break
        base = curr * n
        for child in range(n):
            wt = m[base + child]
            if wt != 0 and wt < max_weight and parents[child] is None:
                parents[child] = curr
                queue.append(child)

    if not found:
        logger.debug("No path %d -> %d under weight %d", src, dest, max_weight)
        return PathResult()

    result = _emit(_reconstruct(parents, src, dest), path_out)
    logger.debug("Path %d -> %d found, %d hops", src, dest, result.hops)
    return result


def _reconstruct(parents: list[int | None], src: int, dest: int) -> list[int]:
    path: list[int] = [dest]
    current = dest
    while current != src:
        parent = parents[current]
        if parent is None:
            raise ContractViolation(f"parent chain from {dest} does not reach {src}")
        current = parent
        path.append(current)
    path.reverse()
    return path


def _emit(path: list[int], path_out: list[int] | None) -> PathResult:
    if path_out is not None:
        path_out[: len(path)] = path
    return PathResult(path=path, hops=len(path))


def _require_graph(g: Graph | None) -> list[int]:
    """Matrix of *g*, or ContractViolation for a missing or dropped graph."""
    if g is None:
        raise ContractViolation("graph is None")
    if g.weights is None:
        raise ContractViolation("graph has been dropped")
    return g.weights


def _require_vertices(g: Graph, *vertices: int) -> list[int]:
    m = _require_graph(g)
    n = g.n_vertices
    for v in vertices:
        if not valid_vertex(g, v):
            raise ContractViolation(f"vertex {v!r} out of range for graph of {n} vertices")
    return m
