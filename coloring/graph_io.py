from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple

# Largest vertex count read_col accepts; adjacency needs one int per vertex.
MAX_VERTICES = 10_000_000


@dataclass(frozen=True)
class Graph:
    """
    Graph stored in 0-based indexing.
    edges: undirected edges (u, v) with u < v, no duplicates
    adjacency: one int bit mask per vertex, bit u of adjacency[v] is set iff u ~ v
    degrees: degrees[v] == number of set bits in adjacency[v]
    """
    n_vertices: int
    edges: List[Tuple[int, int]]
    adjacency: Tuple[int, ...]
    degrees: Tuple[int, ...]

    def has_edge(self, u: int, v: int) -> bool:
        return (self.adjacency[u] >> v) & 1 == 1

    def degree(self, v: int) -> int:
        return self.degrees[v]

    @property
    def max_degree(self) -> int:
        return max(self.degrees)


def build_graph(n_vertices: int, edges: Iterable[Tuple[int, int]]) -> Graph:
    """
    Build a Graph from 1-based edge pairs.

    Every edge sets v in neighbors(u) and u in neighbors(v), so the adjacency
    is symmetric. Repeated edges are harmless. Self-loops are rejected: a
    vertex adjacent to itself cannot be colored.
    """
    if n_vertices <= 0:
        raise ValueError(f"n_vertices must be > 0, got {n_vertices}")

    adjacency = [0] * n_vertices
    normalized = set()
    for a, b in edges:
        if not (1 <= a <= n_vertices and 1 <= b <= n_vertices):
            raise ValueError(f"Edge ({a}, {b}) out of range for {n_vertices} vertices")
        if a == b:
            raise ValueError(f"Self-loop on vertex {a}")
        u, v = a - 1, b - 1
        adjacency[u] |= 1 << v
        adjacency[v] |= 1 << u
        normalized.add((u, v) if u < v else (v, u))

    degrees = tuple(mask.bit_count() for mask in adjacency)
    return Graph(
        n_vertices=n_vertices,
        edges=sorted(normalized),
        adjacency=tuple(adjacency),
        degrees=degrees,
    )


def _parse_int(token: str, path: str, lineno: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"{path}:{lineno}: expected an integer, got {token!r}") from None


def read_col(path: str) -> Graph:
    """
    Read a DIMACS .col graph coloring instance.

    Typical format:
      c comment lines
      p edge <n_vertices> <n_edges>
      e u v     (1-based vertex ids)

    The declared edge count is informational only. Self-loop lines are
    skipped.
    """
    n_vertices = None
    edges: List[Tuple[int, int]] = []

    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line or line.startswith("c"):
                continue

            parts = line.split()
            if parts[0] == "p":
                if n_vertices is not None:
                    raise ValueError(f"{path}:{lineno}: duplicate 'p' line")
                # p edge n m, p col n m, or a bare p n m
                counts = parts[1:] if len(parts) > 1 and parts[1].lstrip("+-").isdigit() else parts[2:]
                if len(counts) != 2:
                    raise ValueError(f"{path}:{lineno}: malformed 'p' line: {line!r}")
                n_vertices = _parse_int(counts[0], path, lineno)
                if not 0 < n_vertices <= MAX_VERTICES:
                    raise ValueError(
                        f"{path}:{lineno}: vertex count {n_vertices} outside 1..{MAX_VERTICES}"
                    )
                _parse_int(counts[1], path, lineno)
            elif parts[0] == "e":
                if len(parts) < 3:
                    raise ValueError(f"{path}:{lineno}: malformed 'e' line: {line!r}")
                u = _parse_int(parts[1], path, lineno)
                v = _parse_int(parts[2], path, lineno)
                if u == v:
                    continue
                edges.append((u, v))

    if n_vertices is None:
        raise ValueError(f"Could not parse 'p edge n m' line in file: {path}")

    try:
        return build_graph(n_vertices, edges)
    except ValueError as exc:
        raise ValueError(f"{path}: {exc}") from None
