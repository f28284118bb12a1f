from __future__ import annotations
from typing import List

from .graph_io import Graph

TEST_PASS = "PASS"
TEST_FAIL = "FAIL"


class ColoringError(RuntimeError):
    """An invalid coloring came out of the colorer: a bug, not bad input."""


def validate(classes: List[List[int]], graph: Graph) -> str:
    """PASS unless some class holds two adjacent vertices."""
    for cls in classes:
        for i, u in enumerate(cls):
            for v in cls[i + 1:]:
                if graph.has_edge(u, v):
                    return TEST_FAIL
    return TEST_PASS


def is_partition(classes: List[List[int]], n_vertices: int) -> bool:
    seen = [False] * n_vertices
    for cls in classes:
        for v in cls:
            if not 0 <= v < n_vertices or seen[v]:
                return False
            seen[v] = True
    return all(seen)
