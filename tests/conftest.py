import random
from itertools import combinations

import matplotlib
import pytest

from coloring.graph_io import build_graph

matplotlib.use("Agg")


def random_graph(rng: random.Random, n: int, p: float):
    edges = [(u, v) for u, v in combinations(range(1, n + 1), 2) if rng.random() < p]
    return build_graph(n, edges)


def write_col(path, n, edges, fmt="edge"):
    lines = ["c test instance", f"p {fmt} {n} {len(edges)}"]
    lines += [f"e {u} {v}" for u, v in edges]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


CYCLE4 = [(1, 2), (2, 3), (3, 4), (4, 1)]
K4 = list(combinations(range(1, 5), 2))


@pytest.fixture
def cycle4():
    return build_graph(4, CYCLE4)


@pytest.fixture
def k4():
    return build_graph(4, K4)
