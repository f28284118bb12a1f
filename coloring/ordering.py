from __future__ import annotations
import random
from typing import List

from .graph_io import Graph


def degree_order(graph: Graph, rng: random.Random) -> List[int]:
    """
    Visiting order for the greedy colorer:
    - bucket vertices by degree (0..max_degree)
    - shuffle every bucket with rng
    - concatenate buckets in ascending degree, then reverse

    Vertices come out by descending degree; equal-degree vertices are in a
    random order that changes from call to call.
    """
    buckets: List[List[int]] = [[] for _ in range(graph.max_degree + 1)]
    for v, d in enumerate(graph.degrees):
        buckets[d].append(v)

    for bucket in buckets:
        rng.shuffle(bucket)

    order = [v for bucket in buckets for v in bucket]
    order.reverse()
    return order
