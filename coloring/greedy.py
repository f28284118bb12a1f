from __future__ import annotations
from typing import List, Sequence

from .graph_io import Graph


def first_fit(order: Sequence[int], graph: Graph) -> List[List[int]]:
    """
    First-fit (sequential) coloring.

    Each vertex goes into the first class holding none of its neighbors; a new
    class is opened only when every existing class conflicts. No look-ahead,
    no recoloring. The same order always gives the same classes.
    """
    classes: List[List[int]] = [[]]
    masks: List[int] = [0]  # masks[i] has bit v set iff v in classes[i]

    for v in order:
        nbrs = graph.adjacency[v]
        for i, mask in enumerate(masks):
            if not mask & nbrs:
                classes[i].append(v)
                masks[i] = mask | (1 << v)
                break
        else:
            classes.append([v])
            masks.append(1 << v)

    return classes


def color_count(classes: List[List[int]]) -> int:
    return sum(1 for c in classes if c)


def flatten(classes: List[List[int]]) -> List[int]:
    return [v for c in classes for v in c]
