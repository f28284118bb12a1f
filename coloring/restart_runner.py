from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import List, Optional

from .graph_io import Graph
from .greedy import color_count, first_fit
from .ordering import degree_order
from .validate import TEST_PASS, ColoringError, is_partition, validate


@dataclass
class RestartConfig:
    trials: int = 5000
    seed: Optional[int] = None


@dataclass(frozen=True)
class TrialResult:
    classes: List[List[int]]
    n_colors: int
    elapsed: float  # seconds spent in first_fit
    test: str


@dataclass
class RestartResult:
    best: TrialResult
    best_colors_history: List[int]  # best color count after each trial
    trials_run: int

    @property
    def n_colors(self) -> int:
        return self.best.n_colors


def run_trial(graph: Graph, rng: random.Random) -> TrialResult:
    order = degree_order(graph, rng)

    t0 = time.perf_counter()
    classes = first_fit(order, graph)
    elapsed = time.perf_counter() - t0

    classes = [c for c in classes if c]
    test = validate(classes, graph)
    if test != TEST_PASS or not is_partition(classes, graph.n_vertices):
        raise ColoringError(
            f"first_fit produced an invalid coloring for a graph with {graph.n_vertices} vertices"
        )
    return TrialResult(classes=classes, n_colors=color_count(classes), elapsed=elapsed, test=test)


def run_restart(graph: Graph, cfg: RestartConfig, rng: Optional[random.Random] = None) -> RestartResult:
    """
    Restart search: cfg.trials independent randomized first-fit passes,
    keeping the trial with the fewest colors. A later trial only replaces the
    best when strictly better, so ties keep the earliest one.

    Trials run one after the other; the best-so-far update is not safe to
    share between threads.
    """
    if cfg.trials < 1:
        raise ValueError("trials must be >= 1")

    rnd = rng if rng is not None else random.Random(cfg.seed)

    best: Optional[TrialResult] = None
    hist: List[int] = []

    for _ in range(cfg.trials):
        trial = run_trial(graph, rnd)
        if best is None or trial.n_colors < best.n_colors:
            best = trial
        hist.append(best.n_colors)

    assert best is not None
    return RestartResult(best=best, best_colors_history=hist, trials_run=cfg.trials)
