from __future__ import annotations

import concurrent.futures
import os
import random
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence, Tuple

from .graph_io import read_col
from .restart_runner import RestartConfig, RestartResult, run_restart


@dataclass(frozen=True)
class GraphOutcome:
    name: str
    result: Optional[RestartResult]
    error: Optional[str] = None


def list_instances(input_dir: str) -> List[str]:
    """Every regular file in input_dir, sorted by name."""
    if not os.path.exists(input_dir):
        raise FileNotFoundError(f"Input directory not found: {input_dir}")
    if not os.path.isdir(input_dir):
        raise NotADirectoryError(f"Not a directory: {input_dir}")

    paths = [os.path.join(input_dir, name) for name in sorted(os.listdir(input_dir))]
    return [p for p in paths if os.path.isfile(p)]


def graph_seed(seed: Optional[int], name: str) -> Optional[int]:
    """Per-graph seed derived from the run seed and the file name."""
    if seed is None:
        return None
    return random.Random(f"{seed}:{name}").getrandbits(63)


def solve_file(path: str, cfg: RestartConfig) -> GraphOutcome:
    """
    Read one instance and run its restart search.
    Unreadable or malformed files come back as an error outcome; a
    ColoringError is a bug and propagates.
    """
    name = os.path.basename(path)
    try:
        graph = read_col(path)
    except (OSError, ValueError) as exc:
        return GraphOutcome(name=name, result=None, error=f"{type(exc).__name__}: {exc}")

    local_cfg = replace(cfg, seed=graph_seed(cfg.seed, name))
    return GraphOutcome(name=name, result=run_restart(graph, local_cfg))


def run_batch(
    paths: Sequence[str],
    cfg: RestartConfig,
    max_workers: Optional[int] = None,
) -> Tuple[Dict[str, RestartResult], Dict[str, str]]:
    """
    One task per graph, executed by a process pool (in-process when
    max_workers == 1). Each task returns its own outcome; results are merged
    only after all tasks have finished.

    Returns (results by file name, error message by file name).
    """
    if max_workers is not None and max_workers < 1:
        raise ValueError("max_workers must be >= 1")

    if max_workers == 1:
        outcomes = [solve_file(p, cfg) for p in paths]
    else:
        with concurrent.futures.ProcessPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(solve_file, p, cfg) for p in paths]
            outcomes = [f.result() for f in futures]

    results: Dict[str, RestartResult] = {}
    errors: Dict[str, str] = {}
    for out in outcomes:
        if out.error is not None:
            errors[out.name] = out.error
        else:
            assert out.result is not None
            results[out.name] = out.result
    return results, errors
