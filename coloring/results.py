from __future__ import annotations
import csv
from typing import Any, Dict, List, Mapping

from .greedy import flatten
from .optimal import is_solved, lookup_optimal
from .restart_runner import RestartResult

FIELDNAMES = ["FILENAME", "AMOUNT_COLORS", "TIME", "GROUPS", "TEST", "OPTIMAL_SOLUTION", "SOLVED"]
UNKNOWN_OPTIMAL = "unknown"


def make_row(name: str, result: RestartResult, optimal_table: Mapping[str, int]) -> Dict[str, Any]:
    optimal = lookup_optimal(optimal_table, name)
    groups = flatten(result.best.classes)
    return {
        "FILENAME": name,
        "AMOUNT_COLORS": result.n_colors,
        "TIME": result.best.elapsed,
        "GROUPS": "[" + ", ".join(str(v) for v in groups) + "]",
        "TEST": result.best.test,
        "OPTIMAL_SOLUTION": optimal if optimal is not None else UNKNOWN_OPTIMAL,
        "SOLVED": "true" if is_solved(result.n_colors, optimal) else "false",
    }


def make_rows(results: Mapping[str, RestartResult], optimal_table: Mapping[str, int]) -> List[Dict[str, Any]]:
    return [make_row(name, results[name], optimal_table) for name in sorted(results)]


def save_csv(path: str, rows: List[Dict[str, Any]]):
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDNAMES)
        w.writeheader()
        w.writerows(rows)
