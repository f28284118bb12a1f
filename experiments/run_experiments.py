from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

import matplotlib.pyplot as plt

from coloring.batch import list_instances, run_batch
from coloring.optimal import KNOWN_OPTIMAL, load_optimal_table
from coloring.restart_runner import RestartConfig
from coloring.results import make_rows, save_csv


def ensure_dirs(*dirs: str):
    for d in dirs:
        if d:
            os.makedirs(d, exist_ok=True)


def plot_history(path: str, y: List[float], xlabel: str, ylabel: str, title: str):
    plt.figure()
    plt.plot(y)
    plt.xlabel(xlabel)
    plt.ylabel(ylabel)
    plt.title(title)
    plt.savefig(path, dpi=200)
    plt.close()


def positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Randomized restart first-fit coloring over a directory of DIMACS graphs"
    )
    parser.add_argument("--input_dir", default="./input_files", help="Directory of graph files")
    parser.add_argument("--trials", type=positive_int, default=5000, help="Trials per graph")
    parser.add_argument("--output", default="greedy_with_vertex_degree_sort_and_randomize.csv",
                        help="Result CSV path")
    parser.add_argument("--optimal", default=None,
                        help="CSV with FILENAME,OPTIMAL_SOLUTION replacing the built-in table")
    parser.add_argument("--workers", type=positive_int, default=None, help="Worker processes (default: CPU count)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    parser.add_argument("--plots_dir", default="plots")
    parser.add_argument("--no_plots", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    optimal_table = load_optimal_table(args.optimal) if args.optimal else dict(KNOWN_OPTIMAL)
    paths = list_instances(args.input_dir)
    cfg = RestartConfig(trials=args.trials, seed=args.seed)

    print(f"[Runner] instances={len(paths)} trials={cfg.trials} workers={args.workers or os.cpu_count()} seed={cfg.seed}")

    results, errors = run_batch(paths, cfg, max_workers=args.workers)

    for name in sorted(errors):
        print(f"[{name}] SKIPPED: {errors[name]}", file=sys.stderr)

    rows = make_rows(results, optimal_table)
    for row in rows:
        print(
            f"[{row['FILENAME']}] colors={row['AMOUNT_COLORS']} optimal={row['OPTIMAL_SOLUTION']} "
            f"solved={row['SOLVED']} time={row['TIME']:.6f}s test={row['TEST']}"
        )

    ensure_dirs(os.path.dirname(args.output))
    save_csv(args.output, rows)
    print(f"Saved: {args.output}")

    if not args.no_plots:
        ensure_dirs(args.plots_dir)
        for name in sorted(results):
            res = results[name]
            tag = os.path.splitext(name)[0]
            out_png = os.path.join(args.plots_dir, f"{tag}_restart_colors.png")
            plot_history(
                out_png,
                res.best_colors_history,
                xlabel="Trial",
                ylabel="Best colors so far",
                title=f"{tag} restart first-fit | best colors={res.n_colors}",
            )
            print(f"Saved: {out_png}")

    print(f"[Runner] solved={len(results)} skipped={len(errors)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
