import sys
import os
import time
import csv
import argparse
from typing import Dict, Any, List, Optional

import numpy as np

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from sortlab.algorithms.sort_errors import (
    BENCH_REPETITIONS_ENV,
    BENCH_TIME_LIMIT_ENV,
    DEFAULT_BENCH_REPETITIONS,
    DEFAULT_BENCH_TIME_LIMIT_MS,
    resolve_int_setting,
)
from sortlab.generators.sequences import SEQUENCE_GENERATORS, generate
from sortlab.metrics import SortMetrics
from sortlab.registry import ALGORITHMS, SortAlgorithm, get_algorithm
from sortlab.validators import assert_sorted

DEFAULT_CATEGORIES = [
    "random",
    "increasing",
    "decreasing",
    "equal",
    "last_out_of_order",
    "first_out_of_order",
]


def measure_throughput(
    algorithm: SortAlgorithm,
    category: str,
    time_limit_ms: int,
    repetitions: int,
    start_n: int = 128,
    max_n: Optional[int] = None,
    seed: Optional[int] = 0,
) -> Dict[str, Any]:
    """
    Double n from ``start_n`` until ``repetitions`` sorts of fresh inputs
    take at least ``time_limit_ms`` (or n reaches ``max_n``).

    Every output is validated; a wrong result raises AssertionError.
    """
    n = start_n
    while True:
        metrics = SortMetrics()
        elapsed = 0.0
        for rep in range(repetitions):
            data = generate(category, n, seed=None if seed is None else seed + rep)
            started = time.perf_counter()
            # the numpy path of baseline-unstable only runs with metrics=None
            algorithm.sort(data, metrics=None if algorithm.baseline else metrics)
            elapsed += time.perf_counter() - started
            assert_sorted(data)
        metrics.elapsed = elapsed

        reached_limit = elapsed * 1000 >= time_limit_ms
        if reached_limit or (max_n is not None and n >= max_n):
            return {
                "algorithm": algorithm.name,
                "category": category,
                "n": n,
                "repetitions": repetitions,
                "elapsed": elapsed,
                "elements_per_second": (n * repetitions / elapsed) if elapsed > 0 else float("inf"),
                "comparisons": metrics.comparisons / repetitions,
                "swaps": metrics.swaps / repetitions,
                "reached_limit": reached_limit,
            }
        n *= 2


def run_benchmark(
    names: List[str],
    categories: List[str],
    time_limit_ms: int,
    repetitions: int,
    max_n: Optional[int] = None,
    quiet: bool = False,
) -> Dict[str, Dict[str, Dict[str, Any]]]:
    """Results grouped as ``results[algorithm][category]``."""
    results: Dict[str, Dict[str, Dict[str, Any]]] = {}
    name_width = max(len(n) for n in names)
    cat_width = max(len(c) for c in categories)

    for name in names:
        algorithm = get_algorithm(name)
        results[name] = {}
        for category in categories:
            res = measure_throughput(algorithm, category, time_limit_ms, repetitions, max_n=max_n)
            results[name][category] = res
            if not quiet:
                print(f"testing {name:<{name_width}} with {category:<{cat_width}} : "
                      f"{res['n']:12} in {res['elapsed'] * 1000:5.0f} ms = "
                      f"{res['elements_per_second']:>15.2f} elements/s")
    return results


def tabulate(results: Dict[str, Dict[str, Dict[str, Any]]]) -> str:
    """Render an algorithm x category table of elements/second."""
    sort_names = list(results)
    categories: List[str] = []
    for per_cat in results.values():
        for cat in per_cat:
            if cat not in categories:
                categories.append(cat)

    name_width = max((len(s) for s in sort_names), default=0)
    col_width = max([len(c) for c in categories] + [15])

    lines = [f"{'':>{name_width}} |" + "".join(f" {c:>{col_width}} |" for c in categories)]
    lines.append("-" * len(lines[0]))
    for name in sort_names:
        row = f"{name:<{name_width}} |"
        for cat in categories:
            res = results[name].get(cat)
            cell = f"{res['elements_per_second']:.2f}" if res else "-"
            row += f" {cell:>{col_width}} |"
        lines.append(row)
    return "\n".join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark sorting algorithms")
    parser.add_argument("--algorithms", nargs="+", default=list(ALGORITHMS),
                        help="Algorithms to run (default: all)")
    parser.add_argument("--categories", nargs="+", default=DEFAULT_CATEGORIES,
                        choices=list(SEQUENCE_GENERATORS), help="Input categories")
    parser.add_argument("--time-limit-ms", type=int, default=None,
                        help=f"Time per measurement (env {BENCH_TIME_LIMIT_ENV})")
    parser.add_argument("--repetitions", type=int, default=None,
                        help=f"Sorts per measurement (env {BENCH_REPETITIONS_ENV})")
    parser.add_argument("--max-n", type=int, default=None, help="Stop doubling at this size")
    parser.add_argument("--output", type=str, default=None, help="Output CSV file")

    args = parser.parse_args(argv)
    time_limit_ms = resolve_int_setting(args.time_limit_ms, BENCH_TIME_LIMIT_ENV,
                                        DEFAULT_BENCH_TIME_LIMIT_MS, minimum=1)
    repetitions = resolve_int_setting(args.repetitions, BENCH_REPETITIONS_ENV,
                                      DEFAULT_BENCH_REPETITIONS, minimum=1)

    print(f"Starting Benchmark: {len(args.algorithms)} algorithms, "
          f"{len(args.categories)} categories, {repetitions} reps, {time_limit_ms} ms limit")

    results = run_benchmark(args.algorithms, args.categories, time_limit_ms, repetitions, args.max_n)

    print("\nBenchmark Complete!\n")
    print(tabulate(results))

    if args.output:
        rows = [res for per_cat in results.values() for res in per_cat.values()]
        with open(args.output, "w", newline="") as f:
            dict_writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            dict_writer.writeheader()
            dict_writer.writerows(rows)
        print(f"\nResults saved to {args.output}")

    # Print Summary Table
    print("\nSummary Statistics:")
    print(f"{'Algorithm':<20} | {'Median elem/s':>15} | {'Avg comparisons':>16}")
    print("-" * 58)
    for name, per_cat in results.items():
        speeds = [r["elements_per_second"] for r in per_cat.values()]
        comps = [r["comparisons"] for r in per_cat.values()]
        print(f"{name:<20} | {np.median(speeds):>15.2f} | {np.mean(comps):>16.1f}")

    return results


if __name__ == "__main__":
    main()
