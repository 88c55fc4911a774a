"""
Benchmark Chart Generator
=========================
Generates charts comparing the sorting algorithms.
Run:  python generate_benchmark_charts.py --quick
Output: benchmark_charts/ folder with 3 PNG files.
"""

import sys
import os
import argparse
import numpy as np
from typing import Dict, Any, List

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for file output
import matplotlib.pyplot as plt

from benchmark_sorts import DEFAULT_CATEGORIES, run_benchmark, tabulate
from sortlab.generators.sequences import equal_sequence, few_unique_sequence
from sortlab.metrics import SortMetrics
from sortlab.registry import algorithm_names, get_algorithm

# ─────────────────────────────────────────────────────────────
# Color Palette & Styling
# ─────────────────────────────────────────────────────────────
BG_COLOR = "#1A1B26"       # Tokyo Night background
CARD_COLOR = "#24283B"     # Card panels
TEXT_COLOR = "#C0CAF5"     # Soft lavender text
GRID_COLOR = "#414868"     # Subtle grid lines
TWO_WAY_COLOR = "#FF6B6B"
THREE_WAY_COLOR = "#51CF66"


def setup_style():
    """Apply a dark, presentation-friendly matplotlib style."""
    plt.rcParams.update({
        "figure.facecolor": BG_COLOR,
        "axes.facecolor": CARD_COLOR,
        "axes.edgecolor": GRID_COLOR,
        "axes.labelcolor": TEXT_COLOR,
        "axes.titleweight": "bold",
        "text.color": TEXT_COLOR,
        "xtick.color": TEXT_COLOR,
        "ytick.color": TEXT_COLOR,
        "grid.color": GRID_COLOR,
        "grid.alpha": 0.3,
        "font.size": 12,
        "axes.titlesize": 16,
        "legend.facecolor": CARD_COLOR,
        "legend.edgecolor": GRID_COLOR,
        "legend.fontsize": 9,
        "figure.dpi": 150,
        "savefig.dpi": 150,
        "savefig.bbox": "tight",
        "savefig.facecolor": BG_COLOR,
    })


def _finish(ax):
    ax.grid(axis="y", zorder=0)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)


# ─────────────────────────────────────────────────────────────
# Chart Generators
# ─────────────────────────────────────────────────────────────
def chart_1_throughput(results: Dict[str, Dict[str, Dict[str, Any]]], out_dir: str) -> str:
    """Grouped bars: elements/second per algorithm, one group per input category."""
    fig, ax = plt.subplots(figsize=(14, 6))
    names = list(results)
    categories = list(next(iter(results.values())))
    x = np.arange(len(categories))
    width = 0.8 / max(len(names), 1)
    cmap = plt.get_cmap("tab20")

    for i, name in enumerate(names):
        speeds = [results[name][cat]["elements_per_second"] for cat in categories]
        ax.bar(x + i * width, speeds, width, label=name, color=cmap(i % 20),
               edgecolor="none", alpha=0.9, zorder=3)

    ax.set_xticks(x + width * (len(names) - 1) / 2)
    ax.set_xticklabels([c.replace("_", "\n") for c in categories], fontsize=9)
    ax.set_yscale("log")
    ax.set_ylabel("Elements / second (log)")
    ax.set_title("Sorting Throughput by Input Category", pad=15)
    ax.legend(loc="upper left", bbox_to_anchor=(1.0, 1.0))
    _finish(ax)

    path = os.path.join(out_dir, "1_throughput.png")
    fig.savefig(path)
    plt.close(fig)
    print("  ✓ Chart 1: Throughput")
    return path


def chart_2_comparisons(results: Dict[str, Dict[str, Dict[str, Any]]], out_dir: str) -> str:
    """Bar chart: comparisons per element on random input (baselines excluded)."""
    fig, ax = plt.subplots(figsize=(10, 6))
    names = [n for n in results if not get_algorithm(n).baseline and "random" in results[n]]
    per_element = [results[n]["random"]["comparisons"] / results[n]["random"]["n"] for n in names]

    ax.bar(np.arange(len(names)), per_element, color=TWO_WAY_COLOR, alpha=0.9, zorder=3)
    ax.set_xticks(np.arange(len(names)))
    ax.set_xticklabels(names, rotation=35, ha="right", fontsize=9)
    ax.set_yscale("log")
    ax.set_ylabel("Comparisons per element (log)")
    ax.set_title("Comparison Cost on Random Input", pad=15)
    _finish(ax)

    path = os.path.join(out_dir, "2_comparisons.png")
    fig.savefig(path)
    plt.close(fig)
    print("  ✓ Chart 2: Comparisons")
    return path


def duplicate_scenario(sizes: List[int]) -> Dict[str, Dict[str, List[int]]]:
    """Comparison counts of both quicksorts on all-equal and few-unique inputs."""
    data: Dict[str, Dict[str, List[int]]] = {}
    for variant in ("quicksort-2way", "quicksort-3way"):
        algorithm = get_algorithm(variant)
        data[variant] = {"equal": [], "few_unique": []}
        for n in sizes:
            for label, make in (("equal", equal_sequence), ("few_unique", few_unique_sequence)):
                metrics = SortMetrics()
                seq = make(n)
                algorithm.sort(seq, metrics=metrics)
                data[variant][label].append(metrics.comparisons)
    return data


def chart_3_duplicates(sizes: List[int], out_dir: str) -> str:
    """Line chart: two-way vs three-way quicksort comparisons on duplicate-heavy input."""
    data = duplicate_scenario(sizes)
    fig, ax = plt.subplots(figsize=(10, 6))
    for variant, color in (("quicksort-2way", TWO_WAY_COLOR), ("quicksort-3way", THREE_WAY_COLOR)):
        ax.plot(sizes, data[variant]["equal"], "o-", color=color, linewidth=2.5,
                label=f"{variant} (all equal)", zorder=3)
        ax.plot(sizes, data[variant]["few_unique"], "s--", color=color, linewidth=1.5,
                label=f"{variant} (4 distinct)", zorder=3)

    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("n")
    ax.set_ylabel("Comparisons (log)")
    ax.set_title("Duplicate Keys: Two-way vs Three-way Quicksort", pad=15)
    ax.legend()
    _finish(ax)

    path = os.path.join(out_dir, "3_duplicates.png")
    fig.savefig(path)
    plt.close(fig)
    print("  ✓ Chart 3: Duplicate Keys")
    return path


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate Benchmark Charts")
    parser.add_argument("--time-limit-ms", type=int, default=200,
                        help="Time per measurement (default: 200)")
    parser.add_argument("--repetitions", type=int, default=10,
                        help="Sorts per measurement (default: 10)")
    parser.add_argument("--max-n", type=int, default=1 << 16,
                        help="Stop doubling at this size (default: 65536)")
    parser.add_argument("--quick", action="store_true",
                        help="Quick mode: fast algorithms only, small sizes")
    parser.add_argument("--out-dir", type=str, default=None,
                        help="Output folder (default: ./benchmark_charts)")
    args = parser.parse_args(argv)

    out_dir = args.out_dir or os.path.join(os.path.dirname(os.path.abspath(__file__)),
                                           "benchmark_charts")
    os.makedirs(out_dir, exist_ok=True)
    setup_style()

    if args.quick:
        names = ["shell", "heap", "quicksort-2way", "quicksort-3way",
                 "mergesort-topdown", "mergesort-bottomup", "baseline-stable"]
        max_n = min(args.max_n, 2048)
        sizes = [64, 128, 256, 512]
    else:
        names = algorithm_names()
        max_n = args.max_n
        sizes = [64, 128, 256, 512, 1024, 2048]

    print(f"  Algorithms     : {len(names)}")
    print(f"  Categories     : {len(DEFAULT_CATEGORIES)}")
    print(f"  Output folder  : {out_dir}")
    print()

    print("Phase 1/2: Running Benchmarks...")
    results = run_benchmark(names, DEFAULT_CATEGORIES, args.time_limit_ms,
                            args.repetitions, max_n=max_n)

    print("\nPhase 2/2: Generating Charts...")
    paths = [
        chart_1_throughput(results, out_dir),
        chart_2_comparisons(results, out_dir),
        chart_3_duplicates(sizes, out_dir),
    ]

    print()
    print(tabulate(results))
    print(f"\nAll {len(paths)} charts saved to: {out_dir}")
    return paths


if __name__ == "__main__":
    main()
