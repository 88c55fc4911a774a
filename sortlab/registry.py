"""
Algorithm Registry
==================
Name → algorithm lookup used by the benchmark harness and the tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, MutableSequence, Optional

from sortlab.algorithms.baseline import builtin_stable_sort, builtin_unstable_sort
from sortlab.algorithms.elementary import bubble_sort, gnome_sort, insertion_sort, selection_sort
from sortlab.algorithms.heap_sort import heap_sort
from sortlab.algorithms.merge_sort import merge_sort_bottom_up, merge_sort_top_down
from sortlab.algorithms.quick_sort import quick_sort, quick_sort_3way
from sortlab.algorithms.shell_sort import shell_sort
from sortlab.algorithms.sort_errors import UnknownAlgorithmError
from sortlab.metrics import SortMetrics


@dataclass(frozen=True)
class SortAlgorithm:
    name: str
    func: Callable[..., None]
    label: str
    stable: bool
    complexity: str
    baseline: bool = False

    def sort(
        self,
        seq: MutableSequence[Any],
        comparator: Any = None,
        metrics: Optional[SortMetrics] = None,
    ) -> None:
        """Sort ``seq`` in place. The only operation the harness needs."""
        self.func(seq, comparator, metrics=metrics)


ALGORITHMS: Dict[str, SortAlgorithm] = {
    a.name: a
    for a in [
        SortAlgorithm("gnome", gnome_sort, "Gnome sort", True, "O(n^2)"),
        SortAlgorithm("bubble", bubble_sort, "Bubble sort", True, "O(n^2)"),
        SortAlgorithm("selection", selection_sort, "Selection sort", False, "O(n^2)"),
        SortAlgorithm("insertion", insertion_sort, "Insertion sort", True, "O(n^2)"),
        SortAlgorithm("shell", shell_sort, "Shell sort", False, "O(n^2) (halving gaps)"),
        SortAlgorithm("heap", heap_sort, "Heap sort", False, "O(n log n)"),
        SortAlgorithm("quicksort-2way", quick_sort, "Quicksort (two-way)", False, "O(n log n) avg"),
        SortAlgorithm("quicksort-3way", quick_sort_3way, "Quicksort (three-way)", False, "O(n log n) avg"),
        SortAlgorithm("mergesort-topdown", merge_sort_top_down, "Merge sort (top-down)", True, "O(n log n)"),
        SortAlgorithm("mergesort-bottomup", merge_sort_bottom_up, "Merge sort (bottom-up)", True, "O(n log n)"),
        SortAlgorithm("baseline-stable", builtin_stable_sort, "Built-in stable sort", True,
                      "O(n log n)", baseline=True),
        SortAlgorithm("baseline-unstable", builtin_unstable_sort, "Built-in unstable sort", False,
                      "O(n log n)", baseline=True),
    ]
}


def get_algorithm(name: str) -> SortAlgorithm:
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise UnknownAlgorithmError(name, ALGORITHMS) from None


def algorithm_names(include_baselines: bool = True) -> List[str]:
    return [name for name, a in ALGORITHMS.items() if include_baselines or not a.baseline]


def stable_algorithms() -> List[SortAlgorithm]:
    """Algorithms whose stability is guaranteed (baselines excluded)."""
    return [a for a in ALGORITHMS.values() if a.stable and not a.baseline]
