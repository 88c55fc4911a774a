"""
Quicksort
=========
Two-way (Lomuto) and three-way (Dijkstra, equal-grouping) quicksort.

Pivot policy
------------
Deterministic median-of-three over ``lo``, ``lo + (hi - lo) // 2`` and
``hi - 1``; ranges shorter than three elements use the last element.
Sorted and reverse-sorted inputs therefore split evenly. Crafted
"median-of-three killer" inputs can still force O(n^2) comparisons.

Recursion bound
---------------
After each partition the driver recurses into the smaller side and loops
on the larger one. The recursed side holds at most half of the range, so
native recursion depth stays below log2(n) + 1 for every input, including
adversarial ones.

Duplicates
----------
Two-way partitioning sends keys equal to the pivot to the right side, so an
all-equal input peels one element per pass: n - 1 passes and Theta(n^2)
comparisons. The three-way variant gathers the whole equal band in one pass
and never recurses into it: an all-equal input costs one pass.
"""

from __future__ import annotations

from typing import Any, MutableSequence, Optional, Tuple

from sortlab.algorithms.base import insertion_pass, prepare, swap
from sortlab.algorithms.sort_errors import (
    DEFAULT_QUICKSORT_CUTOFF,
    QUICKSORT_CUTOFF_ENV,
    debug_enabled,
    resolve_int_setting,
)
from sortlab.comparator import Comparator, Ordering
from sortlab.metrics import SortMetrics

DEBUG_MODE = debug_enabled()


def choose_pivot(seq: MutableSequence[Any], lo: int, hi: int, cmp: Comparator) -> int:
    """Index of the median of the first, middle and last elements of ``[lo, hi)``."""
    last = hi - 1
    if hi - lo < 3:
        return last

    mid = lo + (hi - lo) // 2
    a, b, c = seq[lo], seq[mid], seq[last]
    if cmp.less(a, b):
        if cmp.less(b, c):
            return mid
        return last if cmp.less(a, c) else lo
    if cmp.less(a, c):
        return lo
    return last if cmp.less(b, c) else mid


def partition_two_way(
    seq: MutableSequence[Any],
    lo: int,
    hi: int,
    cmp: Comparator,
    metrics: SortMetrics,
) -> int:
    """
    Lomuto partition of ``[lo, hi)`` (non-empty) around the chosen pivot.

    Returns ``p`` such that ``[lo, p)`` < pivot, ``seq[p]`` is the pivot and
    ``(p, hi)`` >= pivot.
    """
    last = hi - 1
    p = choose_pivot(seq, lo, hi, cmp)
    if p != last:
        swap(seq, p, last, metrics)
    pivot = seq[last]

    store = lo
    for j in range(lo, last):
        if cmp.less(seq[j], pivot):
            if j != store:
                swap(seq, store, j, metrics)
            store += 1
    if store != last:
        swap(seq, store, last, metrics)

    metrics.partitions += 1
    return store


def partition_three_way(
    seq: MutableSequence[Any],
    lo: int,
    hi: int,
    cmp: Comparator,
    metrics: SortMetrics,
) -> Tuple[int, int]:
    """
    Dutch-flag partition of ``[lo, hi)`` (non-empty) around the chosen pivot.

    Returns ``(lt, gt)``: ``[lo, lt)`` < pivot, ``[lt, gt)`` == pivot and
    ``[gt, hi)`` > pivot. The equal band always holds the pivot itself.
    """
    p = choose_pivot(seq, lo, hi, cmp)
    if p != lo:
        swap(seq, p, lo, metrics)
    pivot = seq[lo]

    # [lo, lt) less, [lt, i) equal, [i, gt] unexamined, (gt, hi) greater
    lt, i, gt = lo, lo + 1, hi - 1
    while i <= gt:
        order = cmp.compare(seq[i], pivot)
        if order is Ordering.LESS:
            swap(seq, lt, i, metrics)
            lt += 1
            i += 1
        elif order is Ordering.GREATER:
            if i != gt:
                swap(seq, i, gt, metrics)
            gt -= 1
        else:
            i += 1

    metrics.partitions += 1
    return lt, gt + 1


def _sort_range(
    seq: MutableSequence[Any],
    lo: int,
    hi: int,
    cmp: Comparator,
    metrics: SortMetrics,
    cutoff: int,
    three_way: bool,
    depth: int,
) -> None:
    metrics.record_depth(depth)
    while hi - lo > max(cutoff, 1):
        if three_way:
            left_hi, right_lo = partition_three_way(seq, lo, hi, cmp, metrics)
        else:
            p = partition_two_way(seq, lo, hi, cmp, metrics)
            left_hi, right_lo = p, p + 1

        if DEBUG_MODE:
            print(f"[QS DEBUG] depth={depth} range=[{lo}, {hi}) "
                  f"left={left_hi - lo} equal={right_lo - left_hi} right={hi - right_lo}")

        if left_hi - lo < hi - right_lo:
            if left_hi - lo > 1:
                _sort_range(seq, lo, left_hi, cmp, metrics, cutoff, three_way, depth + 1)
            lo = right_lo
        else:
            if hi - right_lo > 1:
                _sort_range(seq, right_lo, hi, cmp, metrics, cutoff, three_way, depth + 1)
            hi = left_hi

    if cutoff and hi - lo > 1:
        insertion_pass(seq, lo, hi, cmp, metrics)


def quick_sort(
    seq: MutableSequence[Any],
    comparator: Any = None,
    *,
    cutoff: Optional[int] = None,
    lo: int = 0,
    hi: Optional[int] = None,
    metrics: Optional[SortMetrics] = None,
) -> None:
    """
    Two-way quicksort of ``seq[lo:hi]`` in place. Not stable.

    ``cutoff`` (or SORTLAB_QUICKSORT_CUTOFF) hands ranges of at most that
    many elements to insertion sort; 0 partitions down to single elements.
    """
    cmp, stats, lo, hi = prepare(seq, comparator, lo, hi, metrics)
    cutoff = resolve_int_setting(cutoff, QUICKSORT_CUTOFF_ENV, DEFAULT_QUICKSORT_CUTOFF)
    _sort_range(seq, lo, hi, cmp, stats, cutoff, False, 0)


def quick_sort_3way(
    seq: MutableSequence[Any],
    comparator: Any = None,
    *,
    cutoff: Optional[int] = None,
    lo: int = 0,
    hi: Optional[int] = None,
    metrics: Optional[SortMetrics] = None,
) -> None:
    """
    Three-way quicksort of ``seq[lo:hi]`` in place. Not stable.

    Keys equal to the pivot are grouped and excluded from further
    partitioning, which keeps duplicate-heavy inputs near O(n log k) for k
    distinct keys.
    """
    cmp, stats, lo, hi = prepare(seq, comparator, lo, hi, metrics)
    cutoff = resolve_int_setting(cutoff, QUICKSORT_CUTOFF_ENV, DEFAULT_QUICKSORT_CUTOFF)
    _sort_range(seq, lo, hi, cmp, stats, cutoff, True, 0)
