"""
Elementary Exchange Sorts
=========================
Gnome, bubble, selection and insertion sort.

All four sort ``seq[lo:hi]`` in place with O(1) extra memory and O(n^2)
worst-case comparisons. Gnome, bubble and insertion sort are stable;
selection sort is not.
"""

from __future__ import annotations

from typing import Any, MutableSequence, Optional

from sortlab.algorithms.base import insertion_pass, prepare, swap
from sortlab.metrics import SortMetrics


def gnome_sort(
    seq: MutableSequence[Any],
    comparator: Any = None,
    *,
    lo: int = 0,
    hi: Optional[int] = None,
    metrics: Optional[SortMetrics] = None,
) -> None:
    """
    Insertion sort without an inner loop: a single cursor walks forward and
    steps back one slot after every swap. O(n) on already sorted input.
    """
    cmp, stats, lo, hi = prepare(seq, comparator, lo, hi, metrics)
    i = lo
    while i < hi:
        if i == lo or cmp.less_equal(seq[i - 1], seq[i]):
            i += 1
        else:
            swap(seq, i, i - 1, stats)
            i -= 1


def bubble_sort(
    seq: MutableSequence[Any],
    comparator: Any = None,
    *,
    lo: int = 0,
    hi: Optional[int] = None,
    metrics: Optional[SortMetrics] = None,
) -> None:
    """
    Repeated left-to-right passes swapping adjacent out-of-order pairs.

    The position of the last swap bounds the unsorted region, so the next
    pass stops there; a pass without swaps ends the sort.
    """
    cmp, stats, lo, hi = prepare(seq, comparator, lo, hi, metrics)
    end = hi
    while end > lo + 1:
        last_swap = lo
        for i in range(lo + 1, end):
            if cmp.greater(seq[i - 1], seq[i]):
                swap(seq, i - 1, i, stats)
                last_swap = i
        end = last_swap


def selection_sort(
    seq: MutableSequence[Any],
    comparator: Any = None,
    *,
    lo: int = 0,
    hi: Optional[int] = None,
    metrics: Optional[SortMetrics] = None,
) -> None:
    """Grow the sorted prefix by swapping in the minimum of the remainder."""
    cmp, stats, lo, hi = prepare(seq, comparator, lo, hi, metrics)
    for i in range(lo, hi - 1):
        smallest = i
        for j in range(i + 1, hi):
            if cmp.less(seq[j], seq[smallest]):
                smallest = j
        if smallest != i:
            swap(seq, i, smallest, stats)


def insertion_sort(
    seq: MutableSequence[Any],
    comparator: Any = None,
    *,
    lo: int = 0,
    hi: Optional[int] = None,
    metrics: Optional[SortMetrics] = None,
) -> None:
    """
    Insert each element into the sorted prefix on its left, shifting only
    strictly greater predecessors. Stable.
    """
    cmp, stats, lo, hi = prepare(seq, comparator, lo, hi, metrics)
    insertion_pass(seq, lo, hi, cmp, stats)
