"""
Shared entry-point plumbing for the sort implementations.
"""

from __future__ import annotations

from typing import Any, MutableSequence, Optional, Tuple

from sortlab.algorithms.sort_errors import check_range
from sortlab.comparator import Comparator, CountingComparator, resolve_comparator
from sortlab.metrics import SortMetrics


def prepare(
    seq: MutableSequence[Any],
    comparator: Any,
    lo: int,
    hi: Optional[int],
    metrics: Optional[SortMetrics],
) -> Tuple[Comparator, SortMetrics, int, int]:
    """
    Validate the range and resolve comparator/metrics for one sort call.

    When ``metrics`` is None the counters land in a throwaway instance, so
    the algorithms can tally unconditionally.
    """
    lo, hi = check_range(seq, lo, hi)
    cmp = resolve_comparator(comparator)
    if metrics is None:
        return cmp, SortMetrics(), lo, hi
    return CountingComparator(cmp, metrics), metrics, lo, hi


def swap(seq: MutableSequence[Any], i: int, j: int, metrics: SortMetrics) -> None:
    seq[i], seq[j] = seq[j], seq[i]
    metrics.swaps += 1


def insertion_pass(
    seq: MutableSequence[Any],
    lo: int,
    hi: int,
    cmp: Comparator,
    metrics: SortMetrics,
    gap: int = 1,
) -> None:
    """
    Gapped insertion sort over ``[lo, hi)``.

    Each element is lifted out and the strictly greater predecessors ``gap``
    apart shift right past it. With ``gap == 1`` this is plain, stable
    insertion sort.
    """
    for i in range(lo + gap, hi):
        current = seq[i]
        j = i
        while j - gap >= lo and cmp.less(current, seq[j - gap]):
            seq[j] = seq[j - gap]
            metrics.writes += 1
            j -= gap
        if j != i:
            seq[j] = current
            metrics.writes += 1
